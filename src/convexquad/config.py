"""
Configuration & Global Constants
================================
This module serves as the central registry for numeric tolerances and
output constants.

Why is this file needed?
------------------------
1. Consistency: every tolerance comparison (duplicate vertices, collinear
   turns, degenerate area) reads the same EPSILON, so the rejection
   boundaries of the individual checks never drift apart.
2. Defaults: the ordering strategy used when the caller does not pick one
   lives here instead of being repeated across the CLI and the model.

Exports:
    EPSILON (float): Absolute tolerance for "zero" and "equal" comparisons.
    DEFAULT_STRATEGY (str): Name of the default vertex ordering strategy.
    PERIMETER_DECIMALS (int): Decimal places used when printing perimeters.
    VERTEX_LABELS (tuple[str, ...]): Names of the four vertices in reports.
"""

EPSILON: float = 1e-9

# Value of convexquad.model.ordering.OrderingStrategy
DEFAULT_STRATEGY: str = "hull"

PERIMETER_DECIMALS: int = 2

VERTEX_LABELS: tuple[str, ...] = ("A", "B", "C", "D")
