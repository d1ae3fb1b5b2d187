"""
Vertex Ordering
===============
Turns four unordered points into a single traversal order.

Two strategies are available and they disagree on one case, four points that
are NOT in convex position (one point inside the triangle of the others, or
three collinear points):

- ANGULAR always returns a 4-point order; the validator then rejects it
  because of a zero or mismatched turn.
- HULL returns the convex hull, which then has fewer than 4 vertices; the
  caller rejects the candidate before looking at turn directions.

A caller picks one strategy per evaluation and never mixes them.
"""
from __future__ import annotations

from enum import StrEnum
import logging
from typing import Sequence

from convexquad.config import EPSILON
from convexquad.model.geometry_primitives import Point
from convexquad.model.geometry_utils import convex_hull, sort_by_angle

logger = logging.getLogger(__name__)


class OrderingStrategy(StrEnum):
    ANGULAR = "angular"
    HULL = "hull"


def order_vertices(
    points: Sequence[Point],
    strategy: OrderingStrategy = OrderingStrategy.HULL,
    eps: float = EPSILON,
) -> list[Point]:
    """
    Order points into a counter-clockwise traversal.

    Args:
        points: Unordered input points.
        strategy: ANGULAR sorts by polar angle around the centroid;
                  HULL builds the monotone chain convex hull.
        eps: Tolerance for dropping non-left turns from the hull.

    Returns:
        The ordered points. For HULL the list contains only hull vertices and
        may therefore be shorter than the input.
    """
    match strategy:
        case OrderingStrategy.ANGULAR:
            ordered = sort_by_angle(points)
        case OrderingStrategy.HULL:
            ordered = convex_hull(points, eps=eps)
        case _:
            raise ValueError(f"Unknown ordering strategy: {strategy}")

    logger.debug(f"Ordered {len(points)} points with '{strategy}' strategy -> {len(ordered)} vertices.")
    return ordered
