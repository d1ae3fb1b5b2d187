"""
Convex Quadrilateral (Data Model)
=================================
The immutable accepted shape and the pipeline producing it from raw points.

Pipeline: raw pairs -> Point -> count & duplicate checks -> ordering
strategy -> validation -> ConvexQuadrilateral | Rejection.

Classes:
    ConvexQuadrilateral: Validated, oriented quadrilateral with cached perimeter.
    InvalidQuadrilateralError: Raised when the constructor is given bad vertices.
"""
from __future__ import annotations

from dataclasses import InitVar, dataclass, field
import logging
from typing import Iterable, Sequence, Union

from convexquad.config import EPSILON, VERTEX_LABELS
from convexquad.model.geometry_primitives import Point
from convexquad.model.geometry_utils import polygon_perimeter
from convexquad.model.ordering import OrderingStrategy, order_vertices
from convexquad.model.validation import (
    QUADRILATERAL_VERTEX_COUNT,
    Orientation,
    Rejection,
    RejectionReason,
    check_distinct,
    check_vertex_count,
    classify_hull_deficit,
    turn_orientation,
    validate_ordered,
)

logger = logging.getLogger(__name__)

# Anything providing x and y: a Point or an (x, y) pair
RawPoint = Union[Point, Sequence[float]]


class InvalidQuadrilateralError(ValueError):
    def __init__(self, rejection: Rejection):
        super().__init__(str(rejection))
        self.rejection = rejection


@dataclass(frozen=True)
class ConvexQuadrilateral:
    """
    A strictly convex quadrilateral with a fixed traversal direction.

    The constructor only accepts vertices that are already in traversal order
    and raises InvalidQuadrilateralError otherwise; use `evaluate_candidate`
    to go from unordered points to a quadrilateral without exceptions.
    """
    vertices: tuple[Point, Point, Point, Point]
    eps: InitVar[float] = EPSILON
    perimeter: float = field(init=False)
    orientation: Orientation = field(init=False)
    # Tolerance the vertices were validated with; reused by rotated() and reversed()
    _eps: float = field(init=False, repr=False, compare=False)

    def __post_init__(self, eps: float) -> None:
        vertices = tuple(self.vertices)
        rejection = validate_ordered(vertices, eps=eps)
        if rejection is not None:
            raise InvalidQuadrilateralError(rejection)

        # Frozen dataclass: derived fields are set once, here
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "perimeter", polygon_perimeter(vertices))
        object.__setattr__(self, "orientation", turn_orientation(vertices, eps=eps))
        object.__setattr__(self, "_eps", eps)

    def rotated(self, shift: int = 1) -> ConvexQuadrilateral:
        """Same quadrilateral, traversal starting `shift` vertices later."""
        k = shift % QUADRILATERAL_VERTEX_COUNT
        return ConvexQuadrilateral(self.vertices[k:] + self.vertices[:k], eps=self._eps)

    def reversed(self) -> ConvexQuadrilateral:
        """Same quadrilateral traversed in the opposite direction."""
        return ConvexQuadrilateral(tuple(reversed(self.vertices)), eps=self._eps)

    def labelled_vertices(self) -> list[tuple[str, Point]]:
        return list(zip(VERTEX_LABELS, self.vertices))

    def describe(self) -> str:
        return ", ".join(
            f"{label}({format_coordinate(p.x)}, {format_coordinate(p.y)})"
            for label, p in self.labelled_vertices()
        )


def format_coordinate(value: float) -> str:
    """Integral values without a fractional part, everything else at full precision."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


# Result of evaluating one candidate
CandidateResult = Union[ConvexQuadrilateral, Rejection]


def to_points(raw_points: Iterable[RawPoint]) -> list[Point]:
    points = []
    for raw in raw_points:
        if isinstance(raw, Point):
            points.append(raw)
        else:
            points.append(Point.from_pair(tuple(raw)))
    return points


def evaluate_candidate(
    raw_points: Iterable[RawPoint],
    strategy: OrderingStrategy = OrderingStrategy.HULL,
    eps: float = EPSILON,
) -> CandidateResult:
    """
    Decide whether four unordered points form a strict convex quadrilateral.

    Args:
        raw_points: Four Points or (x, y) pairs in any order.
        strategy: Vertex ordering strategy, see `convexquad.model.ordering`.
        eps: Tolerance shared by every comparison.

    Returns:
        The ConvexQuadrilateral (vertices in counter-clockwise order) on success,
        otherwise a Rejection with the first failed check.
    """
    points = to_points(raw_points)

    rejection = check_vertex_count(points) or check_distinct(points, eps=eps)
    if rejection is None:
        ordered = order_vertices(points, strategy=strategy, eps=eps)
        if len(ordered) < QUADRILATERAL_VERTEX_COUNT:
            rejection = classify_hull_deficit(points, eps=eps)
        else:
            rejection = validate_ordered(ordered, eps=eps)

    if rejection is not None:
        logger.debug(f"Rejected {[(p.x, p.y) for p in points]}: {rejection}")
        return rejection

    quad = ConvexQuadrilateral(tuple(ordered), eps=eps)
    logger.debug(f"Accepted {quad.describe()} with perimeter {quad.perimeter:.6g}")
    return quad


def is_accepted(result: CandidateResult) -> bool:
    return isinstance(result, ConvexQuadrilateral)


def rejection_reason(result: CandidateResult) -> RejectionReason | None:
    return result.reason if isinstance(result, Rejection) else None
