"""
Convex Quadrilateral Validation
===============================
Pure decision procedures deciding whether an ordered 4-point sequence is a
strict convex quadrilateral.

Nothing here raises for bad geometry: every check returns either None (check
passed) or a `Rejection` carrying a typed reason, so a caller can reject one
candidate and carry on with the next.

Classes:
    RejectionReason: Taxonomy of rejections.
    Rejection: A reason plus a human-readable detail.
    Orientation: Traversal direction of an accepted sequence.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Sequence

from convexquad.config import EPSILON
from convexquad.model.geometry_primitives import Point
from convexquad.model.geometry_utils import (
    find_collinear_triple,
    find_duplicate_pair,
    shoelace_area,
    turn_values,
)

QUADRILATERAL_VERTEX_COUNT = 4


class RejectionReason(StrEnum):
    WRONG_VERTEX_COUNT = "WrongVertexCount"
    DUPLICATE_VERTEX = "DuplicateVertex"
    COLLINEAR_VERTICES = "CollinearVertices"
    NON_CONVEX = "NonConvex"
    DEGENERATE_AREA = "DegenerateArea"


class Orientation(StrEnum):
    CCW = "counter-clockwise"
    CW = "clockwise"


@dataclass(frozen=True)
class Rejection:
    """Why a candidate is not a convex quadrilateral."""
    reason: RejectionReason
    detail: str = ""

    def __str__(self) -> str:
        return f"{self.reason}: {self.detail}" if self.detail else str(self.reason)


def check_vertex_count(points: Sequence[Point]) -> Optional[Rejection]:
    if len(points) != QUADRILATERAL_VERTEX_COUNT:
        return Rejection(
            RejectionReason.WRONG_VERTEX_COUNT,
            f"expected {QUADRILATERAL_VERTEX_COUNT} points, got {len(points)}",
        )
    return None


def check_distinct(points: Sequence[Point], eps: float = EPSILON) -> Optional[Rejection]:
    pair = find_duplicate_pair(points, eps=eps)
    if pair is not None:
        i, j = pair
        return Rejection(
            RejectionReason.DUPLICATE_VERTEX,
            f"points {i + 1} and {j + 1} coincide at ({points[i].x}, {points[i].y})",
        )
    return None


def classify_hull_deficit(points: Sequence[Point], eps: float = EPSILON) -> Rejection:
    """
    Reason for four distinct points whose convex hull has fewer than four vertices.

    Either three of them are collinear, or one lies strictly inside the
    triangle formed by the other three.
    """
    triple = find_collinear_triple(points, eps=eps)
    if triple is not None:
        i, j, k = triple
        return Rejection(
            RejectionReason.COLLINEAR_VERTICES,
            f"points {i + 1}, {j + 1} and {k + 1} are collinear",
        )
    return Rejection(
        RejectionReason.NON_CONVEX,
        "one point lies inside the triangle of the other three",
    )


def turn_orientation(points: Sequence[Point], eps: float = EPSILON) -> Optional[Orientation]:
    """Orientation shared by all turns, or None if the turns are mixed or any is near zero."""
    turns = turn_values(points)
    if all(t > eps for t in turns):
        return Orientation.CCW
    if all(t < -eps for t in turns):
        return Orientation.CW
    return None


def validate_ordered(points: Sequence[Point], eps: float = EPSILON) -> Optional[Rejection]:
    """
    Check that an ordered sequence is a strict convex quadrilateral.

    Checks run in a fixed order and the first failure is reported:
    vertex count, duplicate vertices, near-zero turns, mixed turn directions
    and finally the shoelace area.

    Args:
        points: Vertices in traversal order (either direction).
        eps: Tolerance shared by every comparison.

    Returns:
        None if the sequence is accepted, otherwise the Rejection.
    """
    rejection = check_vertex_count(points) or check_distinct(points, eps=eps)
    if rejection is not None:
        return rejection

    turns = turn_values(points)
    n = len(points)
    for i, value in enumerate(turns):
        if abs(value) <= eps:
            return Rejection(
                RejectionReason.COLLINEAR_VERTICES,
                f"vertices {i + 1}, {(i + 1) % n + 1} and {(i + 2) % n + 1} are collinear",
            )

    positive = sum(1 for t in turns if t > 0)
    if 0 < positive < n:
        return Rejection(
            RejectionReason.NON_CONVEX,
            f"turn directions are mixed ({positive} left, {n - positive} right)",
        )

    area = shoelace_area(points)
    if area <= eps:
        return Rejection(RejectionReason.DEGENERATE_AREA, f"area {area:g} is not above tolerance")

    return None
