from __future__ import annotations

from itertools import combinations
from typing import Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

from convexquad.config import EPSILON
from convexquad.model.geometry_primitives import Point, Vector, cross_product, distance, points_coincide


def points_to_array(points: Sequence[Point]) -> npt.NDArray[np.float64]:
    """Stack points into an (N, 2) array of (x, y) coordinates."""
    return np.array([p.to_array() for p in points], dtype=np.float64).reshape(-1, 2)


def centroid(points: Sequence[Point]) -> Point:
    """Vertex centroid (mean x, mean y); not the area centroid of the polygon."""
    cx, cy = points_to_array(points).mean(axis=0)
    return Point(float(cx), float(cy))


def shoelace_area(points: Sequence[Point]) -> float:
    """
    Unsigned area of a closed polygon given by its vertices in traversal order.

    Args:
        points: Polygon vertices; the closing edge from the last back to the first
                vertex is implied.

    Returns:
        0.5 * |sum(x_i * y_{i+1} - x_{i+1} * y_i)|
    """
    pts = points_to_array(points)
    x, y = pts[:, 0], pts[:, 1]
    return 0.5 * abs(float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)))


def polygon_perimeter(points: Sequence[Point]) -> float:
    """Sum of the edge lengths of the closed polygon, including the closing edge."""
    n = len(points)
    return sum(distance(points[i], points[(i + 1) % n]) for i in range(n))


def turn_values(points: Sequence[Point]) -> list[float]:
    """
    Cross products of consecutive edges for every vertex triple (i, i+1, i+2) of a closed polygon.

    Entry i is (V_i -> V_{i+1}) x (V_{i+1} -> V_{i+2}); its sign is the turn direction at V_{i+1}.
    """
    n = len(points)
    turns = []
    for i in range(n):
        edge_in: Vector = points[(i + 1) % n] - points[i]
        edge_out: Vector = points[(i + 2) % n] - points[(i + 1) % n]
        turns.append(edge_in.cross(edge_out))
    return turns


def find_duplicate_pair(points: Sequence[Point], eps: float = EPSILON) -> tuple[int, int] | None:
    """Indices of the first pair of points lying within `eps` of each other, or None."""
    for i, j in combinations(range(len(points)), 2):
        if points_coincide(points[i], points[j], eps=eps):
            return i, j
    return None


def find_collinear_triple(points: Sequence[Point], eps: float = EPSILON) -> tuple[int, int, int] | None:
    """Indices of the first triple of points (in any order) that is collinear within `eps`, or None."""
    for i, j, k in combinations(range(len(points)), 3):
        if abs(cross_product(points[i], points[j], points[k])) <= eps:
            return i, j, k
    return None


def sort_by_angle(points: Sequence[Point]) -> list[Point]:
    """
    Order points counter-clockwise by their polar angle around the vertex centroid.

    Ties in angle keep the input order. The result is a CCW traversal only when
    the points are in convex position; otherwise it may be concave or
    self-intersecting and must be validated afterwards.
    """
    pts = points_to_array(points)
    center = pts.mean(axis=0)
    angles = np.arctan2(pts[:, 1] - center[1], pts[:, 0] - center[0])
    order = np.argsort(angles, kind="stable")
    return [points[int(i)] for i in order]


def convex_hull(points: Sequence[Point], eps: float = EPSILON) -> list[Point]:
    """
    Andrew's monotone chain convex hull.

    Points are sorted by (x, y); the lower and upper chains keep only strict
    left turns, so any point producing a turn with cross product <= `eps`
    (collinear or right turn) is dropped.

    Returns:
        Hull vertices in counter-clockwise order starting at the lowest (x, y)
        point, without repeating the first vertex.
    """
    ordered = sorted(points, key=lambda p: (p.x, p.y))
    if len(ordered) <= 2:
        return list(ordered)

    def build_chain(sequence: Sequence[Point]) -> list[Point]:
        chain: list[Point] = []
        for p in sequence:
            while len(chain) >= 2 and cross_product(chain[-2], chain[-1], p) <= eps:
                chain.pop()
            chain.append(p)
        return chain

    lower = build_chain(ordered)
    upper = build_chain(list(reversed(ordered)))

    # Last point of each chain is the first point of the other one
    return lower[:-1] + upper[:-1]
