"""
Geometric Primitives in the XY plane.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union, TYPE_CHECKING
import math

import numpy as np

from convexquad.config import EPSILON

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A vector in the XY plane representing direction and magnitude.
    """
    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> float:
        """Z component of the 3D cross product; positive when `other` turns left."""
        return self.x * other.y - self.y * other.x


@dataclass(frozen=True)
class Point:
    """A simple immutable geometric point in the XY plane."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Vector or Point from a Point.")

    def distance_to(self, other: Point) -> float:
        return distance(self, other)

    def coincides_with(self, other: Point, eps: float = EPSILON) -> bool:
        return points_coincide(self, other, eps=eps)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_pair(cls, pair: tuple[float, float]) -> Point:
        x, y = pair
        return cls(float(x), float(y))


def distance(p: Point, q: Point) -> float:
    """Euclidean distance. NaN and infinity propagate unchanged."""
    return math.sqrt((p.x - q.x) ** 2 + (p.y - q.y) ** 2)


def cross_product(o: Point, a: Point, b: Point) -> float:
    """
    Twice the signed area of the triangle O-A-B.

    The sign gives the turn direction when walking O -> A -> B
    (positive = left / counter-clockwise, negative = right / clockwise),
    zero means the three points are collinear.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def points_coincide(p: Point, q: Point, eps: float = EPSILON) -> bool:
    """True when the two points are within `eps` of each other."""
    return distance(p, q) <= eps
