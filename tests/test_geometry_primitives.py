import dataclasses
import math

import numpy as np
import pytest

from convexquad.model.geometry_primitives import (
    Point,
    Vector,
    cross_product,
    distance,
    points_coincide,
)


def test_distance_is_euclidean():
    assert distance(Point(0.0, 0.0), Point(3.0, 4.0)) == pytest.approx(5.0)
    assert Point(1.0, 1.0).distance_to(Point(1.0, 1.0)) == 0.0


def test_distance_propagates_nan_and_infinity():
    assert math.isnan(distance(Point(math.nan, 0.0), Point(0.0, 0.0)))
    assert math.isinf(distance(Point(math.inf, 0.0), Point(0.0, 0.0)))


def test_cross_product_sign_is_turn_direction():
    o, a = Point(0.0, 0.0), Point(1.0, 0.0)
    assert cross_product(o, a, Point(1.0, 1.0)) > 0
    assert cross_product(o, a, Point(1.0, -1.0)) < 0
    assert cross_product(o, a, Point(5.0, 0.0)) == 0


def test_cross_product_is_twice_triangle_area():
    assert cross_product(Point(0.0, 0.0), Point(4.0, 0.0), Point(0.0, 3.0)) == pytest.approx(12.0)


def test_points_coincide_at_tolerance_boundary():
    origin = Point(0.0, 0.0)
    assert points_coincide(origin, Point(1e-10, 0.0))
    assert not points_coincide(origin, Point(1e-8, 0.0))
    assert origin.coincides_with(Point(0.0, 1e-10))


def test_point_vector_arithmetic():
    p, q = Point(1.0, 2.0), Point(4.0, 6.0)
    v = q - p
    assert v == Vector(3.0, 4.0)
    assert v.magnitude == pytest.approx(5.0)
    assert p + v == q
    assert q - v == p


def test_point_plus_point_is_rejected():
    with pytest.raises(TypeError):
        Point(0.0, 0.0) + Point(1.0, 1.0)


def test_vector_cross_and_dot():
    assert Vector(1.0, 0.0).cross(Vector(0.0, 1.0)) == 1.0
    assert Vector(0.0, 1.0).cross(Vector(1.0, 0.0)) == -1.0
    assert Vector(2.0, 3.0).dot(Vector(4.0, -1.0)) == 5.0


def test_point_is_immutable():
    p = Point(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5.0


def test_point_from_pair_and_to_array():
    p = Point.from_pair((3, "4.5"))
    assert p == Point(3.0, 4.5)
    np.testing.assert_allclose(p.to_array(), [3.0, 4.5])
