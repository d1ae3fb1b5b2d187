import dataclasses
import logging

import numpy as np
import pytest

from convexquad.model.geometry_primitives import Point
from convexquad.model.ordering import OrderingStrategy
from convexquad.model.quadrilateral import (
    ConvexQuadrilateral,
    InvalidQuadrilateralError,
    evaluate_candidate,
    format_coordinate,
    is_accepted,
    rejection_reason,
)
from convexquad.model.validation import Orientation, Rejection, RejectionReason

STRATEGIES = list(OrderingStrategy)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_unit_square_is_accepted(strategy, shuffled_square, square_points):
    quad = evaluate_candidate(shuffled_square, strategy=strategy)
    assert isinstance(quad, ConvexQuadrilateral)
    assert quad.perimeter == pytest.approx(8.0, abs=1e-6)
    assert quad.orientation == Orientation.CCW
    assert list(quad.vertices) == square_points


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_collinear_set_is_rejected(strategy, collinear_set):
    result = evaluate_candidate(collinear_set, strategy=strategy)
    assert rejection_reason(result) == RejectionReason.COLLINEAR_VERTICES


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_duplicate_vertex_is_rejected(strategy, duplicate_set):
    result = evaluate_candidate(duplicate_set, strategy=strategy)
    assert rejection_reason(result) == RejectionReason.DUPLICATE_VERTEX


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_point_inside_triangle_is_non_convex(strategy, inside_triangle_set):
    result = evaluate_candidate(inside_triangle_set, strategy=strategy)
    assert rejection_reason(result) == RejectionReason.NON_CONVEX


def test_hull_strategy_reports_interior_point(inside_triangle_set):
    result = evaluate_candidate(inside_triangle_set, strategy=OrderingStrategy.HULL)
    assert isinstance(result, Rejection)
    assert "inside the triangle" in result.detail


@pytest.mark.parametrize("points", [
    [(0, 0), (1, 0), (1, 1)],
    [(0, 0), (1, 0), (1, 1), (0, 1), (2, 2)],
])
def test_wrong_vertex_count(points):
    assert rejection_reason(evaluate_candidate(points)) == RejectionReason.WRONG_VERTEX_COUNT


def test_reversed_input_gives_same_perimeter():
    points = [(0, 0), (5, 1), (4, 4), (-1, 3)]
    forward = evaluate_candidate(points)
    backward = evaluate_candidate(list(reversed(points)))
    assert is_accepted(forward) and is_accepted(backward)
    assert backward.perimeter == pytest.approx(forward.perimeter)


def test_rotation_and_reversal_keep_perimeter():
    quad = evaluate_candidate([(0, 0), (5, 1), (4, 4), (-1, 3)])
    for shift in range(4):
        assert quad.rotated(shift).perimeter == pytest.approx(quad.perimeter)
    reversed_quad = quad.reversed()
    assert reversed_quad.orientation == Orientation.CW
    assert reversed_quad.perimeter == pytest.approx(quad.perimeter)


def test_duplicate_below_tolerance():
    result = evaluate_candidate([(0, 0), (1e-10, 0), (2, 2), (0, 2)])
    assert rejection_reason(result) == RejectionReason.DUPLICATE_VERTEX


def test_points_above_tolerance_are_distinct():
    result = evaluate_candidate([(0, 0), (1e-8, 0), (2, 2), (0, 2)])
    assert isinstance(result, ConvexQuadrilateral)


def test_accepts_points_and_numpy_rows():
    rows = np.array([[0.0, 0.0], [3.0, 0.0], [3.0, 1.0], [0.0, 1.0]])
    from_rows = evaluate_candidate(rows)
    from_points = evaluate_candidate([Point(*row) for row in rows.tolist()])
    assert from_rows == from_points
    assert from_rows.perimeter == pytest.approx(8.0)


def test_constructor_rejects_unordered_vertices():
    bow_tie = (Point(0, 0), Point(2, 2), Point(2, 0), Point(0, 2))
    with pytest.raises(InvalidQuadrilateralError) as excinfo:
        ConvexQuadrilateral(bow_tie)
    assert excinfo.value.rejection.reason == RejectionReason.NON_CONVEX


def test_quadrilateral_is_immutable(square_points):
    quad = ConvexQuadrilateral(tuple(square_points))
    with pytest.raises(dataclasses.FrozenInstanceError):
        quad.perimeter = 0.0


def test_describe_uses_vertex_labels(square_points):
    quad = ConvexQuadrilateral(tuple(square_points))
    assert quad.describe() == "A(0, 0), B(2, 0), C(2, 2), D(0, 2)"


def test_rejections_are_logged(caplog, collinear_set):
    caplog.set_level(logging.DEBUG, logger="convexquad")
    evaluate_candidate(collinear_set)
    assert any("CollinearVertices" in record.getMessage() for record in caplog.records)


def test_rotation_and_reversal_keep_build_tolerance():
    side = 1e-5
    small = [(0, 0), (side, 0), (side, side), (0, side)]
    assert rejection_reason(evaluate_candidate(small)) == RejectionReason.COLLINEAR_VERTICES

    quad = evaluate_candidate(small, eps=1e-12)
    assert isinstance(quad, ConvexQuadrilateral)
    assert quad.rotated(1).perimeter == pytest.approx(quad.perimeter)
    assert quad.reversed().orientation == Orientation.CW


@pytest.mark.parametrize("value, text", [
    (0.0, "0"),
    (-3.0, "-3"),
    (1234567.25, "1234567.25"),
    (0.1, "0.1"),
    (1e-7, "1e-07"),
])
def test_format_coordinate(value, text):
    assert format_coordinate(value) == text
