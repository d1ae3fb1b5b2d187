"""Convex quadrilateral validation and maximum-perimeter selection."""
from convexquad.model.batch import BatchResult, RunOutcome, evaluate_batch, select_winner
from convexquad.model.geometry_primitives import Point, cross_product, distance, points_coincide
from convexquad.model.ordering import OrderingStrategy, order_vertices
from convexquad.model.quadrilateral import (
    ConvexQuadrilateral,
    InvalidQuadrilateralError,
    evaluate_candidate,
)
from convexquad.model.validation import Orientation, Rejection, RejectionReason, validate_ordered

__all__ = [
    "BatchResult",
    "ConvexQuadrilateral",
    "InvalidQuadrilateralError",
    "Orientation",
    "OrderingStrategy",
    "Point",
    "Rejection",
    "RejectionReason",
    "RunOutcome",
    "cross_product",
    "distance",
    "evaluate_batch",
    "evaluate_candidate",
    "order_vertices",
    "points_coincide",
    "select_winner",
    "validate_ordered",
]
