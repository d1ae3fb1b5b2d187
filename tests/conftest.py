import logging

import pytest

from convexquad.model.geometry_primitives import Point


@pytest.fixture(autouse=True)
def reset_package_logger():
    """The CLI installs handlers on the package logger; drop them between tests."""
    yield
    logger = logging.getLogger("convexquad")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def square_points():
    """2x2 square, counter-clockwise from the origin."""
    return [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0)]


@pytest.fixture
def shuffled_square():
    return [(2, 2), (0, 0), (0, 2), (2, 0)]


@pytest.fixture
def collinear_set():
    return [(0, 0), (1, 0), (2, 0), (0, 1)]


@pytest.fixture
def duplicate_set():
    return [(0, 0), (1, 0), (1, 0), (0, 1)]


@pytest.fixture
def inside_triangle_set():
    """(2, 1) lies strictly inside the triangle of the other three."""
    return [(0, 0), (4, 0), (4, 4), (2, 1)]
