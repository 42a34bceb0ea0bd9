"""Tests for the polygon and monotonicity checks."""

import pytest

from xmonotone import Point
from xmonotone.polygons import notch_polygon
from xmonotone.validation import (
    consecutive_duplicates,
    edge_parameter,
    interpolated_points,
    is_closed_x_monotone,
    is_monotone_chain,
    locate_on_boundary,
    self_intersections,
    signed_area,
)


def P(*coords):
    return [Point(float(x), float(y)) for x, y in coords]


SQUARE = P((0, 0), (2, 0), (2, 2), (0, 2))


def test_signed_area_orientation():
    assert signed_area(SQUARE) == 4.0
    assert signed_area(SQUARE[::-1]) == -4.0


def test_self_intersections():
    assert self_intersections(SQUARE) == []
    bowtie = P((0, 0), (2, 2), (2, 0), (0, 2))
    assert self_intersections(bowtie) == [(0, 2)]


def test_is_monotone_chain():
    assert is_monotone_chain(P((0, 0), (1, 5), (1, -2), (3, 0)))
    assert not is_monotone_chain(P((0, 0), (2, 0), (1, 0)))
    assert is_monotone_chain(P((3, 0), (1, 0), (1, 1)), decreasing=True)
    assert is_monotone_chain(P((0, 0), (1, 0), (1 - 1e-12, 1)), tol=1e-9)


def test_is_closed_x_monotone():
    assert is_closed_x_monotone(SQUARE)
    assert is_closed_x_monotone(P((0, 0), (3, 0), (3, 2), (3, 2), (0, 3)))
    assert not is_closed_x_monotone(notch_polygon())
    assert is_closed_x_monotone([])


def test_consecutive_duplicates():
    assert consecutive_duplicates(P((0, 0), (1, 1), (1, 1), (2, 0))) == [1]
    assert consecutive_duplicates(SQUARE) == []


def test_edge_parameter():
    a, b = Point(0.0, 0.0), Point(4.0, 2.0)
    assert edge_parameter(Point(2.0, 1.0), a, b) == pytest.approx(0.5)
    assert edge_parameter(Point(2.0, 1.5), a, b) is None
    assert edge_parameter(Point(6.0, 3.0), a, b) is None
    assert edge_parameter(a, a, a) == 0.0


def test_locate_on_boundary():
    assert locate_on_boundary(Point(2.0, 1.0), SQUARE) == (1, pytest.approx(0.5))
    # closing edge (0, 2) -> (0, 0)
    assert locate_on_boundary(Point(0.0, 0.5), SQUARE) == (3, pytest.approx(0.75))
    assert locate_on_boundary(Point(1.0, 1.0), SQUARE) is None


def test_interpolated_points():
    assert interpolated_points(SQUARE, SQUARE + P((1, 0))) == P((1, 0))
