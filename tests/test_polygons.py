"""Sanity checks for the polygon generators used by tests and benchmarks."""

import pytest

from xmonotone import Point
from xmonotone.polygons import (
    FAMILIES,
    bounding_box,
    comb_polygon,
    make_family,
    negate_points,
    rotate_points,
    spiral_polygon,
    transpose_points,
)
from xmonotone.validation import self_intersections, signed_area


@pytest.mark.parametrize("family", sorted(FAMILIES))
def test_families_are_simple(family):
    pts = make_family(family, 120)
    assert len(pts) >= 100
    assert self_intersections(pts) == []
    assert signed_area(pts) != 0.0


@pytest.mark.parametrize("family", sorted(FAMILIES))
def test_rotated_families_have_distinct_x(family):
    pts = make_family(family, 200)
    xs = [p.x for p in pts]
    assert len(set(xs)) == len(xs)


def test_unknown_family():
    with pytest.raises(ValueError, match="unknown polygon family"):
        make_family("hexagonal", 10)


def test_spiral_vertex_count():
    assert len(spiral_polygon(200)) == 200
    assert len(spiral_polygon(201)) == 200


def test_comb():
    pts = comb_polygon(2)
    assert pts[:3] == [Point(0.0, 0.0), Point(4.0, 0.0), Point(4.0, 1.0)]
    assert len(pts) == 3 + 3 * 2 + 1


def test_point_transforms():
    pts = [Point(1.0, 2.0), Point(-3.0, 0.5)]
    assert negate_points(pts) == [Point(-1.0, -2.0), Point(3.0, -0.5)]
    assert transpose_points(pts) == [Point(2.0, 1.0), Point(0.5, -3.0)]
    assert rotate_points(pts, 0.0) == pts
    assert bounding_box(pts) == (-3.0, 0.5, 1.0, 2.0)
