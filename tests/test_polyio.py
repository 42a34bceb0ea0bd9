"""Tests for .poly reading and writing."""

import pytest

from xmonotone import Point, PolyFormatError, read_poly, write_poly
from xmonotone.polyio import format_poly, parse_poly


def test_format_poly():
    text = format_poly([(0, 0), (2.5, -1)])
    assert text == "2\n0 0\n2.5 -1\n"


def test_parse_skips_comments_and_blank_lines():
    text = "# notch\n3\n\n0 0\n# vertex 1\n3 0\n1 1\n"
    assert parse_poly(text) == [Point(0.0, 0.0), Point(3.0, 0.0), Point(1.0, 1.0)]


def test_parse_empty_polygon():
    assert parse_poly("0\n") == []


def test_write_then_read_keeps_exact_floats(tmp_path):
    pts = [Point(0.1, 1 / 3), Point(-1e-300, 123456789.123456789), Point(2.0, 0.30000000000000004)]
    path = tmp_path / "nested" / "poly.poly"
    write_poly(pts, path)
    assert read_poly(path) == pts


@pytest.mark.parametrize("text,line", [
    ("", None),
    ("three\n0 0\n", 1),
    ("-1\n", 1),
    ("3\n0 0\n1 1\n", 1),
    ("2\n0 0\n1\n", 3),
    ("2\n0 0\n1 x\n", 3),
    ("1\n0 0 0\n", 2),
])
def test_parse_errors(text, line):
    with pytest.raises(PolyFormatError) as exc:
        parse_poly(text)
    assert exc.value.line == line


def test_error_message_names_line():
    with pytest.raises(PolyFormatError, match="line 3"):
        parse_poly("2\n0 0\n1 x\n")


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_poly(tmp_path / "missing.poly")
