"""End-to-end checks of the make_monotone command-line script."""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT / "scripts"))

import make_monotone  # noqa: E402

from xmonotone import Point, read_poly, write_poly  # noqa: E402
from xmonotone.polygons import notch_polygon  # noqa: E402


def test_make_monotone_writes_output(tmp_path, capsys):
    src = tmp_path / "notch.poly"
    dst = tmp_path / "out" / "notch_mono.poly"
    write_poly(notch_polygon(), src)

    assert make_monotone.main(["--input", str(src), "--output", str(dst)]) == 0

    line = capsys.readouterr().out.strip().splitlines()[-1]
    fields = dict(kv.split("=") for kv in line.split(",")[1:])
    assert line.startswith("x_monotone,")
    assert fields["n"] == "5"
    assert fields["m"] == "5"
    assert fields["interpolated"] == "0"
    assert read_poly(dst) == [Point(0.0, 0.0), Point(3.0, 0.0), Point(3.0, 2.0),
                              Point(3.0, 2.0), Point(0.0, 3.0)]


def test_make_monotone_reports_bad_file(tmp_path, capsys):
    src = tmp_path / "bad.poly"
    src.write_text("3\n0 0\n1 1\n", encoding="utf-8")

    assert make_monotone.main(["--input", str(src)]) == 1
    assert "error:" in capsys.readouterr().err


def test_make_monotone_rejects_nan(tmp_path, capsys):
    src = tmp_path / "nan.poly"
    src.write_text("3\n0 0\nnan 1\n1 1\n", encoding="utf-8")

    assert make_monotone.main(["--input", str(src)]) == 1
    assert "non-finite" in capsys.readouterr().err
