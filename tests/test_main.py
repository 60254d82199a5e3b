"""Tests for the geowkt command line tool."""

import pytest

from geowkt.main import main

POLYGON_YAML = """
type: Polygon
dimension: 3DM
srid: 2056
rings:
  - [[0, 0, 1], [2, 0, 1], [2, 2, 1], [0, 0, 1]]
"""


@pytest.fixture
def polygon_path(tmp_path):
    path = tmp_path / "polygon.yaml"
    path.write_text(POLYGON_YAML)
    return path


def test_default_output(polygon_path, capsys):
    assert main([str(polygon_path), "--precision", "0"]) == 0
    assert capsys.readouterr().out.strip() == "Polygon((0 0 1, 2 0 1, 2 2 1, 0 0 1))"


def test_dialect_and_case_flags(polygon_path, capsys):
    assert main([str(polygon_path), "-d", "wkt12", "-c", "lowercase", "--precision", "1"]) == 0
    assert capsys.readouterr().out.strip() == (
        "polygon m ((0.0 0.0 1.0, 2.0 0.0 1.0, 2.0 2.0 1.0, 0.0 0.0 1.0))"
    )


def test_profile_with_override(polygon_path, capsys):
    assert main([str(polygon_path), "--profile", "postgis", "--precision", "0"]) == 0
    assert capsys.readouterr().out.strip() == (
        "SRID=2056;POLYGONM((0 0 1, 2 0 1, 2 2 1, 0 0 1))"
    )


def test_missing_file_reports_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.yaml")]) == 1
    assert capsys.readouterr().err.startswith("error: ")


def test_malformed_document_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("type: Polygon\nrings: 5\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err.startswith("error: ")


def test_unknown_profile_reports_error(polygon_path, capsys):
    assert main([str(polygon_path), "--profile", "does_not_exist"]) == 1
    assert "does_not_exist" in capsys.readouterr().err
