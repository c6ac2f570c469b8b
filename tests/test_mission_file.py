"""Mini README: Tests for the QGC WPL 110 mission file exporter.

Ensures exported files reload into identical commands and that malformed
files are rejected with a clear error.
"""

from __future__ import annotations

import pytest

from surveygrid.export import MissionFileExporter
from surveygrid.geo import GeoPoint
from surveygrid.mission import MissionEncoder
from surveygrid.route_planning import GridSurveyGenerator, SurveyParams

SQUARE = [
    GeoPoint(-33.8570, 151.2150),
    GeoPoint(-33.8570, 151.2160),
    GeoPoint(-33.8560, 151.2160),
    GeoPoint(-33.8560, 151.2150),
]


def test_export_then_load_restores_commands(tmp_path) -> None:
    result = GridSurveyGenerator().generate_grid_survey(SQUARE, SurveyParams(line_spacing=25.0))
    commands = MissionEncoder().encode(result, GeoPoint(-33.8575, 151.2145))
    exporter = MissionFileExporter()

    destination = exporter.export(commands, tmp_path / "missions" / "survey.waypoints")

    lines = destination.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "QGC WPL 110"
    assert len(lines) == len(commands) + 1
    assert lines[1].split("\t")[:4] == ["0", "1", "6", "16"]
    assert exporter.load(destination) == commands


def test_load_rejects_unknown_header(tmp_path) -> None:
    source = tmp_path / "bad.waypoints"
    source.write_text("not a mission\n", encoding="utf-8")
    with pytest.raises(ValueError):
        MissionFileExporter().load(source)


def test_load_rejects_short_lines(tmp_path) -> None:
    source = tmp_path / "short.waypoints"
    source.write_text("QGC WPL 110\n0\t1\t6\t16\n", encoding="utf-8")
    with pytest.raises(ValueError, match="expected 12 fields"):
        MissionFileExporter().load(source)
