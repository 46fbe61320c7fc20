import json

import pytest

from deckplan import ArrangementExporter, CargoItem, Dimensions, LayoutSession, LoadSurface


def build_session() -> LayoutSession:
    surface = LoadSurface(length=12.0, width=2.6, capacity_tons=40.0, name="Roll-Off 01")
    items = [
        CargoItem("A", "DINGLI", "JCPT1412AC", "electric_scissor", Dimensions(2.48, 1.22, 2.42), 3200,
                  serial_number="SN-1"),
        CargoItem("B", "GENIE", "GS-2669-RT", "rough_terrain_scissor", Dimensions(3.07, 1.75, 2.44), 3810),
    ]
    return LayoutSession(surface, items)


def test_exporter_writes_arrangement(tmp_path):
    exporter = ArrangementExporter(tmp_path)
    path = exporter.to_file(build_session(), "layout.json")
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["surface"]["name"] == "Roll-Off 01"
    assert payload["read_only"] is False
    assert [entry["id"] for entry in payload["placements"]] == ["A", "B"]
    first, second = payload["placements"]
    assert first["index"] == 0
    assert first["serial_number"] == "SN-1"
    assert second["x"] == pytest.approx(2.68)
    assert second["rotated"] is False
    assert payload["validation"]["status"] == "ok"
    assert payload["collisions"] == []
    assert payload["out_of_bounds"] == []
    assert "center_of_gravity" in payload["balance"]


def test_exporter_reports_collisions(tmp_path):
    session = build_session()
    session.begin_drag("B", 2.68, 0.0)
    session.drag_to(1.0, 0.0)
    session.end_drag()
    payload = json.loads(ArrangementExporter(tmp_path).to_payload(session).decode("utf-8"))
    assert payload["collisions"] == [{"first": "A", "second": "B"}]
    assert payload["placements"][1]["x"] == 1.0
