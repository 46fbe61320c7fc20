import json
import logging
from argparse import Namespace
from pathlib import Path

import pytest

import deckplan.cli as cli

SEED = str(Path(__file__).resolve().parent.parent / "data" / "seed_data.json")


def _layout_args(tmp_path, **overrides) -> Namespace:
    values = dict(
        unit="RO-01",
        attachment=[],
        item=["JCPT1412AC", "GS-5390-RT:SN-5390"],
        db=tmp_path / "layout.db",
        seed=SEED,
        auto_arrange=False,
        allow_y=False,
        allow_rotation=False,
        rotate=[],
        move=[],
        read_only=False,
        export=None,
        export_dir=tmp_path / "artifacts",
    )
    values.update(overrides)
    return Namespace(**values)


def test_run_catalog_equipment(tmp_path, capsys):
    args = Namespace(entity="equipment", db=tmp_path / "catalog.db", seed=SEED)
    cli.run_catalog(args)
    out = capsys.readouterr().out
    assert "Dimensions (m)" in out
    assert "JCPT1412AC" in out
    assert "3200kg" in out


def test_run_catalog_attachments_marks_missing_values(tmp_path, capsys):
    args = Namespace(entity="attachments", db=tmp_path / "catalog.db", seed=SEED)
    cli.run_catalog(args)
    lines = capsys.readouterr().out.splitlines()
    lowbed = next(line for line in lines if line.startswith("LB-02"))
    assert "lowbed" in lowbed
    assert " - " in lowbed


def test_parse_item_and_move():
    assert cli._parse_item("GS-1930:SN-9", 2) == ("2-GS-1930", "GS-1930", "SN-9")
    assert cli._parse_item("GS-1930", 1) == ("1-GS-1930", "GS-1930", None)
    assert cli._parse_move("1-GS-1930=3.5") == ("1-GS-1930", 3.5, None)
    assert cli._parse_move("1-GS-1930=3.5,0.2") == ("1-GS-1930", 3.5, 0.2)
    with pytest.raises(ValueError):
        cli._parse_move("1-GS-1930")
    with pytest.raises(ValueError):
        cli._parse_item(":SN", 1)


def test_run_layout_prints_analysis(tmp_path, capsys):
    cli.run_layout(_layout_args(tmp_path))
    out = capsys.readouterr().out
    assert "Roll-Off 01 - 12m x 2.6m - 40 ton" in out
    assert "2-GS-5390-RT" in out
    assert "Status: ok" in out
    assert "Weight: 11.4 / 40 ton" in out
    assert "No collisions detected" in out


def test_run_layout_move_creates_collision(tmp_path, capsys):
    args = _layout_args(tmp_path, move=["2-GS-5390-RT=1.0"])
    cli.run_layout(args)
    out = capsys.readouterr().out
    assert "Collisions detected:" in out
    assert "Collision between 1-JCPT1412AC and 2-GS-5390-RT" in out


def test_run_layout_rotation_locked(tmp_path, capsys):
    cli.run_layout(_layout_args(tmp_path, rotate=["1-JCPT1412AC"]))
    out = capsys.readouterr().out
    assert "Rotation of 1-JCPT1412AC ignored" in out


def test_run_layout_exports_report(tmp_path, capsys):
    args = _layout_args(tmp_path, auto_arrange=True, export="layout.json")
    cli.run_layout(args)
    out = capsys.readouterr().out
    assert "Arrangement exported to" in out
    payload = json.loads((tmp_path / "artifacts" / "layout.json").read_text(encoding="utf-8"))
    assert payload["placements"][0]["model"] == "GS-5390-RT"
    assert payload["placements"][0]["serial_number"] == "SN-5390"


def test_run_layout_without_capacity_exits(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli.run_layout(_layout_args(tmp_path, unit="TR-01"))
    assert "Missing capacity data" in str(excinfo.value)


def test_run_layout_unknown_item_exits(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli.run_layout(_layout_args(tmp_path, item=["NOPE-1"]))
    assert "NOPE-1" in str(excinfo.value)


def test_run_check_allows_transfer(tmp_path, capsys):
    args = Namespace(unit="TR-01", attachment=["LB-01"], item=["GTH-1056", "GS-5390-RT"],
                     db=tmp_path / "check.db", seed=SEED)
    cli.run_check(args)
    assert "Transfer allowed on Tractor 01" in capsys.readouterr().out


def test_run_check_rejects_overweight(tmp_path, capsys):
    args = Namespace(unit="RO-02", attachment=[], item=["GTH-1056", "BA16NE", "GS-5390-RT"],
                     db=tmp_path / "check.db", seed=SEED)
    with pytest.raises(SystemExit) as excinfo:
        cli.run_check(args)
    assert excinfo.value.code == 1
    assert "Transfer rejected: Weight exceeded: 26.7 t > 20 t capacity" in capsys.readouterr().out


def test_run_check_skips_without_capacity(tmp_path, capsys):
    args = Namespace(unit="TR-01", attachment=[], item=["GS-1930"], db=tmp_path / "check.db", seed=SEED)
    cli.run_check(args)
    out = capsys.readouterr().out
    assert "Missing capacity data: check skipped" in out


def test_main_dispatches_catalog(tmp_path, capsys):
    try:
        cli.main(["catalog", "units", "--db", str(tmp_path / "main.db"), "--seed", SEED])
    finally:
        logging.getLogger("deckplan").handlers.clear()
    out = capsys.readouterr().out
    assert "Roll-Off 02" in out
    assert "12x2.6m 40t" in out
