"""Reference catalog of equipment, transport units and attachments backed by SQLite."""
from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path

from .capacity import Attachment, AttachmentKind, PlatformSpec, TransportUnit, UnitType
from .models import CargoItem, Dimensions, EquipmentSpec, ensure_positive

logger = logging.getLogger(__name__)


class DataRepository:
    def __init__(self, db_path: str | Path = "deckplan.db") -> None:
        self.db_path = Path(db_path)
        self.connection = sqlite3.connect(self.db_path)
        self.connection.row_factory = sqlite3.Row

    def initialize(self, seed_path: str | Path) -> None:
        seed = json.loads(Path(seed_path).read_text(encoding="utf-8"))
        with self.connection:
            self.connection.executescript(
                """
                CREATE TABLE IF NOT EXISTS equipment (
                    model TEXT PRIMARY KEY,
                    brand TEXT,
                    category TEXT,
                    length REAL,
                    width REAL,
                    height REAL,
                    weight REAL
                );
                CREATE TABLE IF NOT EXISTS units (
                    id TEXT PRIMARY KEY,
                    label TEXT,
                    unit_type TEXT,
                    platform_length REAL,
                    platform_width REAL,
                    platform_capacity_tons REAL
                );
                CREATE TABLE IF NOT EXISTS attachments (
                    id TEXT PRIMARY KEY,
                    economic_number TEXT,
                    kind TEXT,
                    capacity_tons REAL,
                    length REAL,
                    width REAL
                );
                """
            )
        if self._is_populated("equipment"):
            return
        with self.connection:
            self.connection.executemany(
                "INSERT OR REPLACE INTO equipment VALUES (:model,:brand,:category,:length,:width,:height,:weight)",
                seed["equipment"],
            )
            self.connection.executemany(
                "INSERT OR REPLACE INTO units VALUES "
                "(:id,:label,:unit_type,:platform_length,:platform_width,:platform_capacity_tons)",
                seed["units"],
            )
            self.connection.executemany(
                "INSERT OR REPLACE INTO attachments VALUES (:id,:economic_number,:kind,:capacity_tons,:length,:width)",
                seed.get("attachments", []),
            )
        logger.info("Catalog seeded from %s", seed_path)

    def _is_populated(self, table: str) -> bool:
        cur = self.connection.execute(f"SELECT COUNT(1) FROM {table}")
        return cur.fetchone()[0] > 0

    def get_equipment(self, model: str) -> EquipmentSpec:
        row = self.connection.execute("SELECT * FROM equipment WHERE model=?", (model,)).fetchone()
        if row is None:
            raise KeyError(f"Equipment {model} not found")
        return self._equipment_from_row(row)

    def list_equipment(self) -> list[EquipmentSpec]:
        rows = self.connection.execute("SELECT * FROM equipment ORDER BY brand, model").fetchall()
        return [self._equipment_from_row(row) for row in rows]

    def build_cargo_item(
        self,
        model: str,
        item_id: str,
        *,
        serial_number: str | None = None,
        economic_number: str | None = None,
    ) -> CargoItem:
        """Copy dimensions and weight from the catalog into a new cargo item."""
        return self.get_equipment(model).to_cargo_item(
            item_id,
            serial_number=serial_number,
            economic_number=economic_number,
        )

    def get_unit(self, unit_id: str) -> TransportUnit:
        row = self.connection.execute("SELECT * FROM units WHERE id=?", (unit_id,)).fetchone()
        if row is None:
            raise KeyError(f"Unit {unit_id} not found")
        return self._unit_from_row(row)

    def list_units(self) -> list[TransportUnit]:
        rows = self.connection.execute("SELECT * FROM units ORDER BY id").fetchall()
        return [self._unit_from_row(row) for row in rows]

    def get_attachment(self, attachment_id: str) -> Attachment:
        row = self.connection.execute("SELECT * FROM attachments WHERE id=?", (attachment_id,)).fetchone()
        if row is None:
            raise KeyError(f"Attachment {attachment_id} not found")
        return self._attachment_from_row(row)

    def list_attachments(self) -> list[Attachment]:
        rows = self.connection.execute("SELECT * FROM attachments ORDER BY id").fetchall()
        return [self._attachment_from_row(row) for row in rows]

    def _equipment_from_row(self, row: sqlite3.Row) -> EquipmentSpec:
        return EquipmentSpec(
            model=row["model"],
            brand=row["brand"],
            category=row["category"],
            dimensions=Dimensions(
                ensure_positive(row["length"], name="length"),
                ensure_positive(row["width"], name="width"),
                ensure_positive(row["height"], name="height"),
            ),
            weight=ensure_positive(row["weight"], name="weight"),
        )

    def _unit_from_row(self, row: sqlite3.Row) -> TransportUnit:
        platform = None
        if row["platform_length"] and row["platform_width"]:
            platform = PlatformSpec(
                length=row["platform_length"],
                width=row["platform_width"],
                capacity_tons=row["platform_capacity_tons"] or 0.0,
            )
        return TransportUnit(
            id=row["id"],
            label=row["label"],
            unit_type=UnitType(row["unit_type"]),
            platform=platform,
        )

    def _attachment_from_row(self, row: sqlite3.Row) -> Attachment:
        return Attachment(
            id=row["id"],
            economic_number=row["economic_number"],
            kind=AttachmentKind(row["kind"]),
            capacity_tons=row["capacity_tons"],
            length=row["length"],
            width=row["width"],
        )

    def close(self) -> None:
        self.connection.close()
