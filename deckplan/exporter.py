"""JSON report of a layout session."""
from __future__ import annotations

import json
from pathlib import Path

from .session import LayoutAnalysis, LayoutSession


class ArrangementExporter:
    def __init__(self, base_path: str | Path = "artifacts") -> None:
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def to_file(self, session: LayoutSession, filename: str) -> Path:
        path = self.base_path / filename
        path.write_text(self._serialize(session), encoding="utf-8")
        return path

    def to_payload(self, session: LayoutSession) -> bytes:
        return self._serialize(session).encode("utf-8")

    def _serialize(self, session: LayoutSession) -> str:
        analysis = session.analyze()
        surface = session.surface
        payload = {
            "surface": {
                "name": surface.name,
                "length": surface.length,
                "width": surface.width,
                "capacity_tons": surface.capacity_tons,
            },
            "read_only": session.read_only,
            "placements": self._placement_payload(session),
            "validation": self._validation_payload(analysis),
            "collisions": [
                {"first": collision.first_id, "second": collision.second_id}
                for collision in analysis.collisions
            ],
            "out_of_bounds": [entry.description for entry in analysis.out_of_bounds],
            "balance": {
                "center_of_gravity": {
                    "x": analysis.balance.center_of_gravity[0],
                    "y": analysis.balance.center_of_gravity[1],
                },
                "offset_x_pct": analysis.balance.offset_x_pct,
                "offset_y_pct": analysis.balance.offset_y_pct,
                "balanced": analysis.balance.balanced,
            },
        }
        return json.dumps(payload, indent=2)

    def _placement_payload(self, session: LayoutSession) -> list[dict]:
        items: list[dict] = []
        for index, placed in enumerate(session.placements):
            items.append(
                {
                    "index": index,
                    "id": placed.id,
                    "brand": placed.brand,
                    "model": placed.model,
                    "category": placed.category,
                    "weight": placed.weight,
                    "x": placed.position_x,
                    "y": placed.position_y,
                    "length": placed.effective_length,
                    "width": placed.effective_width,
                    "rotated": placed.rotated,
                    "serial_number": placed.item.serial_number,
                    "economic_number": placed.item.economic_number,
                }
            )
        return items

    def _validation_payload(self, analysis: LayoutAnalysis) -> dict:
        report = analysis.validation
        return {
            "status": report.status.value,
            "total_weight_tons": report.total_weight_tons,
            "occupied_length": report.occupied_length,
            "occupied_width": report.occupied_width,
            "details": [
                {
                    "severity": issue.severity.value,
                    "code": issue.code,
                    "message": issue.message,
                    "actual": issue.actual,
                    "limit": issue.limit,
                }
                for issue in report.details
            ],
        }
