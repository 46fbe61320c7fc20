"""Command line interface for DeckPlan."""
from __future__ import annotations

import argparse
import logging
from typing import List, Sequence, Tuple

from .capacity import Attachment, CapacityResolver
from .exporter import ArrangementExporter
from .logging_config import setup_logging
from .models import CargoItem, LoadSurface
from .repository import DataRepository
from .session import LayoutSession
from .view import build_status_summary

logger = logging.getLogger(__name__)


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--db", default="deckplan.db", help="Database path")
    parser.add_argument("--seed", default="data/seed_data.json", help="Seed data path")


def _add_transport(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--unit", required=True, help="Transport unit id")
    parser.add_argument(
        "--attachment",
        action="append",
        default=[],
        help="Selected attachment id (the first one is used)",
    )
    parser.add_argument(
        "--item",
        action="append",
        required=True,
        help="Equipment model, optionally MODEL:SERIAL (repeatable)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="DeckPlan cargo layout")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", help="Also write logs to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    layout_parser = sub.add_parser("layout", help="Arrange equipment on a transport surface")
    _add_transport(layout_parser)
    _add_common(layout_parser)
    layout_parser.add_argument("--auto-arrange", action="store_true", help="Heaviest first arrangement")
    layout_parser.add_argument("--allow-y", action="store_true", help="Allow moving items across the width")
    layout_parser.add_argument("--allow-rotation", action="store_true", help="Allow 90 degree rotation")
    layout_parser.add_argument("--rotate", action="append", default=[], help="Item id to rotate (repeatable)")
    layout_parser.add_argument(
        "--move",
        action="append",
        default=[],
        help="Drag an item to a position, format ID=X[,Y] in meters",
    )
    layout_parser.add_argument("--read-only", action="store_true", help="Only show the analysis")
    layout_parser.add_argument("--export", help="Output filename for the JSON report")
    layout_parser.add_argument("--export-dir", default="artifacts", help="Directory for exported reports")

    check_parser = sub.add_parser("check", help="Quick capacity check before arranging")
    _add_transport(check_parser)
    _add_common(check_parser)

    catalog_parser = sub.add_parser("catalog", help="List the reference catalog")
    catalog_parser.add_argument(
        "entity",
        choices=["equipment", "units", "attachments"],
        help="Catalog section to show",
    )
    _add_common(catalog_parser)
    return parser


def _parse_item(value: str, index: int) -> Tuple[str, str, str | None]:
    """Return ``(item_id, model, serial)`` for a ``MODEL[:SERIAL]`` argument."""
    model, _, serial = value.partition(":")
    model = model.strip()
    if not model:
        raise ValueError(f"Invalid item '{value}'. Use MODEL or MODEL:SERIAL")
    return f"{index}-{model}", model, serial.strip() or None


def _parse_move(value: str) -> Tuple[str, float, float | None]:
    try:
        item_id, coords = value.split("=", 1)
        parts = [part.strip() for part in coords.split(",")]
        x = float(parts[0])
        y = float(parts[1]) if len(parts) > 1 else None
    except (ValueError, IndexError) as exc:
        raise ValueError(f"Invalid move '{value}'. Use ID=X[,Y]") from exc
    return item_id.strip(), x, y


def _load_items(repo: DataRepository, values: Sequence[str]) -> List[CargoItem]:
    items: List[CargoItem] = []
    for index, value in enumerate(values, start=1):
        item_id, model, serial = _parse_item(value, index)
        items.append(repo.build_cargo_item(model, item_id, serial_number=serial))
    return items


def _load_transport(repo: DataRepository, args: argparse.Namespace):
    unit = repo.get_unit(args.unit)
    attachments: List[Attachment] = [repo.get_attachment(value) for value in args.attachment]
    return unit, attachments


def _print_table(headers: tuple[str, ...], rows: list[tuple[str, ...]]) -> None:
    widths = [len(header) for header in headers]
    for row in rows:
        for idx, cell in enumerate(row):
            widths[idx] = max(widths[idx], len(cell))
    format_str = "  ".join(f"{{:<{width}}}" for width in widths)
    print(format_str.format(*headers))
    print("  ".join("-" * width for width in widths))
    for row in rows:
        print(format_str.format(*row))


def _fmt(value: float | None, unit: str) -> str:
    return f"{value:g}{unit}" if value else "-"


def run_catalog(args: argparse.Namespace) -> None:
    repo = DataRepository(args.db)
    repo.initialize(args.seed)
    if args.entity == "equipment":
        rows = [
            (
                spec.model,
                spec.brand,
                spec.category,
                f"{spec.dimensions.length:.2f}x{spec.dimensions.width:.2f}x{spec.dimensions.height:.2f}",
                f"{spec.weight:.0f}kg",
            )
            for spec in repo.list_equipment()
        ]
        headers = ("Model", "Brand", "Category", "Dimensions (m)", "Weight")
    elif args.entity == "units":
        rows = [
            (
                unit.id,
                unit.label,
                unit.unit_type.value,
                f"{unit.platform.length:g}x{unit.platform.width:g}m {unit.platform.capacity_tons:g}t"
                if unit.platform
                else "-",
            )
            for unit in repo.list_units()
        ]
        headers = ("ID", "Label", "Type", "Platform")
    else:
        rows = [
            (
                attachment.id,
                attachment.kind.value,
                _fmt(attachment.capacity_tons, "t"),
                _fmt(attachment.length, "m"),
                _fmt(attachment.width, "m"),
            )
            for attachment in repo.list_attachments()
        ]
        headers = ("ID", "Kind", "Capacity", "Length", "Width")

    if rows:
        _print_table(headers, rows)
    else:
        print("No data available")
    repo.close()


def run_check(args: argparse.Namespace) -> None:
    repo = DataRepository(args.db)
    repo.initialize(args.seed)
    try:
        items = _load_items(repo, args.item)
        unit, attachments = _load_transport(repo, args)
    except (KeyError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc
    finally:
        repo.close()

    resolver = CapacityResolver()
    capacity = resolver.resolve(unit, attachments)
    result = resolver.precheck(items, capacity)
    if capacity is None:
        print("Missing capacity data: check skipped")
    if result.valid:
        print(f"Transfer allowed on {unit.label}")
        return
    print(f"Transfer rejected: {result.message}")
    raise SystemExit(1)


def run_layout(args: argparse.Namespace) -> None:
    repo = DataRepository(args.db)
    repo.initialize(args.seed)
    try:
        items = _load_items(repo, args.item)
        unit, attachments = _load_transport(repo, args)
        moves = [_parse_move(value) for value in args.move]
    except (KeyError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc
    finally:
        repo.close()

    capacity = CapacityResolver().resolve(unit, attachments)
    if capacity is None:
        # Without a surface there is nothing to place items on
        raise SystemExit(f"Missing capacity data for {unit.label}: select an attachment with dimensions")
    surface: LoadSurface = capacity.to_surface()

    commits: List[int] = []
    session = LayoutSession(
        surface,
        items,
        on_arrangement_changed=lambda placed: commits.append(len(placed)),
        read_only=args.read_only,
        allow_y_axis=args.allow_y,
        allow_rotation=args.allow_rotation,
    )

    if args.auto_arrange:
        session.auto_arrange()
    try:
        for item_id, x, y in moves:
            current = session.get(item_id)
            # Grab the item by its corner so the pointer lands on the target position
            if session.begin_drag(item_id, current.position_x, current.position_y):
                session.drag_to(x, current.position_y if y is None else y)
                session.end_drag()
        for item_id in args.rotate:
            if session.toggle_rotation(item_id) is None:
                print(f"Rotation of {item_id} ignored (rotation locked or read-only)")
    except KeyError as exc:
        raise SystemExit(str(exc)) from exc
    logger.info("Layout completed with %d commits", len(commits))

    print(surface.describe())
    rows = [
        (
            placed.id,
            placed.item.label,
            f"{placed.position_x:.2f}",
            f"{placed.position_y:.3f}",
            f"{placed.effective_length:.2f}x{placed.effective_width:.2f}",
            "yes" if placed.rotated else "no",
            f"{placed.weight:.0f}kg",
        )
        for placed in session.placements
    ]
    _print_table(("ID", "Equipment", "X (m)", "Y (m)", "Footprint", "Rotated", "Weight"), rows)

    analysis = session.analyze()
    print(f"Status: {analysis.validation.status.value}")
    for message in analysis.validation.messages:
        print(f"  - {message}")
    for line in build_status_summary(surface, analysis):
        print(f"{line.label}: {line.value}")
    if analysis.collisions:
        print("Collisions detected:")
        for collision in analysis.collisions:
            print(f"  - {collision.description}")
    else:
        print("No collisions detected")
    for overhang in analysis.out_of_bounds:
        print(f"  - {overhang.description}")

    if args.export:
        exporter = ArrangementExporter(args.export_dir)
        path = exporter.to_file(session, args.export)
        print(f"Arrangement exported to {path}")


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)
    if args.command == "layout":
        run_layout(args)
    elif args.command == "check":
        run_check(args)
    elif args.command == "catalog":
        run_catalog(args)


if __name__ == "__main__":  # pragma: no cover
    main()
