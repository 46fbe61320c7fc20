"""Drawable view model and status lines for a layout session."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .models import LoadSurface
from .session import LayoutAnalysis, LayoutSession


@dataclass(frozen=True)
class ItemGlyph:
    """Placed item projected on the 2D surface, in meters."""

    item_id: str
    label: str
    x: float
    y: float
    length: float
    width: float
    rotated: bool
    color: str
    colliding: bool
    overhanging: bool


@dataclass(frozen=True)
class SurfaceViewModel:
    surface_length: float
    surface_width: float
    center_of_gravity: tuple[float, float]
    items: list[ItemGlyph]


@dataclass(frozen=True)
class StatusLine:
    label: str
    value: str
    ok: bool


BRAND_COLORS = {
    "GENIE": "#1e40af",
    "JLG": "#b91c1c",
    "SKYJACK": "#ca8a04",
    "HAULOTTE": "#15803d",
    "SNORKEL": "#7c3aed",
}
DEFAULT_COLOR = "#6b7280"


def color_for_brand(brand: str) -> str:
    return BRAND_COLORS.get(brand.upper(), DEFAULT_COLOR)


def build_surface_view_model(session: LayoutSession, analysis: LayoutAnalysis | None = None) -> SurfaceViewModel:
    analysis = analysis or session.analyze()
    colliding = analysis.colliding_ids()
    overhanging = {entry.item_id for entry in analysis.out_of_bounds}
    glyphs: List[ItemGlyph] = []
    for placed in session.placements:
        glyphs.append(
            ItemGlyph(
                item_id=placed.id,
                label=placed.item.label,
                x=placed.position_x,
                y=placed.position_y,
                length=placed.effective_length,
                width=placed.effective_width,
                rotated=placed.rotated,
                color=color_for_brand(placed.brand),
                colliding=placed.id in colliding,
                overhanging=placed.id in overhanging,
            )
        )
    return SurfaceViewModel(
        surface_length=session.surface.length,
        surface_width=session.surface.width,
        center_of_gravity=analysis.balance.center_of_gravity,
        items=glyphs,
    )


def build_status_summary(surface: LoadSurface, analysis: LayoutAnalysis) -> List[StatusLine]:
    """One line per status indicator: weight, length, width, balance, collisions."""
    report = analysis.validation
    codes = {issue.code for issue in report.details}
    capacity = f"{surface.capacity_tons:g}" if surface.capacity_known else "?"
    lines = [
        StatusLine(
            "Weight",
            f"{report.total_weight_tons:.1f} / {capacity} ton",
            "weight_exceeded" not in codes,
        ),
        StatusLine(
            "Length",
            f"{report.occupied_length:.2f} / {surface.length:g} m",
            "length_exceeded" not in codes,
        ),
        StatusLine(
            "Width",
            f"{report.occupied_width:.2f} / {surface.width:g} m",
            "width_exceeded" not in codes,
        ),
        StatusLine("Balance", analysis.balance.describe(), analysis.balance.balanced),
    ]
    if analysis.collisions:
        lines.append(StatusLine("Collisions", str(len(analysis.collisions)), False))
    return lines
