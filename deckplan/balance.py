"""Center of gravity and balance classification."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .models import BALANCE_THRESHOLD_PCT, LoadSurface, PlacedItem


@dataclass(frozen=True)
class BalanceReport:
    """Weighted center of gravity and its offset from the surface center."""

    center_of_gravity: Tuple[float, float]
    offset_x_pct: float
    offset_y_pct: float
    balanced: bool
    total_weight: float

    def describe(self) -> str:
        if self.balanced:
            return "OK"
        return f"X:{self.offset_x_pct:.0f}% Y:{self.offset_y_pct:.0f}%"


def center_of_gravity(items: Iterable[PlacedItem], surface: LoadSurface) -> Tuple[float, float]:
    cog, _ = _accumulate(items, surface)
    return cog


def compute_balance(
    items: Iterable[PlacedItem],
    surface: LoadSurface,
    threshold_pct: float = BALANCE_THRESHOLD_PCT,
) -> BalanceReport:
    (cog_x, cog_y), total_weight = _accumulate(items, surface)
    half_length, half_width = surface.center
    offset_x = abs(cog_x - half_length) / half_length * 100
    offset_y = abs(cog_y - half_width) / half_width * 100
    return BalanceReport(
        center_of_gravity=(cog_x, cog_y),
        offset_x_pct=offset_x,
        offset_y_pct=offset_y,
        balanced=offset_x < threshold_pct and offset_y < threshold_pct,
        total_weight=total_weight,
    )


def _accumulate(items: Iterable[PlacedItem], surface: LoadSurface) -> tuple[Tuple[float, float], float]:
    items = list(items)
    total_weight = sum(placed.weight for placed in items)
    if total_weight <= 0:
        # Empty deck: fall back to the geometric center
        return surface.center, 0.0

    cog_x = 0.0
    cog_y = 0.0
    for placed in items:
        share = placed.weight / total_weight
        center_x, center_y = placed.center()
        cog_x += center_x * share
        cog_y += center_y * share
    return (cog_x, cog_y), total_weight
