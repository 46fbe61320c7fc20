"""Domain models for DeckPlan."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

MIN_SPACING = 0.1
WEIGHT_WARNING_RATIO = 0.90
LENGTH_WARNING_RATIO = 0.95
WIDTH_WARNING_RATIO = 0.95
BALANCE_THRESHOLD_PCT = 20.0


@dataclass(frozen=True)
class Dimensions:
    length: float
    width: float
    height: float


@dataclass(frozen=True)
class LoadSurface:
    """Rectangular transport deck, in meters, with its payload capacity in tons."""

    length: float
    width: float
    capacity_tons: float
    name: str = ""

    @property
    def capacity_known(self) -> bool:
        return self.capacity_tons > 0

    @property
    def center(self) -> Tuple[float, float]:
        return self.length / 2, self.width / 2

    def describe(self) -> str:
        return f"{self.name} - {self.length:g}m x {self.width:g}m - {self.capacity_tons:g} ton"


@dataclass(frozen=True)
class CargoItem:
    id: str
    brand: str
    model: str
    category: str
    dimensions: Dimensions
    weight: float
    serial_number: str | None = None
    economic_number: str | None = None
    notes: str | None = None

    @property
    def label(self) -> str:
        return f"{self.brand} {self.model}"


@dataclass(frozen=True)
class EquipmentSpec:
    """Catalog entry for an equipment model."""

    model: str
    brand: str
    category: str
    dimensions: Dimensions
    weight: float

    def to_cargo_item(
        self,
        item_id: str,
        *,
        serial_number: str | None = None,
        economic_number: str | None = None,
    ) -> CargoItem:
        return CargoItem(
            id=item_id,
            brand=self.brand,
            model=self.model,
            category=self.category,
            dimensions=self.dimensions,
            weight=self.weight,
            serial_number=serial_number,
            economic_number=economic_number,
        )


@dataclass
class PlacedItem:
    """A cargo item with its position on the surface and rotation state."""

    item: CargoItem
    position_x: float
    position_y: float
    rotated: bool = False

    @property
    def id(self) -> str:
        return self.item.id

    @property
    def weight(self) -> float:
        return self.item.weight

    @property
    def brand(self) -> str:
        return self.item.brand

    @property
    def model(self) -> str:
        return self.item.model

    @property
    def category(self) -> str:
        return self.item.category

    @property
    def dimensions(self) -> Dimensions:
        return self.item.dimensions

    @property
    def effective_length(self) -> float:
        return effective_dimensions(self)[0]

    @property
    def effective_width(self) -> float:
        return effective_dimensions(self)[1]

    def footprint(self) -> Tuple[float, float, float, float]:
        """Return ``(x_min, y_min, x_max, y_max)`` of the effective footprint."""
        length, width = effective_dimensions(self)
        return (
            self.position_x,
            self.position_y,
            self.position_x + length,
            self.position_y + width,
        )

    def center(self) -> Tuple[float, float]:
        length, width = effective_dimensions(self)
        return self.position_x + length / 2, self.position_y + width / 2


def effective_dimensions(placed: PlacedItem) -> Tuple[float, float]:
    """Return the ``(length, width)`` footprint after applying the rotation."""
    dims = placed.item.dimensions
    if placed.rotated:
        return dims.width, dims.length
    return dims.length, dims.width


def ensure_positive(value: float, *, name: str) -> float:
    if value <= 0:
        raise ValueError(f"{name} must be positive")
    return value
