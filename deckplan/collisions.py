"""Collision detection between placed items."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Set

from .models import LoadSurface, PlacedItem


@dataclass(frozen=True)
class Collision:
    first_id: str
    second_id: str
    description: str

    @property
    def ids(self) -> frozenset[str]:
        return frozenset((self.first_id, self.second_id))


@dataclass(frozen=True)
class Overhang:
    item_id: str
    description: str


class CollisionChecker:
    """Flag overlapping footprints. Nothing here moves an item."""

    def __init__(self, clearance: float = 0.0):
        self.clearance = clearance

    def find_collisions(self, items: Sequence[PlacedItem]) -> List[Collision]:
        collisions: List[Collision] = []
        for i, first in enumerate(items):
            for second in items[i + 1 :]:
                if self.overlap(first, second):
                    collisions.append(
                        Collision(
                            first.id,
                            second.id,
                            f"Collision between {first.id} and {second.id}",
                        )
                    )
        return collisions

    def colliding_ids(self, items: Sequence[PlacedItem]) -> Set[str]:
        return {item_id for collision in self.find_collisions(items) for item_id in collision.ids}

    def overlap(self, a: PlacedItem, b: PlacedItem) -> bool:
        a_x1, a_y1, a_x2, a_y2 = a.footprint()
        b_x1, b_y1, b_x2, b_y2 = b.footprint()
        x_overlap = a_x1 < b_x2 - self.clearance and a_x2 - self.clearance > b_x1
        y_overlap = a_y1 < b_y2 - self.clearance and a_y2 - self.clearance > b_y1
        return x_overlap and y_overlap

    def out_of_bounds(self, items: Iterable[PlacedItem], surface: LoadSurface) -> List[Overhang]:
        overhangs: List[Overhang] = []
        for placed in items:
            x_min, y_min, x_max, y_max = placed.footprint()
            if x_min < 0 or x_max > surface.length:
                overhangs.append(Overhang(placed.id, f"Item {placed.id} exceeds surface length limits"))
            if y_min < 0 or y_max > surface.width:
                overhangs.append(Overhang(placed.id, f"Item {placed.id} exceeds surface width limits"))
        return overhangs
