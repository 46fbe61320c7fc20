"""Sequential placement of cargo items along the surface."""
from __future__ import annotations

import logging
from typing import List, Sequence

from .models import MIN_SPACING, CargoItem, LoadSurface, PlacedItem

logger = logging.getLogger(__name__)


class SequentialPlanner:
    """Queue items along the long axis, centered across the width.

    Positions are not clamped: a queue longer than the surface stays as it is
    and is reported by the validator.
    """

    def __init__(self, spacing: float = MIN_SPACING):
        self.spacing = spacing

    def place(self, items: Sequence[CargoItem], surface: LoadSurface) -> List[PlacedItem]:
        placements: List[PlacedItem] = []
        cursor = self.spacing
        for item in items:
            placed = PlacedItem(
                item=item,
                position_x=cursor,
                position_y=(surface.width - item.dimensions.width) / 2,
                rotated=False,
            )
            placements.append(placed)
            cursor += placed.effective_length + self.spacing
        logger.debug("Placed %d items sequentially, queue ends at %.2f m", len(placements), cursor)
        return placements

    def auto_arrange(self, placed: Sequence[PlacedItem], surface: LoadSurface) -> List[PlacedItem]:
        """Heaviest first, rotation reset, then the sequential rule."""
        ordered = sorted((entry.item for entry in placed), key=lambda item: item.weight, reverse=True)
        return self.place(ordered, surface)
