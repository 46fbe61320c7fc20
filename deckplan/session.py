"""Interactive editing session for one load surface."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Sequence, Tuple

from .balance import BalanceReport, compute_balance
from .collisions import Collision, CollisionChecker, Overhang
from .models import CargoItem, LoadSurface, PlacedItem, effective_dimensions
from .planner import SequentialPlanner
from .validation import LoadValidator, ValidationReport

logger = logging.getLogger(__name__)

ArrangementCallback = Callable[[List[PlacedItem]], None]


class SessionState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class LayoutAnalysis:
    validation: ValidationReport
    collisions: List[Collision]
    balance: BalanceReport
    out_of_bounds: List[Overhang]

    def colliding_ids(self) -> set[str]:
        return {item_id for collision in self.collisions for item_id in collision.ids}


class LayoutSession:
    """Owns the placed items of one editing session.

    Pointer coordinates are surface-space meters; mapping from canvas pixels
    is done by :class:`deckplan.viewport.ViewScale`. Every discrete gesture
    (drag release, rotation toggle, auto-arrange) ends with exactly one
    :meth:`commit`.
    """

    def __init__(
        self,
        surface: LoadSurface,
        items: Sequence[CargoItem] = (),
        *,
        on_arrangement_changed: ArrangementCallback | None = None,
        read_only: bool = False,
        allow_y_axis: bool = False,
        allow_rotation: bool = False,
        planner: SequentialPlanner | None = None,
        validator: LoadValidator | None = None,
        collision_checker: CollisionChecker | None = None,
        capacity_resolved: bool = True,
    ) -> None:
        self.surface = surface
        self.on_arrangement_changed = on_arrangement_changed
        self.read_only = read_only
        self.allow_y_axis = allow_y_axis
        self.allow_rotation = allow_rotation
        self.capacity_resolved = capacity_resolved
        self.planner = planner or SequentialPlanner()
        self.validator = validator or LoadValidator()
        self.collision_checker = collision_checker or CollisionChecker()
        self.state = SessionState.IDLE
        self._dragged_id: str | None = None
        self._drag_offset: Tuple[float, float] = (0.0, 0.0)
        self._placements: List[PlacedItem] = []
        self.load_items(items)

    @property
    def placements(self) -> List[PlacedItem]:
        """Copies of the current arrangement."""
        return [replace(placed) for placed in self._placements]

    @property
    def dragged_id(self) -> str | None:
        return self._dragged_id

    def get(self, item_id: str) -> PlacedItem:
        return replace(self._find(item_id))

    def load_items(self, items: Sequence[CargoItem]) -> None:
        """Reset the arrangement to sequential placement of ``items``."""
        self._placements = self.planner.place(items, self.surface)
        self._reset_drag()
        logger.debug("Session initialized with %d items on %s", len(self._placements), self.surface.name)

    def set_surface(self, surface: LoadSurface, *, capacity_resolved: bool = True) -> None:
        self.surface = surface
        self.capacity_resolved = capacity_resolved

    def begin_drag(self, item_id: str, pointer_x: float, pointer_y: float) -> bool:
        if self.read_only:
            return False
        placed = self._find(item_id)
        self._dragged_id = item_id
        self._drag_offset = (pointer_x - placed.position_x, pointer_y - placed.position_y)
        self.state = SessionState.DRAGGING
        logger.debug("Drag started on %s", item_id)
        return True

    def drag_to(self, pointer_x: float, pointer_y: float) -> PlacedItem | None:
        if self.state != SessionState.DRAGGING or self.read_only or self._dragged_id is None:
            return None
        placed = self._find(self._dragged_id)
        length, width = effective_dimensions(placed)
        candidate_x = pointer_x - self._drag_offset[0]
        candidate_y = pointer_y - self._drag_offset[1]

        new_x = max(0.0, min(self.surface.length - length, candidate_x))
        new_y = placed.position_y
        if self.allow_y_axis:
            new_y = max(0.0, min(self.surface.width - width, candidate_y))

        moved = replace(placed, position_x=new_x, position_y=new_y)
        self._replace(moved)
        return replace(moved)

    def end_drag(self) -> List[PlacedItem] | None:
        """Pointer released or left the canvas."""
        if self.state != SessionState.DRAGGING:
            return None
        item_id = self._dragged_id
        self._reset_drag()
        logger.debug("Drag released on %s", item_id)
        return self.commit()

    def toggle_rotation(self, item_id: str) -> List[PlacedItem] | None:
        if not self.allow_rotation or self.read_only:
            return None
        placed = self._find(item_id)
        rotated = replace(placed, rotated=not placed.rotated)
        length, width = effective_dimensions(rotated)
        rotated.position_x = _shift_inside(rotated.position_x, length, self.surface.length)
        rotated.position_y = _shift_inside(rotated.position_y, width, self.surface.width)
        self._replace(rotated)
        logger.debug("Rotated %s (rotated=%s)", item_id, rotated.rotated)
        return self.commit()

    def auto_arrange(self) -> List[PlacedItem] | None:
        if self.read_only:
            return None
        self._reset_drag()
        self._placements = self.planner.auto_arrange(self._placements, self.surface)
        logger.debug("Auto-arranged %d items", len(self._placements))
        return self.commit()

    def commit(self) -> List[PlacedItem]:
        """Hand a consistent copy of the arrangement to the caller."""
        snapshot = self.placements
        if self.on_arrangement_changed is not None:
            self.on_arrangement_changed(snapshot)
        logger.debug("Committed arrangement of %d items", len(snapshot))
        return self.placements

    def analyze(self) -> LayoutAnalysis:
        items = self._placements
        surface = self.surface if self.capacity_resolved else None
        return LayoutAnalysis(
            validation=self.validator.validate(items, surface),
            collisions=self.collision_checker.find_collisions(items),
            balance=compute_balance(items, self.surface),
            out_of_bounds=self.collision_checker.out_of_bounds(items, self.surface),
        )

    def _find(self, item_id: str) -> PlacedItem:
        for placed in self._placements:
            if placed.id == item_id:
                return placed
        raise KeyError(f"Item {item_id} not found")

    def _replace(self, updated: PlacedItem) -> None:
        self._placements = [updated if placed.id == updated.id else placed for placed in self._placements]

    def _reset_drag(self) -> None:
        self.state = SessionState.IDLE
        self._dragged_id = None
        self._drag_offset = (0.0, 0.0)


def _shift_inside(position: float, size: float, limit: float) -> float:
    if position + size > limit:
        position = limit - size
    return max(0.0, position)
