"""Mapping between canvas pixels and surface meters."""
from __future__ import annotations

from typing import Tuple

PIXELS_PER_METER = 80.0
PADDING = 60.0
RULER_ALLOWANCE = 50.0
AVAILABLE_WIDTH = 1400.0
MIN_ZOOM = 0.3
MAX_ZOOM = 2.0
ZOOM_STEP = 0.1


class ViewScale:
    """Zoom state for drawing a surface; never touches the geometry model."""

    def __init__(
        self,
        surface_length: float,
        *,
        pixels_per_meter: float = PIXELS_PER_METER,
        padding: float = PADDING,
        available_width: float = AVAILABLE_WIDTH,
    ) -> None:
        self.pixels_per_meter = pixels_per_meter
        self.padding = padding
        self.available_width = available_width
        self.surface_length = surface_length
        self.zoom = self.fit_zoom()

    def fit_zoom(self) -> float:
        """Zoom that fits the whole surface length in the available width."""
        needed = self.surface_length * self.pixels_per_meter + self.padding * 2 + RULER_ALLOWANCE
        return max(MIN_ZOOM, min(1.0, self.available_width / needed))

    def set_surface_length(self, surface_length: float) -> None:
        self.surface_length = surface_length
        self.zoom = self.fit_zoom()

    def zoom_in(self) -> float:
        self.zoom = min(MAX_ZOOM, self.zoom + ZOOM_STEP)
        return self.zoom

    def zoom_out(self) -> float:
        self.zoom = max(MIN_ZOOM, self.zoom - ZOOM_STEP)
        return self.zoom

    def reset(self) -> float:
        self.zoom = self.fit_zoom()
        return self.zoom

    @property
    def scale(self) -> float:
        return self.pixels_per_meter * self.zoom

    def to_surface(self, px: float, py: float) -> Tuple[float, float]:
        """Canvas pixels (relative to the canvas origin) to surface meters."""
        return (px - self.padding) / self.scale, (py - self.padding) / self.scale

    def to_pixels(self, x: float, y: float) -> Tuple[float, float]:
        return self.padding + x * self.scale, self.padding + y * self.scale

    def canvas_size(self, surface_width: float) -> Tuple[float, float]:
        width = self.surface_length * self.scale + self.padding * 2 + RULER_ALLOWANCE
        height = surface_width * self.scale + self.padding * 2 + 40
        return width, height
