"""Capacity validation for an arrangement of placed items."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Sequence

from .models import (
    LENGTH_WARNING_RATIO,
    WEIGHT_WARNING_RATIO,
    WIDTH_WARNING_RATIO,
    LoadSurface,
    PlacedItem,
)


class ValidationStatus(str, Enum):
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class ValidationIssue:
    """One detail line. ``actual`` and ``limit`` are the compared values."""

    severity: ValidationStatus
    code: str
    message: str
    actual: float | None = None
    limit: float | None = None


@dataclass(frozen=True)
class ValidationReport:
    status: ValidationStatus
    total_weight_tons: float
    occupied_length: float
    occupied_width: float
    details: List[ValidationIssue] = field(default_factory=list)

    @property
    def messages(self) -> List[str]:
        return [issue.message for issue in self.details]

    def has_errors(self) -> bool:
        return self.status == ValidationStatus.ERROR


def total_weight_tons(items: Iterable[PlacedItem]) -> float:
    return sum(placed.weight for placed in items) / 1000


def occupied_length(items: Iterable[PlacedItem]) -> float:
    return max((placed.position_x + placed.effective_length for placed in items), default=0.0)


def occupied_width(items: Sequence[PlacedItem]) -> float:
    """Widest union of Y-spans over every slice of the X axis.

    Items sitting side by side along the short axis add up, while items
    queued one behind the other only count their own width.
    """
    if not items:
        return 0.0
    spans = [(placed, placed.footprint()) for placed in items]
    breakpoints = sorted({bound for _, (x_min, _, x_max, _) in spans for bound in (x_min, x_max)})

    widest = 0.0
    for start, end in zip(breakpoints, breakpoints[1:]):
        midpoint = (start + end) / 2
        covering = [fp for _, fp in spans if fp[0] <= midpoint < fp[2]]
        if not covering:
            continue
        span = max(fp[3] for fp in covering) - min(fp[1] for fp in covering)
        widest = max(widest, span)
    return widest


class LoadValidator:
    """Compare weight, length and occupied width against the surface limits."""

    def __init__(
        self,
        weight_warning_ratio: float = WEIGHT_WARNING_RATIO,
        length_warning_ratio: float = LENGTH_WARNING_RATIO,
        width_warning_ratio: float = WIDTH_WARNING_RATIO,
    ) -> None:
        self.weight_warning_ratio = weight_warning_ratio
        self.length_warning_ratio = length_warning_ratio
        self.width_warning_ratio = width_warning_ratio

    def validate(self, items: Sequence[PlacedItem], surface: LoadSurface | None) -> ValidationReport:
        weight = total_weight_tons(items)
        length = occupied_length(items)
        width = occupied_width(items)

        if not items:
            return ValidationReport(
                status=ValidationStatus.OK,
                total_weight_tons=0.0,
                occupied_length=0.0,
                occupied_width=0.0,
                details=[ValidationIssue(ValidationStatus.OK, "empty", "No cargo to validate")],
            )

        if surface is None:
            return ValidationReport(
                status=ValidationStatus.WARNING,
                total_weight_tons=weight,
                occupied_length=length,
                occupied_width=width,
                details=[
                    ValidationIssue(
                        ValidationStatus.WARNING,
                        "capacity_unresolved",
                        "Missing capacity data: select a unit with a platform or an attachment "
                        f"with dimensions ({weight:.1f} t, {length:.2f} x {width:.2f} m loaded)",
                    )
                ],
            )

        details: List[ValidationIssue] = []
        details.extend(self._check_weight(weight, surface))
        details.extend(self._check_length(length, surface))
        details.extend(self._check_width(width, surface))

        severities = {issue.severity for issue in details}
        if ValidationStatus.ERROR in severities:
            status = ValidationStatus.ERROR
        elif ValidationStatus.WARNING in severities:
            status = ValidationStatus.WARNING
        else:
            status = ValidationStatus.OK
            details.append(
                ValidationIssue(
                    ValidationStatus.OK,
                    "within_limits",
                    f"Load within limits: {weight:.1f} / {surface.capacity_tons:g} t, "
                    f"{length:.2f} x {width:.2f} m on {surface.length:g} x {surface.width:g} m",
                )
            )
        return ValidationReport(
            status=status,
            total_weight_tons=weight,
            occupied_length=length,
            occupied_width=width,
            details=details,
        )

    def _check_weight(self, weight: float, surface: LoadSurface) -> Iterable[ValidationIssue]:
        capacity = surface.capacity_tons
        if not surface.capacity_known:
            yield ValidationIssue(
                ValidationStatus.WARNING,
                "capacity_unknown",
                f"Capacity unknown for {surface.name or 'surface'}: {weight:.1f} t not checked",
                actual=weight,
            )
        elif weight > capacity:
            yield ValidationIssue(
                ValidationStatus.ERROR,
                "weight_exceeded",
                f"Total weight exceeds capacity ({weight:.1f} t > {capacity:g} t)",
                actual=weight,
                limit=capacity,
            )
        elif weight > capacity * self.weight_warning_ratio:
            yield ValidationIssue(
                ValidationStatus.WARNING,
                "weight_near_limit",
                f"Total weight close to capacity ({weight:.1f} t of {capacity:g} t, "
                f"above {self.weight_warning_ratio:.0%})",
                actual=weight,
                limit=capacity,
            )

    def _check_length(self, length: float, surface: LoadSurface) -> Iterable[ValidationIssue]:
        if length > surface.length:
            yield ValidationIssue(
                ValidationStatus.ERROR,
                "length_exceeded",
                f"Occupied length exceeds the surface ({length:.2f} m > {surface.length:g} m)",
                actual=length,
                limit=surface.length,
            )
        elif length > surface.length * self.length_warning_ratio:
            yield ValidationIssue(
                ValidationStatus.WARNING,
                "length_near_limit",
                f"Occupied length close to the limit ({length:.2f} m of {surface.length:g} m, "
                f"above {self.length_warning_ratio:.0%})",
                actual=length,
                limit=surface.length,
            )

    def _check_width(self, width: float, surface: LoadSurface) -> Iterable[ValidationIssue]:
        if width > surface.width:
            yield ValidationIssue(
                ValidationStatus.ERROR,
                "width_exceeded",
                f"Occupied width exceeds the surface ({width:.2f} m > {surface.width:g} m)",
                actual=width,
                limit=surface.width,
            )
        elif width > surface.width * self.width_warning_ratio:
            yield ValidationIssue(
                ValidationStatus.WARNING,
                "width_near_limit",
                f"Occupied width close to the limit ({width:.2f} m of {surface.width:g} m, "
                f"above {self.width_warning_ratio:.0%})",
                actual=width,
                limit=surface.width,
            )
