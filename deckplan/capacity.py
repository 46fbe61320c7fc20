"""Resolve the active load surface for a transport configuration."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .models import CargoItem, LoadSurface


class UnitType(str, Enum):
    ROLL_OFF = "roll_off"
    TRACTOR = "tractor"


class AttachmentKind(str, Enum):
    LOWBOY = "lowboy"
    ROLL_OFF_PLATFORM = "rolloff-platform"
    LOWBED = "lowbed"
    OTHER = "other"


@dataclass(frozen=True)
class PlatformSpec:
    length: float
    width: float
    capacity_tons: float


@dataclass(frozen=True)
class TransportUnit:
    id: str
    label: str
    unit_type: UnitType
    platform: PlatformSpec | None = None

    @property
    def has_platform(self) -> bool:
        return self.unit_type == UnitType.ROLL_OFF and self.platform is not None

    @property
    def requires_attachment(self) -> bool:
        return self.unit_type == UnitType.TRACTOR


@dataclass(frozen=True)
class Attachment:
    id: str
    economic_number: str
    kind: AttachmentKind
    capacity_tons: float | None = None
    length: float | None = None
    width: float | None = None

    @property
    def label(self) -> str:
        return f"{self.kind.value} {self.economic_number}"


@dataclass(frozen=True)
class ResolvedCapacity:
    capacity_tons: float
    length: float
    width: float
    transport_label: str

    def to_surface(self) -> LoadSurface:
        return LoadSurface(
            length=self.length,
            width=self.width,
            capacity_tons=self.capacity_tons,
            name=self.transport_label,
        )


@dataclass(frozen=True)
class TransferCheck:
    valid: bool
    message: str = ""


class CapacityResolver:
    """Pick the surface that applies to a unit and its selected attachments."""

    def resolve(
        self,
        unit: TransportUnit | None,
        attachments: Sequence[Attachment] = (),
    ) -> ResolvedCapacity | None:
        """Return the active capacity, or ``None`` when no data is available.

        A roll-off unit with an integral platform uses the platform data. A
        tractor uses the first selected attachment. Anything else, including an
        attachment without length or width, is unresolved.
        """
        if unit is None:
            return None
        if unit.has_platform:
            platform = unit.platform
            return ResolvedCapacity(
                capacity_tons=platform.capacity_tons,
                length=platform.length,
                width=platform.width,
                transport_label=unit.label,
            )
        if unit.requires_attachment and attachments:
            attachment = attachments[0]
            if not attachment.length or not attachment.width:
                return None
            return ResolvedCapacity(
                capacity_tons=attachment.capacity_tons or 0.0,
                length=attachment.length,
                width=attachment.width,
                transport_label=f"{unit.label} + {attachment.label}",
            )
        return None

    def precheck(
        self,
        items: Sequence[CargoItem],
        capacity: ResolvedCapacity | None,
    ) -> TransferCheck:
        """Quick check used before an arrangement exists.

        Items are assumed end to end: the lengths are summed and the widest
        item is compared against the surface width. Only the first exceeded
        limit is reported.
        """
        if not items or capacity is None:
            return TransferCheck(True)
        if capacity.capacity_tons <= 0 and capacity.length <= 0 and capacity.width <= 0:
            return TransferCheck(True)

        weight_tons = sum(item.weight for item in items) / 1000
        total_length = sum(item.dimensions.length for item in items)
        widest = max(item.dimensions.width for item in items)

        if capacity.capacity_tons > 0 and weight_tons > capacity.capacity_tons:
            return TransferCheck(
                False,
                f"Weight exceeded: {weight_tons:.1f} t > {capacity.capacity_tons:g} t capacity",
            )
        if capacity.length > 0 and total_length > capacity.length:
            return TransferCheck(
                False,
                f"Length exceeded: {total_length:.2f} m > {capacity.length:g} m available",
            )
        if capacity.width > 0 and widest > capacity.width:
            return TransferCheck(
                False,
                f"Width exceeded: {widest:.2f} m > {capacity.width:g} m available",
            )
        return TransferCheck(True)
