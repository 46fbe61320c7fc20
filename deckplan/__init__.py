"""DeckPlan cargo load layout and validation toolkit."""

from .balance import BalanceReport, center_of_gravity, compute_balance
from .capacity import (
    Attachment,
    AttachmentKind,
    CapacityResolver,
    PlatformSpec,
    ResolvedCapacity,
    TransferCheck,
    TransportUnit,
    UnitType,
)
from .collisions import Collision, CollisionChecker, Overhang
from .exporter import ArrangementExporter
from .models import (
    BALANCE_THRESHOLD_PCT,
    LENGTH_WARNING_RATIO,
    MIN_SPACING,
    WEIGHT_WARNING_RATIO,
    WIDTH_WARNING_RATIO,
    CargoItem,
    Dimensions,
    EquipmentSpec,
    LoadSurface,
    PlacedItem,
    effective_dimensions,
)
from .planner import SequentialPlanner
from .repository import DataRepository
from .session import LayoutAnalysis, LayoutSession, SessionState
from .validation import (
    LoadValidator,
    ValidationIssue,
    ValidationReport,
    ValidationStatus,
    occupied_length,
    occupied_width,
    total_weight_tons,
)
from .viewport import ViewScale

__all__ = [
    "Attachment",
    "AttachmentKind",
    "ArrangementExporter",
    "BalanceReport",
    "CapacityResolver",
    "CargoItem",
    "Collision",
    "CollisionChecker",
    "DataRepository",
    "Dimensions",
    "EquipmentSpec",
    "LayoutAnalysis",
    "LayoutSession",
    "LoadSurface",
    "LoadValidator",
    "Overhang",
    "PlacedItem",
    "PlatformSpec",
    "ResolvedCapacity",
    "SequentialPlanner",
    "SessionState",
    "TransferCheck",
    "TransportUnit",
    "UnitType",
    "ValidationIssue",
    "ValidationReport",
    "ValidationStatus",
    "ViewScale",
    "center_of_gravity",
    "compute_balance",
    "effective_dimensions",
    "occupied_length",
    "occupied_width",
    "total_weight_tons",
    "MIN_SPACING",
    "WEIGHT_WARNING_RATIO",
    "LENGTH_WARNING_RATIO",
    "WIDTH_WARNING_RATIO",
    "BALANCE_THRESHOLD_PCT",
]
