"""Core data types for time-limited modifiers."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ModifierKind(Enum):
    SPEED_BOOST = "SPEED_BOOST"
    BLIND = "BLIND"
    DOUBLE_CASH = "DOUBLE_CASH"
    MAGNET = "MAGNET"


@dataclass(frozen=True)
class ModifierDef:
    """Definition of a modifier. Not serialized."""

    kind: ModifierKind
    name: str
    duration_ms: float
    description: str = ""

    def __post_init__(self) -> None:
        if self.duration_ms <= 0:
            raise ValueError(f"duration_ms must be positive, got {self.duration_ms}")


@dataclass
class ActiveModifier:
    """Runtime state of one active modifier. Mutable, serializable."""

    kind: ModifierKind
    remaining_ms: float


POWER_UPS: tuple[ModifierDef, ...] = (
    ModifierDef(ModifierKind.SPEED_BOOST, "Speed Boost", 6000, "1.5x speed"),
    ModifierDef(ModifierKind.BLIND, "Cop Blind", 8000, "Cops can't see you"),
    ModifierDef(ModifierKind.DOUBLE_CASH, "Double Cash", 10000, "2x sale earnings"),
    ModifierDef(ModifierKind.MAGNET, "Magnet", 7000, "Auto-collect nearby items"),
)
