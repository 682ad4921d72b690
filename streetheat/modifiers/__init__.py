"""Time-limited modifiers granted by power-up pickups."""
from __future__ import annotations

from streetheat.modifiers.types import POWER_UPS, ActiveModifier, ModifierDef, ModifierKind
from streetheat.modifiers.ledger import ModifierLedger

__all__ = [
    "ModifierKind",
    "ModifierDef",
    "ActiveModifier",
    "POWER_UPS",
    "ModifierLedger",
]
