"""ModifierLedger - the set of currently active modifiers."""
from __future__ import annotations

from typing import Any, Iterable

from streetheat.modifiers.types import POWER_UPS, ActiveModifier, ModifierDef, ModifierKind


class ModifierLedger:
    """Tracks active modifiers. At most one instance per kind.

    Re-activating a kind that is already running refreshes its remaining
    time to the new duration instead of stacking a second instance.
    """

    def __init__(self, definitions: Iterable[ModifierDef] = POWER_UPS) -> None:
        self._definitions: dict[ModifierKind, ModifierDef] = {}
        self._active: dict[ModifierKind, ActiveModifier] = {}
        for defn in definitions:
            self.define(defn)

    # --- Registration ---

    def define(self, modifier: ModifierDef) -> None:
        """Register or replace a modifier definition."""
        self._definitions[modifier.kind] = modifier

    def definition(self, kind: ModifierKind) -> ModifierDef | None:
        return self._definitions.get(kind)

    # --- Activation ---

    def activate(self, kind: ModifierKind, duration_ms: float | None = None) -> bool:
        """Start or refresh a modifier. Returns True for a fresh activation.

        Raises KeyError when no duration is given and the kind is undefined.
        """
        if duration_ms is None:
            duration_ms = self._definitions[kind].duration_ms
        existing = self._active.get(kind)
        if existing is not None:
            existing.remaining_ms = duration_ms
            return False
        self._active[kind] = ActiveModifier(kind=kind, remaining_ms=duration_ms)
        return True

    def decay(self, dt_ms: float) -> list[ModifierKind]:
        """Count down every active modifier. Returns the kinds that expired."""
        expired: list[ModifierKind] = []
        for kind, mod in list(self._active.items()):
            mod.remaining_ms -= dt_ms
            if mod.remaining_ms <= 0:
                del self._active[kind]
                expired.append(kind)
        return expired

    def clear(self) -> None:
        self._active.clear()

    # --- Queries ---

    def is_active(self, kind: ModifierKind) -> bool:
        return kind in self._active

    def remaining(self, kind: ModifierKind) -> float:
        """Remaining time of a modifier. 0 if not active."""
        mod = self._active.get(kind)
        return mod.remaining_ms if mod is not None else 0.0

    def active(self) -> list[ActiveModifier]:
        """Active modifiers in activation order."""
        return list(self._active.values())

    def __len__(self) -> int:
        return len(self._active)

    # --- Serialization ---

    def snapshot(self) -> dict[str, Any]:
        """Serialize runtime state (not definitions)."""
        return {
            "active": [
                {"kind": m.kind.value, "remaining_ms": m.remaining_ms}
                for m in self._active.values()
            ],
        }

    def restore(self, data: dict[str, Any]) -> None:
        self._active.clear()
        for mod_data in data.get("active", []):
            kind = ModifierKind(mod_data["kind"])
            self._active[kind] = ActiveModifier(kind=kind, remaining_ms=mod_data["remaining_ms"])
