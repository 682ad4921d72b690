"""Discrete simulation events handed to presentation collaborators."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any

ITEM_COLLECTED = "item_collected"
STASH_COLLECTED = "stash_collected"
SALE_COMPLETED = "sale_completed"
POWER_UP_COLLECTED = "power_up_collected"
MODIFIER_ACTIVATED = "modifier_activated"
MODIFIER_REFRESHED = "modifier_refreshed"
MODIFIER_EXPIRED = "modifier_expired"
HIGH_STARTED = "high_started"
HIGH_ENDED = "high_ended"
PHASE_CHANGED = "phase_changed"
OFFICER_DEPLOYED = "officer_deployed"
PURSUIT_ANNOUNCED = "pursuit_announced"
KNOCKOUT = "knockout"
GETAWAY = "getaway"
CONFRONTATION_TRIGGERED = "confrontation_triggered"
CONFRONTATION_WON = "confrontation_won"
CAPTURED = "captured"
DAY_COMPLETE = "day_complete"
GAME_OVER = "game_over"


@dataclass(frozen=True)
class Event:
    tick: int
    type: str
    data: dict[str, Any]


class EventLog:
    """Append-only record of a day's events.

    A running cursor counts every emit, evicted or not, so the engine can
    hand each tick exactly the events it produced via :meth:`mark` and
    :meth:`since`.
    """

    def __init__(self, max_entries: int = 0) -> None:
        self._events: deque[Event] = deque(maxlen=max_entries or None)
        self._cursor = 0

    def emit(self, tick: int, type: str, **data: Any) -> Event:
        event = Event(tick=tick, type=type, data=data)
        self._events.append(event)
        self._cursor += 1
        return event

    def query(self, *types: str) -> list[Event]:
        """Retained events of any of ``types``, oldest first. All when empty."""
        if not types:
            return list(self._events)
        return [e for e in self._events if e.type in types]

    def count(self, type: str) -> int:
        return sum(1 for e in self._events if e.type == type)

    def last(self, type: str) -> Event | None:
        return next((e for e in reversed(self._events) if e.type == type), None)

    def mark(self) -> int:
        """Return a cursor for :meth:`since`."""
        return self._cursor

    def since(self, mark: int) -> list[Event]:
        """Events emitted after ``mark`` that are still retained."""
        count = min(self._cursor - mark, len(self._events))
        if count <= 0:
            return []
        return list(self._events)[-count:]

    # --- Persistence ---

    def snapshot(self) -> dict[str, Any]:
        return {
            "cursor": self._cursor,
            "events": [[e.tick, e.type, dict(e.data)] for e in self._events],
        }

    def restore(self, data: dict[str, Any]) -> None:
        """Replace the log with a snapshot; marks taken before it stay valid."""
        self._events.clear()
        self._events.extend(Event(tick, type, dict(payload)) for tick, type, payload in data["events"])
        self._cursor = data["cursor"]

    def __len__(self) -> int:
        return len(self._events)
