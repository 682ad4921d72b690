"""Per-day state containers shared by every system."""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from streetheat.events import EventLog
from streetheat.modifiers.ledger import ModifierLedger
from streetheat.motion import Mover
from streetheat.types import Direction, Phase, Route

if TYPE_CHECKING:
    from streetheat.config import SimConfig
    from streetheat.economy.components import Collectible, Customer, PowerUpPickup, StashPickup
    from streetheat.maze import Maze
    from streetheat.police.components import Officer
    from streetheat.session import Session


@dataclass
class Player:
    mover: Mover
    base_speed: float
    queued: Direction = Direction.NONE
    inventory: int = 0
    stash: int = 0
    high_remaining_ms: float = 0.0

    @property
    def is_high(self) -> bool:
        return self.high_remaining_ms > 0


@dataclass
class DayState:
    """Phase, timers and the outcome of the current day.

    ``active`` goes False when the day freezes (confrontation pending) or
    ends. ``route`` names who takes over once it is False.
    """

    phase: Phase = Phase.COLLECTING
    phase_remaining_ms: float = 0.0
    heat: float = 0.0
    active: bool = True
    pending_confrontation: bool = False
    confronting_officer: int | None = None
    route: Route = Route.NONE


@dataclass
class PlayerInput:
    direction: Direction = Direction.NONE
    use_stash: bool = False


@dataclass
class Day:
    """Everything one day of simulation reads and writes."""

    session: Session
    maze: Maze
    config: SimConfig
    player: Player
    state: DayState
    rng: random.Random
    officers: list[Officer] = field(default_factory=list)
    items: list[Collectible] = field(default_factory=list)
    customers: list[Customer] = field(default_factory=list)
    stash_pickups: list[StashPickup] = field(default_factory=list)
    power_ups: list[PowerUpPickup] = field(default_factory=list)
    ledger: ModifierLedger = field(default_factory=ModifierLedger)
    events: EventLog = field(default_factory=EventLog)
    input: PlayerInput = field(default_factory=PlayerInput)
