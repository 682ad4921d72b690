"""DaySimulation - per-tick pipeline and the outer API of one day."""
from __future__ import annotations

import logging
import os
import random
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable

from streetheat import events
from streetheat.builder import build_day
from streetheat.clock import FrameClock
from streetheat.config import SimConfig
from streetheat.cycle import make_phase_system
from streetheat.day import Day, PlayerInput
from streetheat.economy.resolution import capture
from streetheat.economy.systems import make_contact_system, make_heat_system
from streetheat.events import Event, EventLog
from streetheat.maze import Maze
from streetheat.modifiers.systems import make_modifier_system
from streetheat.modifiers.types import ActiveModifier
from streetheat.player import make_player_system
from streetheat.police.components import Officer
from streetheat.police.systems import is_disguised, make_police_system
from streetheat.session import Session
from streetheat.types import (
    Coord,
    DayInactiveError,
    Direction,
    Phase,
    Route,
    StreetHeatError,
    TickContext,
)

logger = logging.getLogger(__name__)

DaySystem = Callable[[Day, TickContext], None]


@dataclass(frozen=True)
class OfficerView:
    id: int
    category: str
    state: str
    tile: Coord
    x: float
    y: float
    disguised: bool


@dataclass(frozen=True)
class TickResult:
    """Read-only picture of the day after one tick."""

    tick_number: int
    phase: Phase
    phase_remaining_ms: float
    heat: float
    player_tile: Coord
    player_x: float
    player_y: float
    officers: tuple[OfficerView, ...]
    events: tuple[Event, ...]
    active: bool
    route: Route


class DaySimulation:
    """Runs one day. Build it with :func:`begin_day`.

    Systems run in a fixed order every tick and the pipeline stops as soon
    as a system ends or freezes the day.
    """

    def __init__(self, day: Day, seed: int) -> None:
        self._day = day
        self._seed = seed
        self._clock = FrameClock(day.config.max_delta_ms)
        self._systems: list[DaySystem] = [
            make_player_system(),
            make_modifier_system(),
            make_police_system(),
            make_contact_system(),
            make_phase_system(),
            make_heat_system(),
        ]

    # --- Properties ---

    @property
    def day(self) -> Day:
        return self._day

    @property
    def session(self) -> Session:
        return self._day.session

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def phase(self) -> Phase:
        return self._day.state.phase

    @property
    def heat(self) -> float:
        return self._day.state.heat

    @property
    def active(self) -> bool:
        return self._day.state.active

    @property
    def route(self) -> Route:
        return self._day.state.route

    @property
    def officers(self) -> list[Officer]:
        return self._day.officers

    @property
    def items(self):
        return self._day.items

    @property
    def customers(self):
        return self._day.customers

    @property
    def events(self) -> EventLog:
        return self._day.events

    def add_system(self, system: DaySystem) -> None:
        """Append a system that runs after the built-in ones."""
        self._systems.append(system)

    # --- Ticking ---

    def tick(
        self,
        elapsed_ms: float,
        intent: Direction = Direction.NONE,
        use_stash: bool = False,
    ) -> TickResult:
        day = self._day
        if not day.state.active:
            if day.config.strict:
                raise DayInactiveError(f"day {day.session.day} is not active ({day.state.route.value})")
            logger.debug("tick ignored, day inactive (%s)", day.state.route.value)
            return self._result(())

        self._clock.advance(elapsed_ms)
        ctx = self._clock.context(day.rng)
        day.input = PlayerInput(direction=intent, use_stash=use_stash)
        mark = day.events.mark()
        for system in self._systems:
            system(day, ctx)
            if not day.state.active:
                break
        day.input = PlayerInput()
        return self._result(tuple(day.events.since(mark)))

    def _result(self, tick_events: tuple[Event, ...]) -> TickResult:
        day = self._day
        mover = day.player.mover
        return TickResult(
            tick_number=self._clock.tick_number,
            phase=day.state.phase,
            phase_remaining_ms=day.state.phase_remaining_ms,
            heat=day.state.heat,
            player_tile=mover.tile,
            player_x=mover.x,
            player_y=mover.y,
            officers=tuple(
                OfficerView(
                    id=o.id,
                    category=o.category.value,
                    state=o.state.value,
                    tile=o.mover.tile,
                    x=o.mover.x,
                    y=o.mover.y,
                    disguised=is_disguised(o, mover.tile),
                )
                for o in day.officers
            ),
            events=tick_events,
            active=day.state.active,
            route=day.state.route,
        )

    # --- Outcomes ---

    def resolve_confrontation(self, won: bool) -> None:
        """Apply the duel result handed back by the confrontation collaborator.

        A win ends this run of the day without penalty and routes to
        ``REPLAY_DAY``: the caller starts the same day afresh with
        :func:`begin_day`. A loss costs the same as an arrest.
        """
        day = self._day
        state = day.state
        if not state.pending_confrontation:
            raise StreetHeatError("no confrontation is pending")
        tick = self._clock.tick_number
        if not won:
            capture(day, tick)
            return
        officer_id = state.confronting_officer
        state.pending_confrontation = False
        state.confronting_officer = None
        state.route = Route.REPLAY_DAY
        day.events.emit(tick, events.CONFRONTATION_WON, officer=officer_id)
        logger.info("confrontation won against officer %s, replaying day %d", officer_id, day.session.day)

    def arrest(self) -> None:
        """Capture the player directly, skipping any duel."""
        day = self._day
        if not day.state.active and not day.state.pending_confrontation:
            raise DayInactiveError(f"day {day.session.day} already ended")
        capture(day, self._clock.tick_number)

    # --- Queries ---

    def is_disguised(self, officer: Officer) -> bool:
        return is_disguised(officer, self._day.player.mover.tile)

    def active_modifiers(self) -> list[ActiveModifier]:
        return self._day.ledger.active()

    def occupancy(self) -> dict[Coord, list[str]]:
        """Labels of everything on each occupied tile, for rendering."""
        day = self._day
        tiles: dict[Coord, list[str]] = defaultdict(list)
        for item in day.items:
            if item.available:
                tiles[item.tile].append(f"item:{item.kind}")
        for customer in day.customers:
            if customer.active:
                tiles[customer.tile].append("customer")
        if day.state.phase is Phase.SELLING:
            for pickup in day.stash_pickups:
                if not pickup.collected:
                    tiles[pickup.tile].append("stash")
        for power_up in day.power_ups:
            if not power_up.collected:
                tiles[power_up.tile].append(f"power_up:{power_up.kind.value}")
        for officer in day.officers:
            if officer.deployed:
                tiles[officer.mover.tile].append(f"officer:{officer.id}")
        tiles[day.player.mover.tile].append("player")
        return dict(tiles)

    def totals(self) -> dict[str, Any]:
        day = self._day
        session = day.session
        return {
            "day": session.day,
            "cash": session.cash,
            "total_earned": session.total_earned,
            "lives": session.lives,
            "inventory": day.player.inventory,
            "stash": day.player.stash,
            "heat": day.state.heat,
            "items_left": sum(1 for i in day.items if i.available),
            "customers_left": sum(1 for c in day.customers if c.active),
        }


def begin_day(
    session: Session,
    maze: Maze,
    config: SimConfig | None = None,
    seed: int | None = None,
) -> DaySimulation:
    """Lay out a new day for ``session`` on ``maze`` and return its simulation."""
    if config is None:
        config = SimConfig()
    if seed is None:
        seed = int.from_bytes(os.urandom(8))
    rng = random.Random(seed)
    day = build_day(session, maze, config, rng)
    return DaySimulation(day, seed)
