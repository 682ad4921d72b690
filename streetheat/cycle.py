"""Phase timer: collecting, then selling, then the day is over."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from streetheat import events
from streetheat.builder import spawn_customers
from streetheat.types import Phase, Route

if TYPE_CHECKING:
    from streetheat.day import Day
    from streetheat.types import TickContext

logger = logging.getLogger(__name__)


def enter_selling(day: Day, tick: int) -> None:
    """Switch to the selling phase.

    Leftover items become unobtainable and customers appear. Officers stay
    at the station; their dormancy countdown starts with this phase.
    """
    state = day.state
    state.phase = Phase.SELLING
    state.phase_remaining_ms = day.config.sell_phase_ms
    expired = 0
    for item in day.items:
        if not item.collected:
            item.expired = True
            expired += 1
    day.customers = spawn_customers(day.maze, day.session, day.config, day.rng)
    day.events.emit(
        tick, events.PHASE_CHANGED,
        phase=state.phase.value, customers=len(day.customers), expired=expired,
    )
    logger.info("day %d selling: %d customers, %d items left behind",
                day.session.day, len(day.customers), expired)


def end_day(day: Day, tick: int) -> None:
    """Natural end of the selling phase."""
    state = day.state
    state.active = False
    state.route = Route.SHOP
    finished = day.session.day
    day.session.day += 1
    day.events.emit(tick, events.DAY_COMPLETE, day=finished, cash=day.session.cash)
    logger.info("day %d complete with $%d", finished, day.session.cash)


def make_phase_system() -> Callable[[Day, TickContext], None]:
    """Return a system that counts down the current phase."""

    def phase_system(day: Day, ctx: TickContext) -> None:
        state = day.state
        state.phase_remaining_ms -= ctx.dt_ms
        if state.phase_remaining_ms > 0:
            return
        state.phase_remaining_ms = 0.0
        if state.phase is Phase.COLLECTING:
            enter_selling(day, ctx.tick_number)
        else:
            end_day(day, ctx.tick_number)

    return phase_system
