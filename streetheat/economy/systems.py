"""System factories for officer contact and passive heat."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from streetheat import events
from streetheat.economy.resolution import add_heat, capture
from streetheat.modifiers.systems import player_hidden
from streetheat.police.systems import knock_out
from streetheat.types import Direction, Phase, Route

if TYPE_CHECKING:
    from streetheat.day import Day
    from streetheat.police.components import Officer
    from streetheat.types import TickContext

logger = logging.getLogger(__name__)


def try_getaway(day: Day, tick: int) -> bool:
    """Spend today's getaway car if owned. Returns True if the player escaped."""
    session = day.session
    if not session.upgrades.getaway_car or session.getaway_used_today:
        return False
    session.getaway_used_today = True
    mover = day.player.mover
    mover.place(day.maze.player_spawn)
    mover.facing = Direction.NONE
    day.player.queued = Direction.NONE
    day.events.emit(tick, events.GETAWAY, tile=mover.tile)
    logger.info("getaway car used on day %d", session.day)
    return True


def start_confrontation(day: Day, tick: int, officer: Officer) -> None:
    """Freeze the day and hand the contact to the duel collaborator."""
    state = day.state
    day.player.inventory = 0
    state.active = False
    state.pending_confrontation = True
    state.confronting_officer = officer.id
    state.route = Route.CONFRONTATION
    day.events.emit(tick, events.CONFRONTATION_TRIGGERED, officer=officer.id, tile=officer.mover.tile)
    logger.info("confrontation with officer %d at %s", officer.id, officer.mover.tile)


def make_contact_system() -> Callable[[Day, TickContext], None]:
    """Return a system that resolves officers sharing the player's tile.

    A hidden player knocks officers out. Otherwise the first officer in
    contact ends the check: the getaway car intercepts once per day, then
    the configured contact mode decides between a duel and an arrest.
    """

    def contact_system(day: Day, ctx: TickContext) -> None:
        if day.state.phase is not Phase.SELLING:
            return
        here = day.player.mover.tile
        for officer in day.officers:
            if not officer.deployed or officer.mover.tile != here:
                continue
            if player_hidden(day):
                knock_out(officer, day.config.knockout_delay_ms)
                day.events.emit(ctx.tick_number, events.KNOCKOUT, officer=officer.id)
                continue
            if try_getaway(day, ctx.tick_number):
                return
            if day.config.contact_mode == "arrest":
                capture(day, ctx.tick_number)
            else:
                start_confrontation(day, ctx.tick_number, officer)
            return

    return contact_system


def make_heat_system() -> Callable[[Day, TickContext], None]:
    """Return a system that raises heat steadily while selling."""

    def heat_system(day: Day, ctx: TickContext) -> None:
        if day.state.phase is not Phase.SELLING:
            return
        cfg = day.config
        add_heat(day.state, cfg.heat_passive_per_s * ctx.dt_ms / 1000.0, cfg.heat_max)

    return heat_system
