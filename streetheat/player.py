"""Player input, movement and the stash high."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from streetheat import events
from streetheat.economy.resolution import resolve_arrival
from streetheat.modifiers.systems import player_speed
from streetheat.motion import advance, try_commit
from streetheat.types import Direction, Phase
from streetheat.upgrades import high_duration

if TYPE_CHECKING:
    from streetheat.day import Day
    from streetheat.types import TickContext

logger = logging.getLogger(__name__)


def use_stash(day: Day, ctx: TickContext) -> bool:
    """Consume one stash unit and get high. Returns False when refused."""
    player = day.player
    if day.state.phase is not Phase.SELLING or player.stash <= 0 or player.is_high:
        return False
    player.stash -= 1
    player.high_remaining_ms = high_duration(
        day.config.high_duration_ms, day.session.upgrades.stash_tolerance,
    )
    day.events.emit(ctx.tick_number, events.HIGH_STARTED, duration_ms=player.high_remaining_ms)
    logger.debug("high for %.0f ms, %d stash left", player.high_remaining_ms, player.stash)
    return True


def make_player_system() -> Callable[[Day, TickContext], None]:
    """Return a system that steers and moves the player.

    The latest non-NONE intent replaces the queued direction. Once at rest
    the player's tile is resolved before the next step is committed, so
    pickups and sales happen on every tile passed.
    """

    def player_system(day: Day, ctx: TickContext) -> None:
        player = day.player
        mover = player.mover
        if day.input.direction is not Direction.NONE:
            player.queued = day.input.direction
        if day.input.use_stash:
            use_stash(day, ctx)

        mover.speed = player_speed(day)
        advance(mover, ctx.dt_ms, day.maze)
        if mover.moving:
            return

        resolve_arrival(day, ctx)
        if try_commit(mover, player.queued, day.maze):
            player.queued = Direction.NONE
            return
        try_commit(mover, mover.facing, day.maze)

    return player_system
