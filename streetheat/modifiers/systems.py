"""Modifier decay system and the effect queries other systems consume."""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable

from streetheat import events
from streetheat.economy.resolution import collect_item
from streetheat.maze import Maze
from streetheat.modifiers.types import ModifierKind
from streetheat.types import Phase

if TYPE_CHECKING:
    from streetheat.day import Day
    from streetheat.types import TickContext

logger = logging.getLogger(__name__)


def player_speed(day: Day) -> float:
    """Current player speed. Derived fresh so no effect can stomp another."""
    player = day.player
    cfg = day.config
    if player.is_high:
        return player.base_speed * cfg.high_speed_mult
    if day.ledger.is_active(ModifierKind.SPEED_BOOST):
        return player.base_speed * cfg.boost_speed_mult
    if day.state.phase is Phase.COLLECTING:
        return player.base_speed * cfg.collect_speed_mult
    return player.base_speed


def player_hidden(day: Day) -> bool:
    """True while officers cannot see the player (high or BLIND)."""
    return day.player.is_high or day.ledger.is_active(ModifierKind.BLIND)


def magnet_active(day: Day) -> bool:
    return day.ledger.is_active(ModifierKind.MAGNET)


def _pull(item, target_x: float, target_y: float, step: float) -> None:
    dx = target_x - item.x
    dy = target_y - item.y
    dist = math.hypot(dx, dy)
    if dist <= step:
        item.x, item.y = target_x, target_y
        return
    item.x += dx / dist * step
    item.y += dy / dist * step


def _apply_magnet(day: Day, ctx: TickContext) -> None:
    cfg = day.config
    player = day.player
    if day.state.phase is not Phase.COLLECTING:
        return
    here = player.mover.tile
    step = cfg.magnet_pull_speed * (ctx.dt_ms / 1000.0)
    for item in day.items:
        if not item.available:
            continue
        dist = Maze.distance(item.tile, here)
        if dist == 0 or dist > cfg.magnet_radius:
            continue
        _pull(item, player.mover.x, player.mover.y, step)
        if dist <= cfg.magnet_collect_radius:
            collect_item(day, ctx, item)


def make_modifier_system() -> Callable[[Day, TickContext], None]:
    """Return a system that decays modifiers and the high state.

    Also runs the magnet pull while MAGNET is active.
    """

    def modifier_system(day: Day, ctx: TickContext) -> None:
        for kind in day.ledger.decay(ctx.dt_ms):
            day.events.emit(ctx.tick_number, events.MODIFIER_EXPIRED, kind=kind.value)
            logger.debug("modifier %s expired", kind.value)

        player = day.player
        if player.is_high:
            player.high_remaining_ms -= ctx.dt_ms
            if player.high_remaining_ms <= 0:
                player.high_remaining_ms = 0.0
                day.events.emit(ctx.tick_number, events.HIGH_ENDED)

        if magnet_active(day):
            _apply_magnet(day, ctx)

    return modifier_system
