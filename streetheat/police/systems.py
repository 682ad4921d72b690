"""Officer deployment, patrol and pursuit."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable

from streetheat import events
from streetheat.maze import Maze, next_step
from streetheat.modifiers.systems import player_hidden
from streetheat.motion import advance, try_commit
from streetheat.police.components import CopCategory, CopState, Officer, profile
from streetheat.types import CARDINALS, Coord, Direction, Phase

if TYPE_CHECKING:
    from streetheat.day import Day
    from streetheat.types import TickContext

logger = logging.getLogger(__name__)


def officer_speed(category: CopCategory, base: float, day_index: int, scale: float) -> float:
    """Officer speed in tiles/s for a category on a given day."""
    return base * profile(category).speed_mult * (1 + (day_index - 1) * scale)


def effective_radius(officer: Officer, heat: float, heat_max: float, bonus: float) -> float:
    """Detection radius widened by the heat meter."""
    return officer.detection_radius + heat / heat_max * bonus


def is_disguised(officer: Officer, player_tile: Coord) -> bool:
    """Whether an undercover officer currently passes as a civilian."""
    distance = profile(officer.category).disguise_distance
    if distance is None or officer.state is not CopState.PATROLLING:
        return False
    return Maze.distance(officer.mover.tile, player_tile) > distance


def patrol_direction(officer: Officer, maze: Maze, rng: random.Random) -> Direction:
    """Random walkable direction, avoiding a reversal unless cornered."""
    back = officer.mover.facing.opposite
    options = [
        d for d in CARDINALS
        if d is not back and maze.walkable(d.step(officer.mover.tile), for_cop=True)
    ]
    if not options:
        options = [d for d in CARDINALS if maze.walkable(d.step(officer.mover.tile), for_cop=True)]
    if not options:
        return Direction.NONE
    return rng.choice(options)


def deploy(officer: Officer, maze: Maze) -> None:
    officer.state = CopState.PATROLLING
    officer.mover.place(maze.cop_exit)
    officer.mover.facing = Direction.NONE
    officer.ai_ms = 0.0


def knock_out(officer: Officer, delay_ms: float) -> None:
    """Send an officer back to the station until ``delay_ms`` passes."""
    officer.state = CopState.DORMANT
    officer.dormant_ms = delay_ms
    officer.announced = False
    officer.mover.place(officer.home)


def decide(day: Day, ctx: TickContext, officer: Officer) -> None:
    """Pick the officer's next move from what it can see."""
    cfg = day.config
    maze = day.maze
    target = day.player.mover.tile

    if player_hidden(day):
        officer.state = CopState.PATROLLING
        try_commit(officer.mover, patrol_direction(officer, maze, ctx.random), maze, for_cop=True)
        return

    radius = effective_radius(officer, day.state.heat, cfg.heat_max, cfg.heat_detection_bonus)
    if Maze.distance(officer.mover.tile, target) <= radius:
        was_pursuing = officer.state is CopState.PURSUING
        officer.state = CopState.PURSUING
        if not was_pursuing and not officer.announced:
            officer.announced = True
            day.events.emit(ctx.tick_number, events.PURSUIT_ANNOUNCED, officer=officer.id)
            logger.debug("officer %d pursuing from %s", officer.id, officer.mover.tile)
        direction = next_step(maze, officer.mover.tile, target, for_cop=True)
        try_commit(officer.mover, direction, maze, for_cop=True)
        return

    officer.state = CopState.PATROLLING
    officer.announced = False
    try_commit(officer.mover, patrol_direction(officer, maze, ctx.random), maze, for_cop=True)


def make_police_system() -> Callable[[Day, TickContext], None]:
    """Return a system that deploys, moves and steers officers.

    Officers only act while the day is in the selling phase.
    """

    def police_system(day: Day, ctx: TickContext) -> None:
        if day.state.phase is not Phase.SELLING:
            return
        for officer in day.officers:
            if officer.state is CopState.DORMANT:
                officer.dormant_ms -= ctx.dt_ms
                if officer.dormant_ms <= 0:
                    deploy(officer, day.maze)
                    day.events.emit(
                        ctx.tick_number, events.OFFICER_DEPLOYED,
                        officer=officer.id, tile=officer.mover.tile,
                    )
                continue

            advance(officer.mover, ctx.dt_ms, day.maze)
            officer.ai_ms -= ctx.dt_ms
            if officer.ai_ms <= 0 and not officer.mover.moving:
                officer.ai_ms = day.config.ai_interval_ms
                decide(day, ctx, officer)

    return police_system
