"""Grid-bound movement with continuous interpolation between tiles."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from streetheat.types import Coord, Direction, InvariantViolation

if TYPE_CHECKING:
    from streetheat.maze import Maze

# Float slack when deciding whether a frame reaches its target tile.
SNAP_EPSILON = 1e-9


@dataclass
class Mover:
    """Position and heading of anything that walks the maze.

    ``tile`` is authoritative for game logic and changes only on arrival.
    ``x`` and ``y`` are the interpolated position in tile units.
    """

    tile: Coord
    speed: float = 0.0
    target: Coord | None = None
    facing: Direction = Direction.NONE
    moving: bool = False
    x: float = field(default=0.0)
    y: float = field(default=0.0)

    def __post_init__(self) -> None:
        if self.target is None:
            self.target = self.tile
        if not self.moving:
            self.x, self.y = float(self.tile[0]), float(self.tile[1])

    def place(self, tile: Coord) -> None:
        """Put the mover on a tile, at rest."""
        self.tile = tile
        self.target = tile
        self.moving = False
        self.x, self.y = float(tile[0]), float(tile[1])


def check(mover: Mover) -> None:
    if mover.moving != (mover.tile != mover.target):
        raise InvariantViolation(
            f"mover at {mover.tile} targeting {mover.target} has moving={mover.moving}"
        )


def try_commit(mover: Mover, direction: Direction, maze: Maze, for_cop: bool = False) -> bool:
    """Start a step towards the neighbour in ``direction`` if it is walkable."""
    if direction is Direction.NONE:
        return False
    nxt = direction.step(mover.tile)
    if not maze.walkable(nxt, for_cop):
        return False
    mover.target = nxt
    mover.facing = direction
    mover.moving = True
    return True


def teleport(mover: Mover, maze: Maze) -> bool:
    """Relocate through the tunnel pair. Returns True if the mover jumped."""
    exit_tile = maze.tunnel_exit(mover.tile)
    if exit_tile is None:
        return False
    mover.place(exit_tile)
    return True


def advance(mover: Mover, dt_ms: float, maze: Maze) -> bool:
    """Move towards the committed target. Returns True on arrival."""
    check(mover)
    if not mover.moving:
        return False
    assert mover.target is not None
    tx, ty = float(mover.target[0]), float(mover.target[1])
    dx = tx - mover.x
    dy = ty - mover.y
    dist = math.hypot(dx, dy)
    step = mover.speed * (dt_ms / 1000.0)

    if step >= dist - SNAP_EPSILON:
        mover.place(mover.target)
        teleport(mover, maze)
        return True

    mover.x += dx / dist * step
    mover.y += dy / dist * step
    return False
