"""Shared enums, tick context and errors for street-heat."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from enum import Enum

Coord = tuple[int, int]


class Direction(Enum):
    NONE = "NONE"
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    def step(self, coord: Coord) -> Coord:
        dx, dy = _DELTAS[self]
        return (coord[0] + dx, coord[1] + dy)


_DELTAS = {
    Direction.NONE: (0, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.NONE: Direction.NONE,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Neighbour search order. Pathfinding results depend on it.
CARDINALS: tuple[Direction, ...] = (
    Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT,
)


class Phase(Enum):
    COLLECTING = "COLLECTING"
    SELLING = "SELLING"


class Route(Enum):
    """Which collaborator takes over when the day stops."""

    NONE = "NONE"
    SHOP = "SHOP"
    GAME_OVER = "GAME_OVER"
    CONFRONTATION = "CONFRONTATION"
    REPLAY_DAY = "REPLAY_DAY"


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt_ms: float
    elapsed_ms: float
    random: _random.Random


class StreetHeatError(Exception):
    """Base class for street-heat errors."""


class InvariantViolation(AssertionError):
    """Raised when simulation state contradicts itself (an integration bug)."""


class DayInactiveError(StreetHeatError):
    """Raised by strict simulations when ticked after the day stopped."""


class SnapshotError(StreetHeatError):
    """Raised on restore failures (version mismatch)."""


class MazeError(StreetHeatError, ValueError):
    """Raised on malformed maze grids."""


class PurchaseError(StreetHeatError):
    """Raised when the shop refuses a purchase."""
