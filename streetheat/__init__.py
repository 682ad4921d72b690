"""streetheat - tile-maze street-dealing simulation core."""

from streetheat.config import SimConfig
from streetheat.engine import DaySimulation, OfficerView, TickResult, begin_day
from streetheat.maze import Maze, TileKind
from streetheat.session import Session, street_rank
from streetheat.types import (
    DayInactiveError,
    Direction,
    InvariantViolation,
    MazeError,
    Phase,
    PurchaseError,
    Route,
    SnapshotError,
    StreetHeatError,
    TickContext,
)

__all__ = [
    "begin_day",
    "DaySimulation",
    "TickResult",
    "OfficerView",
    "SimConfig",
    "Session",
    "street_rank",
    "Maze",
    "TileKind",
    "Direction",
    "Phase",
    "Route",
    "TickContext",
    "StreetHeatError",
    "InvariantViolation",
    "DayInactiveError",
    "SnapshotError",
    "MazeError",
    "PurchaseError",
]
