"""Maze topology and pathfinding."""
from __future__ import annotations

from streetheat.maze.types import SYMBOLS, TILE_DEFS, TileDef, TileKind
from streetheat.maze.grid import Maze
from streetheat.maze.pathfind import bfs_path, next_step

__all__ = [
    "TileKind",
    "TileDef",
    "TILE_DEFS",
    "SYMBOLS",
    "Maze",
    "bfs_path",
    "next_step",
]
