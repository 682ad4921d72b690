"""Tile kinds and their definitions."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TileKind(IntEnum):
    WALL = 0
    PATH = 1
    CUSTOMER_SPAWN = 2
    STASH = 3
    TUNNEL = 4
    COP_SPAWN = 5
    PLAYER_SPAWN = 6


@dataclass(frozen=True)
class TileDef:
    """Immutable tile type definition.

    Attributes:
        name: Unique identifier for this tile type.
        player_walkable: Whether the player may enter the tile.
        cop_walkable: Whether officers may enter the tile.
        symbol: Character used by :meth:`Maze.parse`.
    """

    name: str
    player_walkable: bool = True
    cop_walkable: bool = True
    symbol: str = "."

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("TileDef name must be non-empty")
        if len(self.symbol) != 1:
            raise ValueError(f"symbol must be a single character, got {self.symbol!r}")


TILE_DEFS: dict[TileKind, TileDef] = {
    TileKind.WALL: TileDef("wall", player_walkable=False, cop_walkable=False, symbol="#"),
    TileKind.PATH: TileDef("path", symbol="."),
    TileKind.CUSTOMER_SPAWN: TileDef("customer_spawn", symbol="C"),
    TileKind.STASH: TileDef("stash", symbol="B"),
    TileKind.TUNNEL: TileDef("tunnel", symbol="T"),
    # The station is officer-only ground.
    TileKind.COP_SPAWN: TileDef("cop_spawn", player_walkable=False, symbol="H"),
    TileKind.PLAYER_SPAWN: TileDef("player_spawn", symbol="P"),
}

SYMBOLS: dict[str, TileKind] = {d.symbol: k for k, d in TILE_DEFS.items()}
