"""Maze - static tile grid with walkability and landmark queries."""
from __future__ import annotations

from typing import Sequence

from streetheat.maze.types import SYMBOLS, TILE_DEFS, TileDef, TileKind
from streetheat.types import CARDINALS, Coord, MazeError


class Maze:
    """Immutable maze topology, addressed as ``(column, row)``.

    Row 0 is the top of the maze. Anything outside the grid reads as a wall.
    """

    def __init__(self, rows: Sequence[Sequence[int]], cop_exit: Coord | None = None) -> None:
        if not rows or not rows[0]:
            raise MazeError("maze must have at least one row and one column")
        width = len(rows[0])
        grid: list[tuple[TileKind, ...]] = []
        for r, row in enumerate(rows):
            if len(row) != width:
                raise MazeError(f"row {r} has {len(row)} tiles, expected {width}")
            try:
                grid.append(tuple(TileKind(v) for v in row))
            except ValueError as exc:
                raise MazeError(f"row {r}: {exc}") from None
        self._grid = grid
        self._width = width
        self._height = len(grid)

        spawns = self.of_kind(TileKind.PLAYER_SPAWN)
        if not spawns:
            raise MazeError("maze has no player spawn")
        self._player_spawn = spawns[0]

        tunnels = self.of_kind(TileKind.TUNNEL)
        if len(tunnels) not in (0, 2):
            raise MazeError(f"maze needs zero or two tunnel tiles, found {len(tunnels)}")
        self._tunnels: tuple[Coord, Coord] | None = (
            (tunnels[0], tunnels[1]) if tunnels else None
        )

        self._cop_spawns = self.of_kind(TileKind.COP_SPAWN)
        if cop_exit is not None and not self.walkable(cop_exit, for_cop=True):
            raise MazeError(f"cop exit {cop_exit} is not walkable")
        self._cop_exit = cop_exit if cop_exit is not None else self._find_cop_exit()

    @classmethod
    def parse(cls, lines: Sequence[str], cop_exit: Coord | None = None) -> Maze:
        """Build a maze from rows of tile symbols (``# . C B T H P``)."""
        rows: list[list[int]] = []
        for r, line in enumerate(lines):
            row: list[int] = []
            for c, ch in enumerate(line):
                kind = SYMBOLS.get(ch)
                if kind is None:
                    raise MazeError(f"unknown tile symbol {ch!r} at ({c}, {r})")
                row.append(int(kind))
            rows.append(row)
        return cls(rows, cop_exit=cop_exit)

    # --- Properties ---

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def player_spawn(self) -> Coord:
        return self._player_spawn

    @property
    def cop_spawns(self) -> list[Coord]:
        return list(self._cop_spawns)

    @property
    def cop_exit(self) -> Coord:
        return self._cop_exit

    @property
    def tunnel_pair(self) -> tuple[Coord, Coord] | None:
        return self._tunnels

    @property
    def stash_tiles(self) -> list[Coord]:
        return self.of_kind(TileKind.STASH)

    # --- Single-tile queries ---

    def in_bounds(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self._width and 0 <= y < self._height

    def kind_at(self, coord: Coord) -> TileKind:
        if not self.in_bounds(coord):
            return TileKind.WALL
        x, y = coord
        return self._grid[y][x]

    def tile_def(self, coord: Coord) -> TileDef:
        return TILE_DEFS[self.kind_at(coord)]

    def walkable(self, coord: Coord, for_cop: bool = False) -> bool:
        tile = self.tile_def(coord)
        return tile.cop_walkable if for_cop else tile.player_walkable

    def tunnel_exit(self, coord: Coord) -> Coord | None:
        """The other end of the tunnel pair, or None off-tunnel."""
        if self._tunnels is None:
            return None
        a, b = self._tunnels
        if coord == a:
            return b
        if coord == b:
            return a
        return None

    def neighbors(self, coord: Coord, for_cop: bool = False) -> list[Coord]:
        """Walkable orthogonal neighbours in UP, DOWN, LEFT, RIGHT order."""
        result: list[Coord] = []
        for d in CARDINALS:
            nxt = d.step(coord)
            if self.walkable(nxt, for_cop):
                result.append(nxt)
        return result

    @staticmethod
    def distance(a: Coord, b: Coord) -> int:
        return abs(a[0] - b[0]) + abs(a[1] - b[1])

    # --- Multi-tile queries ---

    def of_kind(self, kind: TileKind) -> list[Coord]:
        """Row-major list of tiles of one kind."""
        return [
            (x, y)
            for y, row in enumerate(self._grid)
            for x, k in enumerate(row)
            if k == kind
        ]

    def path_tiles(self) -> list[Coord]:
        """Row-major list of every player-walkable tile."""
        return [
            (x, y)
            for y, row in enumerate(self._grid)
            for x, k in enumerate(row)
            if TILE_DEFS[k].player_walkable
        ]

    def _find_cop_exit(self) -> Coord:
        for spawn in self._cop_spawns:
            for nxt in self.neighbors(spawn, for_cop=True):
                if self.walkable(nxt):
                    return nxt
        # No station: officers deploy where the player starts.
        return self._player_spawn
