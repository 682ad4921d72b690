"""Tests for streetheat.maze - grid queries and validation."""

import pytest

from streetheat.maze import Maze, TileKind
from streetheat.types import MazeError

BLOCK = [
    "#########",
    "#P..#..C#",
    "#.#.#.#.#",
    "#...H...#",
    "#########",
]


class TestParse:
    def test_dimensions(self):
        maze = Maze.parse(BLOCK)
        assert maze.width == 9
        assert maze.height == 5

    def test_landmarks(self):
        maze = Maze.parse(BLOCK)
        assert maze.player_spawn == (1, 1)
        assert maze.cop_spawns == [(4, 3)]
        assert maze.tunnel_pair is None
        assert maze.stash_tiles == []

    def test_integer_rows_match_symbols(self):
        rows = [
            [0, 0, 0],
            [0, 6, 0],
            [0, 1, 0],
            [0, 0, 0],
        ]
        maze = Maze(rows)
        assert maze.kind_at((1, 1)) is TileKind.PLAYER_SPAWN
        assert maze.kind_at((1, 2)) is TileKind.PATH

    def test_ragged_rows_rejected(self):
        with pytest.raises(MazeError):
            Maze.parse(["#####", "#P#"])

    def test_unknown_symbol_rejected(self):
        with pytest.raises(MazeError):
            Maze.parse(["###", "#P#", "#X#"])

    def test_unknown_code_rejected(self):
        with pytest.raises(MazeError):
            Maze([[0, 6, 9]])

    def test_missing_spawn_rejected(self):
        with pytest.raises(MazeError):
            Maze.parse(["###", "#.#", "###"])

    def test_single_tunnel_rejected(self):
        with pytest.raises(MazeError):
            Maze.parse(["#####", "T.P.#", "#####"])

    def test_maze_error_is_value_error(self):
        with pytest.raises(ValueError):
            Maze.parse([])


class TestQueries:
    def test_outside_is_wall(self):
        maze = Maze.parse(BLOCK)
        assert maze.kind_at((-1, 0)) is TileKind.WALL
        assert maze.kind_at((9, 2)) is TileKind.WALL
        assert not maze.walkable((100, 100))

    def test_station_walkable_for_officers_only(self):
        maze = Maze.parse(BLOCK)
        assert not maze.walkable((4, 3))
        assert maze.walkable((4, 3), for_cop=True)

    def test_neighbors_fixed_order(self):
        maze = Maze.parse(BLOCK)
        # UP and LEFT are walls, so DOWN comes before RIGHT.
        assert maze.neighbors((1, 1)) == [(1, 2), (2, 1)]
        assert maze.neighbors((3, 3)) == [(3, 2), (2, 3)]
        assert maze.neighbors((3, 3), for_cop=True) == [(3, 2), (2, 3), (4, 3)]

    def test_cop_exit_is_first_player_walkable_neighbor(self):
        maze = Maze.parse(BLOCK)
        assert maze.cop_exit == (3, 3)

    def test_cop_exit_override(self):
        maze = Maze.parse(BLOCK, cop_exit=(5, 3))
        assert maze.cop_exit == (5, 3)

    def test_cop_exit_override_must_be_walkable(self):
        with pytest.raises(MazeError):
            Maze.parse(BLOCK, cop_exit=(0, 0))

    def test_cop_exit_falls_back_to_spawn(self):
        maze = Maze.parse(["#####", "#P..#", "#####"])
        assert maze.cop_exit == (1, 1)

    def test_path_tiles_row_major_and_player_walkable(self):
        maze = Maze.parse(BLOCK)
        tiles = maze.path_tiles()
        assert tiles[0] == (1, 1)
        assert (4, 3) not in tiles
        assert (7, 1) in tiles
        assert tiles == sorted(tiles, key=lambda t: (t[1], t[0]))

    def test_of_kind(self):
        maze = Maze.parse(BLOCK)
        assert maze.of_kind(TileKind.CUSTOMER_SPAWN) == [(7, 1)]

    def test_distance_is_manhattan(self):
        assert Maze.distance((1, 1), (4, 3)) == 5
        assert Maze.distance((4, 3), (4, 3)) == 0


class TestTunnels:
    def test_pair_and_exit(self):
        maze = Maze.parse(["#####", "T.P.T", "#####"])
        assert maze.tunnel_pair == ((0, 1), (4, 1))
        assert maze.tunnel_exit((0, 1)) == (4, 1)
        assert maze.tunnel_exit((4, 1)) == (0, 1)
        assert maze.tunnel_exit((2, 1)) is None

    def test_no_tunnels(self):
        maze = Maze.parse(BLOCK)
        assert maze.tunnel_exit((1, 1)) is None


def test_seed_tiles_skip_tunnels():
    from streetheat.builder import seed_tiles

    maze = Maze.parse([
        "#####",
        "T.P.T",
        "#####",
    ])
    assert seed_tiles(maze) == [(1, 1), (2, 1), (3, 1)]
