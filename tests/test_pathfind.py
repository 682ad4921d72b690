"""Tests for breadth-first pathfinding."""

import pytest

from streetheat.maze import Maze, bfs_path, next_step
from streetheat.types import Direction

BLOCK = [
    "#########",
    "#P..#..C#",
    "#.#.#.#.#",
    "#...H...#",
    "#########",
]


def open_maze(width: int = 14, height: int = 15) -> Maze:
    rows = ["#" * width]
    for _ in range(height - 2):
        rows.append("#" + "." * (width - 2) + "#")
    rows.append("#" * width)
    rows[1] = "#P" + rows[1][2:]
    return Maze.parse(rows)


def test_straight_up_goes_up():
    maze = open_maze()
    assert next_step(maze, (10, 12), (10, 10)) is Direction.UP


def test_same_tile_is_none():
    maze = open_maze()
    assert next_step(maze, (3, 3), (3, 3)) is Direction.NONE
    assert bfs_path(maze, (3, 3), (3, 3)) == [(3, 3)]


def test_path_includes_both_ends():
    maze = open_maze()
    path = bfs_path(maze, (2, 2), (5, 2))
    assert path == [(2, 2), (3, 2), (4, 2), (5, 2)]


def bfs_distance(maze: Maze, start, goal, for_cop: bool) -> int | None:
    path = bfs_path(maze, start, goal, for_cop)
    return None if path is None else len(path) - 1


def walkable_tiles(maze: Maze, for_cop: bool) -> list:
    return [
        (x, y)
        for y in range(maze.height)
        for x in range(maze.width)
        if maze.walkable((x, y), for_cop)
    ]


@pytest.mark.parametrize("rows,for_cop", [
    (BLOCK, True),
    (BLOCK, False),
    (["#######", "#P....#", "#.#.#.#", "#.....#", "#######"], False),
])
def test_next_step_shrinks_distance_for_every_pair(rows, for_cop):
    maze = Maze.parse(rows)
    tiles = walkable_tiles(maze, for_cop)
    checked = 0
    for start in tiles:
        for goal in tiles:
            if start == goal:
                continue
            distance = bfs_distance(maze, start, goal, for_cop)
            if distance is None:
                assert next_step(maze, start, goal, for_cop) is Direction.NONE
                continue
            step = next_step(maze, start, goal, for_cop).step(start)
            assert maze.walkable(step, for_cop)
            assert bfs_distance(maze, step, goal, for_cop) == distance - 1
            checked += 1
    assert checked > 0


def test_station_blocks_the_player():
    maze = Maze.parse(BLOCK)
    assert bfs_path(maze, (1, 1), (7, 1), for_cop=False) is None
    assert next_step(maze, (1, 1), (7, 1), for_cop=False) is Direction.NONE


def test_unreachable_goal_is_none():
    maze = Maze.parse([
        "#######",
        "#P.#..#",
        "#######",
    ])
    assert next_step(maze, (1, 1), (5, 1)) is Direction.NONE


def test_wall_goal_is_none():
    maze = open_maze()
    assert bfs_path(maze, (1, 1), (0, 0)) is None


def test_ties_resolve_up_first():
    maze = Maze.parse(BLOCK)
    # Two shortest routes from (3, 3) to the spawn; UP is expanded first.
    assert next_step(maze, (3, 3), (1, 1)) is Direction.UP
