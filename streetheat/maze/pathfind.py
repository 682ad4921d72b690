"""Breadth-first pathfinding over a Maze."""
from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from streetheat.types import CARDINALS, Coord, Direction

if TYPE_CHECKING:
    from streetheat.maze.grid import Maze

logger = logging.getLogger(__name__)


def bfs_path(
    maze: Maze,
    start: Coord,
    goal: Coord,
    for_cop: bool = True,
) -> list[Coord] | None:
    """Shortest path from ``start`` to ``goal`` inclusive, or None.

    Neighbours are expanded in UP, DOWN, LEFT, RIGHT order, so ties always
    resolve the same way. The start tile itself need not be walkable.
    """
    if start == goal:
        return [start]
    if not maze.walkable(goal, for_cop):
        return None

    came_from: dict[Coord, Coord] = {}
    visited: set[Coord] = {start}
    frontier: deque[Coord] = deque([start])

    while frontier:
        current = frontier.popleft()
        for neighbor in maze.neighbors(current, for_cop):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            came_from[neighbor] = current
            if neighbor == goal:
                path: list[Coord] = [neighbor]
                while path[-1] in came_from:
                    path.append(came_from[path[-1]])
                path.reverse()
                return path
            frontier.append(neighbor)

    return None


def next_step(
    maze: Maze,
    start: Coord,
    goal: Coord,
    for_cop: bool = True,
) -> Direction:
    """First direction of a shortest path, NONE if there or unreachable."""
    if start == goal:
        return Direction.NONE
    path = bfs_path(maze, start, goal, for_cop)
    if path is None:
        logger.debug("no route from %s to %s", start, goal)
        return Direction.NONE
    first = path[1]
    for d in CARDINALS:
        if d.step(start) == first:
            return d
    return Direction.NONE
