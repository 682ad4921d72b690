"""Autopilot: headless street-heat run.

Plays whole days with a greedy bot: grab the nearest item while collecting,
walk the bag to the nearest customer while selling, and smoke the stash when
an officer gives chase. Confrontations are settled with the duel odds of the
equipped gun. Between days the bot spends its cash in the shop.

Run:
    python main.py
    python main.py --days 10 --seed 7 --verbose
"""
from __future__ import annotations

import argparse
import logging
import random
import sys

from streetheat import Direction, Maze, Route, Session, SimConfig, begin_day, street_rank
from streetheat.economy import roll_confrontation
from streetheat.maze import next_step
from streetheat.police import CopState
from streetheat.types import Coord, Phase, PurchaseError
from streetheat.upgrades import UPGRADES, buy_advertising, buy_gun, buy_upgrade, gun

FRAME_MS = 1000 / 60

CITY = [
    "###################",
    "#P.......#.......C#",
    "#.##.###.#.###.##.#",
    "#.................#",
    "#.##.#.#####.#.##.#",
    "#....#...#...#....#",
    "####.###.#.###.####",
    "T......#HHH#......T",
    "####.#.#####.#.####",
    "#........#........#",
    "#.##.###.#.###.##.#",
    "#..#.....B.....#..#",
    "##.#.#.#####.#.#.##",
    "#....#...#...#....#",
    "#.######.#.######.#",
    "#C...............C#",
    "###################",
]


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Autopilot: headless street-heat run")
    p.add_argument("--days", type=int, default=5, help="Days to play (default: 5)")
    p.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    p.add_argument("--reflex", type=float, default=0.7,
                   help="Chance the bot draws in time in a duel (default: 0.7)")
    p.add_argument("--verbose", action="store_true", help="Log simulation detail")
    return p.parse_args()


def nearest(origin: Coord, tiles: list[Coord]) -> Coord | None:
    if not tiles:
        return None
    return min(tiles, key=lambda t: Maze.distance(origin, t))


def steer(sim) -> tuple[Direction, bool]:
    """Pick the bot's intent for this frame.

    Plans from the tile the player is heading to, since a queued turn is
    only taken once the player comes to rest there.
    """
    day = sim.day
    mover = day.player.mover
    here = mover.target if mover.moving else mover.tile
    chased = any(o.state is CopState.PURSUING for o in day.officers)
    use_stash = chased and day.player.stash > 0 and not day.player.is_high

    if day.state.phase is Phase.COLLECTING:
        goal = nearest(here, [i.tile for i in day.items if i.available and i.tile != here])
    elif day.player.inventory > 0:
        goal = nearest(here, [c.tile for c in day.customers if c.active and c.tile != here])
    else:
        goal = nearest(here, [s.tile for s in day.stash_pickups if not s.collected and s.tile != here])
    if goal is None:
        return Direction.NONE, use_stash
    return next_step(day.maze, here, goal, for_cop=False), use_stash


def shop(session: Session) -> list[str]:
    bought: list[str] = []
    for upgrade in UPGRADES:
        try:
            buy_upgrade(session, upgrade.id)
            bought.append(upgrade.name)
        except PurchaseError:
            continue
    try:
        buy_advertising(session)
        bought.append("advertising")
    except PurchaseError:
        pass
    try:
        buy_gun(session, "pistol")
        bought.append("pistol")
    except PurchaseError:
        pass
    return bought


def run_day(sim, session: Session, rng: random.Random, reflex: float) -> Route:
    """Drive one simulation until it hands control to another scene."""
    while True:
        intent, use_stash = steer(sim)
        sim.tick(FRAME_MS, intent, use_stash)
        if sim.active:
            continue
        if sim.route is Route.CONFRONTATION:
            won = roll_confrontation(gun(session.current_gun), rng.random() < reflex, rng)
            print(f"  duel with {session.current_gun}: {'won' if won else 'lost'}")
            sim.resolve_confrontation(won)
        return sim.route


def play_day(session: Session, maze: Maze, rng: random.Random, reflex: float) -> Route:
    while True:
        sim = begin_day(session, maze, SimConfig(), seed=rng.getrandbits(32))
        route = run_day(sim, session, rng, reflex)
        if route is not Route.REPLAY_DAY:
            return route
        print(f"  replaying day {session.day}")


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    maze = Maze.parse(CITY)
    rng = random.Random(args.seed)
    session = Session()

    for _ in range(args.days):
        day_index = session.day
        route = play_day(session, maze, rng, args.reflex)
        print(f"day {day_index}: {route.value.lower()}, cash ${session.cash}, lives {session.lives}")
        if route is Route.GAME_OVER:
            break
        bought = shop(session)
        if bought:
            print(f"  shop: {', '.join(bought)}")

    print(f"final: ${session.total_earned} earned, rank {street_rank(session.total_earned)}")
    sys.exit(0 if not session.game_over else 1)


if __name__ == "__main__":
    main()
