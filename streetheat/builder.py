"""Day setup: seeds pickups, officers and the player for a new day."""
from __future__ import annotations

import logging
import random

from streetheat.config import SimConfig
from streetheat.day import Day, DayState, Player
from streetheat.economy.components import Collectible, Customer, PowerUpPickup, StashPickup
from streetheat.economy.resolution import pick_product
from streetheat.maze import Maze, TileKind
from streetheat.modifiers.ledger import ModifierLedger
from streetheat.modifiers.types import POWER_UPS
from streetheat.motion import Mover
from streetheat.police.components import CATEGORY_CYCLE, Officer
from streetheat.police.systems import officer_speed
from streetheat.session import Session
from streetheat.types import Coord, Phase
from streetheat.upgrades import customer_count, detection_range, speed_multiplier

logger = logging.getLogger(__name__)


def seed_tiles(maze: Maze) -> list[Coord]:
    """Walkable tiles that can hold a pickup or customer.

    Tunnel mouths are skipped: the player never comes to rest on one.
    """
    return [t for t in maze.path_tiles() if maze.kind_at(t) is not TileKind.TUNNEL]


def seed_items(maze: Maze, config: SimConfig, rng: random.Random) -> list[Collectible]:
    tiles = seed_tiles(maze)
    rng.shuffle(tiles)
    count = int(len(tiles) * config.item_fraction)
    return [Collectible(tile=tile, kind=pick_product(rng)) for tile in tiles[:count]]


def seed_power_ups(maze: Maze, config: SimConfig, rng: random.Random) -> list[PowerUpPickup]:
    tiles = seed_tiles(maze)
    rng.shuffle(tiles)
    count = rng.randint(*config.power_up_count)
    spawn = maze.player_spawn
    pickups: list[PowerUpPickup] = []
    for tile in tiles:
        if len(pickups) >= count:
            break
        if Maze.distance(tile, spawn) < config.power_up_clearance:
            continue
        pickups.append(PowerUpPickup(tile=tile, kind=rng.choice(POWER_UPS).kind))
    return pickups


def spawn_customers(
    maze: Maze, session: Session, config: SimConfig, rng: random.Random,
) -> list[Customer]:
    """Place the day's customers away from the player spawn.

    Fewer customers than requested appear when the maze runs out of room.
    """
    tiles = seed_tiles(maze)
    rng.shuffle(tiles)
    count = customer_count(config.base_customers, session.advertising_tier)
    spawn = maze.player_spawn
    customers: list[Customer] = []
    for tile in tiles:
        if len(customers) >= count:
            break
        if Maze.distance(tile, spawn) < config.customer_clearance:
            continue
        if maze.kind_at(tile) is TileKind.COP_SPAWN:
            continue
        customers.append(Customer(tile=tile))
    return customers


def spawn_officers(maze: Maze, session: Session, config: SimConfig) -> list[Officer]:
    """Officers for the day, one per station tile up to the day's quota."""
    wanted = min(config.max_officers, 1 + (session.day - 1) // config.days_per_officer)
    radius = detection_range(config.base_detection, session.upgrades.street_smarts)
    officers: list[Officer] = []
    for i, home in enumerate(maze.cop_spawns[:wanted]):
        category = CATEGORY_CYCLE[i % len(CATEGORY_CYCLE)]
        speed = officer_speed(category, config.cop_speed, session.day, config.cop_day_speed_scale)
        officers.append(Officer(
            id=i,
            category=category,
            mover=Mover(tile=home, speed=speed),
            home=home,
            detection_radius=radius,
            dormant_ms=i * config.deploy_stagger_ms + config.deploy_offset_ms,
        ))
    return officers


def build_day(
    session: Session,
    maze: Maze,
    config: SimConfig,
    rng: random.Random,
) -> Day:
    """Reset per-day session flags and lay out a fresh day."""
    session.getaway_used_today = False
    base_speed = config.player_speed * speed_multiplier(session.upgrades.speed_shoes)
    player = Player(mover=Mover(tile=maze.player_spawn, speed=base_speed), base_speed=base_speed)
    day = Day(
        session=session,
        maze=maze,
        config=config,
        player=player,
        state=DayState(phase=Phase.COLLECTING, phase_remaining_ms=config.collect_phase_ms),
        rng=rng,
        ledger=ModifierLedger(POWER_UPS),
    )
    day.items = seed_items(maze, config, rng)
    day.officers = spawn_officers(maze, session, config)
    day.stash_pickups = [StashPickup(tile=tile) for tile in maze.stash_tiles]
    day.power_ups = seed_power_ups(maze, config, rng)
    logger.info(
        "day %d: %d items, %d officers, %d power-ups",
        session.day, len(day.items), len(day.officers), len(day.power_ups),
    )
    return day
