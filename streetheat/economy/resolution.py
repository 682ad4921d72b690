"""Economic consequences of arrivals, sales and captures.

Each function applies every mutation of one resolution before returning.
"""
from __future__ import annotations

import logging
import math
import random
from typing import TYPE_CHECKING, Sequence

from streetheat import events
from streetheat.economy.components import (
    PRODUCTS,
    Collectible,
    Customer,
    PowerUpPickup,
    ProductDef,
    StashPickup,
)
from streetheat.maze import Maze
from streetheat.modifiers.types import ModifierKind
from streetheat.types import Phase, Route
from streetheat.upgrades import GunDef, sale_multiplier

if TYPE_CHECKING:
    from streetheat.day import Day, DayState
    from streetheat.types import TickContext

logger = logging.getLogger(__name__)


def pick_product(rng: random.Random, products: Sequence[ProductDef] = PRODUCTS) -> str:
    """Weighted random product name."""
    total = sum(p.weight for p in products)
    roll = rng.random() * total
    for product in products:
        roll -= product.weight
        if roll <= 0:
            return product.name
    return products[0].name


def add_heat(state: DayState, amount: float, heat_max: float) -> float:
    """Raise the heat meter, clamped to ``[0, heat_max]``."""
    state.heat = min(heat_max, max(0.0, state.heat + amount))
    return state.heat


def sale_earnings(units: int, unit_price: int, better_product: int, double_cash: bool) -> int:
    return math.floor(units * unit_price * sale_multiplier(better_product) * (2 if double_cash else 1))


# --- Pickups ---

def collect_item(day: Day, ctx: TickContext, item: Collectible) -> None:
    if not item.available:
        return
    item.collected = True
    day.player.inventory += 1
    day.events.emit(ctx.tick_number, events.ITEM_COLLECTED, tile=item.tile, kind=item.kind)


def collect_stash(day: Day, ctx: TickContext, pickup: StashPickup) -> None:
    if pickup.collected:
        return
    pickup.collected = True
    day.player.stash += 1
    day.events.emit(ctx.tick_number, events.STASH_COLLECTED, tile=pickup.tile)


def collect_power_up(day: Day, ctx: TickContext, pickup: PowerUpPickup) -> None:
    if pickup.collected:
        return
    pickup.collected = True
    fresh = day.ledger.activate(pickup.kind)
    tick = ctx.tick_number
    day.events.emit(tick, events.POWER_UP_COLLECTED, tile=pickup.tile, kind=pickup.kind.value)
    day.events.emit(
        tick,
        events.MODIFIER_ACTIVATED if fresh else events.MODIFIER_REFRESHED,
        kind=pickup.kind.value,
        remaining_ms=day.ledger.remaining(pickup.kind),
    )


# --- Sales ---

def sell(day: Day, ctx: TickContext, customer: Customer) -> int:
    """Sell part of the inventory to one customer. Returns the earnings.

    A customer buys once per day; inactive customers and empty pockets
    earn nothing.
    """
    player = day.player
    if not customer.active or player.inventory <= 0:
        return 0
    cfg = day.config
    session = day.session

    units = min(player.inventory, ctx.random.randint(*cfg.sale_units))
    earnings = sale_earnings(
        units,
        cfg.unit_price,
        session.upgrades.better_product,
        day.ledger.is_active(ModifierKind.DOUBLE_CASH),
    )
    session.cash += earnings
    session.total_earned += earnings
    player.inventory -= units
    add_heat(day.state, cfg.heat_per_sale, cfg.heat_max)
    customer.active = False

    day.events.emit(
        ctx.tick_number, events.SALE_COMPLETED,
        tile=customer.tile, units=units, earnings=earnings,
    )
    logger.debug("sold %d units for $%d at %s", units, earnings, customer.tile)
    return earnings


# --- Arrival ---

def resolve_arrival(day: Day, ctx: TickContext) -> None:
    """Apply everything the player's tile grants, in a fixed order."""
    here = day.player.mover.tile
    phase = day.state.phase

    if phase is Phase.COLLECTING:
        for item in day.items:
            if item.available and item.tile == here:
                collect_item(day, ctx, item)

    if phase is Phase.SELLING:
        for pickup in day.stash_pickups:
            if not pickup.collected and pickup.tile == here:
                collect_stash(day, ctx, pickup)
        for customer in day.customers:
            if customer.active and customer.tile == here:
                sell(day, ctx, customer)

    reach = day.config.magnet_radius if day.ledger.is_active(ModifierKind.MAGNET) else 0
    for power_up in day.power_ups:
        if not power_up.collected and Maze.distance(power_up.tile, here) <= reach:
            collect_power_up(day, ctx, power_up)


# --- Penalties ---

def capture(day: Day, tick: int) -> None:
    """End the day as an arrest: lose the bag, a cut of the cash and a life."""
    session = day.session
    state = day.state
    loss = math.floor(session.cash * day.config.penalty_cash_fraction)

    day.player.inventory = 0
    session.cash -= loss
    session.lives = max(0, session.lives - 1)
    session.day += 1
    state.active = False
    state.pending_confrontation = False
    state.confronting_officer = None
    state.route = Route.GAME_OVER if session.game_over else Route.SHOP

    day.events.emit(tick, events.CAPTURED, cash_lost=loss, lives=session.lives)
    logger.info("captured: lost $%d, %d lives left", loss, session.lives)
    if session.game_over:
        day.events.emit(tick, events.GAME_OVER, total_earned=session.total_earned, day=session.day)
        logger.info("game over after earning $%d", session.total_earned)


def roll_confrontation(weapon: GunDef, reacted: bool, rng: random.Random) -> bool:
    """Duel odds: the player must react in time, then hit with the gun's accuracy."""
    if not reacted:
        return False
    return rng.random() < weapon.accuracy
