"""Tests for sales, pickups, heat and penalties."""
from __future__ import annotations

import random

import pytest

from streetheat import events
from streetheat.builder import build_day
from streetheat.config import SimConfig
from streetheat.economy.components import PRODUCTS, Collectible, Customer, PowerUpPickup, StashPickup
from streetheat.economy.resolution import (
    add_heat,
    capture,
    pick_product,
    resolve_arrival,
    roll_confrontation,
    sale_earnings,
    sell,
)
from streetheat.maze import Maze
from streetheat.modifiers.types import ModifierKind
from streetheat.session import Session
from streetheat.types import Phase, Route, TickContext
from streetheat.upgrades import gun

ROOM = Maze.parse([
    "#######",
    "#P....#",
    "#.....#",
    "#######",
])


class MaxRandom(random.Random):
    """Customers always ask for the most units."""

    def randint(self, a: int, b: int) -> int:
        return b


class FixedRandom(random.Random):
    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def make_day(session: Session | None = None, **overrides):
    config = SimConfig(item_fraction=0.0, power_up_count=(0, 0), **overrides)
    day = build_day(session or Session(), ROOM, config, random.Random(7))
    day.state.phase = Phase.SELLING
    return day


def ctx(rng: random.Random | None = None, tick: int = 1) -> TickContext:
    return TickContext(tick_number=tick, dt_ms=16.0, elapsed_ms=16.0 * tick, random=rng or MaxRandom(0))


class TestSale:
    def test_five_unit_sale(self):
        day = make_day()
        day.player.inventory = 10
        earned = sell(day, ctx(), Customer(tile=(1, 1)))
        assert earned == 100
        assert day.session.cash == 100
        assert day.session.total_earned == 100
        assert day.player.inventory == 5
        assert day.state.heat == 4

    def test_units_capped_by_inventory(self):
        day = make_day()
        day.player.inventory = 2
        assert sell(day, ctx(), Customer(tile=(1, 1))) == 40
        assert day.player.inventory == 0

    def test_customer_buys_once(self):
        day = make_day()
        day.player.inventory = 10
        customer = Customer(tile=(1, 1))
        sell(day, ctx(), customer)
        assert not customer.active
        assert sell(day, ctx(), customer) == 0
        assert day.session.cash == 100
        assert day.player.inventory == 5
        assert day.events.count(events.SALE_COMPLETED) == 1

    def test_empty_pockets_keep_customer(self):
        day = make_day()
        customer = Customer(tile=(1, 1))
        assert sell(day, ctx(), customer) == 0
        assert customer.active
        assert day.state.heat == 0

    def test_double_cash(self):
        day = make_day()
        day.player.inventory = 5
        day.ledger.activate(ModifierKind.DOUBLE_CASH)
        assert sell(day, ctx(), Customer(tile=(1, 1))) == 200

    def test_better_product(self):
        session = Session()
        session.upgrades.better_product = 2
        day = make_day(session)
        day.player.inventory = 5
        assert sell(day, ctx(), Customer(tile=(1, 1))) == 150

    def test_earnings_floor(self):
        assert sale_earnings(1, 20, 1, False) == 25
        assert sale_earnings(3, 20, 1, True) == 150
        assert sale_earnings(1, 15, 1, False) == 18

    def test_sale_event(self):
        day = make_day()
        day.player.inventory = 3
        sell(day, ctx(), Customer(tile=(2, 2)))
        event = day.events.last(events.SALE_COMPLETED)
        assert event.data == {"tile": (2, 2), "units": 3, "earnings": 60}


class TestHeat:
    def test_clamped_at_max(self):
        day = make_day()
        assert add_heat(day.state, 500, 100) == 100

    def test_clamped_at_zero(self):
        day = make_day()
        assert add_heat(day.state, -5, 100) == 0

    def test_sale_near_max(self):
        day = make_day()
        day.state.heat = 98
        day.player.inventory = 1
        sell(day, ctx(), Customer(tile=(1, 1)))
        assert day.state.heat == 100


class TestArrival:
    def test_items_only_while_collecting(self):
        day = make_day()
        item = Collectible(tile=(1, 1), kind="weed")
        day.items = [item]
        resolve_arrival(day, ctx())
        assert not item.collected

        day.state.phase = Phase.COLLECTING
        resolve_arrival(day, ctx())
        assert item.collected
        assert day.player.inventory == 1
        assert day.events.last(events.ITEM_COLLECTED).data["kind"] == "weed"

    def test_expired_item_stays(self):
        day = make_day()
        day.state.phase = Phase.COLLECTING
        item = Collectible(tile=(1, 1), kind="weed", expired=True)
        day.items = [item]
        resolve_arrival(day, ctx())
        assert day.player.inventory == 0

    def test_stash_only_while_selling(self):
        day = make_day()
        day.state.phase = Phase.COLLECTING
        pickup = StashPickup(tile=(1, 1))
        day.stash_pickups = [pickup]
        resolve_arrival(day, ctx())
        assert day.player.stash == 0

        day.state.phase = Phase.SELLING
        resolve_arrival(day, ctx())
        assert day.player.stash == 1
        assert pickup.collected

    def test_sale_on_arrival(self):
        day = make_day()
        day.player.inventory = 4
        day.customers = [Customer(tile=(1, 1)), Customer(tile=(3, 1))]
        resolve_arrival(day, ctx())
        assert day.session.cash == 80
        assert day.customers[1].active

    def test_power_up_on_tile(self):
        day = make_day()
        pickup = PowerUpPickup(tile=(1, 1), kind=ModifierKind.BLIND)
        day.power_ups = [pickup]
        resolve_arrival(day, ctx())
        assert pickup.collected
        assert day.ledger.is_active(ModifierKind.BLIND)
        assert day.events.last(events.MODIFIER_ACTIVATED).data["kind"] == "BLIND"

    def test_power_up_refresh_event(self):
        day = make_day()
        day.ledger.activate(ModifierKind.BLIND, 10)
        day.power_ups = [PowerUpPickup(tile=(1, 1), kind=ModifierKind.BLIND)]
        resolve_arrival(day, ctx())
        assert day.ledger.remaining(ModifierKind.BLIND) == 8000
        assert day.events.last(events.MODIFIER_REFRESHED) is not None

    def test_magnet_widens_power_up_reach(self):
        day = make_day()
        pickup = PowerUpPickup(tile=(3, 1), kind=ModifierKind.DOUBLE_CASH)
        day.power_ups = [pickup]
        resolve_arrival(day, ctx())
        assert not pickup.collected

        day.ledger.activate(ModifierKind.MAGNET)
        resolve_arrival(day, ctx())
        assert pickup.collected


class TestCapture:
    def test_penalties(self):
        day = make_day(Session(cash=101, lives=3, day=2))
        day.player.inventory = 7
        capture(day, 9)
        assert day.player.inventory == 0
        assert day.session.cash == 76
        assert day.session.lives == 2
        assert day.session.day == 3
        assert not day.state.active
        assert day.state.route is Route.SHOP
        assert day.events.last(events.CAPTURED).data == {"cash_lost": 25, "lives": 2}
        assert day.events.last(events.GAME_OVER) is None

    def test_last_life_routes_to_game_over(self):
        day = make_day(Session(cash=40, lives=1))
        capture(day, 3)
        assert day.session.lives == 0
        assert day.state.route is Route.GAME_OVER
        assert day.events.last(events.GAME_OVER) is not None

    def test_lives_never_negative(self):
        day = make_day(Session(lives=0))
        capture(day, 1)
        assert day.session.lives == 0
        assert day.state.route is Route.GAME_OVER


class TestRolls:
    def test_pick_product_bounds(self):
        assert pick_product(FixedRandom(0.0)) == "crack"
        assert pick_product(FixedRandom(0.999)) == "shrooms"

    def test_pick_product_is_known(self):
        rng = random.Random(11)
        names = {p.name for p in PRODUCTS}
        assert all(pick_product(rng) in names for _ in range(50))

    def test_confrontation_needs_reaction(self):
        assert not roll_confrontation(gun("minigun"), False, FixedRandom(0.0))

    def test_confrontation_accuracy(self):
        fists = gun("fists")
        assert roll_confrontation(fists, True, FixedRandom(0.1))
        assert not roll_confrontation(fists, True, FixedRandom(0.9))

    @pytest.mark.parametrize("gun_id", ["pistol", "ak47"])
    def test_better_guns_win_more(self, gun_id):
        assert gun(gun_id).accuracy > gun("fists").accuracy
