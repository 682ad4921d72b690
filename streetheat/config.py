"""Simulation tunables."""
from __future__ import annotations

from dataclasses import dataclass

CONTACT_MODES = ("confrontation", "arrest")


@dataclass(frozen=True)
class SimConfig:
    """Immutable tunables for one day of simulation.

    Speeds are in tiles per second, durations in milliseconds.

    Attributes:
        player_speed: Player base speed before upgrades.
        cop_speed: Officer base speed before category and day scaling.
        collect_speed_mult: Player speed bonus while collecting.
        boost_speed_mult: Speed multiplier of the SPEED_BOOST modifier.
        high_speed_mult: Speed multiplier while high. Wins over the boost.
        high_duration_ms: High duration before stash-tolerance upgrades.
        collect_phase_ms: Length of the collecting phase.
        sell_phase_ms: Length of the selling phase.
        ai_interval_ms: Time between officer decisions.
        base_detection: Detection radius in tiles before upgrades.
        heat_detection_bonus: Extra radius at maximum heat.
        heat_max: Upper clamp of the heat meter.
        heat_per_sale: Heat added by every sale.
        heat_passive_per_s: Heat added per second while selling.
        unit_price: Cash per unit sold before multipliers.
        sale_units: Inclusive (min, max) units a customer asks for.
        base_customers: Customers per day before advertising.
        customer_clearance: Customers spawn at least this far from the player spawn.
        item_fraction: Share of path tiles seeded with items each day.
        power_up_count: Inclusive (min, max) power-up pickups per day.
        power_up_clearance: Power-ups spawn at least this far from the player spawn.
        magnet_radius: Manhattan radius of the MAGNET pull and pickup.
        magnet_collect_radius: Items this close are auto-collected by the magnet.
        magnet_pull_speed: How fast pulled items drift towards the player.
        max_officers: Officer cap per day.
        days_per_officer: A new officer joins every this many days.
        cop_day_speed_scale: Officer speed gain per day survived.
        deploy_stagger_ms: Delay added per officer before first deployment.
        deploy_offset_ms: Delay before the first officer deploys.
        knockout_delay_ms: Re-deployment delay after a knockout.
        penalty_cash_fraction: Share of cash lost on capture.
        max_delta_ms: Largest frame delta the clock accepts.
        contact_mode: ``"confrontation"`` hands contact off to the duel
            collaborator, ``"arrest"`` resolves it as a direct capture.
        strict: Raise instead of ignoring ticks on an inactive day.
    """

    player_speed: float = 130 / 32
    cop_speed: float = 95 / 32
    collect_speed_mult: float = 1.4
    boost_speed_mult: float = 1.5
    high_speed_mult: float = 2.8
    high_duration_ms: float = 5000.0
    collect_phase_ms: float = 15000.0
    sell_phase_ms: float = 60000.0
    ai_interval_ms: float = 300.0
    base_detection: float = 5.0
    heat_detection_bonus: float = 4.0
    heat_max: float = 100.0
    heat_per_sale: float = 4.0
    heat_passive_per_s: float = 0.5
    unit_price: int = 20
    sale_units: tuple[int, int] = (1, 5)
    base_customers: int = 6
    customer_clearance: int = 4
    item_fraction: float = 0.5
    power_up_count: tuple[int, int] = (4, 6)
    power_up_clearance: int = 3
    magnet_radius: int = 2
    magnet_collect_radius: int = 1
    magnet_pull_speed: float = 3.75
    max_officers: int = 3
    days_per_officer: int = 3
    cop_day_speed_scale: float = 0.03
    deploy_stagger_ms: float = 3000.0
    deploy_offset_ms: float = 1500.0
    knockout_delay_ms: float = 4000.0
    penalty_cash_fraction: float = 0.25
    max_delta_ms: float = 100.0
    contact_mode: str = "confrontation"
    strict: bool = False

    def __post_init__(self) -> None:
        for name in ("player_speed", "cop_speed", "collect_phase_ms",
                     "sell_phase_ms", "ai_interval_ms", "heat_max",
                     "max_delta_ms"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        lo, hi = self.sale_units
        if not 1 <= lo <= hi:
            raise ValueError(f"sale_units must satisfy 1 <= min <= max, got {self.sale_units}")
        lo, hi = self.power_up_count
        if not 0 <= lo <= hi:
            raise ValueError(f"power_up_count must satisfy 0 <= min <= max, got {self.power_up_count}")
        if not 0.0 <= self.item_fraction <= 1.0:
            raise ValueError(f"item_fraction must be in [0, 1], got {self.item_fraction}")
        if self.contact_mode not in CONTACT_MODES:
            raise ValueError(
                f"contact_mode must be one of {CONTACT_MODES}, got {self.contact_mode!r}"
            )
