"""Upgrade, advertising and weapon catalogs plus the shop's purchase rules."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from streetheat.types import PurchaseError

if TYPE_CHECKING:
    from streetheat.session import Session

logger = logging.getLogger(__name__)


@dataclass
class Upgrades:
    """Purchased upgrade levels. Boolean upgrades have a single level."""

    speed_shoes: int = 0
    street_smarts: int = 0
    lookout: bool = False
    better_product: int = 0
    stash_tolerance: int = 0
    getaway_car: bool = False

    def level(self, upgrade_id: str) -> int:
        value = getattr(self, upgrade_id)
        return int(value)

    def set_level(self, upgrade_id: str, level: int) -> None:
        if isinstance(getattr(self, upgrade_id), bool):
            setattr(self, upgrade_id, level > 0)
        else:
            setattr(self, upgrade_id, level)


@dataclass(frozen=True)
class UpgradeDef:
    id: str
    name: str
    description: str
    costs: tuple[int, ...]

    @property
    def max_level(self) -> int:
        return len(self.costs)


@dataclass(frozen=True)
class AdvertisingTier:
    name: str
    cost: int
    customer_bonus: int


@dataclass(frozen=True)
class GunDef:
    """A confrontation weapon.

    Attributes:
        draw_window_ms: How long the player has to react in the duel.
        accuracy: Win chance when the player reacts in time.
    """

    id: str
    name: str
    cost: int
    draw_window_ms: int
    accuracy: float


UPGRADES: tuple[UpgradeDef, ...] = (
    UpgradeDef("speed_shoes", "Speed Shoes", "Move faster through the streets", (100, 250, 500)),
    UpgradeDef("street_smarts", "Street Smarts", "Cops take longer to notice you", (200, 400)),
    UpgradeDef("lookout", "Lookout", "See cop positions through walls", (300,)),
    UpgradeDef("better_product", "Better Product", "Customers pay more per sale", (250, 500)),
    UpgradeDef("stash_tolerance", "Tolerance", "Highs last longer", (200, 450)),
    UpgradeDef("getaway_car", "Getaway Car", "Escape cops once per day for free", (400,)),
)

ADVERTISING_TIERS: tuple[AdvertisingTier, ...] = (
    AdvertisingTier("Word of Mouth", 100, 2),
    AdvertisingTier("Burner Phones", 300, 5),
)

GUNS: tuple[GunDef, ...] = (
    GunDef("fists", "Bare Fists", 0, 400, 0.25),
    GunDef("knife", "Switchblade", 75, 450, 0.3),
    GunDef("pistol", "9mm Pistol", 150, 600, 0.5),
    GunDef("revolver", ".44 Magnum", 275, 550, 0.6),
    GunDef("shotgun", "Sawed-Off", 400, 800, 0.7),
    GunDef("mac10", "MAC-10", 550, 900, 0.75),
    GunDef("uzi", "Uzi", 700, 1000, 0.85),
    GunDef("ak47", "AK-47", 1000, 1100, 0.9),
    GunDef("rpg", "RPG", 1500, 1300, 0.95),
    GunDef("minigun", "Minigun", 2500, 1500, 0.99),
)

_UPGRADES_BY_ID = {u.id: u for u in UPGRADES}
_GUNS_BY_ID = {g.id: g for g in GUNS}


# --- Effect curves ---

def speed_multiplier(level: int) -> float:
    return 1 + level * 0.15


def detection_range(base: float, level: int) -> float:
    return max(2.0, base - level * 1.5)


def sale_multiplier(level: int) -> float:
    return 1 + level * 0.25


def high_duration(base_ms: float, level: int) -> float:
    return base_ms + level * 2500


def customer_count(base: int, tier: int) -> int:
    return base + sum(t.customer_bonus for t in ADVERTISING_TIERS[:tier])


def gun(gun_id: str) -> GunDef:
    """Look up a weapon, falling back to bare fists for unknown ids."""
    return _GUNS_BY_ID.get(gun_id, GUNS[0])


# --- Purchases ---

def _charge(session: Session, cost: int, what: str) -> None:
    if session.cash < cost:
        raise PurchaseError(f"{what} costs ${cost}, only ${session.cash} on hand")
    session.cash -= cost


def buy_upgrade(session: Session, upgrade_id: str) -> int:
    """Buy the next level of an upgrade. Returns the new level."""
    defn = _UPGRADES_BY_ID.get(upgrade_id)
    if defn is None:
        raise PurchaseError(f"unknown upgrade {upgrade_id!r}")
    current = session.upgrades.level(upgrade_id)
    if current >= defn.max_level:
        raise PurchaseError(f"{defn.name} is already at max level")
    _charge(session, defn.costs[current], defn.name)
    session.upgrades.set_level(upgrade_id, current + 1)
    logger.info("bought %s level %d", upgrade_id, current + 1)
    return current + 1


def buy_advertising(session: Session) -> int:
    """Buy the next advertising tier. Tiers are bought in order."""
    tier = session.advertising_tier
    if tier >= len(ADVERTISING_TIERS):
        raise PurchaseError("all advertising tiers already owned")
    defn = ADVERTISING_TIERS[tier]
    _charge(session, defn.cost, defn.name)
    session.advertising_tier = tier + 1
    return session.advertising_tier


def buy_gun(session: Session, gun_id: str) -> None:
    """Buy and equip a weapon. Owned weapons are just equipped."""
    defn = _GUNS_BY_ID.get(gun_id)
    if defn is None:
        raise PurchaseError(f"unknown gun {gun_id!r}")
    if gun_id not in session.owned_guns:
        _charge(session, defn.cost, defn.name)
        session.owned_guns.append(gun_id)
    session.current_gun = gun_id


def equip_gun(session: Session, gun_id: str) -> None:
    if gun_id not in session.owned_guns:
        raise PurchaseError(f"{gun_id!r} is not owned")
    session.current_gun = gun_id
