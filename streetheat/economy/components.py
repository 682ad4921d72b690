"""Pickups, customers and the product table."""
from __future__ import annotations

from dataclasses import dataclass, field

from streetheat.modifiers.types import ModifierKind
from streetheat.types import Coord


@dataclass(frozen=True)
class ProductDef:
    name: str
    weight: int

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError(f"weight must be positive, got {self.weight}")


PRODUCTS: tuple[ProductDef, ...] = (
    ProductDef("crack", 30),
    ProductDef("weed", 25),
    ProductDef("coke", 15),
    ProductDef("pills", 15),
    ProductDef("lean", 10),
    ProductDef("shrooms", 5),
)


@dataclass
class Collectible:
    """An item lying on a tile during the collecting phase.

    ``x``/``y`` start on the tile and drift only under the magnet pull.
    """

    tile: Coord
    kind: str
    collected: bool = False
    expired: bool = False
    x: float = field(default=0.0)
    y: float = field(default=0.0)

    def __post_init__(self) -> None:
        self.x, self.y = float(self.tile[0]), float(self.tile[1])

    @property
    def available(self) -> bool:
        return not (self.collected or self.expired)


@dataclass
class Customer:
    tile: Coord
    active: bool = True


@dataclass
class StashPickup:
    tile: Coord
    collected: bool = False


@dataclass
class PowerUpPickup:
    tile: Coord
    kind: ModifierKind
    collected: bool = False
