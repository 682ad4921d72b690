"""Pickups, sales, heat and penalties."""
from __future__ import annotations

from streetheat.economy.components import (
    PRODUCTS,
    Collectible,
    Customer,
    PowerUpPickup,
    ProductDef,
    StashPickup,
)
from streetheat.economy.resolution import (
    add_heat,
    pick_product,
    roll_confrontation,
    sale_earnings,
)

__all__ = [
    "ProductDef",
    "PRODUCTS",
    "Collectible",
    "Customer",
    "StashPickup",
    "PowerUpPickup",
    "add_heat",
    "pick_product",
    "roll_confrontation",
    "sale_earnings",
]
