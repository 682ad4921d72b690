"""Officers: categories, state and the patrol/pursuit AI."""
from __future__ import annotations

from streetheat.police.components import (
    CATEGORY_CYCLE,
    CategoryProfile,
    CopCategory,
    CopState,
    Officer,
    profile,
)

__all__ = [
    "CopCategory",
    "CopState",
    "CategoryProfile",
    "CATEGORY_CYCLE",
    "Officer",
    "profile",
]
