"""Officer component and the per-category profiles."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from streetheat.motion import Mover
from streetheat.types import Coord


class CopCategory(Enum):
    BEAT = "BEAT"
    PATROL = "PATROL"
    UNDERCOVER = "UNDERCOVER"


class CopState(Enum):
    DORMANT = "DORMANT"
    PATROLLING = "PATROLLING"
    PURSUING = "PURSUING"


@dataclass(frozen=True)
class CategoryProfile:
    """Fixed traits of an officer category.

    Attributes:
        speed_mult: Multiplier on the day's officer speed.
        disguise_distance: Disguised while patrolling farther than this from
            the player. None means never disguised.
    """

    speed_mult: float = 1.0
    disguise_distance: int | None = None


_PROFILES: dict[CopCategory, CategoryProfile] = {
    CopCategory.BEAT: CategoryProfile(),
    CopCategory.PATROL: CategoryProfile(speed_mult=1.3),
    CopCategory.UNDERCOVER: CategoryProfile(disguise_distance=3),
}

CATEGORY_CYCLE: tuple[CopCategory, ...] = (
    CopCategory.BEAT, CopCategory.PATROL, CopCategory.UNDERCOVER,
)


def profile(category: CopCategory) -> CategoryProfile:
    return _PROFILES[category]


@dataclass
class Officer:
    id: int
    category: CopCategory
    mover: Mover
    home: Coord
    detection_radius: float
    dormant_ms: float
    state: CopState = CopState.DORMANT
    announced: bool = False
    ai_ms: float = 0.0

    @property
    def deployed(self) -> bool:
        return self.state is not CopState.DORMANT
