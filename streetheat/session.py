"""Session state carried across days."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from streetheat.types import SnapshotError
from streetheat.upgrades import Upgrades

_SNAPSHOT_VERSION = 1

RANKS: tuple[tuple[int, str], ...] = (
    (30000, "Legend"),
    (15000, "Kingpin"),
    (5000, "Block Captain"),
    (0, "Corner Boy"),
)


@dataclass
class Session:
    """Everything that survives from one day to the next.

    Loading and saving belong to the caller; the core only mutates this
    object in place.
    """

    day: int = 1
    cash: int = 0
    lives: int = 3
    total_earned: int = 0
    upgrades: Upgrades = field(default_factory=Upgrades)
    advertising_tier: int = 0
    selected_skin: str = "default"
    owned_skins: list[str] = field(default_factory=lambda: ["default"])
    current_gun: str = "fists"
    owned_guns: list[str] = field(default_factory=lambda: ["fists"])
    getaway_used_today: bool = False

    @property
    def game_over(self) -> bool:
        return self.lives <= 0

    def snapshot(self) -> dict[str, Any]:
        data = dataclasses.asdict(self)
        data["version"] = _SNAPSHOT_VERSION
        return data

    @classmethod
    def restore(cls, data: dict[str, Any]) -> Session:
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )
        fields = {k: v for k, v in data.items() if k != "version"}
        fields["upgrades"] = Upgrades(**fields.get("upgrades", {}))
        fields["owned_skins"] = list(fields.get("owned_skins", ["default"]))
        fields["owned_guns"] = list(fields.get("owned_guns", ["fists"]))
        return cls(**fields)


def street_rank(total_earned: int) -> str:
    for threshold, title in RANKS:
        if total_earned >= threshold:
            return title
    return RANKS[-1][1]
