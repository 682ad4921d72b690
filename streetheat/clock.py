"""FrameClock and TickContext for the variable-timestep day loop."""

import random

from streetheat.types import TickContext


class FrameClock:
    def __init__(self, max_delta_ms: float = 100.0) -> None:
        if max_delta_ms <= 0:
            raise ValueError("max_delta_ms must be positive")
        self._max_delta_ms = max_delta_ms
        self._tick_number = 0
        self._elapsed_ms = 0.0
        self._dt_ms = 0.0

    @property
    def max_delta_ms(self) -> float:
        return self._max_delta_ms

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed_ms

    @property
    def dt_ms(self) -> float:
        return self._dt_ms

    def clamp(self, raw_ms: float) -> float:
        """Bound a raw frame delta so a suspended process does not jump."""
        return min(max(raw_ms, 0.0), self._max_delta_ms)

    def advance(self, raw_ms: float) -> int:
        self._dt_ms = self.clamp(raw_ms)
        self._elapsed_ms += self._dt_ms
        self._tick_number += 1
        return self._tick_number

    def context(self, rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt_ms=self._dt_ms,
            elapsed_ms=self._elapsed_ms,
            random=rng,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
        self._elapsed_ms = 0.0
        self._dt_ms = 0.0
