"""Tests for the frame clock."""

import random

import pytest

from streetheat.clock import FrameClock
from streetheat.types import TickContext


def test_defaults():
    clock = FrameClock()
    assert clock.max_delta_ms == 100.0
    assert clock.tick_number == 0
    assert clock.elapsed_ms == 0.0


def test_rejects_non_positive_max():
    with pytest.raises(ValueError):
        FrameClock(0)


def test_large_delta_is_clamped():
    clock = FrameClock()
    clock.advance(5000)
    assert clock.dt_ms == 100.0
    assert clock.elapsed_ms == 100.0


def test_negative_delta_is_zero():
    clock = FrameClock()
    clock.advance(-20)
    assert clock.dt_ms == 0.0


def test_advance_counts_ticks():
    clock = FrameClock()
    assert clock.advance(16) == 1
    assert clock.advance(16) == 2
    assert clock.elapsed_ms == pytest.approx(32.0)


def test_context_carries_rng_and_timing():
    clock = FrameClock()
    rng = random.Random(3)
    clock.advance(40)
    ctx = clock.context(rng)
    assert isinstance(ctx, TickContext)
    assert ctx.tick_number == 1
    assert ctx.dt_ms == 40.0
    assert ctx.random is rng


def test_reset():
    clock = FrameClock()
    clock.advance(50)
    clock.reset(10)
    assert clock.tick_number == 10
    assert clock.elapsed_ms == 0.0
