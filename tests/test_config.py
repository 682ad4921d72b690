"""Tests for SimConfig validation."""

import dataclasses

import pytest

from streetheat.config import SimConfig


def test_defaults_match_game_tuning():
    cfg = SimConfig()
    assert cfg.player_speed == pytest.approx(130 / 32)
    assert cfg.cop_speed == pytest.approx(95 / 32)
    assert cfg.collect_phase_ms == 15000
    assert cfg.sell_phase_ms == 60000
    assert cfg.ai_interval_ms == 300
    assert cfg.contact_mode == "confrontation"
    assert not cfg.strict


def test_frozen():
    cfg = SimConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.heat_max = 50  # type: ignore[misc]


@pytest.mark.parametrize("field", ["player_speed", "cop_speed", "sell_phase_ms", "max_delta_ms"])
def test_non_positive_values_rejected(field):
    with pytest.raises(ValueError):
        SimConfig(**{field: 0})


def test_bad_contact_mode_rejected():
    with pytest.raises(ValueError):
        SimConfig(contact_mode="shootout")


def test_arrest_mode_accepted():
    assert SimConfig(contact_mode="arrest").contact_mode == "arrest"


def test_bad_sale_units_rejected():
    with pytest.raises(ValueError):
        SimConfig(sale_units=(0, 5))
    with pytest.raises(ValueError):
        SimConfig(sale_units=(4, 2))


def test_item_fraction_bounds():
    with pytest.raises(ValueError):
        SimConfig(item_fraction=1.5)
