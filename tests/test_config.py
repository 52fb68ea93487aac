from dataclasses import replace

import pytest

from flappy_game.config import ConfigurationError, GameConfig


def test_defaults_are_valid(config):
    assert config.validate() is config
    assert config.world.playable_height == 540
    assert config.gap_range == (60, 310)


def test_gap_that_fills_playable_height_is_rejected(config):
    bad = replace(config, obstacles=replace(config.obstacles, gap=420))
    with pytest.raises(ConfigurationError, match="no room"):
        bad.validate()


def test_non_negative_jump_velocity_is_rejected(config):
    bad = replace(config, physics=replace(config.physics, jump_velocity=0.0))
    with pytest.raises(ConfigurationError, match="jump_velocity"):
        bad.validate()


def test_spacing_narrower_than_obstacle_is_rejected(config):
    bad = replace(config, obstacles=replace(config.obstacles, spacing=40))
    with pytest.raises(ConfigurationError, match="overlap"):
        bad.validate()


@pytest.mark.parametrize("field_name", ["speed", "lookahead", "margin", "width"])
def test_non_positive_obstacle_values_are_rejected(config, field_name):
    bad = replace(config, obstacles=replace(config.obstacles, **{field_name: 0}))
    with pytest.raises(ConfigurationError, match=field_name):
        bad.validate()


def test_configuration_error_is_a_value_error():
    assert issubclass(ConfigurationError, ValueError)
    with pytest.raises(ValueError):
        replace(GameConfig(), tick_rate=0).validate()
