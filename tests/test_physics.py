import pytest

from flappy_game import physics


def test_spawn_body_matches_start_position(config):
    body = physics.spawn_body(config)
    assert body.x == pytest.approx(420 * 0.28)
    assert body.y == 640 / 2 - 24 / 2
    assert body.velocity == 0.0
    assert body.size == 24


def test_integrate_applies_gravity_then_velocity(config):
    body = physics.spawn_body(config)
    body.y = 100.0

    physics.integrate(body, config.physics)
    assert body.velocity == pytest.approx(0.55)
    assert body.y == pytest.approx(100.55)

    physics.integrate(body, config.physics)
    assert body.velocity == pytest.approx(1.10)
    assert body.y == pytest.approx(101.65)


@pytest.mark.parametrize("prior", [12.0, 0.0, -3.0, -20.0])
def test_flap_replaces_velocity(config, prior):
    body = physics.spawn_body(config)
    body.velocity = prior
    physics.flap(body, config.physics)
    assert body.velocity == -8.5


def test_body_x_is_untouched_by_physics(config):
    body = physics.spawn_body(config)
    x = body.x
    for _ in range(10):
        physics.integrate(body, config.physics)
    physics.flap(body, config.physics)
    assert body.x == x
