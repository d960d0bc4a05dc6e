import pytest

import constants
from physics import dampen_horizontal, apply_gravity, integrate


@pytest.mark.parametrize("vx", [0.01, -0.01, 0.0, 0.0249])
def test_friction_snaps_small_speeds_to_zero(vx):
    assert dampen_horizontal(vx, 0.025) == 0


def test_friction_removes_one_step_of_magnitude():
    assert dampen_horizontal(3.0, 0.5) == pytest.approx(2.5)
    assert dampen_horizontal(-3.0, 0.5) == pytest.approx(-2.5)


def test_friction_never_crosses_zero():
    vx = 0.1
    for _ in range(10):
        vx = dampen_horizontal(vx, constants.FRICTION)
        assert vx >= 0
    assert vx == 0


def test_friction_never_adds_speed():
    for vx in (-4.9, -1.0, 0.3, 4.9):
        assert abs(dampen_horizontal(vx, constants.FRICTION)) <= abs(vx)


def test_gravity_accelerates_downward():
    assert apply_gravity(-5.0, 0.2, 30) == pytest.approx(-4.8)
    assert apply_gravity(0.0, 0.2, 30) == pytest.approx(0.2)


def test_gravity_clamps_at_terminal_velocity():
    assert apply_gravity(29.9, 0.2, 30) == 30
    assert apply_gravity(30.0, 0.2, 30) == 30


def test_integrate_adds_velocity_to_position():
    assert integrate((10, 10), (2, -3)) == (12, 7)
    assert integrate((0.5, 1.5), (-0.25, 0.25)) == pytest.approx((0.25, 1.75))
