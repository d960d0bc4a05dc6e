# physics.py

"""
Per-frame motion rules for a single dot.

All three kernels are pure functions of their arguments and are compiled by
Numba. One simulated frame is one unit of time, so velocities are expressed
in pixels per frame and displacement is simply the velocity.
"""

import numba


@numba.jit(nopython=True)
def dampen_horizontal(vx, friction_step):
    """
    Moves vx toward zero by friction_step. Snaps to exactly zero instead of
    crossing it when |vx| is smaller than the step.
    """
    if vx == 0:
        return 0.0

    magnitude = abs(vx)
    if magnitude < friction_step:
        return 0.0

    magnitude = magnitude - friction_step
    if vx < 0:
        return -magnitude
    return magnitude


@numba.jit(nopython=True)
def apply_gravity(vy, gravity_step, terminal_velocity):
    """vy' = min(vy + gravity_step, terminal_velocity)"""
    vy = vy + gravity_step
    if vy > terminal_velocity:
        vy = terminal_velocity
    return vy


@numba.jit(nopython=True)
def integrate(position, velocity):
    """Explicit Euler step: returns (x + vx, y + vy)."""
    return (position[0] + velocity[0], position[1] + velocity[1])
