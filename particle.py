# particle.py

import logging
import numpy as np
import constants
from physics import dampen_horizontal, apply_gravity, integrate

logger = logging.getLogger("dot_loading")

class Particle:
    """
    Represents a single dot in the animation.

    Data Contract:
    - Inputs:
        - position: (x, y) in surface pixels.
        - velocity: (vx, vy) in pixels per frame. Negative vy moves up.
        - radius: fixed for the particle's lifetime, must be > 0.
    - Invariants: position and velocity are finite. `id` is None until the
      particle is inserted into a ParticleStore, which assigns it.
    """
    def __init__(self, position, velocity, radius: float):
        self.id = None
        self.position = np.array(position, dtype=float)
        self.velocity = np.array(velocity, dtype=float)
        self.radius = radius

        if self.position.shape != (2,) or self.velocity.shape != (2,):
            raise ValueError(f"Position and velocity must be 2D vectors, got {position!r} and {velocity!r}.")
        if not self.is_finite():
            raise ValueError(f"Particle state must be finite: pos={self.position}, vel={self.velocity}")
        if not radius > 0:
            raise ValueError(f"Particle radius must be positive, got {radius!r}.")

    def __repr__(self):
        return f"Particle(id={self.id}, pos={self.position.tolist()}, vel={self.velocity.tolist()}, r={self.radius})"

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite(self.position)) and np.all(np.isfinite(self.velocity)))

    def update(self):
        """
        Advances the particle by one frame.
        Friction and gravity update the velocity first, then the position
        moves by the new velocity.
        """
        self.velocity[0] = dampen_horizontal(self.velocity[0], constants.FRICTION)
        self.velocity[1] = apply_gravity(self.velocity[1], constants.GRAVITY, constants.TERMINAL_VELOCITY)
        self.position[0], self.position[1] = integrate(self.position, self.velocity)

    def is_below(self, limit_y: float) -> bool:
        """True once the particle has fallen strictly past limit_y."""
        return self.position[1] > limit_y
