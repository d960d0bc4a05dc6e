# spawner.py

import logging
import numpy as np
import constants
from particle import Particle

logger = logging.getLogger("dot_loading")

class Spawner:
    """
    One spawn phase: launches a dot from the bottom edge once every
    SPAWN_INTERVAL ticks, from an origin that sweeps back and forth across the
    surface width.

    Data Contract:
    - Inputs:
        - rng (np.random.Generator): source of all launch randomness.
        - tick_counter (int): starting position in the spawn cycle. Phases
          started with different counters spawn on different ticks.
    - State: x_offset (signed displacement of the origin from the horizontal
      center), direction (+/-ADDER_SPEED), tick_counter (0..SPAWN_INTERVAL-1).
    - Side Effects: step() inserts at most one particle into the store.
    """
    def __init__(self, rng: np.random.Generator, tick_counter: int = 0):
        self.rng = rng
        self.x_offset = 0.0
        self.direction = constants.ADDER_SPEED
        self.tick_counter = tick_counter % constants.SPAWN_INTERVAL

    def launch_velocity(self, surface_height: float):
        """
        Random launch velocity. Taller surfaces get proportionally stronger
        upward launches so dots still reach the upper part of the screen.
        """
        vx = self.rng.uniform(-constants.LAUNCH_MAX_VX, constants.LAUNCH_MAX_VX)
        max_lift = np.sqrt(max(surface_height, 0) * constants.GRAVITY) * constants.LAUNCH_HEIGHT_SCALE + constants.LAUNCH_BASE_SPEED
        vy = -self.rng.uniform(0, max_lift)
        return (vx, vy)

    def random_radius(self) -> int:
        return int(np.floor(self.rng.uniform(0, constants.RADIUS_SPREAD))) + constants.RADIUS_MIN

    def step(self, store, surface_width: float, surface_height: float):
        """
        Runs one tick. Returns the id of the particle spawned on this tick, or
        None when the tick was not a spawn tick.
        """
        half_width = surface_width / 2
        spawned_id = None

        if self.tick_counter == 0:
            particle = Particle(
                position=(half_width + self.x_offset, surface_height),
                velocity=self.launch_velocity(surface_height),
                radius=self.random_radius()
            )
            spawned_id = store.insert(particle)

        self.tick_counter = (self.tick_counter + 1) % constants.SPAWN_INTERVAL

        # --- Sweep the origin across the width ---
        self.x_offset += self.direction
        if self.x_offset > half_width:
            self.direction = -constants.ADDER_SPEED
        if self.x_offset < -half_width:
            self.direction = constants.ADDER_SPEED

        return spawned_id
