# engine.py

import logging
import numpy as np
import pygame
import constants
from frame_clock import FrameClock
from particle_store import ParticleStore
from renderer import Renderer
from spawner import Spawner

logger = logging.getLogger("dot_loading")

class DotLoadingEngine:
    """
    Drives the spawners and the physics + render pipeline once per frame and
    exposes the start/stop control surface.

    Data Contract:
    - Inputs:
        - surface (pygame.Surface): the drawing surface. Its size is read
          fresh on every callback, so a resized surface takes effect on the
          next frame (see bind_surface).
        - frame_clock (FrameClock): the cooperative per-repaint scheduler.
        - rng (np.random.Generator): the master seeded generator, shared by
          every spawner.
        - spawner_count (int): number of independent spawn phases.
    - Outputs: None. The engine only has side effects on the store, the
      surface and the frame clock.
    - Invariants:
        - While running, every frame runs all spawner steps before the single
          physics + render tick.
        - Callbacks from a stopped or superseded session do nothing and never
          reschedule, so shutdown completes within one frame.
    """
    def __init__(self, surface: pygame.Surface, frame_clock: FrameClock, rng: np.random.Generator,
                 spawner_count: int = constants.SPAWNER_COUNT, renderer: Renderer = None):
        if spawner_count <= 0:
            raise ValueError(f"spawner_count must be positive, got {spawner_count}.")

        self.surface = surface
        self.frame_clock = frame_clock
        self.rng = rng
        self.spawner_count = spawner_count
        self.store = ParticleStore()
        self.renderer = renderer if renderer is not None else Renderer()
        self.spawners = []

        self.stopped = True
        # Incremented by every start; callbacks remember the session they belong to.
        self._generation = 0

        logger.info(f"DotLoadingEngine created with {spawner_count} spawner phase(s), surface {self.surface_size}.")

    @property
    def running(self) -> bool:
        return not self.stopped

    @property
    def surface_size(self):
        if self.surface is None:
            return (0, 0)
        return self.surface.get_size()

    def bind_surface(self, surface: pygame.Surface):
        """Binds a new drawing surface, e.g. after the window was resized."""
        self.surface = surface
        logger.info(f"Surface bound, size is now {self.surface_size}.")

    # --- Lifecycle control ---

    def start_everything(self):
        """
        Starts a fresh session. Safe to call while already running: the old
        session's callbacks go stale and the state is rebuilt from scratch.
        """
        self._generation += 1
        generation = self._generation
        self.stopped = False
        self.store.clear()

        self.spawners = [
            Spawner(self.rng, tick_counter=i % constants.SPAWN_INTERVAL)
            for i in range(self.spawner_count)
        ]
        for spawner in self.spawners:
            self._addition_loop(spawner, generation)

        # Kick start the physics by running the first tick manually
        self._physics_tick(generation)

        logger.info(f"Animation started (session {generation}).")

    def stop_everything(self):
        """Stops scheduling and drops every particle immediately. No-op when stopped."""
        if self.stopped:
            return
        self.stopped = True
        self.store.clear()
        logger.info(f"Animation stopped (session {self._generation}).")

    # --- Per-frame callbacks ---

    def _is_current(self, generation: int) -> bool:
        return not self.stopped and generation == self._generation

    def _addition_loop(self, spawner: Spawner, generation: int):
        if not self._is_current(generation):
            return

        width, height = self.surface_size
        spawner.step(self.store, width, height)

        if self._is_current(generation):
            self.frame_clock.request_frame(lambda: self._addition_loop(spawner, generation))

    def _physics_tick(self, generation: int):
        if not self._is_current(generation):
            return

        width, height = self.surface_size
        self.update_particles(height)
        if self.surface is not None:
            self.renderer.render_frame(self.surface, self.store, width, height)

        if self._is_current(generation):
            self.frame_clock.request_frame(lambda: self._physics_tick(generation))

    def update_particles(self, height: float) -> int:
        """
        Advances every particle by one frame and removes the ones that fell
        past CULL_HEIGHT_FACTOR * height. A particle whose update fails, or
        whose state stops being finite, is dropped without affecting the
        others. Returns the number of particles removed.
        """
        limit_y = height * constants.CULL_HEIGHT_FACTOR

        def step(particle):
            try:
                particle.update()
            except Exception:
                logger.exception(f"Failed to update particle {particle.id}; dropping it.")
                return True

            if not particle.is_finite():
                logger.warning(f"Particle {particle.id} left the finite domain; dropping it.")
                return True

            return particle.is_below(limit_y)

        return self.store.for_each_mutable(step)
