# renderer.py
"""
Draws the current particle population with pygame.
"""
import math
import logging
import pygame
import constants
from color_cycle import build_color_table, lookup_for_offset

logger = logging.getLogger("dot_loading")

# --- Data Contracts ---
#
# class Renderer:
#   - __init__(self, color_table=None):
#     - Inputs:
#       - color_table: a table from color_cycle.build_color_table(). Built
#         once here when not supplied; it is only ever read afterwards.
#     - Side Effects: None.
#
#   - render_frame(self, surface, store, width, height) -> int:
#     - Inputs:
#       - surface: pygame.Surface to draw on.
#       - store: the ParticleStore to read. No particle is modified.
#       - width, height: the current visible area in pixels.
#     - Outputs: number of particles drawn.
#     - Side Effects: clears the visible area, draws one filled circle per
#       particle, then advances the rolling offset by 1 (mod table length).
#     - Invariants: a particle that fails to draw is skipped; the rest of the
#       frame is still drawn.

class Renderer:
    """
    Paints dots in a rainbow that drifts horizontally from frame to frame.
    """
    def __init__(self, color_table=None):
        self.color_table = color_table if color_table is not None else build_color_table()
        self.rolling_offset = 0

    def color_for_x(self, x: float, width: float):
        return lookup_for_offset(self.color_table, x, width, self.rolling_offset)

    def render_frame(self, surface: pygame.Surface, store, width: float, height: float) -> int:
        drawn = 0
        if width > 0 and height > 0:
            surface.fill(constants.BACKGROUND_COLOR, pygame.Rect(0, 0, int(width), int(height)))

            for particle in store:
                try:
                    if self._draw_particle(surface, particle, width):
                        drawn += 1
                except Exception:
                    logger.exception(f"Failed to draw particle {particle.id}; skipping it this frame.")

        self.rolling_offset = (self.rolling_offset + 1) % len(self.color_table)
        return drawn

    def _draw_particle(self, surface: pygame.Surface, particle, width: float) -> bool:
        x, y = particle.position
        radius = particle.radius
        # Degenerate geometry is not drawn.
        if not (math.isfinite(x) and math.isfinite(y)) or not radius > 0:
            return False

        pygame.draw.circle(
            surface,
            self.color_for_x(x, width),
            (int(x), int(y)),
            int(radius)
        )
        return True
