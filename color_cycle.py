# color_cycle.py

import math
import logging
import numpy as np
import numba
import constants

logger = logging.getLogger("dot_loading")

# --- JIT-Compiled Table Builder ---
# Kept outside any class and operating only on a NumPy array, as required by
# Numba's nopython mode.

@numba.jit(nopython=True)
def _fill_rainbow_jit(table, phase_steps):
    """
    Walks the six hue phases in order. Each phase ramps exactly one channel
    up or down across `phase_steps` steps while the other two hold the values
    they had at the phase boundary.
    """
    top = phase_steps - 1
    r, g, b = top, 0, 0
    for phase in range(6):
        for step in range(phase_steps):
            if phase == 0:
                g = step
            elif phase == 1:
                r = top - step
            elif phase == 2:
                b = step
            elif phase == 3:
                g = top - step
            elif phase == 4:
                r = step
            else:
                b = top - step
            i = phase * phase_steps + step
            table[i, 0] = r
            table[i, 1] = g
            table[i, 2] = b


def build_color_table():
    """
    Precomputes one full rainbow traversal.

    Data Contract:
    - Outputs: np.ndarray of shape (COLOR_TABLE_LENGTH, 3), dtype uint8, one
      (r, g, b) row per entry. Entry 0 is pure red.
    - Invariants: The array is read-only; adjacent rows (including the wrap
      from the last row to the first) differ by at most 1 in every channel.
    """
    table = np.zeros((constants.COLOR_TABLE_LENGTH, 3), dtype=np.uint8)
    _fill_rainbow_jit(table, constants.COLOR_PHASE_STEPS)
    table.flags.writeable = False
    logger.info(f"Color table built with {len(table)} entries.")
    return table


def lookup_for_offset(table, x, surface_width, rolling_offset):
    """
    Maps a horizontal pixel coordinate to a table color.

    The surface width is stretched over the whole table, and the rolling
    offset shifts the result so the rainbow drifts across frames. Indices wrap
    in both directions. Anything that cannot be mapped (zero width, NaN or
    infinite x) yields FALLBACK_COLOR instead of raising.
    """
    table_length = len(table)
    if table_length == 0 or not surface_width or surface_width < 0:
        return constants.FALLBACK_COLOR

    color_step = table_length / surface_width
    location = color_step * x
    if not math.isfinite(location):
        return constants.FALLBACK_COLOR

    index = (math.floor(location) + int(rolling_offset)) % table_length
    r, g, b = table[index]
    return (int(r), int(g), int(b))
