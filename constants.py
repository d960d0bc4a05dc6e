# constants.py

"""
Application Constants

This module defines the fixed tuning values of the dot animation and the
static settings of its window. These are not expected to change between runs;
per-run settings belong in config.json.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable. A "frame" is one
  simulated step, i.e. one display refresh.
"""

# Default window dimensions (used when not running fullscreen)
WIDTH = 1280  # Pixels
HEIGHT = 720  # Pixels

# Framerate
FPS = 60  # Frames per second

# Colors (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

BACKGROUND_COLOR = BLACK
# Returned by the color lookup whenever a position cannot be mapped to the table.
FALLBACK_COLOR = WHITE

# Window Title
TITLE = "Dot Loading"

# Physics tuning
GRAVITY = 0.2              # Pixels per frame^2, added to vy every frame.
FRICTION = 0.025           # Pixels per frame, removed from |vx| every frame.
TERMINAL_VELOCITY = 30.0   # Pixels per frame, cap on downward speed.

# Particles further down than this many surface heights are discarded.
CULL_HEIGHT_FACTOR = 1.5

# Spawner tuning
SPAWNER_COUNT = 10         # Independent spawner phases driven per frame.
SPAWN_INTERVAL = 8         # Ticks per spawn cycle; one spawn per cycle.
ADDER_SPEED = 1.5          # Pixels per tick of the oscillating spawn origin.
LAUNCH_MAX_VX = 5.0        # Horizontal launch speed is uniform in [-5, 5).
LAUNCH_HEIGHT_SCALE = 1.5  # Scales sqrt(height * GRAVITY) for the launch.
LAUNCH_BASE_SPEED = 10.0   # Added to the scaled launch speed.
RADIUS_MIN = 5             # Pixels
RADIUS_SPREAD = 20         # Radius is RADIUS_MIN + floor(uniform(0, 20)).

# Color cycle: one full hue rotation at full saturation and value.
COLOR_PHASES = 6
COLOR_PHASE_STEPS = 256
COLOR_TABLE_LENGTH = COLOR_PHASES * COLOR_PHASE_STEPS  # 1536 entries
