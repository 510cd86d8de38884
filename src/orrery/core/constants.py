from __future__ import annotations

import math

# Display units per astronomical unit (Earth-Sun distance on the canvas)
AU: float = 150.0

# Default canvas size in pixels
CANVAS_WIDTH: int = 800
CANVAS_HEIGHT: int = 800

# Kepler solver: fixed number of fixed-point substitutions
KEPLER_ITERATIONS: int = 10

# Max points kept per body trail (oldest evicted first)
TRAIL_CAPACITY: int = 500

# Speed multiplier bounds (powers of two reached by doubling / halving)
SPEED_MIN: float = 0.125
SPEED_MAX: float = 16.0
SPEED_DEFAULT: float = 1.0
# Allowed multipliers: powers of two between the bounds
SPEED_STEPS: tuple = (0.125, 0.25, 0.5, 1.0, 2.0, 4.0, 8.0, 16.0)

TWO_PI: float = 2.0 * math.pi

# Central star display attributes
SUN_NAME: str = "Sun"
SUN_MASS_KG: float = 1.989e30
SUN_RADIUS_PX: float = 20.0
SUN_COLOR: str = "#FFD700"
