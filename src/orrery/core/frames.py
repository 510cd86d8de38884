from __future__ import annotations

import math
from typing import Tuple

Vector2 = Tuple[float, float]


def polar_to_cartesian(r: float, angle_rad: float) -> Vector2:
    return (r * math.cos(angle_rad), r * math.sin(angle_rad))


def norm2(v: Vector2) -> float:
    return math.hypot(v[0], v[1])


def focus_to_screen(v: Vector2, origin: Vector2) -> Vector2:
    """
    Focus-relative position -> canvas position.
    The central body is drawn at `origin`; canvas y grows downward but the
    orbit is symmetric so no flip is applied.
    """
    return (origin[0] + v[0], origin[1] + v[1])
