# Planar Kepler model

from __future__ import annotations

import math
from typing import Tuple

from orrery.core.constants import KEPLER_ITERATIONS, TWO_PI


def mean_motion(period: float) -> float:
    """n = 2π / T (radians per time unit)."""
    return TWO_PI / period


def mean_anomaly(M0_rad: float, period: float, t: float, speed_multiplier: float = 1.0) -> float:
    """
    M = M0 + n * t * speed.

    Not wrapped into [0, 2π); everything downstream is periodic in M.
    """
    return M0_rad + mean_motion(period) * t * speed_multiplier


def solve_keplers_equation(M_rad: float, e: float, iterations: int = KEPLER_ITERATIONS) -> float:
    """
    Solve Kepler's equation for elliptic orbits:
        E = M + e sin(E)
    by fixed-point substitution seeded at E0 = M.

    The iteration count is fixed: there is no tolerance and no early exit,
    so the same (M, e) always yields the same E bit for bit.

    Args:
        M_rad: Mean anomaly (rad)
        e: eccentricity (0 <= e < 1)
        iterations: number of substitutions

    Returns:
        E_rad: Eccentric anomaly (rad)
    """
    E = M_rad
    for _ in range(iterations):
        E = M_rad + e * math.sin(E)
    return E


def true_anomaly_from_eccentric(E_rad: float, e: float) -> float:
    """ν = 2 atan2(√(1+e) sin(E/2), √(1−e) cos(E/2))."""
    return 2.0 * math.atan2(
        math.sqrt(1.0 + e) * math.sin(E_rad / 2.0),
        math.sqrt(1.0 - e) * math.cos(E_rad / 2.0),
    )


def focal_radius(a: float, e: float, E_rad: float) -> float:
    """r = a (1 − e cos E), distance from the occupied focus."""
    return a * (1.0 - e * math.cos(E_rad))


def anomalies(M_rad: float, e: float) -> Tuple[float, float]:
    """Return (E, ν) for a mean anomaly."""
    E = solve_keplers_equation(M_rad, e)
    return E, true_anomaly_from_eccentric(E, e)
