# src/orrery/physics/orbit.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from orrery.core.constants import TWO_PI
from orrery.core.frames import Vector2, polar_to_cartesian
from orrery.physics.kepler import anomalies, focal_radius, mean_anomaly


@dataclass(frozen=True)
class OrbitalElements:
    """
    Planar orbital elements for an elliptic orbit about a fixed focus.

    Units:
        semi_major_axis: display units (pixels; 1 AU = 150)
        eccentricity: 0 <= e < 1
        mean_anomaly_at_epoch: radians at simulation time 0
        orbital_period: time units (days) per revolution
    """
    semi_major_axis: float
    eccentricity: float
    mean_anomaly_at_epoch: float
    orbital_period: float

    def __post_init__(self):
        if not (math.isfinite(self.semi_major_axis) and self.semi_major_axis > 0):
            raise ValueError(f"Semi-major axis must be positive. Got: {self.semi_major_axis}")
        if not (0.0 <= self.eccentricity < 1.0):
            raise ValueError(f"Only elliptic orbits are supported (0 <= e < 1). Got: {self.eccentricity}")
        if not math.isfinite(self.mean_anomaly_at_epoch):
            raise ValueError(f"Mean anomaly must be finite. Got: {self.mean_anomaly_at_epoch}")
        if not (math.isfinite(self.orbital_period) and self.orbital_period > 0):
            raise ValueError(f"Orbital period must be positive. Got: {self.orbital_period}")

    @property
    def semi_minor_axis(self) -> float:
        return self.semi_major_axis * math.sqrt(1.0 - self.eccentricity ** 2)

    @property
    def focal_offset(self) -> float:
        """Distance from ellipse centre to the occupied focus (a·e)."""
        return self.semi_major_axis * self.eccentricity


def compute_position(
    elements: OrbitalElements,
    simulation_time: float,
    speed_multiplier: float = 1.0,
) -> Tuple[Vector2, float]:
    """
    Position of a body on its orbit at `simulation_time`.

    Returns:
        (x, y) relative to the focus, true anomaly ν (rad)
    """
    a = elements.semi_major_axis
    e = elements.eccentricity

    M = mean_anomaly(elements.mean_anomaly_at_epoch, elements.orbital_period, simulation_time, speed_multiplier)
    E, nu = anomalies(M, e)
    r = focal_radius(a, e, E)

    return polar_to_cartesian(r, nu), nu


def propagate(
    elements: OrbitalElements,
    times: List[float],
    speed_multiplier: float = 1.0,
) -> List[Tuple[float, Vector2, float]]:
    """
    Propagate an orbit across a list of time stamps.
    Returns list of (t, position, true_anomaly).
    """
    out: List[Tuple[float, Vector2, float]] = []
    for t in times:
        pos, nu = compute_position(elements, t, speed_multiplier)
        out.append((t, pos, nu))
    return out


def orbit_ellipse(elements: OrbitalElements, n_points: int = 181) -> List[Vector2]:
    """
    Closed outline of the orbit, focus at the origin.

    Periapsis lies on +x (where compute_position puts E = 0), so the
    ellipse centre sits at (-a·e, 0).
    """
    if n_points < 3:
        raise ValueError("n_points must be >= 3.")
    a = elements.semi_major_axis
    b = elements.semi_minor_axis
    cx = -elements.focal_offset
    pts: List[Vector2] = []
    for i in range(n_points):
        th = TWO_PI * i / (n_points - 1)
        pts.append((cx + a * math.cos(th), b * math.sin(th)))
    return pts
