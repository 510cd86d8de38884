from __future__ import annotations

import math
from typing import List

from orrery.core.constants import AU
from orrery.objects.body import Body, CentralBody
from orrery.physics.orbit import OrbitalElements


def sun() -> CentralBody:
    return CentralBody()


def inner_solar_system(au: float = AU) -> List[Body]:
    """
    Mercury through Jupiter on coplanar orbits.
    Periods in days; Jupiter's distance is compressed to 2.5 AU so it fits
    the canvas.
    """
    return [
        Body(
            name="Mercury",
            mass=3.301e23,
            radius=4.0,
            color="#8C7853",
            elements=OrbitalElements(0.39 * au, 0.205, 0.0, 88.0),
        ),
        Body(
            name="Venus",
            mass=4.867e24,
            radius=6.0,
            color="#FFC649",
            elements=OrbitalElements(0.72 * au, 0.007, math.pi / 2, 225.0),
        ),
        Body(
            name="Earth",
            mass=5.972e24,
            radius=6.0,
            color="#6B93D6",
            elements=OrbitalElements(1.0 * au, 0.017, math.pi, 365.0),
        ),
        Body(
            name="Mars",
            mass=6.39e23,
            radius=5.0,
            color="#CD5C5C",
            elements=OrbitalElements(1.52 * au, 0.093, 3 * math.pi / 2, 687.0),
        ),
        Body(
            name="Jupiter",
            mass=1.898e27,
            radius=12.0,
            color="#D8CA9D",
            elements=OrbitalElements(2.5 * au, 0.048, 0.0, 4333.0),
        ),
    ]
