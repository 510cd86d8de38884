from __future__ import annotations

from dataclasses import dataclass

from orrery.core.constants import SUN_COLOR, SUN_MASS_KG, SUN_NAME, SUN_RADIUS_PX
from orrery.core.frames import Vector2
from orrery.physics.orbit import OrbitalElements, compute_position


@dataclass(frozen=True)
class BodyState:
    """
    Last computed kinematic state of a body.
    Replaced wholesale every tick, never patched field by field.
    """
    position: Vector2
    true_anomaly: float


@dataclass(frozen=True)
class CentralBody:
    """The star sitting at the occupied focus of every orbit."""
    name: str = SUN_NAME
    mass: float = SUN_MASS_KG
    radius: float = SUN_RADIUS_PX
    color: str = SUN_COLOR

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Star name cannot be empty.")
        if not _is_number(self.radius) or self.radius <= 0:
            raise ValueError(f"Star display radius must be positive. Got: {self.radius!r}")
        if not _is_number(self.mass) or self.mass < 0:
            raise ValueError(f"Star mass must be non-negative. Got: {self.mass!r}")
        if not isinstance(self.color, str):
            raise ValueError(f"Star color must be a string. Got: {self.color!r}")


def _is_number(x) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


@dataclass(frozen=True)
class Body:
    """
    An orbiting body: fixed elements plus static display attributes.
    """
    name: str
    elements: OrbitalElements
    mass: float = 0.0
    radius: float = 5.0
    color: str = "#FFFFFF"

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Body name cannot be empty.")
        if self.radius <= 0:
            raise ValueError(f"Display radius must be positive. Got: {self.radius}")
        if self.mass < 0:
            raise ValueError(f"Mass must be non-negative. Got: {self.mass}")

    def state_at(self, simulation_time: float, speed_multiplier: float = 1.0) -> BodyState:
        pos, nu = compute_position(self.elements, simulation_time, speed_multiplier)
        return BodyState(position=pos, true_anomaly=nu)

    def epoch_state(self) -> BodyState:
        """State at simulation time 0."""
        return self.state_at(0.0)
