from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from orrery.core.constants import CANVAS_HEIGHT, CANVAS_WIDTH
from orrery.core.frames import Vector2, focus_to_screen
from orrery.objects.body import Body, CentralBody
from orrery.objects.presets import inner_solar_system, sun


@dataclass
class Scenario:
    """
    Container for the star and its orbiting bodies.
    Keep this pure: just data + lookup, no stepping logic.
    """
    name: str
    star: CentralBody = field(default_factory=CentralBody)
    bodies: Dict[str, Body] = field(default_factory=dict)
    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT

    def add_body(self, body: Body) -> None:
        if body.name in self.bodies:
            raise ValueError(f"Duplicate body name: {body.name}")
        self.bodies[body.name] = body

    def body_list(self) -> List[Body]:
        return list(self.bodies.values())

    @property
    def star_screen_position(self) -> Vector2:
        return (self.canvas_width / 2.0, self.canvas_height / 2.0)

    def to_screen(self, position: Vector2) -> Vector2:
        return focus_to_screen(position, self.star_screen_position)


def solar_system_scenario(name: str = "Solar System") -> Scenario:
    scenario = Scenario(name=name, star=sun())
    for body in inner_solar_system():
        scenario.add_body(body)
    return scenario
