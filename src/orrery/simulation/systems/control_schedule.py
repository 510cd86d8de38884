from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from orrery.simulation.engine import OrbitalEngine, SimulationLog

COMMANDS = ("toggle_pause", "toggle_trails", "reset", "speed_up", "slow_down")


@dataclass
class ControlScheduleSystem:
    """
    Replays control commands at given simulation times during a headless run.
    A command issued at step t takes effect from the next tick.
    """
    schedule: List[Tuple[float, str]] = field(default_factory=list)
    name: str = "control_schedule"
    _cursor: int = field(default=0, init=False, repr=False)

    def __post_init__(self):
        for _t, cmd in self.schedule:
            if cmd not in COMMANDS:
                raise ValueError(f"Unknown control command: {cmd}")
        self.schedule = sorted(self.schedule, key=lambda item: item[0])

    def on_step(self, t: float, engine: OrbitalEngine, log: SimulationLog) -> None:
        while self._cursor < len(self.schedule) and self.schedule[self._cursor][0] <= t:
            _at, cmd = self.schedule[self._cursor]
            value = self._apply(engine, cmd)
            log.record_event(t, cmd, value=value)
            self._cursor += 1

    @staticmethod
    def _apply(engine: OrbitalEngine, cmd: str) -> Optional[object]:
        if cmd == "toggle_pause":
            return engine.toggle_pause()
        if cmd == "toggle_trails":
            return engine.toggle_trails()
        if cmd == "reset":
            engine.reset()
            return None
        if cmd == "speed_up":
            return engine.change_speed(1)
        return engine.change_speed(-1)
