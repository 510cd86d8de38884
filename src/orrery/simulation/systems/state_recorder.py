from __future__ import annotations

from dataclasses import dataclass

from orrery.simulation.engine import OrbitalEngine, SimulationLog


@dataclass
class StateRecorderSystem:
    name: str = "state_recorder"

    def on_step(self, t: float, engine: OrbitalEngine, log: SimulationLog) -> None:
        for body in engine.scenario.body_list():
            log.record_state(body.name, t, engine.state(body.name))
