from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol, Tuple

from orrery.core.constants import TRAIL_CAPACITY
from orrery.core.frames import Vector2
from orrery.objects.body import BodyState
from orrery.simulation.clock import SimulationClock
from orrery.simulation.scenario import Scenario
from orrery.simulation.trail import Trail, append_trail_point, clear_trail

logger = logging.getLogger(__name__)


class System(Protocol):
    """
    Plugin interface for simulation systems.
    Each system runs after every tick and can write to the log.
    """
    name: str

    def on_step(self, t: float, engine: "OrbitalEngine", log: "SimulationLog") -> None:
        ...


@dataclass
class SimulationLog:
    """
    Stores outputs from a simulation run.
    Keep it simple and serializable.
    """
    # Positions: body name -> list of (t, (x, y)) relative to the focus
    body_positions: Dict[str, List[Tuple[float, Vector2]]] = field(default_factory=dict)

    # True anomaly: body name -> list of (t, nu)
    true_anomalies: Dict[str, List[Tuple[float, float]]] = field(default_factory=dict)

    # Free-form events (control commands issued during a run, etc.)
    events: List[Dict[str, Any]] = field(default_factory=list)

    def record_state(self, name: str, t: float, state: BodyState) -> None:
        self.body_positions.setdefault(name, []).append((t, state.position))
        self.true_anomalies.setdefault(name, []).append((t, state.true_anomaly))

    def record_event(self, t: float, kind: str, **data: Any) -> None:
        self.events.append({"t": t, "kind": kind, **data})

    def times(self) -> List[float]:
        for samples in self.body_positions.values():
            return [t for (t, _p) in samples]
        return []


@dataclass
class OrbitalEngine:
    """
    Frame-driven orbit animation state.

    The caller supplies the simulation time on every tick; nothing here
    samples the wall clock, so identical inputs replay identically.

    Issue control commands through the engine (toggle_pause, toggle_trails,
    change_speed, reset), not through `clock` directly: toggling trails
    off on the clock alone leaves the buffers in place until the next tick.
    """
    scenario: Scenario
    clock: SimulationClock = field(default_factory=SimulationClock)
    systems: List[System] = field(default_factory=list)
    trail_capacity: int = TRAIL_CAPACITY
    states: Dict[str, BodyState] = field(init=False)
    trails: Dict[str, Trail] = field(init=False)

    def __post_init__(self):
        self.states = {}
        self.trails = {}
        self._init_states()

    def _init_states(self) -> None:
        for body in self.scenario.body_list():
            self.states[body.name] = body.epoch_state()

    def state(self, name: str) -> BodyState:
        if name not in self.states:
            self.states[name] = self.scenario.bodies[name].epoch_state()
        return self.states[name]

    def trail(self, name: str) -> List[Vector2]:
        t = self.trails.get(name)
        return t.as_list() if t is not None else []

    def _trail_for(self, name: str) -> Trail:
        # Created lazily on first append
        if name not in self.trails:
            self.trails[name] = Trail(capacity=self.trail_capacity)
        return self.trails[name]

    def _clear_trails(self) -> None:
        for t in self.trails.values():
            clear_trail(t)

    def tick(self, simulation_time: float) -> bool:
        """
        Advance every body to `simulation_time`.
        Returns False (and leaves body states untouched) while paused.
        """
        if not self.clock.trails_enabled:
            self._clear_trails()
        if self.clock.paused:
            return False

        speed = self.clock.speed_multiplier
        for body in self.scenario.body_list():
            state = body.state_at(simulation_time, speed)
            self.states[body.name] = state
            if self.clock.trails_enabled:
                append_trail_point(self._trail_for(body.name), state.position)
        return True

    # Control commands

    def toggle_pause(self) -> bool:
        return self.clock.toggle_pause()

    def toggle_trails(self) -> bool:
        enabled = self.clock.toggle_trails()
        if not enabled:
            self._clear_trails()
        return enabled

    def change_speed(self, direction: int) -> float:
        return self.clock.change_speed(direction)

    def reset(self) -> None:
        """
        Clear trails and put every body back at its epoch state.
        Speed, pause and trail flags are left as they are.
        """
        self._clear_trails()
        self.states = {}
        self._init_states()
        logger.debug("reset %d bodies in '%s'", len(self.states), self.scenario.name)

    def run(self, t_start: float, t_end: float, dt: float) -> SimulationLog:
        """
        Fixed-step headless playback: one tick per step, then every system.
        Deterministic replay: same scenario + clock + dt + start/end => same log.
        """
        if dt <= 0:
            raise ValueError("dt must be positive.")
        if t_end < t_start:
            raise ValueError("t_end must be >= t_start.")

        logger.info(
            "running '%s' from t=%g to t=%g (dt=%g, %s)",
            self.scenario.name, t_start, t_end, dt, self.clock.speed_label,
        )
        log = SimulationLog()
        t = t_start
        steps = 0

        # Note: inclusive end if it lands exactly; otherwise last tick < end
        while t <= t_end + 1e-9:
            self.tick(t)
            for sys in self.systems:
                sys.on_step(t, self, log)
            steps += 1
            t = t_start + steps * dt

        logger.info("finished %d steps", steps)
        return log
