from __future__ import annotations

import logging
from dataclasses import dataclass

from orrery.core.constants import SPEED_DEFAULT, SPEED_MAX, SPEED_MIN, SPEED_STEPS

logger = logging.getLogger(__name__)


@dataclass
class SimulationClock:
    """
    Process-wide playback controls.
    Only mutated by explicit commands; read by the engine on the next tick.
    """
    speed_multiplier: float = SPEED_DEFAULT
    paused: bool = False
    trails_enabled: bool = True

    def __post_init__(self):
        if self.speed_multiplier not in SPEED_STEPS:
            raise ValueError(
                f"Speed multiplier must be one of {', '.join(f'{s:g}' for s in SPEED_STEPS)}. "
                f"Got: {self.speed_multiplier}"
            )

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        logger.debug("paused=%s", self.paused)
        return self.paused

    def toggle_trails(self) -> bool:
        self.trails_enabled = not self.trails_enabled
        logger.debug("trails_enabled=%s", self.trails_enabled)
        return self.trails_enabled

    def change_speed(self, direction: int) -> float:
        """Double (+1) or halve (-1) the multiplier, clamped to [SPEED_MIN, SPEED_MAX]."""
        if direction == 1:
            self.speed_multiplier = min(self.speed_multiplier * 2.0, SPEED_MAX)
        elif direction == -1:
            self.speed_multiplier = max(self.speed_multiplier / 2.0, SPEED_MIN)
        else:
            raise ValueError(f"Speed direction must be +1 or -1. Got: {direction}")
        logger.debug("speed_multiplier=%s", self.speed_multiplier)
        return self.speed_multiplier

    @property
    def speed_label(self) -> str:
        return f"Speed: {self.speed_multiplier:g}x"
