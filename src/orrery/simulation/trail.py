from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterator, List

from orrery.core.constants import TRAIL_CAPACITY
from orrery.core.frames import Vector2


@dataclass
class Trail:
    """
    Bounded FIFO of past positions for one body.
    Appending beyond `capacity` drops the oldest point.
    """
    capacity: int = TRAIL_CAPACITY
    points: Deque[Vector2] = field(init=False)

    def __post_init__(self):
        if self.capacity <= 0:
            raise ValueError(f"Trail capacity must be positive. Got: {self.capacity}")
        self.points = deque(maxlen=self.capacity)

    def append(self, point: Vector2) -> None:
        self.points.append(point)

    def clear(self) -> None:
        self.points.clear()

    def as_list(self) -> List[Vector2]:
        return list(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Vector2]:
        return iter(self.points)


def append_trail_point(trail: Trail, point: Vector2) -> Trail:
    """Append `point`, evicting the oldest beyond capacity. Updates `trail` in place and returns it."""
    trail.append(point)
    return trail


def clear_trail(trail: Trail) -> Trail:
    """Empty `trail` in place and return it."""
    trail.clear()
    return trail
