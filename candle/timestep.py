"""Frame time step and the engine clock."""

from __future__ import annotations

import time
from dataclasses import dataclass

_START = time.perf_counter()


def get_time() -> float:
    """Seconds elapsed since the engine clock started."""
    return time.perf_counter() - _START


@dataclass(frozen=True)
class Timestep:
    """Duration of one frame in seconds."""

    seconds: float = 0.0

    @property
    def milliseconds(self) -> float:
        return self.seconds * 1000.0

    def __float__(self) -> float:
        return float(self.seconds)