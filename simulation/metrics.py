"""
Run statistics collected while the car is moving.
"""
import math
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class SpeedSample:
    time: float     # seconds since run start
    speed: float    # pixels per tick


@dataclass
class RunMetrics:
    """
    Distance, time and speed statistics for a single run.

    Survives Reset so the last run can still be inspected; only Clear or a
    fresh Start replaces it.
    """
    distance_traveled: float = 0.0
    start_timestamp: Optional[float] = None
    elapsed_seconds: float = 0.0
    max_speed: float = 0.0
    average_speed: float = 0.0
    speed_samples: List[SpeedSample] = field(default_factory=list)

    def begin(self, now: float) -> None:
        """Zero everything and stamp the run start."""
        self.distance_traveled = 0.0
        self.start_timestamp = now
        self.elapsed_seconds = 0.0
        self.max_speed = 0.0
        self.average_speed = 0.0
        self.speed_samples = []

    def since_start(self, now: float) -> float:
        if self.start_timestamp is None:
            return 0.0
        return max(0.0, now - self.start_timestamp)

    def record(self, now: float, speed: float) -> None:
        """
        Fold one motion tick into the statistics.

        Args:
            now: Clock reading for this tick
            speed: Speed the car moved with during the tick
        """
        self.max_speed = max(self.max_speed, speed)
        self.speed_samples.append(SpeedSample(self.since_start(now), speed))
        self.refresh_average()

    def refresh_average(self) -> None:
        if self.elapsed_seconds > 0:
            self.average_speed = self.distance_traveled / self.elapsed_seconds
        else:
            self.average_speed = 0.0


def format_elapsed(seconds: float) -> str:
    """Format seconds as mm:ss.t (tenths)."""
    seconds = max(0.0, seconds)
    minutes = int(seconds // 60)
    whole = int(seconds % 60)
    tenths = int(math.floor((seconds % 1) * 10))
    return f"{minutes:02d}:{whole:02d}.{tenths}"
