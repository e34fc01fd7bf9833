# simulation/model.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from simulation.metrics import RunMetrics


@dataclass(frozen=True)
class Point:
    x: float    # canvas pixels, left to right
    y: float    # canvas pixels, top to bottom


DEFAULT_POSITION = Point(50.0, 50.0)


class SimStatus(Enum):
    IDLE = "idle"
    RECORDING = "recording"
    SIMULATING = "simulating"
    PAUSED = "paused"


@dataclass
class CarState:
    position: Point = DEFAULT_POSITION
    heading: float = 0.0        # radians, atan2 convention in canvas space
    speed: float = 0.0          # pixels per tick
    target_index: int = 0       # index of the vertex the car is leaving


@dataclass
class SimulationState:
    """
    The one record shared by the recorder, the engine and the renderers.

    Only MotionEngine and PathRecorder mutate it; canvases read it.
    """
    status: SimStatus = SimStatus.IDLE
    path: List[Point] = field(default_factory=list)
    car: CarState = field(default_factory=CarState)
    metrics: RunMetrics = field(default_factory=RunMetrics)

    @property
    def is_simulating(self) -> bool:
        return self.status is SimStatus.SIMULATING
