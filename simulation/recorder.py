"""
Path recorder: turns mouse-drag input into the polyline the car follows.
"""
import logging

from simulation.engine import MotionEngine
from simulation.geometry import path_length
from simulation.model import Point, SimStatus

logger = logging.getLogger(__name__)


class PathRecorder:
    """
    Records raw pointer positions into the engine's path.

    Every move event while recording appends a point as-is; there is no
    deduplication, smoothing or resampling, so point density follows the
    input sampling rate.
    """

    def __init__(self, engine: MotionEngine):
        self.engine = engine

    @property
    def state(self):
        return self.engine.state

    @property
    def is_recording(self) -> bool:
        return self.state.status is SimStatus.RECORDING

    def begin(self, point: Point) -> bool:
        """Start a new path at `point`, replacing the previous one."""
        if self.state.is_simulating:
            return False
        self.state.path = [point]
        self.state.car.position = point
        self.state.status = SimStatus.RECORDING
        logger.debug(f"Recording started at ({point.x:.1f}, {point.y:.1f})")
        return True

    def extend(self, point: Point) -> bool:
        if not self.is_recording:
            return False
        self.state.path.append(point)
        return True

    def end(self) -> bool:
        if not self.is_recording:
            return False
        self.state.status = SimStatus.IDLE
        logger.info(f"Recorded path with {len(self.state.path)} points")
        return True

    def clear(self) -> bool:
        return self.engine.clear()

    def path_length(self) -> float:
        return path_length(self.state.path)
