"""
Motion engine: owns the simulation state and advances the car along the path.
"""
import logging
import math
import time
from typing import Callable, Optional

from simulation.config import SimulationConfig
from simulation.metrics import RunMetrics
from simulation.model import CarState, DEFAULT_POSITION, Point, SimStatus, SimulationState

logger = logging.getLogger(__name__)


class MotionEngine:
    """
    State machine for one drawing/simulation session.

    States: IDLE -> RECORDING -> IDLE -> SIMULATING -> PAUSED -> SIMULATING ...
    Commands whose preconditions do not hold are ignored and return False,
    matching controls that are disabled in the window.

    The car moves a fixed `speed` pixels per tick toward the next vertex; the
    tick is not scaled by wall-clock time.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 clock: Callable[[], float] = time.monotonic):
        """
        Args:
            config: Simulation settings (speed limit, variant)
            clock: Monotonic seconds source, replaceable for deterministic runs
        """
        self.config = config or SimulationConfig()
        self.clock = clock
        self.state = SimulationState()

    # ==========================================================================
    # Read-only views
    # ==========================================================================

    @property
    def status(self) -> SimStatus:
        return self.state.status

    @property
    def car(self) -> CarState:
        return self.state.car

    @property
    def metrics(self) -> RunMetrics:
        return self.state.metrics

    @property
    def speed_max(self) -> int:
        return self.config.speed_max

    @property
    def path_complete(self) -> bool:
        """True once the car has reached the final vertex (or there is nothing to follow)."""
        return self.state.car.target_index >= len(self.state.path) - 1

    @property
    def can_start(self) -> bool:
        return (self.state.status in (SimStatus.IDLE, SimStatus.PAUSED)
                and len(self.state.path) >= 2)

    @property
    def can_clear(self) -> bool:
        return not self.state.is_simulating

    @property
    def can_accelerate(self) -> bool:
        return self.state.is_simulating and self.state.car.speed < self.speed_max

    @property
    def can_brake(self) -> bool:
        return self.state.is_simulating and self.state.car.speed > 0

    # ==========================================================================
    # Commands
    # ==========================================================================

    def start(self) -> bool:
        """Enter SIMULATING from the path start with fresh metrics."""
        if not self.can_start:
            return False

        car = self.state.car
        car.target_index = 0
        car.position = self.state.path[0]
        self.state.metrics.begin(self.clock())

        self.state.status = SimStatus.SIMULATING
        logger.info(f"Simulation started on a {len(self.state.path)}-point path")
        return True

    def reset(self) -> bool:
        """Stop the car at the path start; metrics are kept for review."""
        car = self.state.car
        car.speed = 0.0
        car.position = self.state.path[0] if self.state.path else DEFAULT_POSITION
        car.target_index = 0

        if self.state.is_simulating:
            self.state.status = SimStatus.PAUSED
            logger.info("Simulation reset, car parked at path start")
        return True

    def clear(self) -> bool:
        """Drop the path and every statistic, back to IDLE."""
        self.state.path = []
        self.state.car = CarState()
        self.state.metrics = RunMetrics()
        self.state.status = SimStatus.IDLE
        logger.info("Path and metrics cleared")
        return True

    def accelerate(self) -> bool:
        if not self.state.is_simulating:
            return False
        car = self.state.car
        car.speed = min(car.speed + 1, self.speed_max)
        return True

    def brake(self) -> bool:
        if not self.state.is_simulating:
            return False
        car = self.state.car
        car.speed = max(car.speed - 1, 0)
        return True

    # ==========================================================================
    # Periodic updates
    # ==========================================================================

    def tick(self) -> bool:
        """
        Advance the car by one step of `speed` pixels.

        Returns:
            True if the car moved (state changed), False otherwise.
        """
        state = self.state
        car = state.car
        if not state.is_simulating or self.path_complete or car.speed <= 0:
            return False

        speed = car.speed
        target = state.path[car.target_index + 1]
        dx = target.x - car.position.x
        dy = target.y - car.position.y
        heading = math.atan2(dy, dx)
        distance_to_next = math.hypot(dx, dy)

        if distance_to_next < speed:
            # Snap onto the vertex; heading keeps its previous value
            car.position = target
            car.target_index += 1
            step = distance_to_next
        else:
            car.heading = heading
            if distance_to_next == speed:
                # Exact landing on the vertex counts as reaching it
                car.position = target
                car.target_index += 1
            else:
                car.position = Point(
                    car.position.x + math.cos(heading) * speed,
                    car.position.y + math.sin(heading) * speed,
                )
            step = speed

        state.metrics.distance_traveled += step
        if self.config.track_metrics:
            state.metrics.record(self.clock(), speed)

        logger.debug(
            f"tick: pos=({car.position.x:.1f}, {car.position.y:.1f}) "
            f"target={car.target_index} speed={speed}"
        )
        if self.path_complete:
            logger.info("Car reached the end of the path")
        return True

    def update_clock(self) -> bool:
        """Refresh elapsed time and average speed from the clock."""
        if not self.state.is_simulating or not self.config.track_metrics:
            return False
        metrics = self.state.metrics
        metrics.elapsed_seconds = metrics.since_start(self.clock())
        metrics.refresh_average()
        return True
