"""
Qt-side driver for the motion engine.

Owns the two repeating timers (motion tick and elapsed clock) and turns
window commands into engine calls. Both timers only run while the engine
is SIMULATING.
"""
import logging
from typing import Optional

from PyQt5 import QtCore

from simulation.config import SimulationConfig
from simulation.engine import MotionEngine
from simulation.model import Point
from simulation.recorder import PathRecorder

logger = logging.getLogger(__name__)


class SimulationController(QtCore.QObject):
    """
    Routes UI commands to the engine and schedules periodic updates.

    Signals:
        state_changed() - Emitted after every command or tick that changed state
        status_update(str message) - Human readable status text
    """
    state_changed = QtCore.pyqtSignal()
    status_update = QtCore.pyqtSignal(str)

    def __init__(self, config: Optional[SimulationConfig] = None,
                 engine: Optional[MotionEngine] = None, parent=None):
        super().__init__(parent)
        self.config = config or SimulationConfig()
        self.engine = engine or MotionEngine(self.config)
        self.recorder = PathRecorder(self.engine)

        self.motion_timer = QtCore.QTimer(self)
        self.motion_timer.setInterval(self.config.tick_ms)
        self.motion_timer.timeout.connect(self._on_motion_tick)

        self.clock_timer = QtCore.QTimer(self)
        self.clock_timer.setInterval(self.config.clock_ms)
        self.clock_timer.timeout.connect(self._on_clock_tick)

        logger.info(
            f"SimulationController initialized: variant={self.config.variant} "
            f"speed_max={self.config.speed_max} tick={self.config.tick_ms}ms"
        )

    @property
    def state(self):
        return self.engine.state

    @property
    def timers_active(self) -> bool:
        return self.motion_timer.isActive() or self.clock_timer.isActive()

    # ==========================================================================
    # Path recording
    # ==========================================================================

    def begin_path(self, x: float, y: float) -> bool:
        return self._emit_if(self.recorder.begin(Point(x, y)))

    def extend_path(self, x: float, y: float) -> bool:
        return self._emit_if(self.recorder.extend(Point(x, y)))

    def end_path(self) -> bool:
        return self._emit_if(self.recorder.end())

    # ==========================================================================
    # Simulation commands
    # ==========================================================================

    def start(self) -> bool:
        if not self.engine.start():
            return False
        self.motion_timer.start()
        if self.config.track_metrics:
            self.clock_timer.start()
        self.status_update.emit("Simulating")
        self.state_changed.emit()
        return True

    def reset(self) -> bool:
        self._stop_timers()
        self.engine.reset()
        self.status_update.emit("Reset")
        self.state_changed.emit()
        return True

    def clear(self) -> bool:
        self._stop_timers()
        self.engine.clear()
        self.status_update.emit("Cleared")
        self.state_changed.emit()
        return True

    def accelerate(self) -> bool:
        return self._emit_if(self.engine.accelerate())

    def brake(self) -> bool:
        return self._emit_if(self.engine.brake())

    def shutdown(self):
        """Release the timers; called when the window goes away."""
        self._stop_timers()
        logger.info("SimulationController shut down")

    # ==========================================================================
    # Timer callbacks
    # ==========================================================================

    def _on_motion_tick(self):
        moved = self.engine.tick()
        if self.engine.path_complete:
            # Nothing left to follow; the clock keeps running until Reset
            self.motion_timer.stop()
            self.status_update.emit("Finished")
        if moved:
            self.state_changed.emit()

    def _on_clock_tick(self):
        self._emit_if(self.engine.update_clock())

    def _stop_timers(self):
        self.motion_timer.stop()
        self.clock_timer.stop()

    def _emit_if(self, changed: bool) -> bool:
        if changed:
            self.state_changed.emit()
        return changed
