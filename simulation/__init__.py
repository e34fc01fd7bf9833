"""
Path-following car simulation core: state model, path recording and motion.
"""
from simulation.model import Point, CarState, SimStatus, SimulationState, DEFAULT_POSITION
from simulation.metrics import RunMetrics, SpeedSample
from simulation.engine import MotionEngine
from simulation.recorder import PathRecorder

__all__ = [
    'Point', 'CarState', 'SimStatus', 'SimulationState', 'DEFAULT_POSITION',
    'RunMetrics', 'SpeedSample', 'MotionEngine', 'PathRecorder',
]
