import os

# Qt must not try to open a display under test
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from simulation.config import SimulationConfig
from simulation.engine import MotionEngine
from simulation.model import Point


class FakeClock:
    """Manually advanced clock for deterministic metrics."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture(scope="session")
def qapp():
    from PyQt5 import QtWidgets
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def clock():
    return FakeClock(100.0)


@pytest.fixture
def engine(clock):
    return MotionEngine(SimulationConfig(), clock=clock)


def load_path(engine, coords):
    """Record `coords` through the engine's state the way a drag would."""
    engine.state.path = [Point(x, y) for x, y in coords]


def set_speed(engine, speed):
    for _ in range(speed):
        engine.accelerate()
