"""Tests for MotionEngine state transitions and the per-tick update."""

from __future__ import annotations

import math

import pytest

from simulation.config import SimulationConfig
from simulation.engine import MotionEngine
from simulation.model import DEFAULT_POSITION, Point, SimStatus
from tests.conftest import FakeClock, load_path, set_speed

# ---------------------------------------------------------------------------
# start
# ---------------------------------------------------------------------------


def test_start_requires_two_points(engine):
    load_path(engine, [(10, 10)])
    assert engine.start() is False
    assert engine.status is SimStatus.IDLE


def test_start_places_car_on_first_point(engine):
    load_path(engine, [(10, 20), (30, 40), (50, 60)])
    engine.car.target_index = 2

    assert engine.start() is True
    assert engine.status is SimStatus.SIMULATING
    assert engine.car.target_index == 0
    assert engine.car.position == Point(10, 20)


def test_start_zeroes_metrics_and_stamps_clock(engine, clock):
    load_path(engine, [(0, 0), (100, 0)])
    engine.metrics.distance_traveled = 42.0
    engine.metrics.max_speed = 7

    engine.start()

    assert engine.metrics.distance_traveled == 0.0
    assert engine.metrics.max_speed == 0.0
    assert engine.metrics.speed_samples == []
    assert engine.metrics.start_timestamp == clock.now


def test_start_while_simulating_is_ignored(engine):
    load_path(engine, [(0, 0), (100, 0)])
    engine.start()
    assert engine.start() is False


# ---------------------------------------------------------------------------
# tick
# ---------------------------------------------------------------------------


def test_tick_does_nothing_at_zero_speed(engine):
    load_path(engine, [(0, 0), (100, 0)])
    engine.start()
    assert engine.tick() is False
    assert engine.car.position == Point(0, 0)


def test_tick_ignored_when_not_simulating(engine):
    load_path(engine, [(0, 0), (100, 0)])
    engine.car.speed = 5
    assert engine.tick() is False


def test_two_tick_straight_line_scenario(engine):
    load_path(engine, [(0, 0), (10, 0)])
    engine.start()
    set_speed(engine, 5)

    assert engine.tick() is True
    assert engine.car.position == Point(5, 0)
    assert engine.car.target_index == 0

    assert engine.tick() is True
    assert engine.car.position == Point(10, 0)
    assert engine.car.target_index == 1
    assert engine.metrics.distance_traveled == pytest.approx(10.0)
    assert engine.path_complete

    # Halted, not an error
    assert engine.tick() is False
    assert engine.car.position == Point(10, 0)


def test_tick_snaps_to_vertex_when_closer_than_speed(engine):
    load_path(engine, [(0, 0), (3, 0), (10, 0)])
    engine.start()
    set_speed(engine, 5)

    engine.tick()

    assert engine.car.target_index == 1
    assert engine.car.position == engine.state.path[1]
    assert engine.metrics.distance_traveled == pytest.approx(3.0)


def test_snap_keeps_previous_heading(engine):
    load_path(engine, [(0, 0), (0, 2)])
    engine.start()
    engine.car.heading = 1.0
    set_speed(engine, 5)

    engine.tick()

    assert engine.car.heading == 1.0


def test_tick_moves_along_heading(engine):
    load_path(engine, [(0, 0), (30, 40)])
    engine.start()
    set_speed(engine, 5)

    engine.tick()

    assert engine.car.heading == pytest.approx(math.atan2(40, 30))
    assert engine.car.position.x == pytest.approx(3.0)
    assert engine.car.position.y == pytest.approx(4.0)


def test_distance_never_decreases_while_simulating(engine, clock):
    load_path(engine, [(0, 0), (7, 3), (9, 20), (40, 22), (41, 60)])
    engine.start()
    set_speed(engine, 3)

    previous = 0.0
    for i in range(60):
        clock.now += 0.05
        if i == 10:
            set_speed(engine, 6)
        if i == 20:
            engine.brake()
        engine.tick()
        assert engine.metrics.distance_traveled >= previous
        previous = engine.metrics.distance_traveled

    assert engine.path_complete


def test_tick_records_speed_samples_and_max(engine, clock):
    load_path(engine, [(0, 0), (1000, 0)])
    engine.start()
    set_speed(engine, 4)

    clock.now += 0.05
    engine.tick()
    engine.accelerate()
    clock.now += 0.05
    engine.tick()

    samples = engine.metrics.speed_samples
    assert [s.speed for s in samples] == [4, 5]
    assert samples[0].time == pytest.approx(0.05)
    assert samples[1].time == pytest.approx(0.10)
    assert engine.metrics.max_speed == 5


# ---------------------------------------------------------------------------
# speed control
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "commands",
    [
        "a" * 30,
        "b" * 5,
        "ab" * 15,
        "a" * 25 + "b" * 3 + "a" * 10,
        "b" * 3 + "a" * 2 + "b" * 9,
    ],
)
def test_speed_stays_within_limits(engine, commands):
    load_path(engine, [(0, 0), (10, 0)])
    engine.start()
    for command in commands:
        if command == "a":
            engine.accelerate()
        else:
            engine.brake()
        assert 0 <= engine.car.speed <= engine.speed_max


def test_speed_control_ignored_outside_simulation(engine):
    assert engine.accelerate() is False
    assert engine.brake() is False
    assert engine.car.speed == 0


def test_basic_variant_caps_speed_at_ten():
    engine = MotionEngine(SimulationConfig.for_variant("basic"), clock=FakeClock())
    load_path(engine, [(0, 0), (500, 0)])
    engine.start()
    set_speed(engine, 15)

    assert engine.car.speed == 10
    assert engine.can_accelerate is False


def test_basic_variant_skips_speed_samples():
    engine = MotionEngine(SimulationConfig.for_variant("basic"), clock=FakeClock())
    load_path(engine, [(0, 0), (500, 0)])
    engine.start()
    set_speed(engine, 3)
    engine.tick()

    assert engine.metrics.speed_samples == []
    assert engine.metrics.distance_traveled == pytest.approx(3.0)
    assert engine.update_clock() is False


def test_basic_variant_restart_zeroes_distance():
    engine = MotionEngine(SimulationConfig.for_variant("basic"), clock=FakeClock())
    load_path(engine, [(0, 0), (500, 0)])
    engine.start()
    set_speed(engine, 3)
    engine.tick()
    engine.reset()

    # Reset keeps the distance for review, the next Start drops it
    assert engine.metrics.distance_traveled == pytest.approx(3.0)
    assert engine.start() is True
    assert engine.metrics.distance_traveled == 0


# ---------------------------------------------------------------------------
# reset / clear
# ---------------------------------------------------------------------------


def test_reset_restores_start_and_keeps_metrics(engine, clock):
    load_path(engine, [(5, 5), (100, 5)])
    engine.start()
    set_speed(engine, 6)
    clock.now += 1.0
    engine.tick()
    engine.tick()
    engine.update_clock()
    before = (engine.metrics.distance_traveled, engine.metrics.max_speed,
              engine.metrics.elapsed_seconds, len(engine.metrics.speed_samples))

    engine.reset()

    assert engine.status is SimStatus.PAUSED
    assert engine.car.position == Point(5, 5)
    assert engine.car.speed == 0
    assert engine.car.target_index == 0
    after = (engine.metrics.distance_traveled, engine.metrics.max_speed,
             engine.metrics.elapsed_seconds, len(engine.metrics.speed_samples))
    assert after == before


def test_reset_without_path_uses_default_position(engine):
    engine.car.position = Point(300, 300)
    engine.reset()
    assert engine.car.position == DEFAULT_POSITION


def test_restart_after_reset(engine):
    load_path(engine, [(0, 0), (100, 0)])
    engine.start()
    set_speed(engine, 5)
    engine.tick()
    engine.reset()

    assert engine.can_start
    assert engine.start() is True
    assert engine.metrics.distance_traveled == 0.0


def test_clear_with_empty_path(engine):
    engine.clear()

    assert engine.status is SimStatus.IDLE
    assert engine.car.position == Point(50, 50)
    assert engine.metrics.distance_traveled == 0
    assert engine.metrics.elapsed_seconds == 0
    assert engine.metrics.max_speed == 0
    assert engine.metrics.average_speed == 0
    assert engine.metrics.speed_samples == []


def test_clear_drops_path_and_metrics(engine):
    load_path(engine, [(0, 0), (100, 0)])
    engine.start()
    set_speed(engine, 5)
    engine.tick()
    engine.reset()

    engine.clear()

    assert engine.state.path == []
    assert engine.metrics.distance_traveled == 0
    assert engine.can_start is False


# ---------------------------------------------------------------------------
# clock / average speed
# ---------------------------------------------------------------------------


def test_average_speed_zero_before_time_elapses(engine):
    load_path(engine, [(0, 0), (100, 0)])
    engine.start()
    set_speed(engine, 5)
    engine.tick()

    assert engine.metrics.elapsed_seconds == 0
    assert engine.metrics.average_speed == 0


def test_update_clock_computes_average(engine, clock):
    load_path(engine, [(0, 0), (100, 0)])
    engine.start()
    set_speed(engine, 5)
    engine.tick()
    engine.tick()

    clock.now += 2.0
    assert engine.update_clock() is True

    assert engine.metrics.elapsed_seconds == pytest.approx(2.0)
    assert engine.metrics.average_speed == pytest.approx(5.0)


# ---------------------------------------------------------------------------
# command availability
# ---------------------------------------------------------------------------


def test_command_availability_follows_state(engine):
    assert not engine.can_start
    assert engine.can_clear

    load_path(engine, [(0, 0), (100, 0)])
    assert engine.can_start

    engine.start()
    assert not engine.can_start
    assert not engine.can_clear
    assert engine.can_accelerate
    assert not engine.can_brake

    engine.accelerate()
    assert engine.can_brake
