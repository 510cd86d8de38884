import pytest

from orrery.simulation.clock import SimulationClock


def test_defaults():
    clock = SimulationClock()
    assert clock.speed_multiplier == 1.0
    assert clock.paused is False
    assert clock.trails_enabled is True


def test_speed_up_clamps_at_16():
    clock = SimulationClock()
    seen = [clock.change_speed(1) for _ in range(10)]
    assert seen[:4] == [2.0, 4.0, 8.0, 16.0]
    assert max(seen) == 16.0
    assert clock.speed_multiplier == 16.0


def test_slow_down_clamps_at_one_eighth():
    clock = SimulationClock()
    seen = [clock.change_speed(-1) for _ in range(10)]
    assert seen[:3] == [0.5, 0.25, 0.125]
    assert min(seen) == 0.125


def test_speed_always_in_allowed_set():
    allowed = {0.125, 0.25, 0.5, 1.0, 2.0, 4.0, 8.0, 16.0}
    clock = SimulationClock()
    for d in [1, 1, -1, -1, -1, -1, -1, 1, 1, 1, 1, 1, 1, 1, 1]:
        clock.change_speed(d)
        assert clock.speed_multiplier in allowed


def test_invalid_direction():
    with pytest.raises(ValueError, match="Speed direction must be"):
        SimulationClock().change_speed(0)


def test_toggles_flip():
    clock = SimulationClock()
    assert clock.toggle_pause() is True
    assert clock.toggle_pause() is False
    assert clock.toggle_trails() is False
    assert clock.toggle_trails() is True


def test_speed_label():
    clock = SimulationClock()
    assert clock.speed_label == "Speed: 1x"
    clock.change_speed(-1)
    clock.change_speed(-1)
    clock.change_speed(-1)
    assert clock.speed_label == "Speed: 0.125x"


def test_rejects_out_of_range_speed():
    with pytest.raises(ValueError, match="Speed multiplier must be one of"):
        SimulationClock(speed_multiplier=32.0)


@pytest.mark.parametrize("speed", [3.0, 0.3, 0.0, -1.0])
def test_rejects_speed_outside_allowed_steps(speed):
    with pytest.raises(ValueError, match="Speed multiplier must be one of"):
        SimulationClock(speed_multiplier=speed)


@pytest.mark.parametrize("speed", [0.125, 0.25, 0.5, 1.0, 2.0, 4.0, 8.0, 16.0])
def test_accepts_every_allowed_step(speed):
    assert SimulationClock(speed_multiplier=speed).speed_multiplier == speed
