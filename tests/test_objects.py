import math

import pytest

from orrery.core.constants import AU
from orrery.objects.body import Body, BodyState, CentralBody
from orrery.objects.presets import inner_solar_system, sun
from orrery.physics.orbit import OrbitalElements, compute_position
from orrery.simulation.scenario import Scenario, solar_system_scenario


@pytest.fixture
def elements():
    return OrbitalElements(100.0, 0.1, 0.5, 20.0)


def test_body_state_at_matches_compute_position(elements):
    body = Body(name="Test", elements=elements)
    state = body.state_at(3.0, 2.0)
    pos, nu = compute_position(elements, 3.0, 2.0)
    assert state == BodyState(position=pos, true_anomaly=nu)


def test_epoch_state_is_time_zero(elements):
    body = Body(name="Test", elements=elements)
    assert body.epoch_state() == body.state_at(0.0, 8.0)


def test_body_validation(elements):
    with pytest.raises(ValueError, match="Body name cannot be empty"):
        Body(name="  ", elements=elements)
    with pytest.raises(ValueError, match="Display radius must be positive"):
        Body(name="X", elements=elements, radius=0.0)
    with pytest.raises(ValueError, match="Mass must be non-negative"):
        Body(name="X", elements=elements, mass=-1.0)


def test_sun_defaults():
    star = sun()
    assert star == CentralBody()
    assert star.name == "Sun"
    assert star.radius == 20.0
    assert star.color == "#FFD700"


def test_preset_planets():
    bodies = inner_solar_system()
    assert [b.name for b in bodies] == ["Mercury", "Venus", "Earth", "Mars", "Jupiter"]
    earth = bodies[2]
    assert earth.elements.semi_major_axis == AU
    assert earth.elements.eccentricity == 0.017
    assert earth.elements.mean_anomaly_at_epoch == math.pi
    assert earth.elements.orbital_period == 365.0


class TestScenario:
    def test_scenario_creation(self):
        scenario = Scenario(name="Test Scenario")
        assert scenario.name == "Test Scenario"
        assert len(scenario.bodies) == 0

    def test_add_body_and_duplicates(self, elements):
        scenario = Scenario(name="Test")
        body = Body(name="A", elements=elements)
        scenario.add_body(body)
        assert scenario.body_list() == [body]
        with pytest.raises(ValueError, match="Duplicate body name: A"):
            scenario.add_body(Body(name="A", elements=elements))

    def test_to_screen_offsets_by_canvas_centre(self):
        scenario = Scenario(name="Test", canvas_width=800, canvas_height=600)
        assert scenario.star_screen_position == (400.0, 300.0)
        assert scenario.to_screen((10.0, -5.0)) == (410.0, 295.0)

    def test_solar_system_scenario(self):
        scenario = solar_system_scenario()
        assert len(scenario.bodies) == 5
        assert scenario.star.name == "Sun"


class TestCentralBodyValidation:
    def test_rejects_bad_radius(self):
        with pytest.raises(ValueError, match="Star display radius must be positive"):
            CentralBody(radius=-5)
        with pytest.raises(ValueError, match="Star display radius must be positive"):
            CentralBody(radius="big")

    def test_rejects_empty_name(self):
        with pytest.raises(ValueError, match="Star name cannot be empty"):
            CentralBody(name="")

    def test_rejects_negative_mass(self):
        with pytest.raises(ValueError, match="Star mass must be non-negative"):
            CentralBody(mass=-1.0)

    def test_rejects_non_string_color(self):
        with pytest.raises(ValueError, match="Star color must be a string"):
            CentralBody(color=[255, 215, 0])
