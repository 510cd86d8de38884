import math

from orrery.physics.kepler import (
    focal_radius,
    mean_anomaly,
    mean_motion,
    solve_keplers_equation,
    true_anomaly_from_eccentric,
)


def test_kepler_zero_eccentricity():
    # If e=0, E=M exactly
    for M in [0.0, 0.5, 1.0, 2.0, 5.0, 12.0]:
        assert solve_keplers_equation(M, 0.0) == M


def test_kepler_fixed_iterations_match_manual_substitution():
    M, e = 1.0, 0.4
    E = M
    for _ in range(10):
        E = M + e * math.sin(E)
    assert solve_keplers_equation(M, e) == E


def test_kepler_residual_small_for_low_eccentricity():
    E = solve_keplers_equation(M_rad=1.0, e=0.1)
    res = E - 0.1 * math.sin(E) - 1.0
    assert abs(res) < 1e-9


def test_kepler_does_not_wrap_mean_anomaly():
    M = 10 * math.pi + 0.3
    E = solve_keplers_equation(M, 0.2)
    assert E > 2 * math.pi


def test_kepler_fixed_point_at_pi():
    assert math.isclose(solve_keplers_equation(math.pi, 0.017), math.pi, abs_tol=1e-12)


def test_mean_motion_and_anomaly():
    assert math.isclose(mean_motion(365.0), 2 * math.pi / 365.0)
    assert math.isclose(mean_anomaly(0.5, 100.0, 25.0, 2.0), 0.5 + math.pi)


def test_true_anomaly_circular_equals_eccentric():
    for E in [0.1, 1.0, 2.5, -1.2]:
        assert math.isclose(true_anomaly_from_eccentric(E, 0.0), E, abs_tol=1e-12)


def test_true_anomaly_apsides():
    e = 0.3
    assert math.isclose(true_anomaly_from_eccentric(0.0, e), 0.0, abs_tol=1e-12)
    assert math.isclose(abs(true_anomaly_from_eccentric(math.pi, e)), math.pi, abs_tol=1e-9)


def test_focal_radius_periapsis_apoapsis():
    assert math.isclose(focal_radius(100.0, 0.2, 0.0), 80.0)
    assert math.isclose(focal_radius(100.0, 0.2, math.pi), 120.0)
