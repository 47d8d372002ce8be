"""Tests for the pendulum integrators: step formulas and energy behaviour."""

import math

import numpy as np
import pytest

from pendulab.core import IntegrationScheme, PhysicalParameters
from pendulab.physics import (
    PendulumIntegrator,
    angular_acceleration,
    euler_step,
    mechanical_energy,
    verlet_step,
)


def test_acceleration_law() -> None:
    a = angular_acceleration(0.3, -0.7, 9.81, 2.0, 0.25)
    assert a == pytest.approx(-(9.81 / 2.0) * math.sin(0.3) - 2 * 0.25 * -0.7)


def test_euler_step_uses_updated_velocity() -> None:
    dt = 0.1
    angle, vel, acc = euler_step(0.5, 0.2, 9.81, 1.0, 0.0, dt)
    a0 = -9.81 * math.sin(0.5)
    assert acc == pytest.approx(a0)
    assert vel == pytest.approx(0.2 + a0 * dt)
    assert angle == pytest.approx(0.5 + (0.2 + a0 * dt) * dt)


def test_verlet_step_averages_start_and_end_acceleration() -> None:
    g, l, lam, dt = 9.81, 1.3, 0.4, 0.05
    th, w = 1.1, -0.3
    angle, vel, acc = verlet_step(th, w, g, l, lam, dt)
    a0 = -(g / l) * math.sin(th) - 2 * lam * w
    th1 = th + w * dt + 0.5 * a0 * dt * dt
    a1 = -(g / l) * math.sin(th1) - 2 * lam * (w + a0 * dt)
    assert acc == pytest.approx(a0)
    assert angle == pytest.approx(th1)
    assert vel == pytest.approx(w + 0.5 * (a0 + a1) * dt)


def test_step_advances_time_by_dt_for_both_schemes() -> None:
    for scheme in IntegrationScheme:
        params = PhysicalParameters(dt=0.02)
        integ = PendulumIntegrator(params, scheme=scheme)
        for _ in range(50):
            state = integ.step()
        assert state.elapsed_time == pytest.approx(1.0)
        assert integ.state is state


def test_explicit_dt_overrides_parameter() -> None:
    integ = PendulumIntegrator(PhysicalParameters(dt=0.5))
    assert integ.step(dt=0.01).elapsed_time == pytest.approx(0.01)


def test_parameter_edits_take_effect_next_step() -> None:
    params = PhysicalParameters(initial_angle=0.4)
    integ = PendulumIntegrator(params)
    integ.step()
    params.g = 0.0
    before = integ.state
    after = integ.step()
    # no gravity, no damping: constant velocity
    assert after.angular_velocity == pytest.approx(before.angular_velocity)
    assert after.angular_acceleration == 0.0


def test_reset_returns_to_rest() -> None:
    params = PhysicalParameters(initial_angle=0.9)
    integ = PendulumIntegrator(params)
    for _ in range(10):
        integ.step()
    integ.reset()
    s = integ.state
    assert (s.angle, s.angular_velocity, s.angular_acceleration, s.elapsed_time) == (0.9, 0.0, 0.0, 0.0)


def test_degenerate_length_propagates_instead_of_raising() -> None:
    integ = PendulumIntegrator(PhysicalParameters(l=0.0))
    state = integ.step()
    assert not math.isfinite(state.angular_acceleration)


def _energy_drift(scheme: IntegrationScheme, n_steps: int = 3000) -> float:
    params = PhysicalParameters(g=9.81, l=1.0, damping=0.0, dt=0.01666, initial_angle=1.57)
    integ = PendulumIntegrator(params, scheme=scheme)
    e0 = integ.energy()
    energies = np.empty(n_steps)
    for i in range(n_steps):
        s = integ.step()
        energies[i] = mechanical_energy(s.angle, s.angular_velocity, params.g, params.l)
    return float(np.max(np.abs(energies - e0)) / e0)


def test_verlet_conserves_energy_better_than_euler() -> None:
    verlet = _energy_drift(IntegrationScheme.VELOCITY_VERLET)
    euler = _energy_drift(IntegrationScheme.EULER)
    assert verlet < 0.01
    assert verlet < 0.2 * euler


def test_damping_dissipates_energy() -> None:
    params = PhysicalParameters(damping=0.5, initial_angle=1.0)
    integ = PendulumIntegrator(params)
    e0 = integ.energy()
    for _ in range(600):
        integ.step()
    assert integ.energy() < 0.05 * e0


def test_mechanical_energy_on_arrays() -> None:
    angles = np.array([0.0, math.pi])
    vels = np.array([2.0, 0.0])
    e = mechanical_energy(angles, vels, g=9.81, l=1.0)
    np.testing.assert_allclose(e, [2.0, 2 * 9.81])
    assert isinstance(mechanical_energy(0.0, 0.0, 9.81, 1.0), float)


def test_misspelled_step_keyword_is_rejected() -> None:
    integ = PendulumIntegrator(PhysicalParameters(dt=0.5))
    with pytest.raises(TypeError):
        integ.step(dT=0.1)
    assert integ.state.elapsed_time == 0.0
