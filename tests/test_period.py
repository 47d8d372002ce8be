"""Tests for PeriodEstimator (ascending zero-crossing measurement)."""

import math

import pytest

from pendulab.analysis import PeriodEstimator


def _feed_sinusoid(est: PeriodEstimator, amplitude: float, period: float, dt: float, n_steps: int) -> None:
    for k in range(n_steps):
        t = k * dt
        before = amplitude * math.sin(2 * math.pi * t / period)
        after = amplitude * math.sin(2 * math.pi * (t + dt) / period)
        est.step(angle_before=before, angle_after=after, elapsed_time=t, dt=dt)


def test_sinusoid_period_is_recovered() -> None:
    est = PeriodEstimator()
    _feed_sinusoid(est, amplitude=0.8, period=2.0, dt=0.01, n_steps=2050)
    m = est.measurement
    assert m.crossing_count >= 9
    assert est.period == pytest.approx(2.0, abs=1e-3)


def test_non_commensurate_step() -> None:
    est = PeriodEstimator()
    _feed_sinusoid(est, amplitude=1.2, period=1.37, dt=0.0173, n_steps=1000)
    assert est.period == pytest.approx(1.37, rel=1e-3)


def test_first_crossing_sets_reference_only() -> None:
    est = PeriodEstimator()
    out = est.step(angle_before=-0.1, angle_after=0.3, elapsed_time=1.0, dt=0.1)
    assert out is None
    assert est.measurement.crossing_count == 1
    assert est.measurement.first_crossing_time == pytest.approx(1.0 + 0.1 * 0.25)
    assert est.period is None


def test_running_average_over_all_cycles() -> None:
    est = PeriodEstimator()
    # crossings exactly at step start + 0: angle_before < 0, angle_after == 0
    for t in (0.0, 2.0, 4.2, 6.0):
        est.step(angle_before=-0.5, angle_after=0.0, elapsed_time=t, dt=0.1)
    # crossing times t + 0.1; average over 3 cycles since the first crossing
    assert est.measurement.crossing_count == 4
    assert est.period == pytest.approx(6.0 / 3)


def test_descending_crossings_are_ignored() -> None:
    est = PeriodEstimator()
    assert est.step(angle_before=0.2, angle_after=-0.1, elapsed_time=0.0, dt=0.1) is None
    assert est.step(angle_before=0.0, angle_after=0.1, elapsed_time=0.1, dt=0.1) is None
    assert est.measurement.crossing_count == 0


def test_reset_clears_measurement() -> None:
    est = PeriodEstimator()
    _feed_sinusoid(est, amplitude=1.0, period=1.0, dt=0.01, n_steps=500)
    assert est.period is not None
    est.reset()
    m = est.measurement
    assert (m.crossing_count, m.first_crossing_time, m.last_measured_period) == (0, 0.0, 0.0)
    assert est.period is None


def test_misspelled_step_keyword_is_rejected() -> None:
    est = PeriodEstimator()
    with pytest.raises(TypeError):
        est.step(angle_before=-0.1, angle_after=0.1, elapsed=0.0, dt=0.1)
    assert est.measurement.crossing_count == 0
