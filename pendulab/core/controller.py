"""Simulation orchestrator: play/pause/reset state machine and per-tick pipeline."""

import logging
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, Optional

from pendulab.analysis.period import PeriodEstimator
from pendulab.core.buffer import RingBuffer
from pendulab.core.state import (
    AngleExtrema,
    IntegrationScheme,
    PendulumState,
    PeriodMeasurement,
    PhysicalParameters,
)
from pendulab.physics.elliptic import TheoreticalPeriods, theoretical_periods
from pendulab.physics.pendulum import PendulumIntegrator

logger = logging.getLogger(__name__)


class SimulationStatus(Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass
class TickResult:
    """Result of one simulated tick."""

    state: PendulumState
    crossing: bool = False
    measured_period: Optional[float] = None


class SimulationController:
    """
    Pendulum simulation driven by an external front end.

    The caller invokes ``tick()`` once per frame and reads the published
    state, periods and history buffers. Each running tick does:
    integrator step -> period estimator -> history buffers.
    Until the first ``play()`` the angle follows ``initial_angle`` so that
    parameter edits are visible before the run starts.
    """

    def __init__(
        self,
        parameters: Optional[PhysicalParameters] = None,
        scheme: IntegrationScheme = IntegrationScheme.VELOCITY_VERLET,
        history_size: int = 2000,
        strict: bool = False,
    ) -> None:
        """
        Args:
            parameters: physical parameters, shared with the integrator.
            scheme: integration scheme (default: velocity Verlet).
            history_size: capacity of each history buffer.
            strict: validate parameters on construction and on every update
                instead of letting inf/nan propagate.
        """
        self.parameters = parameters if parameters is not None else PhysicalParameters()
        self.strict = strict
        if strict:
            self.parameters.validate()
        self.integrator = PendulumIntegrator(self.parameters, scheme=scheme)
        self.estimator = PeriodEstimator()
        self.angle_buffer = RingBuffer(history_size)
        self.velocity_buffer = RingBuffer(history_size)
        self.acceleration_buffer = RingBuffer(history_size)
        self.phase_buffer = RingBuffer(history_size)
        self._status = SimulationStatus.STOPPED
        self._started = False
        self.extrema = AngleExtrema(self.parameters.initial_angle, self.parameters.initial_angle)

    # --- control surface ---

    def play(self) -> None:
        """Start or resume the simulation."""
        if self._status is SimulationStatus.RUNNING:
            return
        if not self._started:
            self._sync_idle()
            self._started = True
        logger.debug("Simulation %s -> running", self._status.value)
        self._status = SimulationStatus.RUNNING

    def pause(self) -> None:
        """Suspend ticking; the state is left untouched."""
        if self._status is not SimulationStatus.RUNNING:
            return
        logger.debug("Simulation paused at t=%.4f", self.integrator.state.elapsed_time)
        self._status = SimulationStatus.PAUSED

    def reset(self) -> None:
        """Stop and return state, period measurement and history to their initial values."""
        self._status = SimulationStatus.STOPPED
        self._started = False
        self.integrator.reset()
        self.estimator.reset()
        for buf in self.buffers.values():
            buf.clear()
        self.extrema.collapse(self.parameters.initial_angle)
        logger.debug("Simulation reset")

    @property
    def scheme(self) -> IntegrationScheme:
        return self.integrator.scheme

    @scheme.setter
    def scheme(self, scheme: IntegrationScheme) -> None:
        self.integrator.scheme = IntegrationScheme(scheme)

    @property
    def use_verlet(self) -> bool:
        return self.integrator.scheme is IntegrationScheme.VELOCITY_VERLET

    @use_verlet.setter
    def use_verlet(self, value: bool) -> None:
        self.integrator.scheme = IntegrationScheme.VELOCITY_VERLET if value else IntegrationScheme.EULER

    def update_parameters(self, **changes: float) -> None:
        """
        Change one or more physical parameters; effective from the next tick.

        Raises:
            ValueError: unknown parameter name, or (strict mode) invalid values.
        """
        known = {f.name for f in fields(PhysicalParameters)}
        unknown = set(changes) - known
        if unknown:
            raise ValueError(f"Unknown parameter(s): {sorted(unknown)}")
        if self.strict:
            candidate = PhysicalParameters(**{**self.parameters.to_dict(), **changes})
            try:
                candidate.validate()
            except ValueError:
                logger.warning("Rejected parameter update %s", changes)
                raise
        for name, value in changes.items():
            setattr(self.parameters, name, float(value))
        self._sync_idle()

    # --- time loop ---

    def tick(self, dt: Optional[float] = None) -> Optional[TickResult]:
        """
        Advance the simulation by one fixed step if running.

        Args:
            dt: step size for this tick (default: parameters.dt).

        Returns:
            TickResult, or None when not running.
        """
        self._sync_idle()
        if self._status is not SimulationStatus.RUNNING:
            return None
        h = self.parameters.dt if dt is None else dt
        before = self.integrator.state
        crossings = self.estimator.measurement.crossing_count
        after = self.integrator.step(dt=h)
        period = self.estimator.step(
            angle_before=before.angle,
            angle_after=after.angle,
            elapsed_time=before.elapsed_time,
            dt=h,
        )
        crossing = self.estimator.measurement.crossing_count > crossings

        t = after.elapsed_time
        self.angle_buffer.append(t, after.angle)
        self.velocity_buffer.append(t, after.angular_velocity)
        self.acceleration_buffer.append(t, after.angular_acceleration)
        self.phase_buffer.append(after.angle, after.angular_velocity)
        self.extrema.update(after.angle)
        return TickResult(state=after, crossing=crossing, measured_period=period)

    def _sync_idle(self) -> None:
        # Before the first play() the pendulum rests at initial_angle.
        if not self._started:
            self.integrator.hold(self.parameters.initial_angle)
            self.extrema.collapse(self.parameters.initial_angle)

    # --- read surface ---

    @property
    def status(self) -> SimulationStatus:
        return self._status

    @property
    def started(self) -> bool:
        return self._started

    @property
    def state(self) -> PendulumState:
        """Current state; before the first play() it rests at initial_angle."""
        if not self._started:
            return replace(self.integrator.state, angle=self.parameters.initial_angle)
        return self.integrator.state

    @property
    def measurement(self) -> PeriodMeasurement:
        return self.estimator.measurement

    @property
    def measured_period(self) -> Optional[float]:
        return self.estimator.period

    @property
    def theoretical_periods(self) -> TheoreticalPeriods:
        """Huygens and exact periods for the current parameters."""
        return theoretical_periods(self.parameters)

    @property
    def buffers(self) -> Dict[str, RingBuffer]:
        return {
            "angle": self.angle_buffer,
            "velocity": self.velocity_buffer,
            "acceleration": self.acceleration_buffer,
            "phase": self.phase_buffer,
        }

    def energy(self) -> float:
        return self.integrator.energy()

    def state_dict(self) -> Dict[str, Any]:
        """Full simulation state as plain values and arrays."""
        history = {}
        for name, buf in self.buffers.items():
            xs, ys = buf.to_numpy()
            history[f"{name}_x"] = xs
            history[f"{name}_y"] = ys
        return {
            "status": self._status.value,
            "started": self._started,
            "parameters": self.parameters.to_dict(),
            "integrator": self.integrator.state_dict(),
            "estimator": self.estimator.state_dict(),
            "extrema": {"max_angle": self.extrema.max_angle, "min_angle": self.extrema.min_angle},
            **history,
        }
