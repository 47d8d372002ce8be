"""Stateful pendulum integrator and mechanical energy."""

from dataclasses import replace
from typing import Any, Dict, Optional, Union

import numpy as np

from pendulab.core.component import SimComponent
from pendulab.core.state import IntegrationScheme, PendulumState, PhysicalParameters
from pendulab.physics.integrators import EulerIntegrator, VerletIntegrator

ArrayLike = Union[float, np.ndarray]

_INTEGRATORS = {
    IntegrationScheme.EULER: EulerIntegrator,
    IntegrationScheme.VELOCITY_VERLET: VerletIntegrator,
}


def mechanical_energy(angle: ArrayLike, velocity: ArrayLike, g: float, l: float) -> ArrayLike:
    """Energy per unit mass: 1/2 l^2 w^2 + g l (1 - cos(angle)). Works on arrays."""
    angle = np.asarray(angle, dtype=float)
    velocity = np.asarray(velocity, dtype=float)
    energy = 0.5 * l * l * velocity ** 2 + g * l * (1.0 - np.cos(angle))
    return float(energy) if energy.ndim == 0 else energy


class PendulumIntegrator(SimComponent):
    """
    Owns the pendulum state and advances it one fixed step at a time.

    The parameters object is held by reference: edits made by the caller
    are picked up by the next step.
    """

    def __init__(
        self,
        parameters: Optional[PhysicalParameters] = None,
        scheme: IntegrationScheme = IntegrationScheme.VELOCITY_VERLET,
    ) -> None:
        """
        Args:
            parameters: physical parameters (default: PhysicalParameters()).
            scheme: integration scheme (default: velocity Verlet).
        """
        self.parameters = parameters if parameters is not None else PhysicalParameters()
        self.scheme = IntegrationScheme(scheme)
        self._state = PendulumState.at_rest(self.parameters.initial_angle)

    @property
    def state(self) -> PendulumState:
        return self._state

    def reset(self) -> None:
        """Back to rest at the initial angle, time zero."""
        self._state = PendulumState.at_rest(self.parameters.initial_angle)

    def hold(self, angle: float) -> None:
        """Set the angle without advancing time (idle pendulum)."""
        self._state = replace(self._state, angle=angle)

    def step(self, *, dt: Optional[float] = None) -> PendulumState:
        """
        Advance by one step with the current scheme.

        Args:
            dt: step size for this step (default: parameters.dt).

        Returns:
            The new PendulumState.
        """
        p = self.parameters
        h = p.dt if dt is None else dt
        s = self._state
        angle, velocity, acc = _INTEGRATORS[self.scheme].step(
            s.angle, s.angular_velocity, p.g, p.l, p.damping, h
        )
        self._state = PendulumState(
            angle=angle,
            angular_velocity=velocity,
            angular_acceleration=acc,
            elapsed_time=s.elapsed_time + h,
        )
        return self._state

    def energy(self) -> float:
        """Mechanical energy of the current state."""
        return mechanical_energy(self._state.angle, self._state.angular_velocity, self.parameters.g, self.parameters.l)

    def state_dict(self) -> Dict[str, Any]:
        return {
            "scheme": self.scheme.value,
            "angle": self._state.angle,
            "angular_velocity": self._state.angular_velocity,
            "angular_acceleration": self._state.angular_acceleration,
            "elapsed_time": self._state.elapsed_time,
        }
