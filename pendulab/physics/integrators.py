"""
Fixed-step integrators for the damped pendulum: (angle, velocity) -> next step.

Pure numerical level: no dependency on SimComponent.
Interface: step(angle, velocity, g, l, damping, dt) -> (angle, velocity, acceleration),
where the returned acceleration is the one evaluated at the start of the step.
"""

from typing import Tuple

import numpy as np

StepOut = Tuple[float, float, float]


def angular_acceleration(angle: float, velocity: float, g: float, l: float, damping: float) -> float:
    """
    Damped pendulum law: a = -(g/l) * sin(angle) - 2 * damping * velocity.

    Evaluated in float64 with IEEE semantics: degenerate parameters (l = 0)
    yield inf/nan instead of raising.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        acc = -(np.float64(g) / np.float64(l)) * np.sin(np.float64(angle)) - 2.0 * damping * velocity
    return float(acc)


def euler_step(angle: float, velocity: float, g: float, l: float, damping: float, dt: float) -> StepOut:
    """Euler, order 1: velocity is updated first, then the angle uses the new velocity."""
    acc = angular_acceleration(angle, velocity, g, l, damping)
    velocity = velocity + acc * dt
    angle = angle + velocity * dt
    return angle, velocity, acc


def verlet_step(angle: float, velocity: float, g: float, l: float, damping: float, dt: float) -> StepOut:
    """
    Velocity Verlet, order 2.

    The second acceleration is evaluated at the updated angle with an Euler
    predicted velocity; the velocity then advances by the mean of both.
    """
    acc = angular_acceleration(angle, velocity, g, l, damping)
    angle = angle + velocity * dt + 0.5 * acc * dt * dt
    velocity_pred = velocity + acc * dt
    acc_next = angular_acceleration(angle, velocity_pred, g, l, damping)
    velocity = velocity + 0.5 * (acc + acc_next) * dt
    return angle, velocity, acc


class EulerIntegrator:
    """Euler integrator, order 1. Kept as the baseline against Verlet."""

    @staticmethod
    def step(angle: float, velocity: float, g: float, l: float, damping: float, dt: float) -> StepOut:
        return euler_step(angle, velocity, g, l, damping, dt)


class VerletIntegrator:
    """Velocity Verlet integrator, order 2."""

    @staticmethod
    def step(angle: float, velocity: float, g: float, l: float, damping: float, dt: float) -> StepOut:
        return verlet_step(angle, velocity, g, l, damping, dt)
