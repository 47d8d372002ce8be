"""
Pendulum physics.

Hierarchy:
  - integrators: acceleration law and fixed-step schemes (Euler, velocity Verlet)
  - pendulum: stateful integrator (PendulumIntegrator) and mechanical energy
  - elliptic: theoretical periods (Huygens, complete elliptic integral K)
"""

# --- Integrators (numerical level) ---
from pendulab.physics.integrators import (
    EulerIntegrator,
    VerletIntegrator,
    angular_acceleration,
    euler_step,
    verlet_step,
)

# --- Stateful integrator ---
from pendulab.physics.pendulum import PendulumIntegrator, mechanical_energy

# --- Theoretical periods ---
from pendulab.physics.elliptic import (
    DAMPED_OSCILLATION,
    DAMPING_TOLERANCE,
    TheoreticalPeriods,
    elliptic_k,
    exact_period,
    huygens_period,
    theoretical_periods,
)

__all__ = [
    # Integrators
    "EulerIntegrator",
    "VerletIntegrator",
    "angular_acceleration",
    "euler_step",
    "verlet_step",
    # Stateful
    "PendulumIntegrator",
    "mechanical_energy",
    # Periods
    "DAMPED_OSCILLATION",
    "DAMPING_TOLERANCE",
    "TheoreticalPeriods",
    "elliptic_k",
    "exact_period",
    "huygens_period",
    "theoretical_periods",
]
