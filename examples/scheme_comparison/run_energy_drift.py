"""
Euler vs velocity Verlet: relative energy drift of the undamped pendulum.
"""

import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from pendulab import IntegrationScheme, PhysicalParameters, SimulationController
from pendulab.physics import mechanical_energy


def energy_drift(scheme: IntegrationScheme, params: PhysicalParameters, n_steps: int) -> np.ndarray:
    sim = SimulationController(params, scheme=scheme, history_size=n_steps)
    e0 = mechanical_energy(params.initial_angle, 0.0, params.g, params.l)
    sim.play()
    for _ in range(n_steps):
        sim.tick()
    angles, velocities = sim.phase_buffer.to_numpy()
    return (mechanical_energy(angles, velocities, params.g, params.l) - e0) / e0


def main() -> None:
    n_steps = 5000
    for dt in (0.001, 0.01666, 0.05):
        params = PhysicalParameters(damping=0.0, dt=dt)
        print(f"dt = {dt}")
        for scheme in IntegrationScheme:
            drift = energy_drift(scheme, params, n_steps)
            print(f"  {scheme.value:16s} max |dE/E0| = {np.max(np.abs(drift)):.3e}, final = {drift[-1]:+.3e}")


if __name__ == "__main__":
    main()
