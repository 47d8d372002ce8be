"""
Headless pendulum run: simulate without a front end and print the periods.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add repository root to the path
ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from pendulab import IntegrationScheme, PhysicalParameters, SimulationController
from pendulab.io import load_parameters


def main() -> None:
    parser = argparse.ArgumentParser(description="Headless damped pendulum simulation")
    parser.add_argument("--config", type=Path, help="JSON file with physical parameters")
    parser.add_argument("--steps", type=int, default=1000)
    parser.add_argument("--euler", action="store_true", help="Use Euler instead of velocity Verlet")
    parser.add_argument("--damping", type=float, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    params = load_parameters(args.config) if args.config else PhysicalParameters()
    if args.damping is not None:
        params.damping = args.damping
    scheme = IntegrationScheme.EULER if args.euler else IntegrationScheme.VELOCITY_VERLET

    sim = SimulationController(params, scheme=scheme)
    sim.play()
    for _ in range(args.steps):
        result = sim.tick()
        if result.crossing and result.measured_period is not None:
            print(f"  [t={result.state.elapsed_time:7.3f}] measured period: {result.measured_period:.6f} s")

    periods = sim.theoretical_periods
    state = sim.state
    print(f"Scheme: {scheme.value}, steps: {args.steps}, t = {state.elapsed_time:.3f} s")
    print(f"Angle range: [{sim.extrema.min_angle:.4f}, {sim.extrema.max_angle:.4f}] rad")
    print(f"Huygens:  {periods.huygens:.6f} s")
    print(f"CEI:      {periods.exact_label()}")
    measured = sim.measured_period
    print(f"Measured: {measured:.6f} s" if measured is not None else "Measured: n/a (fewer than two crossings)")


if __name__ == "__main__":
    main()
