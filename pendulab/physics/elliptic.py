"""
Theoretical pendulum periods.

- Huygens (small-angle) period: T = 2*pi*sqrt(l/g), shown at any amplitude
  even though it only holds in the small-amplitude limit.
- Exact undamped period: T = 4*sqrt(l/g)*K(sin(theta0/2)), with K the
  complete elliptic integral of the first kind approximated by the
  Abramowitz & Stegun 17.3.34 polynomial fit (|error| <= 2e-8).
  Undefined once the motion is damped.
"""

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from pendulab.core.state import PhysicalParameters

# Damping below this value is treated as zero.
DAMPING_TOLERANCE = 1e-4
DAMPED_OSCILLATION = "damped oscillation"

# K(k) ~ A(t) - B(t) * ln(t), t = 1 - k^2; coefficients a0..a4, b0..b4.
_A = (1.38629436112, 0.09666344259, 0.03590092383, 0.03742563713, 0.01451196212)
_B = (0.5, 0.12498593597, 0.06880248576, 0.03328355346, 0.00441787012)


def _horner(coeffs: tuple, t: float) -> float:
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * t + c
    return acc


def _sqrt_l_over_g(g: float, l: float) -> float:
    # IEEE semantics: g = 0 gives inf, g < 0 gives nan.
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.sqrt(np.float64(l) / np.float64(g)))


def huygens_period(g: float, l: float) -> float:
    """Small-angle period 2*pi*sqrt(l/g)."""
    return 2.0 * math.pi * _sqrt_l_over_g(g, l)


def elliptic_k(k: float) -> float:
    """
    Complete elliptic integral of the first kind K(k), k = modulus.

    Returns ``math.inf`` for |k| >= 1, where K diverges (pendulum released
    upside down never comes back).
    """
    t = 1.0 - k * k
    if t <= 0.0:
        return math.inf
    return _horner(_A, t) - _horner(_B, t) * math.log(t)


def exact_period(g: float, l: float, initial_angle: float) -> float:
    """Undamped large-amplitude period for release at rest from ``initial_angle``."""
    return 4.0 * _sqrt_l_over_g(g, l) * elliptic_k(math.sin(initial_angle / 2.0))


@dataclass(frozen=True)
class TheoreticalPeriods:
    """Huygens and exact periods; ``exact`` is None for damped motion."""

    huygens: float
    exact: Optional[float]
    damped: bool

    def exact_label(self) -> str:
        if self.damped:
            return DAMPED_OSCILLATION
        if self.exact is not None and math.isinf(self.exact):
            return "divergent"
        return f"{self.exact:.6f} s"


def theoretical_periods(parameters: PhysicalParameters) -> TheoreticalPeriods:
    """Evaluate both theoretical periods for the current parameters."""
    p = parameters
    huygens = huygens_period(p.g, p.l)
    if p.damping >= DAMPING_TOLERANCE:
        return TheoreticalPeriods(huygens=huygens, exact=None, damped=True)
    return TheoreticalPeriods(huygens=huygens, exact=exact_period(p.g, p.l, p.initial_angle), damped=False)
