"""Data model of the simulation: parameters, pendulum state, period measurement."""

import math
from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional, Tuple

# Ranges enforced by the front end (min, max). The core trusts the caller;
# they are only checked by PhysicalParameters.validate().
PARAMETER_RANGES: Dict[str, Tuple[float, float]] = {
    "g": (0.0, 30.0),
    "l": (0.1, 5.0),
    "damping": (0.0, 3.0),
    "dt": (0.001, 0.5),
    "initial_angle": (0.0, 2.0 * math.pi),
}


class IntegrationScheme(Enum):
    """Fixed-step scheme used to advance the pendulum."""

    EULER = "euler"
    VELOCITY_VERLET = "velocity_verlet"


@dataclass
class PhysicalParameters:
    """
    Physical and numerical parameters of the pendulum.

    Mutable at any time; a change made while simulating takes effect on
    the next step.
    """

    g: float = 9.81
    l: float = 1.0
    damping: float = 0.0
    dt: float = 0.01666
    initial_angle: float = 1.57

    def validate(self, check_ranges: bool = False) -> None:
        """
        Fail fast on degenerate parameters.

        Args:
            check_ranges: also require every field to lie in PARAMETER_RANGES.

        Raises:
            ValueError: if a parameter is non-finite, ``l``/``dt`` are not
                positive, ``g``/``damping`` are negative, or (with
                ``check_ranges``) a value is out of range.
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite, got {value}")
        if self.l <= 0:
            raise ValueError(f"l must be > 0, got {self.l}")
        if self.dt <= 0:
            raise ValueError(f"dt must be > 0, got {self.dt}")
        if self.g < 0:
            raise ValueError(f"g must be >= 0, got {self.g}")
        if self.damping < 0:
            raise ValueError(f"damping must be >= 0, got {self.damping}")
        if check_ranges:
            for name, (lo, hi) in PARAMETER_RANGES.items():
                value = getattr(self, name)
                if not lo <= value <= hi:
                    raise ValueError(f"{name}={value} outside [{lo}, {hi}]")

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PhysicalParameters":
        """Build parameters from a mapping; unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown parameter(s): {sorted(unknown)}")
        return cls(**{k: float(v) for k, v in data.items()})


@dataclass(frozen=True)
class PendulumState:
    """Instantaneous state of the pendulum (angles in radians)."""

    angle: float
    angular_velocity: float = 0.0
    angular_acceleration: float = 0.0
    elapsed_time: float = 0.0

    @classmethod
    def at_rest(cls, angle: float) -> "PendulumState":
        return cls(angle=angle)


@dataclass
class PeriodMeasurement:
    """
    Running period measurement from ascending zero-crossings.

    ``last_measured_period`` is meaningful only once ``crossing_count >= 2``.
    """

    crossing_count: int = 0
    first_crossing_time: float = 0.0
    last_measured_period: float = 0.0

    @property
    def period(self) -> Optional[float]:
        if self.crossing_count < 2:
            return None
        return self.last_measured_period


@dataclass
class AngleExtrema:
    """Largest and smallest angle reached during the current run."""

    max_angle: float
    min_angle: float

    def update(self, angle: float) -> None:
        if angle > self.max_angle:
            self.max_angle = angle
        if angle < self.min_angle:
            self.min_angle = angle

    def collapse(self, angle: float) -> None:
        """Reset both extrema to ``angle``."""
        self.max_angle = angle
        self.min_angle = angle

    @property
    def amplitude(self) -> float:
        return 0.5 * (self.max_angle - self.min_angle)
