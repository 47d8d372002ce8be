"""Core: data model, history buffers and simulation controller."""

from pendulab.core.component import SimComponent
from pendulab.core.state import (
    PARAMETER_RANGES,
    AngleExtrema,
    IntegrationScheme,
    PendulumState,
    PeriodMeasurement,
    PhysicalParameters,
)
from pendulab.core.buffer import RingBuffer
from pendulab.core.controller import SimulationController, SimulationStatus, TickResult

__all__ = [
    "SimComponent",
    "PARAMETER_RANGES",
    "AngleExtrema",
    "IntegrationScheme",
    "PendulumState",
    "PeriodMeasurement",
    "PhysicalParameters",
    "RingBuffer",
    "SimulationController",
    "SimulationStatus",
    "TickResult",
]
