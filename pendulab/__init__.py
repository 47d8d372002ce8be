"""
pendulab: damped simple pendulum simulation core (integration, period measurement, history).
"""

import logging

__version__ = "0.1.0"

from pendulab.core.state import IntegrationScheme, PendulumState, PhysicalParameters
from pendulab.core.buffer import RingBuffer
from pendulab.core.controller import SimulationController, SimulationStatus

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "IntegrationScheme",
    "PendulumState",
    "PhysicalParameters",
    "RingBuffer",
    "SimulationController",
    "SimulationStatus",
]
