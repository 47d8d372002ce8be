"""Base interface for the stateful pieces of the simulation."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class SimComponent(ABC):
    """
    Base interface for every stateful simulation component:
    integrator, period estimator.
    """

    @abstractmethod
    def reset(self) -> None:
        """Return the component to its initial state."""
        pass

    @abstractmethod
    def step(self, **kwargs: Any) -> Any:
        """
        Advance the component by one fixed time step.

        Args:
            **kwargs: component-specific, keyword-only inputs

        Returns:
            Component output (type depends on the component).
        """
        pass

    def state_dict(self) -> Dict[str, Any]:
        """
        Internal state of the component for inspection.
        Override for stateful components.
        """
        return {}
