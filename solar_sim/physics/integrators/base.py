"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Sequence


class Integrator(ABC):
    """Abstract interface for integrators that advance dynamic bodies in place."""
    
    @abstractmethod
    def step(self, bodies: Sequence, force_calculator, dt: float) -> None:
        """Advance every body by one time step.
        
        Args:
            bodies: Dynamic bodies (position, velocity, acceleration are updated)
            force_calculator: Force model evaluated on the bodies' positions
            dt: Time step
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass
    
    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy (2 for Velocity Verlet)."""
        pass
