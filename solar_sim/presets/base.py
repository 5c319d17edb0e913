"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from solar_sim.physics.bodies import SolarSystem


class Preset(ABC):
    """Abstract base class for preset scenarios."""
    
    def __init__(self, G: float = 1.0, distance_scale: float = 1.0, dt: float = 0.001):
        """Initialize preset.
        
        Args:
            G: Gravitational constant in the preset's unit system
            distance_scale: Factor applied to every orbital radius
            dt: Recommended time step for this scenario
        """
        self.G = G
        self.distance_scale = distance_scale
        self.dt = dt
    
    @abstractmethod
    def build(self) -> SolarSystem:
        """Create the registry with its initial conditions.
        
        Returns:
            A freshly built SolarSystem
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
