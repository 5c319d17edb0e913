"""Base renderer interface."""

from abc import ABC, abstractmethod
import numpy as np


class Renderer(ABC):
    """Abstract base class for renderers.

    Renderers only read the registry (positions, trails, presentation hints)
    after a tick has completed; they never modify physics state.
    """
    
    @abstractmethod
    def render(self, system):
        """Render current frame.
        
        Args:
            system: SolarSystem to draw
        """
        pass
    
    @abstractmethod
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array.
        
        Returns:
            Image array (H, W, 3) uint8
        """
        pass
    
    @abstractmethod
    def clear(self):
        """Clear the renderer."""
        pass
    
    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass
