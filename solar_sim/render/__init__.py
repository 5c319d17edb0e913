"""Read-only trajectory rendering."""

from solar_sim.render.base import Renderer
from solar_sim.render.trajectory import TrajectoryRenderer

__all__ = ["Renderer", "TrajectoryRenderer"]
