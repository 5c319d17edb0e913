"""
Solar Simulator - gravitational N-body engine for a handful of bodies.

Features:
- Velocity Verlet integration under pairwise Newtonian gravity
- Kinematic satellites on analytic circular orbits
- Bounded per-body trail history for trajectory rendering
- Solar system and two-body presets
- State save/load, trajectory plots and GIF export
"""

__version__ = "0.1.0"

from solar_sim.physics.simulator import Simulator, advance
from solar_sim.physics.bodies import SolarSystem
from solar_sim.presets import get_preset, list_presets

__all__ = [
    "Simulator",
    "advance",
    "SolarSystem",
    "get_preset",
    "list_presets",
]
