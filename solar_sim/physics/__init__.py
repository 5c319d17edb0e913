"""Physics engine: bodies, gravity, integration, satellites and trails."""

from solar_sim.physics.bodies import DynamicBody, KinematicSatellite, SolarSystem
from solar_sim.physics.force_calculator import ForceCalculator
from solar_sim.physics.simulator import Simulator, advance

__all__ = [
    "DynamicBody",
    "KinematicSatellite",
    "SolarSystem",
    "ForceCalculator",
    "Simulator",
    "advance",
]
