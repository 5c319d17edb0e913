"""Central mass with a single orbiting body, in abstract units."""

import math
from solar_sim.physics.bodies import SolarSystem
from solar_sim.presets.base import Preset
from solar_sim.presets.descriptors import BodyDescriptor, CentralDescriptor


class TwoBodyPreset(Preset):
    """A light body on a circular orbit of radius ``radius`` around ``central_mass``."""

    def __init__(
        self,
        G: float = 1.0,
        central_mass: float = 1.0,
        orbiter_mass: float = 1e-6,
        radius: float = 1.0,
        dt: float = 0.001,
        max_trail_points: int = 1000,
    ):
        super().__init__(G=G, distance_scale=1.0, dt=dt)
        self.central_mass = central_mass
        self.orbiter_mass = orbiter_mass
        self.radius = radius
        self.max_trail_points = max_trail_points

    @property
    def name(self) -> str:
        return "two_body"

    @property
    def period(self) -> float:
        """Circular orbit period 2*pi*sqrt(r^3 / (G*M))."""
        return 2.0 * math.pi * math.sqrt(self.radius ** 3 / (self.G * self.central_mass))

    def build(self) -> SolarSystem:
        central = CentralDescriptor(
            "Primary", self.central_mass, max_trail_points=self.max_trail_points
        )
        orbiter = BodyDescriptor(
            "Secondary", self.orbiter_mass, self.radius, max_trail_points=self.max_trail_points
        )
        return SolarSystem.from_descriptors(central, [orbiter], G=self.G)
