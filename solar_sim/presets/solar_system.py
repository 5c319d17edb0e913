"""The Sun, eight planets, Pluto and the Moon in AU / solar mass / year units."""

from typing import List, Optional
from solar_sim.physics.bodies import SolarSystem
from solar_sim.presets.base import Preset
from solar_sim.presets.descriptors import BodyDescriptor, CentralDescriptor, SatelliteDescriptor


# Approximately (2*pi)^2 AU^3 Msun^-1 yr^-2, so a 1 AU orbit around 1 Msun takes a year
G_AU_YEAR = 39.478
DT = 0.0001  # fraction of a year per tick
DISTANCE_SCALE = 5.0
MAX_TRAIL_POINTS = 16384

SUN_MASS = 1.0
SUN_VISUAL_RADIUS = 1.0

MOON = SatelliteDescriptor(
    name="Moon", mass=7.35e-8, orbit_radius=0.15, orbit_speed=84.1,
    color=0x808080, visual_radius=0.015, axial_tilt=6.68, rotation_factor=1.0,
    max_trail_points=1000,
)

# name, mass (Msun), a (AU), color, visual radius, axial tilt (deg), rotation factor, trail cap
PLANETS_DATA = [
    BodyDescriptor("Mercury", 1.65e-7, 0.39, 3000, 0xAAAAAA, 0.03, 0.034, 0.2),
    BodyDescriptor("Venus", 2.45e-6, 0.72, 6500, 0xD4A017, 0.05, 177.4, -0.1),
    BodyDescriptor("Earth", 3.00e-6, 1.00, 10000, 0x0000FF, 0.05, 23.44, 1.0, satellites=[MOON]),
    BodyDescriptor("Mars", 3.23e-7, 1.52, 15000, 0xFF4500, 0.04, 25.19, 0.9),
    BodyDescriptor("Jupiter", 9.55e-4, 5.20, 25000, 0xFFD700, 0.18, 3.13, 2.5),
    BodyDescriptor("Saturn", 2.86e-4, 9.58, 38000, 0xF4A460, 0.16, 26.73, 2.3),
    BodyDescriptor("Uranus", 4.37e-5, 19.20, 40000, 0xADD8E6, 0.12, 97.77, 1.5),
    BodyDescriptor("Neptune", 5.15e-5, 30.05, 55000, 0x00008B, 0.12, 28.32, 1.4),
    BodyDescriptor("Pluto", 7.5e-9, 39.48, 60000, 0x8B4513, 0.02, 122.5, 1.0, dwarf=True),
]


class SolarSystemPreset(Preset):
    """Planets start on circular orbits in the x-y plane, all at angle zero."""

    def __init__(
        self,
        G: float = G_AU_YEAR,
        distance_scale: float = DISTANCE_SCALE,
        dt: float = DT,
        include_dwarfs: bool = True,
        planets: Optional[List[str]] = None,
        trail_scale: float = 1.0,
    ):
        """Initialize preset.

        Args:
            G: Gravitational constant
            distance_scale: Factor applied to the semi-major axes
            dt: Recommended time step (years)
            include_dwarfs: Keep dwarf planets such as Pluto
            planets: Optional subset of planet names to include
            trail_scale: Multiplier on every trail cap (at least 1 point is kept)
        """
        super().__init__(G=G, distance_scale=distance_scale, dt=dt)
        self.include_dwarfs = include_dwarfs
        self.planets = planets
        self.trail_scale = trail_scale

    @property
    def name(self) -> str:
        return "solar"

    def _trail_cap(self, cap: int) -> int:
        return max(1, int(cap * self.trail_scale))

    def planet_descriptors(self) -> List[BodyDescriptor]:
        selected = []
        for p in PLANETS_DATA:
            if p.dwarf and not self.include_dwarfs:
                continue
            if self.planets is not None and p.name not in self.planets:
                continue
            satellites = [
                SatelliteDescriptor(
                    s.name, s.mass, s.orbit_radius, s.orbit_speed,
                    max_trail_points=self._trail_cap(s.max_trail_points),
                    initial_angle=s.initial_angle, color=s.color,
                    visual_radius=s.visual_radius, axial_tilt=s.axial_tilt,
                    rotation_factor=s.rotation_factor,
                )
                for s in p.satellites
            ]
            selected.append(
                BodyDescriptor(
                    p.name, p.mass, p.a, self._trail_cap(p.max_trail_points),
                    p.color, p.visual_radius, p.axial_tilt, p.rotation_factor,
                    dwarf=p.dwarf, satellites=satellites,
                )
            )
        return selected

    def build(self) -> SolarSystem:
        central = CentralDescriptor(
            "Sun", SUN_MASS,
            max_trail_points=self._trail_cap(MAX_TRAIL_POINTS),
            color=0xFFFF00, visual_radius=SUN_VISUAL_RADIUS,
        )
        return SolarSystem.from_descriptors(
            central, self.planet_descriptors(), G=self.G, distance_scale=self.distance_scale
        )
