"""Body state and the simulation registry.

Dynamic bodies are integrated under mutual gravity. Kinematic satellites ride
on a closed-form circular orbit around a parent dynamic body and neither
exert nor feel gravity. The registry owns both lists for the lifetime of a
simulation; bodies are never added or removed once it is built.
"""

import math
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union
import numpy as np
from solar_sim.physics import vector
from solar_sim.physics.trail import TrailBuffer


DEFAULT_TRAIL_POINTS = 1000


def _check_mass(name: str, mass: float) -> float:
    mass = float(mass)
    if not math.isfinite(mass) or mass < 0:
        raise ValueError(f"Body '{name}': mass must be finite and >= 0, got {mass}")
    return mass


def _check_vector(name: str, label: str, value) -> np.ndarray:
    vec = vector.as_vec3(value)
    if not vector.is_finite(vec):
        raise ValueError(f"Body '{name}': {label} must be finite, got {vec.tolist()}")
    return vec


def circular_orbit_speed(G: float, central_mass: float, radius: float) -> float:
    """Speed of a circular orbit of the given radius: v = sqrt(G * M / r).

    Returns 0 for a non-positive radius.
    """
    if radius <= 0:
        return 0.0
    return math.sqrt(G * central_mass / radius)


class DynamicBody:
    """A mass advanced by the N-body integrator.

    ``acceleration`` is the net force over mass from the last completed step.
    It starts at zero and is consumed by the next step's position update.
    """

    def __init__(
        self,
        name: str,
        mass: float,
        position=(0.0, 0.0, 0.0),
        velocity=(0.0, 0.0, 0.0),
        max_trail_points: int = DEFAULT_TRAIL_POINTS,
        color: int = 0xFFFFFF,
        visual_radius: float = 0.05,
        axial_tilt: float = 0.0,
        rotation_factor: float = 0.0,
        dwarf: bool = False,
    ):
        self.name = name
        self.mass = _check_mass(name, mass)
        self.position = _check_vector(name, "position", position)
        self.velocity = _check_vector(name, "velocity", velocity)
        self.acceleration = vector.zero()
        self.trail = TrailBuffer(max_trail_points)

        # Presentation hints, read by renderers only
        self.color = color
        self.visual_radius = visual_radius
        self.axial_tilt = axial_tilt
        self.rotation_factor = rotation_factor
        self.dwarf = dwarf

    @property
    def max_trail_points(self) -> int:
        return self.trail.capacity

    @property
    def path_points(self) -> TrailBuffer:
        return self.trail

    def sample_trail(self) -> None:
        self.trail.append(self.position)

    def __repr__(self) -> str:
        return f"DynamicBody(name={self.name!r}, mass={self.mass:g})"


class KinematicSatellite:
    """A small body on a fixed circular orbit around a parent dynamic body.

    The orbit lies in the parent's horizontal (x-z) plane. ``mass`` is
    informational only. ``parent_index`` is an index into the registry's
    dynamic body list; it is fixed at creation.
    """

    def __init__(
        self,
        name: str,
        mass: float,
        parent_index: int,
        orbit_radius: float,
        orbit_speed: float,
        current_orbit_angle: float = 0.0,
        max_trail_points: int = DEFAULT_TRAIL_POINTS,
        color: int = 0x808080,
        visual_radius: float = 0.015,
        axial_tilt: float = 0.0,
        rotation_factor: float = 0.0,
    ):
        self.name = name
        self.mass = _check_mass(name, mass)
        self._parent_index = int(parent_index)
        self.orbit_radius = float(orbit_radius)
        self.orbit_speed = float(orbit_speed)
        self.current_orbit_angle = float(current_orbit_angle)
        for label, value in (
            ("orbit_radius", self.orbit_radius),
            ("orbit_speed", self.orbit_speed),
            ("current_orbit_angle", self.current_orbit_angle),
        ):
            if not math.isfinite(value):
                raise ValueError(f"Satellite '{name}': {label} must be finite, got {value}")
        if self.orbit_radius < 0:
            raise ValueError(f"Satellite '{name}': orbit_radius must be >= 0, got {self.orbit_radius}")

        self.position = vector.zero()
        # Parent velocity as of the last update, used for the derived world velocity
        self._parent_velocity = vector.zero()
        self.trail = TrailBuffer(max_trail_points)

        self.color = color
        self.visual_radius = visual_radius
        self.axial_tilt = axial_tilt
        self.rotation_factor = rotation_factor

    @property
    def parent_index(self) -> int:
        return self._parent_index

    @property
    def max_trail_points(self) -> int:
        return self.trail.capacity

    @property
    def path_points(self) -> TrailBuffer:
        return self.trail

    def offset(self) -> np.ndarray:
        """Parent-relative position r * (cos theta, 0, sin theta)."""
        return satellite_offset(self.orbit_radius, self.current_orbit_angle)

    def place(self, parent: DynamicBody) -> None:
        """Recompute the world position from the parent's current position."""
        self.position = parent.position + self.offset()
        self._parent_velocity = vector.copy(parent.velocity)

    @property
    def velocity(self) -> np.ndarray:
        """World velocity: parent velocity plus the tangential orbital velocity."""
        theta = self.current_orbit_angle
        tangential = vector.vec3(-math.sin(theta), 0.0, math.cos(theta))
        return self._parent_velocity + tangential * (self.orbit_speed * self.orbit_radius)

    def sample_trail(self) -> None:
        self.trail.append(self.position)

    def __repr__(self) -> str:
        return (
            f"KinematicSatellite(name={self.name!r}, parent_index={self._parent_index}, "
            f"orbit_radius={self.orbit_radius:g})"
        )


def satellite_offset(radius: float, angle: float) -> np.ndarray:
    return vector.vec3(radius * math.cos(angle), 0.0, radius * math.sin(angle))


Body = Union[DynamicBody, KinematicSatellite]


class SolarSystem:
    """Registry of dynamic bodies (index 0 is the central mass) and satellites."""

    def __init__(
        self,
        bodies: Sequence[DynamicBody],
        satellites: Optional[Sequence[KinematicSatellite]] = None,
    ):
        """Initialize registry.

        Args:
            bodies: Dynamic bodies in simulation order
            satellites: Kinematic satellites, each referring to a parent by index
        """
        self.bodies: List[DynamicBody] = list(bodies)
        self.satellites: List[KinematicSatellite] = list(satellites or [])

        self._by_name: Dict[str, Body] = {}
        for body in self.bodies + self.satellites:
            if body.name in self._by_name:
                raise ValueError(f"Duplicate body name: {body.name!r}")
            self._by_name[body.name] = body

        for sat in self.satellites:
            if not 0 <= sat.parent_index < len(self.bodies):
                raise ValueError(
                    f"Satellite '{sat.name}' refers to unknown parent index {sat.parent_index}"
                )
            sat.place(self.bodies[sat.parent_index])

    @classmethod
    def from_descriptors(
        cls,
        central,
        planets: Sequence,
        G: float,
        distance_scale: float = 1.0,
    ) -> "SolarSystem":
        """Build a registry from static descriptors.

        Each planet starts on the +x axis at ``a * distance_scale`` with the
        circular-orbit speed along +y. Satellites start at their configured
        angle around their planet.

        Args:
            central: CentralDescriptor for body 0
            planets: BodyDescriptor list, each optionally carrying satellites
            G: Gravitational constant used for the circular-orbit speed
            distance_scale: Factor applied to every planet's orbital radius
        """
        if not math.isfinite(G) or G <= 0:
            raise ValueError(f"Gravitational constant must be finite and > 0, got {G}")

        bodies = [
            DynamicBody(
                central.name,
                central.mass,
                position=central.position,
                velocity=central.velocity,
                max_trail_points=central.max_trail_points,
                color=central.color,
                visual_radius=central.visual_radius,
            )
        ]
        satellites = []
        for p in planets:
            r = p.a * distance_scale
            speed = circular_orbit_speed(G, central.mass, r)
            index = len(bodies)
            bodies.append(
                DynamicBody(
                    p.name,
                    p.mass,
                    position=vector.add(vector.as_vec3(central.position), vector.vec3(r, 0.0, 0.0)),
                    velocity=vector.add(vector.as_vec3(central.velocity), vector.vec3(0.0, speed, 0.0)),
                    max_trail_points=p.max_trail_points,
                    color=p.color,
                    visual_radius=p.visual_radius,
                    axial_tilt=p.axial_tilt,
                    rotation_factor=p.rotation_factor,
                    dwarf=p.dwarf,
                )
            )
            for s in p.satellites:
                satellites.append(
                    KinematicSatellite(
                        s.name,
                        s.mass,
                        parent_index=index,
                        orbit_radius=s.orbit_radius,
                        orbit_speed=s.orbit_speed,
                        current_orbit_angle=s.initial_angle,
                        max_trail_points=s.max_trail_points,
                        color=s.color,
                        visual_radius=s.visual_radius,
                        axial_tilt=s.axial_tilt,
                        rotation_factor=s.rotation_factor,
                    )
                )
        return cls(bodies, satellites)

    @property
    def central(self) -> DynamicBody:
        return self.bodies[0]

    @property
    def names(self) -> List[str]:
        return [b.name for b in self.bodies] + [s.name for s in self.satellites]

    def get(self, name: str) -> Body:
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"No body named {name!r}") from None

    def index_of(self, name: str) -> int:
        for i, body in enumerate(self.bodies):
            if body.name == name:
                return i
        raise KeyError(f"No dynamic body named {name!r}")

    def parent_of(self, satellite: KinematicSatellite) -> DynamicBody:
        return self.bodies[satellite.parent_index]

    def satellites_of(self, index: int) -> List[KinematicSatellite]:
        return [s for s in self.satellites if s.parent_index == index]

    def all_bodies(self) -> Iterator[Body]:
        """Dynamic bodies first, then satellites."""
        yield from self.bodies
        yield from self.satellites

    def positions(self) -> np.ndarray:
        return np.array([b.position for b in self.bodies], dtype=np.float64).reshape(-1, 3)

    def velocities(self) -> np.ndarray:
        return np.array([b.velocity for b in self.bodies], dtype=np.float64).reshape(-1, 3)

    def accelerations(self) -> np.ndarray:
        return np.array([b.acceleration for b in self.bodies], dtype=np.float64).reshape(-1, 3)

    def masses(self) -> np.ndarray:
        return np.array([b.mass for b in self.bodies], dtype=np.float64)

    def satellite_angles(self) -> np.ndarray:
        return np.array([s.current_orbit_angle for s in self.satellites], dtype=np.float64)

    def get_state(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return (positions, velocities, masses) of the dynamic bodies."""
        return self.positions(), self.velocities(), self.masses()

    def __len__(self) -> int:
        return len(self.bodies)

    def __repr__(self) -> str:
        return f"SolarSystem(bodies={len(self.bodies)}, satellites={len(self.satellites)})"
