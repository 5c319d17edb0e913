"""Descriptor schema for building a SolarSystem from static configuration."""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class SatelliteDescriptor:
    """A kinematic satellite around a planet."""
    name: str
    mass: float
    orbit_radius: float
    orbit_speed: float  # radians per unit time, signed
    max_trail_points: int = 1000
    initial_angle: float = 0.0
    color: int = 0x808080
    visual_radius: float = 0.015
    axial_tilt: float = 0.0
    rotation_factor: float = 1.0


@dataclass
class BodyDescriptor:
    """A planet placed on a circular orbit around the central body."""
    name: str
    mass: float
    a: float  # orbital radius before distance scaling
    max_trail_points: int = 1000
    color: int = 0xAAAAAA
    visual_radius: float = 0.05
    axial_tilt: float = 0.0
    rotation_factor: float = 1.0
    dwarf: bool = False
    satellites: List[SatelliteDescriptor] = field(default_factory=list)


@dataclass
class CentralDescriptor:
    """The dominant mass, body 0 of the registry."""
    name: str
    mass: float
    position: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    velocity: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    max_trail_points: int = 1000
    color: int = 0xFFFF00
    visual_radius: float = 1.0
