"""Preset scenarios and the descriptor schema they are built from."""

from typing import List
from solar_sim.presets.base import Preset
from solar_sim.presets.descriptors import BodyDescriptor, CentralDescriptor, SatelliteDescriptor
from solar_sim.presets.solar_system import SolarSystemPreset
from solar_sim.presets.two_body import TwoBodyPreset

PRESETS = {
    'solar': SolarSystemPreset,
    'two_body': TwoBodyPreset,
}


def list_presets() -> List[str]:
    """Names accepted by get_preset."""
    return list(PRESETS.keys())


def get_preset(name: str, **kwargs) -> Preset:
    """Get preset by name."""
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list_presets()}")
    return preset_class(**kwargs)


__all__ = [
    "Preset",
    "BodyDescriptor",
    "CentralDescriptor",
    "SatelliteDescriptor",
    "SolarSystemPreset",
    "TwoBodyPreset",
    "get_preset",
    "list_presets",
]
