"""I/O utilities for export and state management."""

from solar_sim.io.gif_exporter import GIFExporter
from solar_sim.io.state_io import save_state, load_state, read_state

__all__ = ["GIFExporter", "save_state", "load_state", "read_state"]
