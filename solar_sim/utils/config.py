"""Configuration management."""

import json
import math
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass, asdict, field


@dataclass
class Config:
    """Simulation configuration."""
    # Simulation parameters
    preset: str = "solar"
    preset_params: Dict[str, Any] = field(default_factory=dict)
    steps: int = 10000
    dt: Optional[float] = None  # None: use the preset's recommended step
    G: Optional[float] = None  # None: use the preset's constant
    epsilon: float = 1e-6
    time_scale: float = 1.0
    record_trails: bool = True

    # Output parameters
    debug_every: int = 1000
    save_state: Optional[str] = None
    load_state: Optional[str] = None
    plot: Optional[str] = None
    export_gif: Optional[str] = None
    gif_every: int = 100

    def __post_init__(self):
        if self.preset_params is None:
            self.preset_params = {}

    def validate(self):
        """Raise ValueError on settings the simulation cannot run with."""
        if self.steps < 0:
            raise ValueError(f"steps must be >= 0, got {self.steps}")
        if self.dt is not None and not math.isfinite(self.dt):
            raise ValueError(f"dt must be finite, got {self.dt}")
        if self.G is not None and (not math.isfinite(self.G) or self.G <= 0):
            raise ValueError(f"G must be finite and > 0, got {self.G}")
        if not math.isfinite(self.epsilon) or self.epsilon < 0:
            raise ValueError(f"epsilon must be finite and >= 0, got {self.epsilon}")
        if not math.isfinite(self.time_scale) or self.time_scale < 0:
            raise ValueError(f"time_scale must be finite and >= 0, got {self.time_scale}")
        if self.debug_every < 0 or self.gif_every < 1:
            raise ValueError("debug_every must be >= 0 and gif_every >= 1")
        return self


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix == '.yaml' or config_path.suffix == '.yml':
            try:
                import yaml
                data = yaml.safe_load(f)
            except ImportError:
                raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
        else:
            data = json.load(f)

    return Config(**(data or {})).validate()


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix == '.yaml' or output_path.suffix == '.yml':
            try:
                import yaml
                yaml.dump(data, f, default_flow_style=False)
            except ImportError:
                raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
        else:
            json.dump(data, f, indent=2)
