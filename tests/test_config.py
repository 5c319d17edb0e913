"""Tests for configuration loading and validation."""

import pytest
from solar_sim.utils.config import Config, load_config, save_config


@pytest.mark.parametrize("suffix", [".yaml", ".json"])
def test_save_load_config(tmp_path, suffix):
    """Configs survive a save/load cycle in YAML and JSON."""
    config = Config(preset="two_body", steps=50, dt=0.002, G=1.0, preset_params={"radius": 2.0})
    path = tmp_path / f"config{suffix}"
    
    save_config(config, str(path))
    loaded = load_config(str(path))
    
    assert loaded == config


def test_defaults():
    """Default config uses the solar preset and its own dt and G."""
    config = Config()
    
    assert config.preset == "solar"
    assert config.dt is None and config.G is None
    assert config.preset_params == {}
    assert config.validate() is config


@pytest.mark.parametrize("field, value", [
    ("steps", -1),
    ("dt", float("nan")),
    ("G", 0.0),
    ("G", -39.478),
    ("epsilon", -1e-6),
    ("time_scale", -2.0),
    ("gif_every", 0),
])
def test_validate_rejects_bad_values(field, value):
    """Invalid settings fail fast with ValueError."""
    config = Config(**{field: value})
    
    with pytest.raises(ValueError):
        config.validate()


def test_unknown_key_rejected(tmp_path):
    """Unknown keys in a config file are an error."""
    path = tmp_path / "config.json"
    path.write_text('{"preset": "solar", "warp_drive": true}')
    
    with pytest.raises(TypeError):
        load_config(str(path))
