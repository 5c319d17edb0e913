"""State I/O for saving and restoring a SolarSystem's physical state."""

import numpy as np
import json
from typing import Dict, Any, Optional
from pathlib import Path
from solar_sim.physics.bodies import _check_mass, _check_vector


def _state_arrays(system) -> Dict[str, np.ndarray]:
    return {
        'names': np.array([b.name for b in system.bodies]),
        'positions': system.positions(),
        'velocities': system.velocities(),
        'accelerations': system.accelerations(),
        'masses': system.masses(),
        'satellite_names': np.array([s.name for s in system.satellites]),
        'satellite_angles': system.satellite_angles(),
    }


def save_state(system, output_path: str, metadata: Optional[Dict[str, Any]] = None):
    """Save simulation state to file.

    Stored per dynamic body: name, mass, position, velocity and the lagged
    acceleration the next Verlet step starts from. Stored per satellite:
    name and current orbit angle.

    Args:
        system: SolarSystem to save
        output_path: Output file path (.npz or .json)
        metadata: Optional metadata dictionary (e.g. time, steps)
    """
    output_path = Path(output_path)
    state = _state_arrays(system)

    if output_path.suffix == '.npz':
        save_dict = dict(state)
        if metadata:
            for key, value in metadata.items():
                if isinstance(value, (int, float, str)):
                    save_dict[f'metadata_{key}'] = value
        np.savez_compressed(output_path, **save_dict)

    elif output_path.suffix == '.json':
        state_dict = {key: value.tolist() for key, value in state.items()}
        state_dict['metadata'] = metadata or {}
        with open(output_path, 'w') as f:
            json.dump(state_dict, f, indent=2)

    else:
        raise ValueError(f"Unsupported file format: {output_path.suffix}. Use .npz or .json")


def read_state(input_path: str) -> Dict[str, Any]:
    """Read a saved state without applying it.

    Args:
        input_path: Input file path

    Returns:
        Dict of arrays keyed like the saved file, plus 'metadata'
    """
    input_path = Path(input_path)

    if input_path.suffix == '.npz':
        with np.load(input_path) as data:
            state = {}
            metadata = {}
            for key in data.keys():
                if key.startswith('metadata_'):
                    metadata[key[9:]] = data[key].item()
                else:
                    state[key] = data[key]
        state['names'] = [str(n) for n in state['names']]
        state['satellite_names'] = [str(n) for n in state['satellite_names']]
        state['metadata'] = metadata
        return state

    elif input_path.suffix == '.json':
        with open(input_path, 'r') as f:
            state_dict = json.load(f)
        state = {}
        for key in ('positions', 'velocities', 'accelerations'):
            state[key] = np.array(state_dict[key], dtype=np.float64).reshape(-1, 3)
        state['masses'] = np.array(state_dict['masses'], dtype=np.float64)
        state['satellite_angles'] = np.array(state_dict['satellite_angles'], dtype=np.float64)
        state['names'] = list(state_dict['names'])
        state['satellite_names'] = list(state_dict['satellite_names'])
        state['metadata'] = state_dict.get('metadata', {})
        return state

    else:
        raise ValueError(f"Unsupported file format: {input_path.suffix}. Use .npz or .json")


def load_state(input_path: str, system) -> Dict[str, Any]:
    """Restore a saved state into an existing registry.

    The registry must hold the same bodies and satellites, in the same order,
    as the one that was saved. Satellite positions are recomputed from their
    restored parents.

    Args:
        input_path: Input file path (.npz or .json)
        system: SolarSystem to overwrite in place

    Returns:
        Metadata dictionary stored with the state
    """
    state = read_state(input_path)

    expected = [b.name for b in system.bodies]
    if state['names'] != expected:
        raise ValueError(f"Saved bodies {state['names']} do not match registry bodies {expected}")
    expected_sats = [s.name for s in system.satellites]
    if state['satellite_names'] != expected_sats:
        raise ValueError(
            f"Saved satellites {state['satellite_names']} do not match registry satellites {expected_sats}"
        )

    # Validate everything before touching the registry
    restored = [
        (
            _check_mass(body.name, state['masses'][i]),
            _check_vector(body.name, "position", state['positions'][i]),
            _check_vector(body.name, "velocity", state['velocities'][i]),
            _check_vector(body.name, "acceleration", state['accelerations'][i]),
        )
        for i, body in enumerate(system.bodies)
    ]
    angles = [float(a) for a in state['satellite_angles']]
    for sat, angle in zip(system.satellites, angles):
        if not np.isfinite(angle):
            raise ValueError(f"Satellite '{sat.name}': orbit angle must be finite, got {angle}")

    for body, (mass, position, velocity, acceleration) in zip(system.bodies, restored):
        body.mass = mass
        body.position = position
        body.velocity = velocity
        body.acceleration = acceleration

    for k, sat in enumerate(system.satellites):
        sat.current_orbit_angle = angles[k]
        sat.place(system.bodies[sat.parent_index])

    return state['metadata']
