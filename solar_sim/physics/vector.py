"""3D vector helpers.

Vectors are plain numpy arrays of shape (3,) and dtype float64. Every helper
returns a fresh array so callers never alias another body's state.
"""

import numpy as np


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    return np.array([x, y, z], dtype=np.float64)


def zero() -> np.ndarray:
    return np.zeros(3, dtype=np.float64)


def as_vec3(value) -> np.ndarray:
    """Convert a sequence of three numbers into a float64 vector (copied)."""
    arr = np.array(value, dtype=np.float64).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"Expected a 3-vector, got shape {arr.shape}")
    return arr


def copy(a: np.ndarray) -> np.ndarray:
    return np.array(a, dtype=np.float64, copy=True)


def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return a + b


def sub(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return a - b


def scale(a: np.ndarray, s: float) -> np.ndarray:
    return a * s


def length_sq(a: np.ndarray) -> float:
    return float(np.dot(a, a))


def length(a: np.ndarray) -> float:
    return float(np.sqrt(length_sq(a)))


def normalize(a: np.ndarray) -> np.ndarray:
    """Unit vector along `a`; the zero vector maps to itself."""
    l = length(a)
    if l == 0:
        return zero()
    return a / l


def is_finite(a: np.ndarray) -> bool:
    return bool(np.all(np.isfinite(a)))
