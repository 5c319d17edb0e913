"""Conserved-quantity diagnostics for the dynamic bodies."""

from typing import Any, Dict, Tuple
import numpy as np
from solar_sim.physics import vector
from solar_sim.physics.force_calculator import G_DEFAULT, EPSILON_DEFAULT


class Diagnostics:
    """Compute energies and momenta consistent with the force law."""

    def __init__(self, G: float = G_DEFAULT, epsilon: float = EPSILON_DEFAULT):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant (must match the force model)
            epsilon: Squared-distance guard (must match the force model)
        """
        self.G = G
        self.epsilon = epsilon

    def kinetic_energy(self, system) -> float:
        """K = 0.5 * sum(m_i * |v_i|^2)"""
        velocities = system.velocities()
        masses = system.masses()
        return float(0.5 * np.sum(masses * np.sum(velocities ** 2, axis=1)))

    def potential_energy(self, system) -> float:
        """U = -G * sum_{i<j} m_i * m_j / r_ij

        Pairs inside the guard distance are skipped, matching the zero force
        the force model assigns them.
        """
        positions = system.positions()
        masses = system.masses()
        n = len(masses)
        U = 0.0
        for i in range(n):
            for j in range(i + 1, n):
                r_sq = float(np.sum((positions[j] - positions[i]) ** 2))
                if r_sq < self.epsilon:
                    continue
                U -= self.G * masses[i] * masses[j] / np.sqrt(r_sq)
        return float(U)

    def compute_energies(self, system) -> Tuple[float, float, float]:
        """Return (kinetic, potential, total) energy."""
        K = self.kinetic_energy(system)
        U = self.potential_energy(system)
        return K, U, K + U

    def total_energy(self, system) -> float:
        return self.compute_energies(system)[2]

    def total_momentum(self, system) -> np.ndarray:
        """P = sum(m_i * v_i)"""
        return np.sum(system.masses()[:, np.newaxis] * system.velocities(), axis=0)

    def center_of_mass(self, system) -> np.ndarray:
        """Mass-weighted mean position; origin if the total mass is zero."""
        masses = system.masses()
        total_mass = np.sum(masses)
        if total_mass == 0:
            return vector.zero()
        return np.sum(masses[:, np.newaxis] * system.positions(), axis=0) / total_mass

    def angular_momentum(self, system) -> np.ndarray:
        """L = sum(m_i * r_i x v_i) about the origin."""
        masses = system.masses()
        return np.sum(masses[:, np.newaxis] * np.cross(system.positions(), system.velocities()), axis=0)


def body_info(system, name: str) -> Dict[str, Any]:
    """Summary of one body for an information display.

    Distance is measured from the central body (index 0) and speed is the
    magnitude of the body's velocity. The central body reports zero for both.

    Args:
        system: SolarSystem registry
        name: Name of a dynamic body or satellite

    Returns:
        Dict with name, mass, distance_from_central and speed
    """
    body = system.get(name)
    central = system.central
    if body is central:
        distance = 0.0
        speed = 0.0
    else:
        distance = vector.length(vector.sub(body.position, central.position))
        speed = vector.length(body.velocity)
    return {
        "name": body.name,
        "mass": body.mass,
        "distance_from_central": distance,
        "speed": speed,
    }
