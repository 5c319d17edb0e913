"""Pairwise Newtonian gravity with a near-coincidence guard.

Each unordered pair is evaluated once; the force is added to the first body
and subtracted from the second, so the pair contributions cancel exactly.
Forces accumulate in an (n, 3) array aligned with the body list.
"""

import math
from typing import Sequence
import numpy as np
from solar_sim.physics import vector


G_DEFAULT = 1.0
EPSILON_DEFAULT = 1e-6  # squared-distance threshold below which force is zero


def gravitational_force(body1, body2, G: float = G_DEFAULT, epsilon: float = EPSILON_DEFAULT) -> np.ndarray:
    """Force exerted on body1 by body2: G * m1 * m2 / r^2, pointing at body2.

    Returns the zero vector when the squared separation is below ``epsilon``.
    """
    distance_vector = vector.sub(body2.position, body1.position)
    distance_sq = vector.length_sq(distance_vector)
    if distance_sq < epsilon:
        return vector.zero()
    magnitude = G * body1.mass * body2.mass / distance_sq
    return vector.scale(vector.normalize(distance_vector), magnitude)


class ForceCalculator:
    """Direct-summation O(N^2) force model for a handful of bodies."""

    def __init__(self, G: float = G_DEFAULT, epsilon: float = EPSILON_DEFAULT):
        """Initialize force model.

        Args:
            G: Gravitational constant in the simulation's unit system
            epsilon: Squared-distance threshold for the zero-force guard
        """
        G = float(G)
        epsilon = float(epsilon)
        if not math.isfinite(G) or G <= 0:
            raise ValueError(f"Gravitational constant must be finite and > 0, got {G}")
        if not math.isfinite(epsilon) or epsilon < 0:
            raise ValueError(f"epsilon must be finite and >= 0, got {epsilon}")
        self.G = G
        self.epsilon = epsilon

    def pair_force(self, body1, body2) -> np.ndarray:
        return gravitational_force(body1, body2, self.G, self.epsilon)

    def compute_forces(self, bodies: Sequence) -> np.ndarray:
        """Net gravitational force on every body at the current positions.

        Args:
            bodies: Dynamic bodies (only position and mass are read)

        Returns:
            (n, 3) array, row i is the net force on bodies[i]
        """
        n = len(bodies)
        forces = np.zeros((n, 3), dtype=np.float64)
        for i in range(n):
            for j in range(i + 1, n):
                force = self.pair_force(bodies[i], bodies[j])
                forces[i] += force
                forces[j] -= force
        return forces

    def compute_accelerations(self, bodies: Sequence) -> np.ndarray:
        """Net force over mass per body; zero-mass bodies get zero acceleration."""
        forces = self.compute_forces(bodies)
        accelerations = np.zeros_like(forces)
        for i, body in enumerate(bodies):
            if body.mass != 0:
                accelerations[i] = forces[i] / body.mass
        return accelerations
