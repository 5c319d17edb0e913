"""Velocity Verlet integrator (symplectic, O(h²) accuracy)."""

from typing import Sequence
import numpy as np
from solar_sim.physics.integrators.base import Integrator


class VerletIntegrator(Integrator):
    """Velocity Verlet integrator - second-order, symplectic.

    Canonical Velocity Verlet algorithm:
    1. x_new = x + v*dt + 0.5*a_old*dt^2   (for every body)
    2. a_new = F(x_new) / m                 (zero for massless bodies)
    3. v_new = v + 0.5*(a_old + a_new)*dt
    4. store a_new as the next step's a_old

    a_old is each body's stored ``acceleration`` (zero before the first step).
    Every position is moved before forces are evaluated, so the force model
    never sees a mix of old and new positions.
    """

    @property
    def name(self) -> str:
        return "verlet"

    @property
    def order(self) -> int:
        return 2

    def step(self, bodies: Sequence, force_calculator, dt: float) -> None:
        """Advance all bodies by dt in place.

        Args:
            bodies: Dynamic bodies
            force_calculator: Object providing compute_accelerations(bodies)
            dt: Time step (any sign; no sub-stepping or clamping)
        """
        old_accelerations = [np.array(body.acceleration, dtype=np.float64) for body in bodies]
        dt_sq = dt * dt

        # Step 1: drift every position with the old acceleration
        for body, a_old in zip(bodies, old_accelerations):
            body.position = body.position + body.velocity * dt + a_old * (0.5 * dt_sq)

        # Step 2: accelerations at the new positions
        new_accelerations = force_calculator.compute_accelerations(bodies)

        # Steps 3 and 4: average-acceleration kick, then carry a_new forward
        for i, body in enumerate(bodies):
            a_new = np.array(new_accelerations[i], dtype=np.float64)
            body.velocity = body.velocity + (old_accelerations[i] + a_new) * (0.5 * dt)
            body.acceleration = a_new
