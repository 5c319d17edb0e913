"""Tests for the Velocity Verlet integrator."""

import numpy as np
from solar_sim.physics.bodies import DynamicBody
from solar_sim.physics.force_calculator import ForceCalculator
from solar_sim.physics.integrators import Integrator, VerletIntegrator


class RecordingForceCalculator(ForceCalculator):
    """Force model that remembers the positions it was evaluated at."""
    
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.seen_positions = []
    
    def compute_forces(self, bodies):
        self.seen_positions.append([b.position.copy() for b in bodies])
        return super().compute_forces(bodies)


def _pair():
    # Near-circular orbit of separation 1 with G = 1, zero total momentum
    a = DynamicBody("a", 1.0, position=(-2.0 / 3.0, 0.0, 0.0), velocity=(0.0, -1.1547, 0.05))
    b = DynamicBody("b", 2.0, position=(1.0 / 3.0, 0.0, 0.0), velocity=(0.0, 0.57735, -0.025))
    return [a, b]


def test_verlet_metadata():
    """Verlet reports its name and order."""
    integrator = VerletIntegrator()
    
    assert isinstance(integrator, Integrator)
    assert integrator.name == "verlet"
    assert integrator.order == 2


def test_first_step_uses_zero_stored_acceleration():
    """Before any step the stored acceleration is zero, so positions drift with velocity only."""
    bodies = _pair()
    start = [b.position.copy() for b in bodies]
    velocities = [b.velocity.copy() for b in bodies]
    dt = 0.01
    
    VerletIntegrator().step(bodies, ForceCalculator(), dt)
    
    for body, x0, v0 in zip(bodies, start, velocities):
        assert np.allclose(body.position, x0 + v0 * dt, rtol=0.0, atol=1e-15)


def test_step_matches_velocity_verlet_equations():
    """Positions, velocities and stored accelerations follow the four Verlet steps."""
    bodies = _pair()
    calc = ForceCalculator(G=1.0)
    integrator = VerletIntegrator()
    dt = 0.02
    integrator.step(bodies, calc, dt)  # warm up so a_old is non-zero
    
    x0 = [b.position.copy() for b in bodies]
    v0 = [b.velocity.copy() for b in bodies]
    a0 = [b.acceleration.copy() for b in bodies]
    
    integrator.step(bodies, calc, dt)
    
    x1 = [x + v * dt + 0.5 * a * dt * dt for x, v, a in zip(x0, v0, a0)]
    probe = [DynamicBody(b.name, b.mass, position=x) for b, x in zip(bodies, x1)]
    a1 = calc.compute_accelerations(probe)
    for i, body in enumerate(bodies):
        assert np.allclose(body.position, x1[i], rtol=1e-14, atol=1e-15)
        assert np.allclose(body.acceleration, a1[i], rtol=1e-12)
        assert np.allclose(body.velocity, v0[i] + 0.5 * (a0[i] + a1[i]) * dt, rtol=1e-12)


def test_all_positions_move_before_force_evaluation():
    """The force model only ever sees a fully updated set of positions."""
    bodies = [
        DynamicBody("a", 1.0, position=(0.0, 0.0, 0.0), velocity=(1.0, 0.0, 0.0)),
        DynamicBody("b", 1.0, position=(3.0, 0.0, 0.0), velocity=(0.0, 1.0, 0.0)),
        DynamicBody("c", 1.0, position=(0.0, 4.0, 0.0), velocity=(0.0, 0.0, 1.0)),
    ]
    calc = RecordingForceCalculator()
    integrator = VerletIntegrator()
    dt = 0.1
    
    for _ in range(3):
        expected = [b.position + b.velocity * dt + 0.5 * b.acceleration * dt * dt for b in bodies]
        integrator.step(bodies, calc, dt)
        seen = calc.seen_positions[-1]
        for pos, exp in zip(seen, expected):
            assert np.allclose(pos, exp, rtol=0.0, atol=1e-14)
    
    # One force evaluation per step
    assert len(calc.seen_positions) == 3


def test_zero_mass_body_moves_kinematically():
    """A massless body never accelerates and a massless partner exerts no force.
    
    Masses 1.0 and 0.0 one unit apart along x, G = 1, the massless body moving
    at unit speed along y, one tick of dt = 0.01.
    """
    heavy = DynamicBody("heavy", 1.0, position=(0.0, 0.0, 0.0))
    probe = DynamicBody("probe", 0.0, position=(1.0, 0.0, 0.0), velocity=(0.0, 1.0, 0.0))
    
    VerletIntegrator().step([heavy, probe], ForceCalculator(G=1.0), 0.01)
    
    assert np.array_equal(probe.position, [1.0, 0.01, 0.0])
    assert np.array_equal(probe.velocity, [0.0, 1.0, 0.0])
    assert np.array_equal(probe.acceleration, [0.0, 0.0, 0.0])
    # F = G * m1 * m2 / r^2 vanishes when either mass is zero
    assert np.array_equal(heavy.position, [0.0, 0.0, 0.0])
    assert np.array_equal(heavy.velocity, [0.0, 0.0, 0.0])
    assert np.array_equal(heavy.acceleration, [0.0, 0.0, 0.0])


def test_massive_body_accelerates_toward_light_partner():
    """With a small but non-zero partner mass the heavy body is pulled toward it."""
    heavy = DynamicBody("heavy", 1.0, position=(0.0, 0.0, 0.0))
    light = DynamicBody("light", 1e-3, position=(1.0, 0.0, 0.0), velocity=(0.0, 1.0, 0.0))
    
    VerletIntegrator().step([heavy, light], ForceCalculator(G=1.0), 0.01)
    
    separation = light.position - heavy.position
    acc = heavy.acceleration
    assert np.linalg.norm(acc) > 0
    cos_angle = np.dot(acc, separation) / (np.linalg.norm(acc) * np.linalg.norm(separation))
    assert np.isclose(cos_angle, 1.0)
    assert np.dot(light.acceleration, separation) < 0


def test_time_reversibility():
    """Stepping forward n times then back n times returns to the start."""
    bodies = _pair()
    calc = ForceCalculator(G=1.0)
    integrator = VerletIntegrator()
    dt = 0.005
    integrator.step(bodies, calc, dt)  # stored accelerations now match positions
    
    x0 = [b.position.copy() for b in bodies]
    v0 = [b.velocity.copy() for b in bodies]
    for _ in range(200):
        integrator.step(bodies, calc, dt)
    for _ in range(200):
        integrator.step(bodies, calc, -dt)
    
    for body, x, v in zip(bodies, x0, v0):
        assert np.allclose(body.position, x, atol=1e-9)
        assert np.allclose(body.velocity, v, atol=1e-9)


def test_large_timestep_does_not_raise():
    """A huge dt degrades accuracy but still completes."""
    bodies = _pair()
    integrator = VerletIntegrator()
    for _ in range(5):
        integrator.step(bodies, ForceCalculator(), 50.0)
    assert all(b.position.shape == (3,) for b in bodies)


def test_non_finite_state_propagates_silently():
    """NaN injected after construction spreads through the step without raising."""
    bodies = _pair()
    bodies[0].mass = float("nan")
    integrator = VerletIntegrator()
    
    integrator.step(bodies, ForceCalculator(), 0.01)
    integrator.step(bodies, ForceCalculator(), 0.01)
    
    assert np.isnan(bodies[0].velocity).any()
    assert np.isnan(bodies[1].position).any()
