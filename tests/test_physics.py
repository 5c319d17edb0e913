"""Tests for the per-tick advance and the simulator loop."""

import numpy as np
import pytest
from solar_sim.physics.bodies import DynamicBody, SolarSystem
from solar_sim.physics.force_calculator import ForceCalculator
from solar_sim.physics.simulator import Simulator, advance
from solar_sim.presets import SolarSystemPreset, TwoBodyPreset
from solar_sim.presets.solar_system import G_AU_YEAR


def _earth_moon_system():
    preset = SolarSystemPreset(planets=["Earth", "Jupiter"], trail_scale=0.01)
    return preset.build()


def test_advance_returns_nothing_and_mutates_in_place():
    """advance() updates the registry's bodies and returns None."""
    system = TwoBodyPreset().build()
    before = system.positions()

    result = advance(system, 0.01, force_calculator=ForceCalculator(G=1.0))

    assert result is None
    assert not np.allclose(system.positions(), before)


def test_symmetric_pair_keeps_center_of_mass_fixed():
    """Two equal masses released at rest fall together without COM drift."""
    a = DynamicBody("a", 1.0, position=(-1.0, 0.0, 0.0))
    b = DynamicBody("b", 1.0, position=(1.0, 0.0, 0.0))
    system = SolarSystem([a, b])
    calc = ForceCalculator(G=1.0)

    for _ in range(500):
        advance(system, 0.001, force_calculator=calc)
        com = 0.5 * (a.position + b.position)
        assert np.allclose(com, 0.0, atol=1e-12)

    assert np.linalg.norm(b.position - a.position) < 2.0
    assert np.allclose(a.velocity, -b.velocity, atol=1e-12)
    assert a.velocity[0] > 0


def test_circular_orbit_stays_circular():
    """A light body at v = sqrt(G M / r) keeps its radius and closes after one period."""
    preset = TwoBodyPreset(G=G_AU_YEAR, central_mass=1.0, orbiter_mass=3e-6, radius=1.0, dt=1e-3)
    system = preset.build()
    calc = ForceCalculator(G=preset.G)
    central, orbiter = system.bodies
    start = orbiter.position - central.position
    n_steps = int(round(preset.period / preset.dt))

    for _ in range(n_steps):
        advance(system, preset.dt, force_calculator=calc, record_trails=False)
        r = np.linalg.norm(orbiter.position - central.position)
        assert abs(r - preset.radius) / preset.radius < 0.01

    end = orbiter.position - central.position
    assert np.linalg.norm(end - start) < 0.02 * preset.radius


def test_circular_orbit_energy_drift_is_small():
    """Velocity Verlet keeps the energy of a circular orbit nearly constant."""
    preset = TwoBodyPreset(G=1.0, central_mass=1.0, orbiter_mass=1e-3, radius=1.0, dt=1e-3)
    sim = Simulator(preset.build(), dt=preset.dt, G=preset.G, record_trails=False)
    sim.run(1)
    E0 = sim.get_energy()

    sim.run(3000)

    assert abs((sim.get_energy() - E0) / E0) < 1e-4


def test_trails_hold_exactly_the_most_recent_samples():
    """After enough ticks every trail is full and ends at the current position."""
    system = _earth_moon_system()
    calc = ForceCalculator(G=G_AU_YEAR)
    caps = {b.name: b.max_trail_points for b in system.all_bodies()}
    n_ticks = max(caps.values()) + 7
    history = {name: [] for name in caps}

    for _ in range(n_ticks):
        advance(system, 1e-4, force_calculator=calc)
        for body in system.all_bodies():
            history[body.name].append(body.position.copy())

    for body in system.all_bodies():
        cap = caps[body.name]
        assert len(body.trail) == cap
        assert np.array_equal(body.trail.to_array(), np.array(history[body.name][-cap:]))


def test_satellite_radius_invariant():
    """A satellite stays exactly orbit_radius away from its moving parent."""
    system = _earth_moon_system()
    calc = ForceCalculator(G=G_AU_YEAR)
    moon = system.get("Moon")
    earth = system.parent_of(moon)

    for _ in range(300):
        advance(system, 1e-3, force_calculator=calc, record_trails=False)
        offset = moon.position - earth.position
        assert np.isclose(np.linalg.norm(offset), moon.orbit_radius, rtol=1e-12)
        assert offset[1] == 0.0


def test_satellite_follows_updated_parent_in_same_tick():
    """Satellite angle advances by speed * dt and is anchored to the new parent position."""
    system = _earth_moon_system()
    moon = system.get("Moon")
    earth = system.parent_of(moon)
    angle0 = moon.current_orbit_angle
    dt = 2e-3

    advance(system, dt, force_calculator=ForceCalculator(G=G_AU_YEAR))

    assert np.isclose(moon.current_orbit_angle, angle0 + moon.orbit_speed * dt)
    theta = moon.current_orbit_angle
    expected = earth.position + moon.orbit_radius * np.array([np.cos(theta), 0.0, np.sin(theta)])
    assert np.allclose(moon.position, expected, rtol=0.0, atol=1e-13)


def test_satellites_do_not_perturb_dynamic_bodies():
    """Dynamic trajectories are identical with or without satellites."""
    with_moon = SolarSystemPreset(planets=["Earth"], trail_scale=0.01).build()
    bare = SolarSystem(
        [
            DynamicBody(b.name, b.mass, position=b.position, velocity=b.velocity, max_trail_points=5)
            for b in with_moon.bodies
        ]
    )
    calc = ForceCalculator(G=G_AU_YEAR)

    for _ in range(100):
        advance(with_moon, 1e-3, force_calculator=calc)
        advance(bare, 1e-3, force_calculator=calc)

    assert np.array_equal(with_moon.positions(), bare.positions())
    assert np.array_equal(with_moon.velocities(), bare.velocities())


def test_simulator_time_and_steps():
    """Each tick advances time by dt * time_scale."""
    sim = Simulator(TwoBodyPreset().build(), dt=0.01, time_scale=2.0)

    sim.run(10)

    assert sim.step_count == 10
    assert np.isclose(sim.time, 0.2)


def test_paused_simulator_skips_physics_and_trails():
    """While paused, neither state nor trails change."""
    sim = Simulator(TwoBodyPreset().build(), dt=0.01)
    sim.run(3)
    positions = sim.system.positions()
    trail_lengths = [len(b.trail) for b in sim.system.all_bodies()]

    sim.pause()
    sim.run(5)

    assert sim.step_count == 3
    assert np.array_equal(sim.system.positions(), positions)
    assert [len(b.trail) for b in sim.system.all_bodies()] == trail_lengths

    sim.resume()
    sim.step()
    assert sim.step_count == 4


def test_record_trails_flag():
    """With trail recording off, trails stay empty."""
    sim = Simulator(TwoBodyPreset().build(), dt=0.01, record_trails=False)
    sim.run(5)

    assert all(len(b.trail) == 0 for b in sim.system.all_bodies())


def test_step_callback_and_time_scale_validation():
    """The step callback fires once per tick; negative time scales are rejected."""
    sim = Simulator(TwoBodyPreset().build(), dt=0.01)
    calls = []
    sim.on_step_callback = lambda s: calls.append(s.step_count)

    sim.run(3)

    assert calls == [1, 2, 3]
    with pytest.raises(ValueError):
        sim.set_time_scale(-1.0)


def test_negative_time_scale_rejected_at_construction():
    """A simulator cannot be built with a negative time scale."""
    with pytest.raises(ValueError):
        Simulator(TwoBodyPreset().build(), dt=0.01, time_scale=-1.0)
    
    sim = Simulator(TwoBodyPreset().build(), dt=0.01, time_scale=0.0)
    assert sim.effective_dt == 0.0


def test_debug_table_prints_diagnostics(capsys):
    """The diagnostics table prints every debug_table_interval ticks."""
    sim = Simulator(TwoBodyPreset().build(), dt=0.01)
    sim.debug_table = True
    sim.debug_table_interval = 2

    sim.run(4)

    out = capsys.readouterr().out
    assert out.count("[Diag]") == 2
    assert "step=4" in out
