"""Per-tick advance and the simulation loop controller."""

from typing import Callable, Optional
from solar_sim.physics.bodies import SolarSystem
from solar_sim.physics.diagnostics import Diagnostics
from solar_sim.physics.force_calculator import ForceCalculator, G_DEFAULT, EPSILON_DEFAULT
from solar_sim.physics.integrators.base import Integrator
from solar_sim.physics.integrators.verlet import VerletIntegrator
from solar_sim.physics.satellites import update_satellites


def advance(
    system: SolarSystem,
    dt: float,
    integrator: Optional[Integrator] = None,
    force_calculator: Optional[ForceCalculator] = None,
    record_trails: bool = True,
) -> None:
    """Advance the whole system by one tick, in place.

    Order within a tick: integrate every dynamic body, then move satellites
    around their updated parents, then append one trail sample per body.

    Args:
        system: SolarSystem registry
        dt: Time step
        integrator: Integrator for the dynamic bodies (default: Velocity Verlet)
        force_calculator: Force model (default: G = 1, epsilon = 1e-6)
        record_trails: Append a trail sample for every body after the update
    """
    integrator = integrator or VerletIntegrator()
    force_calculator = force_calculator or ForceCalculator()

    integrator.step(system.bodies, force_calculator, dt)
    update_satellites(system, dt)

    if record_trails:
        for body in system.all_bodies():
            body.sample_trail()


class Simulator:
    """Main simulation controller.

    Owns the loop state that sits around ``advance``: pause, time scale,
    elapsed time and step count. A paused simulator skips both the physics
    update and trail sampling.
    """

    def __init__(
        self,
        system: SolarSystem,
        dt: float = 1e-4,
        integrator: Optional[Integrator] = None,
        G: float = G_DEFAULT,
        epsilon: float = EPSILON_DEFAULT,
        time_scale: float = 1.0,
        record_trails: bool = True,
    ):
        """Initialize simulator.

        Args:
            system: Registry to advance
            dt: Base time step per tick
            integrator: Integrator to use (default: Verlet)
            G: Gravitational constant
            epsilon: Squared-distance guard of the force model
            time_scale: Multiplier applied to dt on every tick
            record_trails: Sample trails on every tick
        """
        self.system = system
        self.dt = dt
        self.integrator = integrator or VerletIntegrator()
        self.force_calculator = ForceCalculator(G=G, epsilon=epsilon)
        self.set_time_scale(time_scale)
        self.record_trails = record_trails

        self.time = 0.0
        self.paused = False
        self.step_count = 0

        # Callbacks
        self.on_step_callback: Optional[Callable] = None
        self.debug_table: bool = False
        self.debug_table_interval: int = 100

    @property
    def G(self) -> float:
        return self.force_calculator.G

    @property
    def epsilon(self) -> float:
        return self.force_calculator.epsilon

    @property
    def effective_dt(self) -> float:
        return self.dt * self.time_scale

    def diagnostics(self) -> Diagnostics:
        return Diagnostics(G=self.G, epsilon=self.epsilon)

    def step(self):
        """Perform one simulation tick unless paused."""
        if self.paused:
            return
        dt = self.effective_dt
        advance(
            self.system,
            dt,
            integrator=self.integrator,
            force_calculator=self.force_calculator,
            record_trails=self.record_trails,
        )
        self.time += dt
        self.step_count += 1

        if self.debug_table and (self.step_count % self.debug_table_interval == 0):
            self._log_stability_table()

        if self.on_step_callback:
            self.on_step_callback(self)

    def _log_stability_table(self):
        """Log K, U, E and momentum magnitude."""
        diagnostics = self.diagnostics()
        K, U, E = diagnostics.compute_energies(self.system)
        P = float((diagnostics.total_momentum(self.system) ** 2).sum() ** 0.5)
        print(f"[Diag] step={self.step_count} t={self.time:.5f} K={K:.6e} U={U:.6e} E={E:.6e} |P|={P:.3e}")

    def run(self, n_steps: int):
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run
        """
        for _ in range(n_steps):
            self.step()

    def pause(self):
        """Pause simulation."""
        self.paused = True

    def resume(self):
        """Resume simulation."""
        self.paused = False

    def set_timestep(self, dt: float):
        """Set base time step.

        Args:
            dt: New time step
        """
        self.dt = dt

    def set_time_scale(self, time_scale: float):
        """Set the speed multiplier applied to dt."""
        if time_scale < 0:
            raise ValueError(f"time_scale must be >= 0, got {time_scale}")
        self.time_scale = time_scale

    def set_integrator(self, integrator: Integrator):
        """Set integrator.

        Args:
            integrator: New integrator
        """
        self.integrator = integrator

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, masses, time, step_count)
        """
        pos, vel, mass = self.system.get_state()
        return pos, vel, mass, self.time, self.step_count

    def get_energy(self):
        """Get current total energy."""
        return self.diagnostics().total_energy(self.system)
