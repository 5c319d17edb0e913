"""CLI main entry point."""

import argparse
import sys
from solar_sim.physics.simulator import Simulator
from solar_sim.physics.diagnostics import Diagnostics
from solar_sim.presets import get_preset, list_presets
from solar_sim.io.state_io import save_state, load_state
from solar_sim.utils.config import Config, load_config


def build_config(args) -> Config:
    """Merge a config file (if given) with explicit command line overrides."""
    config = load_config(args.config) if args.config else Config()
    overrides = {
        'preset': args.preset,
        'steps': args.steps,
        'dt': args.dt,
        'G': args.G,
        'epsilon': args.epsilon,
        'time_scale': args.time_scale,
        'debug_every': args.debug_every,
        'save_state': args.save_state,
        'load_state': args.load_state,
        'plot': args.plot,
        'export_gif': args.export_gif,
        'gif_every': args.gif_every,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)
    if args.no_trails:
        config.record_trails = False
    return config.validate()


def _print_row(step, sim, diagnostics, E0):
    K, U, E = diagnostics.compute_energies(sim.system)
    P = diagnostics.total_momentum(sim.system)
    P_mag = float((P ** 2).sum() ** 0.5)
    dE = abs((E - E0) / E0) * 100.0 if E0 != 0 else 0.0
    print(f"{step:<8} {sim.time:<12.5f} {K:<14.6e} {U:<14.6e} {E:<14.6e} {P_mag:<12.3e} {dE:<10.4f}%")


def run_simulation(config: Config):
    """Run a simulation."""
    preset_kwargs = dict(config.preset_params)
    if config.G is not None:
        preset_kwargs['G'] = config.G
    preset = get_preset(config.preset, **preset_kwargs)
    system = preset.build()
    dt = config.dt if config.dt is not None else preset.dt

    sim = Simulator(
        system,
        dt=dt,
        G=preset.G,
        epsilon=config.epsilon,
        time_scale=config.time_scale,
        record_trails=config.record_trails,
    )

    if config.load_state:
        metadata = load_state(config.load_state, system)
        sim.time = float(metadata.get('time', 0.0))
        sim.step_count = int(metadata.get('steps', 0))
        print(f"State loaded from {config.load_state}")

    print(f"Running simulation: {preset.name} with {len(system.bodies)} bodies, {len(system.satellites)} satellites")
    print(f"Integrator: {sim.integrator.name}, dt: {dt}, time scale: {config.time_scale}, G: {sim.G}")

    renderer = None
    gif_exporter = None
    if config.plot or config.export_gif:
        from solar_sim.render.trajectory import TrajectoryRenderer
        renderer = TrajectoryRenderer(title=preset.name)
    if config.export_gif:
        from solar_sim.io.gif_exporter import GIFExporter
        gif_exporter = GIFExporter(config.export_gif)

    diagnostics = sim.diagnostics()
    E0 = diagnostics.total_energy(system)
    print(f"{'Step':<8} {'Time':<12} {'K':<14} {'U':<14} {'E':<14} {'|P|':<12} {'dE/E0':<10}")
    print("-" * 90)
    _print_row(sim.step_count, sim, diagnostics, E0)

    for step in range(1, config.steps + 1):
        sim.step()
        if config.debug_every and step % config.debug_every == 0:
            _print_row(sim.step_count, sim, diagnostics, E0)
        if gif_exporter is not None and step % config.gif_every == 0:
            gif_exporter.capture(renderer, system)

    if gif_exporter is not None and len(gif_exporter) > 0:
        print(f"Exporting GIF to {gif_exporter.output_path}...")
        gif_exporter.export()

    if config.plot:
        renderer.render(system)
        renderer.save(config.plot)
        print(f"Trajectory plot saved to {config.plot}")

    if renderer is not None:
        renderer.close()

    if config.save_state:
        save_state(system, config.save_state, metadata={'time': sim.time, 'steps': sim.step_count, 'preset': preset.name})
        print(f"State saved to {config.save_state}")

    print("Simulation complete!")
    return sim


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Gravitational N-body simulation of a small planetary system'
    )
    parser.add_argument('--config', type=str, default=None,
                        help='Config file (.yaml or .json); command line flags override it')
    parser.add_argument('--preset', type=str, default=None,
                        help=f'Preset scenario ({", ".join(list_presets())})')
    parser.add_argument('--steps', type=int, default=None,
                        help='Number of ticks to run')
    parser.add_argument('--dt', type=float, default=None,
                        help="Time step per tick (default: preset's recommended step)")
    parser.add_argument('--G', type=float, default=None,
                        help="Gravitational constant (default: preset's constant)")
    parser.add_argument('--epsilon', type=float, default=None,
                        help='Squared-distance threshold below which force is zero')
    parser.add_argument('--time-scale', type=float, default=None,
                        help='Speed multiplier applied to dt')
    parser.add_argument('--debug-every', type=int, default=None,
                        help='Print a diagnostics row every N ticks (0 disables)')
    parser.add_argument('--no-trails', action='store_true',
                        help='Do not record trail history')
    parser.add_argument('--save-state', type=str, default=None,
                        help='Save final state to file (.npz or .json)')
    parser.add_argument('--load-state', type=str, default=None,
                        help='Restore state from file before running')
    parser.add_argument('--plot', type=str, default=None,
                        help='Save a trajectory plot of the final state (e.g. orbits.png)')
    parser.add_argument('--export-gif', type=str, default=None,
                        help='Export an animated GIF of the run')
    parser.add_argument('--gif-every', type=int, default=None,
                        help='Capture a GIF frame every N ticks')
    parser.add_argument('--list-presets', action='store_true',
                        help='List available presets and exit')

    args = parser.parse_args(argv)

    if args.list_presets:
        print("Available presets:")
        for name in list_presets():
            print(f"  - {name}")
        return 0

    try:
        config = build_config(args)
        run_simulation(config)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
