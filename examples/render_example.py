"""Example that renders the orbits to an animated GIF."""

from solar_sim import Simulator, get_preset
from solar_sim.io import GIFExporter
from solar_sim.render import TrajectoryRenderer

def main():
    """Run Earth and Mars for about a year and record their trails."""
    preset = get_preset("solar", planets=["Earth", "Mars"], trail_scale=0.1)
    system = preset.build()
    
    sim = Simulator(system, dt=preset.dt, G=preset.G, time_scale=10.0)
    
    renderer = TrajectoryRenderer(figsize=(6, 6), dpi=80, title="Earth and Mars")
    exporter = GIFExporter("orbits.gif", fps=20)
    
    print("Running simulation with rendering...")
    
    try:
        for step in range(2000):
            sim.step()
            
            # Capture every 20 steps to keep the GIF small
            if step % 20 == 0:
                exporter.capture(renderer, system)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
    finally:
        renderer.close()
    
    exporter.export()
    print("Simulation complete!")

if __name__ == "__main__":
    main()
