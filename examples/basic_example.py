"""Basic example of using the solar system simulator."""

from solar_sim import Simulator, get_preset
from solar_sim.physics.diagnostics import body_info

def main():
    """Run the inner solar system for a few simulated months."""
    # Sun plus the four inner planets (Earth carries the Moon)
    preset = get_preset("solar", planets=["Mercury", "Venus", "Earth", "Mars"])
    system = preset.build()
    
    # Create simulator with the preset's recommended step
    sim = Simulator(system, dt=preset.dt, G=preset.G)
    
    print("Running simulation...")
    print(f"Initial energy: {sim.get_energy():.6e}")
    
    for step in range(5000):
        sim.step()
        if step % 1000 == 0:
            energy = sim.get_energy()
            print(f"Step {step}: Time={sim.time:.4f} yr, Energy={energy:.6e}")
    
    for name in system.names:
        info = body_info(system, name)
        print(f"{name:<8} r={info['distance_from_central']:.4f}  |v|={info['speed']:.4f}")
    
    print(f"Final energy: {sim.get_energy():.6e}")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
