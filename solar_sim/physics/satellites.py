"""Analytic update of kinematic satellites."""


def update_satellites(system, dt: float) -> None:
    """Advance every satellite's orbit angle and re-anchor it to its parent.

    Must run after the dynamic step of the same tick so each satellite sits
    around its parent's new position.

    Args:
        system: SolarSystem registry
        dt: Time step
    """
    for sat in system.satellites:
        sat.current_orbit_angle += sat.orbit_speed * dt
        sat.place(system.bodies[sat.parent_index])
