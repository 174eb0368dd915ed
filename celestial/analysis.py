"""Whole-system diagnostics for a snapshot of bodies."""

import numpy as np

from . import constants as C


def system_energy(bodies, g_constant=C.GRAVITATIONAL_CONSTANT):
    """Return total kinetic and potential energy.

    The sun's kinetic energy is skipped; coincident pairs add no potential.
    """
    bodies = list(bodies)
    kinetic = 0.0
    potential = 0.0
    for body in bodies:
        if body.sun:
            continue
        kinetic += 0.5 * body.mass * float(np.dot(body.vel, body.vel))
    for i, bi in enumerate(bodies):
        for bj in bodies[i + 1:]:
            r = float(np.linalg.norm(bj.pos - bi.pos))
            if r == 0:
                continue
            potential -= g_constant * bi.mass * bj.mass / r
    return kinetic, potential, kinetic + potential


def total_momentum(bodies):
    p = np.zeros(2, dtype=np.float64)
    for body in bodies:
        p += body.mass * body.vel
    return p


def total_mass(bodies):
    return float(sum(body.mass for body in bodies))


def center_of_mass(bodies):
    """Return the centre-of-mass position and velocity, or ``(None, None)``."""
    mass = 0.0
    weighted_pos_sum = np.zeros(2, dtype=np.float64)
    weighted_vel_sum = np.zeros(2, dtype=np.float64)
    for body in bodies:
        mass += body.mass
        weighted_pos_sum += body.pos * body.mass
        weighted_vel_sum += body.vel * body.mass
    if mass == 0:
        return None, None
    return weighted_pos_sum / mass, weighted_vel_sum / mass
