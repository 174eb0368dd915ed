import numpy as np

from . import constants as C
from .jit import accelerations_jit


def compute_accelerations(
    positions: np.ndarray,
    masses: np.ndarray,
    sun_mask: np.ndarray,
    g_constant: float = C.GRAVITATIONAL_CONSTANT,
    min_distance: float = C.MIN_DISTANCE,
) -> np.ndarray:
    """Gravitational acceleration on every body from every other body.

    Parameters
    ----------
    positions : ndarray, shape (n, 2)
    masses : ndarray, shape (n,)
    sun_mask : ndarray of bool, shape (n,)
        Rows flagged here get zero acceleration.
    g_constant : float
        Gravitational constant in simulation units.
    min_distance : float
        Lower bound on the distance used in ``G * m / d**2``. Pairs at
        exactly the same point contribute nothing.
    """
    n = len(masses)
    if n == 0:
        return np.zeros((0, 2), dtype=np.float64)
    return accelerations_jit(
        np.ascontiguousarray(positions, dtype=np.float64),
        np.ascontiguousarray(masses, dtype=np.float64),
        np.ascontiguousarray(sun_mask, dtype=np.bool_),
        float(g_constant),
        float(min_distance),
    )


def semi_implicit_euler_arrays(
    positions,
    velocities,
    masses,
    sun_mask,
    dt,
    g_constant,
    min_distance=C.MIN_DISTANCE,
) -> tuple[np.ndarray, np.ndarray]:
    """Kick then drift: update velocities, then move with the new velocities."""
    acc = compute_accelerations(positions, masses, sun_mask, g_constant, min_distance)
    vel_new = velocities + acc * dt
    pos_new = positions + vel_new * dt
    return pos_new, vel_new
