"""Pairwise kernels compiled with numba.

Both kernels visit every ordered pair ``(i, j)`` with ``i != j`` and read
only their input arrays, so results do not depend on the order in which the
pairs are visited except where noted for running merge totals.
"""

import numba as nb
import numpy as np


@nb.njit
def accelerations_jit(positions, masses, sun_mask, g_const, min_distance):
    n = positions.shape[0]
    acc = np.zeros((n, 2), dtype=np.float64)
    for i in range(n):
        # a sun never accelerates under gravity
        if sun_mask[i]:
            continue
        for j in range(n):
            if i == j:
                continue
            dx = positions[j, 0] - positions[i, 0]
            dy = positions[j, 1] - positions[i, 1]
            distance = np.sqrt(dx * dx + dy * dy)
            if distance == 0.0:
                continue
            clamped = max(distance, min_distance)
            acc_mag = g_const * masses[j] / (clamped * clamped)
            acc[i, 0] += dx / distance * acc_mag
            acc[i, 1] += dy / distance * acc_mag
    return acc


@nb.njit
def resolve_collisions_jit(positions, velocities, masses, radii, sun_mask, grow_on_merge):
    """Return merged velocities, masses, radii and a deletion mask.

    Overlap and the bigger/smaller decision use the input values, not the
    absorber's running mass. A body flags itself whenever it is not strictly
    heavier, so equal masses remove each other. The absorber's velocity
    nudge divides by its running mass, so a body absorbing several others in
    one step weights later ones less. A sun gains mass but keeps its
    velocity and is never flagged.
    """
    n = positions.shape[0]
    new_vel = velocities.copy()
    new_mass = masses.copy()
    new_radii = radii.copy()
    delete = np.zeros(n, dtype=np.bool_)
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            dx = positions[j, 0] - positions[i, 0]
            dy = positions[j, 1] - positions[i, 1]
            distance = np.sqrt(dx * dx + dy * dy)
            if distance >= radii[i] + radii[j]:
                continue
            if masses[i] > masses[j]:
                if not sun_mask[i]:
                    ratio = masses[j] / new_mass[i]
                    new_vel[i, 0] += velocities[j, 0] * ratio
                    new_vel[i, 1] += velocities[j, 1] * ratio
                new_mass[i] += masses[j]
                if grow_on_merge:
                    new_radii[i] = np.sqrt(new_radii[i] ** 2 + radii[j] ** 2)
            elif not sun_mask[i]:
                delete[i] = True
    return new_vel, new_mass, new_radii, delete
