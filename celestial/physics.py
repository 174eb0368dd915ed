"""One simulation step: gravity, movement, then collisions.

The step works on :class:`BodyArrays`, a struct-of-arrays copy of a store
snapshot. :func:`do_physics_step` is the entry point for the live store and
returns an update buffer; :func:`physics_step_arrays` is shared with orbit
prediction, which keeps its scratch state in arrays between steps.
"""
import logging

import numpy as np

from . import constants as C
from .body import Body
from .integrators import semi_implicit_euler_arrays
from .jit import resolve_collisions_jit

logger = logging.getLogger(__name__)


class BodyArrays:
    """Columns of body state, one row per body."""

    __slots__ = (
        "ids",
        "positions",
        "velocities",
        "masses",
        "radii",
        "sun_mask",
        "selected_mask",
    )

    def __init__(self, ids, positions, velocities, masses, radii, sun_mask, selected_mask):
        self.ids = ids
        self.positions = positions
        self.velocities = velocities
        self.masses = masses
        self.radii = radii
        self.sun_mask = sun_mask
        self.selected_mask = selected_mask

    @classmethod
    def from_bodies(cls, bodies):
        bodies = list(bodies)
        n = len(bodies)
        return cls(
            np.array([b.id for b in bodies], dtype=np.int64),
            np.array([b.pos for b in bodies], dtype=np.float64).reshape(n, 2),
            np.array([b.vel for b in bodies], dtype=np.float64).reshape(n, 2),
            np.array([b.mass for b in bodies], dtype=np.float64),
            np.array([b.radius for b in bodies], dtype=np.float64),
            np.array([b.sun for b in bodies], dtype=bool),
            np.array([b.selected for b in bodies], dtype=bool),
        )

    def __len__(self):
        return len(self.ids)

    def compress(self, keep):
        """Return the rows where ``keep`` is true."""
        return BodyArrays(
            self.ids[keep],
            self.positions[keep],
            self.velocities[keep],
            self.masses[keep],
            self.radii[keep],
            self.sun_mask[keep],
            self.selected_mask[keep],
        )

    def to_bodies(self):
        return [
            Body(
                int(self.ids[i]),
                self.masses[i],
                self.positions[i],
                self.velocities[i],
                radius=self.radii[i],
                sun=bool(self.sun_mask[i]),
                selected=bool(self.selected_mask[i]),
            )
            for i in range(len(self))
        ]


def integrate_arrays(state, dt, g_constant, min_distance=C.MIN_DISTANCE):
    """Return a copy of ``state`` advanced by gravity and movement."""
    new_pos, new_vel = semi_implicit_euler_arrays(
        state.positions,
        state.velocities,
        state.masses,
        state.sun_mask,
        dt,
        g_constant,
        min_distance,
    )
    return BodyArrays(
        state.ids,
        new_pos,
        new_vel,
        state.masses.copy(),
        state.radii.copy(),
        state.sun_mask,
        state.selected_mask,
    )


def collide_arrays(state, grow_on_merge=C.GROW_ON_MERGE):
    """Resolve overlaps.

    Returns the merged state (deleted rows still present) and a boolean
    deletion mask. A body is flagged only by its own comparison against an
    overlapping body at least as heavy; a sun is never flagged.
    """
    if len(state) < 2:
        return state, np.zeros(len(state), dtype=bool)
    new_vel, new_mass, new_radii, delete = resolve_collisions_jit(
        state.positions,
        state.velocities,
        state.masses,
        state.radii,
        state.sun_mask,
        bool(grow_on_merge),
    )
    merged = BodyArrays(
        state.ids,
        state.positions,
        new_vel,
        new_mass,
        new_radii,
        state.sun_mask,
        state.selected_mask,
    )
    return merged, delete


def physics_step_arrays(
    state,
    dt,
    g_constant,
    min_distance=C.MIN_DISTANCE,
    grow_on_merge=C.GROW_ON_MERGE,
):
    """Integrate then collide. Returns ``(state, delete_mask)``."""
    if len(state) == 0:
        return state, np.zeros(0, dtype=bool)
    moved = integrate_arrays(state, dt, g_constant, min_distance)
    return collide_arrays(moved, grow_on_merge)


def do_physics_step(
    bodies,
    dt,
    g_constant=C.GRAVITATIONAL_CONSTANT,
    min_distance=C.MIN_DISTANCE,
    grow_on_merge=C.GROW_ON_MERGE,
):
    """Advance a snapshot by one tick.

    Returns
    -------
    updates : dict
        Body id to an updated :class:`Body` for every surviving body.
    deletions : set
        Ids of bodies absorbed during this tick.
    """
    state = BodyArrays.from_bodies(bodies)
    result, delete = physics_step_arrays(state, dt, g_constant, min_distance, grow_on_merge)
    updates = {}
    deletions = set()
    for body, deleted in zip(result.to_bodies(), delete):
        if deleted:
            deletions.add(body.id)
        else:
            updates[body.id] = body
    if deletions:
        logger.debug("Merged %d bodies this tick", len(deletions))
    return updates, deletions
