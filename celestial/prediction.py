"""Detached forward simulation of the selected body's orbit."""

import logging
import time

from . import constants as C
from .physics import BodyArrays, physics_step_arrays

logger = logging.getLogger(__name__)


def predict_orbit(
    bodies,
    dt,
    g_constant=C.GRAVITATIONAL_CONSTANT,
    steps=C.PREDICTION_STEPS,
    interval=C.PREDICTION_INTERVAL,
    min_distance=C.MIN_DISTANCE,
    grow_on_merge=C.GROW_ON_MERGE,
):
    """Sample the future positions of the selected body.

    ``bodies`` is a snapshot; it is copied into scratch arrays and never
    modified. After step ``i`` (counting from zero) the selected body's
    position is recorded when ``i % interval == 0``. Bodies absorbed along
    the way are dropped from the scratch state; once the selected body is
    gone no further points are added.

    Returns a list of ``(x, y)`` tuples, empty when nothing is selected.
    """
    state = BodyArrays.from_bodies(bodies)
    selected = state.ids[state.selected_mask]
    if len(selected) == 0:
        return []
    selected_id = selected[0]

    started = time.perf_counter()
    points = []
    for i in range(steps):
        state, delete = physics_step_arrays(state, dt, g_constant, min_distance, grow_on_merge)
        if delete.any():
            state = state.compress(~delete)
        if i % interval == 0:
            rows = (state.ids == selected_id).nonzero()[0]
            if len(rows) == 0:
                break
            x, y = state.positions[rows[0]]
            points.append((float(x), float(y)))
    logger.info(
        "Predicted %d orbit points for body %d in %.3fs",
        len(points),
        selected_id,
        time.perf_counter() - started,
    )
    return points
