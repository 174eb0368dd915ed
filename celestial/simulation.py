"""Simulation core driven by a host loop."""

import logging
from typing import NamedTuple

import numpy as np

from .config import SimulationConfig
from .physics import do_physics_step
from .prediction import predict_orbit
from .store import BodyStore

logger = logging.getLogger(__name__)


class Drawable(NamedTuple):
    position: tuple
    radius: float
    sun: bool
    select_marker: bool


class Simulation:
    """Bodies, pause state and the cached orbit prediction."""

    def __init__(self, config: SimulationConfig = None, store: BodyStore = None):
        self.config = (config or SimulationConfig()).validate()
        self.store = store if store is not None else BodyStore()
        self._paused = False
        self.predicted_orbit = None

    # ------------------------------------------------------------------
    def initialize(self, config: SimulationConfig = None) -> None:
        """Populate the store with a sun and random bodies.

        The new config is only adopted once it has been validated, so a
        rejected config leaves the previous state in place.
        """
        config = (config or self.config).validate()
        rng = np.random.default_rng(config.seed)
        self.store.initialize(
            config.sun_mass,
            config.body_count,
            config.world_bounds,
            config.initial_speed,
            config.max_body_mass,
            rng=rng,
        )
        self.config = config
        self.predicted_orbit = None

    @property
    def paused(self) -> bool:
        return self._paused

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        if self._paused:
            self.predicted_orbit = None
        self._paused = False

    def toggle_pause(self) -> None:
        if self._paused:
            self.resume()
        else:
            self.pause()

    # ------------------------------------------------------------------
    def tick(self, dt=None, camera_offset=None) -> None:
        """Advance the simulation by ``dt``.

        While paused no physics runs; the first paused tick computes the
        orbit prediction for the selected body instead. ``camera_offset`` is
        added to every position after the physics step.
        """
        cfg = self.config
        dt = cfg.time_step if dt is None else dt
        if self._paused:
            if self.predicted_orbit is None:
                self.predicted_orbit = predict_orbit(
                    self.store.snapshot(),
                    dt,
                    cfg.gravitational_constant,
                    cfg.prediction_steps,
                    cfg.prediction_interval,
                    cfg.min_distance,
                    cfg.grow_on_merge,
                )
            return

        updates, deletions = do_physics_step(
            self.store.snapshot(),
            dt,
            cfg.gravitational_constant,
            cfg.min_distance,
            cfg.grow_on_merge,
        )
        self.store.apply(updates, deletions)
        if camera_offset is not None:
            self.store.translate(camera_offset)

    def click(self, point) -> None:
        """Select the body under ``point`` or clear the selection."""
        self.predicted_orbit = None
        body_id = self.store.find_nearest_within(point, self.config.selection_tolerance)
        self.store.set_selection(body_id)
        logger.debug("Click at %s selected %s", tuple(point), body_id)

    def render_snapshot(self):
        """Return ``(drawables, orbit_points)`` for the current frame."""
        drawables = []
        markers = []
        for body in self.store:
            position = (float(body.pos[0]), float(body.pos[1]))
            drawables.append(Drawable(position, body.radius, body.sun, False))
            if body.selected:
                markers.append(Drawable(position, body.radius, False, True))
        return drawables + markers, list(self.predicted_orbit or [])
