"""The authoritative collection of simulated bodies."""

import logging
import math

import numpy as np

from . import constants as C
from .body import Body
from .errors import ConfigurationError, InconsistentStateError

logger = logging.getLogger(__name__)


class BodyStore:
    """Bodies keyed by id, iterated in insertion order."""

    def __init__(self):
        self._bodies = {}

    def __len__(self):
        return len(self._bodies)

    def __iter__(self):
        return iter(self._bodies.values())

    def __contains__(self, body_id):
        return body_id in self._bodies

    def get(self, body_id):
        return self._bodies.get(body_id)

    # ------------------------------------------------------------------
    def initialize(
        self,
        sun_mass,
        body_count,
        world_bounds,
        initial_speed_range,
        mass_range,
        rng=None,
    ):
        """Replace the contents with one sun and ``body_count`` random bodies.

        Parameters
        ----------
        sun_mass : float
            Mass of the sun placed at the centre of the world.
        body_count : int
            Number of random bodies.
        world_bounds : tuple of float
            ``(width, height)`` of the spawn area.
        initial_speed_range : float
            Each velocity component is drawn from ``[-speed, speed)``.
        mass_range : float
            Masses are drawn from ``[1, mass_range)``.
        rng : numpy.random.Generator, optional
            Source of randomness; a fresh unseeded generator when omitted.
        """
        width, height = world_bounds
        if int(body_count) <= 0:
            raise ConfigurationError(f"body_count must be positive, got {body_count}")
        if not (sun_mass > 0 and math.isfinite(sun_mass)):
            raise ConfigurationError(f"sun_mass must be positive and finite, got {sun_mass}")
        if not (mass_range > 1 and math.isfinite(mass_range)):
            raise ConfigurationError(f"mass_range must be finite and exceed 1, got {mass_range}")
        if not all(v > 0 and math.isfinite(v) for v in (width, height)):
            raise ConfigurationError(f"world bounds must be positive, got {world_bounds}")
        if not (initial_speed_range >= 0 and math.isfinite(initial_speed_range)):
            raise ConfigurationError(
                f"initial_speed_range must not be negative, got {initial_speed_range}"
            )
        if rng is None:
            rng = np.random.default_rng()

        bodies = [
            Body(C.SUN_ID, sun_mass, [width / 2, height / 2], [0.0, 0.0], sun=True)
        ]
        for i in range(int(body_count)):
            x = rng.uniform(0.0, width)
            y = rng.uniform(0.0, height)
            if initial_speed_range == 0:
                vx = vy = 0.0
            else:
                vx = rng.uniform(-initial_speed_range, initial_speed_range)
                vy = rng.uniform(-initial_speed_range, initial_speed_range)
            mass = rng.uniform(1.0, mass_range)
            bodies.append(Body(i, mass, [x, y], [vx, vy]))

        self._bodies = {}
        self.load(bodies)
        logger.info(
            "Initialized %d bodies plus sun (sun mass %.1f, world %sx%s)",
            body_count,
            sun_mass,
            width,
            height,
        )

    def load(self, bodies):
        """Insert a batch of bodies, keeping their ids."""
        incoming = {}
        for body in bodies:
            if body.id in self._bodies or body.id in incoming:
                raise ConfigurationError(f"duplicate body id {body.id}")
            incoming[body.id] = body.copy()
        self._bodies.update(incoming)

    def clear(self):
        self._bodies = {}

    # ------------------------------------------------------------------
    def snapshot(self):
        """Return an immutable tuple of body copies."""
        return tuple(b.copy() for b in self._bodies.values())

    def apply(self, updates, deletions):
        """Write back one step's results.

        ``updates`` maps id to a :class:`Body` carrying the new position,
        velocity, mass and radius. Every live id not in ``deletions`` must be
        present in ``updates``.
        """
        deletions = set(deletions)
        missing = [
            body_id
            for body_id in self._bodies
            if body_id not in deletions and body_id not in updates
        ]
        if missing:
            raise InconsistentStateError(f"no update for live bodies {missing}")

        remaining = {}
        for body_id, body in self._bodies.items():
            if body_id in deletions:
                continue
            new = updates[body_id]
            body.pos = np.array(new.pos, dtype=float)
            body.vel = np.array(new.vel, dtype=float)
            body.mass = float(new.mass)
            body.radius = float(new.radius)
            remaining[body_id] = body
        self._bodies = remaining

    def translate(self, offset):
        """Shift every body by ``offset``."""
        offset = np.asarray(offset, dtype=float)
        for body in self._bodies.values():
            body.pos = body.pos + offset

    # ------------------------------------------------------------------
    def set_selection(self, body_id):
        for key, body in self._bodies.items():
            body.selected = body_id is not None and key == body_id

    def selected_id(self):
        for body in self._bodies.values():
            if body.selected:
                return body.id
        return None

    def find_nearest_within(self, point, max_distance):
        """Return the id of the body whose disc is closest to ``point``.

        The distance to a body is zero inside its disc and the distance to
        its circumference outside. Only distances strictly below
        ``max_distance`` qualify; ties keep insertion order.
        """
        px, py = float(point[0]), float(point[1])
        best_id = None
        best_distance = math.inf
        for body in self._bodies.values():
            centre_distance = math.hypot(px - body.pos[0], py - body.pos[1])
            distance = max(0.0, centre_distance - body.radius)
            if distance < max_distance and distance < best_distance:
                best_id = body.id
                best_distance = distance
        return best_id

