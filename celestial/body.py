"""Body record shared by the store, the physics step and the renderer.

A :class:`Body` stores its position and velocity as 2-D ``float64`` vectors.
The physics step never mutates the bodies it is handed; it works on copies
and the :class:`~celestial.store.BodyStore` copies results back in.
"""
import numpy as np

from . import constants as C


def radius_from_mass(mass):
    """Return the radius of a uniform-density sphere of ``mass``."""
    return float(np.cbrt(mass / C.DENSITY_VOLUME_FACTOR))


def _as_vector(values):
    v = np.asarray(values, dtype=float).reshape(-1)
    if v.size < 2:
        v = np.pad(v, (0, 2 - v.size))
    return v[:2].copy()


class Body:
    """A circular mass point."""

    __slots__ = ("id", "pos", "vel", "mass", "radius", "sun", "selected")

    def __init__(
        self,
        body_id: int,
        mass,
        pos,
        vel,
        radius=None,
        sun: bool = False,
        selected: bool = False,
    ):
        """Create a body.

        Parameters
        ----------
        body_id : int
            Identity of the body inside its store.
        mass : float
            Positive mass in simulation units.
        pos, vel : array-like
            Position and velocity. Shorter inputs are padded with zeros.
        radius : float, optional
            Defaults to :func:`radius_from_mass` of ``mass``.
        sun : bool, optional
            Sun bodies do not accelerate under gravity.
        """
        self.id = int(body_id)
        self.mass = float(mass)
        self.pos = _as_vector(pos)
        self.vel = _as_vector(vel)
        self.radius = radius_from_mass(self.mass) if radius is None else float(radius)
        self.sun = bool(sun)
        self.selected = bool(selected)

    def copy(self):
        """Return an independent copy of this body."""
        return Body(
            self.id,
            self.mass,
            self.pos,
            self.vel,
            radius=self.radius,
            sun=self.sun,
            selected=self.selected,
        )

    def __repr__(self):
        return (
            f"Body(id={self.id}, mass={self.mass}, pos={self.pos.tolist()}, "
            f"vel={self.vel.tolist()}, radius={self.radius}, sun={self.sun}, "
            f"selected={self.selected})"
        )
