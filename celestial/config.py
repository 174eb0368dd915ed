"""Simulation settings."""

import math
from dataclasses import dataclass, fields
from typing import Optional

from . import constants as C
from .errors import ConfigurationError


@dataclass(frozen=True)
class SimulationConfig:
    sun_mass: float = C.SUN_MASS
    body_count: int = C.NUM_BODIES
    width: float = C.WIDTH
    height: float = C.HEIGHT
    initial_speed: float = C.INITIAL_SPEED
    max_body_mass: float = C.BODY_INITIAL_MASS_MAX
    gravitational_constant: float = C.GRAVITATIONAL_CONSTANT
    time_step: float = C.TIME_STEP
    seed: Optional[int] = None
    selection_tolerance: float = C.SELECTION_TOLERANCE
    prediction_steps: int = C.PREDICTION_STEPS
    prediction_interval: int = C.PREDICTION_INTERVAL
    min_distance: float = C.MIN_DISTANCE
    grow_on_merge: bool = C.GROW_ON_MERGE

    @property
    def world_bounds(self):
        return (self.width, self.height)

    def validate(self):
        """Raise :class:`ConfigurationError` for the first invalid field."""
        if self.body_count <= 0:
            raise ConfigurationError(f"body_count must be positive, got {self.body_count}")
        if not (self.sun_mass > 0 and math.isfinite(self.sun_mass)):
            raise ConfigurationError(f"sun_mass must be positive and finite, got {self.sun_mass}")
        if not (self.max_body_mass > 1 and math.isfinite(self.max_body_mass)):
            raise ConfigurationError(
                f"max_body_mass must be finite and exceed 1, got {self.max_body_mass}"
            )
        if not all(v > 0 and math.isfinite(v) for v in (self.width, self.height)):
            raise ConfigurationError(
                f"world size must be positive, got {self.width}x{self.height}"
            )
        if not (self.initial_speed >= 0 and math.isfinite(self.initial_speed)):
            raise ConfigurationError(
                f"initial_speed must not be negative, got {self.initial_speed}"
            )
        if not math.isfinite(self.gravitational_constant):
            raise ConfigurationError("gravitational_constant must be finite")
        if not self.time_step > 0:
            raise ConfigurationError(f"time_step must be positive, got {self.time_step}")
        if not self.selection_tolerance > 0:
            raise ConfigurationError("selection_tolerance must be positive")
        if self.prediction_steps <= 0 or self.prediction_interval <= 0:
            raise ConfigurationError("prediction steps and interval must be positive")
        if not self.min_distance > 0:
            raise ConfigurationError("min_distance must be positive")
        return self

    @classmethod
    def from_args(cls, args):
        """Build a config from an argparse namespace, skipping unset options."""
        values = {}
        for f in fields(cls):
            value = getattr(args, f.name, None)
            if value is not None:
                values[f.name] = value
        return cls(**values).validate()
