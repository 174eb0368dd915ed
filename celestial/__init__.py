"""2D gravitational N-body simulation with merging and orbit prediction."""

from importlib.metadata import PackageNotFoundError, version

from .body import Body, radius_from_mass
from .config import SimulationConfig
from .errors import CelestialError, ConfigurationError, InconsistentStateError
from .physics import do_physics_step
from .prediction import predict_orbit
from .simulation import Drawable, Simulation
from .store import BodyStore
from .analysis import system_energy, total_momentum, total_mass, center_of_mass

try:
    __version__ = version("celestial")
except PackageNotFoundError:
    # Fallback when package metadata is unavailable (e.g. running from source)
    __version__ = "0.0.0"

__all__ = [
    "Body",
    "radius_from_mass",
    "BodyStore",
    "SimulationConfig",
    "Simulation",
    "Drawable",
    "do_physics_step",
    "predict_orbit",
    "system_energy",
    "total_momentum",
    "total_mass",
    "center_of_mass",
    "CelestialError",
    "ConfigurationError",
    "InconsistentStateError",
    "__version__",
]
