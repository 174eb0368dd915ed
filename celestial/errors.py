"""Exceptions raised by the simulation core."""


class CelestialError(Exception):
    """Base class for simulation errors."""


class ConfigurationError(CelestialError, ValueError):
    """Raised when simulation settings are rejected before setup."""


class InconsistentStateError(CelestialError, RuntimeError):
    """Raised when a step result no longer matches the live body store."""
