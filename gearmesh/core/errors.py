from __future__ import annotations


class GearMeshError(Exception):
    """Base class for all gearmesh failures."""


class ValidationError(GearMeshError, ValueError):
    """Gear parameters or mesh arrays are malformed."""


class CapacityError(GearMeshError, OverflowError):
    """Mesh does not fit the container's index width."""


class ConfigError(GearMeshError):
    """Gear config file is missing or cannot be parsed."""
