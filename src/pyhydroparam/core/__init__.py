"""Core data structures for pyhydroparam."""

from __future__ import annotations

from pyhydroparam.core.exceptions import (
    ConfigurationError,
    GroupDataError,
    MeshError,
    ParameterError,
    PyHydroParamError,
    ValidationError,
)
from pyhydroparam.core.mesh import Mesh, MeshItemType, PropertyVector
from pyhydroparam.core.spatial_position import SpatialPosition

__all__ = [
    # Mesh classes
    "Mesh",
    "MeshItemType",
    "PropertyVector",
    "SpatialPosition",
    # Exceptions
    "PyHydroParamError",
    "MeshError",
    "ValidationError",
    "ConfigurationError",
    "ParameterError",
    "GroupDataError",
]
