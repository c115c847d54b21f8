"""
pyhydroparam - Spatially and temporally varying parameters for
finite element simulations of geotechnical and hydrological processes.

This package provides tools for:
- Evaluating material properties, boundary values and source terms at
  any mesh item and time
- Group-based (material ID) parameters, mesh property parameters,
  constants and curve-scaled parameters
- Building parameters from JSON project files
"""

from __future__ import annotations

__version__ = "0.1.0"

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
from pyhydroparam.io.project import Project, load_project
from pyhydroparam.parameters import (
    ConstantParameter,
    CurveScaledParameter,
    GroupBasedParameter,
    MeshElementParameter,
    MeshNodeParameter,
    Parameter,
    ParameterBase,
    PiecewiseLinearInterpolation,
    create_parameter,
    create_parameters,
    find_parameter,
)

__all__ = [
    "__version__",
    # Mesh classes
    "Mesh",
    "MeshItemType",
    "PropertyVector",
    "SpatialPosition",
    # Parameters
    "ParameterBase",
    "Parameter",
    "ConstantParameter",
    "GroupBasedParameter",
    "MeshElementParameter",
    "MeshNodeParameter",
    "CurveScaledParameter",
    "PiecewiseLinearInterpolation",
    "create_parameter",
    "create_parameters",
    "find_parameter",
    # Projects
    "Project",
    "load_project",
    # Exceptions
    "PyHydroParamError",
    "MeshError",
    "ValidationError",
    "ConfigurationError",
    "ParameterError",
    "GroupDataError",
]
