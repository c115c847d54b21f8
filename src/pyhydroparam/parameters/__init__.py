"""Spatially and temporally varying parameters."""

from __future__ import annotations

from pyhydroparam.parameters.base import Parameter, ParameterBase, find_parameter
from pyhydroparam.parameters.constant import ConstantParameter
from pyhydroparam.parameters.curve_scaled import CurveScaledParameter, PiecewiseLinearInterpolation
from pyhydroparam.parameters.factory import (
    create_group_based_parameter,
    create_parameter,
    create_parameters,
)
from pyhydroparam.parameters.group_based import GroupBasedParameter
from pyhydroparam.parameters.mesh_item import get_mesh_item_id, mesh_item_id_getter
from pyhydroparam.parameters.mesh_property import MeshElementParameter, MeshNodeParameter

__all__ = [
    # Base classes
    "ParameterBase",
    "Parameter",
    "find_parameter",
    # Parameter types
    "ConstantParameter",
    "GroupBasedParameter",
    "MeshElementParameter",
    "MeshNodeParameter",
    "CurveScaledParameter",
    "PiecewiseLinearInterpolation",
    # Mesh item selection
    "mesh_item_id_getter",
    "get_mesh_item_id",
    # Factory
    "create_parameter",
    "create_parameters",
    "create_group_based_parameter",
]
