"""
Creation of parameters from configuration.

:func:`create_parameter` dispatches on the ``type`` of a parameter
configuration and builds the matching :class:`Parameter`. Configuration
problems are reported as :class:`ConfigurationError` before any
evaluation takes place.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from pyhydroparam.config.models import (
    ConstantParameterConfig,
    CurveScaledParameterConfig,
    GroupParameterConfig,
    MeshElementParameterConfig,
    MeshNodeParameterConfig,
)
from pyhydroparam.core.exceptions import ConfigurationError, MeshError, ParameterError
from pyhydroparam.core.mesh import MeshItemType
from pyhydroparam.parameters.base import ParameterBase
from pyhydroparam.parameters.constant import ConstantParameter
from pyhydroparam.parameters.curve_scaled import CurveScaledParameter, PiecewiseLinearInterpolation
from pyhydroparam.parameters.group_based import GroupBasedParameter
from pyhydroparam.parameters.mesh_property import MeshElementParameter, MeshNodeParameter

if TYPE_CHECKING:
    from pyhydroparam.config.models import ParameterConfig
    from pyhydroparam.core.mesh import Mesh

logger = logging.getLogger(__name__)


def create_group_based_parameter(
    name: str,
    config: GroupParameterConfig,
    mesh: Mesh,
) -> GroupBasedParameter:
    """
    Create a :class:`GroupBasedParameter` from its configuration.

    Parameters
    ----------
    name : str
        Parameter name.
    config : GroupParameterConfig
        Names the integer group ID property on ``mesh`` and lists the
        values of each group index.
    mesh : Mesh
        Mesh carrying the group ID property.

    Returns
    -------
    GroupBasedParameter
        Parameter defined over the mesh item type of the property. Group
        indices not listed in the configuration get an empty value row.

    Raises
    ------
    ConfigurationError
        If the property is missing or not integer-valued, or an index is
        given more than once.
    """
    try:
        group_id_property = mesh.get_property_vector(config.group_id_property, integer=True)
    except MeshError as e:
        raise ConfigurationError(f"Parameter '{name}': {e}") from e

    if group_id_property.n_components != 1:
        raise ConfigurationError(
            f"Parameter '{name}': group ID property '{config.group_id_property}' "
            f"must have one component, got {group_id_property.n_components}"
        )

    index_values: dict[int, list[float]] = {}
    for entry in config.index_values:
        if entry.index in index_values:
            raise ConfigurationError(f"Parameter '{name}': index {entry.index} is given more than once")
        index_values[entry.index] = entry.get_values()

    max_index = max(index_values)
    vec_values: list[list[float]] = [[] for _ in range(max_index + 1)]
    for index, values in index_values.items():
        vec_values[index] = values

    param = GroupBasedParameter(
        name,
        mesh,
        group_id_property,
        vec_values,
        group_id_property.mesh_item_type,
    )

    for problem in param.validate():
        logger.warning("Parameter '%s': %s", name, problem)

    logger.debug(
        "Created group based parameter '%s' over %s property '%s' with %d groups",
        name,
        group_id_property.mesh_item_type.value,
        group_id_property.name,
        param.n_groups,
    )
    return param


def create_parameter(
    config: ParameterConfig,
    meshes: Sequence[Mesh],
    curves: dict[str, PiecewiseLinearInterpolation] | None = None,
) -> ParameterBase:
    """
    Create a parameter from its configuration.

    Parameters
    ----------
    config : ParameterConfig
        Any of the parameter configuration models.
    meshes : sequence of Mesh
        Available meshes. The parameter is defined on the mesh named in
        its configuration, or on the first mesh.
    curves : dict, optional
        Available curves by name, used by curve-scaled parameters.

    Raises
    ------
    ConfigurationError
        If the configuration references unknown meshes, properties or
        curves.
    """
    curves = curves or {}
    mesh = _find_mesh(config.name, config.mesh, meshes)

    if isinstance(config, ConstantParameterConfig):
        param: ParameterBase = ConstantParameter(config.name, config.get_values(), mesh)
    elif isinstance(config, MeshElementParameterConfig):
        param = MeshElementParameter(
            config.name, mesh, _get_field(config.name, mesh, config.field_name, MeshItemType.CELL)
        )
    elif isinstance(config, MeshNodeParameterConfig):
        param = MeshNodeParameter(
            config.name, mesh, _get_field(config.name, mesh, config.field_name, MeshItemType.NODE)
        )
    elif isinstance(config, GroupParameterConfig):
        if mesh is None:
            raise ConfigurationError(f"Parameter '{config.name}': a mesh is required")
        return create_group_based_parameter(config.name, config, mesh)
    elif isinstance(config, CurveScaledParameterConfig):
        curve = curves.get(config.curve)
        if curve is None:
            raise ConfigurationError(f"Parameter '{config.name}': curve '{config.curve}' not found")
        param = CurveScaledParameter(config.name, curve, config.parameter, mesh)
    else:
        raise ConfigurationError(f"Unknown parameter configuration {type(config).__name__}")

    logger.debug("Created %s '%s'", type(param).__name__, param.name)
    return param


def create_parameters(
    configs: Sequence[ParameterConfig],
    meshes: Sequence[Mesh],
    curves: dict[str, PiecewiseLinearInterpolation] | None = None,
) -> list[ParameterBase]:
    """
    Create all parameters of a project and resolve references between them.

    Raises
    ------
    ConfigurationError
        If two parameters share a name, or any single parameter cannot be
        created.
    ParameterError
        If a curve-scaled parameter references an unknown parameter, or
        references between curve-scaled parameters form a cycle.
    """
    parameters: list[ParameterBase] = []
    names: set[str] = set()
    for config in configs:
        if config.name in names:
            raise ConfigurationError(f"Parameter name '{config.name}' is used more than once")
        names.add(config.name)
        parameters.append(create_parameter(config, meshes, curves))

    for param in parameters:
        param.initialize(parameters)
    _check_reference_cycles(parameters)

    logger.info("Created %d parameters", len(parameters))
    return parameters


def _check_reference_cycles(parameters: Sequence[ParameterBase]) -> None:
    by_name = {p.name: p for p in parameters}
    for param in parameters:
        chain = [param.name]
        current = param
        while isinstance(current, CurveScaledParameter):
            current = by_name.get(current.referenced_parameter_name)
            if current is None:
                break
            if current.name in chain:
                raise ParameterError(
                    f"Parameter '{param.name}' has cyclic references: "
                    f"{' -> '.join(chain + [current.name])}"
                )
            chain.append(current.name)


def _find_mesh(param_name: str, mesh_name: str | None, meshes: Sequence[Mesh]) -> Mesh | None:
    if mesh_name is None:
        return meshes[0] if meshes else None
    for mesh in meshes:
        if mesh.name == mesh_name:
            return mesh
    raise ConfigurationError(f"Parameter '{param_name}': mesh '{mesh_name}' not found")


def _get_field(param_name: str, mesh: Mesh | None, field_name: str, item_type: MeshItemType):
    if mesh is None:
        raise ConfigurationError(f"Parameter '{param_name}': a mesh is required")
    try:
        prop = mesh.get_property_vector(field_name)
    except MeshError as e:
        raise ConfigurationError(f"Parameter '{param_name}': {e}") from e
    if prop.mesh_item_type is not item_type:
        raise ConfigurationError(
            f"Parameter '{param_name}': property '{field_name}' is a "
            f"{prop.mesh_item_type.value} property, expected {item_type.value}"
        )
    return prop
