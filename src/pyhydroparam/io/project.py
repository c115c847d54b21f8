"""
Project file loading.

Reads a JSON project file (see :mod:`pyhydroparam.config.models` for
the layout), validates it and builds the meshes, curves and parameters
it describes.

Example
-------
>>> from pyhydroparam.io.project import load_project
>>> project = load_project("project.json")
>>> k = project.get_parameter("K")
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import numpy as np
from pydantic import ValidationError as PydanticValidationError

from pyhydroparam.config.models import MeshConfig, ProjectConfig
from pyhydroparam.core.exceptions import ConfigurationError, MeshError, ValidationError
from pyhydroparam.core.mesh import Mesh, MeshItemType
from pyhydroparam.parameters.base import Parameter, ParameterBase, find_parameter
from pyhydroparam.parameters.curve_scaled import PiecewiseLinearInterpolation
from pyhydroparam.parameters.factory import create_parameters

logger = logging.getLogger(__name__)


@dataclass
class Project:
    """
    Meshes, curves and parameters of a simulation project.

    Attributes:
        meshes: Meshes in file order.
        curves: Curves by name.
        parameters: Parameters in file order.
    """

    meshes: list[Mesh] = field(default_factory=list)
    curves: dict[str, PiecewiseLinearInterpolation] = field(default_factory=dict)
    parameters: list[ParameterBase] = field(default_factory=list)

    def get_mesh(self, name: str) -> Mesh:
        """Return the mesh with the given name."""
        for mesh in self.meshes:
            if mesh.name == name:
                return mesh
        raise ConfigurationError(f"Mesh '{name}' not found")

    def get_parameter(self, name: str, n_components: int | None = None) -> Parameter:
        """Return the evaluable parameter with the given name."""
        return find_parameter(name, self.parameters, n_components)


def build_mesh(config: MeshConfig) -> Mesh:
    """
    Build a :class:`Mesh` with its properties from configuration.

    Raises
    ------
    ConfigurationError
        If the node coordinates or a property are malformed.
    ValidationError
        If the built mesh fails :meth:`Mesh.validate`.
    """
    try:
        nodes = np.array(config.nodes, dtype=np.float64)
    except ValueError as e:
        raise ConfigurationError(
            f"Mesh '{config.name}': node coordinates must all have the same dimension"
        ) from e
    mesh = Mesh(name=config.name, nodes=nodes, elements=config.elements)

    for prop_name, prop_config in config.properties.items():
        try:
            values = np.asarray(prop_config.values, dtype=np.float64)
        except ValueError as e:
            raise ConfigurationError(
                f"Mesh '{config.name}': property '{prop_name}' tuples must all have "
                "the same number of components"
            ) from e
        if prop_config.dtype == "int":
            if not np.all(np.equal(np.mod(values, 1), 0)):
                raise ConfigurationError(
                    f"Mesh '{config.name}': property '{prop_name}' has non-integer values"
                )
            values = values.astype(np.int64)
        try:
            mesh.add_property(prop_name, values, MeshItemType.from_string(prop_config.item_type))
        except MeshError as e:
            raise ConfigurationError(str(e)) from e

    errors = mesh.validate()
    if errors:
        raise ValidationError(f"Mesh '{config.name}' is invalid", errors=errors)

    logger.debug("Built %r", mesh)
    return mesh


def build_project(config: ProjectConfig) -> Project:
    """Build all meshes, curves and parameters of a validated configuration."""
    meshes = [build_mesh(m) for m in config.meshes]

    names = [m.name for m in meshes]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise ConfigurationError(f"Duplicate mesh names: {duplicates}")

    curves = {
        name: PiecewiseLinearInterpolation(c.coords, c.values) for name, c in config.curves.items()
    }
    parameters = create_parameters(config.parameters, meshes, curves)

    return Project(meshes=meshes, curves=curves, parameters=parameters)


def parse_project(data: dict[str, Any]) -> ProjectConfig:
    """
    Validate raw project data.

    Raises
    ------
    ConfigurationError
        With one message per validation problem in ``errors``.
    """
    try:
        return ProjectConfig.model_validate(data)
    except PydanticValidationError as e:
        errors = [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        ]
        raise ConfigurationError("Invalid project configuration", errors=errors) from e


def load_project(filepath: Path | str) -> Project:
    """
    Read, validate and build a project file.

    Parameters
    ----------
    filepath : Path or str
        Path to the JSON project file.

    Returns
    -------
    Project
        The built project.

    Raises
    ------
    ConfigurationError
        If the file is missing, is not valid JSON, or describes an
        inconsistent project.
    ValidationError
        If a mesh fails validation.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise ConfigurationError(f"Project file not found: {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {filepath}: {e}") from e

    logger.info("Loading project %s", filepath)
    return build_project(parse_project(data))
