"""Configuration models for pyhydroparam project files."""

from __future__ import annotations

from pyhydroparam.config.models import (
    ConstantParameterConfig,
    CurveConfig,
    CurveScaledParameterConfig,
    GroupParameterConfig,
    IndexValuesConfig,
    MeshConfig,
    MeshElementParameterConfig,
    MeshNodeParameterConfig,
    ParameterConfig,
    ProjectConfig,
    PropertyConfig,
)

__all__ = [
    "ProjectConfig",
    "MeshConfig",
    "PropertyConfig",
    "CurveConfig",
    "ParameterConfig",
    "ConstantParameterConfig",
    "MeshElementParameterConfig",
    "MeshNodeParameterConfig",
    "GroupParameterConfig",
    "IndexValuesConfig",
    "CurveScaledParameterConfig",
]
