"""
Configuration models for project files.

A project file is a JSON document describing meshes, time curves and
parameters:

```json
{
  "meshes": [
    {
      "name": "domain",
      "nodes": [[0, 0], [1, 0], [1, 1], [0, 1]],
      "elements": [[0, 1, 2, 3]],
      "properties": {
        "MaterialIDs": {"item_type": "cell", "dtype": "int", "values": [0]}
      }
    }
  ],
  "curves": {"ramp": {"coords": [0, 10], "values": [0, 1]}},
  "parameters": [
    {
      "name": "K",
      "type": "Group",
      "group_id_property": "MaterialIDs",
      "index_values": [{"index": 0, "value": 1e-5}]
    }
  ]
}
```
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, model_validator


class PropertyConfig(BaseModel):
    """A property vector attached to a mesh."""

    item_type: Literal["cell", "node"] = Field(description="Mesh item kind")
    dtype: Literal["int", "double"] = Field(default="double", description="Value type")
    values: list[float] | list[list[float]] = Field(description="One tuple per mesh item")

    model_config = {"extra": "forbid"}


class MeshConfig(BaseModel):
    """An inline mesh description."""

    name: str = Field(min_length=1, description="Mesh name")
    nodes: list[list[float]] = Field(description="Node coordinates")
    elements: list[list[Annotated[int, Field(ge=0)]]] = Field(
        default_factory=list, description="Node indices of each element"
    )
    properties: dict[str, PropertyConfig] = Field(default_factory=dict)

    model_config = {"extra": "forbid"}


class CurveConfig(BaseModel):
    """A piecewise linear curve."""

    coords: list[float] = Field(min_length=1)
    values: list[float] = Field(min_length=1)

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def check_lengths(self) -> CurveConfig:
        if len(self.coords) != len(self.values):
            raise ValueError(
                f"coords ({len(self.coords)}) and values ({len(self.values)}) differ in length"
            )
        return self


class _ParameterConfigBase(BaseModel):
    name: str = Field(min_length=1, description="Parameter name")
    mesh: str | None = Field(default=None, description="Mesh name, default is the first mesh")

    model_config = {"extra": "forbid"}


class ConstantParameterConfig(_ParameterConfigBase):
    type: Literal["Constant"] = "Constant"
    value: float | None = None
    values: list[float] | None = None

    @model_validator(mode="after")
    def check_value(self) -> ConstantParameterConfig:
        if (self.value is None) == (self.values is None):
            raise ValueError("exactly one of 'value' or 'values' must be given")
        if self.values is not None and not self.values:
            raise ValueError("'values' must not be empty")
        return self

    def get_values(self) -> list[float]:
        return [self.value] if self.value is not None else list(self.values or [])


class MeshElementParameterConfig(_ParameterConfigBase):
    type: Literal["MeshElement"] = "MeshElement"
    field_name: str = Field(min_length=1, description="Cell property name")


class MeshNodeParameterConfig(_ParameterConfigBase):
    type: Literal["MeshNode"] = "MeshNode"
    field_name: str = Field(min_length=1, description="Node property name")


class IndexValuesConfig(BaseModel):
    """Values assigned to one group index."""

    index: int = Field(ge=0, description="Group index")
    value: float | None = None
    values: list[float] | None = None

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def check_value(self) -> IndexValuesConfig:
        if (self.value is None) == (self.values is None):
            raise ValueError(f"index {self.index}: exactly one of 'value' or 'values' must be given")
        if self.values is not None and not self.values:
            raise ValueError(f"index {self.index}: 'values' must not be empty")
        return self

    def get_values(self) -> list[float]:
        return [self.value] if self.value is not None else list(self.values or [])


class GroupParameterConfig(_ParameterConfigBase):
    type: Literal["Group"] = "Group"
    group_id_property: str = Field(min_length=1, description="Integer property with group IDs")
    index_values: list[IndexValuesConfig] = Field(min_length=1)


class CurveScaledParameterConfig(_ParameterConfigBase):
    type: Literal["CurveScaled"] = "CurveScaled"
    curve: str = Field(min_length=1, description="Name of the scaling curve")
    parameter: str = Field(min_length=1, description="Name of the scaled parameter")


ParameterConfig = Annotated[
    Union[
        ConstantParameterConfig,
        MeshElementParameterConfig,
        MeshNodeParameterConfig,
        GroupParameterConfig,
        CurveScaledParameterConfig,
    ],
    Field(discriminator="type"),
]


class ProjectConfig(BaseModel):
    """Top-level project file."""

    meshes: list[MeshConfig] = Field(default_factory=list)
    curves: dict[str, CurveConfig] = Field(default_factory=dict)
    parameters: list[ParameterConfig] = Field(default_factory=list)

    model_config = {"extra": "forbid"}
