"""Parameters reading their values directly from mesh properties."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pyhydroparam.core.mesh import MeshItemType, PropertyVector
from pyhydroparam.parameters.base import Parameter
from pyhydroparam.parameters.mesh_item import mesh_item_id_getter

if TYPE_CHECKING:
    from pyhydroparam.core.mesh import Mesh
    from pyhydroparam.core.spatial_position import SpatialPosition


class _MeshPropertyParameter(Parameter):
    """Per-item values taken from a property vector, held by reference."""

    _item_type: MeshItemType

    def __init__(self, name: str, mesh: Mesh | None, prop: PropertyVector) -> None:
        super().__init__(name, mesh)
        self._property = prop
        self._get_item_id = mesh_item_id_getter(self._item_type)

    @property
    def property_vector(self) -> PropertyVector:
        return self._property

    @property
    def is_time_dependent(self) -> bool:
        return False

    @property
    def n_components(self) -> int:
        return self._property.n_components

    def evaluate(self, t: float, position: SpatialPosition) -> NDArray[np.float64]:
        item_id = self._get_item_id(position)
        assert item_id is not None, (
            f"Parameter '{self.name}' requires a {self._item_type.value} ID on the spatial position"
        )
        return np.array(self._property.get_component_values(item_id), dtype=np.float64)


class MeshElementParameter(_MeshPropertyParameter):
    """A parameter defined by a cell property, looked up by element ID."""

    _item_type = MeshItemType.CELL


class MeshNodeParameter(_MeshPropertyParameter):
    """A parameter defined by a node property, looked up by node ID."""

    _item_type = MeshItemType.NODE
