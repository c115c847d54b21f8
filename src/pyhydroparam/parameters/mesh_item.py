"""Selection of the mesh item ID a parameter is indexed by."""

from __future__ import annotations

from operator import attrgetter
from typing import Callable

from pyhydroparam.core.exceptions import ConfigurationError
from pyhydroparam.core.mesh import MeshItemType
from pyhydroparam.core.spatial_position import SpatialPosition

MeshItemIdGetter = Callable[[SpatialPosition], "int | None"]

_GETTERS: dict[MeshItemType, MeshItemIdGetter] = {
    MeshItemType.CELL: attrgetter("element_id"),
    MeshItemType.NODE: attrgetter("node_id"),
}


def mesh_item_id_getter(item_type: MeshItemType) -> MeshItemIdGetter:
    """
    Return the function extracting the mesh item ID from a position.

    Parameters
    ----------
    item_type : MeshItemType
        ``CELL`` selects ``position.element_id``, ``NODE`` selects
        ``position.node_id``.

    Raises
    ------
    ConfigurationError
        If parameters cannot be defined over ``item_type``.
    """
    try:
        return _GETTERS[item_type]
    except KeyError:
        raise ConfigurationError(
            f"Mesh item type {item_type!r} is not supported for parameters"
        ) from None


def get_mesh_item_id(position: SpatialPosition, item_type: MeshItemType) -> int | None:
    """Return the node or element ID of ``position`` depending on ``item_type``."""
    return mesh_item_id_getter(item_type)(position)
