"""
Group-based parameters.

A group-based parameter maps each mesh item to an integer group ID
through an integer property vector (typically ``MaterialIDs``), and
returns the values assigned to that group:

    mesh item -> group ID -> value vector

Example
-------
>>> import numpy as np
>>> from pyhydroparam.core.mesh import MeshItemType, PropertyVector
>>> from pyhydroparam.core.spatial_position import SpatialPosition
>>> groups = PropertyVector("MaterialIDs", MeshItemType.CELL, np.array([0, 1, 1]))
>>> k = GroupBasedParameter("K", None, groups, [[1e-5], [1e-7]], MeshItemType.CELL)
>>> k.evaluate(0.0, SpatialPosition(element_id=2))
array([1.e-07])
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np
from numpy.typing import NDArray

from pyhydroparam.core.exceptions import GroupDataError, ParameterError
from pyhydroparam.core.mesh import MeshItemType, PropertyVector
from pyhydroparam.parameters.base import Parameter
from pyhydroparam.parameters.mesh_item import mesh_item_id_getter

if TYPE_CHECKING:
    from pyhydroparam.core.mesh import Mesh
    from pyhydroparam.core.spatial_position import SpatialPosition


class GroupBasedParameter(Parameter):
    """
    A time-independent parameter with one value vector per group.

    Parameters
    ----------
    name : str
        The parameter's name.
    mesh : Mesh or None
        The parameter's domain of definition.
    property_index : PropertyVector
        Integer group ID of every mesh item of ``mesh_item_type``. The
        property is referenced, not copied: it must stay alive as long as
        the parameter, and changes to its values are seen by later
        evaluations.
    vec_values : sequence of sequence of float
        Value vector of each group, indexed by group ID. An empty vector
        marks a group without data.
    mesh_item_type : MeshItemType
        Whether groups are looked up by element ID (``CELL``) or node ID
        (``NODE``) of the evaluation position.

    Raises
    ------
    ParameterError
        If non-empty value vectors differ in length.

    Notes
    -----
    The sizes of the index and value tables are not checked against each
    other; use :meth:`validate` for that. An out-of-range item or group
    ID raises ``IndexError`` at evaluation time.
    """

    def __init__(
        self,
        name: str,
        mesh: Mesh | None,
        property_index: PropertyVector,
        vec_values: Sequence[Sequence[float]],
        mesh_item_type: MeshItemType,
    ) -> None:
        super().__init__(name, mesh)
        self._get_item_id = mesh_item_id_getter(mesh_item_type)
        self._mesh_item_type = mesh_item_type
        self._property_index = property_index
        self._vec_values = tuple(_as_readonly_row(v) for v in vec_values)

        widths = {len(v) for v in self._vec_values if len(v) > 0}
        if len(widths) > 1:
            raise ParameterError(
                f"Parameter '{name}': group values have differing numbers of "
                f"components {sorted(widths)}"
            )

    @property
    def mesh_item_type(self) -> MeshItemType:
        return self._mesh_item_type

    @property
    def property_index(self) -> PropertyVector:
        """Return the referenced group ID property."""
        return self._property_index

    @property
    def n_groups(self) -> int:
        """Return the number of rows in the value table."""
        return len(self._vec_values)

    @property
    def is_time_dependent(self) -> bool:
        return False

    @property
    def n_components(self) -> int:
        if not self._vec_values:
            return 0
        return len(self._vec_values[0])

    def group_values(self, group_id: int) -> NDArray[np.float64]:
        """Return a copy of the value vector of a group (may be empty)."""
        return self._vec_values[group_id].copy()

    def evaluate(self, t: float, position: SpatialPosition) -> NDArray[np.float64]:
        """
        Return the values of the group the position's mesh item belongs to.

        Parameters
        ----------
        t : float
            Ignored, the parameter is time-independent.
        position : SpatialPosition
            Must carry an element ID for ``CELL`` parameters or a node ID
            for ``NODE`` parameters.

        Raises
        ------
        GroupDataError
            If the group has no values assigned.
        """
        item_id = self._get_item_id(position)
        assert item_id is not None, (
            f"Parameter '{self.name}' requires a {self._mesh_item_type.value} ID "
            f"on the spatial position"
        )
        index = int(self._property_index[item_id])
        values = self._vec_values[index]
        if values.size == 0:
            raise GroupDataError(index, self.name)
        return values.copy()

    def validate(self) -> list[str]:
        """
        Check the index table against the value table and the mesh.

        Returns
        -------
        list of str
            List of validation error messages (empty if valid).
        """
        errors: list[str] = []

        if self.mesh is not None:
            expected = self.mesh.n_items(self._mesh_item_type)
            if len(self._property_index) != expected:
                errors.append(
                    f"Group ID property '{self._property_index.name}' has "
                    f"{len(self._property_index)} entries, mesh '{self.mesh.name}' has "
                    f"{expected} {self._mesh_item_type.value} items"
                )

        group_ids = np.unique(np.asarray(self._property_index.values))
        negative = [int(g) for g in group_ids if g < 0]
        if negative:
            errors.append(f"Negative group IDs in '{self._property_index.name}': {negative}")

        missing = [int(g) for g in group_ids if g >= len(self._vec_values)]
        if missing:
            errors.append(f"Group IDs without value rows: {missing}")

        empty = [
            int(g) for g in group_ids if 0 <= g < len(self._vec_values) and self._vec_values[g].size == 0
        ]
        if empty:
            errors.append(f"Group IDs with no data: {empty}")

        if self._vec_values and self._vec_values[0].size == 0:
            errors.append("Value row 0 is empty, the number of components is reported as 0")

        return errors

    def __repr__(self) -> str:
        return (
            f"GroupBasedParameter(name={self.name!r}, item_type={self._mesh_item_type.value}, "
            f"n_groups={self.n_groups}, n_components={self.n_components})"
        )


def _as_readonly_row(values: Sequence[float]) -> NDArray[np.float64]:
    row = np.array(values, dtype=np.float64).reshape(-1)
    row.flags.writeable = False
    return row
