"""
Mesh classes consumed by the parameter subsystem.

This module provides the minimal mesh data structures parameters are
defined on:

- :class:`MeshItemType`: The kind of mesh item a property is attached to
- :class:`PropertyVector`: Per-item data (e.g. material IDs) stored on a mesh
- :class:`Mesh`: Node coordinates, element connectivity and named properties

All node and element IDs are 0-based.

Example
-------
Create a two-element mesh with a material ID property:

>>> import numpy as np
>>> from pyhydroparam.core.mesh import Mesh, MeshItemType
>>> mesh = Mesh(
...     name="domain",
...     nodes=np.array([[0.0, 0.0], [1.0, 0.0], [2.0, 0.0], [0.0, 1.0], [1.0, 1.0], [2.0, 1.0]]),
...     elements=((0, 1, 4, 3), (1, 2, 5, 4)),
... )
>>> ids = mesh.add_property("MaterialIDs", np.array([0, 1]), MeshItemType.CELL)
>>> print(f"Mesh: {mesh.n_nodes} nodes, {mesh.n_elements} elements")
Mesh: 6 nodes, 2 elements
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyhydroparam.core.exceptions import MeshError


class MeshItemType(Enum):
    """Kind of mesh item a property or parameter is defined over."""

    NODE = "node"
    CELL = "cell"

    @classmethod
    def from_string(cls, value: str) -> MeshItemType:
        """Parse a mesh item type name (case-insensitive)."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise MeshError(f"Unknown mesh item type {value!r}, expected one of: {valid}") from None


@dataclass
class PropertyVector:
    """
    Data attached to every mesh item of one kind.

    Parameters
    ----------
    name : str
        Property name (e.g. ``"MaterialIDs"``).
    mesh_item_type : MeshItemType
        Kind of mesh item each tuple belongs to.
    values : NDArray
        Property data of shape ``(n_items,)`` for scalar properties or
        ``(n_items, n_components)`` for vector properties. The array is
        stored as given, never copied, so changes made through it are
        visible to every parameter referencing this property.

    Examples
    --------
    >>> pv = PropertyVector("MaterialIDs", MeshItemType.CELL, np.array([0, 0, 1]))
    >>> pv.n_items, pv.n_components
    (3, 1)
    >>> int(pv[2])
    1
    """

    name: str
    mesh_item_type: MeshItemType
    values: NDArray

    def __post_init__(self) -> None:
        if not isinstance(self.values, np.ndarray):
            self.values = np.asarray(self.values)
        if self.values.ndim not in (1, 2):
            raise MeshError(
                f"Property '{self.name}': values must be 1D or 2D, got {self.values.ndim}D"
            )

    @property
    def n_items(self) -> int:
        """Return number of mesh items (tuples) in the property."""
        return int(self.values.shape[0])

    @property
    def n_components(self) -> int:
        """Return number of components per tuple."""
        return 1 if self.values.ndim == 1 else int(self.values.shape[1])

    @property
    def dtype(self) -> np.dtype:
        return self.values.dtype

    @property
    def is_integer(self) -> bool:
        """Return True if the property holds integer data."""
        return np.issubdtype(self.values.dtype, np.integer)

    def get_component_values(self, item_id: int) -> NDArray:
        """Return the tuple of the given mesh item as a 1D array."""
        return np.atleast_1d(self.values[item_id])

    def __len__(self) -> int:
        return self.n_items

    def __getitem__(self, item_id: int):
        return self.values[item_id]

    def __repr__(self) -> str:
        return (
            f"PropertyVector(name={self.name!r}, item_type={self.mesh_item_type.value}, "
            f"n_items={self.n_items}, n_components={self.n_components})"
        )


@dataclass
class Mesh:
    """
    A finite element mesh with named properties.

    Parameters
    ----------
    name : str
        Mesh name, used to reference the mesh from parameter configurations.
    nodes : NDArray
        Node coordinates of shape ``(n_nodes, dim)``.
    elements : tuple of tuple of int
        Node indices of each element.
    properties : dict, optional
        Dictionary mapping property name to :class:`PropertyVector`.
    """

    name: str
    nodes: NDArray[np.float64]
    elements: tuple[tuple[int, ...], ...] = ()
    properties: dict[str, PropertyVector] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.nodes = np.asarray(self.nodes, dtype=np.float64)
        if self.nodes.ndim == 1:
            self.nodes = self.nodes.reshape(-1, 1)
        self.elements = tuple(tuple(int(v) for v in elem) for elem in self.elements)

    @property
    def n_nodes(self) -> int:
        """Return number of nodes in the mesh."""
        return int(self.nodes.shape[0])

    @property
    def n_elements(self) -> int:
        """Return number of elements in the mesh."""
        return len(self.elements)

    @property
    def dimension(self) -> int:
        """Return the spatial dimension of the node coordinates."""
        return int(self.nodes.shape[1])

    def n_items(self, item_type: MeshItemType) -> int:
        """Return number of mesh items of the given kind."""
        if item_type is MeshItemType.NODE:
            return self.n_nodes
        return self.n_elements

    def add_property(
        self,
        name: str,
        values: ArrayLike,
        item_type: MeshItemType,
    ) -> PropertyVector:
        """
        Attach a property to the mesh.

        Parameters
        ----------
        name : str
            Property name. An existing property of the same name is replaced.
        values : array_like
            One tuple per mesh item of ``item_type``.
        item_type : MeshItemType
            Kind of mesh item the property is defined on.

        Returns
        -------
        PropertyVector
            The stored property.

        Raises
        ------
        MeshError
            If the number of tuples does not match the number of mesh items.
        """
        prop = PropertyVector(name, item_type, np.asarray(values))
        expected = self.n_items(item_type)
        if prop.n_items != expected:
            raise MeshError(
                f"Property '{name}' has {prop.n_items} tuples but mesh '{self.name}' "
                f"has {expected} {item_type.value} items"
            )
        self.properties[name] = prop
        return prop

    def has_property(self, name: str) -> bool:
        """Return True if a property with this name exists."""
        return name in self.properties

    def get_property_vector(self, name: str, integer: bool | None = None) -> PropertyVector:
        """
        Get a property by name.

        Parameters
        ----------
        name : str
            Property name.
        integer : bool, optional
            If True the property must hold integers, if False floating
            point numbers. None accepts both.

        Raises
        ------
        MeshError
            If the property is missing or has the wrong data type.
        """
        prop = self.properties.get(name)
        if prop is None:
            raise MeshError(f"Property '{name}' not found on mesh '{self.name}'")
        if integer is True and not prop.is_integer:
            raise MeshError(f"Property '{name}' on mesh '{self.name}' is not integer-valued")
        if integer is False and not np.issubdtype(prop.dtype, np.floating):
            raise MeshError(f"Property '{name}' on mesh '{self.name}' is not floating-point")
        return prop

    def validate(self) -> list[str]:
        """
        Check mesh and property consistency.

        Returns
        -------
        list of str
            List of validation error messages (empty if valid).
        """
        errors: list[str] = []

        for i, elem in enumerate(self.elements):
            bad = [v for v in elem if v < 0 or v >= self.n_nodes]
            if bad:
                errors.append(f"Element {i} references invalid nodes: {bad}")

        for name, prop in self.properties.items():
            expected = self.n_items(prop.mesh_item_type)
            if prop.n_items != expected:
                errors.append(
                    f"Property '{name}' has {prop.n_items} tuples, expected {expected}"
                )

        return errors

    def __repr__(self) -> str:
        return (
            f"Mesh(name={self.name!r}, n_nodes={self.n_nodes}, "
            f"n_elements={self.n_elements}, properties={sorted(self.properties)})"
        )
