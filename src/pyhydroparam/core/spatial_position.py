"""Evaluation context for spatially varying parameters."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray


@dataclass
class SpatialPosition:
    """
    Where a parameter is evaluated.

    Any combination of the fields may be set. Parameters read only the
    field they need, e.g. cell-based parameters read ``element_id``.
    A position is mutable and meant to be owned by a single caller, which
    updates it while iterating over elements and integration points.

    Attributes:
        node_id: 0-based node ID, or None if unknown.
        element_id: 0-based element ID, or None if unknown.
        integration_point: Integration point index within the element.
        coordinates: Cartesian coordinates of the point.
    """

    node_id: int | None = None
    element_id: int | None = None
    integration_point: int | None = None
    coordinates: NDArray[np.float64] | None = None

    def set_node_id(self, node_id: int) -> None:
        self.node_id = node_id

    def set_element_id(self, element_id: int) -> None:
        self.element_id = element_id

    def set_integration_point(self, integration_point: int) -> None:
        self.integration_point = integration_point

    def set_coordinates(self, coordinates: ArrayLike) -> None:
        self.coordinates = np.asarray(coordinates, dtype=np.float64)

    def set_all(
        self,
        node_id: int | None,
        element_id: int | None,
        integration_point: int | None = None,
        coordinates: ArrayLike | None = None,
    ) -> None:
        """Overwrite every field at once; None clears a field."""
        self.node_id = node_id
        self.element_id = element_id
        self.integration_point = integration_point
        self.coordinates = None if coordinates is None else np.asarray(coordinates, dtype=np.float64)

    def clear(self) -> None:
        """Reset the position to the unknown state."""
        self.set_all(None, None)

    def __repr__(self) -> str:
        parts = []
        if self.node_id is not None:
            parts.append(f"node_id={self.node_id}")
        if self.element_id is not None:
            parts.append(f"element_id={self.element_id}")
        if self.integration_point is not None:
            parts.append(f"integration_point={self.integration_point}")
        if self.coordinates is not None:
            parts.append(f"coordinates={self.coordinates.tolist()}")
        return f"SpatialPosition({', '.join(parts)})"
