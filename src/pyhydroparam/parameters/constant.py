"""Constant parameters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np
from numpy.typing import NDArray

from pyhydroparam.core.exceptions import ParameterError
from pyhydroparam.parameters.base import Parameter

if TYPE_CHECKING:
    from pyhydroparam.core.mesh import Mesh
    from pyhydroparam.core.spatial_position import SpatialPosition


class ConstantParameter(Parameter):
    """A parameter with the same value everywhere and at all times.

    Parameters
    ----------
    name : str
        The parameter's name.
    values : float or sequence of float
        The scalar value or the value vector.
    mesh : Mesh, optional
        The parameter's domain of definition.
    """

    def __init__(
        self,
        name: str,
        values: float | Sequence[float],
        mesh: Mesh | None = None,
    ) -> None:
        super().__init__(name, mesh)
        self._values = np.atleast_1d(np.array(values, dtype=np.float64)).reshape(-1)
        if self._values.size == 0:
            raise ParameterError(f"Constant parameter '{name}' has no values")
        self._values.flags.writeable = False

    @property
    def is_time_dependent(self) -> bool:
        return False

    @property
    def n_components(self) -> int:
        return int(self._values.size)

    def evaluate(self, t: float, position: SpatialPosition) -> NDArray[np.float64]:
        return self._values.copy()
