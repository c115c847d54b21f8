"""
Time-dependent parameters scaled by a curve.

:class:`CurveScaledParameter` multiplies another parameter by the value
of a piecewise linear curve at the evaluation time, e.g. a boundary
value ramped up during the first days of a simulation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np
from numpy.typing import NDArray

from pyhydroparam.core.exceptions import ConfigurationError, ParameterError
from pyhydroparam.parameters.base import Parameter, ParameterBase, find_parameter

if TYPE_CHECKING:
    from pyhydroparam.core.mesh import Mesh
    from pyhydroparam.core.spatial_position import SpatialPosition


class PiecewiseLinearInterpolation:
    """
    Linear interpolation between support points.

    Values outside the range of ``coords`` are clamped to the first or
    last support value.

    Parameters
    ----------
    coords : sequence of float
        Strictly increasing abscissae.
    values : sequence of float
        Ordinates, same length as ``coords``.

    Examples
    --------
    >>> curve = PiecewiseLinearInterpolation([0.0, 10.0], [0.0, 1.0])
    >>> curve.value_at(2.5)
    0.25
    >>> curve.value_at(20.0)
    1.0
    """

    def __init__(self, coords: Sequence[float], values: Sequence[float]) -> None:
        self._coords = np.asarray(coords, dtype=np.float64)
        self._values = np.asarray(values, dtype=np.float64)

        if self._coords.ndim != 1 or self._coords.size == 0:
            raise ConfigurationError("Curve needs at least one support point")
        if self._coords.shape != self._values.shape:
            raise ConfigurationError(
                f"Curve has {self._coords.size} coordinates but {self._values.size} values"
            )
        if np.any(np.diff(self._coords) <= 0.0):
            raise ConfigurationError("Curve coordinates must be strictly increasing")

    @property
    def coords(self) -> NDArray[np.float64]:
        return self._coords

    @property
    def values(self) -> NDArray[np.float64]:
        return self._values

    @property
    def supremum(self) -> float:
        return float(self._coords[-1])

    @property
    def infimum(self) -> float:
        return float(self._coords[0])

    def value_at(self, x: float) -> float:
        """Return the interpolated value at ``x``."""
        return float(np.interp(x, self._coords, self._values))

    def __repr__(self) -> str:
        return (
            f"PiecewiseLinearInterpolation(n_points={self._coords.size}, "
            f"range=({self.infimum}, {self.supremum}))"
        )


class CurveScaledParameter(Parameter):
    """
    A parameter multiplied by a time curve.

    Parameters
    ----------
    name : str
        The parameter's name.
    curve : PiecewiseLinearInterpolation
        Scaling factor as a function of time.
    referenced_parameter_name : str
        Name of the parameter being scaled. It is resolved by
        :meth:`initialize`.
    mesh : Mesh, optional
        The parameter's domain of definition.
    """

    def __init__(
        self,
        name: str,
        curve: PiecewiseLinearInterpolation,
        referenced_parameter_name: str,
        mesh: Mesh | None = None,
    ) -> None:
        super().__init__(name, mesh)
        self._curve = curve
        self._referenced_parameter_name = referenced_parameter_name
        self._parameter: Parameter | None = None

    @property
    def referenced_parameter_name(self) -> str:
        return self._referenced_parameter_name

    @property
    def is_time_dependent(self) -> bool:
        return True

    @property
    def n_components(self) -> int:
        if self._parameter is None:
            return 0
        return self._parameter.n_components

    def initialize(self, parameters: list[ParameterBase]) -> None:
        if self._referenced_parameter_name == self.name:
            raise ParameterError(f"Parameter '{self.name}' cannot scale itself")
        self._parameter = find_parameter(self._referenced_parameter_name, parameters)

    def evaluate(self, t: float, position: SpatialPosition) -> NDArray[np.float64]:
        if self._parameter is None:
            raise ParameterError(
                f"Parameter '{self.name}' is not initialized; "
                f"'{self._referenced_parameter_name}' has not been resolved"
            )
        return self._curve.value_at(t) * self._parameter.evaluate(t, position)
