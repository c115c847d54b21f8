"""Abstract base classes for parameters.

A parameter is a named, possibly vector-valued coefficient that can be
evaluated at any time and spatial position. All storage strategies
(constant values, per-group values, mesh properties, curve scaling)
share the interface defined by :class:`Parameter`, so process code can
query coefficients without knowing how they are stored.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable

import numpy as np
from numpy.typing import NDArray

from pyhydroparam.core.exceptions import ParameterError

if TYPE_CHECKING:
    from pyhydroparam.core.mesh import Mesh
    from pyhydroparam.core.spatial_position import SpatialPosition


class ParameterBase(ABC):
    """Name and domain of definition shared by all parameters.

    Parameters
    ----------
    name : str
        Parameter name, unique within a project.
    mesh : Mesh, optional
        Mesh the parameter is defined on. Only kept for bookkeeping;
        values are never computed from it.
    """

    def __init__(self, name: str, mesh: Mesh | None = None) -> None:
        self.name = name
        self.mesh = mesh

    def initialize(self, parameters: list[ParameterBase]) -> None:
        """Resolve references to other parameters.

        Called once after all parameters of a project are created. The
        default implementation does nothing.
        """


class Parameter(ParameterBase):
    """Abstract base class for evaluable parameters.

    Every parameter must implement:

    * :attr:`is_time_dependent` -- whether values may change with time.
    * :attr:`n_components` -- length of the vector returned by
      :meth:`evaluate`.
    * :meth:`evaluate` -- the value at a time and spatial position.
    """

    @property
    @abstractmethod
    def is_time_dependent(self) -> bool:
        """Return True if the parameter value depends on time."""
        ...

    @property
    @abstractmethod
    def n_components(self) -> int:
        """Return the number of components of the parameter value."""
        ...

    @abstractmethod
    def evaluate(self, t: float, position: SpatialPosition) -> NDArray[np.float64]:
        """Return the parameter value at time ``t`` and ``position``.

        The returned array is owned by the caller.
        """
        ...

    def __call__(self, t: float, position: SpatialPosition) -> NDArray[np.float64]:
        return self.evaluate(t, position)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, n_components={self.n_components})"


def find_parameter(
    name: str,
    parameters: Iterable[ParameterBase],
    n_components: int | None = None,
) -> Parameter:
    """
    Find an evaluable parameter by name.

    Parameters
    ----------
    name : str
        Name of the parameter.
    parameters : iterable of ParameterBase
        Parameters to search.
    n_components : int, optional
        Required number of components. Not checked if None.

    Returns
    -------
    Parameter
        The first parameter with a matching name.

    Raises
    ------
    ParameterError
        If no such parameter exists, it cannot be evaluated, or its
        number of components differs from ``n_components``.
    """
    for param in parameters:
        if param.name != name:
            continue
        if not isinstance(param, Parameter):
            raise ParameterError(f"Parameter '{name}' cannot be evaluated")
        if n_components is not None and param.n_components != n_components:
            raise ParameterError(
                f"Parameter '{name}' has {param.n_components} components, "
                f"{n_components} are required"
            )
        return param

    raise ParameterError(f"Could not find parameter '{name}'")
