"""Custom exceptions for pyhydroparam package."""

from __future__ import annotations


class PyHydroParamError(Exception):
    """Base exception for all pyhydroparam errors."""

    pass


class MeshError(PyHydroParamError):
    """Error related to mesh or property vector operations."""

    pass


class ValidationError(PyHydroParamError):
    """Error raised when validation fails."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ConfigurationError(PyHydroParamError):
    """Error raised when configuration data is malformed or missing."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ParameterError(PyHydroParamError):
    """Error related to parameter lookup or parameter consistency."""

    pass


class GroupDataError(ConfigurationError):
    """Error raised when a group referenced by the mesh has no values."""

    def __init__(self, group_index: int, parameter_name: str = "") -> None:
        message = f"No data found for the group index {group_index}"
        if parameter_name:
            message += f" of parameter '{parameter_name}'"
        super().__init__(message)
        self.group_index = group_index
        self.parameter_name = parameter_name
