"""Project file I/O for pyhydroparam."""

from __future__ import annotations

from pyhydroparam.io.project import Project, build_mesh, build_project, load_project, parse_project

__all__ = [
    "Project",
    "load_project",
    "parse_project",
    "build_project",
    "build_mesh",
]
