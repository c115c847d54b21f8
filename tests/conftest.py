"""Pytest configuration and fixtures for pyhydroparam tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np
import pytest

from pyhydroparam.core.mesh import Mesh, MeshItemType


@pytest.fixture
def small_grid_nodes() -> np.ndarray:
    """
    Node coordinates for a 3x2 grid (6 nodes, 0-based).

    Layout:
        3---4---5
        |   |   |
        0---1---2

    Spacing: 1 unit in both x and y directions.
    """
    return np.array(
        [
            [0.0, 0.0],
            [1.0, 0.0],
            [2.0, 0.0],
            [0.0, 1.0],
            [1.0, 1.0],
            [2.0, 1.0],
        ]
    )


@pytest.fixture
def small_grid_elements() -> tuple[tuple[int, ...], ...]:
    """Two quadrilateral elements of the 3x2 grid."""
    return ((0, 1, 4, 3), (1, 2, 5, 4))


@pytest.fixture
def small_mesh(small_grid_nodes: np.ndarray, small_grid_elements: tuple) -> Mesh:
    """3x2 grid with cell material IDs and node/cell double properties."""
    mesh = Mesh(name="domain", nodes=small_grid_nodes, elements=small_grid_elements)
    mesh.add_property("MaterialIDs", np.array([0, 1]), MeshItemType.CELL)
    mesh.add_property("NodeGroups", np.array([0, 0, 1, 1, 2, 2]), MeshItemType.NODE)
    mesh.add_property("porosity", np.array([0.3, 0.25]), MeshItemType.CELL)
    mesh.add_property(
        "displacement",
        np.array([[0.0, 0.0], [0.1, 0.0], [0.2, 0.0], [0.0, 0.1], [0.1, 0.1], [0.2, 0.1]]),
        MeshItemType.NODE,
    )
    return mesh


def make_project_data() -> dict[str, Any]:
    """Project file content with one parameter of every type."""
    return {
        "meshes": [
            {
                "name": "domain",
                "nodes": [[0, 0], [1, 0], [2, 0], [0, 1], [1, 1], [2, 1]],
                "elements": [[0, 1, 4, 3], [1, 2, 5, 4]],
                "properties": {
                    "MaterialIDs": {"item_type": "cell", "dtype": "int", "values": [0, 1]},
                    "NodeGroups": {"item_type": "node", "dtype": "int", "values": [0, 0, 1, 1, 2, 2]},
                    "porosity": {"item_type": "cell", "values": [0.3, 0.25]},
                },
            }
        ],
        "curves": {"ramp": {"coords": [0.0, 10.0], "values": [0.0, 1.0]}},
        "parameters": [
            {"name": "density", "type": "Constant", "value": 1000.0},
            {"name": "gravity", "type": "Constant", "values": [0.0, -9.81]},
            {"name": "phi", "type": "MeshElement", "field_name": "porosity"},
            {
                "name": "K",
                "type": "Group",
                "group_id_property": "MaterialIDs",
                "index_values": [
                    {"index": 0, "value": 1e-5},
                    {"index": 1, "value": 1e-7},
                ],
            },
            {
                "name": "head",
                "type": "Group",
                "group_id_property": "NodeGroups",
                "index_values": [
                    {"index": 0, "values": [1.0, 2.0]},
                    {"index": 2, "values": [5.0, 6.0]},
                ],
            },
            {"name": "ramped_density", "type": "CurveScaled", "curve": "ramp", "parameter": "density"},
        ],
    }


@pytest.fixture
def project_data() -> dict[str, Any]:
    return make_project_data()


@pytest.fixture
def project_file(tmp_path: Path, project_data: dict[str, Any]) -> Path:
    """Write the sample project to a temporary JSON file."""
    path = tmp_path / "project.json"
    path.write_text(json.dumps(project_data, indent=2), encoding="utf-8")
    return path
