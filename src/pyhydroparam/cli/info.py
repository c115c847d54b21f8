"""
``pyhydroparam info`` subcommand.

Lists the meshes, properties and parameters of a project file.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from pyhydroparam.core.exceptions import PyHydroParamError
from pyhydroparam.parameters.base import Parameter


def add_info_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``info`` subcommand."""
    p = subparsers.add_parser(
        "info",
        help="List meshes, properties and parameters of a project.",
        description="Load a project file and print a summary of its contents.",
    )
    p.add_argument("project", type=Path, help="Path to the JSON project file")
    p.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    p.set_defaults(func=run_info)


def run_info(args: argparse.Namespace) -> int:
    """Run the ``info`` subcommand."""
    from pyhydroparam.cli import configure_logging
    from pyhydroparam.io.project import load_project

    configure_logging(args.debug)

    try:
        project = load_project(args.project)
    except PyHydroParamError as e:
        print(f"ERROR: {e}")
        for err in getattr(e, "errors", []):
            print(f"  {err}")
        return 1

    print(f"Project: {args.project}")
    print(f"Meshes: {len(project.meshes)}")
    for mesh in project.meshes:
        print(f"  {mesh.name}: {mesh.n_nodes} nodes, {mesh.n_elements} elements")
        for prop in mesh.properties.values():
            print(
                f"    {prop.name} ({prop.mesh_item_type.value}, "
                f"{prop.n_components} component(s), {prop.dtype})"
            )

    print(f"Curves: {len(project.curves)}")
    for name, curve in project.curves.items():
        print(f"  {name}: [{curve.infimum}, {curve.supremum}]")

    print(f"Parameters: {len(project.parameters)}")
    for param in project.parameters:
        if isinstance(param, Parameter):
            kind = "time dependent" if param.is_time_dependent else "static"
            print(f"  {param.name}: {type(param).__name__}, {param.n_components} component(s), {kind}")
        else:
            print(f"  {param.name}: {type(param).__name__}")

    return 0
