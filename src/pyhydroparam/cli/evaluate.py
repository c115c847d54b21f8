"""
``pyhydroparam evaluate`` subcommand.

Evaluates one parameter of a project at a node or element and time.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pyhydroparam.core.exceptions import PyHydroParamError
from pyhydroparam.core.spatial_position import SpatialPosition

logger = logging.getLogger(__name__)


def add_evaluate_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``evaluate`` subcommand."""
    p = subparsers.add_parser(
        "evaluate",
        help="Evaluate a parameter at a node or element.",
        description="Evaluate a parameter of a project at a node or element and time.",
    )
    p.add_argument("project", type=Path, help="Path to the JSON project file")
    p.add_argument("--parameter", "-p", required=True, help="Parameter name")

    location = p.add_mutually_exclusive_group(required=True)
    location.add_argument("--element", type=int, metavar="ID", help="0-based element ID")
    location.add_argument("--node", type=int, metavar="ID", help="0-based node ID")

    p.add_argument(
        "--time",
        "-t",
        type=float,
        default=0.0,
        help="Evaluation time (default: 0.0)",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    p.set_defaults(func=run_evaluate)


def run_evaluate(args: argparse.Namespace) -> int:
    """Run the ``evaluate`` subcommand."""
    from pyhydroparam.cli import configure_logging
    from pyhydroparam.io.project import load_project

    configure_logging(args.debug)

    position = SpatialPosition(node_id=args.node, element_id=args.element)

    try:
        project = load_project(args.project)
        param = project.get_parameter(args.parameter)
        values = param.evaluate(args.time, position)
    except PyHydroParamError as e:
        print(f"ERROR: {e}")
        for err in getattr(e, "errors", []):
            print(f"  {err}")
        return 1
    except (AssertionError, IndexError):
        print(f"ERROR: {position} is not valid for parameter '{args.parameter}'")
        return 1

    logger.debug("Evaluated '%s' at %r, t=%g", args.parameter, position, args.time)
    print(" ".join(f"{v:.10g}" for v in values))
    return 0
