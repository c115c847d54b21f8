"""
pyhydroparam command-line interface.

Usage:
    pyhydroparam info PROJECT [options]       List meshes and parameters
    pyhydroparam evaluate PROJECT [options]   Evaluate a parameter
    python -m pyhydroparam <command>          Same as above
"""

from __future__ import annotations

import argparse
import logging


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="pyhydroparam",
        description="Inspect and evaluate simulation parameters.",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Register subcommands
    from pyhydroparam.cli.evaluate import add_evaluate_parser
    from pyhydroparam.cli.info import add_info_parser

    add_info_parser(subparsers)
    add_evaluate_parser(subparsers)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    # Dispatch to the subcommand handler
    result: int = args.func(args)
    return result


def configure_logging(debug: bool) -> None:
    """Configure root logging for a CLI run."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


__all__ = ["main"]
