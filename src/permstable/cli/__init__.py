"""Command line interface for permstable.

Usage:
    permstable [--target PATH] [--config PATH]
    permstable sync [--dry-run] [--check] [--verbose]
    permstable render [--toc-only]
    permstable validate
    permstable dump

With no command, ``sync`` runs with default options.
"""

import argparse
import sys

from permstable.cli.catalog import cmd_dump, cmd_validate
from permstable.cli.sync import cmd_render, cmd_sync


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="permstable",
        description="Generate the permissions resource table in the docs",
    )
    parser.add_argument(
        "--target", default=None,
        help="Documentation file to update (default: PERMSTABLE_TARGET, config, or built-in)",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to a permstable.yaml config file",
    )
    sub = parser.add_subparsers(dest="command")

    # sync
    sync = sub.add_parser("sync", help="Render the table into the target file")
    sync.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )
    sync.add_argument(
        "--check", action="store_true",
        help="Exit 1 if the target is out of date; never writes",
    )
    sync.add_argument(
        "--verbose", action="store_true",
        help="Print the resolved target and the action taken",
    )

    # render
    render = sub.add_parser("render", help="Print the rendered table to stdout")
    render.add_argument(
        "--toc-only", action="store_true",
        help="Print only the table of contents",
    )

    # catalog
    sub.add_parser("validate", help="Validate the resource catalog")
    sub.add_parser("dump", help="Print the resource catalog as YAML")

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    # Bare invocation regenerates the table, like the original build step
    if not args.command:
        args = parser.parse_args(sys.argv[1:] + ["sync"])

    dispatch = {
        "sync": cmd_sync,
        "render": cmd_render,
        "validate": cmd_validate,
        "dump": cmd_dump,
    }
    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
