"""Sync and render CLI commands."""

import argparse

from permstable.errors import PermsTableError


def cmd_sync(args: argparse.Namespace) -> int:
    from permstable.catalog import build_catalog
    from permstable.config import resolve_settings
    from permstable.splice import sync_table

    try:
        settings = resolve_settings(args.target, args.config)
        if args.verbose:
            print(f"Target: {settings.target} (from {settings.source})")
        result = sync_table(
            settings.target,
            build_catalog(),
            dry_run=args.dry_run or args.check,
        )
    except PermsTableError as e:
        print(f"ERROR: {e}")
        return 1

    if args.check:
        if result.changed:
            print(f"{result.path} is out of date. Run 'permstable sync'.")
            return 1
        return 0

    if args.verbose:
        print(result.summary())
    if result.dry_run:
        print("[DRY RUN] No files were modified.")
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    from permstable.catalog import build_catalog
    from permstable.renderer import render_table, render_table_of_contents

    catalog = build_catalog()
    if args.toc_only:
        print("\n".join(render_table_of_contents(catalog)))
    else:
        print(render_table(catalog))
    return 0
