"""Catalog inspection CLI commands."""

import argparse

import yaml


def cmd_validate(args: argparse.Namespace) -> int:
    from permstable.catalog import build_catalog
    from permstable.validator import validate_catalog

    result = validate_catalog(build_catalog())
    print(result.summary())
    return 0 if result.passed else 1


def cmd_dump(args: argparse.Namespace) -> int:
    from permstable.catalog import build_catalog

    print(yaml.safe_dump(build_catalog().to_dict(), sort_keys=False), end="")
    return 0
