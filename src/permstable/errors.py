"""Exceptions raised while rendering and splicing the permissions table."""

from __future__ import annotations

from pathlib import Path


class PermsTableError(Exception):
    """Base class for all permstable errors."""


class FileReadError(PermsTableError):
    """The host document could not be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"cannot read {self.path}: {reason}")


class FileWriteError(PermsTableError):
    """The updated document could not be written back."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"cannot write {self.path}: {reason}")


class MissingMarkerError(PermsTableError, ValueError):
    """A required marker line is absent from the host document."""

    def __init__(self, marker: str, after: str | None = None) -> None:
        self.marker = marker
        if after:
            super().__init__(f"no line containing '{marker}' found after '{after}'")
        else:
            super().__init__(f"no line containing '{marker}' found")


class ConfigError(PermsTableError, ValueError):
    """The configuration file is malformed."""
