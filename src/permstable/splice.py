"""Splice the rendered table into its host document.

The sync process:
1. Read the host document
2. Keep every line up to and including the first ``BEGIN TABLE`` line
3. Keep every line from the next ``END TABLE`` line to the end
4. Put the table of contents and body between them, separated by blank lines
5. Write the result back in one replace, only if it changed

Preserves all content outside the markers byte for byte.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from permstable import BEGIN_MARKER, END_MARKER
from permstable.errors import FileReadError, FileWriteError, MissingMarkerError
from permstable.model import Catalog
from permstable.renderer import render_body, render_table_of_contents

FILE_MODE = 0o644


@dataclass
class SyncResult:
    """Result of a single sync run."""

    path: Path
    action: str
    dry_run: bool = False
    content: str = ""

    @property
    def changed(self) -> bool:
        return self.action == "updated"

    def summary(self) -> str:
        suffix = " (dry run)" if self.dry_run else ""
        return f"{self.path}: {self.action}{suffix}"


def split_document(
    text: str,
    begin: str = BEGIN_MARKER,
    end: str = END_MARKER,
) -> tuple[list[str], list[str]]:
    """Split *text* into prefix and suffix lines around the marker span.

    The prefix runs up to and including the first line containing *begin*.
    The suffix starts at the first later line containing *end* and runs to
    the end of the document.

    Raises:
        MissingMarkerError: If either marker line is missing.
    """
    lines = text.split("\n")

    begin_index = next((i for i, line in enumerate(lines) if begin in line), None)
    if begin_index is None:
        raise MissingMarkerError(begin)

    end_index = next(
        (i for i in range(begin_index + 1, len(lines)) if end in lines[i]),
        None,
    )
    if end_index is None:
        raise MissingMarkerError(end, after=begin)

    return lines[: begin_index + 1], lines[end_index:]


def splice_document(
    text: str,
    toc: list[str],
    body: list[str],
    begin: str = BEGIN_MARKER,
    end: str = END_MARKER,
) -> str:
    """Return *text* with the marker span replaced by *toc* and *body*."""
    prefix, suffix = split_document(text, begin, end)
    return "\n\n".join([
        "\n".join(prefix),
        "\n".join(toc),
        "\n".join(body),
        "\n".join(suffix),
    ])


def read_document(path: Path | str) -> str:
    """Read the host document.

    Raises:
        FileReadError: If the file is missing or unreadable.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path, str(e)) from e


def write_document(path: Path | str, content: str) -> None:
    """Replace *path* with *content* in one step.

    The content goes to a temporary file beside the target, which is then
    renamed over it, so a failed write leaves the original in place.

    Raises:
        FileWriteError: If the temporary file cannot be written or renamed.
    """
    path = Path(path)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent,
        )
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.chmod(tmp_name, FILE_MODE)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise FileWriteError(path, str(e)) from e


def sync_table(
    path: Path | str,
    catalog: Catalog,
    dry_run: bool = False,
) -> SyncResult:
    """Render *catalog* and splice it into the document at *path*."""
    path = Path(path)
    current = read_document(path)
    updated = splice_document(
        current,
        render_table_of_contents(catalog),
        render_body(catalog),
    )

    if updated == current:
        return SyncResult(path=path, action="unchanged", dry_run=dry_run, content=updated)

    if not dry_run:
        write_document(path, updated)
    return SyncResult(path=path, action="updated", dry_run=dry_run, content=updated)
