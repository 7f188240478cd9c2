"""Markdown and HTML fragments used by the renderer.

Table cells hold nested lists, which plain markdown tables cannot express,
so cell content is written as inline HTML.
"""

from __future__ import annotations

from typing import Iterable

# ── Table layout ──────────────────────────────────────────────────

TABLE_HEADERS = (
    "API endpoint",
    "Parameters into permissions engine",
    "Available actions / examples",
)

TOC_ENTRY = "- [{title}](#{anchor})"
SECTION_HEADING = "## {title}"
SCOPES_SENTENCE = "The **{title}** resource type supports the following scopes: {scopes}"


# ── Text helpers ──────────────────────────────────────────────────

def sentence_case(text: str) -> str:
    """Uppercase the first character and lowercase the rest of the whole label."""
    if not text:
        return text
    return text[:1].upper() + text[1:].lower()


def slugify(text: str) -> str:
    """Anchor id for a heading: lowercase, spaces become hyphens."""
    return text.lower().replace(" ", "-")


def escape(text: str) -> str:
    """Escape angle brackets so placeholders like ``<id>`` show up literally."""
    return text.replace("<", "&lt;").replace(">", "&gt;")


def bold(text: str) -> str:
    return f"**{text}**"


def html_code(text: str) -> str:
    """Wrap already-escaped *text* in an HTML code tag."""
    return f"<code>{text}</code>"


def markdown_code(text: str) -> str:
    return f"`{text}`"


def html_list(items: Iterable[str]) -> str:
    """Render pre-built ``<li>`` fragments inside a ``<ul>``."""
    return "<ul>" + "".join(items) + "</ul>"


def html_item(text: str) -> str:
    return f"<li>{text}</li>"


# ── Table helpers ─────────────────────────────────────────────────

def table_row(cells: Iterable[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def header_row() -> str:
    return table_row(TABLE_HEADERS)


def header_separator() -> str:
    """Separator row with as many dashes under each header as it has characters."""
    return table_row("-" * len(h) for h in TABLE_HEADERS)
