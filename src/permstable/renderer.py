"""Render a :class:`Catalog` into markdown lines.

Every function here is a read-only traversal; the same catalog always
renders to the same lines.
"""

from __future__ import annotations

from permstable.model import Catalog, Endpoint, Resource
from permstable.templates import (
    SCOPES_SENTENCE,
    SECTION_HEADING,
    TOC_ENTRY,
    bold,
    escape,
    header_row,
    header_separator,
    html_code,
    html_item,
    html_list,
    markdown_code,
    sentence_case,
    slugify,
    table_row,
)


def render_table_of_contents(catalog: Catalog) -> list[str]:
    """One link per resource, in catalog order."""
    return [
        TOC_ENTRY.format(title=sentence_case(r.type), anchor=slugify(r.type))
        for r in catalog
    ]


def render_body(catalog: Catalog) -> list[str]:
    """Every resource section, each followed by a blank line."""
    ret: list[str] = []
    for resource in catalog:
        ret.extend(render_resource(resource))
        ret.append("")
    return ret


def render_resource(resource: Resource) -> list[str]:
    title = sentence_case(resource.type)
    scopes = ", ".join(bold(s) for s in resource.scopes).strip()

    ret = [
        SECTION_HEADING.format(title=title),
        "",
        SCOPES_SENTENCE.format(title=title, scopes=scopes),
        "",
        header_row(),
        header_separator(),
    ]
    for endpoint in resource.endpoints:
        ret.append(render_endpoint(endpoint))
    return ret


def render_endpoint(endpoint: Endpoint) -> str:
    """Render one table row: path, parameters, actions with examples."""
    path_cell = html_code(escape(endpoint.path))

    params_cell = html_list(
        html_item(key) + html_list([html_item(html_code(escape(value)))])
        for key, value in endpoint.sorted_params()
    )

    # Examples use markdown backticks rather than <code>; existing pages
    # depend on that highlighting.
    actions_cell = html_list(
        html_item(f"{html_code(escape(a.name))}: {a.description}")
        + html_list(html_item(markdown_code(x)) for x in a.examples)
        for a in endpoint.actions
    )

    return table_row([path_cell, params_cell, actions_cell])


def render_table(catalog: Catalog) -> str:
    """The full block placed between the markers: TOC, blank line, body."""
    return "\n".join(render_table_of_contents(catalog)) + "\n\n" + "\n".join(render_body(catalog))
