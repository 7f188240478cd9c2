"""Validate a catalog before it is rendered."""

from __future__ import annotations

from dataclasses import dataclass, field

from permstable.model import Catalog
from permstable.templates import slugify

PLACEHOLDER = "<id>"


@dataclass
class ValidationResult:
    """Result of a catalog validation run."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    total_resources: int = 0
    total_endpoints: int = 0

    @property
    def passed(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = [
            f"Catalog Validation: {self.total_resources} resources, "
            f"{self.total_endpoints} endpoints checked"
        ]
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  {w}")
        if self.passed and not self.warnings:
            lines.append("All checks passed.")
        return "\n".join(lines)


def validate_catalog(catalog: Catalog) -> ValidationResult:
    """Run full validation on a catalog.

    Checks:
    - Every resource has a type, at least one scope and one endpoint
    - Resource anchors are unique, so every TOC link has one target
    - Every endpoint has at least one action and no duplicate action names
    - Collection endpoints (no ``<id>`` in the path) offer ``list``
    - Item endpoints declare an ``ID`` parameter
    - Every action has at least one example
    """
    result = ValidationResult()
    anchors: dict[str, str] = {}

    for resource in catalog:
        result.total_resources += 1
        name = resource.type or "<unnamed resource>"

        if not resource.type:
            result.errors.append(f"{name}: empty type label")
        if not resource.scopes:
            result.errors.append(f"{name}: no scopes declared")
        if not resource.endpoints:
            result.errors.append(f"{name}: no endpoints declared")

        anchor = slugify(resource.type)
        if anchor in anchors:
            result.errors.append(
                f"{name}: anchor '#{anchor}' already used by '{anchors[anchor]}'"
            )
        else:
            anchors[anchor] = resource.type

        for endpoint in resource.endpoints:
            result.total_endpoints += 1
            where = f"{name} {endpoint.path}"

            if not endpoint.actions:
                result.errors.append(f"{where}: no actions declared")
                continue

            names = endpoint.action_names()
            duplicates = sorted({n for n in names if names.count(n) > 1})
            for dup in duplicates:
                result.errors.append(f"{where}: duplicate action '{dup}'")

            if PLACEHOLDER in endpoint.path:
                if "ID" not in endpoint.params:
                    result.warnings.append(f"{where}: item endpoint without 'ID' parameter")
            elif "list" not in names:
                result.errors.append(f"{where}: collection endpoint without 'list' action")

            for a in endpoint.actions:
                if not a.examples:
                    result.warnings.append(f"{where}: action '{a.name}' has no examples")

    return result
