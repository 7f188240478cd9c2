"""Permissions resource-table generator.

Renders the catalog of resource types, API endpoints and actions known to
the permissions engine into a markdown table, and splices it into the
documentation page between two marker lines:

    {/* BEGIN TABLE */}
    ...generated content...
    {/* END TABLE */}

Anything outside the markers is preserved untouched.
"""

# Marker substrings searched for line by line by the splicer
BEGIN_MARKER = "BEGIN TABLE"
END_MARKER = "END TABLE"

# Documentation page updated when no other target is configured
DEFAULT_TARGET = "website/content/docs/concepts/security/permissions/resource-table.mdx"
