r"""SuperHeader template resolution.

Header strings may reference fields of the record being viewed, including
fields of related records, with ``{{ field.path }}`` placeholders.

Basic usage:
    from superheader.templating import ResolutionContext, resolve_templates

    context = ResolutionContext(
        collection="articles",
        record_id="12",
        current_values={"id": 12, "title": "Draft"},
    )

    title, subtitle = await resolve_templates(
        ["{{ title }}", "by {{ author.name }}"],
        context,
        fetcher,
    )

Placeholders of all templates are collected first, so a batch costs at
most one record fetch. Related records substitute their primary key;
missing fields substitute an empty string.
"""

from ._context import ResolutionContext
from ._placeholders import (
    PLACEHOLDER_PATTERN,
    collect_field_paths,
    extract_field_paths,
    has_placeholders,
)
from ._resolver import ALL_ROOT_FIELDS, resolve_templates, substitute_placeholders
from ._values import DEFAULT_PRIMARY_KEY_FIELD, coerce_value, walk_field_path

__all__ = [
    "ALL_ROOT_FIELDS",
    "DEFAULT_PRIMARY_KEY_FIELD",
    "PLACEHOLDER_PATTERN",
    "ResolutionContext",
    "coerce_value",
    "collect_field_paths",
    "extract_field_paths",
    "has_placeholders",
    "resolve_templates",
    "substitute_placeholders",
    "walk_field_path",
]
