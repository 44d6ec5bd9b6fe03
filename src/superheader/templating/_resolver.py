"""Template resolution against live record values.

Resolving a batch of templates costs at most one record fetch: the field
paths of every placeholder are collected up front and requested together
with all root fields, then each template is substituted from that single
enriched record.
"""

import re
from collections.abc import Mapping, Sequence
from typing import cast, overload

import structlog
from structlog.typing import FilteringBoundLogger

from superheader.exceptions import TemplateInputError
from superheader.fetch import RecordFetcher

from ._context import ResolutionContext
from ._placeholders import (
    PLACEHOLDER_PATTERN,
    collect_field_paths,
    field_path_of,
    has_placeholders,
)
from ._values import DEFAULT_PRIMARY_KEY_FIELD, coerce_value, walk_field_path

ALL_ROOT_FIELDS = "*"


def _normalize_templates(templates: str | Sequence[str]) -> tuple[list[str], bool]:
    if templates is None:  # pyright: ignore[reportUnnecessaryComparison]
        msg = "templates must be a string or a sequence of strings, not None"
        raise TemplateInputError(msg)
    if isinstance(templates, str):
        return [templates], False
    if not isinstance(templates, Sequence):  # pyright: ignore[reportUnnecessaryIsInstance]
        msg = f"templates must be a string or a sequence of strings, not {type(templates).__name__}"  # noqa: E501
        raise TemplateInputError(msg)

    template_list = list(templates)
    for index, template in enumerate(template_list):
        if not isinstance(template, str):  # pyright: ignore[reportUnnecessaryIsInstance]
            msg = f"template at index {index} is {type(template).__name__}, not str"
            raise TemplateInputError(msg)
    return template_list, True


def substitute_placeholders(
    template: str,
    record: Mapping[str, object],
    *,
    primary_key_field: str = DEFAULT_PRIMARY_KEY_FIELD,
) -> str:
    """Replace every placeholder in a template with its value from a record.

    Each occurrence is replaced independently and substituted text is not
    scanned again, so values containing ``{{`` are inserted literally.

    Args:
        template: Template string.
        record: Record to read field values from.
        primary_key_field: Name of the primary key on related records.

    Returns:
        The template with all placeholders substituted. Unknown fields
        become empty strings.
    """

    def replacer(match: re.Match[str]) -> str:
        value = walk_field_path(record, field_path_of(match))
        return coerce_value(value, primary_key_field=primary_key_field)

    return PLACEHOLDER_PATTERN.sub(replacer, template)


async def _load_record(
    context: ResolutionContext,
    fetcher: RecordFetcher | None,
    field_paths: tuple[str, ...],
    logger: FilteringBoundLogger,
) -> Mapping[str, object]:
    if not field_paths or context.record_id is None or fetcher is None:
        return context.current_values

    fields = [ALL_ROOT_FIELDS, *field_paths]
    try:
        record = await fetcher.fetch_record(
            context.collection, context.record_id, fields
        )
    except Exception as e:  # noqa: BLE001
        logger.warning(
            "record_fetch_failed",
            collection=context.collection,
            record_id=context.record_id,
            fields=fields,
            error_type=type(e).__name__,
            error=str(e),
        )
        return context.current_values

    if record is None:
        logger.warning(
            "record_fetch_empty",
            collection=context.collection,
            record_id=context.record_id,
            fields=fields,
        )
        return context.current_values
    return record


@overload
async def resolve_templates(
    templates: str,
    context: ResolutionContext,
    fetcher: RecordFetcher | None = None,
    *,
    primary_key_field: str = DEFAULT_PRIMARY_KEY_FIELD,
    logger: FilteringBoundLogger | None = None,
) -> str: ...


@overload
async def resolve_templates(
    templates: Sequence[str],
    context: ResolutionContext,
    fetcher: RecordFetcher | None = None,
    *,
    primary_key_field: str = DEFAULT_PRIMARY_KEY_FIELD,
    logger: FilteringBoundLogger | None = None,
) -> list[str]: ...


async def resolve_templates(
    templates: str | Sequence[str],
    context: ResolutionContext,
    fetcher: RecordFetcher | None = None,
    *,
    primary_key_field: str = DEFAULT_PRIMARY_KEY_FIELD,
    logger: FilteringBoundLogger | None = None,
) -> str | list[str]:
    """Resolve ``{{ field.path }}`` placeholders in one or more templates.

    The record is fetched at most once, and only when a placeholder is
    present and the context has a record id. Fetch failures are logged
    and resolution falls back to the context's current values.

    Args:
        templates: A template string or a sequence of template strings.
        context: The record the templates are resolved against.
        fetcher: Source for the enriched record. When None, only the
            current values are used.
        primary_key_field: Name of the primary key substituted for related
            records.
        logger: Logger for diagnostics. Defaults to the package logger.

    Returns:
        A string for string input, otherwise a list of strings in input
        order.

    Raises:
        TemplateInputError: If templates is None or contains non-strings.

    Example:
        >>> context = ResolutionContext("people", current_values={"name": "Ann"})
        >>> await resolve_templates("Hello {{ name }}", context)
        'Hello Ann'
    """
    template_list, is_sequence = _normalize_templates(templates)

    if not has_placeholders(template_list):
        return template_list if is_sequence else template_list[0]

    log = logger if logger is not None else cast(
        "FilteringBoundLogger", structlog.get_logger("superheader")
    )

    field_paths = collect_field_paths(template_list)
    record = await _load_record(context, fetcher, field_paths, log)

    resolved = [
        substitute_placeholders(template, record, primary_key_field=primary_key_field)
        for template in template_list
    ]
    log.debug(
        "templates_resolved",
        collection=context.collection,
        record_id=context.record_id,
        template_count=len(resolved),
        field_paths=list(field_paths),
    )
    return resolved if is_sequence else resolved[0]
