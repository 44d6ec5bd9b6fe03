# pyright: reportUnusedCallResult=false
# ruff: noqa: A002, T201
"""Template and header resolution commands."""

from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any

import anyio
from cyclopts import Parameter

from superheader.exceptions import HeaderOptionsError
from superheader.fetch import DirectusRecordFetcher
from superheader.header import (
    HeaderOptions,
    ResolvedHeader,
    load_header_options,
    resolve_header,
)
from superheader.templating import ResolutionContext, resolve_templates

from ._context import CLIContext, OutputFormat
from ._shared import ExitCode, exit_with_error, format_json, format_table, parse_values

if TYPE_CHECKING:
    from cyclopts import App


def _build_context(
    collection: str, record_id: str | None, values: str | None
) -> ResolutionContext:
    ctx = CLIContext.get_current()
    try:
        current_values = parse_values(values)
    except HeaderOptionsError as e:
        exit_with_error(str(e), ExitCode.INVALID_INPUT)

    if record_id is not None:
        return ResolutionContext(
            collection=collection, record_id=record_id, current_values=current_values
        )
    return ResolutionContext.from_values(
        collection,
        current_values,
        primary_key_field=ctx.config.templates.primary_key_field,
    )


async def _resolve_batch(
    templates: list[str], context: ResolutionContext
) -> list[str]:
    ctx = CLIContext.get_current()
    resolve = partial(
        resolve_templates,
        primary_key_field=ctx.config.templates.primary_key_field,
        logger=ctx.logger,
    )
    if context.record_id is None:
        return await resolve(templates, context)
    async with DirectusRecordFetcher.from_config(ctx.config.directus) as fetcher:
        return await resolve(templates, context, fetcher)


async def _resolve_header(
    options: HeaderOptions, context: ResolutionContext
) -> ResolvedHeader:
    ctx = CLIContext.get_current()
    resolve = partial(
        resolve_header,
        primary_key_field=ctx.config.templates.primary_key_field,
        logger=ctx.logger,
    )
    if context.record_id is None:
        return await resolve(options, context)
    async with DirectusRecordFetcher.from_config(ctx.config.directus) as fetcher:
        return await resolve(options, context, fetcher)


def _header_to_dict(header: ResolvedHeader) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    return {
        "title": header.title,
        "subtitle": header.subtitle,
        "help": header.help,
        "action_button": header.action_button,
        "icon": header.icon,
        "color": header.color,
        "actions": [
            {
                "label": action.label,
                "action_type": action.action_type.value,
                "type": action.type.value,
                "icon": action.icon,
                "url": action.url,
                "flow": action.flow.model_dump() if action.flow else None,
                "selected_collection": action.selected_collection,
                "default_fields": action.default_fields,
            }
            for action in header.actions
        ],
    }


def _header_rows(header: ResolvedHeader) -> list[list[str]]:
    rows = [
        [name, value]
        for name, value in (
            ("title", header.title),
            ("subtitle", header.subtitle),
            ("help", header.help),
            ("action_button", header.action_button),
        )
        if value is not None
    ]
    for index, action in enumerate(header.actions):
        target = action.url or ""
        if action.flow is not None:
            target = f"flow {action.flow.key}"
        elif action.selected_collection is not None:
            target = f"create in {action.selected_collection}"
        rows.append([f"actions.{index}", f"{action.label} -> {target}"])
    return rows


def resolve(
    *templates: str,
    collection: Annotated[str, Parameter(help="Collection of the current record")],
    record_id: Annotated[
        str | None, Parameter(name="--id", help="Primary key of the current record")
    ] = None,
    values: Annotated[
        str | None, Parameter(help="Current field values as a JSON object")
    ] = None,
    format: Annotated[
        OutputFormat, Parameter(help="Output format (plain or json)")
    ] = OutputFormat.PLAIN,
) -> None:
    """Resolve {{ field }} placeholders in one or more templates.

    Args:
        templates: Templates to resolve.
        collection: Collection of the current record.
        record_id: Primary key of the current record. When set, related
            fields are fetched from Directus.
        values: Current field values as a JSON object.
        format: Output format.
    """
    context = _build_context(collection, record_id, values)
    resolved = anyio.run(_resolve_batch, list(templates), context)

    if format is OutputFormat.JSON:
        print(format_json(resolved))
        return
    for line in resolved:
        print(line)


def header(
    options_file: Path,
    /,
    *,
    collection: Annotated[str, Parameter(help="Collection of the current record")],
    record_id: Annotated[
        str | None, Parameter(name="--id", help="Primary key of the current record")
    ] = None,
    values: Annotated[
        str | None, Parameter(help="Current field values as a JSON object")
    ] = None,
    format: Annotated[
        OutputFormat, Parameter(help="Output format (table or json)")
    ] = OutputFormat.TABLE,
) -> None:
    """Resolve every template of a header options file.

    Args:
        options_file: JSON or TOML file with header options.
        collection: Collection of the current record.
        record_id: Primary key of the current record.
        values: Current field values as a JSON object.
        format: Output format.
    """
    try:
        options = load_header_options(options_file)
    except HeaderOptionsError as e:
        exit_with_error(str(e), ExitCode.INVALID_INPUT)

    context = _build_context(collection, record_id, values)
    resolved = anyio.run(_resolve_header, options, context)

    if format is OutputFormat.JSON:
        print(format_json(_header_to_dict(resolved)))
        return
    print(format_table(["option", "value"], _header_rows(resolved)).rstrip())


def register_commands(app: "App") -> None:  # noqa: UP037
    """Register all commands on the given app."""
    app.command(resolve, name="resolve")
    app.command(header, name="header")
