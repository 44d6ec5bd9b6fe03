"""Resolve every template of a header in one batch."""

import json
import tomllib
from pathlib import Path

from pydantic import ValidationError
from structlog.typing import FilteringBoundLogger

from superheader.enums import ActionType
from superheader.exceptions import HeaderOptionsError
from superheader.fetch import RecordFetcher
from superheader.templating import (
    DEFAULT_PRIMARY_KEY_FIELD,
    ResolutionContext,
    resolve_templates,
)

from ._models import Action, HeaderOptions, ResolvedAction, ResolvedHeader


class _TemplateBatch:
    """Collects optional templates and hands back their resolved values."""

    def __init__(self) -> None:
        self.templates: list[str] = []
        self._resolved: list[str] = []

    def add(self, template: str | None) -> int | None:
        if template is None:
            return None
        self.templates.append(template)
        return len(self.templates) - 1

    def set_resolved(self, resolved: list[str]) -> None:
        self._resolved = resolved

    def get(self, slot: int | None) -> str | None:
        return None if slot is None else self._resolved[slot]


def _resolved_action(
    action: Action,
    batch: _TemplateBatch,
    slots: tuple[int | None, int | None, list[tuple[str, int | None]]],
) -> ResolvedAction:
    label_slot, url_slot, field_slots = slots
    default_fields: dict[str, str] | None = None
    if action.action_type is ActionType.CREATE_ANYWHERE:
        default_fields = {name: batch.get(slot) or "" for name, slot in field_slots}
    return ResolvedAction(
        label=batch.get(label_slot) or "",
        action_type=action.action_type,
        type=action.type,
        icon=action.icon,
        url=batch.get(url_slot),
        flow=action.flow,
        selected_collection=action.selected_collection,
        default_fields=default_fields,
    )


async def resolve_header(
    options: HeaderOptions,
    context: ResolutionContext,
    fetcher: RecordFetcher | None = None,
    *,
    primary_key_field: str = DEFAULT_PRIMARY_KEY_FIELD,
    logger: FilteringBoundLogger | None = None,
) -> ResolvedHeader:
    """Resolve the templates of a header against the current record.

    Title, subtitle, help text, the action button label, and each
    action's label, URL and default field values are resolved with a
    single call to :func:`~superheader.templating.resolve_templates`, so
    the whole header costs at most one record fetch.

    Args:
        options: Configured header options.
        context: The record the header is shown for.
        fetcher: Source for the enriched record.
        primary_key_field: Name of the primary key on related records.
        logger: Logger for diagnostics.

    Returns:
        The resolved header. Options that were not set stay None.
    """
    batch = _TemplateBatch()
    title_slot = batch.add(options.title)
    subtitle_slot = batch.add(options.subtitle)
    help_slot = batch.add(options.help)
    action_button_slot = batch.add(options.action_button)
    action_slots = [
        (
            batch.add(action.label),
            batch.add(action.url),
            [
                (default.field, batch.add(default.value))
                for default in action.default_fields
            ],
        )
        for action in options.actions
    ]

    batch.set_resolved(
        await resolve_templates(
            batch.templates,
            context,
            fetcher,
            primary_key_field=primary_key_field,
            logger=logger,
        )
    )

    return ResolvedHeader(
        title=batch.get(title_slot),
        subtitle=batch.get(subtitle_slot),
        help=batch.get(help_slot),
        action_button=batch.get(action_button_slot),
        icon=options.icon,
        color=options.color,
        actions=tuple(
            _resolved_action(action, batch, slots)
            for action, slots in zip(options.actions, action_slots, strict=True)
        ),
    )


def load_header_options(path: Path) -> HeaderOptions:
    """Load header options from a JSON or TOML file.

    Args:
        path: Path to a ``.json`` or ``.toml`` file.

    Returns:
        The validated header options.

    Raises:
        HeaderOptionsError: If the file cannot be read, parsed or validated.
    """
    try:
        if path.suffix == ".toml":
            with path.open("rb") as f:
                data: object = tomllib.load(f)
        else:
            data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        msg = f"Cannot read header options: {e}"
        raise HeaderOptionsError(msg, path=path) from e
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
        msg = f"Cannot parse header options: {e}"
        raise HeaderOptionsError(msg, path=path) from e

    try:
        return HeaderOptions.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid header options in {path}: {e}"
        raise HeaderOptionsError(msg, path=path) from e
