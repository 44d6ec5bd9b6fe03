# pyright: reportExplicitAny=false
"""Shared CLI utilities for commands.

This module provides common utilities used across CLI command implementations:
- Standardized exit codes
- Output formatters (JSON, table)
- Error reporting with exit codes
"""

import json
from enum import IntEnum
from typing import Any, Never

from rich.console import Console
from rich.markup import escape

from superheader.exceptions import HeaderOptionsError

# Type alias for formattable data - uses Any to match library signatures
FormattableData = dict[str, Any] | list[Any]

__all__ = [
    "ExitCode",
    "FormattableData",
    "exit_with_error",
    "format_json",
    "format_table",
    "parse_values",
]


class ExitCode(IntEnum):
    """Standard exit codes for SuperHeader CLI commands.

    Configuration failures exit with 1 from
    :func:`~superheader.config.safe_load_config` before any command runs.
    """

    SUCCESS = 0
    INVALID_INPUT = 2


def format_json(data: FormattableData) -> str:
    """Format data as indented JSON.

    Args:
        data: Data to format as JSON.

    Returns:
        JSON-formatted string representation.
    """
    import orjson

    return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8")


def format_table(headers: list[str], rows: list[list[str]]) -> str:
    """Format data as a Markdown table.

    Args:
        headers: Column headers for the table.
        rows: List of rows, where each row is a list of cell values.

    Returns:
        Markdown table string representation.
    """
    from pytablewriter import MarkdownTableWriter

    writer = MarkdownTableWriter(
        headers=headers,
        value_matrix=rows,
        margin=1,
    )
    return writer.dumps()


def parse_values(raw: str | None) -> dict[str, object]:
    """Parse the ``--values`` option into a record.

    Args:
        raw: A JSON object, or None.

    Returns:
        The parsed record, empty when raw is None.

    Raises:
        HeaderOptionsError: If raw is not a JSON object.
    """
    if raw is None:
        return {}
    try:
        values: object = json.loads(raw)
    except json.JSONDecodeError as e:
        msg = f"--values is not valid JSON: {e}"
        raise HeaderOptionsError(msg) from e
    if not isinstance(values, dict):
        msg = "--values must be a JSON object"
        raise HeaderOptionsError(msg)
    return values  # pyright: ignore[reportUnknownVariableType]


def exit_with_error(
    message: str,
    code: ExitCode,
) -> Never:
    """Print an error message and exit with the specified code.

    Args:
        message: The error message to display.
        code: The exit code to use.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    console = Console(stderr=True)
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
    raise SystemExit(code)
