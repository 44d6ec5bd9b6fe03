"""Header options and their resolution against the current record."""

from ._models import (
    Action,
    DefaultField,
    FlowIdentifier,
    HeaderOptions,
    ResolvedAction,
    ResolvedHeader,
)
from ._resolve import load_header_options, resolve_header

__all__ = [
    "Action",
    "DefaultField",
    "FlowIdentifier",
    "HeaderOptions",
    "ResolvedAction",
    "ResolvedHeader",
    "load_header_options",
    "resolve_header",
]
