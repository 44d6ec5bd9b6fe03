"""SuperHeader: record-aware page header templates.

Header titles, subtitles, help text and action targets may reference fields
of the record being viewed with ``{{ field.path }}`` placeholders. The
resolver collects every placeholder of a batch, fetches the record once with
the related fields it needs, and substitutes the values.
"""

from superheader.exceptions import (
    RecordFetchError,
    SuperHeaderError,
    TemplateInputError,
)
from superheader.fetch import DirectusRecordFetcher, FakeRecordFetcher, RecordFetcher
from superheader.header import HeaderOptions, ResolvedHeader, resolve_header
from superheader.templating import ResolutionContext, resolve_templates

__all__ = [
    "DirectusRecordFetcher",
    "FakeRecordFetcher",
    "HeaderOptions",
    "RecordFetchError",
    "RecordFetcher",
    "ResolutionContext",
    "ResolvedHeader",
    "SuperHeaderError",
    "TemplateInputError",
    "resolve_header",
    "resolve_templates",
]
