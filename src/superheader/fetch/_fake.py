"""Fake record fetcher for testing.

This module provides a FakeRecordFetcher that implements RecordFetcher
without a Directus instance.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from superheader.exceptions import RecordFetchError


@dataclass(frozen=True, slots=True)
class FetchCall:
    """A single recorded fetch_record call."""

    collection: str
    record_id: str
    fields: tuple[str, ...]


@dataclass(slots=True)
class FakeRecordFetcher:
    """In-memory record fetcher.

    Records are stored per ``(collection, record_id)`` and returned whole,
    regardless of the requested fields. Every call is recorded in
    ``calls`` so tests can assert on the field selection.

    Example:
        >>> fetcher = FakeRecordFetcher()
        >>> fetcher.add("articles", "1", {"id": 1, "title": "Hello"})
        >>> record = await fetcher.fetch_record("articles", "1", ["*"])
        >>> assert fetcher.calls[0].fields == ("*",)
    """

    records: dict[tuple[str, str], Mapping[str, object]] = field(default_factory=dict)
    calls: list[FetchCall] = field(default_factory=list)
    error: Exception | None = None

    def add(self, collection: str, record_id: str, record: Mapping[str, object]) -> None:
        """Store a record to be returned for the given key."""
        self.records[(collection, record_id)] = record

    def fail_with(self, error: Exception) -> None:
        """Make every subsequent fetch raise the given error."""
        self.error = error

    async def fetch_record(
        self,
        collection: str,
        record_id: str,
        fields: Sequence[str],
    ) -> Mapping[str, object] | None:
        """Return the stored record, raising if it is unknown or an error is set."""
        self.calls.append(FetchCall(collection, record_id, tuple(fields)))
        if self.error is not None:
            raise self.error
        try:
            return self.records[(collection, record_id)]
        except KeyError:
            msg = f"Record {collection}/{record_id} not found"
            raise RecordFetchError(
                msg, collection=collection, record_id=record_id, status_code=404
            ) from None
