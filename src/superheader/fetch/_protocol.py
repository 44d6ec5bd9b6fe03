"""Record fetcher protocol for dependency injection.

The template resolver only needs to read one record, with its relations
expanded, per call. Anything that satisfies this protocol can back it: the
Directus REST fetcher, the in-memory fake, or a host-provided adapter.
"""

from collections.abc import Mapping, Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class RecordFetcher(Protocol):
    """Protocol for reading a single record with selected fields.

    Example:
        >>> async def title_of(fetcher: RecordFetcher) -> object:
        ...     record = await fetcher.fetch_record("articles", "1", ["*"])
        ...     return record["title"] if record else None
    """

    async def fetch_record(
        self,
        collection: str,
        record_id: str,
        fields: Sequence[str],
    ) -> Mapping[str, object] | None:
        """Fetch one record.

        Args:
            collection: Name of the collection.
            record_id: Primary key of the record.
            fields: Fields to include. ``"*"`` selects all root fields and
                dotted paths select fields of related records.

        Returns:
            The record as a nested mapping, or None if the source returned
            nothing.

        Raises:
            RecordFetchError: If the record cannot be read.
        """
        ...
