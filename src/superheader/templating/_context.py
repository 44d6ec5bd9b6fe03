"""Resolution context for template rendering."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Self

from ._values import DEFAULT_PRIMARY_KEY_FIELD


@dataclass(slots=True, frozen=True)
class ResolutionContext:
    """The record a header is being rendered for.

    Attributes:
        collection: Name of the collection the record belongs to.
        record_id: Primary key of the record, or None if it has not been
            saved yet.
        current_values: Field values already available to the caller.
    """

    collection: str
    record_id: str | None = None
    current_values: Mapping[str, object] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_values(
        cls,
        collection: str,
        values: Mapping[str, object],
        *,
        primary_key_field: str = DEFAULT_PRIMARY_KEY_FIELD,
    ) -> Self:
        """Build a context whose record id is taken from the current values.

        A record counts as saved when its primary key is set and not empty.

        Args:
            collection: Name of the collection.
            values: Current field values of the record.
            primary_key_field: Name of the primary key field.

        Returns:
            A new ResolutionContext.
        """
        key = values.get(primary_key_field)
        record_id = None if key is None or key == "" else str(key)
        return cls(collection=collection, record_id=record_id, current_values=values)
