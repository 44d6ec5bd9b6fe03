"""Record fetchers used to enrich templates with related fields."""

from ._directus import DirectusRecordFetcher
from ._fake import FakeRecordFetcher, FetchCall
from ._protocol import RecordFetcher

__all__ = [
    "DirectusRecordFetcher",
    "FakeRecordFetcher",
    "FetchCall",
    "RecordFetcher",
]
