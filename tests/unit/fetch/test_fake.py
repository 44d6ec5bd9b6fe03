"""Unit tests for the fake record fetcher."""

import pytest

from superheader.exceptions import RecordFetchError
from superheader.fetch import FakeRecordFetcher, FetchCall, RecordFetcher

pytestmark = pytest.mark.anyio


async def test_returns_stored_record(fetcher: FakeRecordFetcher) -> None:
    fetcher.add("articles", "1", {"id": 1, "title": "Hello"})

    record = await fetcher.fetch_record("articles", "1", ["*", "title"])

    assert record == {"id": 1, "title": "Hello"}
    assert fetcher.calls == [FetchCall("articles", "1", ("*", "title"))]


async def test_unknown_record_raises_not_found(fetcher: FakeRecordFetcher) -> None:
    with pytest.raises(RecordFetchError) as exc_info:
        _ = await fetcher.fetch_record("articles", "404", ["*"])

    assert exc_info.value.status_code == 404
    assert len(fetcher.calls) == 1


async def test_fail_with_raises_configured_error(fetcher: FakeRecordFetcher) -> None:
    fetcher.add("articles", "1", {"id": 1})
    fetcher.fail_with(TimeoutError("slow"))

    with pytest.raises(TimeoutError):
        _ = await fetcher.fetch_record("articles", "1", ["*"])


async def test_satisfies_protocol(fetcher: FakeRecordFetcher) -> None:
    assert isinstance(fetcher, RecordFetcher)
