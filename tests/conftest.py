"""Shared test fixtures for SuperHeader tests."""

from collections.abc import Mapping
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from superheader.fetch import FakeRecordFetcher
from superheader.templating import ResolutionContext


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def console() -> Console:
    return Console(
        width=120,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )


@pytest.fixture
def mock_logger() -> MagicMock:
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.warning = MagicMock()
    return logger


@pytest.fixture
def fetcher() -> FakeRecordFetcher:
    return FakeRecordFetcher()


@pytest.fixture
def article() -> Mapping[str, object]:
    """A saved article with a many-to-one author and a one-to-many tags list."""
    return {
        "id": 12,
        "title": "Launch notes",
        "slug": "launch-notes",
        "published": True,
        "rating": 4.5,
        "editor": None,
        "author": {"id": "7", "name": "Sam", "team": {"id": 3, "name": "Docs"}},
        "tags": [{"id": 1, "name": "news"}, {"id": 2, "name": "release"}],
    }


@pytest.fixture
def saved_context() -> ResolutionContext:
    return ResolutionContext(
        collection="articles",
        record_id="12",
        current_values={"id": 12, "title": "Launch notes (unsaved edit)"},
    )
