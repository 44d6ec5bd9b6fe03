# pyright: reportAny=false
"""Record fetcher backed by the Directus items REST API."""

from collections.abc import Mapping, Sequence
from types import TracebackType
from typing import TYPE_CHECKING, Self, cast
from urllib.parse import quote

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from superheader.exceptions import RecordFetchError

if TYPE_CHECKING:
    from superheader.config import DirectusConfig

_RETRYABLE_ERRORS = (httpx.ConnectError, httpx.TimeoutException)


class DirectusRecordFetcher:
    """Fetch records with ``GET /items/{collection}/{id}``.

    The ``fields`` query parameter is passed through as given, so dotted
    paths such as ``author.name`` expand relations server-side.

    Example:
        >>> async with DirectusRecordFetcher.from_config(config.directus) as fetcher:
        ...     record = await fetcher.fetch_record("articles", "1", ["*", "author.name"])
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        retries: int = 3,
        owns_client: bool = False,
    ) -> None:
        """Initialize with an httpx client.

        Args:
            client: Client whose base URL points at the Directus instance.
            retries: Attempts for connection errors and timeouts.
            owns_client: Close the client when this fetcher is closed.
        """
        self._client: httpx.AsyncClient = client
        self._retries: int = retries
        self._owns_client: bool = owns_client

    @classmethod
    def from_config(cls, config: "DirectusConfig") -> Self:  # noqa: UP037
        """Create a fetcher with its own client from Directus settings.

        Args:
            config: Directus connection settings.

        Returns:
            A fetcher that closes its client on exit.
        """
        headers = {"Accept": "application/json"}
        if config.token:
            headers["Authorization"] = f"Bearer {config.token}"
        client = httpx.AsyncClient(
            base_url=config.url,
            headers=headers,
            timeout=config.timeout,
        )
        return cls(client, retries=config.retries, owns_client=True)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._owns_client:
            await self._client.aclose()

    async def _get(self, url: str, params: dict[str, str]) -> httpx.Response:
        @retry(
            retry=retry_if_exception_type(_RETRYABLE_ERRORS),
            stop=stop_after_attempt(self._retries),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=2),
            reraise=True,
        )
        async def _request() -> httpx.Response:
            return await self._client.get(url, params=params)

        return await _request()

    async def fetch_record(
        self,
        collection: str,
        record_id: str,
        fields: Sequence[str],
    ) -> Mapping[str, object] | None:
        """Fetch one item with the requested fields.

        Args:
            collection: Name of the collection.
            record_id: Primary key of the item.
            fields: Field selection, e.g. ``["*", "author.name"]``.

        Returns:
            The ``data`` member of the response, or None if it is null.

        Raises:
            RecordFetchError: On transport errors, error responses, or a
                malformed response body.
        """
        url = f"/items/{quote(collection, safe='')}/{quote(record_id, safe='')}"
        params = {"fields": ",".join(fields)}

        try:
            response = await self._get(url, params)
            _ = response.raise_for_status()
        except httpx.HTTPStatusError as e:
            msg = f"Directus returned {e.response.status_code} for {collection}/{record_id}"  # noqa: E501
            raise RecordFetchError(
                msg,
                collection=collection,
                record_id=record_id,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            msg = f"Request for {collection}/{record_id} failed: {e}"
            raise RecordFetchError(
                msg, collection=collection, record_id=record_id
            ) from e

        try:
            body = response.json()
        except ValueError as e:
            msg = f"Response for {collection}/{record_id} is not JSON"
            raise RecordFetchError(
                msg, collection=collection, record_id=record_id
            ) from e

        data = body.get("data") if isinstance(body, dict) else None
        if data is None and isinstance(body, dict) and "data" in body:
            return None
        if not isinstance(data, dict):
            msg = f"Response for {collection}/{record_id} has no data object"
            raise RecordFetchError(msg, collection=collection, record_id=record_id)
        return cast("dict[str, object]", data)
