"""HTTP client for the remote place-search endpoint."""

from __future__ import annotations

from typing import Protocol

import httpx
from pydantic import ValidationError

from placesearch.config import SearchSettings
from placesearch.domain.models import SearchQuery, SearchResponse
from placesearch.logging import logger
from placesearch.services.exceptions import NetworkError
from placesearch.utils.retry import retry_async


class SearchService(Protocol):
    """Anything the controller can ask for one page of results."""

    async def search(self, query: SearchQuery) -> SearchResponse: ...


class PlaceSearchClient:
    """``SearchService`` backed by ``GET {base_url}/api/search``.

    Returns the parsed body for every well-formed response, including
    ``success=false`` ones; raises ``NetworkError`` for everything else.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: SearchSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or SearchSettings()

    async def search(self, query: SearchQuery) -> SearchResponse:
        params = {
            "q": query.text,
            "lang": query.language.value,
            "size": query.page_size,
        }
        url = self._settings.api_url()

        async def _request() -> httpx.Response:
            return await self._client.get(
                url,
                params=params,
                timeout=self._settings.request_timeout_seconds,
            )

        try:
            response = await retry_async(
                _request,
                max_attempts=self._settings.max_attempts,
                base_delay=self._settings.retry_base_delay,
                retry_on=(httpx.TransportError,),
                logger=logger,
                operation_name="place_search_request",
            )
        except httpx.TimeoutException as exc:
            raise NetworkError(f"Search request timed out: {exc}") from exc
        except httpx.RequestError as exc:
            raise NetworkError(f"Search request failed: {exc}") from exc

        return self._parse(response)

    @staticmethod
    def _parse(response: httpx.Response) -> SearchResponse:
        status_code = response.status_code
        try:
            payload = response.json()
        except ValueError as exc:
            detail = response.text[:500]
            raise NetworkError(
                f"Search endpoint returned a non-JSON body ({status_code}): {detail}"
            ) from exc

        try:
            parsed = SearchResponse.model_validate(payload)
        except ValidationError as exc:
            raise NetworkError(
                f"Search endpoint returned an unexpected payload ({status_code}): "
                f"{exc.error_count()} validation errors"
            ) from exc

        if response.is_error:
            logger.warning(
                "search_http_error_body",
                status_code=status_code,
                success=parsed.success,
                error=parsed.error,
            )
        return parsed


__all__ = ["PlaceSearchClient", "SearchService"]
