"""Search-as-you-type orchestration: debounce, dispatch, reconcile."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Callable

from placesearch.config import SearchSettings
from placesearch.domain.models import (
    DisplayResult,
    ErrorKind,
    Language,
    SearchMetadata,
    SearchQuery,
    SearchResponse,
    SearchStatus,
    SearchViewState,
)
from placesearch.i18n import I18nService
from placesearch.logging import logger
from placesearch.services.debounce import Debouncer
from placesearch.services.exceptions import NetworkError
from placesearch.services.normalizer import normalize_all
from placesearch.services.query import QueryNormalizer, TooShort
from placesearch.services.search import SearchService

GENERIC_ERROR_KEY = "search.error.generic"
CONNECTIVITY_ERROR_KEY = "search.error.connectivity"

StateListener = Callable[[SearchViewState], Any]
SelectHandler = Callable[[DisplayResult], Any]


@dataclass(frozen=True, slots=True)
class RequestToken:
    """Input state a request was issued for."""

    generation: int
    query: str
    language: Language


class SearchController:
    """Owns the single ``SearchViewState`` and every write to it.

    ``set_query`` and ``set_language`` are the user-facing entry points and
    must run inside the event loop. A response is applied only while its
    ``RequestToken`` is still the active one; anything older is dropped.
    """

    def __init__(
        self,
        service: SearchService,
        *,
        settings: SearchSettings | None = None,
        i18n: I18nService | None = None,
        language: Language | str = Language.EN,
        debouncer: Debouncer | None = None,
        on_select: SelectHandler | None = None,
    ) -> None:
        self._service = service
        self._settings = settings or SearchSettings()
        self._i18n = i18n or I18nService()
        self._query_normalizer = QueryNormalizer(self._settings.min_query_length)
        self._debouncer = debouncer or Debouncer(self._settings.debounce_ms)
        self._on_select = on_select
        self._listeners: list[StateListener] = []
        self._inflight: set[asyncio.Task[None]] = set()
        self._generation = 0
        self._active_token: RequestToken | None = None
        self._closed = False
        self._state = SearchViewState(
            language=Language(language),
            min_query_length=self._settings.min_query_length,
        )

    @property
    def state(self) -> SearchViewState:
        return self._state

    @property
    def active_token(self) -> RequestToken | None:
        return self._active_token

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register ``listener`` for every new state; returns the unsubscribe call."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def set_query(self, text: str) -> None:
        text = text or ""
        if text == self._state.query:
            return
        self._apply_input(text, self._state.language)

    def set_language(self, language: Language | str) -> None:
        language = Language(language)
        if language == self._state.language:
            return
        self._apply_input(self._state.query, language)

    def select_result(self, result: DisplayResult) -> None:
        logger.info("result_selected", result_id=result.id, source=result.source)
        if self._on_select is not None:
            self._on_select(result)

    async def drain(self) -> None:
        """Wait until no timer is pending and no request is in flight."""

        while True:
            pending = self._debouncer.pending
            if pending is not None:
                await pending.wait()
                continue
            if self._inflight:
                await asyncio.gather(*list(self._inflight), return_exceptions=True)
                continue
            return

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._active_token = None
        self._debouncer.close()
        tasks = list(self._inflight)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._listeners.clear()

    def _apply_input(self, query: str, language: Language) -> None:
        if self._closed:
            raise RuntimeError("SearchController is closed")

        self._generation += 1
        verdict = self._query_normalizer.accept(query)
        if isinstance(verdict, TooShort):
            self._active_token = None
            self._debouncer.cancel()
            self._publish(
                SearchViewState(
                    query=query,
                    language=language,
                    status=SearchStatus.IDLE,
                    min_query_length=self._settings.min_query_length,
                )
            )
            return

        token = RequestToken(self._generation, verdict.text, language)
        self._active_token = token
        self._publish(
            self._state.model_copy(
                update={
                    "query": query,
                    "language": language,
                    "status": SearchStatus.PENDING,
                    "loading": True,
                    "error": None,
                    "error_kind": None,
                }
            )
        )
        self._debouncer.schedule(self._fire, token)
        logger.debug(
            "search_scheduled",
            generation=token.generation,
            query=token.query,
            language=token.language.value,
            delay_ms=self._debouncer.delay_ms,
        )

    def _fire(self, token: RequestToken) -> None:
        if self._closed or token != self._active_token:
            return
        query = SearchQuery(
            text=token.query,
            language=token.language,
            page_size=self._settings.page_size,
        )
        task = asyncio.get_running_loop().create_task(self._run_search(token, query))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    async def _run_search(self, token: RequestToken, query: SearchQuery) -> None:
        logger.info(
            "search_request",
            generation=token.generation,
            query=query.text,
            language=query.language.value,
            size=query.page_size,
        )
        try:
            response = await self._service.search(query)
        except NetworkError as exc:
            logger.warning("search_failed", kind=ErrorKind.CONNECTIVITY.value, error=str(exc))
            self._settle_failure(token, ErrorKind.CONNECTIVITY, None)
            return
        except Exception:
            logger.exception("search_client_error", generation=token.generation)
            self._settle_failure(token, ErrorKind.CONNECTIVITY, None)
            return

        if response.success:
            self._settle_success(token, response)
        else:
            logger.warning("search_failed", kind=ErrorKind.LOGICAL.value, error=response.error)
            self._settle_failure(token, ErrorKind.LOGICAL, response.error)

    def _settle_success(self, token: RequestToken, response: SearchResponse) -> None:
        if self._is_stale(token):
            return
        results = normalize_all(response.results)
        self._publish(
            self._state.model_copy(
                update={
                    "status": SearchStatus.WITH_RESULTS if results else SearchStatus.EMPTY,
                    "results": results,
                    "metadata": SearchMetadata.from_response(response),
                    "loading": False,
                    "error": None,
                    "error_kind": None,
                }
            )
        )
        logger.info(
            "search_settled",
            generation=token.generation,
            results=len(results),
            total=response.total,
        )

    def _settle_failure(self, token: RequestToken, kind: ErrorKind, message: str | None) -> None:
        if self._is_stale(token):
            return
        if kind is ErrorKind.CONNECTIVITY:
            message = self._i18n.gettext(CONNECTIVITY_ERROR_KEY, locale=token.language.value)
        elif not message:
            message = self._i18n.gettext(GENERIC_ERROR_KEY, locale=token.language.value)
        self._publish(
            self._state.model_copy(
                update={
                    "status": SearchStatus.FAILED,
                    "results": (),
                    "metadata": None,
                    "loading": False,
                    "error": message,
                    "error_kind": kind,
                }
            )
        )

    def _is_stale(self, token: RequestToken) -> bool:
        if token == self._active_token and not self._closed:
            return False
        logger.debug(
            "search_response_stale",
            generation=token.generation,
            query=token.query,
            current_generation=self._generation,
        )
        return True

    def _publish(self, state: SearchViewState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("search_listener_failed", status=state.status.value)


__all__ = [
    "CONNECTIVITY_ERROR_KEY",
    "GENERIC_ERROR_KEY",
    "RequestToken",
    "SearchController",
]
