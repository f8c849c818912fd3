"""Shared pytest fixtures and fake search services."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
import pytest_asyncio

from placesearch.config import SearchSettings
from placesearch.domain.models import SearchQuery, SearchResponse
from placesearch.i18n import I18nService
from placesearch.services.controller import SearchController


def make_response(results: list[dict[str, Any]] | None = None, **overrides: Any) -> SearchResponse:
    payload: dict[str, Any] = {
        "success": True,
        "results": results or [],
        "total": len(results or []),
        "responseTime": 12,
        "source": "elasticsearch",
        "metadata": {},
    }
    payload.update(overrides)
    return SearchResponse.model_validate(payload)


class ScriptedSearchService:
    """Answers immediately with the next scripted outcome (response or exception)."""

    def __init__(self, *outcomes: SearchResponse | BaseException) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[SearchQuery] = []

    async def search(self, query: SearchQuery) -> SearchResponse:
        self.calls.append(query)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class DeferredSearchService:
    """Keeps every request open until the test resolves its future."""

    def __init__(self) -> None:
        self.calls: list[SearchQuery] = []
        self.futures: list[asyncio.Future[SearchResponse]] = []

    async def search(self, query: SearchQuery) -> SearchResponse:
        future: asyncio.Future[SearchResponse] = asyncio.get_running_loop().create_future()
        self.calls.append(query)
        self.futures.append(future)
        return await future

    def resolve(self, index: int, response: SearchResponse) -> None:
        self.futures[index].set_result(response)

    def fail(self, index: int, exc: BaseException) -> None:
        self.futures[index].set_exception(exc)


async def wait_for_calls(service: Any, count: int, timeout: float = 1.0) -> None:
    async def _poll() -> None:
        while len(service.calls) < count:
            await asyncio.sleep(0.001)

    await asyncio.wait_for(_poll(), timeout)


async def settle(rounds: int = 5) -> None:
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture
def search_settings() -> SearchSettings:
    return SearchSettings(debounce_ms=10)


@pytest.fixture
def i18n() -> I18nService:
    return I18nService()


@pytest_asyncio.fixture
async def controller_factory(search_settings, i18n):
    created: list[SearchController] = []

    def _build(service, **kwargs) -> SearchController:
        kwargs.setdefault("settings", search_settings)
        kwargs.setdefault("i18n", i18n)
        controller = SearchController(service, **kwargs)
        created.append(controller)
        return controller

    yield _build

    for controller in created:
        await controller.aclose()
