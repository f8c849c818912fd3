"""Terminal entrypoint: type a query per line, see the rendered results."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

import httpx

from placesearch.config import get_settings
from placesearch.i18n import I18nService
from placesearch.logging import configure_logging, logger
from placesearch.presentation import placeholder, render_state
from placesearch.services.controller import SearchController
from placesearch.services.search import PlaceSearchClient

LineReader = Callable[[str], Awaitable[str | None]]
LineWriter = Callable[[str], None]

QUIT_COMMANDS = {":quit", ":exit"}
LANGUAGE_COMMAND = ":lang"


async def _read_stdin_line(prompt: str) -> str | None:
    try:
        return await asyncio.to_thread(input, prompt)
    except EOFError:
        return None


async def run_repl(
    controller: SearchController,
    i18n: I18nService,
    *,
    read_line: LineReader = _read_stdin_line,
    write: LineWriter = print,
) -> None:
    while True:
        line = await read_line(f"{placeholder(i18n, controller.state.language)} ")
        if line is None:
            return
        command = line.strip()
        if command in QUIT_COMMANDS:
            return
        if command.split(" ", 1)[0] == LANGUAGE_COMMAND:
            code = command[len(LANGUAGE_COMMAND):].strip()
            try:
                controller.set_language(code)
            except ValueError:
                write(f"Unknown language: {code!r}")
                continue
        else:
            controller.set_query(line)
        await controller.drain()
        for rendered in render_state(controller.state, i18n):
            write(rendered)


async def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    i18n = I18nService(default_locale=settings.default_language.value)

    async with httpx.AsyncClient() as http_client:
        client = PlaceSearchClient(http_client, settings.search)
        controller = SearchController(
            client,
            settings=settings.search,
            i18n=i18n,
            language=settings.default_language,
        )
        logger.info(
            "search_client_starting",
            environment=settings.environment,
            endpoint=settings.search.api_url(),
        )
        try:
            await run_repl(controller, i18n)
        finally:
            await controller.aclose()


def cli() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    cli()
