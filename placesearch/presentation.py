"""Plain-text rendering of ``SearchViewState`` in the state's language."""

from __future__ import annotations

from placesearch.domain.models import DisplayResult, Language, SearchViewState
from placesearch.i18n import I18nService

SPINNER = "⏳"
ERROR_MARK = "❌"
TRIGGER_ON = "✅"
TRIGGER_OFF = "❌"


def placeholder(i18n: I18nService, language: Language) -> str:
    return i18n.gettext("search.placeholder", locale=language.value)


def render_result(result: DisplayResult) -> str:
    parts = [f"{result.icon.glyph} {result.primary_label}"]
    if result.secondary_label:
        parts.append(result.secondary_label)
    parts.append(f"[{result.type_badge}]")
    if result.iata_code:
        parts.append(f"[{result.iata_code}]")
    return " ".join(parts)


def render_query_info(state: SearchViewState, i18n: I18nService) -> str:
    locale = state.language.value
    line = i18n.gettext(
        "search.query_info",
        locale=locale,
        query=state.query,
        length=len(state.query),
        language=locale.upper(),
    )
    trigger = state.metadata.google_trigger if state.metadata is not None else None
    if trigger is not None:
        indicator = TRIGGER_ON if trigger else TRIGGER_OFF
        line += " • " + i18n.gettext("search.google_trigger", locale=locale, indicator=indicator)
    return line


def render_state(state: SearchViewState, i18n: I18nService) -> list[str]:
    """Return the lines a terminal front-end prints for ``state``."""

    locale = state.language.value
    lines: list[str] = []
    if state.loading:
        lines.append(f"{SPINNER} {i18n.gettext('search.loading', locale=locale)}")
    if state.metadata is not None:
        count = i18n.format_number(state.metadata.total, locale=locale)
        lines.append(i18n.gettext("search.results.count", locale=locale, count=count))
    if state.error:
        lines.append(f"{ERROR_MARK} {state.error}")
    if state.show_no_results:
        lines.append(i18n.gettext("search.results.none", locale=locale, query=state.query))
    lines.extend(render_result(result) for result in state.results)
    if state.query:
        lines.append(render_query_info(state, i18n))
    return lines


__all__ = ["placeholder", "render_query_info", "render_result", "render_state"]
