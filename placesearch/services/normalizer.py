"""Map source-specific result records onto one display shape."""

from __future__ import annotations

from typing import Iterable

from placesearch.domain.models import (
    DEFAULT_TYPE_BADGE,
    DisplayResult,
    GooglePlaceResult,
    IndexedResult,
    RawResult,
    ResultIcon,
)


def _clean(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _pick_icon(raw: RawResult) -> ResultIcon:
    if isinstance(raw, GooglePlaceResult):
        return ResultIcon.POI
    if raw.type == "airport":
        return ResultIcon.AIRPORT
    if raw.type == "hotel":
        return ResultIcon.HOTEL
    return ResultIcon.PIN


def _fallback_id(position: int | None) -> str:
    return str(position) if position is not None else ""


def normalize(raw: RawResult, position: int | None = None) -> DisplayResult:
    """Build the ``DisplayResult`` for one record.

    Missing optional fields turn into absent display fields; nothing here
    raises for a record that passed response parsing.
    """

    if isinstance(raw, GooglePlaceResult):
        return DisplayResult(
            id=_clean(raw.place_id) or _fallback_id(position),
            icon=_pick_icon(raw),
            primary_label=_clean(raw.placename_en) or _clean(raw.description) or "",
            secondary_label=_clean(raw.secondary_name),
            type_badge=_clean(raw.type) or DEFAULT_TYPE_BADGE,
            iata_code=_clean(raw.iata),
            has_coordinates=raw.lat is not None and raw.lng is not None,
            source=raw.source,
        )
    if isinstance(raw, IndexedResult):
        return DisplayResult(
            id=_clean(raw.id) or _fallback_id(position),
            icon=_pick_icon(raw),
            primary_label=_clean(raw.primary_name) or "",
            secondary_label=_clean(raw.secondary_name),
            type_badge=_clean(raw.type) or DEFAULT_TYPE_BADGE,
            iata_code=_clean(raw.iata),
            has_coordinates=raw.lat is not None and raw.lng is not None,
            source=raw.source,
        )
    raise TypeError(f"Unsupported result record: {type(raw).__name__}")


def normalize_all(results: Iterable[RawResult]) -> tuple[DisplayResult, ...]:
    """Normalize in response order; ranking belongs to the service."""

    return tuple(normalize(raw, position) for position, raw in enumerate(results))


__all__ = ["normalize", "normalize_all"]
