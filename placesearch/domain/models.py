"""Pydantic models shared by the search client, controller and presentation."""

from __future__ import annotations

import math
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Discriminator, Field, Tag, field_validator

GOOGLE_PLACES_SOURCE = "google_places"
DEFAULT_TYPE_BADGE = "poi"


class Language(str, Enum):
    EN = "en"
    AR = "ar"
    ES = "es"


class ResultIcon(str, Enum):
    """Icon category of a result; ``glyph`` is what gets drawn."""

    POI = "poi"
    AIRPORT = "airport"
    HOTEL = "hotel"
    PIN = "pin"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {
    ResultIcon.POI: "\U0001f4cd",
    ResultIcon.AIRPORT: "✈️",
    ResultIcon.HOTEL: "\U0001f3e8",
    ResultIcon.PIN: "\U0001f4cd",
}


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def _as_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


# Record fields degrade to None instead of failing the whole response.
LenientText = Annotated[str | None, BeforeValidator(_as_text)]
LenientFloat = Annotated[float | None, BeforeValidator(_as_float)]


class SearchQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1)
    language: Language = Language.EN
    page_size: int = Field(default=10, gt=0)


class _RawResultBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    secondary_name: LenientText = Field(default=None, alias="secondaryName")
    type: LenientText = None
    iata: LenientText = None
    lat: LenientFloat = None
    lng: LenientFloat = None


class GooglePlaceResult(_RawResultBase):
    """Third-party place hit proxied by the search service."""

    source: Literal["google_places"] = GOOGLE_PLACES_SOURCE
    placename_en: LenientText = Field(default=None, alias="placenameEN")
    description: LenientText = None
    place_id: LenientText = None


class IndexedResult(_RawResultBase):
    """Hit from the service's own index (hotels, airports, POIs)."""

    source: LenientText = "elasticsearch"
    primary_name: LenientText = Field(default=None, alias="primaryName")
    id: LenientText = Field(default=None, alias="_id")
    score: LenientFloat = None


def _result_tag(value: Any) -> str:
    if isinstance(value, dict):
        source = value.get("source")
    else:
        source = getattr(value, "source", None)
    return "google" if source == GOOGLE_PLACES_SOURCE else "indexed"


RawResult = Annotated[
    Union[
        Annotated[GooglePlaceResult, Tag("google")],
        Annotated[IndexedResult, Tag("indexed")],
    ],
    Discriminator(_result_tag),
]


class SearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    success: bool = False
    results: list[RawResult] = Field(default_factory=list)
    total: int = 0
    response_time: Any = Field(default=None, alias="responseTime")
    source: LenientText = None
    metadata: dict[str, Any] | None = None
    error: LenientText = None

    @field_validator("success", mode="before")
    @classmethod
    def _missing_flag_is_failure(cls, value):
        return False if value is None else value

    @field_validator("results", mode="before")
    @classmethod
    def _keep_records(cls, value):
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, dict)]

    @field_validator("total", mode="before")
    @classmethod
    def _total_or_zero(cls, value):
        number = _as_float(value)
        return int(number) if number is not None else 0

    @field_validator("metadata", mode="before")
    @classmethod
    def _metadata_object(cls, value):
        return value if isinstance(value, dict) else None


class DisplayResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    icon: ResultIcon
    primary_label: str
    secondary_label: str | None = None
    type_badge: str = DEFAULT_TYPE_BADGE
    iata_code: str | None = None
    has_coordinates: bool = False
    source: str | None = None


class SearchMetadata(BaseModel):
    """Summary of a successful response; ``metadata`` is passed through untouched."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    response_time: Any = None
    source: str | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_response(cls, response: SearchResponse) -> "SearchMetadata":
        return cls(
            total=response.total,
            response_time=response.response_time,
            source=response.source,
            metadata=response.metadata,
        )

    @property
    def google_search_called(self) -> bool:
        google_search = (self.metadata or {}).get("googleSearch")
        return isinstance(google_search, dict) and bool(google_search.get("called"))

    @property
    def google_trigger(self) -> bool | None:
        trigger = (self.metadata or {}).get("googleTrigger")
        if not isinstance(trigger, dict):
            return None
        return bool(trigger.get("trigger"))


class SearchStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    WITH_RESULTS = "with_results"
    EMPTY = "empty"
    FAILED = "failed"


class ErrorKind(str, Enum):
    LOGICAL = "logical"
    CONNECTIVITY = "connectivity"


class SearchViewState(BaseModel):
    """Snapshot of what the presentation layer shows.

    Instances are immutable; the controller publishes a new one per transition.
    """

    model_config = ConfigDict(frozen=True)

    query: str = ""
    language: Language = Language.EN
    status: SearchStatus = SearchStatus.IDLE
    results: tuple[DisplayResult, ...] = ()
    metadata: SearchMetadata | None = None
    loading: bool = False
    error: str | None = None
    error_kind: ErrorKind | None = None
    min_query_length: int = 3

    @property
    def show_no_results(self) -> bool:
        return (
            not self.results
            and len(self.query.strip()) >= self.min_query_length
            and not self.loading
            and self.error is None
        )


__all__ = [
    "DEFAULT_TYPE_BADGE",
    "DisplayResult",
    "ErrorKind",
    "GOOGLE_PLACES_SOURCE",
    "GooglePlaceResult",
    "IndexedResult",
    "Language",
    "RawResult",
    "ResultIcon",
    "SearchMetadata",
    "SearchQuery",
    "SearchResponse",
    "SearchStatus",
    "SearchViewState",
]
