from placesearch.domain.models import (
    DisplayResult,
    ErrorKind,
    GooglePlaceResult,
    IndexedResult,
    Language,
    RawResult,
    ResultIcon,
    SearchMetadata,
    SearchQuery,
    SearchResponse,
    SearchStatus,
    SearchViewState,
)

__all__ = [
    "DisplayResult",
    "ErrorKind",
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
