from placesearch.services.controller import RequestToken, SearchController
from placesearch.services.debounce import Debouncer, PendingCall
from placesearch.services.exceptions import NetworkError, ServiceError
from placesearch.services.normalizer import normalize, normalize_all
from placesearch.services.query import Eligible, QueryNormalizer, TooShort
from placesearch.services.search import PlaceSearchClient, SearchService

__all__ = [
    "Debouncer",
    "Eligible",
    "NetworkError",
    "PendingCall",
    "PlaceSearchClient",
    "QueryNormalizer",
    "RequestToken",
    "SearchController",
    "SearchService",
    "ServiceError",
    "TooShort",
    "normalize",
    "normalize_all",
]
