from __future__ import annotations

import pytest
from pydantic import ValidationError

from placesearch.config import SearchClientSettings, SearchSettings, get_settings
from placesearch.domain.models import Language


def test_defaults_match_documented_behaviour():
    settings = SearchSettings()

    assert settings.page_size == 10
    assert settings.min_query_length == 3
    assert settings.debounce_ms == 300
    assert settings.request_timeout_seconds is None
    assert settings.max_attempts == 1
    assert settings.api_url() == "https://place-name.onrender.com/api/search"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PLACES_ENVIRONMENT", "prod")
    monkeypatch.setenv("PLACES_DEFAULT_LANGUAGE", "ar")
    monkeypatch.setenv("PLACES_SEARCH__BASE_URL", "http://localhost:3000")
    monkeypatch.setenv("PLACES_SEARCH__PAGE_SIZE", "25")

    settings = SearchClientSettings(_env_file=None)

    assert settings.environment == "prod"
    assert settings.default_language is Language.AR
    assert settings.search.page_size == 25
    assert settings.search.api_url() == "http://localhost:3000/api/search"


def test_invalid_values_are_rejected():
    with pytest.raises(ValidationError):
        SearchSettings(page_size=0)
    with pytest.raises(ValidationError):
        SearchSettings(request_timeout_seconds=0)
    with pytest.raises(ValidationError):
        SearchClientSettings(_env_file=None, default_language="fr")


def test_get_settings_is_cached(monkeypatch):
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
