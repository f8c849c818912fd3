"""Tests for the I18nService translation lookup and fallback."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from placesearch.i18n import I18nService

LOCALES_DIR = Path(__file__).resolve().parents[1] / "placesearch" / "i18n" / "locales"


def test_gettext_returns_translated_string(tmp_path: Path):
    locale_dir = tmp_path / "locales"
    locale_dir.mkdir()
    (locale_dir / "en.json").write_text('{"greet": "Hello {name}"}', encoding="utf-8")
    service = I18nService(locales_path=locale_dir, default_locale="en")

    text = service.gettext("greet", name="World")
    assert text == "Hello World"


def test_gettext_falls_back_to_default(tmp_path: Path):
    locale_dir = tmp_path / "locales"
    locale_dir.mkdir()
    (locale_dir / "en.json").write_text('{"greet": "Hello"}', encoding="utf-8")
    service = I18nService(locales_path=locale_dir, default_locale="en")

    assert service.gettext("greet", locale="es") == "Hello"
    assert service.gettext("missing.key") == "missing.key"


@pytest.mark.parametrize("locale", ["ar", "es"])
def test_bundled_locales_cover_every_english_key(locale):
    english = json.loads((LOCALES_DIR / "en.json").read_text(encoding="utf-8"))
    other = json.loads((LOCALES_DIR / f"{locale}.json").read_text(encoding="utf-8"))

    assert set(other) == set(english)


def test_bundled_locales_are_loaded_by_default():
    service = I18nService()

    assert service.gettext("search.placeholder", locale="es") == "Buscar lugar..."
    assert service.gettext("search.placeholder", locale="ar") == "ابحث عن مكان..."


@pytest.mark.parametrize(
    "locale, expected",
    [("en", "1,234,567"), ("es", "1.234.567"), ("ar", "1٬234٬567")],
)
def test_format_number_uses_locale_separator(locale, expected):
    assert I18nService().format_number(1234567, locale=locale) == expected


def test_format_number_defaults_to_comma(tmp_path: Path):
    service = I18nService(locales_path=tmp_path, default_locale="en")

    assert service.format_number(1000) == "1,000"


def test_instances_keep_their_own_tables(tmp_path: Path):
    first_dir = tmp_path / "first"
    second_dir = tmp_path / "second"
    first_dir.mkdir()
    second_dir.mkdir()
    (first_dir / "en.json").write_text('{"greet": "Hello"}', encoding="utf-8")
    (second_dir / "en.json").write_text('{"greet": "Howdy"}', encoding="utf-8")

    first = I18nService(locales_path=first_dir)
    second = I18nService(locales_path=second_dir)

    assert first.gettext("greet") == "Hello"
    assert second.gettext("greet") == "Howdy"
    assert first.gettext("greet") == "Hello"


def test_locale_file_is_read_once(tmp_path: Path):
    (tmp_path / "en.json").write_text('{"greet": "Hello"}', encoding="utf-8")
    service = I18nService(locales_path=tmp_path)

    assert service.gettext("greet") == "Hello"
    (tmp_path / "en.json").write_text('{"greet": "Changed"}', encoding="utf-8")

    assert service.gettext("greet") == "Hello"
