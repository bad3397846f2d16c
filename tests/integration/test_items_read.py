"""Integration tests for the items-read filter adapter.

Covers:
- locale_context_from_request(): GET reads the query, other methods the body
- ItemsReadFilter skips system collections and requests without a locale
- ItemsReadFilter localizes with deployment settings and request locales
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from locale_resolver.integrations import (
    ItemsReadFilter,
    LocaleContext,
    locale_context_from_request,
)
from locale_resolver.settings import ResolverSettings


def _items() -> list[dict[str, Any]]:
    return [
        {
            "id": 1,
            "translations": [
                {"id": 10, "languages_code": "en-US", "title": "Hi"},
                {"id": 11, "languages_code": "fr-FR", "title": "Salut"},
            ],
        }
    ]


# ---------------------------------------------------------------------------
# Request locale extraction
# ---------------------------------------------------------------------------


class TestLocaleContextFromRequest:
    def test_get_reads_query(self) -> None:
        context = locale_context_from_request(
            "GET",
            query={"locale": "fr-FR", "fallbackLocale": "en-US"},
            body={"locale": "de-DE"},
        )
        assert context == LocaleContext(locale="fr-FR", fallback_locale="en-US")

    def test_method_is_case_insensitive(self) -> None:
        context = locale_context_from_request("get", query={"locale": "fr-FR"})
        assert context.locale == "fr-FR"

    @pytest.mark.parametrize("method", ["POST", "PATCH", "SEARCH"])
    def test_other_methods_read_body(self, method: str) -> None:
        context = locale_context_from_request(
            method, query={"locale": "fr-FR"}, body={"locale": "de-DE"}
        )
        assert context.locale == "de-DE"
        assert context.fallback_locale is None

    @pytest.mark.parametrize("body", [None, "locale=fr-FR", ["fr-FR"]])
    def test_non_mapping_body_yields_no_locale(self, body: Any) -> None:
        assert locale_context_from_request("POST", body=body) == LocaleContext()

    def test_non_string_values_ignored(self) -> None:
        context = locale_context_from_request(
            "GET", query={"locale": ["fr-FR"], "fallbackLocale": 1}
        )
        assert context == LocaleContext()

    def test_missing_query(self) -> None:
        assert locale_context_from_request("GET") == LocaleContext()


# ---------------------------------------------------------------------------
# ItemsReadFilter
# ---------------------------------------------------------------------------


class TestItemsReadFilter:
    def test_localizes_payload(self) -> None:
        out = ItemsReadFilter()(_items(), "articles", LocaleContext(locale="fr-FR"))
        assert out == [{"id": 11, "languages_code": "fr-FR", "title": "Salut"}]

    def test_uses_fallback_locale(self) -> None:
        context = LocaleContext(locale="de-DE", fallback_locale="en-US")
        out = ItemsReadFilter()(_items(), "articles", context)
        assert out[0]["title"] == "Hi"

    def test_system_collection_passed_through(self) -> None:
        payload = _items()
        out = ItemsReadFilter()(payload, "directus_users", LocaleContext("fr-FR"))
        assert out is payload

    @pytest.mark.parametrize("context", [None, LocaleContext(), LocaleContext("")])
    def test_no_locale_passed_through(self, context: LocaleContext | None) -> None:
        payload = _items()
        assert ItemsReadFilter()(payload, "articles", context) is payload

    def test_settings_language_code_key(self) -> None:
        settings = ResolverSettings(language_code_key="lang")
        payload = {"translations": [{"lang": "fr-FR", "title": "Salut"}]}
        out = ItemsReadFilter(settings)(payload, "articles", LocaleContext("fr-FR"))
        assert out == {"lang": "fr-FR", "title": "Salut"}

    def test_settings_per_level_keys(self) -> None:
        settings = ResolverSettings.from_env(
            {"TN_TRANSLATION_KEYS": '{"default": [], "posts": ["t"]}'}
        )
        payload = {"posts": [{"t": [{"languages_code": "en-US", "body": "x"}]}]}
        out = ItemsReadFilter(settings)(payload, "blogs", LocaleContext("en-US"))
        assert out == {"posts": [{"languages_code": "en-US", "body": "x"}]}

    def test_collection_name_coerced_to_string(self) -> None:
        out = ItemsReadFilter()(_items(), 42, LocaleContext("fr-FR"))  # type: ignore[arg-type]
        assert out[0]["title"] == "Salut"

    def test_skip_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="locale_resolver"):
            ItemsReadFilter()(_items(), "directus_files", LocaleContext("fr-FR"))
        assert "directus_files" in caplog.text

    def test_settings_property(self) -> None:
        settings = ResolverSettings()
        assert ItemsReadFilter(settings).settings is settings
