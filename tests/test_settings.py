"""Tests for ResolverSettings.

Covers:
- Defaults when the environment is empty
- TN_LANGUAGE_CODE_KEY / TN_TRANSLATION_KEYS parsing
- Invalid TN_TRANSLATION_KEYS raises ValueError
- resolver_config() carries deployment values and per-request locales
- should_skip() for system collections
"""

from __future__ import annotations

import pytest

from locale_resolver.settings import ResolverSettings


class TestFromEnv:
    def test_defaults(self) -> None:
        settings = ResolverSettings.from_env({})
        assert settings.language_code_key == "languages_code"
        assert dict(settings.translation_key_set) == {"default": ("translations",)}

    def test_language_code_key(self) -> None:
        settings = ResolverSettings.from_env({"TN_LANGUAGE_CODE_KEY": "lang"})
        assert settings.language_code_key == "lang"

    def test_empty_values_count_as_unset(self) -> None:
        settings = ResolverSettings.from_env(
            {"TN_LANGUAGE_CODE_KEY": "", "TN_TRANSLATION_KEYS": ""}
        )
        assert settings == ResolverSettings()

    def test_translation_keys(self) -> None:
        settings = ResolverSettings.from_env(
            {"TN_TRANSLATION_KEYS": '{"default": ["t"], "posts": ["c_t"]}'}
        )
        assert dict(settings.translation_key_set) == {
            "default": ("t",),
            "posts": ("c_t",),
        }

    def test_invalid_translation_keys(self) -> None:
        with pytest.raises(ValueError, match="not valid JSON"):
            ResolverSettings.from_env({"TN_TRANSLATION_KEYS": "translations"})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TN_LANGUAGE_CODE_KEY", "code")
        monkeypatch.delenv("TN_TRANSLATION_KEYS", raising=False)
        assert ResolverSettings.from_env().language_code_key == "code"


class TestResolverConfig:
    def test_carries_settings_and_locales(self) -> None:
        settings = ResolverSettings(
            language_code_key="lang",
            translation_key_set={"default": ["t"]},
        )
        config = settings.resolver_config("fr-FR", "en-US")
        assert config.locale == "fr-FR"
        assert config.fallback_locale == "en-US"
        assert config.language_code_key == "lang"
        assert dict(config.translation_key_set) == {"default": ("t",)}

    def test_hook_flags(self) -> None:
        config = ResolverSettings().resolver_config("en-US")
        assert config.keep_join_id_field is True
        assert config.replace_fields_overlapping_key_name is False
        assert config.remove_source_collection_field is True
        assert config.fallback_locale is None


class TestShouldSkip:
    @pytest.mark.parametrize(
        ("collection", "expected"),
        [
            ("directus_users", True),
            ("app_directus_log", True),
            ("articles", False),
        ],
    )
    def test_default_marker(self, collection: str, expected: bool) -> None:
        assert ResolverSettings().should_skip(collection) is expected

    def test_empty_marker_skips_nothing(self) -> None:
        settings = ResolverSettings(skip_collection_marker="")
        assert settings.should_skip("directus_users") is False
