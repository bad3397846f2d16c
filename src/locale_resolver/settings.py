"""ResolverSettings: deployment-level defaults read from the environment.

Environment variables:
- ``TN_LANGUAGE_CODE_KEY``: field holding a variant's language code
  (default ``"languages_code"``).
- ``TN_TRANSLATION_KEYS``: JSON translation key set, e.g.
  ``{"default": ["translations"], "posts": ["content_translations"]}``
  (default ``{"default": ["translations"]}``).

Locale and fallback locale are per request and are NOT settings; they come
from ``locale_context_from_request()`` in the integrations subpackage.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from locale_resolver.config import (
    ResolverConfig,
    TranslationKeySet,
    default_translation_key_set,
    freeze_translation_key_set,
    parse_translation_key_set,
)

__all__ = ["ResolverSettings"]

ENV_LANGUAGE_CODE_KEY = "TN_LANGUAGE_CODE_KEY"
ENV_TRANSLATION_KEYS = "TN_TRANSLATION_KEYS"


@dataclass(frozen=True, slots=True)
class ResolverSettings:
    """Immutable deployment settings.

    Attributes:
        language_code_key: Field holding a variant's language code.
        translation_key_set: Level name -> translation field names.
        skip_collection_marker: Collections whose name contains this marker
            are system collections and are passed through untouched.
    """

    language_code_key: str = "languages_code"
    translation_key_set: TranslationKeySet = field(
        default_factory=default_translation_key_set
    )
    skip_collection_marker: str = "directus_"

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "translation_key_set",
            freeze_translation_key_set(self.translation_key_set),
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ResolverSettings:
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Empty variables count as unset.

        Raises:
            ValueError: If ``TN_TRANSLATION_KEYS`` is not a valid key set.
        """
        env = os.environ if environ is None else environ
        language_code_key = env.get(ENV_LANGUAGE_CODE_KEY) or "languages_code"
        raw_keys = env.get(ENV_TRANSLATION_KEYS)
        key_set = (
            parse_translation_key_set(raw_keys)
            if raw_keys
            else default_translation_key_set()
        )
        return cls(language_code_key=language_code_key, translation_key_set=key_set)

    def resolver_config(
        self, locale: str, fallback_locale: str | None = None
    ) -> ResolverConfig:
        """Return the config used for one request's items-read filter."""
        return ResolverConfig(
            locale=locale,
            fallback_locale=fallback_locale,
            language_code_key=self.language_code_key,
            translation_key_set=self.translation_key_set,
            keep_join_id_field=True,
            replace_fields_overlapping_key_name=False,
            remove_source_collection_field=True,
        )

    def should_skip(self, collection: str) -> bool:
        """True for system collections that are never localized."""
        return bool(self.skip_collection_marker) and (
            self.skip_collection_marker in collection
        )
