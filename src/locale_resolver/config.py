"""ResolverConfig: immutable configuration for the localization resolver.

ResolverConfig is a frozen (immutable) dataclass holding every knob the
resolver reads during a walk.  Instead of mutating a config in place, use
``evolve()`` / ``with_locale()`` / ``with_translation_keys()``, which return a
new instance and leave the original untouched.

The translation key set maps a *descent level* (the field name under which
the walk currently operates, or ``"default"`` for the root) to the ordered
field names that hold translation collections on records reached at that
level::

    {"default": ["translations"], "posts": ["content_translations"]}
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

__all__ = [
    "DEFAULT_LEVEL",
    "ResolverConfig",
    "TranslationKeySet",
    "default_translation_key_set",
    "freeze_translation_key_set",
    "parse_translation_key_set",
]

DEFAULT_LEVEL = "default"

# Read-only level name -> ordered translation field names.
TranslationKeySet = Mapping[str, tuple[str, ...]]


def default_translation_key_set() -> TranslationKeySet:
    return MappingProxyType({DEFAULT_LEVEL: ("translations",)})


def freeze_translation_key_set(raw: Any) -> TranslationKeySet:
    """Validate ``raw`` and copy it into a read-only mapping of tuples."""
    if not isinstance(raw, Mapping):
        msg = f"translation_key_set must be a mapping, got {type(raw).__name__}"
        raise ValueError(msg)

    frozen: dict[str, tuple[str, ...]] = {}
    for level, keys in raw.items():
        if not isinstance(level, str):
            msg = f"translation_key_set levels must be strings, got {level!r}"
            raise ValueError(msg)
        # A bare string would silently iterate per character.
        if isinstance(keys, str) or not isinstance(keys, (list, tuple)):
            msg = (
                f"translation_key_set[{level!r}] must be a list of field names, "
                f"got {keys!r}"
            )
            raise ValueError(msg)
        for key in keys:
            if not isinstance(key, str):
                msg = f"translation_key_set[{level!r}] contains non-string {key!r}"
                raise ValueError(msg)
        frozen[level] = tuple(keys)
    return MappingProxyType(frozen)


def parse_translation_key_set(raw: str | bytes) -> TranslationKeySet:
    """Parse a serialized (JSON) translation key set.

    Args:
        raw: JSON text such as ``'{"default": ["translations"]}'``.

    Returns:
        A validated, read-only mapping of level name to field-name tuple.

    Raises:
        ValueError: If ``raw`` is not valid JSON or does not have the
            ``{level: [field, ...]}`` shape.
    """
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError as exc:
        msg = f"translation key set is not valid JSON: {exc.msg}"
        raise ValueError(msg) from exc
    return freeze_translation_key_set(decoded)


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable configuration for ``LocalizationResolver``.

    Attributes:
        locale: Requested locale, matched under the normalization policy.
        fallback_locale: Locale used when no variant matches ``locale``.
            Matched by exact equality.  ``None`` disables fallback.
        language_code_key: Field on each variant holding its language code.
        translation_key_set: Level name -> translation field names.
        keep_join_id_field: When False, the variant's ``join_id_key`` field
            is not merged into the parent record.
        replace_fields_overlapping_key_name: When True, after a merge every
            result field whose name is a substring of the translation field
            name is removed.
        remove_source_collection_field: When True, a resolved translation
            field is removed from the output.  Unresolved ones are always
            removed.
        use_generic_locale_match: When True, normalized codes collapse to a
            language prefix (``"en-US"`` and ``"en-GB"`` both match ``"en"``).
        join_id_key: Name of the join row id field on a variant.
    """

    locale: str = "en-US"
    fallback_locale: str | None = None
    language_code_key: str = "languages_code"
    translation_key_set: TranslationKeySet = field(
        default_factory=default_translation_key_set
    )
    keep_join_id_field: bool = True
    replace_fields_overlapping_key_name: bool = False
    remove_source_collection_field: bool = True
    use_generic_locale_match: bool = False
    join_id_key: str = "id"

    def __post_init__(self) -> None:
        if not isinstance(self.locale, str):
            msg = f"locale must be a string, got {self.locale!r}"
            raise ValueError(msg)
        if self.fallback_locale is not None and not isinstance(
            self.fallback_locale, str
        ):
            msg = (
                "fallback_locale must be a string or None, "
                f"got {self.fallback_locale!r}"
            )
            raise ValueError(msg)
        if not isinstance(self.language_code_key, str) or not self.language_code_key:
            msg = (
                "language_code_key must be a non-empty string, "
                f"got {self.language_code_key!r}"
            )
            raise ValueError(msg)
        if not isinstance(self.join_id_key, str) or not self.join_id_key:
            msg = f"join_id_key must be a non-empty string, got {self.join_id_key!r}"
            raise ValueError(msg)
        object.__setattr__(
            self,
            "translation_key_set",
            freeze_translation_key_set(self.translation_key_set),
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def active_keys(self, level: str) -> tuple[str, ...]:
        """Return the translation field names for records reached at ``level``.

        Falls back to the ``"default"`` entry when ``level`` has none, and to
        an empty tuple when neither exists.
        """
        keys = self.translation_key_set.get(level)
        if keys is None:
            keys = self.translation_key_set.get(DEFAULT_LEVEL, ())
        return keys

    # ------------------------------------------------------------------
    # Builders (each returns a new instance)
    # ------------------------------------------------------------------

    def evolve(self, **changes: Any) -> ResolverConfig:
        """Return a copy with ``changes`` applied (validated again)."""
        return dataclasses.replace(self, **changes)

    def with_locale(
        self, locale: str, fallback_locale: str | None = None
    ) -> ResolverConfig:
        return self.evolve(locale=locale, fallback_locale=fallback_locale)

    def with_translation_keys(
        self, translation_key_set: Mapping[str, Any]
    ) -> ResolverConfig:
        return self.evolve(translation_key_set=translation_key_set)
