"""LocaleMatcher: picks the locale variant that best matches a requested locale.

Normalization pipeline (applied in order):
1. Drop every character that is not an ASCII letter or digit.
2. Lowercase the remainder.
3. Generic mode only: truncate to 3 characters when the result is exactly
   5 long, otherwise to 2 (``"en-US"`` -> ``"enus"`` -> ``"en"``).

Primary matching compares normalized codes and returns the first variant in
input order that matches.  Fallback matching is exact on the raw value and
never normalized.

Example usage::

    matcher = LocaleMatcher()
    matcher.normalize("en-US")                 # "enus"
    LocaleMatcher(generic=True).normalize("en-GB")  # "en"
"""

from __future__ import annotations

import re
import threading
from collections.abc import Mapping, Sequence
from typing import Any

from cachetools import LRUCache

__all__ = ["LocaleMatcher"]

# Everything outside [A-Za-z0-9] is stripped.
_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


class LocaleMatcher:
    """Normalizes locale codes and finds matching variants.

    Each instance keeps its own bounded ``LRUCache`` of normalized codes, so
    the same code seen on thousands of variants is normalized once.  The
    cache is guarded by a lock; one matcher can serve concurrent walks.

    Args:
        language_code_key: Field on each variant holding its language code.
        generic: Collapse region-qualified codes to a language prefix.
        max_cache_size: Maximum number of memoized codes.  Defaults to 256.
    """

    def __init__(
        self,
        language_code_key: str = "languages_code",
        generic: bool = False,
        max_cache_size: int = 256,
    ) -> None:
        self.language_code_key = language_code_key
        self.generic = generic
        self._cache: LRUCache[str, str] = LRUCache(maxsize=max_cache_size)
        self._lock = threading.Lock()

    def normalize(self, code: Any) -> str:
        """Normalize a locale code.  Non-string codes normalize to ``""``."""
        if not isinstance(code, str):
            return ""
        with self._lock:
            cached = self._cache.get(code)
        if cached is not None:
            return cached

        normalized = _NON_ALNUM.sub("", code).lower()
        if self.generic:
            normalized = normalized[:3] if len(normalized) == 5 else normalized[:2]

        with self._lock:
            self._cache[code] = normalized
        return normalized

    def _code_of(self, variant: Any) -> Any:
        if not isinstance(variant, Mapping):
            return None
        return variant.get(self.language_code_key)

    def find_best_match(
        self, variants: Sequence[Any], locale: str
    ) -> Mapping[str, Any] | None:
        """Return the first variant whose normalized code equals ``locale``'s.

        Variants that are not records are skipped.  A variant without a
        language code normalizes to ``""`` and only matches an empty locale.
        """
        target = self.normalize(locale)
        for variant in variants:
            if not isinstance(variant, Mapping):
                continue
            if self.normalize(self._code_of(variant)) == target:
                return variant
        return None

    def find_exact(
        self, variants: Sequence[Any], locale: str
    ) -> Mapping[str, Any] | None:
        """Return the first variant whose raw language code equals ``locale``."""
        for variant in variants:
            if isinstance(variant, Mapping) and self._code_of(variant) == locale:
                return variant
        return None
