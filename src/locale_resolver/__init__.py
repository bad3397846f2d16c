"""Locale resolver - merge the best locale variant into nested JSON payloads."""

from __future__ import annotations

from locale_resolver.api import localize, resolve
from locale_resolver.config import ResolverConfig, parse_translation_key_set
from locale_resolver.resolver import LocalizationResolver
from locale_resolver.result import ResolutionResult
from locale_resolver.settings import ResolverSettings

__version__: str = "0.1.0"
__all__: list[str] = [
    "LocalizationResolver",
    "ResolutionResult",
    "ResolverConfig",
    "ResolverSettings",
    "localize",
    "parse_translation_key_set",
    "resolve",
]
