"""Public API functions for locale-resolver.

This module provides the two user-facing functions: localize and resolve.
Each call creates a fresh LocalizationResolver to guarantee zero global
state mutation between calls.
"""

from __future__ import annotations

from typing import Any

from locale_resolver.config import ResolverConfig
from locale_resolver.resolver import LocalizationResolver
from locale_resolver.result import ResolutionResult

__all__ = ["localize", "resolve"]


def localize(
    payload: Any,
    locale: str | None = None,
    fallback_locale: str | None = None,
    config: ResolverConfig | None = None,
) -> Any:
    """Return ``payload`` with its translation collections resolved.

    Args:
        payload:         Any JSON-like value (typically a decoded response).
        locale:          Requested locale.  Overrides ``config.locale`` when
                         given.
        fallback_locale: Exact-match fallback locale.  Overrides
                         ``config.fallback_locale`` when given.
        config:          Resolver configuration.  Defaults to
                         ``ResolverConfig()`` when None.

    Returns:
        A new tree of the same shape class as ``payload``.  The input is
        never mutated.
    """
    config = config if config is not None else ResolverConfig()
    changes: dict[str, Any] = {}
    if locale is not None:
        changes["locale"] = locale
    if fallback_locale is not None:
        changes["fallback_locale"] = fallback_locale
    if changes:
        config = config.evolve(**changes)
    return LocalizationResolver(config).process(payload)


def resolve(
    payload: Any,
    config: ResolverConfig | None = None,
) -> ResolutionResult:
    """Resolve ``payload`` and return the tree together with a report.

    Args:
        payload: Any JSON-like value.
        config:  Resolver configuration.  Defaults to ``ResolverConfig()``
                 when None.

    Returns:
        A ``ResolutionResult`` with tree, resolved/fallback/unresolved paths,
        cache_hits and computation_time_ms populated.
    """
    return LocalizationResolver(config).resolve(payload)
