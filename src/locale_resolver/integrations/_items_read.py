"""Items-read filter adapter for request pipelines.

Framework-agnostic: nothing here imports or registers with a web framework.
A host wires two calls into its own pipeline:

1. A request middleware calls ``locale_context_from_request()`` and stores
   the resulting ``LocaleContext`` on its request/accountability object.
2. An items-read hook calls ``ItemsReadFilter()(payload, collection, context)``
   and returns what it gets back.

Usage::

    items_read = ItemsReadFilter(ResolverSettings.from_env())

    def on_request(request):
        request.state.locale = locale_context_from_request(
            request.method, request.query_params, request.json_body
        )

    def on_items_read(payload, collection, request):
        return items_read(payload, collection, request.state.locale)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from locale_resolver.resolver import LocalizationResolver
from locale_resolver.settings import ResolverSettings

__all__ = ["ItemsReadFilter", "LocaleContext", "locale_context_from_request"]

logger = logging.getLogger(__name__)

LOCALE_PARAM = "locale"
FALLBACK_LOCALE_PARAM = "fallbackLocale"


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Per-request locale selection.  ``locale=None`` disables resolution."""

    locale: str | None = None
    fallback_locale: str | None = None


def _string_param(source: Any, name: str) -> str | None:
    if not isinstance(source, Mapping):
        return None
    value = source.get(name)
    return value if isinstance(value, str) else None


def locale_context_from_request(
    method: str,
    query: Mapping[str, Any] | None = None,
    body: Any = None,
) -> LocaleContext:
    """Read ``locale`` / ``fallbackLocale`` from the query (GET) or body (others).

    Args:
        method: HTTP method, case-insensitive.
        query:  Decoded query parameters.
        body:   Decoded request body.  Anything but a mapping yields no locale.
    """
    source = query if method.upper() == "GET" else body
    return LocaleContext(
        locale=_string_param(source, LOCALE_PARAM),
        fallback_locale=_string_param(source, FALLBACK_LOCALE_PARAM),
    )


class ItemsReadFilter:
    """Localizes items-read payloads for one deployment.

    Args:
        settings: Deployment settings.  Defaults to ``ResolverSettings()``.
    """

    def __init__(self, settings: ResolverSettings | None = None) -> None:
        self._settings = settings if settings is not None else ResolverSettings()

    @property
    def settings(self) -> ResolverSettings:
        return self._settings

    def __call__(
        self,
        payload: Any,
        collection: str,
        context: LocaleContext | None,
    ) -> Any:
        """Return ``payload`` localized, or unchanged when it must be skipped."""
        collection_name = str(collection)
        if self._settings.should_skip(collection_name):
            logger.debug("Skipping system collection %s", collection_name)
            return payload
        if context is None or not context.locale:
            logger.debug("No locale for %s, passing through", collection_name)
            return payload

        config = self._settings.resolver_config(
            context.locale, context.fallback_locale
        )
        logger.debug(
            "Localizing collection %s (locale=%r, fallback=%r)",
            collection_name,
            context.locale,
            context.fallback_locale,
        )
        return LocalizationResolver(config).process(payload)
