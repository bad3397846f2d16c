"""Integrations subpackage for locale-resolver.

Contains integration adapters for request pipelines:
- Items-read filter (ItemsReadFilter) plus request locale extraction
  (LocaleContext, locale_context_from_request)

None of the adapters import a web framework; hosts call them from their own
middleware and hooks.
"""

from __future__ import annotations

from locale_resolver.integrations._items_read import (
    ItemsReadFilter,
    LocaleContext,
    locale_context_from_request,
)

__all__ = ["ItemsReadFilter", "LocaleContext", "locale_context_from_request"]
