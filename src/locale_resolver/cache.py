"""IdentityCache: reference-keyed memo for a single resolver walk.

Entries are keyed by ``id(node)``, never by value, so two structurally equal
but distinct records are transformed independently, while one record shared
by several parents is transformed once.  The original node is stored next to
its result so it stays alive (and its ``id`` stays unique) for as long as the
cache does.

A cache lives for exactly one ``LocalizationResolver.resolve()`` call and is
discarded afterwards.  It is unbounded: eviction would break cycle
termination.

Example::

    cache = IdentityCache()
    cache.put(node, transformed)
    cache.get(node) is transformed       # True
    cache.get(dict(node))                # None -- equal, but a different object
"""

from __future__ import annotations

from typing import Any

__all__ = ["IdentityCache"]

_MISSING = object()


class IdentityCache:
    """Maps original nodes (by identity) to their transformed results."""

    def __init__(self) -> None:
        self._entries: dict[int, tuple[Any, Any]] = {}
        self.hits = 0

    def __contains__(self, node: object) -> bool:
        return id(node) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, node: object, default: Any = None) -> Any:
        """Return the cached result for ``node``, counting the hit."""
        entry = self._entries.get(id(node), _MISSING)
        if entry is _MISSING:
            return default
        self.hits += 1
        return entry[1]

    def put(self, node: object, result: Any) -> None:
        self._entries[id(node)] = (node, result)
