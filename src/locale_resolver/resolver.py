"""LocalizationResolver: merges the best-matching locale variant into every record.

This is the orchestration layer between ``ResolverConfig``, ``LocaleMatcher``
and ``IdentityCache``.  It walks an arbitrarily nested payload and, on every
record, resolves the translation collections configured for the record's
*descent level*.

Architecture:
- resolve() creates a fresh ``_WalkState`` (identity cache plus report
  accumulators), walks the root at level ``"default"`` and wraps the tree in
  a ``ResolutionResult``.  Nothing from one call is visible to the next.
- Sequences are walked element-wise at the same level.  Records are shallow
  copied, their translation fields resolved and stripped, and then every
  remaining field is walked with the field name as the next level.
- Every container is cached BEFORE its children are walked.  A reference back
  to an ancestor therefore resolves to the (in-progress) transformed ancestor,
  so cyclic payloads terminate and the output keeps the same cycle.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from locale_resolver.cache import IdentityCache
from locale_resolver.config import DEFAULT_LEVEL, ResolverConfig
from locale_resolver.matching import LocaleMatcher
from locale_resolver.result import ResolutionResult
from locale_resolver.tree import pointer
from locale_resolver.tree.nodes import NodeKind, classify

__all__ = ["LocalizationResolver"]

logger = logging.getLogger(__name__)


@dataclass
class _WalkState:
    """Everything owned by one resolve() call."""

    cache: IdentityCache = field(default_factory=IdentityCache)
    resolved_paths: list[str] = field(default_factory=list)
    fallback_paths: list[str] = field(default_factory=list)
    unresolved_paths: list[str] = field(default_factory=list)


class LocalizationResolver:
    """Resolves translation collections in a payload tree.

    Per-call state lives in ``_WalkState``; across calls the resolver holds
    only immutable configuration and a lock-guarded ``LocaleMatcher`` memo,
    so one instance can serve sequential or concurrent ``process()`` calls.

    Example::

        from locale_resolver import LocalizationResolver, ResolverConfig

        resolver = LocalizationResolver(ResolverConfig(locale="fr-FR"))
        resolver.process({
            "id": 1,
            "translations": [
                {"languages_code": "en-US", "title": "Hi"},
                {"languages_code": "fr-FR", "title": "Salut"},
            ],
        })
        # {"id": 1, "languages_code": "fr-FR", "title": "Salut"}
    """

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self._config: ResolverConfig = (
            config if config is not None else ResolverConfig()
        )
        self._matcher = LocaleMatcher(
            language_code_key=self._config.language_code_key,
            generic=self._config.use_generic_locale_match,
        )

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def replace(self, **changes: Any) -> LocalizationResolver:
        """Return a new resolver whose config has ``changes`` applied."""
        return LocalizationResolver(self._config.evolve(**changes))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def process(self, root: Any) -> Any:
        """Return ``root`` with every translation collection resolved."""
        return self.resolve(root).tree

    def resolve(self, root: Any) -> ResolutionResult:
        """Walk ``root`` and return the transformed tree with a report.

        Args:
            root: Any JSON-like value (dict, list, tuple, scalar).

        Returns:
            A ``ResolutionResult``.  ``result.tree`` is what ``process()``
            returns.
        """
        t0 = time.perf_counter()
        state = _WalkState()

        tree = self._walk(root, DEFAULT_LEVEL, pointer.ROOT, state)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "Resolved locale %r: %d merged (%d via fallback), %d stripped, "
            "%d cache hits in %.2fms",
            self._config.locale,
            len(state.resolved_paths),
            len(state.fallback_paths),
            len(state.unresolved_paths),
            state.cache.hits,
            elapsed_ms,
        )
        return ResolutionResult(
            tree=tree,
            resolved_paths=state.resolved_paths,
            fallback_paths=state.fallback_paths,
            unresolved_paths=state.unresolved_paths,
            cache_hits=state.cache.hits,
            computation_time_ms=elapsed_ms,
        )

    # ------------------------------------------------------------------
    # Walk
    # ------------------------------------------------------------------

    def _walk(self, node: Any, level: str, path: str, state: _WalkState) -> Any:
        """Transform ``node`` reached under descent level ``level``."""
        if node in state.cache:
            return state.cache.get(node)

        kind = classify(node)
        if kind is NodeKind.SEQUENCE:
            items: list[Any] = []
            state.cache.put(node, items)
            items.extend(
                self._walk(item, level, pointer.join(path, idx), state)
                for idx, item in enumerate(node)
            )
            return items
        if kind is NodeKind.RECORD:
            return self._walk_record(node, level, path, state)
        return node

    def _walk_record(
        self,
        node: Mapping[Any, Any],
        level: str,
        path: str,
        state: _WalkState,
    ) -> dict[Any, Any]:
        config = self._config
        result = dict(node)
        state.cache.put(node, result)

        to_remove: list[Any] = []
        for key in config.active_keys(level):
            key_path = pointer.join(path, key)
            chosen, via_fallback = self._choose(node.get(key))

            if chosen is None:
                # Unresolved collections never survive, whatever the flags say.
                to_remove.append(key)
                if key in node:
                    logger.debug(
                        "No variant for %r at %s, stripping", config.locale, key_path
                    )
                    state.unresolved_paths.append(key_path)
                continue

            if config.keep_join_id_field:
                result.update(chosen)
            else:
                result.update(
                    (k, v) for k, v in chosen.items() if k != config.join_id_key
                )

            # Substring match, not equality: "trans" goes for "translations".
            if config.replace_fields_overlapping_key_name:
                to_remove.extend(
                    k for k in result if isinstance(k, str) and k in key
                )
            if config.remove_source_collection_field:
                to_remove.append(key)

            state.resolved_paths.append(key_path)
            if via_fallback:
                logger.debug(
                    "Using fallback %r at %s", config.fallback_locale, key_path
                )
                state.fallback_paths.append(key_path)

        for key in to_remove:
            result.pop(key, None)

        # The field name becomes the descent level of its value.
        for key in list(result):
            result[key] = self._walk(
                result[key], str(key), pointer.join(path, key), state
            )
        return result

    def _choose(self, translations: Any) -> tuple[Mapping[str, Any] | None, bool]:
        """Pick the variant to merge: primary match, else exact fallback.

        Returns:
            ``(variant, via_fallback)``; ``(None, False)`` when nothing matches
            or ``translations`` is not a sequence.
        """
        if classify(translations) is not NodeKind.SEQUENCE:
            return None, False

        primary = self._matcher.find_best_match(translations, self._config.locale)
        if primary is not None:
            return primary, False

        fallback_locale = self._config.fallback_locale
        if fallback_locale:
            fallback = self._matcher.find_exact(translations, fallback_locale)
            if fallback is not None:
                return fallback, True
        return None, False
