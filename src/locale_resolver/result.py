"""ResolutionResult dataclass for resolver output.

This module provides the rich result type returned by resolve() calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["ResolutionResult"]


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Rich result of a resolve() call.

    Attributes:
        tree: The transformed payload.  Same shape class as the input.
        resolved_paths: JSON Pointer paths of translation fields that merged
            a locale variant (primary or fallback).
        fallback_paths: Subset of ``resolved_paths`` merged via the fallback
            locale.
        unresolved_paths: JSON Pointer paths of translation fields that had no
            matching variant and were stripped.
        cache_hits: How many times the walk reused an already transformed
            node (shared references and cycle back-references).
        computation_time_ms: Wall-clock duration of the walk in milliseconds.
    """

    tree: Any
    resolved_paths: list[str]
    fallback_paths: list[str]
    unresolved_paths: list[str]
    cache_hits: int
    computation_time_ms: float
