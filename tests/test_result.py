"""Tests for ResolutionResult frozen dataclass.

Covers:
- Construction with all six fields
- Frozen (immutable) enforcement
- Equality between results with identical values
- __all__ export
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from locale_resolver.result import ResolutionResult

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_result(**overrides: object) -> ResolutionResult:
    """Return a valid ResolutionResult, optionally overriding specific fields."""
    defaults: dict[str, object] = {
        "tree": {"title": "Hi"},
        "resolved_paths": ["/translations"],
        "fallback_paths": [],
        "unresolved_paths": [],
        "cache_hits": 0,
        "computation_time_ms": 0.2,
    }
    defaults.update(overrides)
    return ResolutionResult(**defaults)  # type: ignore[arg-type]


class TestResolutionResult:
    def test_fields_accessible(self) -> None:
        result = make_result()
        assert result.tree == {"title": "Hi"}
        assert result.resolved_paths == ["/translations"]
        assert result.fallback_paths == []
        assert result.unresolved_paths == []
        assert result.cache_hits == 0
        assert result.computation_time_ms == pytest.approx(0.2)

    @pytest.mark.parametrize(
        "field_name",
        [
            "tree",
            "resolved_paths",
            "fallback_paths",
            "unresolved_paths",
            "cache_hits",
            "computation_time_ms",
        ],
    )
    def test_frozen(self, field_name: str) -> None:
        result = make_result()
        with pytest.raises(FrozenInstanceError):
            setattr(result, field_name, None)

    def test_equality(self) -> None:
        assert make_result() == make_result()

    def test_inequality(self) -> None:
        assert make_result(cache_hits=1) != make_result(cache_hits=2)

    def test_all_export(self) -> None:
        import locale_resolver.result as mod

        assert mod.__all__ == ["ResolutionResult"]
