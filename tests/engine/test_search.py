"""Tests for search limits."""

import pytest

from chesscore.engine.search import SearchLimits


class TestSearchLimits:
    def test_defaults(self) -> None:
        limits = SearchLimits()
        assert limits.depth == 15
        assert limits.movetime_ms is None

    def test_movetime_only(self) -> None:
        limits = SearchLimits(depth=None, movetime_ms=250)
        assert limits.depth is None

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"depth": 0},
            {"movetime_ms": 0},
            {"depth": None, "movetime_ms": None},
        ],
    )
    def test_rejects(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            SearchLimits(**kwargs)

    def test_frozen(self) -> None:
        limits = SearchLimits()
        with pytest.raises(AttributeError):
            limits.depth = 3  # type: ignore[misc]
