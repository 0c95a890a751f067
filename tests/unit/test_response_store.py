"""Unit tests for the in-memory response store."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.models.assessment import ResponseStore


class TestResponseStore:

    def test_set_and_get_rating(self) -> None:
        store = ResponseStore()
        store.set_rating("q-1", 4)

        assert store.get_rating("q-1") == 4
        assert store.get_rating("q-2") is None

    def test_re_answering_overwrites(self) -> None:
        """Last write wins and the answered count does not grow."""
        store = ResponseStore()
        store.set_rating("q-1", 2)
        store.set_rating("q-1", 5, notes="changed my mind")

        assert store.answered_count == 1
        assert store.get_rating("q-1") == 5
        assert store.responses()[0].notes == "changed my mind"

    def test_progress_percentage(self) -> None:
        store = ResponseStore()
        store.set_rating("q-1", 3)
        store.set_rating("q-2", 3)

        assert store.progress_percentage(8) == pytest.approx(25.0)

    def test_progress_with_no_questions_is_zero(self) -> None:
        assert ResponseStore().progress_percentage(0) == 0.0

    @pytest.mark.parametrize("rating", [0, 6, -1])
    def test_out_of_range_rating_rejected(self, rating: int) -> None:
        with pytest.raises(ValidationError):
            ResponseStore().set_rating("q-1", rating)

    def test_clear(self) -> None:
        store = ResponseStore()
        store.set_rating("q-1", 3)
        store.clear()

        assert store.answered_count == 0
        assert store.responses() == []

    @pytest.mark.parametrize("rating", [True, 3.0, "3"])
    def test_non_integer_rating_rejected(self, rating) -> None:
        with pytest.raises(ValidationError):
            ResponseStore().set_rating("q-1", rating)
