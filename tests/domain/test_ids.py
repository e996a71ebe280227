"""Tests for record ID helpers."""

from __future__ import annotations

import pytest

from hairstylex.domain.ids import FIRST_ID, next_id, parse_id


class TestNextId:
    def test_empty_starts_at_first_id(self) -> None:
        assert next_id([]) == FIRST_ID == 1

    def test_one_past_the_largest(self) -> None:
        assert next_id([3, 1, 7]) == 8

    def test_gaps_are_not_reused(self) -> None:
        # 2 was deleted; the next ID still follows the maximum.
        assert next_id([1, 3]) == 4

    def test_accepts_generators(self) -> None:
        assert next_id(i for i in (1, 2)) == 3


class TestParseId:
    @pytest.mark.parametrize(("raw", "expected"), [("1", 1), (" 42 ", 42), ("007", 7)])
    def test_valid(self, raw: str, expected: int) -> None:
        assert parse_id(raw) == expected

    @pytest.mark.parametrize(
        "raw", ["", "0", "-1", "+1", "1.5", "abc", "1e3", "²", "٣", "1_000"]
    )
    def test_invalid(self, raw: str) -> None:
        assert parse_id(raw) is None
