"""Tests for domain enums."""

from __future__ import annotations

from hairstylex.domain.types import EntityKind, Gender


class TestEntityKind:
    def test_values(self) -> None:
        assert [k.value for k in EntityKind] == ["person", "client", "hairdresser"]

    def test_compares_equal_to_plain_strings(self) -> None:
        assert EntityKind.CLIENT == "client"
        assert f"{EntityKind.HAIRDRESSER}" == "hairdresser"


class TestGender:
    def test_values(self) -> None:
        assert {g.value for g in Gender} == {"M", "F", "O"}

    def test_lookup_by_value(self) -> None:
        assert Gender("F") is Gender.FEMALE
