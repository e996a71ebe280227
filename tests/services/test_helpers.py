"""Tests for shared service helpers."""

from __future__ import annotations

import pydantic
import pytest

from hairstylex.domain.entities import Client
from hairstylex.services._helpers import changed_fields, entity_row, validation_message
from tests.conftest import details, make_client, make_hairdresser, make_person


class TestEntityRow:
    def test_client_row_is_flat(self) -> None:
        row = entity_row(make_client(3, tags=["vip"]))
        assert row == {
            "kind": "client",
            "id": 3,
            "name": "Alice Tan",
            "phone": "91112222",
            "email": "alice@example.com",
            "gender": "F",
            "tags": ["vip"],
            "address": "Blk 1 Clementi Ave 2",
        }
        assert list(row)[:2] == ["kind", "id"]

    def test_person_row_has_no_id(self) -> None:
        assert "id" not in entity_row(make_person())

    def test_hairdresser_specialisations_sorted(self) -> None:
        row = entity_row(make_hairdresser(specialisations=["perm", "colour"]))
        assert row["specialisations"] == ["colour", "perm"]
        assert row["title"] == "Senior Stylist"


class TestValidationMessage:
    def test_uses_last_location_and_strips_prefix(self) -> None:
        with pytest.raises(pydantic.ValidationError) as excinfo:
            Client.model_validate(
                {"id": 1, "address": "x", "details": details(phone="12")}
            )
        message = validation_message(excinfo.value)
        assert message.startswith("phone: Phone '12'")
        assert "Value error" not in message

    def test_joins_multiple_errors(self) -> None:
        with pytest.raises(pydantic.ValidationError) as excinfo:
            Client.model_validate(
                {"id": 0, "address": "x", "details": details(email="nope")}
            )
        message = validation_message(excinfo.value)
        assert "; " in message
        assert "id: " in message
        assert "email: " in message


class TestChangedFields:
    def test_reports_flat_names(self) -> None:
        before = make_client(1)
        after = make_client(1, phone="93334444", address="Moved 9", tags=["vip"])
        assert changed_fields(before, after) == ["address", "phone", "tags"]

    def test_identical_records(self) -> None:
        assert changed_fields(make_person(), make_person()) == []
