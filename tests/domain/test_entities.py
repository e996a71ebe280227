"""Tests for entity models, field validation, and apply_changes."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from hairstylex.domain.entities import (
    Client,
    Hairdresser,
    Person,
    PersonDetails,
    Snapshot,
    apply_changes,
)
from hairstylex.domain.types import Gender
from tests.conftest import details, make_client, make_hairdresser, make_person


class TestPersonDetails:
    def test_valid_details(self) -> None:
        d = PersonDetails.model_validate(details(tags=["vip"]))
        assert d.name == "Alice Tan"
        assert d.gender is Gender.FEMALE
        assert d.tags == frozenset({"vip"})

    def test_name_whitespace_is_collapsed(self) -> None:
        d = PersonDetails.model_validate(details(name="  Alice   Tan "))
        assert d.name == "Alice Tan"

    @pytest.mark.parametrize("name", ["O'Brien", "Mary-Jane", "St. John", "R2 D2"])
    def test_name_punctuation_allowed(self, name: str) -> None:
        assert PersonDetails.model_validate(details(name=name, email="x@example.com")).name == name

    @pytest.mark.parametrize("name", ["", "   ", "Alice!", "-Alice", "Alice_Tan"])
    def test_invalid_names(self, name: str) -> None:
        with pytest.raises(ValidationError):
            PersonDetails.model_validate(details(name=name, email="x@example.com"))

    @pytest.mark.parametrize(
        "phone", ["12", "9111 2222", "+6591112222", "phone", "٩١١١٢٢٢٢", "９１１１２２２２"]
    )
    def test_invalid_phones(self, phone: str) -> None:
        with pytest.raises(ValidationError, match="Phone"):
            PersonDetails.model_validate(details(phone=phone))

    @pytest.mark.parametrize("email", ["alice", "alice@", "@example.com", "a lice@example.com"])
    def test_invalid_emails(self, email: str) -> None:
        with pytest.raises(ValidationError, match="Email"):
            PersonDetails.model_validate(details(email=email))

    def test_gender_is_case_insensitive(self) -> None:
        assert PersonDetails.model_validate(details(gender="m")).gender is Gender.MALE

    def test_invalid_gender(self) -> None:
        with pytest.raises(ValidationError):
            PersonDetails.model_validate(details(gender="X"))

    def test_invalid_tag(self) -> None:
        with pytest.raises(ValidationError, match="Tag"):
            PersonDetails.model_validate(details(tags=["not ok"]))

    def test_individual_key_ignores_case(self) -> None:
        a = PersonDetails.model_validate(details(name="Alice Tan"))
        b = PersonDetails.model_validate(details(name="ALICE tan"))
        assert a.individual_key == b.individual_key == ("alice tan", "91112222")

    def test_frozen(self) -> None:
        d = PersonDetails.model_validate(details())
        with pytest.raises(ValidationError):
            d.name = "Bob"  # type: ignore[misc]

    def test_tags_serialize_sorted(self) -> None:
        d = PersonDetails.model_validate(details(tags=["vip", "colour", "perm"]))
        assert d.model_dump()["tags"] == ["colour", "perm", "vip"]


class TestKinds:
    def test_person_kind(self) -> None:
        p = make_person()
        assert p.kind == "person"
        assert str(p) == "Alice Tan (91112222)"

    def test_client_requires_positive_id(self) -> None:
        with pytest.raises(ValidationError):
            make_client(client_id=0)

    def test_client_requires_address(self) -> None:
        with pytest.raises(ValidationError):
            make_client(address="   ")

    def test_client_str(self) -> None:
        assert str(make_client(3)) == "#3 Alice Tan (91112222)"

    def test_hairdresser_specialisations(self) -> None:
        h = make_hairdresser(specialisations=["perm", "colour"])
        assert h.specialisations == frozenset({"perm", "colour"})
        assert h.model_dump()["specialisations"] == ["colour", "perm"]

    def test_hairdresser_requires_title(self) -> None:
        with pytest.raises(ValidationError):
            make_hairdresser(title="")

    def test_accessors_delegate_to_details(self) -> None:
        c = make_client(tags=["vip"])
        assert (c.name, c.phone, c.tags) == ("Alice Tan", "91112222", frozenset({"vip"}))

    def test_structural_equality(self) -> None:
        assert make_client() == make_client()
        assert make_client() != make_client(address="Elsewhere 5")


class TestSnapshot:
    def test_empty(self) -> None:
        assert Snapshot().counts() == {"persons": 0, "clients": 0, "hairdressers": 0}

    def test_discriminated_json_round_trip(self) -> None:
        snap = Snapshot(
            persons=(make_person("Carol Lee", "87654321"),),
            clients=(make_client(),),
            hairdressers=(make_hairdresser(specialisations=["perm"]),),
        )
        restored = Snapshot.model_validate_json(snap.model_dump_json())
        assert restored == snap
        assert isinstance(restored.clients[0], Client)
        assert isinstance(restored.hairdressers[0], Hairdresser)


class TestApplyChanges:
    def test_detail_and_role_fields(self) -> None:
        c = make_client()
        edited = apply_changes(c, {"phone": "93334444", "address": "2 New Road"})
        assert edited.phone == "93334444"
        assert edited.address == "2 New Road"
        assert edited.id == c.id
        assert c.phone == "91112222"

    def test_returns_same_kind(self) -> None:
        edited = apply_changes(make_person(), {"name": "Alice Lim"})
        assert isinstance(edited, Person)

    def test_tags_replace(self) -> None:
        edited = apply_changes(make_person(tags=["vip"]), {"tags": ["colour"]})
        assert edited.tags == frozenset({"colour"})

    def test_revalidates(self) -> None:
        with pytest.raises(ValidationError):
            apply_changes(make_client(), {"phone": "12"})

    @pytest.mark.parametrize("field", ["id", "kind"])
    def test_immutable_fields(self, field: str) -> None:
        with pytest.raises(ValueError, match="Cannot change"):
            apply_changes(make_client(), {field: 2})

    def test_unknown_field(self) -> None:
        with pytest.raises(ValueError, match="Unknown field"):
            apply_changes(make_person(), {"address": "1 Road"})
