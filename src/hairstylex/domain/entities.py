"""Entity models — persons, clients, and hairdressers.

Every entity is a frozen pydantic model: once constructed it never changes.
Edits build a replacement through :func:`apply_changes`, which re-runs field
validation (``model_copy(update=...)`` would skip it).

The kinds are composed rather than subclassed. Each carries a shared
:class:`PersonDetails` core plus its own role fields, and the ``kind``
literal discriminates the :data:`Entity` union.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Literal, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    Field,
    PositiveInt,
    field_serializer,
)

from hairstylex.domain.tags import validate_tag
from hairstylex.domain.types import Gender

# ---------------------------------------------------------------------------
# Field value types
# ---------------------------------------------------------------------------

_NAME_RE = re.compile(r"^[^\W_](?:[^\W_]|[ '.-])*$")
_PHONE_RE = re.compile(r"^[0-9]{3,}$")
_EMAIL_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
_EMAIL_RE = re.compile(
    rf"^[A-Za-z0-9](?:[A-Za-z0-9+_.-]*[A-Za-z0-9])?@{_EMAIL_LABEL}(?:\.{_EMAIL_LABEL})*$"
)


def _check_name(value: str) -> str:
    collapsed = " ".join(value.split())
    if not collapsed:
        msg = "Name must not be blank"
        raise ValueError(msg)
    if not _NAME_RE.match(collapsed):
        msg = f"Name {value!r} may only contain letters, digits, spaces, apostrophes, '.' or '-'"
        raise ValueError(msg)
    return collapsed


def _check_phone(value: str) -> str:
    cleaned = value.strip()
    if not _PHONE_RE.match(cleaned):
        msg = f"Phone {value!r} must be digits only, at least 3 long"
        raise ValueError(msg)
    return cleaned


def _check_email(value: str) -> str:
    cleaned = value.strip()
    if not _EMAIL_RE.match(cleaned):
        msg = f"Email {value!r} must look like local-part@domain"
        raise ValueError(msg)
    return cleaned


def _check_text(value: str) -> str:
    cleaned = value.strip()
    if not cleaned:
        msg = "Value must not be blank"
        raise ValueError(msg)
    return cleaned


def _upper(value: Any) -> Any:
    return value.strip().upper() if isinstance(value, str) else value


Name = Annotated[str, AfterValidator(_check_name)]
Phone = Annotated[str, AfterValidator(_check_phone)]
Email = Annotated[str, AfterValidator(_check_email)]
Address = Annotated[str, AfterValidator(_check_text)]
Title = Annotated[str, AfterValidator(_check_text)]
Tag = Annotated[str, AfterValidator(validate_tag)]
GenderField = Annotated[Gender, BeforeValidator(_upper)]

ClientId = PositiveInt
HairdresserId = PositiveInt


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


class PersonDetails(BaseModel):
    """Fields shared by every kind of record."""

    model_config = {"frozen": True}

    name: Name
    phone: Phone
    email: Email
    gender: GenderField
    tags: frozenset[Tag] = frozenset()

    @field_serializer("tags")
    def _sorted_tags(self, tags: frozenset[str]) -> list[str]:
        return sorted(tags)

    @property
    def individual_key(self) -> tuple[str, str]:
        """``(casefolded name, phone)`` — the identity core shared by all kinds."""
        return self.name.casefold(), self.phone


class _Record(BaseModel):
    """Accessors common to all entity kinds (no fields of its own)."""

    model_config = {"frozen": True}

    details: PersonDetails

    @property
    def name(self) -> str:
        return self.details.name

    @property
    def phone(self) -> str:
        return self.details.phone

    @property
    def tags(self) -> frozenset[str]:
        return self.details.tags


class Person(_Record):
    """A generic contact with no salon role."""

    kind: Literal["person"] = "person"

    def __str__(self) -> str:
        return f"{self.name} ({self.phone})"


class Client(_Record):
    """A salon client. ``id`` is assigned once at creation and never changes."""

    kind: Literal["client"] = "client"
    id: ClientId
    address: Address

    def __str__(self) -> str:
        return f"#{self.id} {self.name} ({self.phone})"


class Hairdresser(_Record):
    """A member of staff with a job title and a set of specialisations."""

    kind: Literal["hairdresser"] = "hairdresser"
    id: HairdresserId
    title: Title
    specialisations: frozenset[Tag] = frozenset()

    @field_serializer("specialisations")
    def _sorted_specialisations(self, specialisations: frozenset[str]) -> list[str]:
        return sorted(specialisations)

    def __str__(self) -> str:
        return f"#{self.id} {self.name} ({self.phone}), {self.title}"


Entity = Annotated[Person | Client | Hairdresser, Field(discriminator="kind")]


class Snapshot(BaseModel):
    """The complete contents of all three collections at one instant."""

    model_config = {"frozen": True}

    persons: tuple[Person, ...] = ()
    clients: tuple[Client, ...] = ()
    hairdressers: tuple[Hairdresser, ...] = ()

    def counts(self) -> dict[str, int]:
        return {
            "persons": len(self.persons),
            "clients": len(self.clients),
            "hairdressers": len(self.hairdressers),
        }


# ---------------------------------------------------------------------------
# Edits
# ---------------------------------------------------------------------------

DETAIL_FIELDS: frozenset[str] = frozenset(PersonDetails.model_fields)
_IMMUTABLE_FIELDS = frozenset({"id", "kind"})

_E = TypeVar("_E", Person, Client, Hairdresser)


def apply_changes(entity: _E, changes: dict[str, Any]) -> _E:
    """Return a validated copy of *entity* with *changes* applied.

    *changes* is flat: detail fields (``name``, ``phone``, ...) and role fields
    (``address``, ``title``, ...) share one namespace.

    Raises:
        ValueError: if *changes* tries to alter ``id``/``kind`` or names an
            unknown field.
        pydantic.ValidationError: if a new value fails field validation.
    """
    frozen = _IMMUTABLE_FIELDS & changes.keys()
    if frozen:
        msg = f"Cannot change {', '.join(sorted(frozen))}"
        raise ValueError(msg)

    own_fields = set(type(entity).model_fields) - {"details"} - _IMMUTABLE_FIELDS
    unknown = changes.keys() - DETAIL_FIELDS - own_fields
    if unknown:
        msg = f"Unknown field(s) for {entity.kind}: {', '.join(sorted(unknown))}"
        raise ValueError(msg)

    data = entity.model_dump()
    data["details"].update({k: v for k, v in changes.items() if k in DETAIL_FIELDS})
    data.update({k: v for k, v in changes.items() if k in own_fields})
    return type(entity).model_validate(data)
