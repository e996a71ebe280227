"""Entity kinds and small classification enums."""

from __future__ import annotations

from enum import StrEnum


class EntityKind(StrEnum):
    """The closed set of record kinds held by the store."""

    PERSON = "person"
    CLIENT = "client"
    HAIRDRESSER = "hairdresser"


class Gender(StrEnum):
    """Gender as recorded on a person's details."""

    MALE = "M"
    FEMALE = "F"
    OTHER = "O"
