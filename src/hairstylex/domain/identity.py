"""Identity predicates — "is this the same real-world individual?"

Identity is deliberately looser than full equality. Two records can differ
field by field (an edited phone, a new tag) and still be the same
individual, so an edit is recognized as an update rather than a duplicate.

One rule for every kind: the *individual key* is the casefolded name plus
the phone number. Kinds that carry an ID also match on ID alone.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hairstylex.domain.entities import Client, Hairdresser, Person
from hairstylex.domain.types import EntityKind


def is_same_person(a: Person, b: Person) -> bool:
    return a.details.individual_key == b.details.individual_key


def is_same_client(a: Client, b: Client) -> bool:
    return a.id == b.id or a.details.individual_key == b.details.individual_key


def is_same_hairdresser(a: Hairdresser, b: Hairdresser) -> bool:
    return a.id == b.id or a.details.individual_key == b.details.individual_key


def is_counterpart(a: Client | Hairdresser, b: Client | Hairdresser) -> bool:
    """True when a client and a hairdresser describe the same individual.

    IDs are not compared: client and hairdresser IDs are separate sequences.
    """
    if a.kind == b.kind:
        return False
    return a.details.individual_key == b.details.individual_key


# Per-kind uniqueness rule used by the store collections and snapshot checks.
IDENTITY_PREDICATES: dict[EntityKind, Callable[[Any, Any], bool]] = {
    EntityKind.PERSON: is_same_person,
    EntityKind.CLIENT: is_same_client,
    EntityKind.HAIRDRESSER: is_same_hairdresser,
}

