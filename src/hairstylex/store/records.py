"""RecordStore — the aggregate owning one UniqueCollection per kind.

The store exposes primitives; policy lives in the service layer. In
particular :meth:`RecordStore.add_client` does not reject a client whose
individual also exists as a hairdresser: services call
:meth:`RecordStore.has_counterpart` explicitly before mutating.

:meth:`RecordStore.reset_data` is the exception. A snapshot is validated as
a whole, including the client/hairdresser exclusion rule, before any
collection is touched.
"""

from __future__ import annotations

import logging
from typing import Any

from hairstylex.domain.entities import Client, Hairdresser, Person, Snapshot
from hairstylex.domain.identity import IDENTITY_PREDICATES, is_counterpart
from hairstylex.domain.ids import next_id
from hairstylex.domain.types import EntityKind
from hairstylex.store.errors import DuplicateElementsError, RoleConflictError
from hairstylex.store.unique import UniqueCollection, find_duplicate

logger = logging.getLogger(__name__)


def _require(value: Any, expected: type, name: str) -> None:
    """Fail fast on programmer errors (None or a record of the wrong kind)."""
    if not isinstance(value, expected):
        msg = f"{name} must be a {expected.__name__}, got {type(value).__name__}"
        raise TypeError(msg)


def _collection(kind: EntityKind) -> UniqueCollection[Any]:
    return UniqueCollection(kind, IDENTITY_PREDICATES[kind])


class RecordStore:
    """Persons, clients, and hairdressers with per-kind uniqueness.

    Usage::

        store = RecordStore()
        store.add_client(client)
        store.set_client(client, edited)
        snapshot = store.snapshot()
    """

    def __init__(self, snapshot: Snapshot | None = None) -> None:
        self.persons: UniqueCollection[Person] = _collection(EntityKind.PERSON)
        self.clients: UniqueCollection[Client] = _collection(EntityKind.CLIENT)
        self.hairdressers: UniqueCollection[Hairdresser] = _collection(EntityKind.HAIRDRESSER)
        if snapshot is not None:
            self.reset_data(snapshot)

    def collections(self) -> tuple[UniqueCollection[Any], ...]:
        return self.persons, self.clients, self.hairdressers

    # ------------------------------------------------------------------
    # Snapshot round-trip
    # ------------------------------------------------------------------

    def reset_data(self, snapshot: Snapshot) -> None:
        """Replace all three collections from *snapshot*.

        Raises:
            DuplicateElementsError: a collection in *snapshot* holds two
                identity-equal records.
            RoleConflictError: a client and a hairdresser in *snapshot*
                describe the same individual.

        Either error leaves the store unchanged.
        """
        _require(snapshot, Snapshot, "snapshot")
        validate_snapshot(snapshot)
        self.hairdressers.set_all(snapshot.hairdressers)
        self.clients.set_all(snapshot.clients)
        self.persons.set_all(snapshot.persons)
        logger.debug("Store reset: %s", snapshot.counts())

    def snapshot(self) -> Snapshot:
        """An immutable copy of the current contents."""
        return Snapshot(
            persons=tuple(self.persons),
            clients=tuple(self.clients),
            hairdressers=tuple(self.hairdressers),
        )

    # ------------------------------------------------------------------
    # Persons
    # ------------------------------------------------------------------

    def has_person(self, person: Person) -> bool:
        _require(person, Person, "person")
        return self.persons.contains(person)

    def add_person(self, person: Person) -> None:
        _require(person, Person, "person")
        self.persons.add(person)

    def set_person(self, target: Person, edited: Person) -> None:
        _require(target, Person, "target")
        _require(edited, Person, "edited")
        self.persons.set_element(target, edited)

    def delete_person(self, person: Person) -> None:
        _require(person, Person, "person")
        self.persons.remove(person)

    # ------------------------------------------------------------------
    # Clients
    # ------------------------------------------------------------------

    def has_client(self, client: Client) -> bool:
        _require(client, Client, "client")
        return self.clients.contains(client)

    def add_client(self, client: Client) -> None:
        _require(client, Client, "client")
        self.clients.add(client)

    def set_client(self, target: Client, edited: Client) -> None:
        _require(target, Client, "target")
        _require(edited, Client, "edited")
        self.clients.set_element(target, edited)

    def delete_client(self, client: Client) -> None:
        _require(client, Client, "client")
        self.clients.remove(client)

    def get_client_by_id(self, client_id: int) -> Client | None:
        """Linear scan by ID; None when no client has *client_id*."""
        return self.clients.find(lambda c: c.id == client_id)

    def next_client_id(self) -> int:
        return next_id(c.id for c in self.clients)

    # ------------------------------------------------------------------
    # Hairdressers
    # ------------------------------------------------------------------

    def has_hairdresser(self, hairdresser: Hairdresser) -> bool:
        _require(hairdresser, Hairdresser, "hairdresser")
        return self.hairdressers.contains(hairdresser)

    def add_hairdresser(self, hairdresser: Hairdresser) -> None:
        _require(hairdresser, Hairdresser, "hairdresser")
        self.hairdressers.add(hairdresser)

    def set_hairdresser(self, target: Hairdresser, edited: Hairdresser) -> None:
        _require(target, Hairdresser, "target")
        _require(edited, Hairdresser, "edited")
        self.hairdressers.set_element(target, edited)

    def delete_hairdresser(self, hairdresser: Hairdresser) -> None:
        _require(hairdresser, Hairdresser, "hairdresser")
        self.hairdressers.remove(hairdresser)

    def get_hairdresser_by_id(self, hairdresser_id: int) -> Hairdresser | None:
        """Linear scan by ID; None when no hairdresser has *hairdresser_id*."""
        return self.hairdressers.find(lambda h: h.id == hairdresser_id)

    def next_hairdresser_id(self) -> int:
        return next_id(h.id for h in self.hairdressers)

    # ------------------------------------------------------------------
    # Cross-collection rule
    # ------------------------------------------------------------------

    def has_counterpart(self, entity: Person | Client | Hairdresser) -> bool:
        """True if *entity*'s individual already exists in the other role.

        A client is checked against hairdressers and vice versa. Persons
        have no counterpart role.
        """
        if isinstance(entity, Client):
            return any(is_counterpart(entity, h) for h in self.hairdressers)
        if isinstance(entity, Hairdresser):
            return any(is_counterpart(entity, c) for c in self.clients)
        _require(entity, Person, "entity")
        return False

    def collides(
        self,
        target: Person | Client | Hairdresser,
        edited: Person | Client | Hairdresser,
    ) -> bool:
        """True if replacing *target* with *edited* would duplicate another record.

        Raises EntityNotFoundError if *target* is not stored.
        """
        collection = {c.kind: c for c in self.collections()}.get(getattr(target, "kind", None))
        if collection is None:
            msg = f"target must be a record, got {type(target).__name__}"
            raise TypeError(msg)
        _require(edited, type(target), "edited")
        return collection.collides(target, edited)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordStore):
            return NotImplemented
        return self.collections() == other.collections()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        counts = ", ".join(f"{c.kind}s={len(c)}" for c in self.collections())
        return f"RecordStore({counts})"


def validate_snapshot(snapshot: Snapshot) -> None:
    """Check a snapshot against every store invariant without loading it."""
    for kind, items in (
        (EntityKind.HAIRDRESSER, snapshot.hairdressers),
        (EntityKind.CLIENT, snapshot.clients),
        (EntityKind.PERSON, snapshot.persons),
    ):
        pair = find_duplicate(items, IDENTITY_PREDICATES[kind])
        if pair is not None:
            msg = f"Duplicate {kind} records in snapshot"
            raise DuplicateElementsError(msg, pair[1])

    for client in snapshot.clients:
        for hairdresser in snapshot.hairdressers:
            if is_counterpart(client, hairdresser):
                msg = f"Client #{client.id} is also hairdresser #{hairdresser.id}"
                raise RoleConflictError(msg, client)
