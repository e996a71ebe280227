"""StoreModel — the single store handle passed to services and presenters.

Wraps a :class:`RecordStore` and keeps one :class:`FilteredView` per kind.
It is created once per process (or per shell session) and handed to every
consumer explicitly; there is no module-level store.

``dirty`` becomes True after any successful mutation so the command layer
knows when the snapshot needs saving.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hairstylex.domain.entities import Client, Hairdresser, Person, Snapshot
from hairstylex.store.records import RecordStore
from hairstylex.store.unique import UniqueCollection
from hairstylex.store.views import FilteredView


class StoreModel:
    """Record store plus live filtered views for presentation."""

    def __init__(self, snapshot: Snapshot | None = None) -> None:
        self._store = RecordStore(snapshot)
        self._person_view: FilteredView[Person] = FilteredView(self._store.persons)
        self._client_view: FilteredView[Client] = FilteredView(self._store.clients)
        self._hairdresser_view: FilteredView[Hairdresser] = FilteredView(
            self._store.hairdressers
        )
        self._dirty = False
        for collection in self._store.collections():
            collection.subscribe(self._mark_dirty)

    @property
    def store(self) -> RecordStore:
        return self._store

    @property
    def dirty(self) -> bool:
        """Whether anything changed since construction or :meth:`mark_saved`."""
        return self._dirty

    def mark_saved(self) -> None:
        self._dirty = False

    # ------------------------------------------------------------------
    # Snapshot round-trip
    # ------------------------------------------------------------------

    def reset_data(self, snapshot: Snapshot) -> None:
        self._store.reset_data(snapshot)

    def get_address_book(self) -> Snapshot:
        return self._store.snapshot()

    # ------------------------------------------------------------------
    # Persons
    # ------------------------------------------------------------------

    def has_person(self, person: Person) -> bool:
        return self._store.has_person(person)

    def add_person(self, person: Person) -> None:
        self._store.add_person(person)
        self.update_filtered_person_list(None)

    def set_person(self, target: Person, edited: Person) -> None:
        self._store.set_person(target, edited)

    def delete_person(self, person: Person) -> None:
        self._store.delete_person(person)

    @property
    def filtered_person_list(self) -> FilteredView[Person]:
        return self._person_view

    def update_filtered_person_list(self, predicate: Callable[[Person], bool] | None) -> None:
        self._person_view.update_filter(predicate)

    # ------------------------------------------------------------------
    # Clients
    # ------------------------------------------------------------------

    def has_client(self, client: Client) -> bool:
        return self._store.has_client(client)

    def add_client(self, client: Client) -> None:
        self._store.add_client(client)
        self.update_filtered_client_list(None)

    def set_client(self, target: Client, edited: Client) -> None:
        self._store.set_client(target, edited)

    def delete_client(self, client: Client) -> None:
        self._store.delete_client(client)

    def get_client_by_id(self, client_id: int) -> Client | None:
        return self._store.get_client_by_id(client_id)

    def next_client_id(self) -> int:
        return self._store.next_client_id()

    @property
    def filtered_client_list(self) -> FilteredView[Client]:
        return self._client_view

    def update_filtered_client_list(self, predicate: Callable[[Client], bool] | None) -> None:
        self._client_view.update_filter(predicate)

    # ------------------------------------------------------------------
    # Hairdressers
    # ------------------------------------------------------------------

    def has_hairdresser(self, hairdresser: Hairdresser) -> bool:
        return self._store.has_hairdresser(hairdresser)

    def add_hairdresser(self, hairdresser: Hairdresser) -> None:
        self._store.add_hairdresser(hairdresser)
        self.update_filtered_hairdresser_list(None)

    def set_hairdresser(self, target: Hairdresser, edited: Hairdresser) -> None:
        self._store.set_hairdresser(target, edited)

    def delete_hairdresser(self, hairdresser: Hairdresser) -> None:
        self._store.delete_hairdresser(hairdresser)

    def get_hairdresser_by_id(self, hairdresser_id: int) -> Hairdresser | None:
        return self._store.get_hairdresser_by_id(hairdresser_id)

    def next_hairdresser_id(self) -> int:
        return self._store.next_hairdresser_id()

    @property
    def filtered_hairdresser_list(self) -> FilteredView[Hairdresser]:
        return self._hairdresser_view

    def update_filtered_hairdresser_list(
        self, predicate: Callable[[Hairdresser], bool] | None
    ) -> None:
        self._hairdresser_view.update_filter(predicate)

    # ------------------------------------------------------------------
    # Cross-collection
    # ------------------------------------------------------------------

    def has_counterpart(self, entity: Person | Client | Hairdresser) -> bool:
        return self._store.has_counterpart(entity)

    def collides(
        self,
        target: Person | Client | Hairdresser,
        edited: Person | Client | Hairdresser,
    ) -> bool:
        return self._store.collides(target, edited)

    def close(self) -> None:
        """Detach the filtered views (used when the model is replaced)."""
        for view in (self._person_view, self._client_view, self._hairdresser_view):
            view.close()
        for collection in self._store.collections():
            collection.unsubscribe(self._mark_dirty)

    def _mark_dirty(self, _collection: UniqueCollection[Any]) -> None:
        self._dirty = True
