"""QueryService — listing, finding, and inspecting records.

``list_*`` and ``find_*`` change the model's filtered views: the result is
the view's contents after the filter update, and the filter stays in place
for subsequent index-based commands.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any

from hairstylex.domain.entities import Client, Hairdresser, Person
from hairstylex.domain.predicates import (
    HasSpecialisation,
    HasTag,
    NameContainsKeywords,
    Predicate,
    combine,
)
from hairstylex.services._helpers import entity_row
from hairstylex.services.base import BaseService
from hairstylex.services.result import ServiceResult
from hairstylex.services.telemetry import timed, timed_stage

NO_CRITERIA_MESSAGE = "Provide at least one keyword or filter"


class QueryService(BaseService):
    """Read-only access to the store plus filter management."""

    # ------------------------------------------------------------------
    # list
    # ------------------------------------------------------------------

    @timed
    def list_persons(self) -> ServiceResult:
        self._model.update_filtered_person_list(None)
        return self._listing("list_persons", "person", self._model.filtered_person_list)

    @timed
    def list_clients(self) -> ServiceResult:
        self._model.update_filtered_client_list(None)
        return self._listing("list_clients", "client", self._model.filtered_client_list)

    @timed
    def list_hairdressers(self) -> ServiceResult:
        self._model.update_filtered_hairdresser_list(None)
        return self._listing(
            "list_hairdressers", "hairdresser", self._model.filtered_hairdresser_list
        )

    # ------------------------------------------------------------------
    # find
    # ------------------------------------------------------------------

    @timed
    def find_persons(self, keywords: Iterable[str], *, tag: str | None = None) -> ServiceResult:
        """Filter persons by name keywords (whole words) and/or tag."""
        op = "find_persons"
        predicate = self._criteria(keywords, tag)
        if predicate is None:
            return self._failure(op, "VALIDATION_FAILED", NO_CRITERIA_MESSAGE)
        self._model.update_filtered_person_list(predicate)
        return self._listing(op, "person", self._model.filtered_person_list)

    @timed
    def find_clients(self, keywords: Iterable[str], *, tag: str | None = None) -> ServiceResult:
        op = "find_clients"
        predicate = self._criteria(keywords, tag)
        if predicate is None:
            return self._failure(op, "VALIDATION_FAILED", NO_CRITERIA_MESSAGE)
        self._model.update_filtered_client_list(predicate)
        return self._listing(op, "client", self._model.filtered_client_list)

    @timed
    def find_hairdressers(
        self,
        keywords: Iterable[str],
        *,
        tag: str | None = None,
        specialisation: str | None = None,
    ) -> ServiceResult:
        op = "find_hairdressers"
        predicate = self._criteria(
            keywords,
            tag,
            HasSpecialisation(specialisation) if specialisation else None,
        )
        if predicate is None:
            return self._failure(op, "VALIDATION_FAILED", NO_CRITERIA_MESSAGE)
        self._model.update_filtered_hairdresser_list(predicate)
        return self._listing(op, "hairdresser", self._model.filtered_hairdresser_list)

    # ------------------------------------------------------------------
    # show
    # ------------------------------------------------------------------

    @timed
    def get_client(self, client_id: int) -> ServiceResult:
        client = self._model.get_client_by_id(client_id)
        if client is None:
            return self._failure(
                "show_client", "NOT_FOUND", f"No client with ID {client_id}", id=client_id
            )
        return ServiceResult(ok=True, op="show_client", data={"entity": entity_row(client)})

    @timed
    def get_hairdresser(self, hairdresser_id: int) -> ServiceResult:
        hairdresser = self._model.get_hairdresser_by_id(hairdresser_id)
        if hairdresser is None:
            return self._failure(
                "show_hairdresser",
                "NOT_FOUND",
                f"No hairdresser with ID {hairdresser_id}",
                id=hairdresser_id,
            )
        return ServiceResult(
            ok=True, op="show_hairdresser", data={"entity": entity_row(hairdresser)}
        )

    # ------------------------------------------------------------------
    # stats
    # ------------------------------------------------------------------

    @timed
    def stats(self) -> ServiceResult:
        """Record counts, tag usage across all kinds, and specialisation coverage."""
        with timed_stage("aggregate"):
            snapshot = self._model.get_address_book()
            tags: Counter[str] = Counter()
            for record in (*snapshot.persons, *snapshot.clients, *snapshot.hairdressers):
                tags.update(record.tags)
            specialisations: Counter[str] = Counter()
            for hairdresser in snapshot.hairdressers:
                specialisations.update(hairdresser.specialisations)

        return ServiceResult(
            ok=True,
            op="stats",
            data={
                "counts": snapshot.counts(),
                "tags": dict(sorted(tags.items())),
                "specialisations": dict(sorted(specialisations.items())),
            },
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    @staticmethod
    def _criteria(
        keywords: Iterable[str],
        tag: str | None,
        *extra: Predicate | None,
    ) -> Predicate | None:
        words = tuple(w for w in keywords if w.strip())
        parts: list[Predicate | None] = [
            NameContainsKeywords(words) if words else None,
            HasTag(tag) if tag else None,
            *extra,
        ]
        if all(p is None for p in parts):
            return None
        return combine(*parts)

    @staticmethod
    def _listing(
        op: str,
        kind: str,
        view: Sequence[Person | Client | Hairdresser],
    ) -> ServiceResult:
        items: list[dict[str, Any]] = [entity_row(e) for e in view]
        data: dict[str, Any] = {"kind": kind, "count": len(items), "items": items}
        data["message"] = f"{len(items)} {kind}s listed!"
        return ServiceResult(ok=True, op=op, data=data)
