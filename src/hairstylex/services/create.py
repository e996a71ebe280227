"""CreateService — adding persons, clients, and hairdressers.

Pipeline: VALIDATE → CHECK → PERSIST → EVENT → RESPOND

CHECK rejects an identity-equal record of the same kind, and for clients
and hairdressers also rejects an individual who already holds the other
role.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from hairstylex.domain.entities import Client, Hairdresser, Person
from hairstylex.services._helpers import entity_row, validation_message
from hairstylex.services.base import BaseService
from hairstylex.services.result import ServiceResult
from hairstylex.services.telemetry import timed, timed_stage


def _details(
    name: str,
    phone: str,
    email: str,
    gender: str,
    tags: Iterable[str] | None,
) -> dict[str, Any]:
    return {
        "name": name,
        "phone": phone,
        "email": email,
        "gender": gender,
        "tags": list(tags or ()),
    }


class CreateService(BaseService):
    """Handles record creation for all kinds."""

    @timed
    def add_person(
        self,
        name: str,
        *,
        phone: str,
        email: str,
        gender: str,
        tags: Iterable[str] | None = None,
    ) -> ServiceResult:
        op = "add_person"
        with timed_stage("validate"):
            try:
                person = Person.model_validate(
                    {"details": _details(name, phone, email, gender, tags)}
                )
            except ValidationError as exc:
                return self._failure(op, "VALIDATION_FAILED", validation_message(exc))

        with timed_stage("persist"):
            if self._model.has_person(person):
                return self._duplicate(op, "person")
            self._model.add_person(person)

        return self._respond(op, person, entity_id=None)

    @timed
    def add_client(
        self,
        name: str,
        *,
        phone: str,
        email: str,
        gender: str,
        address: str,
        tags: Iterable[str] | None = None,
    ) -> ServiceResult:
        """Add a client under the next free client ID."""
        op = "add_client"
        with timed_stage("validate"):
            try:
                client = Client.model_validate(
                    {
                        "id": self._model.next_client_id(),
                        "address": address,
                        "details": _details(name, phone, email, gender, tags),
                    }
                )
            except ValidationError as exc:
                return self._failure(op, "VALIDATION_FAILED", validation_message(exc))

        with timed_stage("persist"):
            if self._model.has_client(client):
                return self._duplicate(op, "client")
            if self._model.has_counterpart(client):
                return self._role_conflict(op, "client")
            self._model.add_client(client)

        return self._respond(op, client, entity_id=client.id)

    @timed
    def add_hairdresser(
        self,
        name: str,
        *,
        phone: str,
        email: str,
        gender: str,
        title: str,
        specialisations: Iterable[str] | None = None,
        tags: Iterable[str] | None = None,
    ) -> ServiceResult:
        """Add a hairdresser under the next free hairdresser ID."""
        op = "add_hairdresser"
        with timed_stage("validate"):
            try:
                hairdresser = Hairdresser.model_validate(
                    {
                        "id": self._model.next_hairdresser_id(),
                        "title": title,
                        "specialisations": list(specialisations or ()),
                        "details": _details(name, phone, email, gender, tags),
                    }
                )
            except ValidationError as exc:
                return self._failure(op, "VALIDATION_FAILED", validation_message(exc))

        with timed_stage("persist"):
            if self._model.has_hairdresser(hairdresser):
                return self._duplicate(op, "hairdresser")
            if self._model.has_counterpart(hairdresser):
                return self._role_conflict(op, "hairdresser")
            self._model.add_hairdresser(hairdresser)

        return self._respond(op, hairdresser, entity_id=hairdresser.id)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _respond(
        self,
        op: str,
        entity: Person | Client | Hairdresser,
        *,
        entity_id: int | None,
    ) -> ServiceResult:
        warnings: list[str] = []
        with timed_stage("dispatch_event"):
            self._dispatch_event(
                "post_add",
                {"kind": entity.kind, "entity_id": entity_id, "name": entity.name},
                warnings,
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "entity": entity_row(entity),
                "message": f"New {entity.kind} added: {entity}",
            },
            warnings=warnings,
        )
