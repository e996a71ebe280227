"""DeleteService — removing records and clearing the store."""

from __future__ import annotations

from hairstylex.domain.entities import Client, Hairdresser, Person, Snapshot
from hairstylex.services._helpers import entity_row
from hairstylex.services.base import BaseService
from hairstylex.services.result import ServiceResult
from hairstylex.services.telemetry import timed, timed_stage


class DeleteService(BaseService):
    """Handles deletion for all kinds, plus a full reset."""

    @timed
    def delete_client(self, client_id: int) -> ServiceResult:
        op = "delete_client"
        client = self._model.get_client_by_id(client_id)
        if client is None:
            return self._failure(op, "NOT_FOUND", f"No client with ID {client_id}", id=client_id)
        with timed_stage("persist"):
            self._model.delete_client(client)
        return self._respond(op, client)

    @timed
    def delete_hairdresser(self, hairdresser_id: int) -> ServiceResult:
        op = "delete_hairdresser"
        hairdresser = self._model.get_hairdresser_by_id(hairdresser_id)
        if hairdresser is None:
            return self._failure(
                op, "NOT_FOUND", f"No hairdresser with ID {hairdresser_id}", id=hairdresser_id
            )
        with timed_stage("persist"):
            self._model.delete_hairdresser(hairdresser)
        return self._respond(op, hairdresser)

    @timed
    def delete_person(self, index: int) -> ServiceResult:
        """Delete the person shown at 1-based *index* in the filtered list."""
        op = "delete_person"
        shown = self._model.filtered_person_list
        if not 1 <= index <= len(shown):
            return self._failure(
                op, "INVALID_INDEX", "The person index provided is invalid", index=index
            )
        person = shown[index - 1]
        with timed_stage("persist"):
            self._model.delete_person(person)
        return self._respond(op, person)

    @timed
    def clear(self) -> ServiceResult:
        """Remove every record of every kind.

        ``post_reset`` receives the counts that were removed.
        """
        op = "clear"
        removed = self._model.get_address_book().counts()
        with timed_stage("persist"):
            self._model.reset_data(Snapshot())

        warnings: list[str] = []
        with timed_stage("dispatch_event"):
            self._dispatch_event("post_reset", {"counts": removed}, warnings)

        return ServiceResult(
            ok=True,
            op=op,
            data={"removed": removed, "message": "HairStyleX has been cleared!"},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _respond(self, op: str, entity: Person | Client | Hairdresser) -> ServiceResult:
        warnings: list[str] = []
        with timed_stage("dispatch_event"):
            self._dispatch_event(
                "post_delete",
                {
                    "kind": entity.kind,
                    "entity_id": getattr(entity, "id", None),
                    "name": entity.name,
                },
                warnings,
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "entity": entity_row(entity),
                "message": f"Deleted {entity.kind.capitalize()}: {entity}",
            },
            warnings=warnings,
        )
