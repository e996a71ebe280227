"""UpdateService — editing existing records.

Clients and hairdressers are addressed by their stable ID; persons by their
1-based position in the filtered person list, so an edit in the shell
targets the row the last ``list``/``find`` displayed.

A successful edit resets that kind's filter to show everything.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from hairstylex.domain.entities import Client, Hairdresser, Person, apply_changes
from hairstylex.services._helpers import changed_fields, entity_row, validation_message
from hairstylex.services.base import BaseService
from hairstylex.services.result import ServiceResult
from hairstylex.services.telemetry import timed, timed_stage

NO_CHANGES_MESSAGE = "At least one field to edit must be provided."
UNCHANGED_MESSAGE = "The edit leaves every field as it was."


class UpdateService(BaseService):
    """Handles edits for all kinds."""

    @timed
    def edit_client(self, client_id: int, changes: dict[str, Any]) -> ServiceResult:
        op = "edit_client"
        target = self._model.get_client_by_id(client_id)
        if target is None:
            return self._failure(
                op, "NOT_FOUND", f"No client with ID {client_id}", id=client_id
            )
        return self._edit(op, target, changes)

    @timed
    def edit_hairdresser(self, hairdresser_id: int, changes: dict[str, Any]) -> ServiceResult:
        op = "edit_hairdresser"
        target = self._model.get_hairdresser_by_id(hairdresser_id)
        if target is None:
            return self._failure(
                op, "NOT_FOUND", f"No hairdresser with ID {hairdresser_id}", id=hairdresser_id
            )
        return self._edit(op, target, changes)

    @timed
    def edit_person(self, index: int, changes: dict[str, Any]) -> ServiceResult:
        """Edit the person shown at 1-based *index* in the filtered list."""
        op = "edit_person"
        shown = self._model.filtered_person_list
        if not 1 <= index <= len(shown):
            return self._failure(
                op, "INVALID_INDEX", "The person index provided is invalid", index=index
            )
        return self._edit(op, shown[index - 1], changes)

    # ------------------------------------------------------------------
    # Shared pipeline
    # ------------------------------------------------------------------

    def _edit(
        self,
        op: str,
        target: Person | Client | Hairdresser,
        changes: dict[str, Any],
    ) -> ServiceResult:
        """VALIDATE → CHECK → PERSIST → EVENT → RESPOND."""
        kind = target.kind
        if not changes:
            return self._failure(op, "NO_CHANGES", NO_CHANGES_MESSAGE)

        with timed_stage("validate"):
            try:
                edited = apply_changes(target, changes)
            except ValidationError as exc:
                return self._failure(op, "VALIDATION_FAILED", validation_message(exc))
            except ValueError as exc:
                return self._failure(op, "VALIDATION_FAILED", str(exc))

        fields = changed_fields(target, edited)
        if not fields:
            return self._failure(op, "NO_CHANGES", UNCHANGED_MESSAGE)

        with timed_stage("persist"):
            if self._model.collides(target, edited):
                return self._duplicate(op, kind)
            if not isinstance(edited, Person) and self._model.has_counterpart(edited):
                return self._role_conflict(op, kind)
            self._replace(target, edited)

        entity_id = getattr(edited, "id", None)
        warnings: list[str] = []
        with timed_stage("dispatch_event"):
            self._dispatch_event(
                "post_edit",
                {"kind": kind, "entity_id": entity_id, "fields_changed": fields},
                warnings,
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "entity": entity_row(edited),
                "fields_changed": fields,
                "message": f"Edited {kind.capitalize()}: {edited}",
            },
            warnings=warnings,
        )

    def _replace(
        self,
        target: Person | Client | Hairdresser,
        edited: Person | Client | Hairdresser,
    ) -> None:
        """Swap *target* for *edited* and reset that kind's filter."""
        if isinstance(target, Client) and isinstance(edited, Client):
            self._model.set_client(target, edited)
            self._model.update_filtered_client_list(None)
        elif isinstance(target, Hairdresser) and isinstance(edited, Hairdresser):
            self._model.set_hairdresser(target, edited)
            self._model.update_filtered_hairdresser_list(None)
        elif isinstance(target, Person) and isinstance(edited, Person):
            self._model.set_person(target, edited)
            self._model.update_filtered_person_list(None)
        else:
            msg = f"Cannot replace a {target.kind} with a {edited.kind}"
            raise TypeError(msg)
