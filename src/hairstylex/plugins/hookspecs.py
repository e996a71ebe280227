"""Pluggy hook specifications for hairstylex mutation events.

All hooks fire synchronously after the store has been changed, so a hook
implementation always sees the committed state.
"""

from __future__ import annotations

import pluggy

PROJECT_NAME = "hairstylex"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class HairstylexHookSpec:
    """Hook specifications for the hairstylex plugin system."""

    @hookspec
    def post_add(self, kind: str, entity_id: int | None, name: str) -> None:
        """Called after a person, client, or hairdresser is added.

        *entity_id* is None for persons, which have no ID.
        """

    @hookspec
    def post_edit(self, kind: str, entity_id: int | None, fields_changed: list[str]) -> None:
        """Called after a record is replaced by its edited version."""

    @hookspec
    def post_delete(self, kind: str, entity_id: int | None, name: str) -> None:
        """Called after a record is removed."""

    @hookspec
    def post_reset(self, counts: dict[str, int]) -> None:
        """Called after the whole store is replaced.

        *counts* holds the per-kind totals that were removed.
        """
