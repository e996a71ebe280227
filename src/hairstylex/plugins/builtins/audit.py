"""Built-in audit plugin: one structured log line per mutation.

Records go through structlog under the ``hairstylex.audit`` logger, so they
follow ``--log-json`` and are visible at INFO level (``-v``).
"""

from __future__ import annotations

import structlog

from hairstylex.plugins.hookspecs import hookimpl

log = structlog.get_logger("hairstylex.audit")


class AuditPlugin:
    """Logs every add, edit, delete, and reset."""

    @hookimpl
    def post_add(self, kind: str, entity_id: int | None, name: str) -> None:
        log.info("record.added", kind=kind, entity_id=entity_id, name=name)

    @hookimpl
    def post_edit(self, kind: str, entity_id: int | None, fields_changed: list[str]) -> None:
        log.info(
            "record.edited",
            kind=kind,
            entity_id=entity_id,
            fields_changed=fields_changed,
        )

    @hookimpl
    def post_delete(self, kind: str, entity_id: int | None, name: str) -> None:
        log.info("record.deleted", kind=kind, entity_id=entity_id, name=name)

    @hookimpl
    def post_reset(self, counts: dict[str, int]) -> None:
        log.info("store.reset", **counts)
