"""BaseService — foundation for all hairstylex services.

Every service receives the :class:`StoreModel` at construction time, plus
an optional :class:`EventBus` for plugin hooks. Services own the policy
(duplicate and role checks, user-facing messages); the store only enforces
its invariants.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from hairstylex.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from hairstylex.plugins.event_bus import EventBus
    from hairstylex.store.model import StoreModel

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class CreateService(BaseService):
            def add_client(self, ...) -> ServiceResult:
                client = Client(...)
                self._model.add_client(client)
                ...
    """

    def __init__(self, model: StoreModel, *, event_bus: EventBus | None = None) -> None:
        self._model = model
        self._event_bus = event_bus

    @staticmethod
    def _failure(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Dispatch a lifecycle event. No-op without an event bus.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._event_bus is None:
            return
        record = self._event_bus.dispatch(hook_name, payload)
        if record.failed:
            logger.debug("Event %s failed: %s", hook_name, record.error)
            warnings.append(f"Plugin hook {hook_name} failed: {record.error}")

    @classmethod
    def _duplicate(cls, op: str, kind: str) -> ServiceResult:
        return cls._failure(
            op,
            f"DUPLICATE_{kind.upper()}",
            f"This {kind} already exists in HairStyleX.",
            kind=kind,
        )

    @classmethod
    def _role_conflict(cls, op: str, kind: str) -> ServiceResult:
        other = "Hairdresser" if kind == "client" else "Client"
        return cls._failure(
            op,
            "ROLE_CONFLICT",
            f"This person already exists in HairStyleX, and is a {other}",
            kind=kind,
        )
