"""Synchronous event dispatch via pluggy.

Each dispatch is recorded as an :class:`EventRecord`. A hook that raises is
logged and recorded as failed; the exception never reaches the caller.

INVARIANT: Plugin failures are warnings, never errors.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from hairstylex.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

EventStatus = Literal["completed", "failed"]


@dataclass(frozen=True)
class EventRecord:
    """Outcome of one hook dispatch."""

    hook_name: str
    payload: dict[str, Any] = field(default_factory=dict)
    status: EventStatus = "completed"
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.status == "failed"


class EventBus:
    """Dispatch lifecycle hooks and keep a bounded history of outcomes.

    Parameters:
        plugin_manager: Loaded PluginManager for hook dispatch.
        history_size: How many recent records :attr:`history` retains.
    """

    def __init__(self, plugin_manager: PluginManager, *, history_size: int = 100) -> None:
        self._pm = plugin_manager
        self._history: deque[EventRecord] = deque(maxlen=history_size)

    @property
    def plugin_manager(self) -> PluginManager:
        return self._pm

    @property
    def history(self) -> list[EventRecord]:
        """Most recent dispatches, oldest first."""
        return list(self._history)

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> EventRecord:
        """Call every implementation of *hook_name* with *payload* as kwargs."""
        hook_fn = getattr(self._pm.hook, hook_name, None)
        if hook_fn is None:
            record = EventRecord(hook_name, payload, "failed", f"Unknown hook {hook_name!r}")
        else:
            try:
                hook_fn(**payload)
            except Exception as exc:
                logger.warning("Hook %s failed: %s", hook_name, exc, exc_info=True)
                record = EventRecord(hook_name, payload, "failed", str(exc))
            else:
                record = EventRecord(hook_name, payload)
        self._history.append(record)
        return record
