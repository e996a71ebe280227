"""Per-call stage timings for ``--verbose``.

A ``@timed`` service method measures its own wall time and the time spent
in each pipeline stage it enters with :func:`timed_stage`. The figures are
attached to the returned result as ``meta["telemetry"]``::

    {"name": "CreateService.add_client", "ok": true, "total_ms": 1.21,
     "stages": [{"stage": "validate", "ms": 0.84}, {"stage": "persist", "ms": 0.09}]}

A failed call also carries ``failed_at``, the last stage it entered.
Nothing is measured until :func:`enable_telemetry` runs in the current
context.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from hairstylex.services.result import ServiceResult

log = structlog.get_logger("hairstylex.telemetry")

_enabled: ContextVar[bool] = ContextVar("hairstylex_telemetry", default=False)
_active: ContextVar[CallTiming | None] = ContextVar("hairstylex_call_timing", default=None)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


@dataclass(frozen=True)
class StageTiming:
    stage: str
    ms: float


@dataclass
class CallTiming:
    """Timings gathered while one service call runs."""

    name: str
    stages: list[StageTiming] = field(default_factory=list)
    entered: str | None = None
    total_ms: float = 0.0

    def as_meta(self, *, ok: bool) -> dict[str, Any]:
        meta: dict[str, Any] = {
            "name": self.name,
            "ok": ok,
            "total_ms": self.total_ms,
            "stages": [{"stage": s.stage, "ms": s.ms} for s in self.stages],
        }
        if not ok and self.entered is not None:
            meta["failed_at"] = self.entered
        return meta


@contextmanager
def timed_stage(name: str) -> Iterator[None]:
    """Time one stage of the active call. Outside a timed call this does nothing."""
    timing = _active.get()
    if timing is None:
        yield
        return
    timing.entered = name
    start = time.perf_counter()
    try:
        yield
    finally:
        timing.stages.append(StageTiming(name, _elapsed_ms(start)))


_P = ParamSpec("_P")
_R = TypeVar("_R")


def timed(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Decorator: attach a :class:`CallTiming` to the ServiceResult a method returns."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        timing = CallTiming(func.__qualname__)
        token = _active.set(timing)
        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception:
            timing.total_ms = _elapsed_ms(start)
            log.debug("service.timed", call=timing.name, ok=False, total_ms=timing.total_ms)
            raise
        finally:
            _active.reset(token)
        timing.total_ms = _elapsed_ms(start)

        if not isinstance(result, ServiceResult):
            return result
        meta = timing.as_meta(ok=result.ok)
        log.debug(
            "service.timed",
            call=timing.name,
            ok=result.ok,
            total_ms=timing.total_ms,
            stages=len(timing.stages),
        )
        merged = {**(result.meta or {}), "telemetry": meta}
        return result.model_copy(update={"meta": merged})  # type: ignore[return-value]

    return wrapper


def enable_telemetry() -> None:
    """Turn timing on for this context (AppContext calls this for ``-v``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
