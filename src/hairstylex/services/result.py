"""ServiceResult and ServiceError — the contract every service method returns.

INVARIANT: Service methods report failures through ``ServiceResult(ok=False)``;
they raise only on programmer errors (``TypeError`` from the store).
The CLI and the interactive shell both consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add_client"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues (plugin hook failures and the like).
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (stage timings when ``-v`` is set).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
