"""Shared service-layer helper functions."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from hairstylex.domain.entities import Client, Hairdresser, Person

_VALUE_ERROR_PREFIX = "Value error, "


def entity_row(entity: Person | Client | Hairdresser) -> dict[str, Any]:
    """Flatten an entity into one JSON-safe dict: kind, id, details, role fields."""
    data = entity.model_dump(mode="json")
    details = data.pop("details")
    row: dict[str, Any] = {"kind": data.pop("kind")}
    if "id" in data:
        row["id"] = data.pop("id")
    row.update(details)
    row.update(data)
    return row


def validation_message(exc: ValidationError) -> str:
    """Join pydantic errors as ``field: message`` pairs.

    Only the last element of each error location is kept, so nested detail
    fields read as ``phone: ...`` rather than ``details.phone: ...``.
    """
    parts: list[str] = []
    for err in exc.errors():
        msg = err["msg"].removeprefix(_VALUE_ERROR_PREFIX)
        loc = err["loc"]
        parts.append(f"{loc[-1]}: {msg}" if loc else msg)
    return "; ".join(parts)


def changed_fields(
    before: Person | Client | Hairdresser,
    after: Person | Client | Hairdresser,
) -> list[str]:
    """Names of the flat fields whose values differ between two records."""
    old, new = entity_row(before), entity_row(after)
    return sorted(k for k in new if old.get(k) != new[k])
