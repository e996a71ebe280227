"""Store exceptions.

INVARIANT: A store operation that raises leaves every collection unchanged.
"""

from __future__ import annotations


class StoreError(Exception):
    """Base class for store failures. ``entity`` is the offending record."""

    def __init__(self, message: str, entity: object = None) -> None:
        super().__init__(message)
        self.entity = entity


class DuplicateEntityError(StoreError):
    """An add or replace would put two identity-equal records in one collection."""


class DuplicateElementsError(DuplicateEntityError):
    """A bulk replacement list contains two identity-equal records."""


class RoleConflictError(DuplicateEntityError):
    """A client and a hairdresser would describe the same individual."""


class EntityNotFoundError(StoreError):
    """The targeted record is not present (compared by full equality)."""
