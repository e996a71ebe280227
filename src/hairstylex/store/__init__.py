"""Store layer — in-memory record collections with uniqueness enforcement.

The store depends on the domain layer only. It never formats user-facing
messages; services translate its exceptions into ServiceResult errors.
"""

from hairstylex.store.errors import (
    DuplicateElementsError,
    DuplicateEntityError,
    EntityNotFoundError,
    RoleConflictError,
    StoreError,
)
from hairstylex.store.model import StoreModel
from hairstylex.store.records import RecordStore
from hairstylex.store.unique import UniqueCollection
from hairstylex.store.views import FilteredView

__all__ = [
    "DuplicateElementsError",
    "DuplicateEntityError",
    "EntityNotFoundError",
    "FilteredView",
    "RecordStore",
    "RoleConflictError",
    "StoreError",
    "StoreModel",
    "UniqueCollection",
]
