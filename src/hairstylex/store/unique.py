"""UniqueCollection — an ordered sequence that rejects identity duplicates.

Two notions of sameness are in play:

- **identity** (the collection's ``is_same`` predicate) decides whether a
  record may be added or used as a replacement;
- **full equality** (``==``) locates the record targeted by
  :meth:`UniqueCollection.set_element` and :meth:`UniqueCollection.remove`,
  so callers must hold the exact current object.

After every successful mutation the collection publishes itself to its
subscribers, synchronously and in subscription order. Failed mutations
publish nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Generic, TypeVar, overload

from hairstylex.store.errors import (
    DuplicateElementsError,
    DuplicateEntityError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[["UniqueCollection[T]"], None]


def find_duplicate(
    items: Sequence[T],
    is_same: Callable[[T, T], bool],
) -> tuple[T, T] | None:
    """Return the first identity-equal pair in *items*, or None."""
    for i, first in enumerate(items):
        for second in items[i + 1 :]:
            if is_same(first, second):
                return first, second
    return None


class UniqueCollection(Generic[T]):
    """Insertion-ordered collection of one record kind.

    Parameters:
        kind: Label used in error messages and logs (e.g. ``"client"``).
        is_same: Identity predicate for this kind.
    """

    def __init__(self, kind: str, is_same: Callable[[T, T], bool]) -> None:
        self._kind = kind
        self._is_same = is_same
        self._items: list[T] = []
        self._listeners: list[Listener[T]] = []

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def is_same(self) -> Callable[[T, T], bool]:
        return self._is_same

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, item: T) -> bool:
        """True iff some stored record is identity-equal to *item*."""
        return any(self._is_same(existing, item) for existing in self._items)

    def collides(self, target: T, replacement: T) -> bool:
        """True iff *replacement* is identity-equal to a stored record other than *target*.

        Raises EntityNotFoundError if *target* is not stored.
        """
        index = self._index_of(target)
        return any(
            i != index and self._is_same(existing, replacement)
            for i, existing in enumerate(self._items)
        )

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        """Return the first record matching *predicate*, or None."""
        for item in self._items:
            if predicate(item):
                return item
        return None

    def as_view(self) -> CollectionView[T]:
        """A read-only sequence that always reflects the current contents."""
        return CollectionView(self)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, item: T) -> None:
        """Append *item*. Raises DuplicateEntityError if already contained."""
        if self.contains(item):
            msg = f"Duplicate {self._kind}"
            raise DuplicateEntityError(msg, item)
        self._items.append(item)
        logger.debug("Added %s at position %d", self._kind, len(self._items) - 1)
        self._publish()

    def set_element(self, target: T, replacement: T) -> None:
        """Replace *target* with *replacement* at the same position.

        The replacement may be identity-equal to *target* itself (an edit),
        but not to any other stored record.
        """
        if self.collides(target, replacement):
            msg = f"Duplicate {self._kind}"
            raise DuplicateEntityError(msg, replacement)
        index = self._index_of(target)
        self._items[index] = replacement
        logger.debug("Replaced %s at position %d", self._kind, index)
        self._publish()

    def remove(self, item: T) -> None:
        """Remove the record equal to *item*. Raises EntityNotFoundError if absent."""
        index = self._index_of(item)
        del self._items[index]
        logger.debug("Removed %s at position %d", self._kind, index)
        self._publish()

    def set_all(self, items: Iterable[T]) -> None:
        """Replace the whole contents with *items*, in order.

        Raises DuplicateElementsError (contents unchanged) if *items* holds
        two identity-equal records.
        """
        staged = list(items)
        pair = find_duplicate(staged, self._is_same)
        if pair is not None:
            msg = f"Duplicate {self._kind} records in replacement list"
            raise DuplicateElementsError(msg, pair[1])
        self._items = staged
        logger.debug("Reset %s collection to %d records", self._kind, len(staged))
        self._publish()

    # ------------------------------------------------------------------
    # Subscribers
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener[T]) -> None:
        """Call *listener* with this collection after every successful mutation."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener[T]) -> None:
        self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Sequence-like protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueCollection):
            return NotImplemented
        return self._kind == other._kind and self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"UniqueCollection(kind={self._kind!r}, size={len(self._items)})"

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _index_of(self, target: T) -> int:
        for i, existing in enumerate(self._items):
            if existing == target:
                return i
        msg = f"{self._kind.capitalize()} not found"
        raise EntityNotFoundError(msg, target)

    def _publish(self) -> None:
        for listener in list(self._listeners):
            listener(self)


class CollectionView(Sequence[T]):
    """Live, read-only sequence over a UniqueCollection."""

    def __init__(self, source: UniqueCollection[T]) -> None:
        self._source = source

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...

    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        if isinstance(index, slice):
            return tuple(self._source)[index]
        return self._source[index]

    def __len__(self) -> int:
        return len(self._source)

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    def __repr__(self) -> str:
        return f"CollectionView({list(self._source)!r})"
