"""FilteredView — live, read-only projection of a UniqueCollection.

The view subscribes to its source collection and recomputes inside the
source's publish step, so no read after a completed mutation can observe
stale contents. Presentation code that wants to re-render on change
subscribes to the view itself.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import TYPE_CHECKING, TypeVar, overload

from hairstylex.domain.predicates import SHOW_ALL

if TYPE_CHECKING:
    from hairstylex.store.unique import UniqueCollection

T = TypeVar("T")

ViewListener = Callable[["FilteredView[T]"], None]


class FilteredView(Sequence[T]):
    """Records of *source* matching the active predicate, in source order.

    Parameters:
        source: Backing collection. Mutations must go through the store.
        predicate: Initial filter; ``None`` shows every record.
    """

    def __init__(
        self,
        source: UniqueCollection[T],
        predicate: Callable[[T], bool] | None = None,
    ) -> None:
        self._source = source
        self._predicate: Callable[[T], bool] = predicate or SHOW_ALL
        self._items: tuple[T, ...] = ()
        self._listeners: list[ViewListener[T]] = []
        source.subscribe(self._on_source_changed)
        self._recompute()

    @property
    def predicate(self) -> Callable[[T], bool]:
        return self._predicate

    @property
    def is_filtered(self) -> bool:
        return self._predicate is not SHOW_ALL

    def update_filter(self, predicate: Callable[[T], bool] | None) -> None:
        """Replace the active predicate and recompute immediately."""
        self._predicate = predicate or SHOW_ALL
        self._recompute()

    def subscribe(self, listener: ViewListener[T]) -> None:
        """Call *listener* with this view after every recompute."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: ViewListener[T]) -> None:
        self._listeners.remove(listener)

    def close(self) -> None:
        """Detach from the source collection; the view stops updating."""
        self._source.unsubscribe(self._on_source_changed)
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Sequence protocol (read-only)
    # ------------------------------------------------------------------

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...

    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"FilteredView(kind={self._source.kind!r}, shown={len(self._items)})"

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _on_source_changed(self, _source: UniqueCollection[T]) -> None:
        self._recompute()

    def _recompute(self) -> None:
        self._items = tuple(item for item in self._source if self._predicate(item))
        for listener in list(self._listeners):
            listener(self)
