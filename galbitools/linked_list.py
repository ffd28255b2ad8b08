"""A doubly ended list that hands items out in the order they were added."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from typing import Any, Optional

Dealloc = Callable[[Any], None]


class LinkedListError(Exception):
    """Base class for list failures."""


class EmptyListError(LinkedListError, LookupError):
    """Raised when an item is requested from an empty list."""


class LinkedList:
    """List where new items go to the head and old items leave from the tail.

    Each item may carry a release callback that is invoked when the list is
    flushed.  Items taken out with :meth:`remove` or :meth:`search` are handed
    back to the caller and are not released.
    """

    def __init__(self) -> None:
        # Index 0 is the head (newest), the right end is the tail (oldest).
        self._items: deque[tuple[Any, Optional[Dealloc]]] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the stored items from head (newest) to tail (oldest)."""
        return (data for data, _ in list(self._items))

    def add(self, data: Any, dealloc: Optional[Dealloc] = None) -> None:
        """Put ``data`` at the head of the list."""
        if data is None:
            raise ValueError("data must not be None")
        self._items.appendleft((data, dealloc))

    def remove(self) -> Any:
        """Take the oldest item from the tail and return it."""
        if not self._items:
            raise EmptyListError("list is empty")
        data, _ = self._items.pop()
        return data

    def is_empty(self) -> bool:
        """Return True when the list holds no items."""
        return not self._items

    def flush(self) -> None:
        """Drop every item, calling its release callback if it has one."""
        while self._items:
            data, dealloc = self._items.popleft()
            if dealloc is not None:
                dealloc(data)

    def search(
        self,
        equal: Callable[[Any, Any], bool],
        key: Any = None,
        remove: bool = False,
    ) -> Any:
        """Return the first item from the head for which ``equal(key, item)`` holds.

        Returns None when nothing matches.  With ``remove`` the match is taken
        out of the list.  Raises :class:`EmptyListError` on an empty list.
        """
        if equal is None:
            raise ValueError("equal must be callable")
        if not self._items:
            raise EmptyListError("list is empty")
        for position, (data, _) in enumerate(self._items):
            if equal(key, data):
                if remove:
                    del self._items[position]
                return data
        return None