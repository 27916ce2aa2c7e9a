"""Min-priority queue with in-place priority updates.

`heapq` has no decrease-key, so an update invalidates the old heap entry and
pushes a fresh one. Invalidated entries are skipped lazily on pop. Equal
priorities pop in insertion order.
"""

from __future__ import annotations

import itertools
from heapq import heapify, heappop, heappush
from typing import Dict, Generic, Hashable, Iterable, List, Optional, Tuple, TypeVar

from navgraph.types import Cost

T = TypeVar("T", bound=Hashable)

# Marks a heap entry whose item was updated or popped
_REMOVED = object()


class UpdatablePriorityQueue(Generic[T]):
    """Priority queue supporting enqueue, extract-min, and decrease-key.

    Items must be hashable and are unique within the queue.
    """

    def __init__(self, items: Optional[Iterable[Tuple[T, Cost]]] = None) -> None:
        """Initialize the queue, optionally bulk-loading ``(item, priority)`` pairs.

        Raises:
            ValueError: If ``items`` contains the same item twice.
        """
        self._heap: List[list] = []
        self._entries: Dict[T, list] = {}
        self._counter = itertools.count()
        if items is not None:
            for item, priority in items:
                if item in self._entries:
                    raise ValueError(f"Item {item!r} is already queued.")
                entry = [priority, next(self._counter), item]
                self._entries[item] = entry
                self._heap.append(entry)
            heapify(self._heap)

    def push(self, item: T, priority: Cost) -> None:
        """Enqueue ``item``, replacing its priority if it is already queued."""
        if item in self._entries:
            self._invalidate(item)
        entry = [priority, next(self._counter), item]
        self._entries[item] = entry
        heappush(self._heap, entry)

    def update(self, item: T, priority: Cost) -> None:
        """Replace the priority of a queued item (decrease-key).

        Raises:
            KeyError: If ``item`` is not queued.
        """
        if item not in self._entries:
            raise KeyError(f"Item {item!r} is not queued.")
        self.push(item, priority)

    def pop(self) -> Tuple[T, Cost]:
        """Remove and return the ``(item, priority)`` pair with the lowest priority.

        Raises:
            IndexError: If the queue is empty.
        """
        while self._heap:
            priority, _, item = heappop(self._heap)
            if item is not _REMOVED:
                del self._entries[item]
                return item, priority
        raise IndexError("pop from an empty priority queue")

    def peek(self) -> Tuple[T, Cost]:
        """Return the lowest-priority pair without removing it.

        Raises:
            IndexError: If the queue is empty.
        """
        while self._heap and self._heap[0][2] is _REMOVED:
            heappop(self._heap)
        if not self._heap:
            raise IndexError("peek at an empty priority queue")
        priority, _, item = self._heap[0]
        return item, priority

    def priority(self, item: T) -> Cost:
        """Return the current priority of a queued item.

        Raises:
            KeyError: If ``item`` is not queued.
        """
        return self._entries[item][0]

    def discard(self, item: T) -> None:
        """Remove ``item`` if queued; do nothing otherwise."""
        if item in self._entries:
            self._invalidate(item)
            del self._entries[item]

    def _invalidate(self, item: T) -> None:
        self._entries[item][2] = _REMOVED

    def __contains__(self, item: object) -> bool:
        return item in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"UpdatablePriorityQueue(size={len(self._entries)})"
