"""FIFO frontier used by the breadth-first solver."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque

from ..errors import FrontierClosedError, FrontierEmptyError


@dataclass(frozen=True)
class FrontierEntry:
    """A discovered cell and the number of steps needed to reach it.

    Entering the start cell counts as step 1.
    """

    row: int
    col: int
    steps: int


class FrontierQueue:
    """Strict insertion-order queue of ``FrontierEntry`` records.

    ``remove`` hands ownership of the entry to the caller. After ``destroy`` the
    queue refuses further use.
    """

    def __init__(self) -> None:
        self._entries: Deque[FrontierEntry] | None = deque()
        # Total inserts over the queue's lifetime; clear() does not reset it.
        self.insert_count = 0

    def _storage(self) -> Deque[FrontierEntry]:
        if self._entries is None:
            raise FrontierClosedError("frontier queue has been destroyed")
        return self._entries

    def insert(self, row: int, col: int, steps: int) -> None:
        self._storage().append(FrontierEntry(row=row, col=col, steps=steps))
        self.insert_count += 1

    def remove(self) -> FrontierEntry:
        entries = self._storage()
        if not entries:
            raise FrontierEmptyError("remove() called on an empty frontier queue")
        return entries.popleft()

    def is_empty(self) -> bool:
        return not self._storage()

    def clear(self) -> None:
        """Drop every queued entry. No-op on an empty or destroyed queue."""
        if self._entries is not None:
            self._entries.clear()

    def destroy(self) -> None:
        self.clear()
        self._entries = None

    @property
    def destroyed(self) -> bool:
        return self._entries is None

    def __len__(self) -> int:
        return len(self._storage())
