"""Fixed-capacity ring of layout snapshots.

Offset 0 is the front (most recently deposited), the highest offset is the
back (oldest). Inserting at either end of a full ring drops the item at the
opposite end.
"""

import logging
from collections import deque
from typing import Iterator, List, Optional

from .errors import OutOfRange
from .models import Snapshot

logger = logging.getLogger(__name__)


class Ring:
    """Bounded double-ended ring with arbitrary-offset removal."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"Ring capacity must be >= 1, got {capacity}")
        self._capacity = int(capacity)
        self._items: deque[Snapshot] = deque(maxlen=self._capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Ring(capacity={self._capacity}, names={self.names()!r})"

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def insert_front(self, item: Snapshot) -> Optional[Snapshot]:
        """Insert at offset 0.

        Returns:
            The snapshot evicted from the back, or None
        """
        evicted = self._items[-1] if self.is_full() else None
        self._items.appendleft(item)
        if evicted is not None:
            logger.debug(f"Evicted '{evicted.name}' from back of ring")
        return evicted

    def insert_back(self, item: Snapshot) -> Optional[Snapshot]:
        """Insert after the oldest item.

        Returns:
            The snapshot evicted from the front, or None
        """
        evicted = self._items[0] if self.is_full() else None
        self._items.append(item)
        if evicted is not None:
            logger.debug(f"Evicted '{evicted.name}' from front of ring")
        return evicted

    def peek_at(self, offset: int) -> Snapshot:
        self._check_offset(offset)
        return self._items[offset]

    def remove_at(self, offset: Optional[int] = None) -> Snapshot:
        """Remove and return the item at offset (default: the back).

        Raises:
            OutOfRange: If offset does not address an occupied slot
        """
        if offset is None:
            offset = len(self._items) - 1
        self._check_offset(offset)
        item = self._items[offset]
        del self._items[offset]
        return item

    def names(self) -> List[str]:
        """Snapshot names, front to back."""
        return [item.name for item in self._items]

    def snapshots(self) -> List[Snapshot]:
        return list(self._items)

    def _check_offset(self, offset: int) -> None:
        if offset < 0 or offset >= len(self._items):
            raise OutOfRange(offset, len(self._items))
