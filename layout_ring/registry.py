"""Per-context state storage and the ring registry built on top of it."""

import logging
from typing import Any, Dict, List, Optional, Protocol, Tuple

from .models import ContextId
from .ring import Ring

logger = logging.getLogger(__name__)

RING_KEY = "layout-ring"
CURRENT_NAME_KEY = "layout-ring-current-name"


class ContextStateStore(Protocol):
    """Key/value storage scoped to one display context."""

    def get(self, context_id: ContextId, key: str, default: Any = None) -> Any:
        ...

    def set(self, context_id: ContextId, key: str, value: Any) -> None:
        ...


class InMemoryContextStateStore:
    """Process-lifetime context storage backed by a dictionary."""

    def __init__(self) -> None:
        self._values: Dict[Tuple[ContextId, str], Any] = {}

    def get(self, context_id: ContextId, key: str, default: Any = None) -> Any:
        return self._values.get((context_id, key), default)

    def set(self, context_id: ContextId, key: str, value: Any) -> None:
        self._values[(context_id, key)] = value


class ContextRegistry:
    """Maps each display context to its own ring and live layout name.

    Rings are created lazily on first access and never shared between
    contexts. Context teardown belongs to the host.
    """

    def __init__(self, store: ContextStateStore, capacity: int = 7) -> None:
        """
        Args:
            store: Context-scoped storage capability
            capacity: Capacity of each newly created ring
        """
        if capacity < 1:
            raise ValueError(f"Ring capacity must be >= 1, got {capacity}")
        self.store = store
        self.capacity = capacity
        self._known: List[ContextId] = []

    def get(self, context_id: ContextId) -> Ring:
        """Return the context's ring, creating it on first use."""
        ring = self.store.get(context_id, RING_KEY)
        if ring is None:
            ring = Ring(self.capacity)
            self.store.set(context_id, RING_KEY, ring)
            self._known.append(context_id)
            logger.debug(f"Created ring (capacity={self.capacity}) for context {context_id!r}")
        return ring

    def current_name(self, context_id: ContextId) -> Optional[str]:
        return self.store.get(context_id, CURRENT_NAME_KEY)

    def set_current_name(self, context_id: ContextId, name: str) -> None:
        self.store.set(context_id, CURRENT_NAME_KEY, name)

    def contexts(self) -> List[ContextId]:
        """Contexts whose ring has been created, in creation order."""
        return list(self._known)
