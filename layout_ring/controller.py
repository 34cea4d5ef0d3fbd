"""
Layout ring controller

Creates, rotates, jumps between, deletes and renames the named layouts of
the host's selected context. The live layout is never in the ring: it is
saved into the ring when another layout takes its place, and a layout
restored from the ring leaves it until it is saved again.

Every operation validates and captures before it mutates anything, and the
host restore runs before the ring changes, so a rejected restore leaves the
ring and the current name as they were.
"""

import logging
from typing import List, Optional, Set, Tuple, Union

from .config import RingConfig
from .errors import RingEmpty
from .host import LayoutHost
from .models import ContextId, Snapshot
from .naming import CURRENT, NameGenerator, Resolved, existing_names, resolve, validate_unique
from .registry import ContextRegistry, InMemoryContextStateStore
from .ring import Ring

logger = logging.getLogger(__name__)


class LayoutController:
    """Sole mutator of each context's ring and current layout name."""

    def __init__(
        self,
        host: LayoutHost,
        config: Optional[RingConfig] = None,
        registry: Optional[ContextRegistry] = None,
        names: Optional[NameGenerator] = None,
    ):
        """
        Initialize the controller

        Args:
            host: Host capabilities (capture, restore, prompts)
            config: Ring options (default: RingConfig())
            registry: Context registry (default: in-memory, sized from config)
            names: Default name source shared by all contexts
        """
        self.host = host
        self.config = config or RingConfig()
        self.registry = registry or ContextRegistry(
            InMemoryContextStateStore(), capacity=self.config.ring_capacity
        )
        self.names = names or NameGenerator()

    # Queries

    def current_name(self) -> str:
        _, _, current = self._context()
        return current

    def ring(self) -> Ring:
        _, ring, _ = self._context()
        return ring

    def names_in_use(self) -> Set[str]:
        _, ring, current = self._context()
        return existing_names(ring, current)

    def layouts(self) -> Tuple[str, List[Snapshot]]:
        """Current name and the saved snapshots, front to back."""
        _, ring, current = self._context()
        return current, ring.snapshots()

    # Operations

    def create(self, name: Optional[str] = None) -> str:
        """Save the live layout and start a fresh one showing the default view.

        Returns:
            Name of the new current layout

        Raises:
            NameCollision: If name is already used in this context
        """
        return self._start_layout(name, reset_view=True)

    def duplicate(self, name: Optional[str] = None) -> str:
        """Save the live layout and keep showing it under a new name."""
        return self._start_layout(name, reset_view=False)

    def next(self) -> str:
        """Rotate the most recently saved layout in; the live one goes to the back.

        Raises:
            RingEmpty: If no other layout is saved
        """
        context_id, ring, current = self._context()
        if len(ring) == 0:
            raise RingEmpty("switch to the next layout", current)
        return self._swap(context_id, ring, current, offset=0, save_at_front=False)

    def previous(self) -> str:
        """Rotate the oldest saved layout in; the live one goes to the front.

        Raises:
            RingEmpty: If no other layout is saved
        """
        context_id, ring, current = self._context()
        if len(ring) == 0:
            raise RingEmpty("switch to the previous layout", current)
        return self._swap(context_id, ring, current, offset=len(ring) - 1, save_at_front=True)

    def jump_to(self, name: Union[str, Resolved, None], create_missing: bool = True) -> str:
        """Make the named layout current.

        Jumping to the current layout does nothing. An unknown name is
        created as a duplicate of the live layout when create_missing is
        set.

        Raises:
            NotFound: If name is unknown and create_missing is False
        """
        context_id, ring, current = self._context()
        if name is CURRENT:
            return current
        if not name:
            if not create_missing:
                raise ValueError("Layout name cannot be empty")
            return self.duplicate()

        if create_missing and name not in existing_names(ring, current):
            logger.info(f"Layout '{name}' does not exist, creating it from the live layout")
            return self.duplicate(name)

        resolved = resolve(name, ring, current)
        if resolved is CURRENT:
            logger.debug(f"Already on layout '{name}'")
            return current
        return self._swap(context_id, ring, current, offset=resolved, save_at_front=True)

    def delete(self, name: Union[str, Resolved, None] = None) -> str:
        """Delete a layout (default: the live one).

        Deleting the live layout drops it and restores the most recently
        saved one. Deleting a saved layout just discards it.

        Returns:
            Name of the deleted layout

        Raises:
            NotFound: If no layout has the name
            RingEmpty: If the live layout is the only one left
        """
        context_id, ring, current = self._context()
        resolved = CURRENT if name is None or name is CURRENT else resolve(name, ring, current)

        if resolved is not CURRENT:
            removed = ring.remove_at(resolved)
            logger.info(f"Deleted saved layout '{removed.name}' from context {context_id!r}")
            return removed.name

        if len(ring) == 0:
            raise RingEmpty("delete the current layout", current)

        target = ring.peek_at(0)
        self.host.restore_layout(target.capture)
        ring.remove_at(0)
        self._activate(context_id, target)
        logger.info(f"Deleted layout '{current}', now on '{target.name}'")
        return current

    def rename(self, new_name: str) -> str:
        """Rename the live layout.

        Raises:
            NameCollision: If a saved layout already has the name
        """
        context_id, ring, current = self._context()
        if not new_name:
            raise ValueError("Layout name cannot be empty")
        validate_unique(new_name, ring.names())
        self._set_current_name(context_id, new_name)
        logger.info(f"Renamed layout '{current}' to '{new_name}'")
        return new_name

    # Internals

    def _context(self) -> Tuple[ContextId, Ring, str]:
        context_id = self.host.selected_context()
        ring = self.registry.get(context_id)
        current = self.registry.current_name(context_id)
        if current is None:
            current = self.names.generate()
            self.registry.set_current_name(context_id, current)
            logger.debug(f"Context {context_id!r} starts on layout '{current}'")
        return context_id, ring, current

    def _start_layout(self, name: Optional[str], reset_view: bool) -> str:
        context_id, ring, current = self._context()
        if not name:
            name = self.names.generate()
        validate_unique(name, existing_names(ring, current))

        evicted = ring.insert_front(self._capture(current))
        if evicted is not None:
            logger.info(f"Ring full, dropped oldest layout '{evicted.name}'")

        if reset_view:
            self.host.reset_to_default_view(self.config.default_content)
        self._set_current_name(context_id, name)
        logger.info(f"{'Created' if reset_view else 'Duplicated'} layout '{name}' (saved '{current}')")
        return name

    def _swap(self, context_id: ContextId, ring: Ring, current: str, offset: int, save_at_front: bool) -> str:
        target = ring.peek_at(offset)
        saved = self._capture(current)
        self.host.restore_layout(target.capture)

        ring.remove_at(offset)
        if save_at_front:
            ring.insert_front(saved)
        else:
            ring.insert_back(saved)
        logger.debug(f"Ring for {context_id!r} is now {ring.names()}")

        self._activate(context_id, target)
        logger.info(f"Switched from layout '{current}' to '{target.name}'")
        return target.name

    def _capture(self, name: str) -> Snapshot:
        return Snapshot(
            name=name,
            capture=self.host.capture_layout(),
            cursor_offset=self.host.get_cursor_position(),
        )

    def _activate(self, context_id: ContextId, snapshot: Snapshot) -> None:
        self.host.set_cursor_position(snapshot.cursor_offset)
        self._set_current_name(context_id, snapshot.name)

    def _set_current_name(self, context_id: ContextId, name: str) -> None:
        self.registry.set_current_name(context_id, name)
        if self.config.show_names_in_status:
            self.host.notify_name_changed(name)
