"""Interactive layout commands.

Each command asks the host for its input first, then runs the matching
controller operation. These are the entry points a key binding or shell
command calls.
"""

import logging
from typing import List, NamedTuple, Optional

from .controller import LayoutController
from .naming import completion_candidates

logger = logging.getLogger(__name__)


class LayoutRow(NamedTuple):
    """One line of a layout listing (offset is None for the live layout)"""
    offset: Optional[int]
    name: str
    is_current: bool
    cursor: int


class LayoutCommands:
    """Prompting front end for a LayoutController."""

    def __init__(self, controller: LayoutController):
        self.controller = controller
        self.host = controller.host

    def new(self) -> str:
        name = self.host.prompt_for_name("Name for new layout: ", self.controller.names_in_use())
        return self.controller.create(name)

    def duplicate(self) -> str:
        name = self.host.prompt_for_name("Name for duplicate layout: ", self.controller.names_in_use())
        return self.controller.duplicate(name)

    def next(self) -> str:
        return self.controller.next()

    def previous(self) -> str:
        return self.controller.previous()

    def jump(self) -> str:
        current, _ = self.controller.layouts()
        choices = completion_candidates(self.controller.ring(), current, include_current=False)
        name = self.host.prompt_for_existing_name("Jump to layout: ", choices, allow_current=False)
        logger.debug(f"Jump target: {name!r}")
        return self.controller.jump_to(name, create_missing=True)

    def delete(self) -> str:
        current, _ = self.controller.layouts()
        choices = completion_candidates(self.controller.ring(), current, include_current=True)
        name = self.host.prompt_for_existing_name(
            f"Delete layout (default {current}): ", choices, allow_current=True
        )
        return self.controller.delete(name)

    def rename(self) -> str:
        name = self.host.prompt_for_name("Rename current layout to: ", set(self.controller.ring().names()))
        return self.controller.rename(name)

    def list_layouts(self) -> List[LayoutRow]:
        """Live layout first, then saved layouts front to back."""
        current, snapshots = self.controller.layouts()
        rows = [LayoutRow(None, current, True, self.host.get_cursor_position())]
        rows.extend(
            LayoutRow(offset, snapshot.name, False, snapshot.cursor_offset)
            for offset, snapshot in enumerate(snapshots)
        )
        return rows

    def status_text(self) -> str:
        if not self.controller.config.show_names_in_status:
            return ""
        return f"<{self.controller.current_name()}>"
