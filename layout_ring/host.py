"""Host collaborators for layout ring.

The controller never touches panes directly: it asks a LayoutHost to
capture, restore and reset layouts, and to prompt for names. InMemoryHost
is a complete process-local host used by the interactive shell and tests.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, Set, Union

from .errors import InvalidCapture
from .models import ContextId, LayoutCapture
from .naming import CURRENT, Resolved

logger = logging.getLogger(__name__)

PromptCallback = Callable[[str, List[str]], str]


class LayoutHost(Protocol):
    """Capabilities the controller consumes from the host environment."""

    def selected_context(self) -> ContextId:
        ...

    def capture_layout(self) -> Any:
        ...

    def restore_layout(self, capture: Any) -> None:
        """Raises InvalidCapture if the token is stale or foreign."""
        ...

    def get_cursor_position(self) -> int:
        ...

    def set_cursor_position(self, position: int) -> None:
        ...

    def reset_to_default_view(self, default_content: Optional[str]) -> None:
        ...

    def notify_name_changed(self, name: str) -> None:
        ...

    def prompt_for_name(self, prompt: str, disallowed: Set[str]) -> str:
        ...

    def prompt_for_existing_name(
        self, prompt: str, choices: List[str], allow_current: bool
    ) -> Union[str, Resolved]:
        ...


@dataclass
class Frame:
    """One display surface: a row of panes with a cursor in the selected one"""
    frame_id: str
    panes: List[str]
    selected_pane: int = 0
    cursor: int = 0
    status: str = ""

    @property
    def selected_content(self) -> str:
        return self.panes[self.selected_pane]


class InMemoryHost:
    """Process-local host holding frames of panes.

    Prompts are answered from a queue of scripted answers first, then from
    the prompt callback when one is set.
    """

    def __init__(
        self,
        initial_content: str = "*scratch*",
        frame_id: str = "F1",
        prompt_callback: Optional[PromptCallback] = None,
        answers: Iterable[str] = (),
    ) -> None:
        self.frames: Dict[str, Frame] = {}
        self.selected: str = frame_id
        self.prompt_callback = prompt_callback
        self.answers: deque[str] = deque(answers)
        self.name_changes: List[tuple] = []
        self.add_frame(frame_id, initial_content)

    # Frames and panes

    def add_frame(self, frame_id: str, content: str = "*scratch*") -> Frame:
        if frame_id in self.frames:
            raise ValueError(f"Frame already exists: {frame_id}")
        frame = Frame(frame_id=frame_id, panes=[content])
        self.frames[frame_id] = frame
        logger.debug(f"Added frame {frame_id} showing {content}")
        return frame

    def select_frame(self, frame_id: str) -> None:
        if frame_id not in self.frames:
            raise KeyError(f"No such frame: {frame_id}")
        self.selected = frame_id

    @property
    def frame(self) -> Frame:
        return self.frames[self.selected]

    def split(self, content: Optional[str] = None) -> None:
        """Add a pane after the selected one and select it."""
        frame = self.frame
        frame.panes.insert(frame.selected_pane + 1, content or frame.selected_content)
        frame.selected_pane += 1
        frame.cursor = 0

    def show(self, content: str) -> None:
        """Display content in the selected pane."""
        frame = self.frame
        frame.panes[frame.selected_pane] = content
        frame.cursor = 0

    # LayoutHost

    def selected_context(self) -> str:
        return self.selected

    def capture_layout(self) -> LayoutCapture:
        frame = self.frame
        return LayoutCapture(
            frame_id=frame.frame_id,
            panes=tuple(frame.panes),
            selected_pane=frame.selected_pane,
        )

    def restore_layout(self, capture: Any) -> None:
        if not isinstance(capture, LayoutCapture):
            raise InvalidCapture(f"unrecognized capture token {type(capture).__name__}")
        if capture.frame_id not in self.frames:
            raise InvalidCapture(
                f"frame {capture.frame_id} no longer exists",
                context={"frame_id": capture.frame_id},
            )
        if capture.frame_id != self.selected:
            raise InvalidCapture(
                f"capture belongs to frame {capture.frame_id}, not {self.selected}",
                context={"frame_id": capture.frame_id, "selected": self.selected},
            )
        frame = self.frame
        frame.panes = list(capture.panes)
        frame.selected_pane = capture.selected_pane

    def get_cursor_position(self) -> int:
        return self.frame.cursor

    def set_cursor_position(self, position: int) -> None:
        self.frame.cursor = max(0, position)

    def reset_to_default_view(self, default_content: Optional[str]) -> None:
        frame = self.frame
        content = default_content if default_content is not None else frame.selected_content
        frame.panes = [content]
        frame.selected_pane = 0
        frame.cursor = 0

    def notify_name_changed(self, name: str) -> None:
        self.frame.status = f"<{name}>"
        self.name_changes.append((self.selected, name))

    def prompt_for_name(self, prompt: str, disallowed: Set[str]) -> str:
        return self._ask(prompt, sorted(disallowed))

    def prompt_for_existing_name(
        self, prompt: str, choices: List[str], allow_current: bool
    ) -> Union[str, Resolved]:
        answer = self._ask(prompt, list(choices))
        if not answer and allow_current:
            return CURRENT
        return answer

    def _ask(self, prompt: str, choices: List[str]) -> str:
        if self.answers:
            return self.answers.popleft()
        if self.prompt_callback is not None:
            return self.prompt_callback(prompt, choices)
        raise RuntimeError(f"No answer available for prompt: {prompt}")
