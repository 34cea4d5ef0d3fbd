"""
Data models for layout ring

All models use Pydantic v2 for data validation and serialization.
"""

from typing import Any, Hashable

from pydantic import BaseModel, ConfigDict, Field, field_validator


ContextId = Hashable


class Snapshot(BaseModel):
    """A named, restorable layout state stored in a context's ring.

    The capture is an opaque host token; the cursor offset is kept
    separately because captures do not preserve it.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1)
    capture: Any
    cursor_offset: int = Field(default=0, ge=0)


class LayoutCapture(BaseModel):
    """Pane arrangement of one frame, as captured by the in-memory host"""
    model_config = ConfigDict(frozen=True)

    frame_id: str
    panes: tuple[str, ...] = Field(..., min_length=1)
    selected_pane: int = Field(default=0, ge=0)

    @field_validator('selected_pane')
    @classmethod
    def selected_pane_in_range(cls, v: int, info) -> int:
        """Ensure selected pane points at a captured pane"""
        panes = info.data.get('panes')
        if panes is not None and v >= len(panes):
            raise ValueError(f"Selected pane {v} out of range for {len(panes)} pane(s)")
        return v
