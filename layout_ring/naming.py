"""Layout naming: default name generation, uniqueness and name resolution."""

import logging
from enum import Enum
from typing import Iterable, List, Optional, Set, Union

from .errors import NameCollision, NotFound
from .ring import Ring

logger = logging.getLogger(__name__)


class Resolved(Enum):
    """Resolution result for a name that refers to the live layout"""
    CURRENT = "current"


CURRENT = Resolved.CURRENT

FIRST_NAME = "default"


class NameGenerator:
    """Monotonic source of default layout names.

    The first name handed out is "default"; after that names are
    zero-padded sequence numbers ("001", "002", ...). Numbers are never
    reused, even across contexts sharing the generator.
    """

    def __init__(self, width: int = 3) -> None:
        self.width = width
        self._index = 0

    def generate(self) -> str:
        index = self._index
        self._index += 1
        if index == 0:
            return FIRST_NAME
        return f"{index:0{self.width}d}"

    __call__ = generate


def existing_names(ring: Ring, current_name: Optional[str]) -> Set[str]:
    """Names in use within one context: the live layout plus every ring entry."""
    names = set(ring.names())
    if current_name is not None:
        names.add(current_name)
    return names


def validate_unique(name: str, existing: Iterable[str]) -> None:
    """
    Raises:
        NameCollision: If name is already taken
    """
    if name in set(existing):
        logger.debug(f"Name collision on '{name}'")
        raise NameCollision(name)


def resolve(name: str, ring: Ring, current_name: Optional[str]) -> Union[int, Resolved]:
    """Resolve a layout name within one context.

    Args:
        name: Layout name to look up
        ring: The context's ring
        current_name: Name of the live layout

    Returns:
        CURRENT if name is the live layout, else the offset of the first
        matching ring entry (front to back)

    Raises:
        NotFound: If neither the live layout nor any ring entry has the name
    """
    if name == current_name:
        return CURRENT
    for offset, ring_name in enumerate(ring.names()):
        if ring_name == name:
            return offset
    raise NotFound(name)


def completion_candidates(ring: Ring, current_name: Optional[str], include_current: bool) -> List[str]:
    """Names offered to the user when choosing an existing layout.

    Ring entries come front to back; the live layout is listed first when
    included.
    """
    candidates = ring.names()
    if include_current and current_name is not None:
        candidates.insert(0, current_name)
    return candidates
