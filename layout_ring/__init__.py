"""
Layout Ring

Per-frame rings of named, restorable layouts: create, duplicate, rotate,
jump between, delete and rename window configurations.
"""

from .commands import LayoutCommands, LayoutRow
from .config import RingConfig, load_config
from .controller import LayoutController
from .errors import (
    ConfigLoadError,
    ErrorCode,
    InvalidCapture,
    LayoutRingError,
    NameCollision,
    NotFound,
    OutOfRange,
    RingEmpty,
)
from .host import InMemoryHost, LayoutHost
from .models import LayoutCapture, Snapshot
from .naming import CURRENT, NameGenerator, resolve, validate_unique
from .registry import ContextRegistry, ContextStateStore, InMemoryContextStateStore
from .ring import Ring

__version__ = "1.0.0"

__all__ = [
    # Core
    "Ring",
    "Snapshot",
    "ContextRegistry",
    "ContextStateStore",
    "InMemoryContextStateStore",
    "NameGenerator",
    "CURRENT",
    "resolve",
    "validate_unique",
    "LayoutController",

    # Host and commands
    "LayoutHost",
    "InMemoryHost",
    "LayoutCapture",
    "LayoutCommands",
    "LayoutRow",

    # Configuration
    "RingConfig",
    "load_config",

    # Errors
    "ErrorCode",
    "LayoutRingError",
    "NameCollision",
    "NotFound",
    "OutOfRange",
    "RingEmpty",
    "InvalidCapture",
    "ConfigLoadError",
]
