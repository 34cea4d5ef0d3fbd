"""Pytest configuration and shared fixtures for layout ring tests."""

import sys
import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from layout_ring.config import RingConfig
from layout_ring.controller import LayoutController
from layout_ring.host import InMemoryHost
from layout_ring.models import LayoutCapture, Snapshot
from layout_ring.naming import NameGenerator


@pytest.fixture
def temp_config_dir() -> Generator[Path, None, None]:
    """Create temporary configuration directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def names() -> NameGenerator:
    """Fresh name generator (first name is "default")."""
    return NameGenerator()


@pytest.fixture
def host() -> InMemoryHost:
    """In-memory host with one frame F1 showing main.py."""
    return InMemoryHost(initial_content="main.py")


@pytest.fixture
def controller(host: InMemoryHost, names: NameGenerator) -> LayoutController:
    """Controller with a small ring so eviction is easy to reach."""
    return LayoutController(host, config=RingConfig(ring_capacity=3), names=names)


@pytest.fixture
def make_snapshot() -> Callable[..., Snapshot]:
    """Factory for snapshots with a capture from frame F1."""
    def _make(name: str, content: str = "", cursor: int = 0, frame_id: str = "F1") -> Snapshot:
        return Snapshot(
            name=name,
            capture=LayoutCapture(frame_id=frame_id, panes=(content or f"{name}.txt",)),
            cursor_offset=cursor,
        )
    return _make
