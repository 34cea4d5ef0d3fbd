"""Unit tests for layout name generation and resolution."""

import pytest

from layout_ring.errors import NameCollision, NotFound
from layout_ring.naming import (
    CURRENT,
    NameGenerator,
    completion_candidates,
    existing_names,
    resolve,
    validate_unique,
)
from layout_ring.ring import Ring


class TestNameGenerator:
    """Test default name generation."""

    def test_first_name_is_default(self, names):
        assert names.generate() == "default"

    def test_following_names_are_zero_padded_numbers(self, names):
        generated = [names.generate() for _ in range(4)]
        assert generated == ["default", "001", "002", "003"]

    def test_names_are_never_reused(self, names):
        generated = [names() for _ in range(50)]
        assert len(set(generated)) == 50
        numbers = [int(n) for n in generated[1:]]
        assert numbers == sorted(numbers)

    def test_generators_are_independent(self):
        first, second = NameGenerator(), NameGenerator()
        first.generate()
        first.generate()
        assert second.generate() == "default"

    def test_custom_width(self):
        names = NameGenerator(width=5)
        names.generate()
        assert names.generate() == "00001"


class TestValidateUnique:
    """Test name collision detection."""

    def test_accepts_new_name(self):
        validate_unique("new", {"a", "b"})

    def test_rejects_existing_name(self):
        with pytest.raises(NameCollision) as exc_info:
            validate_unique("a", {"a", "b"})

        assert exc_info.value.name == "a"
        assert "'a'" in exc_info.value.message


class TestResolve:
    """Test resolving names to ring offsets."""

    @pytest.fixture
    def ring(self, make_snapshot):
        ring = Ring(5)
        for name in ("x", "y", "z"):
            ring.insert_back(make_snapshot(name))
        return ring

    def test_current_name_resolves_to_sentinel(self, ring):
        assert resolve("live", ring, "live") is CURRENT

    def test_ring_name_resolves_to_offset(self, ring):
        assert resolve("x", ring, "live") == 0
        assert resolve("z", ring, "live") == 2

    def test_unknown_name_raises(self, ring):
        with pytest.raises(NotFound) as exc_info:
            resolve("missing", ring, "live")

        assert exc_info.value.name == "missing"

    def test_existing_names_includes_current(self, ring):
        assert existing_names(ring, "live") == {"live", "x", "y", "z"}

    def test_completion_candidates(self, ring):
        assert completion_candidates(ring, "live", include_current=False) == ["x", "y", "z"]
        assert completion_candidates(ring, "live", include_current=True) == ["live", "x", "y", "z"]
