"""Unit tests for prompting layout commands."""

import pytest

from layout_ring.commands import LayoutCommands, LayoutRow
from layout_ring.config import RingConfig
from layout_ring.controller import LayoutController
from layout_ring.errors import NameCollision
from layout_ring.host import InMemoryHost


@pytest.fixture
def host():
    return InMemoryHost(initial_content="main.py")


@pytest.fixture
def commands(host):
    return LayoutCommands(LayoutController(host))


class TestPromptingCommands:
    """Commands ask the host before calling the controller."""

    def test_new_uses_prompted_name(self, commands, host):
        host.answers.append("work")

        assert commands.new() == "work"
        assert commands.controller.current_name() == "work"
        assert host.frame.panes == ["*scratch*"]

    def test_new_with_empty_answer_generates_name(self, commands, host):
        host.answers.append("")
        assert commands.new() == "001"

    def test_new_offers_names_in_use_as_disallowed(self, commands, host):
        seen = []
        host.prompt_callback = lambda prompt, choices: seen.append(choices) or "work"

        commands.new()

        assert seen == [["default"]]

    def test_duplicate_keeps_layout(self, commands, host):
        host.split("notes.md")
        host.answers.append("copy")

        commands.duplicate()

        assert host.frame.panes == ["main.py", "notes.md"]

    def test_jump_creates_unknown_name(self, commands, host):
        host.answers.append("elsewhere")

        assert commands.jump() == "elsewhere"
        assert commands.controller.ring().names() == ["default"]

    def test_jump_to_saved_layout(self, commands, host):
        host.answers.extend(["work", "default"])
        commands.new()

        assert commands.jump() == "default"
        assert commands.controller.ring().names() == ["work"]

    def test_delete_empty_answer_deletes_current(self, commands, host):
        host.answers.extend(["work", ""])
        commands.new()

        assert commands.delete() == "work"
        assert commands.controller.current_name() == "default"

    def test_delete_offers_current_first(self, commands, host):
        host.answers.append("work")
        commands.new()
        seen = []
        host.prompt_callback = lambda prompt, choices: seen.append(choices) or "default"

        commands.delete()

        assert seen == [["work", "default"]]

    def test_rename(self, commands, host):
        host.answers.append("renamed")
        assert commands.rename() == "renamed"

    def test_rename_collision_propagates(self, commands, host):
        host.answers.extend(["work", "default"])
        commands.new()

        with pytest.raises(NameCollision):
            commands.rename()

    def test_rotation(self, commands, host):
        host.answers.append("work")
        commands.new()

        assert commands.next() == "default"
        assert commands.previous() == "work"


class TestListing:
    """Test layout listing and status text."""

    def test_list_layouts(self, commands, host):
        host.set_cursor_position(9)
        host.answers.extend(["a", "b"])
        commands.new()
        commands.new()
        host.set_cursor_position(3)

        assert commands.list_layouts() == [
            LayoutRow(None, "b", True, 3),
            LayoutRow(0, "a", False, 0),
            LayoutRow(1, "default", False, 9),
        ]

    def test_status_text(self, commands):
        assert commands.status_text() == "<default>"

    def test_status_text_disabled(self, host):
        commands = LayoutCommands(LayoutController(host, config=RingConfig(show_names_in_status=False)))
        assert commands.status_text() == ""
