"""Interactive shell for layout ring.

Runs the layout commands against an in-memory host so rings can be driven
by hand: create layouts, split panes, rotate, jump and delete.
"""

import argparse
import json
import shlex
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .commands import LayoutCommands
from .config import RingConfig, load_config
from .controller import LayoutController
from .errors import LayoutRingError, error_response
from .host import InMemoryHost
from .logging_config import get_logger, log_timing, setup_logging

logger = get_logger(__name__)

HELP = [
    ("new [NAME]", "Save the live layout and start a new one"),
    ("dup [NAME]", "Save the live layout and keep showing it under a new name"),
    ("next", "Rotate to the most recently saved layout"),
    ("prev", "Rotate to the oldest saved layout"),
    ("jump [NAME]", "Switch to a layout (unknown names are created)"),
    ("delete [NAME]", "Delete a layout (default: the live one)"),
    ("rename [NAME]", "Rename the live layout"),
    ("list", "Show the live layout and the saved ring"),
    ("status", "Show the status display text"),
    ("split [CONTENT]", "Split the selected pane"),
    ("show CONTENT", "Display content in the selected pane"),
    ("cursor POSITION", "Move the cursor in the selected pane"),
    ("frame [ID]", "Select a frame, creating it if needed"),
    ("help", "Show this help"),
    ("quit", "Leave the shell"),
]


class LayoutShell:
    """Line-oriented shell over LayoutCommands and an InMemoryHost."""

    def __init__(
        self,
        config: RingConfig,
        console: Optional[Console] = None,
        json_mode: bool = False,
        input_fn: Optional[Callable[[str], str]] = None,
    ):
        self.console = console or Console()
        self.json_mode = json_mode
        self.input_fn = input_fn or self.console.input
        self.host = InMemoryHost(
            initial_content=config.default_content or "*scratch*",
            prompt_callback=self._prompt,
        )
        self.controller = LayoutController(self.host, config=config)
        self.commands = LayoutCommands(self.controller)
        self._handlers: Dict[str, Callable[[List[str]], Any]] = {
            "new": self._cmd_new,
            "dup": self._cmd_dup,
            "next": lambda args: self.commands.next(),
            "prev": lambda args: self.commands.previous(),
            "jump": self._cmd_jump,
            "delete": self._cmd_delete,
            "rename": self._cmd_rename,
            "list": self._cmd_list,
            "status": self._cmd_status,
            "split": self._cmd_split,
            "show": self._cmd_show,
            "cursor": self._cmd_cursor,
            "frame": self._cmd_frame,
            "help": self._cmd_help,
        }

    def _prompt(self, prompt: str, choices: List[str]) -> str:
        if choices:
            self.console.print(f"[dim]({escape(', '.join(choices))})[/dim]")
        return self.input_fn(prompt).strip()

    # Command handlers

    def _cmd_new(self, args: List[str]) -> str:
        return self.controller.create(args[0]) if args else self.commands.new()

    def _cmd_dup(self, args: List[str]) -> str:
        return self.controller.duplicate(args[0]) if args else self.commands.duplicate()

    def _cmd_jump(self, args: List[str]) -> str:
        return self.controller.jump_to(args[0]) if args else self.commands.jump()

    def _cmd_delete(self, args: List[str]) -> str:
        return self.controller.delete(args[0]) if args else self.commands.delete()

    def _cmd_rename(self, args: List[str]) -> str:
        return self.controller.rename(args[0]) if args else self.commands.rename()

    def _cmd_list(self, args: List[str]) -> None:
        rows = self.commands.list_layouts()
        if self.json_mode:
            self._print_json({
                "status": "success",
                "frame": self.host.selected,
                "layouts": [row._asdict() for row in rows],
            })
            return

        table = Table(
            title=f"Layouts in frame {self.host.selected}",
            show_header=True,
            header_style="bold cyan",
            border_style="blue",
        )
        table.add_column("Slot", justify="right")
        table.add_column("Name", style="bold")
        table.add_column("Cursor", justify="right")
        for row in rows:
            slot = "live" if row.is_current else str(row.offset)
            name = f"[green]{escape(row.name)}[/green]" if row.is_current else escape(row.name)
            table.add_row(slot, name, str(row.cursor))
        self.console.print(table)

    def _cmd_status(self, args: List[str]) -> str:
        return self.commands.status_text()

    def _cmd_split(self, args: List[str]) -> None:
        self.host.split(args[0] if args else None)

    def _cmd_show(self, args: List[str]) -> None:
        if not args:
            raise ValueError("show requires CONTENT")
        self.host.show(" ".join(args))

    def _cmd_cursor(self, args: List[str]) -> None:
        if not args:
            raise ValueError("cursor requires POSITION")
        self.host.set_cursor_position(int(args[0]))

    def _cmd_frame(self, args: List[str]) -> str:
        if not args:
            return self.host.selected
        frame_id = args[0]
        if frame_id not in self.host.frames:
            self.host.add_frame(frame_id, self.controller.config.default_content or "*scratch*")
        self.host.select_frame(frame_id)
        return frame_id

    def _cmd_help(self, args: List[str]) -> None:
        table = Table(show_header=False, box=None)
        for usage, description in HELP:
            table.add_row(f"[bold]{usage}[/bold]", description)
        self.console.print(table)

    # Dispatch

    def execute(self, line: str) -> bool:
        """Run one shell line.

        Returns:
            False when the shell should exit
        """
        try:
            words = shlex.split(line)
        except ValueError as e:
            self._print_error(e)
            return True
        if not words:
            return True

        command, args = words[0].lower(), words[1:]
        if command in ("quit", "exit"):
            return False

        handler = self._handlers.get(command)
        if handler is None:
            self._print_error(ValueError(f"Unknown command: {command} (try 'help')"))
            return True

        try:
            with log_timing(command, logger):
                result = handler(args)
        except (LayoutRingError, ValueError, KeyError) as e:
            logger.debug(f"{command} failed: {e}")
            self._print_error(e)
            return True

        if result is not None:
            if self.json_mode:
                self._print_json({"status": "success", "command": command, "result": result})
            else:
                self.console.print(f"[green]✓[/green] {escape(str(result))}")
        return True

    def run(self) -> int:
        self.console.print("[bold]layout-ring[/bold] shell, type 'help' for commands")
        while True:
            try:
                line = self.input_fn(f"{self.commands.status_text() or self.host.selected}> ")
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                return 0
            if not self.execute(line):
                return 0

    def _print_error(self, error: Exception) -> None:
        if self.json_mode:
            self._print_json(error_response(error))
            return
        message = error.message if isinstance(error, LayoutRingError) else str(error)
        self.console.print(f"[red]✗ Error:[/red] {escape(message)}")
        if isinstance(error, LayoutRingError) and error.suggestion:
            self.console.print(f"[blue]  Remediation:[/blue] {error.suggestion}")

    def _print_json(self, data: Dict[str, Any]) -> None:
        self.console.print_json(json.dumps(data))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="layout-ring",
        description="Interactive shell for per-frame rings of named layouts",
    )
    parser.add_argument("--config", type=Path, help="TOML or JSON options file")
    parser.add_argument("--capacity", type=int, help="Saved layouts kept per frame")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable INFO logging")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, debug=args.debug)

    console = Console()
    try:
        config = load_config(args.config)
        if args.capacity is not None:
            config = RingConfig(**{**config.model_dump(), "ring_capacity": args.capacity})
    except LayoutRingError as e:
        console.print(f"[red]✗ Error:[/red] {e.message}")
        return 1
    except ValueError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    return LayoutShell(config, console=console, json_mode=args.json).run()


if __name__ == "__main__":
    sys.exit(main())
