"""Human or JSON output for verstree commands.

Rich markup goes to the console; with --json, machine-readable objects go to
stdout instead and the markup is dropped.
"""

import json
from dataclasses import dataclass
from typing import Any

from rich.console import Console, RenderableType


@dataclass
class OutputContext:
    """Where and how a command reports its results."""

    console: Console
    json_mode: bool = False

    def print(self, message: RenderableType) -> None:
        """Print markup or a Rich renderable (tables, trees); silent with --json."""
        if not self.json_mode:
            self.console.print(message)

    def print_json(self, data: Any) -> None:
        if self.json_mode:
            print(json.dumps(data, indent=2, default=str))

    def result(self, data: Any, message: RenderableType = "") -> None:
        """Emit data as JSON, or the human-readable message otherwise."""
        if self.json_mode:
            self.print_json(data)
        elif message:
            self.console.print(message)

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Report a failure; data adds context fields to the JSON object."""
        self.result({"error": message, **(data or {})}, f"[red]Error: {message}[/red]")

    def success(self, message: str, data: dict[str, Any]) -> None:
        self.result({"success": message, **data}, f"[green]{message}[/green]")


_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Context installed by the CLI callback, or a plain console one."""
    if _ctx is None:
        return OutputContext(Console())
    return _ctx


def set_output_context(ctx: OutputContext | None) -> None:
    global _ctx
    _ctx = ctx
