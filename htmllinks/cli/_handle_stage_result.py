"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ..StageResult import StageResult
from .CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable[..., StageResult])


def _display_format(ctx: typer.Context) -> str:
    """Get the display format stored by the main callback, defaulting to yaml."""
    obj = ctx.obj
    if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
        return obj["display_format"]
    return "yaml"


def _handle_stage_result(func: F, display_format: str = "yaml") -> Callable[..., None]:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as JSON or YAML)

    Exits with status 0 on success and 1 otherwise.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> None:
        display = CLIDisplay()
        result = func(*args, **kwargs)
        display.status(result.announce)

        for progress, message in result.progress_callback(result):
            display.info(f"[dim]Progress: {message} ({progress:.0%})[/dim]")

        if not result.result:
            raise ValueError("progress_callback must set result.result to a non-empty string")

        if result.success:
            display.success(result.result)
        else:
            display.error(result.result)

        display.json_output(result.output, output_format=display_format)
        raise typer.Exit(0 if result.success else 1)

    return wrapper
