"""Rich/JSON output helpers.

The CLI renders method outcomes for humans (Rich text) or machines
(--json). :class:`MethodOutcome` is the envelope both modes share.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field
from rich.markup import escape
from rich.table import Table

from recipe_io.output.console import create_console, get_output

if TYPE_CHECKING:
    from recipe_io.modules.base import ModuleBase


class MethodOutcome(BaseModel):
    """Result of one CLI-dispatched method.

    Attributes:
        ok: Whether the method succeeded.
        method: Qualified method name (e.g. ``"io.ask"``).
        data: Decoded JSON payload of the ExecutionResult.
        error: Error message if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    method: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: str | None = None


class OutputSettings(BaseModel):
    """Output mode flags taken from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list, bool)) or value is None:
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def format_outcome(outcome: MethodOutcome, *, settings: OutputSettings | None = None) -> str:
    """Format a MethodOutcome for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return outcome.model_dump_json(indent=2)
    if not outcome.ok:
        return f"ERROR: {outcome.method}: {outcome.error or 'Unknown error'}"
    if settings.quiet:
        return ""

    console = create_console()
    console.print(f"[rio.ok]OK[/]: [rio.method]{escape(outcome.method)}[/]", soft_wrap=True)
    for key, value in outcome.data.items():
        console.print(
            f"  [rio.key]{escape(key)}[/]: {escape(_format_value(value))}", soft_wrap=True
        )
    return get_output(console).rstrip("\n")


def format_modules(
    modules: dict[str, ModuleBase],
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format the module registry as a table (or JSON)."""
    settings = settings or OutputSettings()
    listing = {name: module.method_names for name, module in modules.items()}
    if settings.json_output:
        return _json.dumps({"modules": listing}, indent=2)
    if settings.quiet:
        return "\n".join(
            f"{name}.{method}" for name, methods in listing.items() for method in methods
        )

    table = Table(title="Modules")
    table.add_column("Module", style="rio.module")
    table.add_column("Methods", style="rio.method")
    for name, methods in listing.items():
        table.add_row(name, ", ".join(methods))

    console = create_console()
    console.print(table)
    return get_output(console).rstrip("\n")
