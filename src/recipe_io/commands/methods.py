"""Command: list registered modules and their methods."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from recipe_io.commands._base import RecipeCommand
from recipe_io.output.formatters import format_modules

if TYPE_CHECKING:
    from recipe_io.commands._context import AppContext


@click.command(
    cls=RecipeCommand,
    examples="""\
  recipe-io methods
  recipe-io --json methods""",
)
@click.pass_obj
def methods(app: AppContext) -> None:
    """List registered modules and the methods they support."""
    click.echo(format_modules(app.plugins.collect_modules(), settings=app.output_settings))
