"""Command: run a YAML recipe step by step."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from recipe_io.commands._base import RecipeCommand
from recipe_io.errors import RecipeError
from recipe_io.recipe import load_recipe

if TYPE_CHECKING:
    from recipe_io.commands._context import AppContext


@click.command(
    cls=RecipeCommand,
    examples="""\
  recipe-io run onboarding.yaml
  recipe-io --no-interact run onboarding.yaml
  recipe-io --json run onboarding.yaml""",
)
@click.argument("recipe", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_obj
def run(app: AppContext, recipe: Path) -> None:
    """Run every step of RECIPE in order, stopping at the first failure."""
    try:
        methods = load_recipe(recipe)
    except RecipeError as exc:
        raise click.ClickException(str(exc)) from exc

    for method in methods:
        app.emit(app.run_method(method), show_empty=False)
