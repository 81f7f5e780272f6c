"""Command: dispatch a single module method."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from recipe_io.commands._base import RecipeCommand
from recipe_io.domain.method import Method

if TYPE_CHECKING:
    from recipe_io.commands._context import AppContext


def _parse_named(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> tuple[tuple[str, str], ...]:
    """Split each ``NAME=VALUE`` option value into a ``(name, value)`` pair."""
    pairs = []
    for raw in values:
        name, sep, value = raw.partition("=")
        if not sep or not name.isidentifier():
            raise click.BadParameter(f"{raw!r} is not of the form NAME=VALUE")
        pairs.append((name, value))
    return tuple(pairs)


def build_method(
    name: str,
    params: tuple[str, ...],
    named: tuple[tuple[str, str], ...] = (),
) -> Method:
    """Build a Method from CLI arguments.

    Bare arguments are positional, numbered in order of appearance, and
    are never split on ``=``. Named parameters follow them.
    """
    method = Method(name)
    for position, value in enumerate(params):
        method.add_parameter(position, value)
    for key, value in named:
        method.add_parameter(key, value)
    return method


@click.command(
    cls=RecipeCommand,
    examples="""\
  recipe-io call write "Hi user" "You rock!"
  recipe-io call write "PATH=/usr/bin"
  recipe-io call ask "What's your name?" Jack
  recipe-io call io.ask -p question="What's your name?" -p default=Jack
  recipe-io --json call ask_yes_no "Are you sure?" -p default=no""",
)
@click.argument("method_name", metavar="METHOD")
@click.argument("params", nargs=-1)
@click.option(
    "-p",
    "--param",
    "named",
    multiple=True,
    metavar="NAME=VALUE",
    callback=_parse_named,
    help="Named parameter (repeatable).",
)
@click.pass_obj
def call(
    app: AppContext,
    method_name: str,
    params: tuple[str, ...],
    named: tuple[tuple[str, str], ...],
) -> None:
    """Run METHOD with positional PARAMS and --param NAME=VALUE options."""
    app.emit(app.run_method(build_method(method_name, params, named)))
