"""Subcommand modules for recipe-io.

Provides register_commands() which uses deferred imports to keep
``recipe-io --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from recipe_io.commands.call import call
    from recipe_io.commands.methods import methods
    from recipe_io.commands.run import run

    cli.add_command(call)
    cli.add_command(run)
    cli.add_command(methods)
