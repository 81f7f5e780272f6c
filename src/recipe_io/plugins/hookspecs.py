"""Pluggy hook specifications for recipe-io.

One setup-time hook lets plugins contribute recipe modules; one
notification hook fires after each successfully dispatched method.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from recipe_io.modules.base import ModuleBase

PROJECT_NAME = "recipe_io"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class RecipeIOHookSpec:
    """Hook specifications for the recipe-io plugin system."""

    @hookspec
    def register_modules(self) -> dict[str, ModuleBase] | None:
        """Return module name -> module instance mappings."""

    @hookspec
    def post_method(self, module: str, method: str, json_result: str) -> None:
        """Called after a method ran successfully."""
