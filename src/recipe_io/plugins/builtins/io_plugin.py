"""Built-in plugin contributing :class:`IOModule` under the name ``io``."""

from __future__ import annotations

from recipe_io.modules.base import ModuleBase
from recipe_io.modules.io_module import IOModule
from recipe_io.plugins.hookspecs import hookimpl


class IOPlugin:
    """Registers the terminal interaction module."""

    @hookimpl
    def register_modules(self) -> dict[str, ModuleBase]:
        return {IOModule.module_name: IOModule()}
