"""Plugins shipped with recipe-io."""

from recipe_io.plugins.builtins.io_plugin import IOPlugin

__all__ = ["IOPlugin"]
