"""I/O ports — the interactive capability modules delegate to."""

from recipe_io.ports.console import ConsoleIO
from recipe_io.ports.io import IOInterface

__all__ = ["ConsoleIO", "IOInterface"]
