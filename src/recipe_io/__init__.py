"""recipe-io — interactive I/O module for recipe runners."""

from recipe_io.errors import ValidationError
from recipe_io.modules.io_module import IOModule

__version__ = "0.1.0"

__all__ = ["IOModule", "ValidationError", "__version__"]
