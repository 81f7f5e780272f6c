"""Recipe modules and the result type they return."""

from recipe_io.modules.base import ModuleBase
from recipe_io.modules.io_module import IOModule
from recipe_io.modules.result import ExecutionResult

__all__ = ["ExecutionResult", "IOModule", "ModuleBase"]
