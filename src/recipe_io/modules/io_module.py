"""IOModule — write messages and ask questions from a recipe.

Three methods, each delegating to the injected I/O port:

``write``
    Write one or more messages::

        write: "Hi user"

        write:
          - "Hey"
          - "You rock!"

``ask``
    Ask a free-text question, optionally with a default answer::

        ask: "What's your name?"

        ask:
          question: "What's your name?"
          default: "Jack"

    Result: ``{"response": "<answer>"}``

``ask_yes_no``
    Ask a yes/no question. The default (``true`` when omitted) accepts
    ``true, "true", "yes", "1", 1`` and ``false, "false", "no", "0", 0``::

        ask_yes_no:
          question: "Are you sure?"
          default: no

    Result: ``{"response": true}``
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from recipe_io.domain.booleans import parse_boolean_token
from recipe_io.domain.method import Method
from recipe_io.errors import ValidationError
from recipe_io.modules.base import ModuleBase
from recipe_io.modules.result import ExecutionResult


def _check_one_or_two_parameters(method: Method) -> None:
    if not 1 <= len(method) <= 2:
        msg = f'Method "{method.name}" only support 1 or 2 parameters.'
        raise ValidationError(msg)


class IOModule(ModuleBase):
    """Recipe module for terminal interaction."""

    module_name = "io"

    def __init__(self) -> None:
        super().__init__()
        self.add_method_handler("write", self.write)
        self.add_method_handler("ask", self.ask)
        self.add_method_handler("ask_yes_no", self.ask_confirmation)

    def run_method(
        self,
        method: Method,
        recipe_variables: Mapping[str, Any] | None = None,
    ) -> ExecutionResult:
        return self.run_internal_method(method, recipe_variables)

    def write(self, method: Method) -> ExecutionResult:
        """Write every parameter, in order. Returns an empty result."""
        for message in method:
            self.io.write(message)
        return ExecutionResult()

    def ask(self, method: Method) -> ExecutionResult:
        """Ask a question. Returns ``{"response": str}``."""
        _check_one_or_two_parameters(method)

        question = method.resolve("question", 0)
        default = method.resolve("default", 1, "")

        response = self.io.ask(question, default)
        return ExecutionResult.from_data({"response": response})

    def ask_confirmation(self, method: Method) -> ExecutionResult:
        """Ask a yes/no question. Returns ``{"response": bool}``."""
        _check_one_or_two_parameters(method)

        question = method.resolve("question", 0)
        default = method.resolve("default", 1, True)
        parsed_default = parse_boolean_token(default, method.name)

        response = self.io.ask_confirmation(question, parsed_default)
        return ExecutionResult.from_data({"response": response})
