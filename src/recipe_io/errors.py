"""Exception types raised by recipe-io modules and the host harness.

INVARIANT: ValidationError is raised before any I/O side effect.
Failures of the injected I/O port are never wrapped; they propagate as-is.
"""

from __future__ import annotations


class ValidationError(ValueError):
    """A method invocation carried malformed parameters."""


class MissingParameterError(ValidationError):
    """A required parameter was found neither by name nor by position."""

    def __init__(self, method_name: str, name: str, position: int) -> None:
        super().__init__(
            f'Method "{method_name}" requires the parameter "{name}" (or position {position}).'
        )
        self.method_name = method_name
        self.name = name
        self.position = position


class UnknownMethodError(ValidationError):
    """No registered handler answers to the requested method name."""

    def __init__(self, method_name: str, module_name: str | None = None) -> None:
        if module_name:
            msg = f'Method "{method_name}" is not supported by module "{module_name}".'
        else:
            msg = f'Method "{method_name}" is not supported by any registered module.'
        super().__init__(msg)
        self.method_name = method_name
        self.module_name = module_name


class IOUnavailableError(RuntimeError):
    """A module was asked to run before an I/O port was injected."""


class RecipeError(ValueError):
    """A recipe file could not be read or has an invalid structure."""
