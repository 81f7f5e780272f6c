"""Method — a single verb invocation with named and positional parameters.

Parameters keep insertion order. A key is either an ``int`` (position) or
a ``str`` (name). Handlers resolve a logical parameter by name first, then
by position, then fall back to a default.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any

from recipe_io.errors import MissingParameterError

ParameterKey = int | str


class _Missing(Enum):
    MISSING = "MISSING"


MISSING = _Missing.MISSING


def _check_key(key: object) -> ParameterKey:
    # bool is an int subclass; True/False are never valid positions.
    if isinstance(key, bool) or not isinstance(key, (int, str)):
        msg = f"Parameter keys must be int positions or str names, got {key!r}"
        raise TypeError(msg)
    return key


def _coerce_key(key: object) -> ParameterKey:
    if isinstance(key, int) and not isinstance(key, bool):
        return key
    return str(key)


class Method:
    """A verb name plus its ordered parameter set.

    Usage::

        method = Method("ask").add_parameter("question", "Who are you?")
        method.resolve("question", 0)        # -> "Who are you?"
        method.resolve("default", 1, "")     # -> ""
    """

    def __init__(self, name: str, parameters: Mapping[ParameterKey, Any] | None = None) -> None:
        self._name = name
        self._parameters: dict[ParameterKey, Any] = {}
        for key, value in (parameters or {}).items():
            self.add_parameter(key, value)

    @classmethod
    def from_value(cls, name: str, value: Any) -> Method:
        """Build a method from a recipe step value.

        A mapping gives named parameters, a list or tuple gives positions
        ``0..n-1``, ``None`` gives no parameters and any other value becomes
        the single parameter at position 0.
        """
        if value is None:
            return cls(name)
        if isinstance(value, Mapping):
            return cls(name, {_coerce_key(k): v for k, v in value.items()})
        if isinstance(value, (list, tuple)):
            return cls(name, dict(enumerate(value)))
        return cls(name, {0: value})

    @property
    def name(self) -> str:
        return self._name

    @property
    def parameters(self) -> dict[ParameterKey, Any]:
        """A copy of the parameter mapping in insertion order."""
        return dict(self._parameters)

    def add_parameter(self, key: ParameterKey, value: Any) -> Method:
        """Add (or replace) a parameter. Returns ``self`` for chaining."""
        self._parameters[_check_key(key)] = value
        return self

    def resolve(self, name: str, position: int, default: Any = MISSING) -> Any:
        """Look up a logical parameter by *name*, then *position*, then *default*.

        Raises:
            MissingParameterError: Neither key is present and no default
                was supplied.
        """
        if name in self._parameters:
            return self._parameters[name]
        if position in self._parameters:
            return self._parameters[position]
        if default is MISSING:
            raise MissingParameterError(self._name, name, position)
        return default

    def __len__(self) -> int:
        return len(self._parameters)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over parameter values in insertion order."""
        return iter(list(self._parameters.values()))

    def __repr__(self) -> str:
        return f"Method({self._name!r}, {self._parameters!r})"
