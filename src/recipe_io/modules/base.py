"""ModuleBase — abstract foundation for recipe modules.

A module maps method names to handlers and holds the I/O port injected by
the host. Handlers are plain callables taking the :class:`Method` and the
recipe variables and returning an :class:`ExecutionResult`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from recipe_io.errors import IOUnavailableError, UnknownMethodError

if TYPE_CHECKING:
    from recipe_io.domain.method import Method
    from recipe_io.modules.result import ExecutionResult
    from recipe_io.ports.io import IOInterface

logger = logging.getLogger(__name__)

MethodHandler = Callable[["Method"], "ExecutionResult"]


class ModuleBase:
    """Abstract base for all recipe modules.

    Subclasses register their handlers in ``__init__`` and implement
    :meth:`run_method`, usually by delegating to :meth:`run_internal_method`.

    Usage::

        class EchoModule(ModuleBase):
            module_name = "echo"

            def __init__(self) -> None:
                super().__init__()
                self.add_method_handler("echo", self._echo)

            def run_method(self, method, recipe_variables=None):
                return self.run_internal_method(method, recipe_variables)
    """

    module_name: ClassVar[str] = ""

    def __init__(self) -> None:
        self._handlers: dict[str, MethodHandler] = {}
        self._io: IOInterface | None = None

    def add_method_handler(self, name: str, handler: MethodHandler) -> None:
        """Register *handler* under the method *name*."""
        self._handlers[name] = handler

    @property
    def method_names(self) -> list[str]:
        """Registered method names in registration order."""
        return list(self._handlers)

    def supports(self, method_name: str) -> bool:
        return method_name in self._handlers

    def set_io(self, io: IOInterface) -> None:
        """Inject the I/O port used by handlers."""
        self._io = io

    @property
    def io(self) -> IOInterface:
        """The injected I/O port."""
        if self._io is None:
            msg = f'Module "{self.name}" has no I/O port; call set_io() first.'
            raise IOUnavailableError(msg)
        return self._io

    @property
    def name(self) -> str:
        return self.module_name or self.__class__.__name__

    def run_method(
        self,
        method: Method,
        recipe_variables: Mapping[str, Any] | None = None,
    ) -> ExecutionResult:
        """Execute *method*. Implemented by subclasses."""
        raise NotImplementedError

    def run_internal_method(
        self,
        method: Method,
        recipe_variables: Mapping[str, Any] | None = None,
    ) -> ExecutionResult:
        """Dispatch *method* to its registered handler.

        Raises:
            UnknownMethodError: No handler is registered under the name.
        """
        handler = self._handlers.get(method.name)
        if handler is None:
            raise UnknownMethodError(method.name, self.name)
        logger.debug(
            "Running %s.%s with %d parameter(s)",
            self.name,
            method.name,
            len(method),
        )
        return handler(method)
