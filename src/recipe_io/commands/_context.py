"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy plugin loading, method dispatch, and
centralized outcome emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from recipe_io.domain.method import Method
from recipe_io.errors import ValidationError
from recipe_io.output.formatters import MethodOutcome, OutputSettings, format_outcome

if TYPE_CHECKING:
    from recipe_io.config.settings import RecipeIOSettings
    from recipe_io.plugins.manager import PluginManager
    from recipe_io.ports.io import IOInterface

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins are loaded lazily on first use so ``--help`` and ``--version``
    never trigger entry-point discovery.
    """

    def __init__(self, settings: RecipeIOSettings, *, io: IOInterface | None = None) -> None:
        self.settings = settings
        self._io = io
        self._plugins: PluginManager | None = None

        from recipe_io.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(json_output=self.settings.json_output, quiet=self.settings.quiet)

    @property
    def io(self) -> IOInterface:
        """The I/O port handed to modules (console by default).

        In JSON mode messages and prompts go to stderr so stdout only
        carries the JSON documents.
        """
        if self._io is None:
            from recipe_io.ports.console import ConsoleIO

            self._io = ConsoleIO(
                interactive=not self.settings.no_interact,
                config=self.settings.io,
                err=self.settings.json_output,
            )
        return self._io

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (loaded lazily, modules wired to :attr:`io`)."""
        if self._plugins is None:
            from recipe_io.plugins.manager import PluginManager

            pm = PluginManager(disabled=self.settings.plugins.disabled)
            pm.discover_and_load()
            pm.inject_io(self.io)
            self._plugins = pm
        return self._plugins

    def run_method(self, method: Method) -> MethodOutcome:
        """Dispatch *method* and wrap the result (or validation failure).

        ``method.name`` may be qualified (``"io.ask"``) or bare (``"ask"``).
        Failures of the I/O port itself propagate.
        """
        try:
            module_name, module, method_name = self.plugins.find_module(method.name)
            qualified = f"{module_name}.{method_name}"
            result = module.run_method(Method(method_name, method.parameters))
        except ValidationError as exc:
            logger.debug("Method %s rejected: %s", method.name, exc)
            return MethodOutcome(ok=False, method=method.name, error=str(exc))

        self.plugins.notify_method(module_name, method_name, result.json_result)
        return MethodOutcome(ok=True, method=qualified, data=result.data)

    def emit(self, outcome: MethodOutcome, *, show_empty: bool = True) -> None:
        """Format and output a MethodOutcome with correct exit semantics.

        * Success: writes to stdout, returns normally. With
          ``show_empty=False`` outcomes without data print nothing.
        * Failure: writes to stderr, exits with code 1.
        """
        if outcome.ok:
            if not outcome.data and not show_empty:
                return
            output = format_outcome(outcome, settings=self.output_settings)
            if output:
                click.echo(output)
        else:
            click.echo(format_outcome(outcome, settings=self.output_settings), err=True)
            raise SystemExit(1)
