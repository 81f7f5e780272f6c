"""Console implementation of :class:`IOInterface` built on click prompts.

In non-interactive mode questions are never shown and the default answer
is returned, so recipes can run unattended (pipes, CI).
"""

from __future__ import annotations

import logging

import click

from recipe_io.config.models import IOConfig

logger = logging.getLogger(__name__)


class ConsoleIO:
    """Terminal I/O port.

    Args:
        interactive: When False, ``ask`` and ``ask_confirmation`` return
            their default without prompting.
        config: ``[io]`` settings section (prompt suffix, default display).
        err: Write messages to stderr instead of stdout.
    """

    def __init__(
        self,
        *,
        interactive: bool = True,
        config: IOConfig | None = None,
        err: bool = False,
    ) -> None:
        self._interactive = interactive
        self._config = config or IOConfig()
        self._err = err

    @property
    def interactive(self) -> bool:
        return self._interactive

    def write(self, message: str) -> None:
        click.echo(message, err=self._err)

    def ask(self, question: str, default: str) -> str:
        # Recipe defaults may be YAML scalars; answers are always text.
        default = "" if default is None else str(default)
        if not self._interactive:
            logger.debug("Non-interactive ask %r, using default %r", question, default)
            return default
        response = click.prompt(
            question,
            default=default,
            type=str,
            show_default=self._config.show_default and bool(default),
            prompt_suffix=self._config.prompt_suffix,
            err=self._err,
        )
        return str(response)

    def ask_confirmation(self, question: str, default: bool) -> bool:
        if not self._interactive:
            logger.debug("Non-interactive confirmation %r, using default %r", question, default)
            return default
        return click.confirm(
            question,
            default=default,
            show_default=self._config.show_default,
            prompt_suffix=self._config.prompt_suffix,
            err=self._err,
        )
