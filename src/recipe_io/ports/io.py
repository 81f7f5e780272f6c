"""IOInterface — the interactive I/O capability a host injects into modules.

Modules hold a reference to the port but never mutate it. Blocking on user
input, cancellation and timeouts are the port's concern.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IOInterface(Protocol):
    """Narrow terminal I/O contract consumed by modules."""

    def write(self, message: str) -> None:
        """Write *message* to the output."""
        ...

    def ask(self, question: str, default: str) -> str:
        """Ask a free-text question; return the answer or *default*."""
        ...

    def ask_confirmation(self, question: str, default: bool) -> bool:
        """Ask a yes/no question; return the answer or *default*."""
        ...
