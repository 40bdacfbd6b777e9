"""Console port describing how read failures are shown to people.

Purpose
-------
Define the abstraction for adapters that render a :class:`ReadLineError` on an
interactive terminal. The CLI obtains one through
:func:`lib_read_line.cli.make_failure_console` and only calls ``emit``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_read_line.domain.errors import ReadLineError


@runtime_checkable
class FailureConsolePort(Protocol):
    """Render a read failure to an interactive console."""

    def emit(self, error: ReadLineError, *, colorize: bool) -> None:
        """Render ``error`` with optional colour control."""


__all__ = ["FailureConsolePort"]
