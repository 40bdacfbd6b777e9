"""Rich-powered console adapter implementing :class:`FailureConsolePort`.

Purpose
-------
Render read failures for humans: one styled line naming the failure kind and
the underlying cause.

Contents
--------
* :data:`_STYLE_MAP` - default kind-to-style mapping.
* :class:`RichConsoleAdapter` - adapter used by the ``read`` CLI command.
"""

from __future__ import annotations

from typing import Mapping, MutableMapping

from rich.console import Console
from rich.text import Text

from lib_read_line.application.ports.console import FailureConsolePort
from lib_read_line.domain.errors import FailureKind, ReadLineError


_STYLE_MAP: Mapping[FailureKind, str] = {
    FailureKind.READ: "bold red",
    FailureKind.DECODE: "yellow",
}

#: Default Rich styles keyed by :class:`FailureKind`.


class RichConsoleAdapter(FailureConsolePort):
    """Render read failures using Rich with optional style overrides."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[FailureKind | str, str] | None = None,
    ) -> None:
        """Configure the adapter; the default console writes to stderr."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(stderr=True, force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            kind = FailureKind.from_name(key) if isinstance(key, str) else key
            merged[kind] = value
        self._style_map = merged

    def emit(self, error: ReadLineError, *, colorize: bool) -> None:
        """Print ``error`` as a single line.

        Examples
        --------
        >>> from io import StringIO
        >>> from lib_read_line.domain.errors import SourceReadError
        >>> console = Console(file=StringIO(), record=True)
        >>> RichConsoleAdapter(console=console).emit(SourceReadError(OSError("disk gone")), colorize=False)
        >>> console.export_text()
        'read failed: disk gone (OSError)\\n'
        """
        style = self._style_map.get(error.kind, "") if colorize and not self._no_color else ""
        self._console.print(Text(self._format_line(error), style=style), highlight=False, soft_wrap=True)

    @staticmethod
    def _format_line(error: ReadLineError) -> str:
        """Return ``"<kind> failed: <message> (<cause type>)"``.

        Examples
        --------
        >>> from lib_read_line.domain.errors import TextDecodeError
        >>> cause = UnicodeDecodeError("utf-8", b"\\xff", 0, 1, "invalid start byte")
        >>> RichConsoleAdapter._format_line(TextDecodeError(cause))
        "decode failed: 'utf-8' codec can't decode byte 0xff in position 0: invalid start byte (UnicodeDecodeError)"
        """
        return f"{error.kind.value} failed: {error} ({type(error.cause).__name__})"


__all__ = ["RichConsoleAdapter"]
