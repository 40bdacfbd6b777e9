"""Failure taxonomy for draining a byte source into text.

Purpose
-------
Give callers a small, closed set of failure types so a failed read can be
told apart from a successful one without inspecting partial buffers.

Contents
--------
* :class:`FailureKind` enum with the CLI exit code per kind.
* :class:`ReadLineError` base exception plus :class:`SourceReadError` and
  :class:`TextDecodeError`.

System Role
-----------
Domain layer. The use case wraps low-level ``OSError`` and
``UnicodeDecodeError`` instances into these types; adapters and the CLI only
ever see :class:`ReadLineError`.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class FailureKind(Enum):
    """Reasons a drain can fail."""

    READ = "read"
    DECODE = "decode"

    @property
    def exit_code(self) -> int:
        """Return the ``sysexits.h`` code the CLI exits with for this kind.

        Examples
        --------
        >>> FailureKind.READ.exit_code
        74
        >>> FailureKind.DECODE.exit_code
        65
        """

        return _EXIT_CODES[self]

    @classmethod
    def from_name(cls, name: str) -> "FailureKind":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown failure kind: {name!r}") from exc


_EXIT_CODES = {
    FailureKind.READ: 74,  # EX_IOERR
    FailureKind.DECODE: 65,  # EX_DATAERR
}


class ReadLineError(Exception):
    """Base class for failures reported by :func:`lib_read_line.read_line`.

    Attributes
    ----------
    cause:
        The exception raised by the source or the decoder.
    kind:
        :class:`FailureKind` classifying the failure.
    """

    kind: ClassVar[FailureKind]

    def __init__(self, cause: BaseException) -> None:
        # ``args == (cause,)`` so pickling rebuilds the error from its cause.
        super().__init__(cause)
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        return str(self.cause) or type(self.cause).__name__


class SourceReadError(ReadLineError):
    """The byte source raised an I/O error before end-of-stream."""

    kind = FailureKind.READ


class TextDecodeError(ReadLineError, ValueError):
    """The drained bytes are not valid UTF-8."""

    kind = FailureKind.DECODE


__all__ = [
    "FailureKind",
    "ReadLineError",
    "SourceReadError",
    "TextDecodeError",
]
