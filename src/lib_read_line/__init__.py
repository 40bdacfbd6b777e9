"""Public package surface: :func:`read_line` and its result and error types.

``read_line(stream)`` drains a byte stream into a new ``str`` and returns
``Ok(text)`` or ``Err(error)``; the text is unreachable unless the whole read
and the UTF-8 decode succeeded.
"""

from __future__ import annotations

from .domain import Err, FailureKind, Ok, ReadLineError, Result, SourceReadError, TextDecodeError
from .lib_read_line import read_line, summary_info

__all__ = [
    "Err",
    "FailureKind",
    "Ok",
    "ReadLineError",
    "Result",
    "SourceReadError",
    "TextDecodeError",
    "read_line",
    "summary_info",
]
