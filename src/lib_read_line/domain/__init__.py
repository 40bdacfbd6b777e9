"""Domain value objects and failure types for the read-to-text helper."""

from __future__ import annotations

from .errors import FailureKind, ReadLineError, SourceReadError, TextDecodeError
from .result import Err, Ok, Result

__all__ = [
    "Err",
    "FailureKind",
    "Ok",
    "ReadLineError",
    "Result",
    "SourceReadError",
    "TextDecodeError",
]
