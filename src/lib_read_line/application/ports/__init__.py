"""Protocols separating the drain use case from concrete I/O."""

from __future__ import annotations

from .console import FailureConsolePort
from .source import ByteSource

__all__ = ["ByteSource", "FailureConsolePort"]
