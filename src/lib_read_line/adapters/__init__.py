"""Concrete adapters: buffering over byte sources and Rich failure output."""

from __future__ import annotations

from .buffered import SourceRawIO, buffered_source
from .console import RichConsoleAdapter

__all__ = ["RichConsoleAdapter", "SourceRawIO", "buffered_source"]
