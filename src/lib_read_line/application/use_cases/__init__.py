"""Use cases orchestrating ports into the public read operation."""

from __future__ import annotations

from .read_line import create_read_line

__all__ = ["create_read_line"]
