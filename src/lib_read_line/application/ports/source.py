"""Port describing the byte sources the drain operation accepts.

Purpose
-------
Name the narrow capability required from callers: sequential retrieval of
raw bytes until the source reports end-of-stream by returning nothing.

System Role
-----------
Lets the use case and the buffering adapter accept files, sockets' file
objects, pipes, :class:`io.BytesIO`, and hand-written test doubles alike.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteSource(Protocol):
    """Anything that hands out bytes on request.

    ``read`` returns at most ``size`` bytes, ``b""`` at end-of-stream, or
    ``None`` when a non-blocking source has nothing available yet. Sources
    that also offer ``readinto`` are read through it to avoid a copy.
    """

    def read(self, size: int = -1, /) -> bytes | None:
        """Return up to ``size`` bytes from the current position."""


__all__ = ["ByteSource"]
