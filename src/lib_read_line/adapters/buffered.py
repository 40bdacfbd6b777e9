"""Buffering adapter turning any :class:`ByteSource` into a ``BufferedReader``.

Purpose
-------
Put :class:`io.BufferedReader` in front of arbitrary byte sources so the drain
loop never issues tiny reads against the underlying device, without taking
ownership of that device.

Contents
--------
* :class:`SourceRawIO` - :class:`io.RawIOBase` view over a borrowed source.
* :func:`buffered_source` - context manager scoping the buffered reader to one
  call.

System Role
-----------
Default ``open_reader`` bound by :mod:`lib_read_line.lib_read_line`.
"""

from __future__ import annotations

import errno
import io
from contextlib import contextmanager
from typing import Iterator

from lib_read_line.application.ports.source import ByteSource


class SourceRawIO(io.RawIOBase):
    """Raw stream delegating to a borrowed source.

    Closing this object only marks it closed; the wrapped source stays open.

    Examples
    --------
    >>> raw = SourceRawIO(io.BytesIO(b"abc"))
    >>> buf = bytearray(2)
    >>> raw.readinto(buf), bytes(buf)
    (2, b'ab')
    """

    def __init__(self, source: ByteSource) -> None:
        if not (hasattr(source, "readinto") or hasattr(source, "read")):
            raise TypeError(f"{type(source).__name__} object is not a readable byte source")
        self._source = source

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: bytearray | memoryview) -> int:
        view = memoryview(buffer).cast("B")
        readinto = getattr(self._source, "readinto", None)
        if readinto is not None:
            count = readinto(view)
        else:
            data = self._source.read(len(view))
            if data is None:
                count = None
            else:
                count = len(data)
                if count > len(view):
                    # Same outcome as BufferedReader's check on an over-reporting readinto().
                    raise OSError(f"source returned {count} bytes, requested at most {len(view)}")
                view[:count] = data
        if count is None:
            raise BlockingIOError(errno.EAGAIN, "source has no data available")
        return count


@contextmanager
def buffered_source(source: ByteSource, *, buffer_size: int = io.DEFAULT_BUFFER_SIZE) -> Iterator[io.BufferedReader]:
    """Yield a buffered reader over ``source`` for the duration of the block.

    The reader is closed on exit; ``source`` is left open and positioned
    wherever reading stopped.

    Examples
    --------
    >>> data = io.BytesIO(b"hello")
    >>> with buffered_source(data) as reader:
    ...     reader.read()
    b'hello'
    >>> data.closed
    False
    """

    reader = io.BufferedReader(SourceRawIO(source), buffer_size)
    try:
        yield reader
    finally:
        reader.close()


__all__ = ["SourceRawIO", "buffered_source"]
