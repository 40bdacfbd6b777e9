"""Use case draining a byte source into a freshly built string.

Purpose
-------
Implement the read-everything-as-text operation on top of an injected
buffering strategy, returning a :class:`Result` instead of raising.

System Role
-----------
Invoked through :func:`lib_read_line.read_line`, which binds the default
buffering adapter once at import time.

Alignment Notes
---------------
The operation is named after reading "a line" but drains to end-of-stream;
``"hello\\nworld"`` comes back whole. Decoding is strict UTF-8 and runs
incrementally, with a final flush so a truncated multi-byte sequence at the
end is reported instead of dropped.
"""

from __future__ import annotations

import codecs
from contextlib import AbstractContextManager
from typing import BinaryIO, Callable

from lib_read_line.application.ports.source import ByteSource
from lib_read_line.domain.errors import ReadLineError, SourceReadError, TextDecodeError
from lib_read_line.domain.result import Err, Ok, Result

DEFAULT_CHUNK_SIZE = 8 * 1024

ENCODING = "utf-8"


def create_read_line(
    *,
    open_reader: Callable[[ByteSource], AbstractContextManager[BinaryIO]],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Callable[[ByteSource], Result[str, ReadLineError]]:
    """Return a ``read_line`` callable bound to ``open_reader``.

    Why
    ---
    The composition root picks the buffering adapter once; the returned
    function stays a plain one-argument call for library users.

    Parameters
    ----------
    open_reader:
        Context manager factory wrapping a source in a buffered reader for the
        duration of one call. It must not close the source.
    chunk_size:
        Upper bound for each pull from the buffered reader.

    Returns
    -------
    Callable[[ByteSource], Result[str, ReadLineError]]
        Function draining its argument to end-of-stream.

    Raises
    ------
    ValueError
        If ``chunk_size`` is not positive.

    Examples
    --------
    >>> import io
    >>> from contextlib import nullcontext
    >>> read = create_read_line(open_reader=nullcontext, chunk_size=2)
    >>> read(io.BytesIO("grüße".encode()))
    Ok(value='grüße')
    >>> read(io.BytesIO(b"\\xff")).is_err
    True
    """

    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    def read_line(source: ByteSource) -> Result[str, ReadLineError]:
        """Drain ``source`` and decode it; never expose a partial string."""

        decoder = codecs.getincrementaldecoder(ENCODING)(errors="strict")
        pieces: list[str] = []
        try:
            with open_reader(source) as reader:
                pull = getattr(reader, "read1", reader.read)
                while True:
                    chunk = pull(chunk_size)
                    if not chunk:
                        break
                    pieces.append(decoder.decode(chunk))
            pieces.append(decoder.decode(b"", final=True))
        except UnicodeDecodeError as exc:
            return Err(TextDecodeError(exc))
        except OSError as exc:
            return Err(SourceReadError(exc))
        return Ok("".join(pieces))

    return read_line


__all__ = ["DEFAULT_CHUNK_SIZE", "ENCODING", "create_read_line"]
