"""Public façade binding the drain use case to the default adapters.

Purpose
-------
Expose :func:`read_line`, the one-call replacement for the
"create a buffer, read into it, remember to check the outcome" dance, plus the
metadata helper used by the CLI.

Contents
--------
* :func:`read_line` - drain a byte source into a new string, as a result.
* :func:`summary_info` - metadata banner captured from ``__init__conf__``.

System Role
-----------
Composition root: the only place that picks the buffering adapter for the
application-layer use case.

Examples
--------
Before::

    buf = bytearray()
    for chunk in iter(lambda: stream.read(4096), b""):
        buf += chunk
    text = buf.decode("utf-8")   # may raise after the stream is gone

After::

    text = read_line(stream).unwrap()
"""

from __future__ import annotations

from .adapters.buffered import buffered_source
from .application.ports.source import ByteSource
from .application.use_cases.read_line import create_read_line
from .domain.errors import ReadLineError
from .domain.result import Result

_read_line = create_read_line(open_reader=buffered_source)


def read_line(source: ByteSource) -> Result[str, ReadLineError]:
    """Read everything left in ``source`` into a new string.

    Why
    ---
    Callers get the text only when the whole read and the UTF-8 decode
    succeeded; there is no buffer in scope that could be empty or half full
    after a failure.

    What
    ----
    Wraps ``source`` in a :class:`io.BufferedReader` for the duration of the
    call and drains it to end-of-stream. Despite the name, line terminators do
    not stop the read.

    Parameters
    ----------
    source:
        Object with ``read(size)`` or ``readinto(buffer)``; borrowed, never
        closed.

    Returns
    -------
    Result[str, ReadLineError]
        ``Ok(text)`` on success; ``Err(SourceReadError)`` when the source
        raised an ``OSError``; ``Err(TextDecodeError)`` when the bytes are not
        valid UTF-8.

    Raises
    ------
    ValueError
        When ``source`` is already closed ("I/O operation on closed file.").
        Only ``OSError`` and ``UnicodeDecodeError`` become ``Err`` values;
        anything else the source raises propagates unchanged.
    TypeError
        When ``source`` has neither ``read`` nor ``readinto``.

    Performance
    -----------
    Each call builds a fresh string; nothing can be pre-allocated or reused
    after an error. Use the stream's own ``readinto`` when that matters.

    Examples
    --------
    >>> import io
    >>> read_line(io.BytesIO(b"hello\\nworld"))
    Ok(value='hello\\nworld')
    >>> read_line(io.BytesIO(b""))
    Ok(value='')
    >>> read_line(io.BytesIO(b"\\xff")).error.kind.name
    'DECODE'
    """

    return _read_line(source)


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = ["read_line", "summary_info"]
