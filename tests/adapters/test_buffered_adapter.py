from __future__ import annotations

import errno
import io

import pytest

from lib_read_line import FailureKind, Ok, SourceReadError, read_line
from lib_read_line.adapters.buffered import SourceRawIO, buffered_source


class _CountingSource:
    """``read``-only source recording every requested size."""

    def __init__(self, payload: bytes) -> None:
        self._stream = io.BytesIO(payload)
        self.requests: list[int] = []

    def read(self, size: int = -1) -> bytes:
        self.requests.append(size)
        return self._stream.read(size)


class _NonBlockingSource:
    def read(self, size: int = -1) -> None:
        return None


class _GreedySource:
    def read(self, size: int = -1) -> bytes:
        return b"x" * (size + 1)


class _InterruptedOnceSource:
    """Raise ``interruption`` on the first call, then serve ``payload``."""

    def __init__(self, payload: bytes, interruption: InterruptedError) -> None:
        self._stream = io.BytesIO(payload)
        self._interruption = interruption
        self.calls = 0

    def read(self, size: int = -1) -> bytes:
        self.calls += 1
        if self.calls == 1:
            raise self._interruption
        return self._stream.read(size)


def test_buffered_source_batches_small_pulls() -> None:
    source = _CountingSource(b"abcdef")

    with buffered_source(source, buffer_size=64) as reader:
        assert reader.read(1) == b"a"
        assert reader.read(1) == b"b"

    assert source.requests == [64]


def test_buffered_source_leaves_source_open() -> None:
    source = io.BytesIO(b"payload")

    with buffered_source(source) as reader:
        reader.read()

    assert reader.closed is True
    assert source.closed is False


def test_raw_adapter_prefers_readinto(tmp_path) -> None:
    path = tmp_path / "data.bin"
    path.write_bytes(b"0123456789")

    with path.open("rb", buffering=0) as handle:
        raw = SourceRawIO(handle)
        buffer = bytearray(4)
        assert raw.readinto(buffer) == 4
        assert bytes(buffer) == b"0123"


def test_raw_adapter_reports_end_of_stream_as_zero() -> None:
    raw = SourceRawIO(io.BytesIO(b""))

    assert raw.readinto(bytearray(8)) == 0


def test_non_blocking_source_without_data_is_a_read_failure() -> None:
    with pytest.raises(BlockingIOError):
        SourceRawIO(_NonBlockingSource()).readinto(bytearray(8))

    result = read_line(_NonBlockingSource())

    assert result.error.kind is FailureKind.READ
    assert isinstance(result.error.cause, BlockingIOError)


def test_source_returning_too_many_bytes_is_rejected() -> None:
    with pytest.raises(OSError, match="requested at most 8"):
        SourceRawIO(_GreedySource()).readinto(bytearray(8))


def test_source_returning_too_many_bytes_is_a_read_failure() -> None:
    result = read_line(_GreedySource())

    assert isinstance(result.error, SourceReadError)
    assert result.error.kind is FailureKind.READ
    assert "requested at most" in str(result.error)


def test_interrupted_read_with_eintr_is_retried() -> None:
    source = _InterruptedOnceSource(b"abc", InterruptedError(errno.EINTR, "Interrupted system call"))

    assert read_line(source) == Ok("abc")
    assert source.calls >= 2


def test_interrupted_read_without_errno_is_a_read_failure() -> None:
    interruption = InterruptedError()

    result = read_line(_InterruptedOnceSource(b"abc", interruption))

    assert isinstance(result.error, SourceReadError)
    assert result.error.cause is interruption


def test_raw_adapter_requires_a_readable_object() -> None:
    with pytest.raises(TypeError):
        SourceRawIO(42)  # type: ignore[arg-type]


def test_read_line_over_real_file_handle(tmp_path) -> None:
    path = tmp_path / "text.txt"
    path.write_bytes("line one\nline two\n".encode())

    with path.open("rb") as handle:
        assert read_line(handle) == Ok("line one\nline two\n")
        assert handle.read() == b""
