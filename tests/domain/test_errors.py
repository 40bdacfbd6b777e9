from __future__ import annotations

import pickle

import pytest

from lib_read_line.domain.errors import FailureKind, ReadLineError, SourceReadError, TextDecodeError


@pytest.mark.parametrize(
    "kind, code",
    [
        (FailureKind.READ, 74),
        (FailureKind.DECODE, 65),
    ],
)
def test_failure_kind_exit_codes(kind: FailureKind, code: int) -> None:
    assert kind.exit_code == code


@pytest.mark.parametrize(
    "name, expected",
    [
        ("read", FailureKind.READ),
        (" DECODE ", FailureKind.DECODE),
    ],
)
def test_failure_kind_from_name_is_case_insensitive(name: str, expected: FailureKind) -> None:
    assert FailureKind.from_name(name) is expected


def test_failure_kind_from_name_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown failure kind"):
        FailureKind.from_name("timeout")


def test_source_read_error_keeps_cause_and_message() -> None:
    cause = ConnectionResetError(104, "Connection reset by peer")
    error = SourceReadError(cause)

    assert error.cause is cause
    assert error.__cause__ is cause
    assert error.kind is FailureKind.READ
    assert str(error) == "[Errno 104] Connection reset by peer"
    assert isinstance(error, ReadLineError)


def test_text_decode_error_is_a_value_error() -> None:
    cause = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
    error = TextDecodeError(cause)

    assert isinstance(error, ValueError)
    assert error.kind is FailureKind.DECODE
    assert "invalid start byte" in str(error)


def test_message_falls_back_to_cause_type_name() -> None:
    assert str(SourceReadError(OSError())) == "OSError"


def test_source_read_error_survives_pickling() -> None:
    error = SourceReadError(OSError(5, "Input/output error"))

    restored = pickle.loads(pickle.dumps(error))

    assert type(restored) is SourceReadError
    assert restored.kind is FailureKind.READ
    assert str(restored) == "[Errno 5] Input/output error"
    assert restored.cause.errno == 5
    assert restored.cause.strerror == "Input/output error"
    assert restored.__cause__ is restored.cause


def test_text_decode_error_survives_pickling() -> None:
    error = TextDecodeError(UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"))

    restored = pickle.loads(pickle.dumps(error))

    assert type(restored) is TextDecodeError
    assert restored.kind is FailureKind.DECODE
    assert str(restored) == str(error)
    assert restored.cause.reason == "invalid start byte"
