import pytest

from gpbot.errors import (
    DisconnectedError,
    DuplicateError,
    GpError,
    InternalError,
    InvalidArgsError,
    InvalidJsonError,
    InvalidPacketError,
    ReadError,
    Result,
    UnderflowError,
    VarintTooLongError,
    WriteError,
)


@pytest.mark.parametrize(
    "result, text",
    [
        (Result.SUCCESS, "Success"),
        (Result.BUY_MORE_RAM, "Buy more ram"),
        (Result.INVALID_JSON, "Invalid JSON"),
        (Result.VARINT_TOO_LONG, "Varint too long"),
        (Result.DUPLICATE, "Duplicate"),
    ],
)
def test_describe(result, text):
    assert result.describe() == text


def test_failures_are_negative():
    assert Result(-1) is Result.WRITE_ERROR
    assert Result(-1).describe() == "Write error"
    assert Result(-11).describe() == "Duplicate"
    failures = [r for r in Result if r < Result.SUCCESS]
    assert Result.TRUE not in failures
    assert Result.WRITE_ERROR in failures
    assert {r.describe() for r in failures} == {
        "Duplicate",
        "Invalid JSON",
        "Invalid packet",
        "Disconnected",
        "Internal error",
        "Underflow",
        "Buy more ram",
        "Varint too long",
        "Invalid args",
        "Read error",
        "Write error",
    }


def test_true_has_no_description():
    assert Result.TRUE.describe() == "<UNDEFINED>"


@pytest.mark.parametrize(
    "exc, result",
    [
        (DuplicateError, Result.DUPLICATE),
        (InvalidJsonError, Result.INVALID_JSON),
        (InvalidPacketError, Result.INVALID_PACKET),
        (DisconnectedError, Result.DISCONNECTED),
        (InternalError, Result.INTERNAL_ERROR),
        (UnderflowError, Result.UNDERFLOW),
        (VarintTooLongError, Result.VARINT_TOO_LONG),
        (InvalidArgsError, Result.INVALID_ARGS),
        (ReadError, Result.READ_ERROR),
        (WriteError, Result.WRITE_ERROR),
    ],
)
def test_exception_results(exc, result):
    assert exc.result is result
    assert str(exc()) == result.describe()
    with pytest.raises(GpError):
        raise exc()


def test_custom_message_kept():
    assert str(UnderflowError("need more")) == "need more"