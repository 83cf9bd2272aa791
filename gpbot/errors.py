"""Result codes and the exceptions raised for them."""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar


class Result(IntEnum):
    """Outcome codes of library operations; negative values are failures."""

    DUPLICATE = -11
    INVALID_JSON = -10
    INVALID_PACKET = -9
    DISCONNECTED = -8
    INTERNAL_ERROR = -7
    UNDERFLOW = -6
    BUY_MORE_RAM = -5
    VARINT_TOO_LONG = -4
    INVALID_ARGS = -3
    READ_ERROR = -2
    WRITE_ERROR = -1
    SUCCESS = 0
    TRUE = 1

    def describe(self) -> str:
        """Return a human readable description of this result."""
        return _DESCRIPTIONS.get(self, "<UNDEFINED>")


_DESCRIPTIONS = {
    Result.DUPLICATE: "Duplicate",
    Result.INVALID_JSON: "Invalid JSON",
    Result.INVALID_PACKET: "Invalid packet",
    Result.DISCONNECTED: "Disconnected",
    Result.INTERNAL_ERROR: "Internal error",
    Result.UNDERFLOW: "Underflow",
    Result.BUY_MORE_RAM: "Buy more ram",
    Result.VARINT_TOO_LONG: "Varint too long",
    Result.INVALID_ARGS: "Invalid args",
    Result.READ_ERROR: "Read error",
    Result.WRITE_ERROR: "Write error",
    Result.SUCCESS: "Success",
}


class GpError(Exception):
    """Base class of every error raised by this package."""

    result: ClassVar[Result] = Result.INTERNAL_ERROR

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.result.describe())


class DuplicateError(GpError):
    """A key was inserted twice."""

    result = Result.DUPLICATE


class InvalidJsonError(GpError):
    """Text could not be parsed as JSON."""

    result = Result.INVALID_JSON


class InvalidPacketError(GpError):
    """A packet id is unknown or not allowed in the current state."""

    result = Result.INVALID_PACKET


class DisconnectedError(GpError):
    """The peer closed the connection."""

    result = Result.DISCONNECTED


class InternalError(GpError):
    """The transport failed or an unsupported path was taken."""

    result = Result.INTERNAL_ERROR


class UnderflowError(GpError):
    """More bytes were requested than the buffer holds."""

    result = Result.UNDERFLOW


class VarintTooLongError(GpError):
    """A variable-length integer used more bytes than allowed."""

    result = Result.VARINT_TOO_LONG


class InvalidArgsError(GpError):
    """An argument was out of range or of the wrong kind."""

    result = Result.INVALID_ARGS


class ReadError(GpError):
    """Reading from the transport failed."""

    result = Result.READ_ERROR


class WriteError(GpError):
    """Writing to the transport failed."""

    result = Result.WRITE_ERROR