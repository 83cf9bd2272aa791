"""Variable-length integers as used on the wire (7 bits per byte, little-endian groups)."""

from __future__ import annotations

from gpbot.buffer import Buffer
from gpbot.errors import VarintTooLongError

_SEGMENT_BITS = 0x7F
_CONTINUE_BIT = 0x80


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _read(buffer: Buffer, bits: int) -> int:
    value = 0
    shift = 0
    while True:
        byte = buffer.read_byte()
        value |= (byte & _SEGMENT_BITS) << shift
        if not byte & _CONTINUE_BIT:
            break
        shift += 7
        if shift >= bits:
            raise VarintTooLongError()
    return _to_signed(value, bits)


def _write(buffer: Buffer, value: int, bits: int) -> None:
    remaining = value & ((1 << bits) - 1)
    while True:
        byte = remaining & _SEGMENT_BITS
        remaining >>= 7
        if remaining:
            byte |= _CONTINUE_BIT
        buffer.write_byte(byte)
        if not remaining:
            break


def read_varint(buffer: Buffer) -> int:
    """Read a signed 32-bit variable-length integer."""
    return _read(buffer, 32)


def read_varlong(buffer: Buffer) -> int:
    """Read a signed 64-bit variable-length integer."""
    return _read(buffer, 64)


def write_varint(buffer: Buffer, value: int) -> None:
    """Write a 32-bit variable-length integer; negative values use five bytes."""
    _write(buffer, value, 32)


def write_varlong(buffer: Buffer, value: int) -> None:
    """Write a 64-bit variable-length integer; negative values use ten bytes."""
    _write(buffer, value, 64)


def encode_varint(value: int) -> bytes:
    """Return the wire bytes of a 32-bit variable-length integer."""
    buffer = Buffer()
    write_varint(buffer, value)
    return buffer.getvalue()