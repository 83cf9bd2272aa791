"""Length-prefixed protocol strings and number formatting for JSON output."""

from __future__ import annotations

import math

from gpbot.buffer import Buffer
from gpbot.errors import InvalidArgsError
from gpbot.varint import read_varint, write_varint


def read_string(buffer: Buffer) -> str:
    """Read a varint-prefixed UTF-8 string."""
    length = read_varint(buffer)
    return buffer.read_bytes(length).decode("utf-8", errors="replace")


def write_string(buffer: Buffer, value: str | bytes) -> None:
    """Write a varint-prefixed string; str values are UTF-8 encoded."""
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    write_varint(buffer, len(data))
    buffer.write_bytes(data)


def format_int(number: int) -> str:
    """Format an integer in decimal."""
    return f"{int(number):d}"


def format_float(number: float) -> str:
    """Format a finite float as its integer part and every fractional digit.

    The fraction is expanded by repeated multiplication by ten until nothing is
    left, so dyadic fractions come out exactly and whole numbers have no point.
    """
    if not math.isfinite(number):
        raise InvalidArgsError(f"cannot format {number!r}")
    negative = math.copysign(1.0, number) < 0 and number != 0
    magnitude = abs(number)
    whole = int(magnitude)
    fraction = magnitude - whole

    parts = ["-" if negative else "", format_int(whole)]
    if fraction:
        parts.append(".")
    while fraction:
        fraction *= 10
        digit = int(fraction)
        fraction -= digit
        parts.append(str(digit))
    return "".join(parts)