"""UUIDs as sixteen raw bytes on the wire."""

from __future__ import annotations

import uuid

from gpbot.buffer import Buffer
from gpbot.errors import InvalidArgsError


def read_uuid(buffer: Buffer) -> uuid.UUID:
    """Read a UUID stored as sixteen big-endian bytes."""
    return uuid.UUID(bytes=buffer.read_bytes(16))


def write_uuid(buffer: Buffer, value: uuid.UUID | bytes) -> None:
    """Write a UUID, or sixteen raw bytes, to the buffer."""
    data = value.bytes if isinstance(value, uuid.UUID) else bytes(value)
    if len(data) != 16:
        raise InvalidArgsError(f"a UUID is 16 bytes, got {len(data)}")
    buffer.write_bytes(data)