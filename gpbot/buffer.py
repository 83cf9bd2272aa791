"""A growable byte buffer with a read cursor and big-endian accessors."""

from __future__ import annotations

import struct

from gpbot.errors import InvalidArgsError, UnderflowError


class Buffer:
    """Bytes written at the end and read from a moving position."""

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytearray(data)
        self.position = 0

    def __len__(self) -> int:
        return len(self._data)

    def remaining(self) -> int:
        """Number of bytes not yet read."""
        return len(self._data) - self.position

    def getvalue(self) -> bytes:
        """All bytes held, read or not."""
        return bytes(self._data)

    def feed(self, data: bytes) -> None:
        """Append received bytes."""
        self._data.extend(data)

    def compact(self) -> None:
        """Drop the bytes already read and reset the position."""
        del self._data[: self.position]
        self.position = 0

    def read_bytes(self, count: int) -> bytes:
        if count < 0:
            raise InvalidArgsError(f"cannot read {count} bytes")
        end = self.position + count
        if end > len(self._data):
            raise UnderflowError()
        chunk = bytes(self._data[self.position : end])
        self.position = end
        return chunk

    def _unpack(self, fmt: str):
        return struct.unpack(fmt, self.read_bytes(struct.calcsize(fmt)))[0]

    def read_byte(self) -> int:
        return self._unpack(">B")

    def read_uint16(self) -> int:
        return self._unpack(">H")

    def read_uint32(self) -> int:
        return self._unpack(">I")

    def read_uint64(self) -> int:
        return self._unpack(">Q")

    def read_float(self) -> float:
        return self._unpack(">f")

    def read_double(self) -> float:
        return self._unpack(">d")

    def write_bytes(self, data: bytes) -> None:
        self._data.extend(data)

    def write_byte(self, value: int) -> None:
        self._data.append(value & 0xFF)

    def write_uint16(self, value: int) -> None:
        self._data.extend(struct.pack(">H", value & 0xFFFF))

    def write_uint32(self, value: int) -> None:
        self._data.extend(struct.pack(">I", value & 0xFFFFFFFF))

    def write_uint64(self, value: int) -> None:
        self._data.extend(struct.pack(">Q", value & 0xFFFFFFFFFFFFFFFF))

    def write_float(self, value: float) -> None:
        self._data.extend(struct.pack(">f", value))

    def write_double(self, value: float) -> None:
        self._data.extend(struct.pack(">d", value))