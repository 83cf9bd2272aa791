"""Named binary tags: reading and writing the big-endian tag tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from gpbot.buffer import Buffer
from gpbot.errors import InvalidArgsError, InvalidPacketError


class TagType(IntEnum):
    """Type codes of NBT tags."""

    END = 0
    BYTE = 1
    SHORT = 2
    INT = 3
    LONG = 4
    FLOAT = 5
    DOUBLE = 6
    BYTE_ARRAY = 7
    STRING = 8
    LIST = 9
    COMPOUND = 10
    INT_ARRAY = 11
    LONG_ARRAY = 12


@dataclass
class NbtList:
    """A list payload: every item is a payload of the same tag type."""

    tag_type: TagType
    items: list[Any] = field(default_factory=list)


@dataclass
class Tag:
    """A named tag; compounds hold a list of Tag, lists hold an NbtList."""

    type: TagType
    name: str = ""
    value: Any = None


def _tag_type(code: int) -> TagType:
    try:
        return TagType(code)
    except ValueError:
        raise InvalidPacketError(f"unknown NBT tag type {code}") from None


def _signed(value: int, bits: int) -> int:
    return value - (1 << bits) if value & (1 << (bits - 1)) else value


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="surrogateescape")


def _encode(text: str | bytes) -> bytes:
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    return text.encode("utf-8", errors="surrogateescape")


def _read_short_string(buffer: Buffer) -> str:
    return _decode(buffer.read_bytes(buffer.read_uint16()))


def _write_short_string(buffer: Buffer, text: str | bytes) -> None:
    data = _encode(text)
    if len(data) > 0xFFFF:
        raise InvalidArgsError(f"NBT string of {len(data)} bytes is too long")
    buffer.write_uint16(len(data))
    buffer.write_bytes(data)


def _read_length(buffer: Buffer) -> int:
    return _signed(buffer.read_uint32(), 32)


def is_valid_nbt(tag: Tag) -> bool:
    """A whole NBT document is a compound tag."""
    return tag.type == TagType.COMPOUND


def read_payload(buffer: Buffer, tag_type: int) -> Any:
    """Read the payload of a tag of the given type."""
    tag_type = _tag_type(tag_type)
    if tag_type == TagType.END:
        return None
    if tag_type == TagType.BYTE:
        return _signed(buffer.read_byte(), 8)
    if tag_type == TagType.SHORT:
        return _signed(buffer.read_uint16(), 16)
    if tag_type == TagType.INT:
        return _signed(buffer.read_uint32(), 32)
    if tag_type == TagType.LONG:
        return _signed(buffer.read_uint64(), 64)
    if tag_type == TagType.FLOAT:
        return buffer.read_float()
    if tag_type == TagType.DOUBLE:
        return buffer.read_double()
    if tag_type == TagType.BYTE_ARRAY:
        return buffer.read_bytes(_read_length(buffer))
    if tag_type == TagType.STRING:
        return _read_short_string(buffer)
    if tag_type == TagType.LIST:
        item_type = _tag_type(buffer.read_byte())
        length = _read_length(buffer)
        return NbtList(item_type, [read_payload(buffer, item_type) for _ in range(length)])
    if tag_type == TagType.COMPOUND:
        return read_compound(buffer)
    if tag_type == TagType.INT_ARRAY:
        length = _read_length(buffer)
        return [_signed(buffer.read_uint32(), 32) for _ in range(length)]
    length = _read_length(buffer)
    return [_signed(buffer.read_uint64(), 64) for _ in range(length)]


def write_payload(buffer: Buffer, value: Any, tag_type: int) -> None:
    """Write the payload of a tag of the given type."""
    tag_type = _tag_type(tag_type)
    if tag_type == TagType.END:
        return
    if tag_type == TagType.BYTE:
        buffer.write_byte(value)
    elif tag_type == TagType.SHORT:
        buffer.write_uint16(value)
    elif tag_type == TagType.INT:
        buffer.write_uint32(value)
    elif tag_type == TagType.LONG:
        buffer.write_uint64(value)
    elif tag_type == TagType.FLOAT:
        buffer.write_float(value)
    elif tag_type == TagType.DOUBLE:
        buffer.write_double(value)
    elif tag_type == TagType.BYTE_ARRAY:
        data = bytes(value)
        buffer.write_uint32(len(data))
        buffer.write_bytes(data)
    elif tag_type == TagType.STRING:
        _write_short_string(buffer, value)
    elif tag_type == TagType.LIST:
        buffer.write_byte(value.tag_type)
        buffer.write_uint32(len(value.items))
        for item in value.items:
            write_payload(buffer, item, value.tag_type)
    elif tag_type == TagType.COMPOUND:
        write_compound(buffer, value)
    elif tag_type == TagType.INT_ARRAY:
        buffer.write_uint32(len(value))
        for item in value:
            buffer.write_uint32(item)
    else:
        buffer.write_uint32(len(value))
        for item in value:
            buffer.write_uint64(item)


def read_tag(buffer: Buffer) -> Tag:
    """Read one named tag; an END tag has no name and no value."""
    tag_type = _tag_type(buffer.read_byte())
    if tag_type == TagType.END:
        return Tag(TagType.END)
    name = _read_short_string(buffer)
    return Tag(tag_type, name, read_payload(buffer, tag_type))


def write_tag(buffer: Buffer, tag: Tag) -> None:
    """Write one named tag."""
    buffer.write_byte(tag.type)
    if tag.type == TagType.END:
        return
    _write_short_string(buffer, tag.name)
    write_payload(buffer, tag.value, tag.type)


def read_compound(buffer: Buffer) -> list[Tag]:
    """Read tags up to and including the closing END tag."""
    tags: list[Tag] = []
    while True:
        tag = read_tag(buffer)
        if tag.type == TagType.END:
            return tags
        tags.append(tag)


def write_compound(buffer: Buffer, tags: list[Tag]) -> None:
    """Write the tags followed by an END tag."""
    for tag in tags:
        write_tag(buffer, tag)
    buffer.write_byte(TagType.END)