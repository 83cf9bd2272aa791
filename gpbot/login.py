"""Packets of the login state and how the bot reacts to them."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, ClassVar

from gpbot.buffer import Buffer
from gpbot.errors import InternalError, InvalidPacketError
from gpbot.event import Event, EventType
from gpbot.packet import ConnectionState, Packet
from gpbot.strings import read_string, write_string
from gpbot.uuids import read_uuid
from gpbot.varint import read_varint, write_varint


def _read_byte_array(buffer: Buffer) -> bytes:
    return buffer.read_bytes(read_varint(buffer))


def _write_byte_array(buffer: Buffer, data: bytes) -> None:
    write_varint(buffer, len(data))
    buffer.write_bytes(data)


@dataclass
class DisconnectPacket(Packet):
    """The server refused the login."""

    packet_id: ClassVar[int] = 0

    reason: str

    @classmethod
    def read(cls, buffer: Buffer) -> DisconnectPacket:
        return cls(read_string(buffer))


@dataclass
class EncryptionRequestPacket(Packet):
    """The server asks to switch on encryption."""

    packet_id: ClassVar[int] = 1

    server_id: str
    public_key: bytes
    verify_token: bytes

    @classmethod
    def read(cls, buffer: Buffer) -> EncryptionRequestPacket:
        server_id = read_string(buffer)
        public_key = _read_byte_array(buffer)
        verify_token = _read_byte_array(buffer)
        return cls(server_id, public_key, verify_token)


@dataclass
class LoginSuccessPacket(Packet):
    """The login went through; the connection moves to the play state."""

    packet_id: ClassVar[int] = 2

    uuid: uuid.UUID
    username: str

    @classmethod
    def read(cls, buffer: Buffer) -> LoginSuccessPacket:
        player_uuid = read_uuid(buffer)
        username = read_string(buffer)
        return cls(player_uuid, username)


@dataclass
class SetCompressionPacket(Packet):
    """The server switches on compression above a size threshold."""

    packet_id: ClassVar[int] = 3

    threshold: int

    @classmethod
    def read(cls, buffer: Buffer) -> SetCompressionPacket:
        return cls(read_varint(buffer))


@dataclass
class LoginPluginRequestPacket(Packet):
    """A custom request; its data runs to the end of the packet."""

    packet_id: ClassVar[int] = 4

    message_id: int
    channel: str
    data: bytes = b""

    @classmethod
    def read(cls, buffer: Buffer) -> LoginPluginRequestPacket:
        message_id = read_varint(buffer)
        channel = read_string(buffer)
        data = buffer.read_bytes(buffer.remaining())
        return cls(message_id, channel, data)


@dataclass
class LoginStartPacket(Packet):
    """Sent by the client to begin the login with a user name."""

    packet_id: ClassVar[int] = 0

    username: str

    def write(self, buffer: Buffer) -> None:
        write_string(buffer, self.username)


@dataclass
class EncryptionResponsePacket(Packet):
    """The client's answer to an encryption request."""

    packet_id: ClassVar[int] = 1

    shared_secret: bytes
    verify_token: bytes

    def write(self, buffer: Buffer) -> None:
        _write_byte_array(buffer, self.shared_secret)
        _write_byte_array(buffer, self.verify_token)


@dataclass
class LoginPluginResponsePacket(Packet):
    """The client's answer to a plugin request; data is sent raw."""

    packet_id: ClassVar[int] = 2

    message_id: int
    successful: bool
    data: bytes = b""

    def write(self, buffer: Buffer) -> None:
        write_varint(buffer, self.message_id)
        buffer.write_byte(1 if self.successful else 0)
        buffer.write_bytes(self.data)


_CLIENTBOUND = {
    packet.packet_id: packet
    for packet in (
        DisconnectPacket,
        EncryptionRequestPacket,
        LoginSuccessPacket,
        SetCompressionPacket,
        LoginPluginRequestPacket,
    )
}

_SERVERBOUND = (LoginStartPacket, EncryptionResponsePacket, LoginPluginResponsePacket)


def parse_login_packet(buffer: Buffer, packet_id: int) -> Packet:
    """Read the payload of a packet the server sends in the login state."""
    packet_type = _CLIENTBOUND.get(packet_id)
    if packet_type is None:
        raise InvalidPacketError(f"unknown login packet {packet_id}")
    return packet_type.read(buffer)


def write_login_packet(buffer: Buffer, packet: Packet) -> None:
    """Write the payload of a packet the client sends in the login state."""
    if not isinstance(packet, _SERVERBOUND):
        raise InvalidPacketError(f"{type(packet).__name__} is not sent in the login state")
    packet.write(buffer)


def handle_login_packet(bot: Any, packet: Packet) -> None:
    """Update the bot's state and events for a received login packet."""
    if isinstance(packet, DisconnectPacket):
        bot.state = ConnectionState.OFFLINE
        bot.events.push(Event(EventType.DISCONNECT, packet.reason))
    elif isinstance(packet, LoginSuccessPacket):
        bot.state = ConnectionState.PLAY
    elif isinstance(packet, EncryptionRequestPacket):
        raise InternalError("encrypted connections are not supported")
    elif isinstance(packet, SetCompressionPacket):
        raise InternalError("compressed connections are not supported")
    elif isinstance(packet, LoginPluginRequestPacket):
        raise InternalError("login plugin requests are not supported")
    else:
        raise InvalidPacketError(f"{type(packet).__name__} is not a login packet")