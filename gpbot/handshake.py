"""The handshake packet that opens every connection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from gpbot.buffer import Buffer
from gpbot.errors import InvalidArgsError, InvalidPacketError
from gpbot.packet import ConnectionState, Packet
from gpbot.strings import write_string
from gpbot.varint import write_varint


@dataclass
class HandshakePacket(Packet):
    """Announces the protocol version and the state to switch to."""

    packet_id: ClassVar[int] = 0

    protocol_version: int
    server_address: str = ""
    server_port: int = 0
    next_state: int = ConnectionState.LOGIN

    def write(self, buffer: Buffer) -> None:
        write_varint(buffer, self.protocol_version)
        write_string(buffer, self.server_address)
        buffer.write_uint16(self.server_port)
        write_varint(buffer, self.next_state)


def parse_handshake_packet(buffer: Buffer, packet_id: int) -> Packet:
    """The server sends nothing in the handshake state, so every id is invalid."""
    raise InvalidPacketError(f"no packet {packet_id} is received in the handshake state")


def write_handshake_packet(buffer: Buffer, packet: Packet) -> None:
    """Write the payload of a handshake-state packet."""
    if packet.packet_id != HandshakePacket.packet_id:
        raise InvalidArgsError(f"packet {packet.packet_id} is not a handshake packet")
    packet.write(buffer)