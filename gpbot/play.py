"""Packets of the play state and how the bot reacts to them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from gpbot.buffer import Buffer
from gpbot.errors import InvalidArgsError, InvalidPacketError
from gpbot.event import Event, EventType
from gpbot.nbt import Tag, read_compound
from gpbot.packet import Packet
from gpbot.strings import read_string
from gpbot.varint import read_varint


def _signed_byte(value: int) -> int:
    return value - 0x100 if value & 0x80 else value


@dataclass
class JoinGamePacket(Packet):
    """Sent when the player enters the world."""

    packet_id: ClassVar[int] = 38

    entity_id: int
    is_hardcore: bool
    gamemode: int
    prev_gamemode: int
    dimension_names: list[str] = field(default_factory=list)
    dimension_codec: list[Tag] = field(default_factory=list)
    dimension: list[Tag] = field(default_factory=list)
    dimension_name: str = ""
    hashed_seed: int = 0
    max_players: int = 0
    view_distance: int = 0
    simulation_distance: int = 0
    reduced_debug_info: bool = False
    enable_respawn_screen: bool = False
    is_debug: bool = False
    is_flat: bool = False

    @classmethod
    def read(cls, buffer: Buffer) -> JoinGamePacket:
        entity_id = buffer.read_uint32()
        is_hardcore = bool(buffer.read_byte())
        gamemode = buffer.read_byte()
        prev_gamemode = _signed_byte(buffer.read_byte())
        world_count = read_varint(buffer)
        dimension_names = [read_string(buffer) for _ in range(world_count)]
        dimension_codec = read_compound(buffer)
        dimension = read_compound(buffer)
        dimension_name = read_string(buffer)
        hashed_seed = buffer.read_uint64()
        max_players = read_varint(buffer)
        view_distance = read_varint(buffer)
        simulation_distance = read_varint(buffer)
        reduced_debug_info = bool(buffer.read_byte())
        enable_respawn_screen = bool(buffer.read_byte())
        is_debug = bool(buffer.read_byte())
        is_flat = bool(buffer.read_byte())
        return cls(
            entity_id=entity_id,
            is_hardcore=is_hardcore,
            gamemode=gamemode,
            prev_gamemode=prev_gamemode,
            dimension_names=dimension_names,
            dimension_codec=dimension_codec,
            dimension=dimension,
            dimension_name=dimension_name,
            hashed_seed=hashed_seed,
            max_players=max_players,
            view_distance=view_distance,
            simulation_distance=simulation_distance,
            reduced_debug_info=reduced_debug_info,
            enable_respawn_screen=enable_respawn_screen,
            is_debug=is_debug,
            is_flat=is_flat,
        )


def parse_play_packet(buffer: Buffer, packet_id: int) -> Packet:
    """Read the payload of a packet the server sends in the play state."""
    if packet_id == JoinGamePacket.packet_id:
        return JoinGamePacket.read(buffer)
    raise InvalidPacketError(f"unknown play packet {packet_id}")


def write_play_packet(buffer: Buffer, packet: Packet) -> None:
    """Play packets sent by the client carry no payload; only the id goes out."""
    if not isinstance(packet, Packet):
        raise InvalidArgsError(f"{packet!r} is not a packet")


def handle_play_packet(bot: Any, packet: Packet) -> None:
    """Report a join when the join packet arrives; other packets are ignored."""
    if isinstance(packet, JoinGamePacket):
        bot.events.push(Event(EventType.JOIN))