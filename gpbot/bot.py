"""A client that joins a server, follows the login and reports game events."""

from __future__ import annotations

import logging
import uuid
from enum import IntEnum
from typing import Callable

from gpbot.buffer import Buffer
from gpbot.errors import (
    DisconnectedError,
    InternalError,
    InvalidPacketError,
    UnderflowError,
    WriteError,
)
from gpbot.event import EventQueue
from gpbot.handshake import HandshakePacket, parse_handshake_packet, write_handshake_packet
from gpbot.login import (
    LoginStartPacket,
    handle_login_packet,
    parse_login_packet,
    write_login_packet,
)
from gpbot.packet import ConnectionState, Packet
from gpbot.play import handle_play_packet, parse_play_packet, write_play_packet
from gpbot.status import parse_status_packet, write_status_packet
from gpbot.varint import read_varint, write_varint

log = logging.getLogger(__name__)

SendFunc = Callable[[bytes], object]
RecvFunc = Callable[[int], bytes]


class Version(IntEnum):
    """Protocol versions the bot can speak."""

    V1_18_2 = 758


_PARSERS = {
    ConnectionState.HANDSHAKE: parse_handshake_packet,
    ConnectionState.STATUS: parse_status_packet,
    ConnectionState.LOGIN: parse_login_packet,
    ConnectionState.PLAY: parse_play_packet,
}

_WRITERS = {
    ConnectionState.HANDSHAKE: write_handshake_packet,
    ConnectionState.STATUS: write_status_packet,
    ConnectionState.LOGIN: write_login_packet,
    ConnectionState.PLAY: write_play_packet,
}

_HANDLERS = {
    ConnectionState.LOGIN: handle_login_packet,
    ConnectionState.PLAY: handle_play_packet,
}


class Bot:
    """A player connection driven by caller-supplied send and receive functions.

    ``send`` takes the bytes of one framed packet. ``recv`` takes a maximum
    size and returns the bytes that arrived; empty bytes mean the peer closed.
    """

    RECV_CHUNK = 1024

    def __init__(
        self,
        username: str,
        send: SendFunc,
        recv: RecvFunc,
        version: int = Version.V1_18_2,
    ) -> None:
        self.username = username
        self.version = version
        self._send = send
        self._recv = recv
        self.uuid: uuid.UUID | None = None
        self.state = ConnectionState.HANDSHAKE
        self.events = EventQueue()
        self.compression_threshold: int | None = None
        self._buffer = Buffer()

    def join(self) -> None:
        """Send the handshake and the login start."""
        self.send_packet(
            HandshakePacket(self.version, "", 0, ConnectionState.LOGIN)
        )
        self.state = ConnectionState.LOGIN
        self.send_packet(LoginStartPacket(self.username))

    def leave(self) -> None:
        """Mark the bot offline; the caller closes the transport."""
        self.state = ConnectionState.OFFLINE

    def update(self) -> None:
        """Receive one packet and act on it."""
        handler = _HANDLERS.get(self.state)
        if handler is None:
            raise InternalError(f"cannot update a bot in state {self.state.name}")
        packet = self.recv_packet()
        handler(self, packet)

    def is_offline(self) -> bool:
        return self.state == ConnectionState.OFFLINE

    def send_packet(self, packet: Packet) -> None:
        """Frame a packet for the current state and hand it to ``send``."""
        writer = _WRITERS.get(self.state)
        if writer is None:
            raise InternalError(f"cannot send in state {self.state.name}")
        body = Buffer()
        write_varint(body, packet.packet_id)
        writer(body, packet)

        frame = Buffer()
        write_varint(frame, len(body))
        frame.write_bytes(body.getvalue())
        try:
            self._send(frame.getvalue())
        except OSError as exc:
            raise WriteError(str(exc)) from exc

    def recv_packet(self) -> Packet:
        """Receive until one whole packet is buffered, then parse it."""
        parser = _PARSERS.get(self.state)
        if parser is None:
            raise InternalError(f"cannot receive in state {self.state.name}")

        while True:
            start = self._buffer.position
            try:
                length = read_varint(self._buffer)
                break
            except UnderflowError:
                self._buffer.position = start
                self._receive()
        if length < 0:
            raise InvalidPacketError(f"negative packet length {length}")

        while self._buffer.remaining() < length:
            self._receive()

        body = Buffer(self._buffer.read_bytes(length))
        self._buffer.compact()

        packet_id = read_varint(body)
        log.debug(
            "received packet %d with length %d in state %s",
            packet_id,
            length,
            self.state.name,
        )
        return parser(body, packet_id)

    def _receive(self) -> None:
        try:
            data = self._recv(self.RECV_CHUNK)
        except OSError as exc:
            raise InternalError(str(exc)) from exc
        if not data:
            raise DisconnectedError()
        self._buffer.feed(data)