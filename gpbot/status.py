"""The status state, which the bot never enters."""

from __future__ import annotations

from gpbot.buffer import Buffer
from gpbot.errors import InternalError
from gpbot.packet import Packet


def parse_status_packet(buffer: Buffer, packet_id: int) -> Packet:
    """Refuse: status packets are not supported."""
    raise InternalError("the status state is not supported")


def write_status_packet(buffer: Buffer, packet: Packet) -> None:
    """Refuse: status packets are not supported."""
    raise InternalError("the status state is not supported")