"""Connection states and the base class of protocol packets."""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar

from gpbot.buffer import Buffer
from gpbot.errors import InvalidPacketError


class ConnectionState(IntEnum):
    """States of a connection; the first four are protocol states."""

    HANDSHAKE = 0
    STATUS = 1
    LOGIN = 2
    PLAY = 3
    OFFLINE = 4


class Packet:
    """A protocol packet; subclasses fix the id and hold the payload fields.

    The id itself is framed by the sender; ``write`` puts only the payload.
    """

    packet_id: ClassVar[int] = -1

    def write(self, buffer: Buffer) -> None:
        """Write the payload; packets that are only ever received refuse."""
        raise InvalidPacketError(f"{type(self).__name__} cannot be sent")