import uuid

import pytest

from gpbot.bot import Bot, Version
from gpbot.buffer import Buffer
from gpbot.errors import (
    DisconnectedError,
    InternalError,
    InvalidPacketError,
    WriteError,
)
from gpbot.event import EventType
from gpbot.login import (
    DisconnectPacket,
    LoginPluginRequestPacket,
    LoginStartPacket,
)
from gpbot.nbt import write_compound
from gpbot.packet import ConnectionState
from gpbot.play import JoinGamePacket
from gpbot.strings import write_string
from gpbot.uuids import write_uuid
from gpbot.varint import encode_varint, write_varint


class FakeTransport:
    def __init__(self, chunks=(), chunk_size=None):
        self.sent = []
        self.incoming = bytearray(b"".join(chunks))
        self.chunk_size = chunk_size
        self.recv_calls = 0

    def send(self, data):
        self.sent.append(data)
        return len(data)

    def recv(self, size):
        self.recv_calls += 1
        limit = size if self.chunk_size is None else min(size, self.chunk_size)
        data = bytes(self.incoming[:limit])
        del self.incoming[:limit]
        return data


def frame(packet_id, payload):
    body = encode_varint(packet_id) + payload
    return encode_varint(len(body)) + body


def disconnect_payload(reason):
    buffer = Buffer()
    write_string(buffer, reason)
    return buffer.getvalue()


def login_success_payload(player_uuid, name):
    buffer = Buffer()
    write_uuid(buffer, player_uuid)
    write_string(buffer, name)
    return buffer.getvalue()


def join_game_payload():
    buffer = Buffer()
    buffer.write_uint32(7)
    buffer.write_byte(0)
    buffer.write_byte(1)
    buffer.write_byte(0xFF)
    write_varint(buffer, 1)
    write_string(buffer, "minecraft:overworld")
    write_compound(buffer, [])
    write_compound(buffer, [])
    write_string(buffer, "minecraft:overworld")
    buffer.write_uint64(0)
    write_varint(buffer, 20)
    write_varint(buffer, 10)
    write_varint(buffer, 10)
    for _ in range(4):
        buffer.write_byte(0)
    return buffer.getvalue()


def make_bot(transport, name="bob"):
    return Bot(name, transport.send, transport.recv)


def test_join_sends_handshake_and_login_start():
    transport = FakeTransport()
    bot = make_bot(transport)
    bot.join()
    assert transport.sent == [
        b"\x07\x00\xf6\x05\x00\x00\x00\x02",
        b"\x05\x00\x03bob",
    ]
    assert bot.state == ConnectionState.LOGIN


def test_default_version_is_1_18_2():
    transport = FakeTransport()
    bot = make_bot(transport)
    assert bot.version == Version.V1_18_2


def test_disconnect_during_login_goes_offline_with_event():
    transport = FakeTransport([frame(0, disconnect_payload("bye"))])
    bot = make_bot(transport)
    bot.join()
    bot.update()
    assert bot.is_offline()
    event = bot.events.poll()
    assert event.type == EventType.DISCONNECT
    assert event.reason == "bye"
    assert bot.events.poll() is None


def test_login_success_then_join_game_reports_join():
    player = uuid.UUID(int=1)
    transport = FakeTransport(
        [frame(2, login_success_payload(player, "bob")), frame(38, join_game_payload())]
    )
    bot = make_bot(transport)
    bot.join()
    bot.update()
    assert bot.state == ConnectionState.PLAY
    assert len(bot.events) == 0
    bot.update()
    assert [event.type for event in bot.events] == [EventType.JOIN]
    assert not bot.is_offline()


def test_packet_split_over_many_receives():
    transport = FakeTransport([frame(0, disconnect_payload("split"))], chunk_size=1)
    bot = make_bot(transport)
    bot.join()
    packet = bot.recv_packet()
    assert packet == DisconnectPacket("split")
    assert transport.recv_calls > 1


def test_two_packets_in_one_chunk_need_one_receive():
    transport = FakeTransport(
        [frame(4, encode_varint(5) + b"\x02ch" + b"abc"), frame(0, disconnect_payload("x"))]
    )
    bot = make_bot(transport)
    bot.state = ConnectionState.LOGIN
    first = bot.recv_packet()
    second = bot.recv_packet()
    assert first == LoginPluginRequestPacket(5, "ch", b"abc")
    assert second == DisconnectPacket("x")
    assert transport.recv_calls == 1


def test_closed_connection_raises_disconnected():
    transport = FakeTransport()
    bot = make_bot(transport)
    bot.join()
    with pytest.raises(DisconnectedError):
        bot.update()


def test_transport_error_on_receive_is_internal_error():
    def failing_recv(size):
        raise ConnectionResetError("reset")

    transport = FakeTransport()
    bot = Bot("bob", transport.send, failing_recv)
    bot.join()
    with pytest.raises(InternalError):
        bot.update()


def test_transport_error_on_send_is_write_error():
    def failing_send(data):
        raise BrokenPipeError("pipe")

    bot = Bot("bob", failing_send, FakeTransport().recv)
    with pytest.raises(WriteError):
        bot.join()


def test_unknown_login_packet_is_invalid():
    transport = FakeTransport([frame(9, b"")])
    bot = make_bot(transport)
    bot.join()
    with pytest.raises(InvalidPacketError):
        bot.update()


def test_update_when_offline_does_not_receive():
    transport = FakeTransport([frame(0, disconnect_payload("x"))])
    bot = make_bot(transport)
    bot.leave()
    assert bot.is_offline()
    with pytest.raises(InternalError):
        bot.update()
    assert transport.recv_calls == 0


def test_sending_receive_only_packet_in_login_is_invalid():
    transport = FakeTransport()
    bot = make_bot(transport)
    bot.state = ConnectionState.LOGIN
    with pytest.raises(InvalidPacketError):
        bot.send_packet(DisconnectPacket("nope"))
    assert transport.sent == []


def test_sent_login_start_frame_prefix_matches_length():
    transport = FakeTransport()
    bot = make_bot(transport)
    bot.state = ConnectionState.LOGIN
    bot.send_packet(LoginStartPacket("someone_long_name"))
    data = transport.sent[0]
    assert data[0] == len(data) - 1


def test_join_game_packet_fields_are_parsed():
    transport = FakeTransport([frame(38, join_game_payload())])
    bot = make_bot(transport)
    bot.state = ConnectionState.PLAY
    packet = bot.recv_packet()
    assert isinstance(packet, JoinGamePacket)
    assert packet.entity_id == 7
    assert packet.dimension_names == ["minecraft:overworld"]
    assert packet.prev_gamemode == -1