# gpbot

A small client library for the Minecraft: Java Edition network protocol
(version 1.18.2, protocol 758), aimed at writing headless bots. It sends the
handshake and login start, follows the login until the server accepts or
refuses the player, recognises the join-game packet, and reports what happens
through an event queue.

The library does not own the network connection. A `Bot` is given a `send`
callable, which receives the bytes of one framed packet, and a `recv`
callable, which is given a maximum size and returns the bytes that arrived
(empty bytes mean the peer closed). It can run over a plain socket or any
other byte transport.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

The package installs one command:

```
gpbot
```

It connects to a server, logs in offline, and prints `Joined!` when the bot
enters the world or `Disconnected with reason: ...!` when the server refuses
it. Options:

- `--host` — server address (default `127.0.0.1`)
- `--port` — server port (default `25565`)
- `--username` — player name (default `gpbotlibtest`)
- `--timeout` — socket timeout in seconds (default: none)

It exits with status 1 if the connection, the join or an update fails.

## Library overview

- `gpbot.bot` — `Bot(username, send, recv, version=Version.V1_18_2)` drives a
  connection: `join()`, `update()` (receive and handle one packet),
  `leave()`, `is_offline()`, `send_packet()`, `recv_packet()`; its pending
  events are in `bot.events`. `Version` names the supported protocol version.
- `gpbot.event` — `EventQueue` with `push()`, `poll()`, `len()` and iteration
  that drains the queue oldest first; `Event` (with a `reason` for
  disconnects) and `EventType` (`NONE`, `JOIN`, `DISCONNECT`).
- `gpbot.buffer` — `Buffer`, bytes with a read position and big-endian
  readers and writers for bytes, 16/32/64-bit unsigned integers, floats and
  doubles, plus `feed()`, `compact()`, `remaining()` and `getvalue()`.
- `gpbot.varint` — `read_varint`, `write_varint`, `read_varlong`,
  `write_varlong`, `encode_varint`.
- `gpbot.strings` — length-prefixed protocol strings (`read_string`,
  `write_string`) and number formatting (`format_int`, `format_float`).
- `gpbot.uuids` — `read_uuid`, `write_uuid`, using `uuid.UUID`.
- `gpbot.position` — packing block coordinates into 64 bits:
  `position_from_xyz`, `position_to_xyz`.
- `gpbot.bitset` — `Bitset` with `get()` and `set()`.
- `gpbot.jsonvalue` — a small JSON reader and writer: `parse_json`,
  `parse_json_prefix`, `dump_json`. It handles a subset only: strings have no
  escape sequences, numbers have no exponent and are read as floats, and
  arrays and objects must hold at least one element.
- `gpbot.nbt` — Named Binary Tag data: `TagType`, `Tag`, `NbtList`,
  `is_valid_nbt`, `read_tag`, `write_tag`, `read_payload`, `write_payload`,
  `read_compound`, `write_compound`.
- `gpbot.packet` — `ConnectionState` and the `Packet` base class.
- `gpbot.handshake`, `gpbot.login`, `gpbot.play`, `gpbot.status` — packet
  types and the per-state parsers, writers and handlers.

Errors are raised as subclasses of `gpbot.errors.GpError`, each carrying a
`Result` code: for example `UnderflowError` when a buffer runs out of data,
`VarintTooLongError` for an over-long VarInt, `InvalidPacketError` for an
unknown packet id, `DuplicateError` for a repeated JSON key and
`DisconnectedError` when the connection closes.

## Example: encoding primitives

```python
from gpbot.buffer import Buffer
from gpbot.varint import encode_varint, read_varint
from gpbot.position import position_from_xyz, position_to_xyz

assert encode_varint(300) == b"\xac\x02"
assert read_varint(Buffer(b"\xac\x02")) == 300

packed = position_from_xyz(-10, 64, 250)
assert position_to_xyz(packed) == (-10, 64, 250)
```

## What it does not do

- No encryption, compression or login plugin requests: when the server asks
  for any of them, `update()` raises `InternalError`. It therefore only works
  with servers in offline mode without compression.
- No server list status: the status state raises `InternalError`.
- In the play state only the join-game packet is recognised; any other packet
  id makes `update()` raise `InvalidPacketError`. There is no keep-alive
  answer, no movement, chat or world handling.