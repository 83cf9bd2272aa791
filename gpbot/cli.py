"""Command that connects a bot to a server and prints what happens."""

from __future__ import annotations

import argparse
import socket
import sys

from gpbot.bot import Bot
from gpbot.errors import GpError
from gpbot.event import EventType


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpbot", description="Join a server as a bot and report its events."
    )
    parser.add_argument("--host", default="127.0.0.1", help="server address")
    parser.add_argument("--port", type=int, default=25565, help="server port")
    parser.add_argument("--username", default="gpbotlibtest", help="player name")
    parser.add_argument(
        "--timeout", type=float, default=None, help="socket timeout in seconds"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        sock = socket.create_connection((args.host, args.port), timeout=args.timeout)
    except OSError as exc:
        print(f"Connect failed: {exc}", file=sys.stderr)
        return 1

    with sock:
        bot = Bot(args.username, sock.sendall, sock.recv)
        try:
            bot.join()
        except GpError as exc:
            print(f"Failed to join: {exc}!", file=sys.stderr)
            return 1

        while not bot.is_offline():
            try:
                bot.update()
            except GpError as exc:
                print(f"Failed to update bot: {exc}!", file=sys.stderr)
                return 1

            for event in bot.events:
                if event.type == EventType.JOIN:
                    print("Joined!")
                elif event.type == EventType.DISCONNECT:
                    print(f"Disconnected with reason: {event.reason}!")

        bot.leave()
    return 0


if __name__ == "__main__":
    sys.exit(main())