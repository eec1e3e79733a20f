"""Network client that connects the bot to an IRC server and runs its loop."""

from __future__ import annotations

import argparse
import logging
import os
import random
import selectors
import socket
import sys
import time
from dataclasses import dataclass

from magicbot.blackjack_actions import end_blackjack
from magicbot.commands import dispatch
from magicbot.message import Message, MessageError
from magicbot.state import DEFAULT_BLACKJACK_CHANNEL, BotState
from magicbot.utils import CRLF, find_crlf

log = logging.getLogger(__name__)

BUFFER_SIZE = 512
RECV_SIZE = 512
SELECT_TIMEOUT = 5.0


@dataclass
class BotConfig:
    """Where the bot connects and how it introduces itself."""

    server_ip: str = "127.0.0.1"
    port: int = 6667
    password: str = ""
    botname: str = "magic8bot"
    channel: str = ""
    channel_bj: str = DEFAULT_BLACKJACK_CHANNEL
    register: bool = True
    interactive: bool = False


class LineBuffer:
    """Splits a byte stream into CRLF-terminated lines.

    When more than ``limit`` bytes pile up without a line ending, the data is
    dropped and the rest of that overlong line is discarded when its ending
    finally arrives.
    """

    def __init__(self, limit: int = BUFFER_SIZE) -> None:
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")
        self.limit = limit
        self._data = bytearray()
        self._overflow = False

    def feed(self, data: bytes) -> list[str]:
        """Add ``data`` and return the complete lines, without their CRLF."""
        self._data.extend(data)
        lines: list[str] = []
        while (end := find_crlf(self._data)) is not None:
            chunk = bytes(self._data[:end])
            del self._data[:end]
            if self._overflow:
                self._overflow = False
                continue
            lines.append(chunk[: -len(CRLF)].decode("utf-8", errors="replace"))
        if len(self._data) > self.limit:
            log.error("Data is overflowing")
            self._overflow = True
            keep_cr = self._data.endswith(b"\r")
            self._data.clear()
            if keep_cr:
                self._data.extend(b"\r")
        return lines


class BotClient:
    """The bot's connection: feeds server data to the handlers and sends replies."""

    def __init__(self, config: BotConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self.state = BotState(config.botname, rng, config.channel_bj)
        self.buffer = LineBuffer()
        self._stdin_pending = ""

    def handshake(self) -> None:
        """Queue the registration lines and the channel joins."""
        config = self.config
        state = self.state
        state.send(f"PASS {config.password}")
        state.send(f"NICK {config.botname}")
        state.send("USER bot 0 * magic")
        if config.channel:
            state.send(f"JOIN {config.channel}")
        state.send(f"JOIN {state.channel_bj}")

    def handle_data(self, data: bytes) -> list[Message]:
        """Parse the lines completed by ``data`` and run their handlers."""
        messages: list[Message] = []
        for line in self.buffer.feed(data):
            log.debug("Message extracted: %r", line)
            try:
                message = Message(line)
            except MessageError as exc:
                log.error("Message: %r is not valid, because: %s", line, exc)
                continue
            messages.append(message)
        for message in messages:
            dispatch(self.state, message)
        return messages

    def tick(self, now: float | None = None) -> bool:
        """End a blackjack game whose time is up; return whether one ended."""
        if now is None:
            now = time.time()
        game = self.state.blackjack
        if game.in_progress() and now > game.end_time:
            end_blackjack(self.state)
            return True
        return False

    def _read_stdin(self, selector: selectors.BaseSelector, fd: int) -> None:
        chunk = os.read(fd, 511)
        if not chunk:
            selector.unregister(fd)
            return
        self._stdin_pending += chunk.decode("utf-8", errors="replace")
        while "\n" in self._stdin_pending:
            line, self._stdin_pending = self._stdin_pending.split("\n", 1)
            self.state.send(line.rstrip("\0"))

    def run(self) -> None:
        """Connect and serve until the server closes or the user interrupts."""
        config = self.config
        with socket.create_connection((config.server_ip, config.port)) as sock, \
                selectors.DefaultSelector() as selector:
            if config.register:
                self.handshake()
            selector.register(sock, selectors.EVENT_READ)
            stdin_fd = None
            if config.interactive:
                stdin_fd = sys.stdin.fileno()
                selector.register(stdin_fd, selectors.EVENT_READ)
            alive = True
            try:
                while alive:
                    self.tick()
                    wanted = selectors.EVENT_WRITE if self.state.ready else selectors.EVENT_READ
                    selector.modify(sock, wanted)
                    for key, mask in selector.select(timeout=SELECT_TIMEOUT):
                        if key.fileobj is sock:
                            if mask & selectors.EVENT_WRITE:
                                sock.sendall(self.state.take_output().encode("utf-8"))
                            if mask & selectors.EVENT_READ:
                                data = sock.recv(RECV_SIZE)
                                if not data:
                                    log.warning("Client loop terminating...")
                                    alive = False
                                    break
                                self.handle_data(data)
                        elif key.fileobj == stdin_fd:
                            self._read_stdin(selector, stdin_fd)
            except KeyboardInterrupt:
                log.warning("Client loop terminating...")


def _parse_args(argv: list[str] | None) -> BotConfig:
    parser = argparse.ArgumentParser(prog="magicbot", description="Magic 8-ball IRC bot.")
    parser.add_argument("--host", default="127.0.0.1", help="server address")
    parser.add_argument("--port", type=int, default=6667, help="server port")
    parser.add_argument("--password", default="", help="server password")
    parser.add_argument("--nick", default="magic8bot", help="bot nickname")
    parser.add_argument("--channel", default="", help="extra channel to join")
    parser.add_argument("--interactive", action="store_true",
                        help="forward lines typed on stdin to the server")
    args = parser.parse_args(argv)
    if not 0 < args.port < 65536:
        parser.error("port has to be in the range of 1-65535")
    return BotConfig(
        server_ip=args.host,
        port=args.port,
        password=args.password,
        botname=args.nick,
        channel=args.channel,
        interactive=args.interactive,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the bot from the command line; return the exit status."""
    config = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    client = BotClient(config)
    try:
        client.run()
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())