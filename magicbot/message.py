"""Parsing of incoming IRC protocol lines."""

from __future__ import annotations


class MessageError(ValueError):
    """Raised when a line is not a valid IRC message."""


def _take_word(text: str) -> tuple[str, str]:
    word, _, rest = text.partition(" ")
    return word, rest.lstrip(" ")


class Message:
    """One IRC message: ``[':' prefix ' '] command params``.

    The prefix is split into nick, user and host as ``nick[!user@host]``.
    """

    def __init__(self, raw: str) -> None:
        self.raw = raw
        self.prefix = ""
        self.nick = ""
        self.user = ""
        self.host = ""
        self.params: list[str] = []

        rest = raw
        if rest.startswith(":"):
            self.prefix, rest = _take_word(rest[1:])
            self._split_prefix()

        if len(rest) <= 1:
            raise MessageError("Command missing")
        self.command, rest = _take_word(rest)

        while rest:
            if rest.startswith(":"):
                self.params.append(rest[1:])
                break
            param, rest = _take_word(rest)
            self.params.append(param)

    def _split_prefix(self) -> None:
        prefix = self.prefix
        bang = prefix.find("!")
        if bang < 0:
            self.nick = prefix
            return
        self.nick = prefix[:bang]
        at = prefix.find("@")
        if at >= 0:
            self.user = prefix[bang + 1:at] if at > bang else prefix[bang + 1:]
            self.host = prefix[at + 1:]

    def __repr__(self) -> str:
        return f"Message({self.raw!r})"