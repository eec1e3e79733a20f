"""Small helpers shared by the bot: line framing, target checks, colours."""

from __future__ import annotations

CRLF = b"\r\n"
RESET = "\033[0m"


def find_crlf(data: bytes | bytearray) -> int | None:
    """Return the index just past the first CRLF in ``data``, or None."""
    index = bytes(data).find(CRLF)
    if index < 0:
        return None
    return index + len(CRLF)


def is_channel_name(target: str) -> bool:
    """Tell whether ``target`` names a channel ('#' or '&' and at least one more character)."""
    return len(target) > 1 and target[0] in "#&"


def _colour_index(value: int) -> int:
    return (value % 997) * 599 % 216 + 16


def str_colorize(value: int) -> str:
    """Build a 256-colour ANSI escape derived from ``value``.

    The background is one of the 216 colour-cube entries; the foreground is
    black or white, whichever reads better on it.
    """
    index = _colour_index(value)
    foreground = 0 if (index - 16) % 36 >= 18 else 15
    return f"\033[1;38:5:{foreground};48:5:{index}m"