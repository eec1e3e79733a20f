"""Simple bot actions: cards, coins, dice, the magic 8-ball and the clock."""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import datetime

from magicbot.state import BotState

SUITS = ("spades", "hearts", "diamonds", "clubs")
VALUES = (
    "ace", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "jack", "queen", "king",
)
MONTHS = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

DEFAULT_DIE = 6
MIN_DIE = 2
MAX_DIE = 1024

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(text: str) -> int:
    """Read the integer at the start of ``text``; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def ordinal_suffix(day: int) -> str:
    """English ordinal ending chosen by the last digit of ``day``."""
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _format_date(moment: datetime) -> str:
    return (
        f"Current date is {WEEKDAYS[moment.weekday()]}, "
        f"{moment.day}{ordinal_suffix(moment.day)} of "
        f"{MONTHS[moment.month - 1]} {moment.year}."
    )


def _format_time(moment: datetime, microseconds: bool = False) -> str:
    clock = f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    if microseconds:
        clock += f".{moment.microsecond:06d}"
    return clock


def bot_card(state: BotState, target: str, params: Sequence[str]) -> None:
    """Draw a random card from a full deck and name it."""
    card = state.rng.randrange(len(SUITS) * len(VALUES))
    state.notice(
        target,
        f"Your card is: {state.cards[card]}  "
        f"{VALUES[card % 13]} of {SUITS[card // 13]}",
    )


def bot_date(state: BotState, target: str, params: Sequence[str]) -> None:
    """Tell the current local date."""
    state.notice(target, _format_date(datetime.now()))


def bot_flip(state: BotState, target: str, params: Sequence[str]) -> None:
    """Flip a coin."""
    state.notice(target, "Heads!" if state.rng.randrange(2) else "Tails!")


def bot_q(state: BotState, target: str, params: Sequence[str]) -> None:
    """Answer a yes/no question like a magic 8-ball."""
    state.notice(target, state.answers[state.rng.randrange(len(state.answers))])


def bot_roll(state: BotState, target: str, params: Sequence[str]) -> None:
    """Roll a die; the first parameter gives its sides, as ``20`` or ``d20``."""
    if params and params[0]:
        spec = params[0]
        sides = parse_int(spec[1:] if spec.startswith("d") else spec)
    else:
        sides = DEFAULT_DIE
    if MIN_DIE <= sides <= MAX_DIE:
        result = str(state.rng.randrange(sides) + 1)
    else:
        result = "invalid input"
    state.notice(target, result)


def bot_rps(state: BotState, target: str, params: Sequence[str]) -> None:
    """Play one hand of rock, paper, scissors."""
    choice = state.rng.randrange(3)
    if choice & 1:
        result = "Rock!"
    elif choice & 2:
        result = "Paper!"
    else:
        result = "Scissors!"
    state.notice(target, result)


def bot_time(state: BotState, target: str, params: Sequence[str]) -> None:
    """Tell the current local time to the second."""
    state.notice(target, "Current server time is: " + _format_time(datetime.now()))


def bot_utime(state: BotState, target: str, params: Sequence[str]) -> None:
    """Tell the current local time to the microsecond."""
    state.notice(
        target,
        "Current server time is: " + _format_time(datetime.now(), microseconds=True),
    )