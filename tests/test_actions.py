import random
import re
from datetime import datetime

import pytest

from magicbot import actions
from magicbot.blackjack import CARD_FACES
from magicbot.state import ANSWERS, BotState


class StubRng(random.Random):
    def __init__(self, value):
        super().__init__(0)
        self.value = value
        self.calls = []

    def randrange(self, start, stop=None, step=1):
        self.calls.append(start)
        return self.value % start


def make_state(value=0):
    rng = StubRng(value)
    return BotState("magic8bot", rng=rng), rng


def test_parse_int_values():
    assert actions.parse_int("42") == 42
    assert actions.parse_int("-7") == -7
    assert actions.parse_int(" 12x") == 12
    assert actions.parse_int("abc") == 0
    assert actions.parse_int("") == 0


@pytest.mark.parametrize(
    "day, suffix",
    [(1, "st"), (2, "nd"), (3, "rd"), (4, "th"), (11, "st"), (22, "nd"), (30, "th")],
)
def test_ordinal_suffix(day, suffix):
    assert actions.ordinal_suffix(day) == suffix


def test_card_first():
    state, rng = make_state(0)
    actions.bot_card(state, "nick", [])
    out = state.take_output()
    assert out.startswith("NOTICE nick :Your card is: " + CARD_FACES[0])
    assert "ace of spades" in out
    assert rng.calls == [52]


def test_card_last():
    state, _ = make_state(51)
    actions.bot_card(state, "nick", [])
    out = state.take_output()
    assert CARD_FACES[51] in out
    assert "king of clubs" in out
    assert out.endswith("\r\n")


@pytest.mark.parametrize("value, word", [(0, "Scissors!"), (1, "Rock!"), (2, "Paper!")])
def test_rps(value, word):
    state, _ = make_state(value)
    actions.bot_rps(state, "nick", [])
    assert state.take_output() == "NOTICE nick :" + word + "\r\n"


@pytest.mark.parametrize("value, word", [(0, "Tails!"), (1, "Heads!")])
def test_flip(value, word):
    state, _ = make_state(value)
    actions.bot_flip(state, "nick", [])
    assert state.take_output() == "NOTICE nick :" + word + "\r\n"


def test_q_answers_from_list():
    state, rng = make_state(0)
    actions.bot_q(state, "nick", ["will", "it", "work?"])
    assert state.take_output() == "NOTICE nick :It is certain.\r\n"
    assert rng.calls == [20]


def test_q_random_answer_is_known():
    state = BotState("magic8bot", rng=random.Random(5))
    for _ in range(10):
        actions.bot_q(state, "nick", [])
    lines = state.take_output().split("\r\n")[:-1]
    assert all(line[len("NOTICE nick :"):] in ANSWERS for line in lines)


def test_roll_default_six():
    state, rng = make_state(0)
    actions.bot_roll(state, "nick", [])
    assert state.take_output() == "NOTICE nick :1\r\n"
    assert rng.calls == [6]


def test_roll_empty_param_uses_default():
    state, rng = make_state(0)
    actions.bot_roll(state, "nick", [""])
    assert rng.calls == [6]
    assert state.take_output() == "NOTICE nick :1\r\n"


def test_roll_d_prefix():
    state, rng = make_state(19)
    actions.bot_roll(state, "nick", ["d20"])
    assert state.take_output() == "NOTICE nick :20\r\n"
    assert rng.calls == [20]


def test_roll_plain_number_limits():
    state, rng = make_state(1023)
    actions.bot_roll(state, "nick", ["1024"])
    assert state.take_output() == "NOTICE nick :1024\r\n"
    assert rng.calls == [1024]


@pytest.mark.parametrize("spec", ["d1", "1", "1025", "abc", "d"])
def test_roll_invalid(spec):
    state, rng = make_state(0)
    actions.bot_roll(state, "nick", [spec])
    assert state.take_output() == "NOTICE nick :invalid input\r\n"
    assert rng.calls == []


def test_roll_range_invariant():
    state = BotState("magic8bot", rng=random.Random(1))
    for _ in range(50):
        actions.bot_roll(state, "nick", ["d4"])
    lines = state.take_output().split("\r\n")[:-1]
    values = {int(line.rsplit(":", 1)[1]) for line in lines}
    assert values <= {1, 2, 3, 4}


def test_format_date_fixed():
    text = actions._format_date(datetime(2024, 10, 2))
    assert text == "Current date is Wednesday, 2nd of October 2024."


def test_format_time_fixed():
    moment = datetime(2024, 10, 2, 9, 5, 7, 42)
    assert actions._format_time(moment) == "09:05:07"
    assert actions._format_time(moment, microseconds=True) == "09:05:07.000042"


def test_bot_date_shape():
    state, _ = make_state()
    actions.bot_date(state, "nick", [])
    out = state.take_output()
    pattern = (
        r"NOTICE nick :Current date is (\w+), (\d+)(st|nd|rd|th) of (\w+) (\d{4})\.\r\n"
    )
    match = re.fullmatch(pattern, out)
    assert match is not None
    assert match.group(1) in actions.WEEKDAYS
    assert match.group(4) in actions.MONTHS


def test_bot_time_shape():
    state, _ = make_state()
    actions.bot_time(state, "nick", [])
    out = state.take_output()
    prefix = "NOTICE nick :Current server time is: "
    assert out.startswith(prefix)
    assert out.endswith("\r\n")
    stamp = out[len(prefix):-2]
    parsed = datetime.strptime(stamp, "%H:%M:%S")
    assert parsed.strftime("%H:%M:%S") == stamp
    assert len(stamp) == 8


def test_bot_utime_shape():
    state, _ = make_state()
    actions.bot_utime(state, "nick", [])
    out = state.take_output()
    prefix = "NOTICE nick :Current server time is: "
    assert out.startswith(prefix)
    assert out.endswith("\r\n")
    stamp = out[len(prefix):-2]
    parsed = datetime.strptime(stamp, "%H:%M:%S.%f")
    assert parsed.strftime("%H:%M:%S.%f") == stamp
    assert len(stamp) == 15


def test_action_marks_ready():
    state, _ = make_state()
    assert state.ready is False
    actions.bot_flip(state, "nick", [])
    assert state.ready is True