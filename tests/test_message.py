import pytest

from magicbot.message import Message, MessageError


def test_full_prefix_and_trailing():
    msg = Message(":user123!net@127.0.0.1 PRIVMSG #aaa :hello there")
    assert msg.prefix == "user123!net@127.0.0.1"
    assert msg.nick == "user123"
    assert msg.user == "net"
    assert msg.host == "127.0.0.1"
    assert msg.command == "PRIVMSG"
    assert msg.params == ["#aaa", "hello there"]
    assert msg.raw == ":user123!net@127.0.0.1 PRIVMSG #aaa :hello there"


def test_prefix_without_user():
    msg = Message(":server 315 bot #blackjack :End of WHO list")
    assert msg.nick == "server"
    assert msg.user == ""
    assert msg.host == ""
    assert msg.command == "315"
    assert msg.params == ["bot", "#blackjack", "End of WHO list"]


def test_no_prefix():
    msg = Message("PING token")
    assert msg.prefix == ""
    assert msg.nick == ""
    assert msg.command == "PING"
    assert msg.params == ["token"]


def test_repeated_spaces_are_skipped():
    msg = Message("WHO    #blackjack   x")
    assert msg.command == "WHO"
    assert msg.params == ["#blackjack", "x"]


def test_empty_trailing_param():
    msg = Message("PRIVMSG bot :")
    assert msg.params == ["bot", ""]


def test_trailing_keeps_colons_and_spaces():
    msg = Message("PRIVMSG bot :!roll  d20 :x")
    assert msg.params == ["bot", "!roll  d20 :x"]


def test_no_params():
    msg = Message("QUIT")
    assert msg.params == []


@pytest.mark.parametrize("raw", ["", "A", ":nick", ":nick ", ":nick!u@h X"])
def test_missing_command_raises(raw):
    with pytest.raises(MessageError):
        Message(raw)