"""Handlers for the IRC messages the bot reacts to."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from magicbot.actions import (
    bot_card,
    bot_date,
    bot_flip,
    bot_q,
    bot_roll,
    bot_rps,
    bot_time,
    bot_utime,
)
from magicbot.blackjack_actions import bot_blackjack, bot_hit, bot_initbj, bot_stand
from magicbot.message import Message
from magicbot.state import BotState

log = logging.getLogger(__name__)

Action = Callable[[BotState, str, Sequence[str]], None]

ACTIONS: dict[str, Action] = {
    "!blackjack": bot_blackjack,
    "!card": bot_card,
    "!date": bot_date,
    "!flip": bot_flip,
    "!hit": bot_hit,
    "!initbj": bot_initbj,
    "!q": bot_q,
    "!rps": bot_rps,
    "!roll": bot_roll,
    "!stand": bot_stand,
    "!time": bot_time,
    "!utime": bot_utime,
}


def on_end_of_who(state: BotState, message: Message) -> None:
    """Start a blackjack game with the players gathered from the WHO list."""
    if len(state.bj_players) < 2:
        state.notice(state.channel_bj, "Not enough players")
        return
    game = state.blackjack
    game.new_game()
    for nick in state.bj_players:
        game.add_player(nick)
        state.send(f"PRIVMSG {nick} :new game of BlackJack started")
        state.notice(nick, game.show_hand(nick))
    state.notice(state.channel_bj, "the game of BlackJack started")


def on_who_reply(state: BotState, message: Message) -> None:
    """Collect a player from one WHO reply line about the blackjack channel."""
    params = message.params
    if len(params) < 4:
        return
    nick = params[3]
    if nick != state.botname and params[1] == state.channel_bj:
        log.info("Adding %s to bj players.", nick)
        state.bj_players.append(nick)


def on_privmsg(state: BotState, message: Message) -> None:
    """Run the bot action named by the first word of a private message."""
    params = message.params
    if len(params) < 2:
        return
    target = params[0]
    if target in (state.botname, state.channel_bj):
        if not message.nick:
            return
        target = message.nick
    words = [word for word in params[1].split(" ") if word]
    if not words:
        log.info("Unknown action: %r", "")
        return
    action, *arguments = words
    handler = ACTIONS.get(action)
    if handler is None:
        log.info("Unknown action: %r", action)
        return
    log.debug("Executing action: %s", action)
    handler(state, target, arguments)


COMMANDS: dict[str, Callable[[BotState, Message], None]] = {
    "315": on_end_of_who,
    "352": on_who_reply,
    "PRIVMSG": on_privmsg,
}


def dispatch(state: BotState, message: Message) -> bool:
    """Run the handler for ``message``; return whether one was found."""
    handler = COMMANDS.get(message.command)
    if handler is None:
        log.warning("Unknown command: %s", message.command)
        return False
    log.debug("Executing command: %s", message.command)
    handler(state, message)
    return True