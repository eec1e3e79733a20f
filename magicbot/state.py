"""Shared state of the bot: outgoing buffer, game table and canned replies."""

from __future__ import annotations

import logging
import random

from magicbot.blackjack import CARD_FACES, BlackJack

log = logging.getLogger(__name__)

DEFAULT_BLACKJACK_CHANNEL = "#blackjack"

ANSWERS = (
    "It is certain.", "Reply hazy, try again.", "Don't count on it.",
    "It is decidedly so.", "Ask again later.", "My reply is no.",
    "Without a doubt.", "Better not tell you now.", "My sources say no.",
    "Yes definitely.", "Cannot predict now.", "Outlook not so good.",
    "You may rely on it.", "Concentrate and ask again.", "Very doubtful.",
    "As I see it, yes.", "Most likely.", "Outlook good.", "Yes.",
    "Signs point to yes.",
)


class BotState:
    """Everything the bot's command and action handlers work on."""

    def __init__(
        self,
        botname: str,
        rng: random.Random | None = None,
        channel_bj: str = DEFAULT_BLACKJACK_CHANNEL,
    ) -> None:
        self.botname = botname
        self.rng = rng if rng is not None else random.Random()
        self.channel_bj = channel_bj
        self.blackjack = BlackJack(self.rng)
        self.bj_players: list[str] = []
        self.cards = CARD_FACES
        self.answers = ANSWERS
        self.ready = False
        self._outgoing: list[str] = []

    def send(self, line: str) -> None:
        """Queue one protocol line and mark output as ready."""
        self._outgoing.append(line + "\r\n")
        self.ready = True

    def notice(self, target: str, text: str) -> None:
        """Queue a NOTICE to ``target``."""
        self.send(f"NOTICE {target} :{text}")

    def take_output(self) -> str:
        """Return and clear everything queued so far."""
        data = "".join(self._outgoing)
        self._outgoing.clear()
        self.ready = False
        log.debug("Message sent: %r", data)
        return data