"""A multi-player game of blackjack played against a shared deck."""

from __future__ import annotations

import enum
import random
import time

from magicbot.cards import CardDeck, CardPlayer

GAME_LENGTH = 60

CARD_FACES = (
    "🂡", "🂢", "🂣", "🂤", "🂥", "🂦", "🂧", "🂨", "🂩", "🂪", "🂫", "🂭", "🂮",
    "🂱", "🂲", "🂳", "🂴", "🂵", "🂶", "🂷", "🂸", "🂹", "🂺", "🂻", "🂽", "🂾",
    "🃁", "🃂", "🃃", "🃄", "🃅", "🃆", "🃇", "🃈", "🃉", "🃊", "🃋", "🃍", "🃎",
    "🃑", "🃒", "🃓", "🃔", "🃕", "🃖", "🃗", "🃘", "🃙", "🃚", "🃛", "🃝", "🃞",
)


class GameStatus(enum.IntFlag):
    """State of a blackjack game."""

    NO_GAME = 0
    STARTING = 1
    IN_PROGRESS = 2
    ENDED = 4


def render_hand(cards) -> str:
    """Render cards as playing-card glyphs, each followed by a space."""
    return "".join(
        CARD_FACES[card] + " " for card in cards if 0 <= card < len(CARD_FACES)
    )


class BlackJack:
    """One game table: a deck, the players and a deadline."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.deck = CardDeck(rng=rng)
        self.players: dict[str, CardPlayer] = {}
        self.active_players = 0
        self.status = GameStatus.NO_GAME
        self.end_time = 0.0

    def add_player(self, nick: str) -> None:
        """Seat ``nick`` and deal two cards."""
        player = CardPlayer(nick)
        player.draw_card(self.deck)
        player.draw_card(self.deck)
        self.players[nick] = player
        self.active_players += 1

    def draw_card(self, nick: str) -> None:
        """Deal one more card to ``nick``."""
        self.players[nick].draw_card(self.deck)

    def stand(self, nick: str) -> int:
        """Make ``nick`` stand; return how many players are still playing."""
        self.players[nick].stand()
        self.active_players -= 1
        return self.active_players

    def is_standing(self, nick: str) -> bool:
        """Tell whether ``nick`` is standing."""
        return self.players[nick].standing

    def _describe(self, player: CardPlayer, cards) -> str:
        return render_hand(cards) + "  " + str(player.hand_score())

    def show_hand(self, nick: str) -> str:
        """The hand of ``nick`` in the order drawn, with its score."""
        player = self.players[nick]
        return self._describe(player, player.cards)

    def show_hand_sorted(self, nick: str) -> str:
        """The hand of ``nick`` ordered by rank, with its score."""
        player = self.players[nick]
        return self._describe(player, sorted(player.cards, key=lambda card: card % 13))

    def announce_winner(self) -> str:
        """Name the players with the best score and end the game."""
        scores = {nick: player.hand_score() for nick, player in self.players.items()}
        best = max(scores.values(), default=None)
        winners = "".join(
            nick + " " for nick in sorted(scores) if scores[nick] == best
        )
        self.status = GameStatus.NO_GAME
        return winners + "won the game of blackjack!"

    def new_game(self) -> None:
        """Reset the table and start a game that ends after ``GAME_LENGTH`` seconds."""
        self.deck.refill()
        self.players.clear()
        self.active_players = 0
        self.end_time = time.time() + GAME_LENGTH
        self.status = GameStatus.IN_PROGRESS

    def in_progress(self) -> bool:
        """Tell whether a game is being played."""
        return bool(self.status & GameStatus.IN_PROGRESS)