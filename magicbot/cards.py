"""A deck of playing cards and a player holding a hand of them."""

from __future__ import annotations

import logging
import random

log = logging.getLogger(__name__)

FULL_DECK = 52


class EmptyDeckError(LookupError):
    """Raised when drawing from a deck with no cards left."""


class CardDeck:
    """A deck of cards numbered ``0 .. size-1``; card ``n`` has rank ``n % 13``."""

    def __init__(self, size: int = FULL_DECK, rng: random.Random | None = None) -> None:
        if not 0 <= size <= 255:
            raise ValueError(f"deck size must be between 0 and 255, got {size}")
        self.size = size
        self._rng = rng if rng is not None else random.Random()
        self._cards: list[int] = []
        self.refill()

    def draw(self) -> int:
        """Remove and return a random card."""
        if not self._cards:
            raise EmptyDeckError("the deck is empty")
        card = self._cards.pop(self._rng.randrange(len(self._cards)))
        log.debug("Deck size: %d", len(self._cards))
        return card

    def refill(self) -> None:
        """Put every card back into the deck."""
        self._cards = list(range(self.size))

    def __len__(self) -> int:
        return len(self._cards)


def score(hand: str) -> int:
    """Score a blackjack hand written as rank letters.

    Digits 2-9 count their value, 'A' is an ace and other capitals count ten.
    Two aces alone score 22; a bust hand is returned negated.
    """
    if hand == "AA":
        return 22
    total = 0
    aces = 0
    for ch in hand:
        if "1" < ch <= "9":
            total += int(ch)
        elif ch == "A":
            aces += 1
        elif "A" < ch <= "Z":
            total += 10
    while aces:
        total += 1 if total > 11 - aces else 11
        aces -= 1
    return -total if total > 21 else total


def _rank_letter(card: int) -> str:
    rank = card % 13
    if rank == 0:
        return "A"
    if rank < 9:
        return str(rank + 1)
    return "T"


class CardPlayer:
    """A named player with a hand of cards who may stand."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.cards: list[int] = []
        self.standing = False

    def draw_card(self, deck: CardDeck) -> None:
        """Take a card from ``deck``; nothing happens if it is empty."""
        try:
            self.cards.append(deck.draw())
        except EmptyDeckError:
            pass

    def hand_score(self) -> int:
        """Score of the current hand (negative when bust)."""
        return score("".join(_rank_letter(card) for card in self.cards))

    def empty_hand(self) -> None:
        """Drop all cards and stop standing."""
        self.cards.clear()
        self.standing = False

    def stand(self) -> None:
        """Mark the player as standing."""
        self.standing = True