"""An IRC bot with a magic 8-ball, dice, cards, a clock and multi-player blackjack."""

__version__ = "0.1.0"