"""Bot actions that run the shared blackjack table."""

from __future__ import annotations

from collections.abc import Sequence

from magicbot.state import BotState

NO_GAME_REPLY = "no game in progress at the moment, type '!blackjack' to start a new game"
ALREADY_STANDING_REPLY = "you are already standing."
GAME_RUNNING_REPLY = "game in progress, cannot start new one"


def _notify_others(state: BotState, nick: str, text: str) -> None:
    """Tell every other player and the blackjack channel about ``nick``'s move."""
    for player in state.bj_players:
        if player != nick:
            state.notice(player, text)
    state.notice(state.channel_bj, text)


def _request_players(state: BotState) -> None:
    state.bj_players.clear()
    state.send(f"WHO {state.channel_bj}")


def bot_blackjack(state: BotState, target: str, params: Sequence[str]) -> None:
    """Ask the server who is in the blackjack channel, unless a game is running.

    The game itself starts once the end of the WHO list arrives.
    """
    if state.blackjack.in_progress():
        state.notice(target, GAME_RUNNING_REPLY)
        return
    _request_players(state)


def bot_initbj(state: BotState, target: str, params: Sequence[str]) -> None:
    """Ask the server who is in the blackjack channel, whatever the game state."""
    _request_players(state)


def bot_hit(state: BotState, target: str, params: Sequence[str]) -> None:
    """Deal one more card to ``target``.

    Raises KeyError when ``target`` is not seated at the table.
    """
    game = state.blackjack
    if not game.in_progress():
        state.notice(target, NO_GAME_REPLY)
        return
    if game.is_standing(target):
        state.notice(target, ALREADY_STANDING_REPLY)
        return
    game.draw_card(target)
    state.notice(target, "you draw a card")
    state.notice(target, game.show_hand(target))
    _notify_others(state, target, f"{target} draws a card")


def bot_stand(state: BotState, target: str, params: Sequence[str]) -> None:
    """Make ``target`` stand; the game ends when nobody is left playing.

    Raises KeyError when ``target`` is not seated at the table.
    """
    game = state.blackjack
    if not game.in_progress():
        state.notice(target, NO_GAME_REPLY)
        return
    if game.is_standing(target):
        state.notice(target, ALREADY_STANDING_REPLY)
        return
    remaining = game.stand(target)
    if not remaining:
        end_blackjack(state)
        return
    state.notice(target, f"you are standing, waiting for {remaining} other players")
    _notify_others(state, target, f"{target} stands.")


def end_blackjack(state: BotState) -> None:
    """Finish the game: show every hand to every player and announce the winner."""
    announcement = state.blackjack.announce_winner()
    for player in state.bj_players:
        for other in state.bj_players:
            state.notice(player, f"{other}: {state.blackjack.show_hand_sorted(other)}")
        state.notice(player, announcement)
    state.notice(state.channel_bj, announcement)