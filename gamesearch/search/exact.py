"""Exhaustive search to terminal states: minimax and full-width alpha-beta."""

from __future__ import annotations

from typing import TypeVar

from gamesearch.games.turn_based_game import Game, Utility
from .bounded import alpha_beta_search
from .utils import argmax_first, root_successors

S = TypeVar("S")
A = TypeVar("A")


def minimax_decision(game: Game[S, A], state: S) -> A:
    """
    Best move for the player to move, searching all the way to the leaves.

    Values are taken from the root mover's point of view throughout; levels
    alternate between maximising and minimising ply by ply. Only usable on
    games whose full tree is small.

    Raises:
        NoLegalMovesError: if ``state`` has no legal moves.
    """
    succs = root_successors(game, state)
    player = game.to_move(state)

    def leaf_value(s: S) -> Utility:
        return game.utility(s, player)

    def max_value(s: S) -> Utility:
        if game.terminal_test(s):
            return leaf_value(s)
        children = game.successors(s)
        if not children:
            return leaf_value(s)
        return max(min_value(child) for _, child in children)

    def min_value(s: S) -> Utility:
        if game.terminal_test(s):
            return leaf_value(s)
        children = game.successors(s)
        if not children:
            return leaf_value(s)
        return min(max_value(child) for _, child in children)

    move, _ = argmax_first(succs, key=lambda pair: min_value(pair[1]))
    return move


def alpha_beta_full_search(game: Game[S, A], state: S) -> A:
    """
    Same decision as :func:`minimax_decision`, with alpha-beta pruning.

    Raises:
        NoLegalMovesError: if ``state`` has no legal moves.
    """
    return alpha_beta_search(
        game,
        state,
        cutoff_test=lambda s, depth: game.terminal_test(s),
        eval_fn=game.utility,
    )


__all__ = ["alpha_beta_full_search", "minimax_decision"]
