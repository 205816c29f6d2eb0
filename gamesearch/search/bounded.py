"""Alpha-beta search with a pluggable cutoff test and evaluation function."""

from __future__ import annotations

import math
from typing import Callable, TypeVar

from gamesearch.games.turn_based_game import Game, Player, Utility
from .utils import root_successors

S = TypeVar("S")
A = TypeVar("A")

CutoffTest = Callable[[S, int], bool]
EvalFn = Callable[[S, Player], Utility]


def alpha_beta_search(
    game: Game[S, A],
    state: S,
    cutoff_test: CutoffTest,
    eval_fn: EvalFn,
) -> A:
    """
    Choose a move with alpha-beta pruning, stopping wherever ``cutoff_test``
    says so and scoring those states with ``eval_fn``.

    Args:
        game: rules of the game.
        state: root state; must have at least one legal move.
        cutoff_test: ``(state, depth) -> bool``. The root's successors are
            at depth 0 and every further ply adds one.
        eval_fn: ``(state, player) -> utility``, always called with the root
            mover as ``player``.

    Returns:
        The first move, in successor order, with the highest backed-up value.

    Raises:
        NoLegalMovesError: if ``state`` has no legal moves.
    """
    succs = root_successors(game, state)
    player = game.to_move(state)

    def max_value(s: S, alpha: float, beta: float, depth: int) -> Utility:
        if cutoff_test(s, depth):
            return eval_fn(s, player)
        children = game.successors(s)
        if not children:
            return eval_fn(s, player)
        value = -math.inf
        for _, child in children:
            value = max(value, min_value(child, alpha, beta, depth + 1))
            if value >= beta:
                return value
            alpha = max(alpha, value)
        return value

    def min_value(s: S, alpha: float, beta: float, depth: int) -> Utility:
        if cutoff_test(s, depth):
            return eval_fn(s, player)
        children = game.successors(s)
        if not children:
            return eval_fn(s, player)
        value = math.inf
        for _, child in children:
            value = min(value, max_value(child, alpha, beta, depth + 1))
            if value <= alpha:
                return value
            beta = min(beta, value)
        return value

    # A child that fails low returns at most alpha, which never beats the
    # current best under the strict comparison, so leftmost ties survive.
    best_move = succs[0][0]
    best_value = -math.inf
    alpha = -math.inf
    for index, (move, child) in enumerate(succs):
        value = min_value(child, alpha, math.inf, 0)
        if index == 0 or value > best_value:
            best_move, best_value = move, value
        alpha = max(alpha, best_value)
    return best_move


def depth_cutoff(game: Game[S, A], limit: int) -> CutoffTest:
    """Cutoff test that stops at terminal states or below ``limit``."""

    def cutoff_test(state: S, depth: int) -> bool:
        return game.terminal_test(state) or depth > limit

    return cutoff_test


def alpha_beta_depth_search(game: Game[S, A], state: S, limit: int) -> A:
    """
    Depth-limited alpha-beta using the game's heuristic at the frontier.

    Raises:
        NoLegalMovesError: if ``state`` has no legal moves.
    """
    return alpha_beta_search(game, state, depth_cutoff(game, limit), game.heuristic)
