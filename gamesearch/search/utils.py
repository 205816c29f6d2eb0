"""Helpers shared by the search algorithms."""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple, TypeVar

from gamesearch.errors import NoLegalMovesError
from gamesearch.games.turn_based_game import Game

S = TypeVar("S")
A = TypeVar("A")


def root_successors(game: Game[S, A], state: S) -> List[Tuple[A, S]]:
    """
    Successors of the search root.

    Raises:
        NoLegalMovesError: if ``state`` has no legal moves, whether or not
            the game flags it as terminal.
    """
    succs = list(game.successors(state))
    if not succs:
        raise NoLegalMovesError(state)
    return succs


def argmax_first(items: Sequence[A], key: Callable[[A], float]) -> A:
    """Item with the largest key; the leftmost one wins ties."""
    best = items[0]
    best_value = key(best)
    for item in items[1:]:
        value = key(item)
        if value > best_value:
            best, best_value = item, value
    return best
