"""Base player interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

from gamesearch.games.turn_based_game import Game

S = TypeVar("S")
A = TypeVar("A")

# Anything a game loop can ask for a move.
GamePlayer = Callable[[Game[Any, Any], Any], Any]


class BasePlayer(ABC):
    """
    A strategy for choosing moves.

    Players are plain ``(game, state) -> move`` callables so a game loop can
    mix humans, random movers and search strategies freely.
    """

    name: str = "player"

    @abstractmethod
    def select_move(self, game: Game[S, A], state: S) -> A:
        """Return a legal move for ``state``."""

    def __call__(self, game: Game[S, A], state: S) -> A:
        return self.select_move(game, state)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
