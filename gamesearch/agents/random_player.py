"""Random player implementation."""

from __future__ import annotations

from typing import Optional, TypeVar

import numpy as np

from gamesearch.errors import NoLegalMovesError
from gamesearch.games.turn_based_game import Game
from .base_player import BasePlayer

S = TypeVar("S")
A = TypeVar("A")


class RandomPlayer(BasePlayer):
    """Player that picks uniformly among the legal moves."""

    name = "random"

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        """
        Args:
            seed: Random seed for reproducibility
            rng: Generator to draw from; overrides ``seed``
        """
        self.rng = rng or np.random.default_rng(seed)

    def select_move(self, game: Game[S, A], state: S) -> A:
        moves = list(game.legal_moves(state))
        if not moves:
            raise NoLegalMovesError(state)
        return moves[int(self.rng.integers(len(moves)))]
