"""Players that choose their moves by game tree search."""

from __future__ import annotations

import logging
from typing import Optional, TypeVar

from gamesearch.games.turn_based_game import Game
from gamesearch.search import (
    alpha_beta_depth_search,
    alpha_beta_full_search,
    minimax_decision,
    time_limited_search,
)
from .base_player import BasePlayer
from .random_player import RandomPlayer

logger = logging.getLogger(__name__)

S = TypeVar("S")
A = TypeVar("A")


class MinimaxPlayer(BasePlayer):
    """Exhaustive minimax. Only for games with a small full tree."""

    name = "minimax"

    def select_move(self, game: Game[S, A], state: S) -> A:
        return minimax_decision(game, state)


class AlphaBetaFullPlayer(BasePlayer):
    """Full-width alpha-beta down to the terminal states."""

    name = "alphabeta_full"

    def select_move(self, game: Game[S, A], state: S) -> A:
        return alpha_beta_full_search(game, state)


class AlphaBetaPlayer(BasePlayer):
    """Alpha-beta cut off at a fixed depth, scored by ``game.heuristic``."""

    name = "alphabeta"

    def __init__(self, depth: int = 4) -> None:
        if depth < 0:
            raise ValueError(f"Search depth must be >= 0, got {depth}")
        self.depth = depth

    def select_move(self, game: Game[S, A], state: S) -> A:
        return alpha_beta_depth_search(game, state, self.depth)

    def __repr__(self) -> str:
        return f"AlphaBetaPlayer(depth={self.depth})"


class IterativeAlphaBetaPlayer(BasePlayer):
    """
    Iterative deepening alpha-beta, looking as deep as it can within
    ``time_limit`` seconds per move.

    If not even the shallowest search finishes in time a
    ``BudgetTooSmallError`` is raised, unless ``fallback_to_random`` is set,
    in which case a random legal move is played instead.
    """

    name = "iterative"

    def __init__(
        self,
        time_limit: float = 1.0,
        max_depth: Optional[int] = None,
        fallback_to_random: bool = False,
        seed: Optional[int] = None,
    ) -> None:
        if time_limit <= 0:
            raise ValueError(f"Time limit must be positive, got {time_limit}")
        self.time_limit = time_limit
        self.max_depth = max_depth
        self.fallback_to_random = fallback_to_random
        self._random = RandomPlayer(seed=seed)
        self.last_depth: Optional[int] = None

    def select_move(self, game: Game[S, A], state: S) -> A:
        fallback = self._random(game, state) if self.fallback_to_random else None
        result = time_limited_search(
            game,
            state,
            self.time_limit,
            fallback=fallback,
            max_depth=self.max_depth,
        )
        self.last_depth = result.depth
        logger.info(
            "Iterative alpha-beta chose %r at depth %s in %.2fs",
            result.move,
            result.depth,
            result.elapsed,
        )
        return result.move

    def __repr__(self) -> str:
        return f"IterativeAlphaBetaPlayer(time_limit={self.time_limit})"
