"""Generic two-player zero-sum game search: minimax, alpha-beta, iterative deepening."""

from . import agents, games  # noqa: F401 - populate the registries
from .errors import BudgetTooSmallError, IllegalMoveError, NoLegalMovesError, PreconditionViolation
from .games import Game, Player, Utility, opponent
from .search import (
    alpha_beta_depth_search,
    alpha_beta_full_search,
    alpha_beta_search,
    iterative_alpha_beta,
    minimax_decision,
    time_limited_alpha_beta,
    time_limited_search,
)

__version__ = "0.1.0"

__all__ = [
    "BudgetTooSmallError",
    "Game",
    "IllegalMoveError",
    "NoLegalMovesError",
    "Player",
    "PreconditionViolation",
    "Utility",
    "alpha_beta_depth_search",
    "alpha_beta_full_search",
    "alpha_beta_search",
    "iterative_alpha_beta",
    "minimax_decision",
    "opponent",
    "time_limited_alpha_beta",
    "time_limited_search",
]
