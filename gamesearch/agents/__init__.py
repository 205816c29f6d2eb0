"""Player modules."""

from .base_player import BasePlayer, GamePlayer
from .human_player import HumanPlayer
from .random_player import RandomPlayer
from .search_players import (
    AlphaBetaFullPlayer,
    AlphaBetaPlayer,
    IterativeAlphaBetaPlayer,
    MinimaxPlayer,
)
from ..registry import list_players, register_player

if "human" not in list_players():
    register_player("human", HumanPlayer)
if "random" not in list_players():
    register_player("random", RandomPlayer)
if "minimax" not in list_players():
    register_player("minimax", MinimaxPlayer)
if "alphabeta_full" not in list_players():
    register_player("alphabeta_full", AlphaBetaFullPlayer)
if "alphabeta" not in list_players():
    register_player("alphabeta", AlphaBetaPlayer)
if "iterative" not in list_players():
    register_player("iterative", IterativeAlphaBetaPlayer)

__all__ = [
    "AlphaBetaFullPlayer",
    "AlphaBetaPlayer",
    "BasePlayer",
    "GamePlayer",
    "HumanPlayer",
    "IterativeAlphaBetaPlayer",
    "MinimaxPlayer",
    "RandomPlayer",
]
