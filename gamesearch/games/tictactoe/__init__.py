from __future__ import annotations

from .game import TicTacToe, counter
from .state import EMPTY, O, X, Move, TicTacToeState
from .utils import all_lines, k_in_a_row, render_board

__all__ = [
    "EMPTY",
    "Move",
    "O",
    "TicTacToe",
    "TicTacToeState",
    "X",
    "all_lines",
    "counter",
    "k_in_a_row",
    "render_board",
]
