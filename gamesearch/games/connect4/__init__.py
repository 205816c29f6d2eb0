from __future__ import annotations

from .eval import DEFAULT_WEIGHTS, connect4_heuristic, num_threats, num_winning_lines
from .game import CONNECT4_COLS, CONNECT4_ROWS, ConnectFour

__all__ = [
    "CONNECT4_COLS",
    "CONNECT4_ROWS",
    "ConnectFour",
    "DEFAULT_WEIGHTS",
    "connect4_heuristic",
    "num_threats",
    "num_winning_lines",
]
