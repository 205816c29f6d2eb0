"""Connect Four position evaluation for cutoff search."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from gamesearch.games.tictactoe import TicTacToeState, all_lines, k_in_a_row
from gamesearch.games.turn_based_game import Player

# Weights for (own lines, opponent lines, own threats, opponent threats).
DEFAULT_WEIGHTS = (0.1, -0.1, 1.0, -1.0)


def num_winning_lines(board: np.ndarray, token: int, k: int) -> int:
    """Windows of length ``k`` holding ``token`` and no opposing counter."""
    count = 0
    for line in all_lines(board, k):
        if np.any(line == token) and not np.any(line == -token):
            count += 1
    return count


def num_threats(board: np.ndarray, token: int, k: int) -> int:
    """
    Empty cells that would complete ``k`` in a row for ``token`` but cannot
    be played yet because the cell below is still empty.
    """
    h, v = board.shape
    count = 0
    for x in range(h):
        for y in range(1, v):
            if board[x, y - 1] == 0 and board[x, y] == 0 and k_in_a_row(board, x, y, token, k):
                count += 1
    return count


def connect4_heuristic(
    state: TicTacToeState,
    player: Player,
    k: int = 4,
    weights: Sequence[float] = DEFAULT_WEIGHTS,
) -> float:
    """
    Weighted line/threat balance for ``player``, squashed into (-1, 1).

    Decided states are not handled here; callers return the utility for them.
    """
    token = 1 if player is Player.MAX else -1
    features = np.array(
        [
            num_winning_lines(state.board, token, k),
            num_winning_lines(state.board, -token, k),
            num_threats(state.board, token, k),
            num_threats(state.board, -token, k),
        ],
        dtype=np.float64,
    )
    return float(np.tanh(np.dot(np.asarray(weights, dtype=np.float64), features)))
