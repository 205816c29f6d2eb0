"""k-in-a-row tic-tac-toe on an h x v board."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from gamesearch.errors import IllegalMoveError
from gamesearch.games.turn_based_game import Game, Player, Utility
from .state import EMPTY, O, X, Move, TicTacToeState
from .utils import k_in_a_row, render_board


class TicTacToe(Game[TicTacToeState, Move]):
    """
    Players take turns placing counters; the first to get ``k`` in a row wins.

    MAX plays ``O`` and moves first. The utility of a state is computed when
    the move that produces it is made, so no full-board win scan is needed.
    The game is over once somebody has won or no empty cell is left.
    """

    def __init__(self, h: int = 3, v: int = 3, k: int = 3) -> None:
        if k > max(h, v):
            raise ValueError(f"k={k} cannot fit on a {h}x{v} board")
        self.h = h
        self.v = v
        self.k = k

    def __repr__(self) -> str:
        return f"{type(self).__name__}(h={self.h}, v={self.v}, k={self.k})"

    def initial_state(self) -> TicTacToeState:
        board = np.zeros((self.h, self.v), dtype=np.int8)
        return TicTacToeState(board=board, to_move_token=O)

    def to_move(self, state: TicTacToeState) -> Player:
        return Player.MAX if state.to_move_token == O else Player.MIN

    def legal_moves(self, state: TicTacToeState) -> Sequence[Move]:
        if state.utility != 0:
            return []
        return self._empty_cells(state)

    def make_move(self, state: TicTacToeState, move: Move) -> TicTacToeState:
        if move not in self.legal_moves(state):
            raise IllegalMoveError(move, state)
        x, y = move
        token = state.to_move_token
        board = state.board.copy()
        board[x, y] = token
        utility = 0.0
        if k_in_a_row(board, x, y, token, self.k):
            utility = 1.0 if token == O else -1.0
        return TicTacToeState(
            board=board,
            to_move_token=-token,
            utility=utility,
            last_move=(x, y),
        )

    def utility(self, state: TicTacToeState, player: Player) -> Utility:
        return state.utility if player is Player.MAX else -state.utility

    def terminal_test(self, state: TicTacToeState) -> bool:
        return state.utility != 0 or not self._empty_cells(state)

    def render(self, state: TicTacToeState) -> str:
        return render_board(state.board)

    def _empty_cells(self, state: TicTacToeState) -> List[Move]:
        return [
            (x, y)
            for x in range(self.h)
            for y in range(self.v)
            if state.board[x, y] == EMPTY
        ]


def counter(player: Player) -> int:
    """Token placed by ``player``."""
    return O if player is Player.MAX else X
