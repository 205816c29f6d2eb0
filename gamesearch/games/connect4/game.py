"""Connect Four: 7x6 four-in-a-row with gravity."""

from __future__ import annotations

from typing import Sequence, Tuple

from gamesearch.games.tictactoe import Move, TicTacToe, TicTacToeState
from gamesearch.games.turn_based_game import Player, Utility
from .eval import DEFAULT_WEIGHTS, connect4_heuristic

CONNECT4_COLS = 7
CONNECT4_ROWS = 6


class ConnectFour(TicTacToe):
    """
    Tic-tac-toe where a counter may only go in the lowest empty cell of a
    column. Moves stay ``(x, y)`` pairs so the board code is shared.
    """

    def __init__(
        self,
        cols: int = CONNECT4_COLS,
        rows: int = CONNECT4_ROWS,
        k: int = 4,
        weights: Tuple[float, float, float, float] = DEFAULT_WEIGHTS,
    ) -> None:
        super().__init__(h=cols, v=rows, k=k)
        self.weights = tuple(weights)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cols={self.h}, rows={self.v}, k={self.k})"

    def legal_moves(self, state: TicTacToeState) -> Sequence[Move]:
        board = state.board
        return [
            (x, y)
            for (x, y) in super().legal_moves(state)
            if y == 0 or board[x, y - 1] != 0
        ]

    def heuristic(self, state: TicTacToeState, player: Player) -> Utility:
        if self.terminal_test(state):
            return self.utility(state, player)
        return connect4_heuristic(state, player, k=self.k, weights=self.weights)
