from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

# Cell values. MAX always plays O and MIN plays X.
EMPTY = 0
O = 1
X = -1

Move = Tuple[int, int]


@dataclass(eq=False)
class TicTacToeState:
    """
    Board indexed ``board[x, y]`` with ``x`` the column and ``y`` the row
    counted from the bottom. ``utility`` is MAX's score and is only non-zero
    once somebody has completed a line.
    """

    board: np.ndarray
    to_move_token: int
    utility: float = 0.0
    last_move: Optional[Move] = field(default=None)

    def key(self) -> Tuple[bytes, int]:
        return self.board.tobytes(), self.to_move_token

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TicTacToeState):
            return NotImplemented
        return (
            self.board.shape == other.board.shape
            and self.key() == other.key()
            and self.utility == other.utility
        )

    def __hash__(self) -> int:
        return hash((self.board.shape, self.key()))
