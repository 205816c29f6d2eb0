"""Exception types raised by games, search and players."""

from __future__ import annotations

from typing import Any, Optional


class PreconditionViolation(ValueError):
    """A caller broke the game contract. Programmer error, never retried."""


class IllegalMoveError(PreconditionViolation):
    """``make_move`` was called with a move that is not legal in the state."""

    def __init__(self, move: Any, state: Any = None) -> None:
        super().__init__(f"Illegal move: {move!r}")
        self.move = move
        self.state = state


class NoLegalMovesError(PreconditionViolation):
    """A search was asked to choose a move in a state that has none."""

    def __init__(self, state: Any = None) -> None:
        super().__init__("No legal moves available for search")
        self.state = state


class BudgetTooSmallError(RuntimeError):
    """The time budget expired before even the shallowest search finished."""

    def __init__(self, seconds: Optional[float]) -> None:
        super().__init__(
            f"Time budget of {seconds}s expired before depth 0 completed; "
            "increase the time limit"
        )
        self.seconds = seconds
