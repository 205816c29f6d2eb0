from __future__ import annotations

import ast
import enum
from abc import ABC, abstractmethod
from typing import Generic, List, Sequence, Tuple, TypeVar

S = TypeVar("S")  # state type
A = TypeVar("A")  # move type

Utility = float


class Player(enum.Enum):
    MAX = "Max"
    MIN = "Min"

    @property
    def opponent(self) -> "Player":
        return Player.MIN if self is Player.MAX else Player.MAX

    def __str__(self) -> str:
        return self.value


def opponent(player: Player) -> Player:
    """Return the other player."""
    return player.opponent


class Game(ABC, Generic[S, A]):
    """
    Rules of a deterministic two-player zero-sum game with perfect information.

    A game is a stateless description: it owns no mutable data and every
    method is pure. ``make_move`` must return a new state and never mutate
    the one it was given.

    Implement ``initial_state``, ``to_move``, ``legal_moves``, ``make_move``,
    ``utility`` and ``terminal_test``. ``heuristic`` and ``successors`` have
    defaults that may be overridden for speed as long as the observable
    results do not change.
    """

    @abstractmethod
    def initial_state(self) -> S:
        """The state the game starts from."""

    @abstractmethod
    def to_move(self, state: S) -> Player:
        """Player whose turn it is. Not meaningful for terminal states."""

    @abstractmethod
    def legal_moves(self, state: S) -> Sequence[A]:
        """All moves allowed in ``state``; may be empty."""

    @abstractmethod
    def make_move(self, state: S, move: A) -> S:
        """
        Return the state reached by playing ``move``.

        Raises:
            IllegalMoveError: if ``move`` is not legal in ``state``.
        """

    @abstractmethod
    def utility(self, state: S, player: Player) -> Utility:
        """Value of a terminal ``state`` from ``player``'s point of view."""

    @abstractmethod
    def terminal_test(self, state: S) -> bool:
        """True if the game is over in ``state``."""

    def heuristic(self, state: S, player: Player) -> Utility:
        """
        Estimate of how good ``state`` is for ``player``.

        Must equal ``utility`` on terminal states.
        """
        if self.terminal_test(state):
            return self.utility(state, player)
        return 0.0

    def successors(self, state: S) -> List[Tuple[A, S]]:
        """Legal ``(move, next_state)`` pairs in ``legal_moves`` order."""
        return [(move, self.make_move(state, move)) for move in self.legal_moves(state)]

    def parse_move(self, text: str) -> A:
        """
        Turn a move typed by a human into a move value.

        Raises ``ValueError`` or ``SyntaxError`` when ``text`` does not parse.
        """
        return ast.literal_eval(text.strip())

    def render(self, state: S) -> str:
        return str(state)
