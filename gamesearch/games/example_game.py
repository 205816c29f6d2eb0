"""Two-ply example game from Fig 5.2 of AIMA."""

from __future__ import annotations

from typing import Dict, List, Sequence

from gamesearch.errors import IllegalMoveError
from .turn_based_game import Game, Player, Utility

EXAMPLE_TREE: Dict[str, List[str]] = {
    "A": ["B", "C", "D"],
    "B": ["B1", "B2", "B3"],
    "C": ["C1", "C2", "C3"],
    "D": ["D1", "D2", "D3"],
}

# Leaf utilities for MAX.
EXAMPLE_LEAVES: Dict[str, Utility] = {
    "B1": 3, "B2": 12, "B3": 8,
    "C1": 2, "C2": 4, "C3": 6,
    "D1": 14, "D2": 5, "D3": 2,
}


class ExampleGame(Game[str, int]):
    """
    MAX picks a branch B, C or D at the root, MIN then picks a leaf.

    Moves are the integers 1, 2 and 3, choosing the first, second or third
    child. Minimax values are 3, 2 and 2, so the root decision is move 1.
    """

    def initial_state(self) -> str:
        return "A"

    def to_move(self, state: str) -> Player:
        return Player.MAX if state == "A" else Player.MIN

    def legal_moves(self, state: str) -> Sequence[int]:
        if state in EXAMPLE_TREE:
            return [1, 2, 3]
        return []

    def make_move(self, state: str, move: int) -> str:
        children = EXAMPLE_TREE.get(state)
        if children is None or move not in (1, 2, 3):
            raise IllegalMoveError(move, state)
        return children[move - 1]

    def utility(self, state: str, player: Player) -> Utility:
        u = float(EXAMPLE_LEAVES.get(state, 0))
        return u if player is Player.MAX else -u

    def terminal_test(self, state: str) -> bool:
        return state in EXAMPLE_LEAVES
