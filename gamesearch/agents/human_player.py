"""Interactive player that reads moves from a prompt."""

from __future__ import annotations

from typing import Callable, TypeVar

from gamesearch.games.turn_based_game import Game
from .base_player import BasePlayer

S = TypeVar("S")
A = TypeVar("A")

PROMPT = "Your move: "
HELP_TEXT = (
    "  ? -- display this help file\n"
    "  m -- display list of legal moves"
)


class HumanPlayer(BasePlayer):
    """
    Asks a human for a move until a legal one is entered.

    An empty line asks again, ``?`` prints help and ``m`` lists the legal
    moves. Anything else goes through ``game.parse_move``; text that does not
    parse or names an illegal move is reported and the prompt repeats.
    """

    name = "human"

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.input_fn = input_fn
        self.output_fn = output_fn

    def select_move(self, game: Game[S, A], state: S) -> A:
        legal = list(game.legal_moves(state))
        while True:
            text = self.input_fn(PROMPT).strip()
            if not text:
                continue
            if text == "?":
                self.output_fn(HELP_TEXT)
                continue
            if text == "m":
                self.output_fn(str(legal))
                continue
            try:
                move = game.parse_move(text)
            except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError):
                self.output_fn("*** No parse")
                continue
            if move in legal:
                return move
            self.output_fn("*** Illegal move")
