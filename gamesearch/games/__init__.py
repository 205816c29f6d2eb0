from __future__ import annotations

from .connect4 import ConnectFour
from .example_game import ExampleGame
from .tictactoe import TicTacToe, TicTacToeState
from .turn_based_game import Game, Player, Utility, opponent
from ..registry import list_games, register_game

if "example" not in list_games():
    register_game("example", ExampleGame)
if "tictactoe" not in list_games():
    register_game("tictactoe", TicTacToe, h=3, v=3, k=3)
if "connect4" not in list_games():
    register_game("connect4", ConnectFour)

__all__ = [
    "ConnectFour",
    "ExampleGame",
    "Game",
    "Player",
    "TicTacToe",
    "TicTacToeState",
    "Utility",
    "opponent",
]
