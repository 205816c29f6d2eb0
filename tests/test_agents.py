"""Tests for players."""

from __future__ import annotations

import pytest

from gamesearch.agents import (
    AlphaBetaFullPlayer,
    AlphaBetaPlayer,
    BasePlayer,
    HumanPlayer,
    IterativeAlphaBetaPlayer,
    MinimaxPlayer,
    RandomPlayer,
)
from gamesearch.agents.human_player import HELP_TEXT, PROMPT
from gamesearch.errors import BudgetTooSmallError, NoLegalMovesError
from gamesearch.games import ConnectFour, ExampleGame, TicTacToe

from toy_games import SlowTreeGame, StuckGame, play_moves


class _ScriptedInput:
    """Feeds canned lines to a HumanPlayer and records the prompts."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        return self.lines.pop(0)


def _human(lines):
    inputs = _ScriptedInput(lines)
    output = []
    return HumanPlayer(input_fn=inputs, output_fn=output.append), inputs, output


def test_human_player_accepts_a_legal_move():
    player, inputs, output = _human(["2"])
    assert player(ExampleGame(), "A") == 2
    assert inputs.prompts == [PROMPT]
    assert output == []


def test_human_player_reprompts_on_empty_line():
    player, inputs, output = _human(["", "   ", "3"])
    assert player(ExampleGame(), "A") == 3
    assert len(inputs.prompts) == 3
    assert output == []


def test_human_player_help_and_move_list():
    player, _, output = _human(["?", "m", "1"])
    assert player(ExampleGame(), "A") == 1
    assert output == [HELP_TEXT, "[1, 2, 3]"]


def test_human_player_rejects_unparseable_and_illegal_input():
    player, inputs, output = _human(["banana", "(1,", "7", "1"])
    assert player(ExampleGame(), "B") == 1
    assert output == ["*** No parse", "*** No parse", "*** Illegal move"]
    assert len(inputs.prompts) == 4


def test_human_player_reads_tuple_moves():
    game = TicTacToe()
    state = play_moves(game, [(1, 1)])
    player, _, output = _human(["(1, 1)", "0, 2"])
    assert player(game, state) == (0, 2)
    assert output == ["*** Illegal move"]


def test_random_player_picks_legal_moves():
    game = ConnectFour()
    state = game.initial_state()
    player = RandomPlayer(seed=42)
    legal = list(game.legal_moves(state))

    for _ in range(20):
        move = player(game, state)
        assert move in legal
        assert isinstance(move, tuple)


def test_random_player_is_reproducible():
    game = TicTacToe()
    state = game.initial_state()
    a = [RandomPlayer(seed=7)(game, state) for _ in range(5)]
    b = [RandomPlayer(seed=7)(game, state) for _ in range(5)]
    assert a == b


def test_random_player_without_moves():
    game = StuckGame()
    with pytest.raises(NoLegalMovesError):
        RandomPlayer(seed=0)(game, game.initial_state())


@pytest.mark.parametrize(
    "player",
    [MinimaxPlayer(), AlphaBetaFullPlayer(), AlphaBetaPlayer(depth=0), AlphaBetaPlayer(depth=3)],
    ids=repr,
)
def test_search_players_on_example_game(player):
    assert isinstance(player, BasePlayer)
    assert player(ExampleGame(), "A") == 1


def test_alphabeta_player_rejects_negative_depth():
    with pytest.raises(ValueError):
        AlphaBetaPlayer(depth=-1)


def test_iterative_player_on_example_game():
    player = IterativeAlphaBetaPlayer(time_limit=0.5, max_depth=3)
    assert player(ExampleGame(), "A") == 1
    assert player.last_depth == 3


def test_iterative_player_budget_too_small():
    game = SlowTreeGame(slow_ply=1, depth=3, branching=2, seed=0)
    player = IterativeAlphaBetaPlayer(time_limit=0.2)
    with pytest.raises(BudgetTooSmallError):
        player(game, game.initial_state())


def test_iterative_player_random_fallback():
    game = SlowTreeGame(slow_ply=1, depth=3, branching=2, seed=0)
    player = IterativeAlphaBetaPlayer(time_limit=0.2, fallback_to_random=True, seed=1)
    move = player(game, game.initial_state())
    assert move in game.legal_moves(game.initial_state())
    assert player.last_depth is None


def test_iterative_player_rejects_bad_time_limit():
    with pytest.raises(ValueError):
        IterativeAlphaBetaPlayer(time_limit=0)


@pytest.mark.parametrize("text", ["-" * 100000 + "1", "(" * 100000 + ")" * 100000])
def test_human_player_survives_deeply_nested_input(text):
    game = TicTacToe()
    player, inputs, output = _human([text, "(0, 0)"])
    assert player(game, game.initial_state()) == (0, 0)
    assert output == ["*** No parse"]
    assert len(inputs.prompts) == 2
