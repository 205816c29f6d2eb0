"""Tests for exact and depth-bounded search."""

from __future__ import annotations

import pytest

from gamesearch.errors import NoLegalMovesError, PreconditionViolation
from gamesearch.games import ConnectFour, ExampleGame, Player, TicTacToe
from gamesearch.search import (
    alpha_beta_depth_search,
    alpha_beta_full_search,
    alpha_beta_search,
    depth_cutoff,
    minimax_decision,
)
from gamesearch.search.utils import argmax_first

from toy_games import StrictExampleGame, StuckGame, TreeGame, play_moves, reachable_states

TTT_OPENINGS = [
    [(0, 0), (1, 1)],
    [(1, 1), (0, 0)],
    [(0, 1), (2, 2)],
    [(2, 0), (0, 2), (1, 1)],
    [(0, 0), (0, 1), (1, 1)],
    [(1, 1), (0, 2), (2, 2), (0, 0)],
]


def test_example_game_minimax_selects_branch_b():
    # min(B) = 3, min(C) = 2, min(D) = 2, so MAX goes to B.
    game = ExampleGame()
    assert minimax_decision(game, "A") == 1


def test_example_game_alpha_beta_selects_branch_b():
    game = ExampleGame()
    assert alpha_beta_full_search(game, "A") == 1
    assert alpha_beta_depth_search(game, "A", 0) == 1


def test_example_game_min_node_decisions():
    game = ExampleGame()
    # MIN to move: the leaf with the lowest value for MAX
    assert minimax_decision(game, "B") == 1
    assert minimax_decision(game, "C") == 1
    assert minimax_decision(game, "D") == 3
    assert alpha_beta_full_search(game, "D") == 3


@pytest.mark.parametrize("seed", range(20))
def test_alpha_beta_matches_minimax_on_random_trees(seed):
    game = TreeGame(depth=4, branching=3, seed=seed, dead_end_prob=0.15)
    for state in game.interior_states():
        if not game.legal_moves(state):
            continue
        assert alpha_beta_full_search(game, state) == minimax_decision(game, state), state


@pytest.mark.parametrize("opening", TTT_OPENINGS)
def test_alpha_beta_matches_minimax_on_tictactoe(opening):
    game = TicTacToe()
    state = play_moves(game, opening)
    assert alpha_beta_full_search(game, state) == minimax_decision(game, state)


@pytest.mark.parametrize(
    "game, prefix",
    [(TicTacToe(h=3, v=2, k=3), []), (TicTacToe(), [(0, 0), (1, 1)]), (TicTacToe(), [(1, 1), (0, 2)])],
    ids=["3x2", "3x3-corner-centre", "3x3-centre-corner"],
)
def test_alpha_beta_matches_minimax_on_every_reachable_state(game, prefix):
    checked = 0
    for state in reachable_states(game, play_moves(game, prefix)):
        if game.terminal_test(state):
            continue
        assert alpha_beta_full_search(game, state) == minimax_decision(game, state), game.render(state)
        checked += 1
    assert checked > 10


def test_tictactoe_takes_an_immediate_win():
    game = TicTacToe()
    # O has (0,0) and (0,1); X has (1,0) and (1,1). O to move wins at (0,2).
    state = play_moves(game, [(0, 0), (1, 0), (0, 1), (1, 1)])
    assert minimax_decision(game, state) == (0, 2)
    assert alpha_beta_full_search(game, state) == (0, 2)
    assert alpha_beta_depth_search(game, state, 0) == (0, 2)


def test_tictactoe_blocks_a_threat():
    game = TicTacToe()
    # X threatens the x=1 column; O must block at (1, 2).
    state = play_moves(game, [(0, 0), (1, 0), (2, 2), (1, 1)])
    assert alpha_beta_full_search(game, state) == (1, 2)


def test_connect4_takes_an_immediate_win():
    game = ConnectFour()
    state = play_moves(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2)])
    assert alpha_beta_depth_search(game, state, 1) == (0, 3)


def test_connect4_blocks_an_immediate_loss():
    game = ConnectFour()
    state = play_moves(game, [(0, 0), (1, 0), (6, 0), (1, 1), (6, 1), (1, 2)])
    assert alpha_beta_depth_search(game, state, 1) == (1, 3)


@pytest.mark.parametrize("seed", range(10))
def test_unbounded_depth_reproduces_exact_search(seed):
    game = TreeGame(depth=5, branching=3, seed=seed, dead_end_prob=0.1)
    root = game.initial_state()
    assert alpha_beta_depth_search(game, root, 10) == minimax_decision(game, root)


@pytest.mark.parametrize("opening", TTT_OPENINGS[:3])
def test_unbounded_depth_reproduces_exact_search_on_tictactoe(opening):
    game = TicTacToe()
    state = play_moves(game, opening)
    assert alpha_beta_depth_search(game, state, 9) == alpha_beta_full_search(game, state)


def test_cutoff_depth_counts_plies_below_the_root():
    game = TreeGame(depth=4, branching=2, seed=1)
    seen = []

    def cutoff(state, depth):
        seen.append((state, depth))
        return game.terminal_test(state)

    alpha_beta_search(game, (), cutoff, game.heuristic)
    assert seen
    for state, depth in seen:
        assert depth == len(state) - 1


def test_eval_fn_receives_root_player():
    game = TreeGame(depth=3, branching=2, seed=2)
    root = (0,)  # MIN to move
    players = set()

    def eval_fn(state, player):
        players.add(player)
        return game.heuristic(state, player)

    alpha_beta_search(game, root, depth_cutoff(game, 0), eval_fn)
    assert players == {Player.MIN}


def test_custom_eval_fn_drives_the_decision():
    game = ExampleGame()
    estimates = {"B": 0.0, "C": 5.0, "D": 1.0}

    move = alpha_beta_search(
        game,
        "A",
        cutoff_test=lambda state, depth: depth >= 0,
        eval_fn=lambda state, player: estimates[state],
    )
    assert move == 2


def test_depth_cutoff_predicate():
    game = ExampleGame()
    cutoff = depth_cutoff(game, 1)
    assert cutoff("B1", 0)  # terminal
    assert not cutoff("B", 1)
    assert cutoff("B", 2)


def test_ties_break_towards_the_first_move():
    game = TreeGame(depth=2, branching=3, seed=0, low=0, high=0)
    root = game.initial_state()
    assert minimax_decision(game, root) == 0
    assert alpha_beta_full_search(game, root) == 0
    assert alpha_beta_depth_search(game, root, 0) == 0


@pytest.mark.parametrize(
    "search",
    [
        minimax_decision,
        alpha_beta_full_search,
        lambda g, s: alpha_beta_depth_search(g, s, 3),
    ],
    ids=["minimax", "alphabeta_full", "alphabeta"],
)
def test_search_without_legal_moves_is_a_precondition_violation(search):
    game = StuckGame()
    with pytest.raises(NoLegalMovesError):
        search(game, game.initial_state())


def test_search_on_terminal_state_is_a_precondition_violation():
    game = ExampleGame()
    with pytest.raises(PreconditionViolation):
        minimax_decision(game, "C2")


def test_argmax_first_is_stable():
    assert argmax_first([3, 1, 3, 2], key=lambda x: x) == 3
    assert argmax_first(["a", "bb", "cc"], key=len) == "bb"


@pytest.mark.parametrize(
    "search",
    [
        minimax_decision,
        alpha_beta_full_search,
        lambda g, s: alpha_beta_depth_search(g, s, 2),
    ],
    ids=["minimax", "alphabeta_full", "alphabeta"],
)
def test_terminal_root_is_rejected_before_asking_who_moves(search):
    game = StrictExampleGame()
    with pytest.raises(NoLegalMovesError):
        search(game, "B1")
