"""Utilities for playing games between players."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from gamesearch.agents.base_player import GamePlayer
from gamesearch.games.turn_based_game import Game, Player, Utility

logger = logging.getLogger(__name__)

OutputFn = Callable[[str], None]


def _silent(_: str) -> None:
    return None


def describe_result(utility: Utility) -> str:
    if utility == 0:
        return "Draw"
    return "Player 1 Wins" if utility > 0 else "Player 2 Wins"


def play_game(
    game: Game,
    player1: GamePlayer,
    player2: GamePlayer,
    output_fn: Optional[OutputFn] = print,
) -> Utility:
    """
    Play one game and return its final utility for MAX.

    Args:
        game: Game to play, started from ``game.initial_state()``
        player1: Moves whenever it is MAX's turn
        player2: Moves whenever it is MIN's turn
        output_fn: Receives the running transcript; ``None`` for silence

    Returns:
        ``game.utility(final_state, Player.MAX)``
    """
    out = output_fn or _silent
    state = game.initial_state()
    plies = 0
    while not game.terminal_test(state):
        out("Current state is:")
        out(game.render(state))
        player = game.to_move(state)
        mover = player1 if player is Player.MAX else player2
        move = mover(game, state)
        out(f"{player} plays {move}")
        state = game.make_move(state, move)
        plies += 1

    util = game.utility(state, Player.MAX)
    out("Final state is:")
    out(game.render(state))
    out(f"Final score is {util} ({describe_result(util)})")
    logger.debug("Game over after %d plies: %s", plies, describe_result(util))
    return util


@dataclass
class MatchResult:
    player1_wins: int = 0
    draws: int = 0
    player2_wins: int = 0

    @property
    def games(self) -> int:
        return self.player1_wins + self.draws + self.player2_wins


def play_match(
    game: Game,
    player1: GamePlayer,
    player2: GamePlayer,
    num_games: int = 10,
    alternate_first: bool = True,
    output_fn: Optional[OutputFn] = None,
) -> MatchResult:
    """
    Play a series of games and tally the results.

    Args:
        game: Game to play
        player1: First player; plays MAX in even-numbered games
        player2: Second player
        num_games: Number of games to play
        alternate_first: If True, the players swap sides every game.
                         If False, player1 always plays MAX.
        output_fn: Transcript sink passed to :func:`play_game`

    Returns:
        Wins and draws counted per player, not per side.
    """
    result = MatchResult()
    for game_idx in range(num_games):
        player1_is_max = not alternate_first or game_idx % 2 == 0
        if player1_is_max:
            util = play_game(game, player1, player2, output_fn=output_fn)
        else:
            util = -play_game(game, player2, player1, output_fn=output_fn)

        if util == 0:
            result.draws += 1
        elif util > 0:
            result.player1_wins += 1
        else:
            result.player2_wins += 1
        logger.info(
            "Game %d/%d finished: %d-%d-%d",
            game_idx + 1,
            num_games,
            result.player1_wins,
            result.draws,
            result.player2_wins,
        )
    return result
