"""CLI for playing games between humans and search players."""

from __future__ import annotations

import inspect
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import tyro

import gamesearch.agents  # noqa: F401 - registers the default players
import gamesearch.games  # noqa: F401 - registers the default games
from gamesearch.agents.base_player import BasePlayer
from gamesearch.config import GameConfig, MatchConfig, PlayerConfig, load_config
from gamesearch.registry import get_player_entry, make_game, make_player
from gamesearch.utils import play_game, play_match, setup_logging

GameId = Literal["example", "tictactoe", "connect4"]
PlayerId = Literal["human", "random", "minimax", "alphabeta_full", "alphabeta", "iterative"]


def _player_params(player_id: str, depth: int, time_limit: float) -> Dict[str, Any]:
    if player_id == "alphabeta":
        return {"depth": depth}
    if player_id == "iterative":
        return {"time_limit": time_limit}
    return {}


def build_player(cfg: PlayerConfig, seed: Optional[int] = None) -> BasePlayer:
    """Instantiate a configured player, passing ``seed`` on if it takes one."""
    params = dict(cfg.params)
    ctor = get_player_entry(cfg.id)
    if seed is not None and "seed" in inspect.signature(ctor).parameters:
        params.setdefault("seed", seed)
    return make_player(cfg.id, **params)


def run_match(cfg: MatchConfig) -> None:
    setup_logging(cfg.log_level)
    game = make_game(cfg.game.id, **cfg.game.params)
    player1 = build_player(cfg.player1, seed=cfg.seed)
    player2 = build_player(cfg.player2, seed=None if cfg.seed is None else cfg.seed + 1)

    print("=" * 50)
    print(f"{game!r}: {player1!r} vs {player2!r}")
    print("=" * 50)

    if cfg.num_games == 1:
        play_game(game, player1, player2, output_fn=print if cfg.verbose else None)
        return

    result = play_match(
        game,
        player1,
        player2,
        num_games=cfg.num_games,
        alternate_first=cfg.alternate_first,
        output_fn=print if cfg.verbose else None,
    )
    print(f"Player 1 wins: {result.player1_wins}")
    print(f"Draws:         {result.draws}")
    print(f"Player 2 wins: {result.player2_wins}")


def play(
    game: GameId = "tictactoe",
    player1: PlayerId = "human",
    player2: PlayerId = "alphabeta",
    depth: int = 4,
    time_limit: float = 1.0,
    num_games: int = 1,
    seed: Optional[int] = None,
    config: Optional[Path] = None,
    log_level: str = "INFO",
) -> None:
    """
    Play a game between two players.

    Args:
        game: Game to play
        player1: Player moving first (MAX)
        player2: Player moving second (MIN)
        depth: Cutoff depth for the 'alphabeta' player
        time_limit: Seconds per move for the 'iterative' player
        num_games: Number of games; players swap sides between games
        seed: Random seed for players that use one
        config: YAML match config; overrides every other option
        log_level: Logging level
    """
    if config is not None:
        run_match(load_config(config))
        return
    cfg = MatchConfig(
        game=GameConfig(id=game),
        player1=PlayerConfig(id=player1, params=_player_params(player1, depth, time_limit)),
        player2=PlayerConfig(id=player2, params=_player_params(player2, depth, time_limit)),
        num_games=num_games,
        seed=seed,
        alternate_first=num_games > 1,
        log_level=log_level,
    )
    run_match(cfg)


def main() -> None:
    tyro.cli(play)


if __name__ == "__main__":
    main()
