"""Configuration schema for matches between players."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


@dataclass
class GameConfig:
    id: str
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PlayerConfig:
    id: str
    params: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Union[str, Dict[str, Any]]) -> "PlayerConfig":
        # "random" is shorthand for {"id": "random"}
        if isinstance(data, str):
            return cls(id=data)
        if "id" not in data:
            raise ValueError(f"Player config needs an 'id', got {data!r}")
        return cls(id=str(data["id"]), params=dict(data.get("params") or {}))


@dataclass
class MatchConfig:
    game: GameConfig
    player1: PlayerConfig
    player2: PlayerConfig
    num_games: int = 1
    alternate_first: bool = False
    seed: Optional[int] = None
    log_level: str = "INFO"
    verbose: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchConfig":
        game_data = data.get("game")
        if game_data is None:
            raise ValueError("game is required")
        if isinstance(game_data, str):
            game = GameConfig(id=game_data)
        else:
            game = GameConfig(id=str(game_data["id"]), params=dict(game_data.get("params") or {}))

        players = data.get("players", {})
        try:
            player1 = PlayerConfig.from_dict(data.get("player1", players.get("player1")))
            player2 = PlayerConfig.from_dict(data.get("player2", players.get("player2")))
        except TypeError:
            raise ValueError("player1 and player2 are required") from None

        num_games = int(data.get("num_games", 1))
        if num_games < 1:
            raise ValueError(f"num_games must be >= 1, got {num_games}")

        seed = data.get("seed")
        if seed is not None:
            seed = int(seed)

        return cls(
            game=game,
            player1=player1,
            player2=player2,
            num_games=num_games,
            alternate_first=bool(data.get("alternate_first", False)),
            seed=seed,
            log_level=str(data.get("log_level", "INFO")),
            verbose=bool(data.get("verbose", True)),
        )


def load_config(path: Union[str, Path]) -> MatchConfig:
    """Load MatchConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return MatchConfig.from_dict(data)
