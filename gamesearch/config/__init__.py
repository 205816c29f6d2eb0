"""Config package exports."""

from .schema import GameConfig, MatchConfig, PlayerConfig, load_config

__all__ = ["GameConfig", "MatchConfig", "PlayerConfig", "load_config"]
