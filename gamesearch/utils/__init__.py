"""Utility modules."""

from .log_setup import setup_logging
from .match import MatchResult, describe_result, play_game, play_match

__all__ = ["MatchResult", "describe_result", "play_game", "play_match", "setup_logging"]
