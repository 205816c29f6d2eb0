"""Central registries for games and players."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Generic, Iterable, Tuple, TypeVar

if TYPE_CHECKING:
    from gamesearch.agents.base_player import BasePlayer
    from gamesearch.games.turn_based_game import Game

T = TypeVar("T")

GameFactory = Callable[..., "Game"]
PlayerFactory = Callable[..., "BasePlayer"]


class _Registry(Generic[T]):
    """Named constructors plus the keyword defaults they are called with."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._entries: Dict[str, Tuple[Callable[..., T], Dict[str, Any]]] = {}

    def register(self, key: str, factory: Callable[..., T], defaults: Dict[str, Any]) -> None:
        if key in self._entries:
            raise ValueError(f"{self.kind} id '{key}' is already registered.")
        self._entries[key] = (factory, dict(defaults))

    def entry(self, key: str) -> Tuple[Callable[..., T], Dict[str, Any]]:
        if key not in self._entries:
            raise KeyError(f"{self.kind} id '{key}' is not registered.")
        factory, defaults = self._entries[key]
        return factory, dict(defaults)

    def make(self, key: str, **overrides: Any) -> T:
        factory, defaults = self.entry(key)
        return factory(**{**defaults, **overrides})

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._entries)


_GAMES: "_Registry[Game]" = _Registry("Game")
_PLAYERS: "_Registry[BasePlayer]" = _Registry("Player")


def register_game(game_id: str, entry_point: GameFactory, **default_kwargs: Any) -> None:
    """Register a game constructor with default parameters."""
    _GAMES.register(game_id, entry_point, default_kwargs)


def make_game(game_id: str, **overrides: Any) -> Game:
    """Instantiate a registered game using optional parameter overrides."""
    return _GAMES.make(game_id, **overrides)


def list_games() -> Iterable[str]:
    return _GAMES.keys()


def get_game_entry(game_id: str) -> Tuple[GameFactory, Dict[str, Any]]:
    """Retrieve the raw entry point and defaults for a game."""
    return _GAMES.entry(game_id)


def register_player(player_id: str, ctor: PlayerFactory, **default_kwargs: Any) -> None:
    """Register a player constructor, e.g. ``register_player("alphabeta", AlphaBetaPlayer, depth=4)``."""
    _PLAYERS.register(player_id, ctor, default_kwargs)


def make_player(player_id: str, **kwargs: Any) -> BasePlayer:
    return _PLAYERS.make(player_id, **kwargs)


def list_players() -> Iterable[str]:
    return _PLAYERS.keys()


def get_player_entry(player_id: str) -> PlayerFactory:
    """Retrieve the raw constructor for a player."""
    return _PLAYERS.entry(player_id)[0]
