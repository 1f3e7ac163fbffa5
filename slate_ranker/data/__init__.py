"""Game log loading and series preparation."""

from .series import lookback, minutes_series, playable_games, prepare_series
from .game_logs import load_frame, load_game_logs, load_slate, parse_minutes, records_from_frame
from .providers import FallbackLogProvider, GameLogProvider, InMemoryLogProvider

__all__ = [
    "lookback",
    "minutes_series",
    "playable_games",
    "prepare_series",
    "load_frame",
    "load_game_logs",
    "load_slate",
    "parse_minutes",
    "records_from_frame",
    "FallbackLogProvider",
    "GameLogProvider",
    "InMemoryLogProvider"
]
