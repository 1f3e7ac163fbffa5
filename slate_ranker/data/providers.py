"""Game log providers, including an ordered fallback chain."""

from typing import Dict, List, Optional, Protocol, Sequence

from loguru import logger

from ..exceptions import LogProviderError, ProviderAttempt
from ..models import GameStatRecord
from .series import playable_games


class GameLogProvider(Protocol):
    """Anything that can return recent game logs for a player."""

    def fetch(self, player_id: str, last_n: int) -> List[GameStatRecord]:
        ...


class InMemoryLogProvider:
    """Serve pre-loaded game logs (e.g. from load_game_logs)."""

    def __init__(self, logs: Dict[str, List[GameStatRecord]], name: str = "memory"):
        self.logs = logs
        self.name = name

    def fetch(self, player_id: str, last_n: int) -> List[GameStatRecord]:
        if player_id not in self.logs:
            raise KeyError(f"No game logs for player {player_id}")
        games = playable_games(self.logs[player_id])
        return games[:last_n] if last_n > 0 else games


class FallbackLogProvider:
    """
    Try providers in order and return the first successful fetch.

    Each failure is kept as a ProviderAttempt so callers can see why every
    strategy failed. An empty list is a successful fetch.
    """

    def __init__(self, strategies: Sequence[GameLogProvider], names: Optional[Sequence[str]] = None):
        self.strategies = list(strategies)
        if names is None:
            names = [getattr(s, 'name', type(s).__name__) for s in self.strategies]
        self.names = list(names)
        if len(self.names) != len(self.strategies):
            raise ValueError(
                f"Got {len(self.names)} names for {len(self.strategies)} strategies"
            )
        self.last_attempts: List[ProviderAttempt] = []

    def fetch(self, player_id: str, last_n: int) -> List[GameStatRecord]:
        attempts = []
        for name, strategy in zip(self.names, self.strategies):
            try:
                records = strategy.fetch(player_id, last_n)
            except Exception as e:
                logger.warning(f"Provider {name} failed for {player_id}: {e}")
                attempts.append(ProviderAttempt(strategy=name, error=str(e)))
                continue

            if attempts:
                logger.info(f"Provider {name} succeeded for {player_id} after {len(attempts)} failures")
            self.last_attempts = attempts
            return records

        self.last_attempts = attempts
        raise LogProviderError(player_id, attempts)
