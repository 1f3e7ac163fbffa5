"""Exceptions raised outside the projection engine."""

from dataclasses import dataclass
from typing import List


class SlateRankerError(Exception):
    """Base error for slate ranking."""


class InvalidPropError(SlateRankerError, ValueError):
    """Caller-side validation failure for a prop or projection input."""


@dataclass(frozen=True)
class ProviderAttempt:
    """One failed attempt by a game log provider."""
    strategy: str
    error: str


class LogProviderError(SlateRankerError):
    """Every game log provider in a fallback chain failed."""

    def __init__(self, player_id: str, attempts: List[ProviderAttempt]):
        self.player_id = player_id
        self.attempts = list(attempts)
        detail = "; ".join(f"{a.strategy}: {a.error}" for a in self.attempts) or "no providers configured"
        super().__init__(f"Could not fetch game logs for {player_id} ({detail})")
