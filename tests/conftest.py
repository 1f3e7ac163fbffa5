"""Shared fixtures for slate ranker tests."""

import sys
from datetime import date, timedelta

import pytest
from loguru import logger

from slate_ranker.models import GameStatRecord


def _game(day: int, minutes: float = 32.0, **stats) -> GameStatRecord:
    return GameStatRecord(
        date=date(2025, 1, 1) + timedelta(days=day - 1),
        minutes_played=minutes,
        stats=stats,
    )


@pytest.fixture
def season_logs():
    """Twelve games (Jan 1-12, pts = 20 + day) in scrambled order plus two inactive appearances."""
    games = [
        _game(day, pts=20 + day, reb=5 + day % 3, ast=4 + day % 2)
        for day in (3, 1, 12, 7, 5, 9, 2, 11, 4, 10, 6, 8)
    ]
    games.append(_game(13, minutes=0, pts=0, reb=0, ast=0))
    games.append(_game(14, minutes=-1))
    return games


@pytest.fixture(autouse=True)
def restore_loguru():
    """CLI entry points replace the loguru sink; put the default back afterwards."""
    yield
    logger.remove()
    logger.add(sys.__stderr__)
