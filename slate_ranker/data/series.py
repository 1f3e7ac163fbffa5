"""Turn raw game logs into clean, ordered stat series."""

import logging
from datetime import date
from typing import Iterable, List, Optional, Sequence

from ..models import GameStatRecord, StatKey, StatSeries

logger = logging.getLogger(__name__)


def playable_games(records: Iterable[GameStatRecord]) -> List[GameStatRecord]:
    """
    Drop non-games and order the rest newest first.

    Records without minutes are excluded. The sort is stable, so games on the
    same date keep their input order. Records with no date sort last.
    """
    games = [r for r in records if r.is_playable]
    return sorted(games, key=_date_key, reverse=True)


def _date_key(record: GameStatRecord):
    return (record.date is not None, record.date or date.min)


def prepare_series(records: Sequence[GameStatRecord], stat_key) -> StatSeries:
    """
    Build the stat series for one stat key.

    Args:
        records: Game logs in any order (may be empty)
        stat_key: StatKey or stat code such as 'PRA'

    Returns:
        StatSeries ordered most recent first, not truncated
    """
    key = StatKey.parse(stat_key)
    games = playable_games(records)

    dropped = len(records) - len(games)
    if dropped:
        logger.debug(f"Dropped {dropped} non-playable records for {key.value}")

    # Stat counts cannot be negative
    values = tuple(max(0.0, g.value_for(key)) for g in games)
    return StatSeries(values, key)


def minutes_series(records: Sequence[GameStatRecord]) -> List[float]:
    """Minutes played for each playable game, most recent first."""
    return [g.minutes_played for g in playable_games(records)]


def lookback(series: StatSeries, window: Optional[int]) -> StatSeries:
    """Slice a series to its last `window` games (None keeps everything)."""
    if window is None:
        return series
    return series.last(window)
