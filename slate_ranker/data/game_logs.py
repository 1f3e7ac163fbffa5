"""Load game logs and slates from CSV or JSON files."""

import json
import math
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd
from loguru import logger

from ..exceptions import InvalidPropError
from ..models import BASE_STATS, GameStatRecord, SlateProp

# Source column names mapped to our field names
COLUMN_ALIASES = {
    'min': 'minutes',
    'mins': 'minutes',
    'minutes_played': 'minutes',
    'game_date': 'date',
    'turnover': 'tov',
    'turnovers': 'tov',
    'to': 'tov',
    'three_pm': 'fg3m',
    '3pm': 'fg3m',
    '3pa': 'fg3a',
    'three_pa': 'fg3a',
    'player': 'player_id',
}


def load_frame(filepath: str) -> pd.DataFrame:
    """Load a CSV or JSON file into a DataFrame with normalized column names."""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    suffix = path.suffix.lower()
    if suffix == '.csv':
        df = pd.read_csv(path)
    elif suffix == '.json':
        with open(path) as f:
            payload = json.load(f)
        # Accept a bare list or a {"data": [...]} envelope
        if isinstance(payload, dict):
            payload = payload.get('data', [])
        df = pd.DataFrame(payload)
    else:
        raise ValueError(f"Unsupported file type: {suffix}. Must be .csv or .json")

    df.columns = [str(c).strip().lower() for c in df.columns]
    df = df.rename(columns={k: v for k, v in COLUMN_ALIASES.items() if k in df.columns and v not in df.columns})
    logger.info(f"Loaded {len(df)} rows from {filepath}")
    return df


def parse_minutes(value) -> float:
    """Parse minutes given as a number or an 'MM:SS' string."""
    if value is None:
        return 0.0
    if isinstance(value, str):
        text = value.strip()
        if ':' in text:
            mins, _, secs = text.partition(':')
            try:
                return float(mins) + float(secs or 0) / 60.0
            except ValueError:
                return 0.0
        value = text
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def _parse_stat(value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def records_from_frame(df: pd.DataFrame) -> List[GameStatRecord]:
    """Convert game log rows to records. Missing stat columns become 0."""
    dates = pd.to_datetime(df['date'], errors='coerce') if 'date' in df.columns else None

    records = []
    for i, (_, row) in enumerate(df.iterrows()):
        game_date = None
        if dates is not None and pd.notna(dates.iloc[i]):
            game_date = dates.iloc[i].date()

        stats = {name: _parse_stat(row.get(name, 0)) for name in BASE_STATS}
        opponent = row.get('opponent')
        records.append(GameStatRecord(
            date=game_date,
            minutes_played=parse_minutes(row.get('minutes')),
            stats=stats,
            opponent=str(opponent) if isinstance(opponent, str) else None,
        ))
    return records


def load_game_logs(filepath: str) -> Dict[str, List[GameStatRecord]]:
    """
    Load game logs grouped by player id.

    Args:
        filepath: CSV or JSON file with one row per player-game

    Returns:
        Mapping of player id to that player's records
    """
    df = load_frame(filepath)
    if 'player_id' not in df.columns:
        raise ValueError(f"Game log file {filepath} has no player_id column")

    # Same id normalization as slate props, so 11.0 and 11 match
    ids = df['player_id'].map(_optional_str)
    missing = int(ids.isna().sum())
    if missing:
        logger.warning(f"Dropped {missing} game log rows with no player_id")
    df, ids = df[ids.notna()], ids[ids.notna()]

    logs: Dict[str, List[GameStatRecord]] = defaultdict(list)
    for player_id, group in df.groupby(ids, sort=False):
        logs[player_id] = records_from_frame(group.reset_index(drop=True))

    logger.info(f"Loaded game logs for {len(logs)} players")
    return dict(logs)


def load_slate(filepath: str, default_last_n: int = 10) -> List[SlateProp]:
    """Load slate props. Rows that fail to parse are logged and skipped."""
    df = load_frame(filepath)

    props = []
    for i, row in df.iterrows():
        try:
            props.append(_prop_from_row(row, i, default_last_n))
        except (InvalidPropError, ValueError, KeyError) as e:
            logger.warning(f"Skipping slate row {i}: {e}")
    return props


def _prop_from_row(row: pd.Series, index: int, default_last_n: int) -> SlateProp:
    last_n = row.get('last_n')
    player_id = row.get('player_id')
    return SlateProp(
        prop_id=str(row.get('id', index)),
        player_name=str(row.get('player_name', player_id)),
        stat_key=row.get('stat', row.get('stat_type')),
        line=float(row['line']),
        pick=row.get('pick', 'OVER'),
        player_id=_optional_str(player_id),
        last_n=int(last_n) if _present(last_n) else default_last_n,
        opponent=_optional_str(row.get('opponent')),
    )


def _present(value) -> bool:
    return value is not None and not (isinstance(value, float) and math.isnan(value))


def _optional_str(value) -> Optional[str]:
    if not _present(value) or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)
