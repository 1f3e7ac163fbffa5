"""Game log and stat series models."""

import math
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Sequence, Tuple


# Box-score fields stored on every record
BASE_STATS = ('pts', 'reb', 'ast', 'stl', 'blk', 'fg3m', 'fg3a', 'tov')


class StatKey(Enum):
    """Prop stat types, including composites derived from base stats."""

    PTS = "PTS"
    REB = "REB"
    AST = "AST"
    STL = "STL"
    BLK = "BLK"
    THREE_PM = "3PM"
    THREE_PA = "3PA"
    TO = "TO"

    # Composites
    PRA = "PRA"
    PR = "PR"
    PA = "PA"
    RA = "RA"

    @property
    def components(self) -> Tuple[str, ...]:
        """Base stat fields summed to produce this stat."""
        return _COMPONENTS[self]

    @property
    def is_composite(self) -> bool:
        return len(self.components) > 1

    @classmethod
    def parse(cls, value: str) -> "StatKey":
        """Resolve a stat key from its code or a common alias."""
        if isinstance(value, cls):
            return value
        code = str(value).strip().upper().replace(' ', '')
        code = _ALIASES.get(code, code)
        try:
            return cls(code)
        except ValueError:
            valid = [k.value for k in cls]
            raise ValueError(f"Unknown stat key: {value}. Must be one of {valid}") from None


_COMPONENTS: Dict[StatKey, Tuple[str, ...]] = {
    StatKey.PTS: ('pts',),
    StatKey.REB: ('reb',),
    StatKey.AST: ('ast',),
    StatKey.STL: ('stl',),
    StatKey.BLK: ('blk',),
    StatKey.THREE_PM: ('fg3m',),
    StatKey.THREE_PA: ('fg3a',),
    StatKey.TO: ('tov',),
    StatKey.PRA: ('pts', 'reb', 'ast'),
    StatKey.PR: ('pts', 'reb'),
    StatKey.PA: ('pts', 'ast'),
    StatKey.RA: ('reb', 'ast'),
}

_ALIASES = {
    'TOV': 'TO',
    'FG3M': '3PM',
    'FG3A': '3PA',
    'PTS+REB+AST': 'PRA',
    'PTS+REB': 'PR',
    'PTS+AST': 'PA',
    'REB+AST': 'RA',
}


@dataclass(frozen=True)
class GameStatRecord:
    """One completed game's box-score line for a player."""

    date: Optional[date]
    minutes_played: float
    stats: Mapping[str, float] = field(default_factory=dict)
    opponent: Optional[str] = None

    def __post_init__(self):
        # Freeze the stat mapping so records stay immutable
        object.__setattr__(self, 'stats', MappingProxyType(dict(self.stats)))

    @property
    def is_playable(self) -> bool:
        """A record counts as a game only if the player logged minutes."""
        return _finite_or_zero(self.minutes_played) > 0

    def stat(self, name: str) -> float:
        """Get a base stat, treating missing or malformed values as 0."""
        return _finite_or_zero(self.stats.get(name, 0.0))

    def value_for(self, key: StatKey) -> float:
        """Value of a (possibly composite) stat key for this game."""
        return sum(self.stat(name) for name in key.components)


def _finite_or_zero(value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


@dataclass(frozen=True)
class StatSeries:
    """Ordered stat values for one key, most recent game first."""

    values: Tuple[float, ...] = ()
    stat_key: Optional[StatKey] = None

    def __post_init__(self):
        object.__setattr__(self, 'values', tuple(float(v) for v in self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __getitem__(self, index):
        return self.values[index]

    @property
    def is_empty(self) -> bool:
        return not self.values

    def last(self, n: int) -> "StatSeries":
        """Lookback window over the n most recent games."""
        return StatSeries(self.values[:max(0, n)], self.stat_key)

    @classmethod
    def of(cls, values: Sequence[float], stat_key: Optional[StatKey] = None) -> "StatSeries":
        if isinstance(values, StatSeries):
            return values
        return cls(tuple(values), stat_key)
