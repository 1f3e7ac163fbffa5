"""Slate prop and report models."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .game_log import StatKey
from .projection import Direction, ProjectionResult


@dataclass
class SlateProp:
    """A candidate bet as stored on the slate."""

    prop_id: str
    player_name: str
    stat_key: StatKey
    line: float
    pick: Direction
    player_id: Optional[str] = None
    last_n: int = 10
    opponent: Optional[str] = None

    def __post_init__(self):
        self.stat_key = StatKey.parse(self.stat_key)
        self.pick = Direction.parse(self.pick)

    def __repr__(self) -> str:
        return f"SlateProp({self.player_name}, {self.stat_key.value} {self.pick.value} {self.line})"


@dataclass(frozen=True)
class ChartPoint:
    """One recent game for charting against the line."""
    date: str
    value: float
    minutes: float
    over_line: bool


@dataclass
class FormReport:
    """Recent-form summary over the last 5 and 10 games."""

    l5_avg: float
    l10_avg: float
    minutes_avg10: float
    blended_projection: float
    minutes_factor: float
    cv: float
    hit_rate10: float
    blended_probability: float
    confidence: int  # penalized for stat and minutes volatility
    notes: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    chart: List[ChartPoint] = field(default_factory=list)


@dataclass
class RankedProp:
    """A prop with its projection, ready for ranking."""
    prop: SlateProp
    result: ProjectionResult
    games: int
    form: Optional[FormReport] = None

    @property
    def sort_key(self) -> Tuple[int, float]:
        return (self.result.confidence, self.result.edge)


@dataclass
class SkippedProp:
    """A prop that could not be projected, with the reason."""
    prop: SlateProp
    reason: str
