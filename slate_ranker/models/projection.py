"""Projection input and result models."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .game_log import StatSeries


class Direction(Enum):
    """Pick direction relative to the line."""
    OVER = "OVER"
    UNDER = "UNDER"

    @classmethod
    def parse(cls, value: str) -> "Direction":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Invalid direction: {value}. Must be OVER or UNDER") from None


class Volatility(Enum):
    """Volatility bucket from the coefficient of variation."""
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"


@dataclass(frozen=True)
class ProjectionInput:
    """Everything the projection engine needs for one prop."""

    series: StatSeries
    line: float
    direction: Direction
    simulation_count: int = 5000
    floor_clamp: float = 0.0
    seed: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, 'series', StatSeries.of(self.series))
        object.__setattr__(self, 'direction', Direction.parse(self.direction))


@dataclass(frozen=True)
class HistogramBin:
    """One histogram bucket [lower, upper) of simulated values."""
    lower: float
    upper: float
    count: int


@dataclass(frozen=True)
class ProjectionResult:
    """Output of a Monte Carlo projection."""

    projection: float
    probability: float  # percent, 0-100
    edge: float
    floor: float  # p10
    median: float  # p50
    ceiling: float  # p90
    stdev: float  # sample stdev of the input series, not of the simulations
    volatility: Volatility
    confidence: int
    histogram: Tuple[HistogramBin, ...] = ()
    simulations: int = 0
    samples_preview: Tuple[float, ...] = field(default=(), repr=False)

    @property
    def hit_rate(self) -> float:
        """Probability as a 0-1 fraction."""
        return self.probability / 100.0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['volatility'] = self.volatility.value
        data['histogram'] = [asdict(b) for b in self.histogram]
        data['samples_preview'] = list(self.samples_preview)
        return data
