"""Monte Carlo projections for player stat props."""

from .models import (
    Direction,
    GameStatRecord,
    HistogramBin,
    ProjectionInput,
    ProjectionResult,
    StatKey,
    StatSeries,
    Volatility,
)
from .data import prepare_series
from .simulation import ProjectionEngine, monte_carlo_project

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "GameStatRecord",
    "HistogramBin",
    "ProjectionInput",
    "ProjectionResult",
    "StatKey",
    "StatSeries",
    "Volatility",
    "prepare_series",
    "ProjectionEngine",
    "monte_carlo_project",
]
