"""Data models for the prop projection engine."""

from .game_log import BASE_STATS, GameStatRecord, StatKey, StatSeries
from .projection import Direction, HistogramBin, ProjectionInput, ProjectionResult, Volatility
from .prop import ChartPoint, FormReport, RankedProp, SkippedProp, SlateProp

__all__ = [
    "BASE_STATS", "GameStatRecord", "StatKey", "StatSeries",
    "Direction", "HistogramBin", "ProjectionInput", "ProjectionResult", "Volatility",
    "ChartPoint", "FormReport", "RankedProp", "SkippedProp", "SlateProp"
]
