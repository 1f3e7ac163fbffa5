"""Simulation module for prop projections."""

from .engine import ProjectionEngine, monte_carlo_project
from .statistics import (
    build_histogram,
    classify_volatility,
    coefficient_of_variation,
    confidence_score,
    percentile,
    sample_stdev
)

__all__ = [
    'ProjectionEngine',
    'monte_carlo_project',
    'build_histogram',
    'classify_volatility',
    'coefficient_of_variation',
    'confidence_score',
    'percentile',
    'sample_stdev'
]
