"""Numeric helpers shared by the engine and the form report.

One convention everywhere: sample standard deviation with Bessel's
correction, and type 7 (linear) percentile interpolation.
"""

import math
from typing import List, Sequence

import numpy as np

from ..config import CONFIDENCE_CONFIG, VOLATILITY_CONFIG, ConfidenceConfig, VolatilityConfig
from ..models import HistogramBin, Volatility


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def mean(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))


def sample_stdev(values: Sequence[float]) -> float:
    """Sample standard deviation (n - 1). Zero for fewer than two values."""
    if len(values) < 2:
        return 0.0
    return float(np.std(values, ddof=1))


def percentile(sorted_values: Sequence[float], p: float) -> float:
    """
    Percentile of an ascending array by linear interpolation.

    idx = (n - 1) * p, interpolated between the bracketing order statistics.
    """
    n = len(sorted_values)
    if n == 0:
        return 0.0
    idx = (n - 1) * p
    lo = math.floor(idx)
    hi = math.ceil(idx)
    if lo == hi:
        return float(sorted_values[lo])
    weight = idx - lo
    return float(sorted_values[lo] * (1 - weight) + sorted_values[hi] * weight)


def coefficient_of_variation(stdev: float, center: float) -> float:
    """CV with the denominator floored at 1 to avoid near-zero means."""
    return stdev / max(1.0, abs(center))


def classify_volatility(stdev: float, center: float,
                        config: VolatilityConfig = VOLATILITY_CONFIG) -> Volatility:
    cv = coefficient_of_variation(stdev, center)
    if cv < config.LOW_CV:
        return Volatility.LOW
    if cv < config.HIGH_CV:
        return Volatility.MODERATE
    return Volatility.HIGH


def confidence_score(probability: float, series_length: int, volatility: Volatility,
                     config: ConfidenceConfig = CONFIDENCE_CONFIG) -> int:
    """
    Heuristic 0-100 confidence.

    Args:
        probability: Hit probability as a 0-1 fraction
        series_length: Number of historical games behind the projection
        volatility: Volatility bucket of the series

    Returns:
        Integer score clamped to [MIN_CONFIDENCE, MAX_CONFIDENCE]
    """
    prob_strength = abs(probability - 0.5) * 2
    sample_strength = clamp(series_length / config.SAMPLE_SATURATION, 0.0, 1.0)
    penalty = {
        Volatility.LOW: config.LOW_PENALTY,
        Volatility.MODERATE: config.MODERATE_PENALTY,
        Volatility.HIGH: config.HIGH_PENALTY,
    }[volatility]

    blend = config.PROBABILITY_WEIGHT * prob_strength + config.SAMPLE_WEIGHT * sample_strength
    score = round(100 * blend * penalty)
    return int(clamp(score, config.MIN_CONFIDENCE, config.MAX_CONFIDENCE))


def build_histogram(samples: np.ndarray, bins: int = 12) -> List[HistogramBin]:
    """Equal-width histogram over [min, max]; a single bin when all samples match."""
    if len(samples) == 0:
        return []
    low = float(np.min(samples))
    high = float(np.max(samples))
    if low == high:
        return [HistogramBin(lower=low, upper=high, count=int(len(samples)))]

    width = (high - low) / bins
    # The maximum lands in the last bin
    idx = np.clip(np.floor((samples - low) / width).astype(int), 0, bins - 1)
    counts = np.bincount(idx, minlength=bins)
    return [
        HistogramBin(lower=low + i * width, upper=low + (i + 1) * width, count=int(counts[i]))
        for i in range(bins)
    ]


def normal_cdf(x: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """Normal CDF via the error function."""
    if sigma <= 0:
        return 1.0 if x >= mu else 0.0
    return 0.5 * (1.0 + math.erf((x - mu) / (sigma * math.sqrt(2.0))))
