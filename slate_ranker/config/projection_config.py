"""Configuration constants for the projection engine."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class SimulationConfig:
    """Monte Carlo simulation parameters."""
    DEFAULT_SIMULATIONS: int = 5000
    MIN_SIMULATIONS: int = 1000
    MAX_SIMULATIONS: int = 20000
    DISPLAY_DECIMALS: int = 1  # Samples are rounded to what the user sees

    # Spread used when the series has no variance: max(absolute, fraction * |mean|)
    MIN_SPREAD_ABSOLUTE: float = 0.75
    MIN_SPREAD_FRACTION: float = 0.10

    FLOOR_PERCENTILE: float = 0.10
    MEDIAN_PERCENTILE: float = 0.50
    CEILING_PERCENTILE: float = 0.90

    HISTOGRAM_BINS: int = 12
    PREVIEW_SIZE: int = 50


@dataclass
class VolatilityConfig:
    """Coefficient of variation thresholds."""
    LOW_CV: float = 0.30  # cv below this is LOW
    HIGH_CV: float = 0.55  # cv at or above this is HIGH


@dataclass
class ConfidenceConfig:
    """Confidence score weights (empirical tuning knobs)."""
    PROBABILITY_WEIGHT: float = 0.65
    SAMPLE_WEIGHT: float = 0.35
    SAMPLE_SATURATION: int = 20  # Games needed for full sample strength

    # Multiplicative penalty by volatility bucket
    LOW_PENALTY: float = 1.0
    MODERATE_PENALTY: float = 0.75
    HIGH_PENALTY: float = 0.55

    MIN_CONFIDENCE: int = 1
    MAX_CONFIDENCE: int = 99


@dataclass
class FormConfig:
    """Recent-form blend parameters."""
    SHORT_WINDOW: int = 5
    LONG_WINDOW: int = 10

    SHORT_WEIGHT: float = 0.62
    LONG_WEIGHT: float = 0.38

    MINUTES_FACTOR_RANGE: Tuple[float, float] = (0.80, 1.25)
    VOLATILITY_PULL_RATE: float = 0.15
    MAX_VOLATILITY_PULL: float = 0.12

    # Hit rate gets slightly more weight than the normal approximation
    HIT_RATE_WEIGHT: float = 0.6
    NORMAL_WEIGHT: float = 0.4
    PROBABILITY_RANGE: Tuple[float, float] = (0.05, 0.95)

    TREND_THRESHOLD: float = 0.35
    MINUTES_STDEV_WARNING: float = 6.0
    CV_WARNING: float = 0.45
    MINUTES_BUMP: float = 1.08
    MINUTES_RISK: float = 0.92

    # Form confidence: probability * 100 minus volatility penalties
    CV_PENALTY_RATE: float = 40.0
    MAX_CV_PENALTY: float = 22.0
    MINUTES_PENALTY_RATE: float = 1.2
    MAX_MINUTES_PENALTY: float = 18.0
    CONFIDENCE_RANGE: Tuple[int, int] = (1, 99)


# Default instances
SIMULATION_CONFIG = SimulationConfig()
VOLATILITY_CONFIG = VolatilityConfig()
CONFIDENCE_CONFIG = ConfidenceConfig()
FORM_CONFIG = FormConfig()
