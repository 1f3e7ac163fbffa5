"""Monte Carlo projection engine for player stat props."""

import logging
import math
from typing import Optional, Sequence

import numpy as np

from ..config import (
    CONFIDENCE_CONFIG,
    SIMULATION_CONFIG,
    VOLATILITY_CONFIG,
    ConfidenceConfig,
    SimulationConfig,
    VolatilityConfig,
)
from ..models import Direction, ProjectionInput, ProjectionResult
from .statistics import (
    build_histogram,
    classify_volatility,
    confidence_score,
    mean,
    percentile,
    sample_stdev,
)

logger = logging.getLogger(__name__)


class ProjectionEngine:
    """
    Project a stat series against a line with a Normal(mean, stdev) simulation.

    The engine is a pure function of its input: no I/O and no shared state.
    Each call builds its own random generator, seeded when a seed is given.
    """

    def __init__(self,
                 simulation_config: SimulationConfig = SIMULATION_CONFIG,
                 volatility_config: VolatilityConfig = VOLATILITY_CONFIG,
                 confidence_config: ConfidenceConfig = CONFIDENCE_CONFIG):
        self.simulation_config = simulation_config
        self.volatility_config = volatility_config
        self.confidence_config = confidence_config

    def project(self, projection_input: ProjectionInput) -> ProjectionResult:
        """
        Run the simulation and summarize it.

        Args:
            projection_input: Series, line, direction and simulation settings

        Returns:
            ProjectionResult with numbers rounded to display precision
        """
        cfg = self.simulation_config
        series = self.clean_series(projection_input.series)
        line = float(projection_input.line)
        direction = projection_input.direction

        n = len(series)
        m = mean(series)
        sd = sample_stdev(series)
        sim_sd = self.simulation_spread(m, sd)
        n_sims = self.simulation_count(projection_input.simulation_count)

        floor_clamp = float(projection_input.floor_clamp)
        if not math.isfinite(floor_clamp):
            floor_clamp = 0.0

        rng = np.random.default_rng(projection_input.seed)
        samples = self.simulate(m, sim_sd, n_sims, floor_clamp, rng)

        hits = self.count_hits(samples, line, direction)
        probability = hits / n_sims

        ordered = np.sort(samples)
        p10 = percentile(ordered, cfg.FLOOR_PERCENTILE)
        p50 = percentile(ordered, cfg.MEDIAN_PERCENTILE)
        p90 = percentile(ordered, cfg.CEILING_PERCENTILE)

        projection = float(samples.mean())
        edge = projection - line if direction == Direction.OVER else line - projection

        volatility = classify_volatility(sd, m, self.volatility_config)
        if n == 0:
            # No history at all: report the floor instead of trusting the simulation
            confidence = self.confidence_config.MIN_CONFIDENCE
        else:
            confidence = confidence_score(probability, n, volatility, self.confidence_config)

        histogram = build_histogram(samples, cfg.HISTOGRAM_BINS)

        return ProjectionResult(
            projection=self._display(projection),
            probability=round(probability * 100, cfg.DISPLAY_DECIMALS),
            edge=self._display(edge),
            floor=self._display(p10),
            median=self._display(p50),
            ceiling=self._display(p90),
            stdev=self._display(sd),
            volatility=volatility,
            confidence=confidence,
            histogram=tuple(histogram),
            simulations=n_sims,
            samples_preview=tuple(float(s) for s in ordered[:cfg.PREVIEW_SIZE]),
        )

    def clean_series(self, series: Sequence[float]) -> np.ndarray:
        """Coerce non-finite values to 0 and drop negatives."""
        values = np.asarray(list(series), dtype=float)
        if values.size == 0:
            return values

        non_finite = ~np.isfinite(values)
        if non_finite.any():
            logger.warning(f"Coerced {int(non_finite.sum())} non-finite values to 0")
            values = np.where(non_finite, 0.0, values)

        negative = values < 0
        if negative.any():
            logger.warning(f"Dropped {int(negative.sum())} negative values from series")
            values = values[~negative]
        return values

    def simulation_spread(self, m: float, sd: float) -> float:
        """Spread to simulate with. A flat series still gets a spread that scales with its mean."""
        if sd > 0:
            return sd
        cfg = self.simulation_config
        spread = max(cfg.MIN_SPREAD_ABSOLUTE, abs(m) * cfg.MIN_SPREAD_FRACTION)
        logger.debug(f"Zero stdev series (mean {m:.2f}), using minimum spread {spread:.2f}")
        return spread

    def simulation_count(self, requested: Optional[int]) -> int:
        cfg = self.simulation_config
        try:
            count = int(requested)
        except (TypeError, ValueError, OverflowError):
            count = cfg.DEFAULT_SIMULATIONS
        clamped = max(cfg.MIN_SIMULATIONS, min(cfg.MAX_SIMULATIONS, count))
        if clamped != count:
            logger.info(f"Clamped simulation count {count} to {clamped}")
        return clamped

    def simulate(self, m: float, sd: float, n_sims: int, floor_clamp: float,
                 rng: np.random.Generator) -> np.ndarray:
        """Draw Normal(m, sd) samples, clamp at the floor and round to display precision."""
        samples = rng.normal(m, sd, n_sims)
        samples = np.maximum(samples, floor_clamp)
        return np.round(samples, self.simulation_config.DISPLAY_DECIMALS)

    @staticmethod
    def count_hits(samples: np.ndarray, line: float, direction: Direction) -> int:
        """Strict comparison; samples equal to the line are pushes and never hit."""
        if direction == Direction.OVER:
            return int(np.count_nonzero(samples > line))
        return int(np.count_nonzero(samples < line))

    def _display(self, value: float) -> float:
        return round(float(value), self.simulation_config.DISPLAY_DECIMALS)


def monte_carlo_project(series: Sequence[float],
                        line: float,
                        direction=Direction.OVER,
                        simulations: int = SIMULATION_CONFIG.DEFAULT_SIMULATIONS,
                        floor_clamp: float = 0.0,
                        seed: Optional[int] = None,
                        engine: Optional[ProjectionEngine] = None) -> ProjectionResult:
    """Convenience wrapper around ProjectionEngine.project."""
    engine = engine or ProjectionEngine()
    return engine.project(ProjectionInput(
        series=series,
        line=line,
        direction=direction,
        simulation_count=simulations,
        floor_clamp=floor_clamp,
        seed=seed,
    ))
