"""Rank a slate of props by confidence and edge."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import pandas as pd
from loguru import logger

from ..config import Settings
from ..data.providers import GameLogProvider
from ..data.series import prepare_series
from ..exceptions import InvalidPropError, LogProviderError, ProviderAttempt, SlateRankerError
from ..models import ProjectionInput, RankedProp, SkippedProp, SlateProp
from ..simulation import ProjectionEngine
from ..validation import validate_projection_input
from .form import build_form_report

# Always fetch at least this many games so the form report has a full L10
MIN_FETCH = 10


def rank(ranked: Iterable[RankedProp]) -> List[RankedProp]:
    """Best confidence first, then best edge. Ties keep input order."""
    return sorted(ranked, key=lambda r: r.sort_key, reverse=True)


@dataclass
class SlateReport:
    """Ranked props plus the ones that could not be projected."""
    ranked: List[RankedProp] = field(default_factory=list)
    skipped: List[SkippedProp] = field(default_factory=list)

    def to_frame(self) -> pd.DataFrame:
        rows = []
        for i, r in enumerate(self.ranked, 1):
            res = r.result
            rows.append({
                'rank': i,
                'player': r.prop.player_name,
                'stat': r.prop.stat_key.value,
                'pick': r.prop.pick.value,
                'line': r.prop.line,
                'projection': res.projection,
                'probability': res.probability,
                'edge': res.edge,
                'floor': res.floor,
                'median': res.median,
                'ceiling': res.ceiling,
                'volatility': res.volatility.value,
                'confidence': res.confidence,
                'games': r.games,
            })
        return pd.DataFrame(rows)


class SlateAnalyzer:
    """Fetch logs, project every prop and rank the results."""

    def __init__(self, provider: GameLogProvider,
                 engine: Optional[ProjectionEngine] = None,
                 settings: Optional[Settings] = None):
        """
        Initialize analyzer.

        Args:
            provider: Source of game logs by player id
            engine: Projection engine (default config when omitted)
            settings: Simulation count, seed and minimum games
        """
        self.provider = provider
        self.engine = engine or ProjectionEngine()
        self.settings = settings or Settings()

    def analyze_prop(self, prop: SlateProp) -> RankedProp:
        """Project one prop. Raises SlateRankerError when it cannot be projected."""
        if not prop.player_id:
            raise InvalidPropError(f"No player id for {prop.player_name}")
        validate_projection_input(prop.line, prop.pick, self.settings.simulations, prop.stat_key, prop.last_n)

        records = self._fetch(prop)
        series = prepare_series(records, prop.stat_key).last(prop.last_n)

        if len(series) < self.settings.min_games:
            raise InvalidPropError(
                f"Only {len(series)} playable games for {prop.player_name} "
                f"(need {self.settings.min_games})"
            )

        result = self.engine.project(ProjectionInput(
            series=series,
            line=prop.line,
            direction=prop.pick,
            simulation_count=self.settings.simulations,
            seed=self.settings.seed,
        ))
        form = build_form_report(records, prop.stat_key, prop.line, prop.pick)
        return RankedProp(prop=prop, result=result, games=len(series), form=form)

    def _fetch(self, prop: SlateProp):
        try:
            return self.provider.fetch(prop.player_id, max(MIN_FETCH, prop.last_n))
        except LogProviderError:
            raise
        except Exception as e:
            name = getattr(self.provider, "name", type(self.provider).__name__)
            raise LogProviderError(prop.player_id, [ProviderAttempt(strategy=name, error=str(e))]) from e

    def analyze(self, props: Iterable[SlateProp]) -> SlateReport:
        """Project and rank a slate. One bad prop never aborts the rest."""
        report = SlateReport()
        for prop in props:
            try:
                report.ranked.append(self.analyze_prop(prop))
            except SlateRankerError as e:
                logger.warning(f"Skipping {prop}: {e}")
                report.skipped.append(SkippedProp(prop=prop, reason=str(e)))

        report.ranked = rank(report.ranked)
        logger.info(f"Ranked {len(report.ranked)} props, skipped {len(report.skipped)}")
        return report
