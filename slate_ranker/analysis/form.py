"""Recent-form report: lookback averages, blended projection, notes and warnings."""

from typing import Optional, Sequence

from ..config import FORM_CONFIG, FormConfig
from ..data.series import playable_games
from ..models import ChartPoint, Direction, FormReport, GameStatRecord, StatKey
from ..simulation.statistics import clamp, mean, normal_cdf, sample_stdev


def blended_projection(values10: Sequence[float], values5: Sequence[float],
                       minutes10: Sequence[float], expected_minutes: Optional[float] = None,
                       config: FormConfig = FORM_CONFIG) -> dict:
    """
    Blend the last 5 and last 10 games into a single projection.

    Recent form is weighted toward L5, scaled gently by expected minutes
    relative to the L10 average, then pulled back toward L10 when volatile.
    """
    l10 = mean(values10)
    l5 = mean(values5)
    base = config.SHORT_WEIGHT * l5 + config.LONG_WEIGHT * l10

    min_avg10 = mean(minutes10) or 1.0
    expected = expected_minutes if expected_minutes is not None else min_avg10
    low, high = config.MINUTES_FACTOR_RANGE
    minutes_factor = clamp(expected / min_avg10, low, high)

    sd10 = sample_stdev(values10)
    cv = sd10 / l10 if l10 > 0 else 0.0
    pull = clamp(cv * config.VOLATILITY_PULL_RATE, 0.0, config.MAX_VOLATILITY_PULL)
    projection = (1 - pull) * base * minutes_factor + pull * l10

    return {
        'projection': projection,
        'l10': l10,
        'l5': l5,
        'min_avg10': min_avg10,
        'sd10': sd10,
        'cv': cv,
        'minutes_factor': minutes_factor,
    }


def blended_probability(values10: Sequence[float], line: float, over: bool = True,
                        config: FormConfig = FORM_CONFIG) -> float:
    """Blend the empirical hit rate with a normal approximation. Pushes are non-hits."""
    if not values10:
        return 0.5
    hit_rate = _hit_rate(values10, line, over)

    sd = sample_stdev(values10) or 1.0
    p_over = 1.0 - normal_cdf(line, mean(values10), sd)
    p_normal = p_over if over else 1.0 - p_over

    blended = config.HIT_RATE_WEIGHT * hit_rate + config.NORMAL_WEIGHT * p_normal
    return clamp(blended, *config.PROBABILITY_RANGE)


def form_confidence(probability: float, cv: float, minutes_stdev: float,
                    config: FormConfig = FORM_CONFIG) -> int:
    """Probability as a 0-100 score, docked for stat volatility and unstable minutes."""
    score = probability * 100
    score -= clamp(cv * config.CV_PENALTY_RATE, 0.0, config.MAX_CV_PENALTY)
    score -= clamp(minutes_stdev * config.MINUTES_PENALTY_RATE, 0.0, config.MAX_MINUTES_PENALTY)
    return int(clamp(round(score), *config.CONFIDENCE_RANGE))


def _hit_rate(values: Sequence[float], line: float, over: bool) -> float:
    if not values:
        return 0.0
    hits = sum(1 for v in values if (v > line if over else v < line))
    return hits / len(values)


def build_form_report(records: Sequence[GameStatRecord], stat_key, line: float,
                      direction=Direction.OVER,
                      expected_minutes: Optional[float] = None,
                      config: FormConfig = FORM_CONFIG) -> FormReport:
    """
    Summarize recent form for one player and stat.

    Args:
        records: Game logs in any order
        stat_key: StatKey or stat code
        line: Sportsbook line
        direction: Side the hit rate and probability are reported for
        expected_minutes: Minutes expected tonight, if known

    Returns:
        FormReport with the chart ordered newest first
    """
    key = StatKey.parse(stat_key)
    over = Direction.parse(direction) == Direction.OVER
    games = playable_games(records)
    last10 = games[:config.LONG_WINDOW]
    last5 = games[:config.SHORT_WINDOW]

    values10 = [g.value_for(key) for g in last10]
    values5 = [g.value_for(key) for g in last5]
    minutes10 = [g.minutes_played for g in last10]
    minutes_sd = sample_stdev(minutes10)

    blend = blended_projection(values10, values5, minutes10, expected_minutes, config)
    l5, l10 = blend['l5'], blend['l10']

    notes, warnings = [], []
    if l5 > l10 + config.TREND_THRESHOLD:
        notes.append(f"Trending up: {l5:.1f} avg L5 vs {l10:.1f} L10")
    if l5 + config.TREND_THRESHOLD < l10:
        notes.append(f"Cooling off: {l5:.1f} avg L5 vs {l10:.1f} L10")

    if minutes_sd >= config.MINUTES_STDEV_WARNING:
        warnings.append("High minutes volatility")
    if blend['cv'] >= config.CV_WARNING:
        warnings.append("High stat volatility")

    if blend['minutes_factor'] > config.MINUTES_BUMP:
        notes.append("Opportunity bump (expected minutes up)")
    if blend['minutes_factor'] < config.MINUTES_RISK:
        warnings.append("Opportunity risk (expected minutes down)")

    probability = blended_probability(values10, line, over, config)

    chart = [
        ChartPoint(
            date=g.date.isoformat() if g.date else "",
            value=v,
            minutes=g.minutes_played,
            over_line=v > line,
        )
        for g, v in zip(last10, values10)
    ]

    return FormReport(
        l5_avg=round(l5, 1),
        l10_avg=round(l10, 1),
        minutes_avg10=round(blend['min_avg10'], 1) if minutes10 else 0.0,
        blended_projection=round(blend['projection'], 1),
        minutes_factor=round(blend['minutes_factor'], 3),
        cv=round(blend['cv'], 3),
        hit_rate10=round(_hit_rate(values10, line, over), 3),
        blended_probability=round(probability, 3),
        confidence=form_confidence(probability, blend['cv'], minutes_sd, config),
        notes=notes,
        warnings=warnings,
        chart=chart,
    )
