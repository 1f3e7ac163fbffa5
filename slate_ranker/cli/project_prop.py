#!/usr/bin/env python3
"""
🎯 PROP PROJECTOR
Run a Monte Carlo projection for a single player prop.

Usage:
    python -m slate_ranker.cli.project_prop --logs logs.csv --player 237 --stat PRA --line 38.5
    python -m slate_ranker.cli.project_prop --logs logs.json --player 237 --stat REB --line 9.5 --pick UNDER --seed 7

This script:
    ✅ Loads game logs (CSV or JSON)
    ✅ Builds the stat series from playable games
    ✅ Simulates the stat against the line
    ✅ Prints projection, percentiles, confidence and histogram
"""

import argparse
import sys
from typing import List, Optional

from loguru import logger

from slate_ranker.analysis import build_form_report
from slate_ranker.config import load_settings
from slate_ranker.data import load_game_logs, prepare_series
from slate_ranker.exceptions import SlateRankerError
from slate_ranker.models import Direction, ProjectionInput, ProjectionResult, StatKey
from slate_ranker.simulation import ProjectionEngine
from slate_ranker.validation import validate_projection_input


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="🎯 Prop Projector - Monte Carlo projection for one player prop",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--logs', type=str, required=True,
                        help='Game log file (CSV or JSON)')
    parser.add_argument('--player', type=str, required=True,
                        help='Player id as it appears in the log file')
    parser.add_argument('--stat', type=str, required=True,
                        choices=[k.value for k in StatKey],
                        help='Stat to project')
    parser.add_argument('--line', type=float, required=True,
                        help='Sportsbook line')
    parser.add_argument('--pick', type=str, default='OVER',
                        choices=[d.value for d in Direction],
                        help='Pick direction (default: OVER)')
    parser.add_argument('--last-n', type=int, default=None,
                        help='Lookback window in games (default: settings lookback)')
    parser.add_argument('--simulations', type=int, default=None,
                        help='Number of simulations (default: settings)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible output')
    return parser


def display_result(result: ProjectionResult, stat: str, line: float, pick: str, games: int):
    """Print a projection summary."""
    print(f"\n📊 {stat} {pick} {line}  ({games} games, {result.simulations:,} sims)")
    print("=" * 60)
    print(f"Projection:  {result.projection:.1f}")
    print(f"Probability: {result.probability:.1f}%")
    print(f"Edge:        {result.edge:+.1f}")
    print(f"Range:       {result.floor:.1f} / {result.median:.1f} / {result.ceiling:.1f} (p10/p50/p90)")
    print(f"Stdev:       {result.stdev:.1f} ({result.volatility.value} volatility)")
    print(f"Confidence:  {result.confidence}")

    print("\nDistribution:")
    peak = max((b.count for b in result.histogram), default=0) or 1
    for b in result.histogram:
        bar = "█" * int(30 * b.count / peak)
        print(f"  {b.lower:6.1f} - {b.upper:6.1f} | {bar} {b.count}")


def main(argv: Optional[List[str]] = None) -> int:
    """Single prop projection workflow."""
    args = build_parser().parse_args(argv)
    settings = load_settings()
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)

    last_n = args.last_n if args.last_n is not None else settings.lookback
    simulations = args.simulations if args.simulations is not None else settings.simulations
    seed = args.seed if args.seed is not None else settings.seed

    try:
        validate_projection_input(args.line, args.pick, simulations, args.stat, last_n)
        logs = load_game_logs(args.logs)
        if args.player not in logs:
            print(f"❌ No game logs for player {args.player} in {args.logs}")
            return 1

        records = logs[args.player]
        series = prepare_series(records, args.stat).last(last_n)
        if len(series) < settings.min_games:
            print(f"⚠️ Only {len(series)} playable games (settings ask for {settings.min_games})")

        result = ProjectionEngine().project(ProjectionInput(
            series=series,
            line=args.line,
            direction=args.pick,
            simulation_count=simulations,
            seed=seed,
        ))
        display_result(result, args.stat, args.line, args.pick, len(series))

        form = build_form_report(records, args.stat, args.line, args.pick)
        print(f"📋 Form confidence: {form.confidence} (L5 {form.l5_avg:.1f}, L10 {form.l10_avg:.1f})")
        for note in form.notes:
            print(f"📈 {note}")
        for warning in form.warnings:
            print(f"⚠️ {warning}")
        return 0

    except (SlateRankerError, FileNotFoundError, ValueError) as e:
        print(f"❌ Error during projection: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
