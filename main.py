#!/usr/bin/env python3
"""
Slate Ranker Pipeline
Project every prop on a slate and rank by confidence and edge
"""

import sys
from pathlib import Path
from typing import Optional

import click
from loguru import logger

from slate_ranker.analysis import SlateAnalyzer, SlateReport
from slate_ranker.config import load_settings
from slate_ranker.data import InMemoryLogProvider, load_game_logs, load_slate


class SlatePipeline:
    """Main pipeline orchestrator for slate ranking"""

    def __init__(self, slate_path: str, logs_path: str, env_file: Optional[str] = None):
        self.slate_path = Path(slate_path)
        self.logs_path = Path(logs_path)
        self.settings = load_settings(env_file)

    def run(self) -> SlateReport:
        """Execute the full pipeline"""
        logger.info(f"Starting slate ranking for {self.slate_path}")

        print("\n" + "=" * 60)
        print("STEP 1: LOADING DATA")
        print("=" * 60)
        props = load_slate(str(self.slate_path), default_last_n=self.settings.lookback)
        logs = load_game_logs(str(self.logs_path))
        print(f"📄 {len(props)} props, game logs for {len(logs)} players")

        print("\n" + "=" * 60)
        print("STEP 2: RUNNING SIMULATIONS")
        print("=" * 60)
        analyzer = SlateAnalyzer(InMemoryLogProvider(logs, name=self.logs_path.name),
                                 settings=self.settings)
        report = analyzer.analyze(props)

        print("\n" + "=" * 60)
        print("STEP 3: RANKED PROPS")
        print("=" * 60)
        if report.ranked:
            print(report.to_frame().to_string(index=False))
        else:
            print("❌ No props could be projected")

        for skipped in report.skipped:
            print(f"⚠️ Skipped {skipped.prop.player_name} {skipped.prop.stat_key.value}: {skipped.reason}")

        return report


@click.command()
@click.option('--slate', 'slate_path', required=True, help='Slate file (CSV or JSON)')
@click.option('--logs', 'logs_path', required=True, help='Game log file (CSV or JSON)')
@click.option('--output', 'output_path', default=None, help='Optional CSV path for the ranked table')
@click.option('--env-file', default=None, help='Optional .env file with SLATE_RANKER_* settings')
def main(slate_path: str, logs_path: str, output_path: Optional[str] = None,
         env_file: Optional[str] = None):
    """Rank a slate of player props"""
    try:
        pipeline = SlatePipeline(slate_path, logs_path, env_file)
        logger.remove()
        logger.add(sys.stderr, level=pipeline.settings.log_level)
        report = pipeline.run()

        if output_path:
            report.to_frame().to_csv(output_path, index=False)
            print(f"\n✅ Ranked props saved to: {output_path}")
    except KeyboardInterrupt:
        print("\n\n⚠️ Pipeline interrupted by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Pipeline failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
