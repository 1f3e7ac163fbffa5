from datetime import date, timedelta

import pytest

from slate_ranker.analysis import SlateAnalyzer, rank
from slate_ranker.config import Settings
from slate_ranker.data import FallbackLogProvider, InMemoryLogProvider
from slate_ranker.exceptions import LogProviderError
from slate_ranker.models import GameStatRecord, RankedProp, SlateProp, Volatility
from slate_ranker.models.projection import ProjectionResult


def _games(points, minutes=30.0):
    start = date(2025, 3, 1)
    return [
        GameStatRecord(date=start + timedelta(days=i), minutes_played=minutes, stats={'pts': p, 'reb': 5, 'ast': 5})
        for i, p in enumerate(points)
    ]


def _result(confidence, edge):
    return ProjectionResult(
        projection=20.0, probability=60.0, edge=edge, floor=15.0, median=20.0,
        ceiling=25.0, stdev=3.0, volatility=Volatility.LOW, confidence=confidence,
    )


def _prop(prop_id, player_id, line=20.5, stat="PTS", pick="OVER"):
    return SlateProp(prop_id=prop_id, player_name=f"Player {player_id}", stat_key=stat,
                     line=line, pick=pick, player_id=player_id)


@pytest.fixture
def provider():
    return InMemoryLogProvider({
        'steady': _games([30, 31, 29, 30, 32, 28, 30, 31, 29, 30, 31, 30]),
        'volatile': _games([5, 40, 8, 35, 2, 38, 6, 33, 4, 36]),
        'rookie': _games([12, 14, 11]),
    })


def test_rank_orders_by_confidence_then_edge():
    a = RankedProp(prop=_prop('a', 'x'), result=_result(50, 1.0), games=10)
    b = RankedProp(prop=_prop('b', 'x'), result=_result(50, 3.0), games=10)
    c = RankedProp(prop=_prop('c', 'x'), result=_result(70, -1.0), games=10)
    assert [r.prop.prop_id for r in rank([a, b, c])] == ['c', 'b', 'a']


def test_rank_keeps_input_order_for_ties():
    a = RankedProp(prop=_prop('a', 'x'), result=_result(50, 1.0), games=10)
    b = RankedProp(prop=_prop('b', 'x'), result=_result(50, 1.0), games=10)
    assert [r.prop.prop_id for r in rank([a, b])] == ['a', 'b']


def test_analyze_ranks_projectable_props_and_skips_the_rest(provider):
    analyzer = SlateAnalyzer(provider, settings=Settings(seed=7, min_games=5))
    props = [
        _prop('1', 'volatile', line=20.5),
        _prop('2', 'steady', line=25.5),
        _prop('3', 'rookie', line=12.5),
        _prop('4', 'unknown'),
        _prop('5', None),
    ]
    report = analyzer.analyze(props)

    assert [r.prop.prop_id for r in report.ranked] == ['2', '1']
    assert report.ranked[0].games == 10
    assert report.ranked[0].form is not None

    reasons = {s.prop.prop_id: s.reason for s in report.skipped}
    assert set(reasons) == {'3', '4', '5'}
    assert "Only 3 playable games" in reasons['3']
    assert "unknown" in reasons['4']
    assert "No player id" in reasons['5']


def test_last_n_truncates_series(provider):
    analyzer = SlateAnalyzer(provider, settings=Settings(seed=7, min_games=1))
    prop = SlateProp(prop_id='x', player_name='Steady', stat_key='PTS', line=25.5,
                     pick='OVER', player_id='steady', last_n=5)
    assert analyzer.analyze_prop(prop).games == 5


def test_slate_frame_has_one_row_per_ranked_prop(provider):
    analyzer = SlateAnalyzer(provider, settings=Settings(seed=3, min_games=5))
    report = analyzer.analyze([_prop('1', 'steady', line=25.5), _prop('2', 'volatile')])
    df = report.to_frame()
    assert list(df['rank']) == [1, 2]
    assert {'player', 'stat', 'pick', 'line', 'confidence', 'edge'} <= set(df.columns)


class _Failing:
    name = "primary"

    def fetch(self, player_id, last_n):
        raise RuntimeError("timeout")


class _Recording:
    name = "recording"

    def __init__(self, records):
        self.records = records
        self.calls = 0

    def fetch(self, player_id, last_n):
        self.calls += 1
        return self.records


def test_fallback_uses_first_success_and_records_failures():
    backup = _Recording(_games([10, 12]))
    chain = FallbackLogProvider([_Failing(), backup])
    assert len(chain.fetch('p', 10)) == 2
    assert [(a.strategy, a.error) for a in chain.last_attempts] == [("primary", "timeout")]


def test_fallback_empty_result_short_circuits():
    first = _Recording([])
    second = _Recording(_games([10]))
    chain = FallbackLogProvider([first, second])
    assert chain.fetch('p', 10) == []
    assert second.calls == 0


def test_fallback_raises_with_every_attempt():
    chain = FallbackLogProvider([_Failing(), _Failing()], names=["auth-header", "season-retry"])
    with pytest.raises(LogProviderError) as exc_info:
        chain.fetch('p', 10)
    assert [a.strategy for a in exc_info.value.attempts] == ["auth-header", "season-retry"]
    assert "timeout" in str(exc_info.value)


def test_analyzer_skips_when_every_provider_fails():
    analyzer = SlateAnalyzer(FallbackLogProvider([_Failing()]), settings=Settings(min_games=1))
    report = analyzer.analyze([_prop('1', 'anyone')])
    assert report.ranked == []
    assert "primary: timeout" in report.skipped[0].reason


def test_fallback_names_must_match_strategies():
    with pytest.raises(ValueError, match="1 names for 2 strategies"):
        FallbackLogProvider([_Failing(), _Failing()], names=["only-one"])


def test_analyzer_skips_non_positive_lookback(provider):
    analyzer = SlateAnalyzer(provider, settings=Settings(min_games=1))
    prop = SlateProp(prop_id='z', player_name='Steady', stat_key='PTS', line=25.5,
                     pick='OVER', player_id='steady', last_n=0)
    report = analyzer.analyze([prop])
    assert report.ranked == []
    assert "Lookback window" in report.skipped[0].reason
