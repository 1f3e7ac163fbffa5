import math

import numpy as np
import pytest

from slate_ranker import monte_carlo_project
from slate_ranker.config import SimulationConfig
from slate_ranker.models import Direction, ProjectionInput, StatSeries, Volatility
from slate_ranker.simulation import ProjectionEngine

SCENARIO_A = [30, 32, 28, 31, 29, 33, 27, 30, 31, 29]
SCENARIO_B = [5, 20, 2, 18, 4, 22, 1, 19]


def test_scenario_a_consistent_scorer_over():
    result = monte_carlo_project(SCENARIO_A, 28.5, Direction.OVER)
    assert result.projection == pytest.approx(30.0, abs=0.5)
    assert result.probability > 70
    assert result.volatility is Volatility.LOW
    assert result.stdev == pytest.approx(1.8, abs=0.05)
    assert result.edge == pytest.approx(result.projection - 28.5, abs=0.11)


def test_scenario_b_volatile_series_has_lower_confidence():
    steady = monte_carlo_project(SCENARIO_A, 28.5, "OVER")
    volatile = monte_carlo_project(SCENARIO_B, 10, "OVER")
    assert volatile.volatility is Volatility.HIGH
    assert volatile.confidence < steady.confidence - 20


def test_scenario_c_empty_series_still_projects():
    result = monte_carlo_project([], 10, Direction.OVER)
    assert result.confidence == 1
    assert result.probability == 0.0
    assert result.stdev == 0.0
    assert result.floor <= result.median <= result.ceiling
    assert sum(b.count for b in result.histogram) == result.simulations


def test_single_game_uses_spread_that_scales_with_mean():
    engine = ProjectionEngine()
    assert engine.simulation_spread(12.0, 0.0) == pytest.approx(1.2)
    assert engine.simulation_spread(40.0, 0.0) == pytest.approx(4.0)
    assert engine.simulation_spread(2.0, 0.0) == pytest.approx(0.75)
    assert engine.simulation_spread(20.0, 3.5) == 3.5

    result = monte_carlo_project([40], 39.5, Direction.OVER)
    assert result.stdev == 0.0
    assert result.ceiling - result.floor > 5


@pytest.mark.parametrize("series", [SCENARIO_A, SCENARIO_B, [0, 0, 1], [4], []])
@pytest.mark.parametrize("direction", [Direction.OVER, Direction.UNDER])
def test_result_bounds_hold(series, direction):
    result = monte_carlo_project(series, 10.5, direction)
    assert 0 <= result.probability <= 100
    assert 1 <= result.confidence <= 99
    assert result.floor <= result.median <= result.ceiling


def test_over_far_below_line_is_near_certain():
    result = monte_carlo_project(SCENARIO_B, -1000, Direction.OVER)
    assert result.probability > 99


def test_under_far_above_line_is_near_certain():
    result = monte_carlo_project(SCENARIO_A, 1000, Direction.UNDER)
    assert result.probability > 99
    assert result.edge > 900


def test_edge_is_positive_when_model_favors_pick():
    over = monte_carlo_project(SCENARIO_A, 25, Direction.OVER, seed=4)
    under = monte_carlo_project(SCENARIO_A, 25, Direction.UNDER, seed=4)
    assert over.edge > 0
    assert under.edge == pytest.approx(-over.edge)


def test_pushes_count_for_neither_side():
    # Flat series at the line: rounded samples often land exactly on 10.0
    over = monte_carlo_project([10, 10, 10], 10, Direction.OVER, seed=21)
    under = monte_carlo_project([10, 10, 10], 10, Direction.UNDER, seed=21)
    assert over.probability + under.probability < 100


def test_count_hits_is_strict():
    samples = np.array([9.9, 10.0, 10.0, 10.1, 12.0])
    assert ProjectionEngine.count_hits(samples, 10.0, Direction.OVER) == 2
    assert ProjectionEngine.count_hits(samples, 10.0, Direction.UNDER) == 1


def test_seeded_runs_are_identical():
    projection_input = ProjectionInput(
        series=StatSeries((22, 18, 25, 30, 19, 24)),
        line=22.5,
        direction=Direction.UNDER,
        seed=1234,
    )
    engine = ProjectionEngine()
    assert engine.project(projection_input) == engine.project(projection_input)


def test_histogram_sums_to_simulation_count():
    result = monte_carlo_project(SCENARIO_B, 10, Direction.OVER, simulations=5000)
    assert result.simulations == 5000
    assert len(result.histogram) == 12
    assert sum(b.count for b in result.histogram) == 5000


@pytest.mark.parametrize("requested,expected", [
    (10, 1000),
    (0, 1000),
    (-5, 1000),
    (7000, 7000),
    (50000, 20000),
    (math.inf, 5000),
    (float('nan'), 5000),
])
def test_simulation_count_is_clamped(requested, expected):
    result = monte_carlo_project(SCENARIO_A, 28.5, Direction.OVER, simulations=requested, seed=1)
    assert result.simulations == expected
    assert sum(b.count for b in result.histogram) == expected


def test_samples_are_clamped_and_rounded():
    result = monte_carlo_project([0, 1, 0, 2, 0], 0.5, Direction.OVER, seed=9)
    assert result.floor >= 0
    assert result.histogram[0].lower >= 0
    preview = result.samples_preview
    assert len(preview) == 50
    assert all(v >= 0 for v in preview)
    assert all(round(v, 1) == v for v in preview)
    # Preview holds the lowest draws, in ascending order
    assert list(preview) == sorted(preview)
    assert preview[0] == result.histogram[0].lower


def test_custom_floor_clamp():
    result = monte_carlo_project([3, 5, 4, 6], 4, Direction.OVER, floor_clamp=2.0, seed=3)
    assert min(result.samples_preview) >= 2.0
    assert result.histogram[0].lower >= 2.0


def test_non_finite_values_are_coerced_to_zero():
    result = monte_carlo_project([10, math.nan, math.inf, 12], 5, Direction.OVER, seed=2)
    # Sample stdev of [10, 0, 0, 12]
    assert result.stdev == pytest.approx(6.4)
    assert not math.isnan(result.projection)


def test_negative_values_are_dropped():
    result = monte_carlo_project([-5, 10, 12], 5, Direction.OVER, seed=2)
    assert result.stdev == pytest.approx(1.4)


def test_results_are_rounded_for_display():
    result = monte_carlo_project(SCENARIO_B, 10, Direction.OVER, seed=8)
    for value in (result.projection, result.edge, result.floor, result.median,
                  result.ceiling, result.stdev, result.probability):
        assert round(value, 1) == value
    assert isinstance(result.confidence, int)


def test_unseeded_runs_agree_statistically():
    first = monte_carlo_project(SCENARIO_A, 28.5, Direction.OVER)
    second = monte_carlo_project(SCENARIO_A, 28.5, Direction.OVER)
    assert abs(first.probability - second.probability) < 6
    assert abs(first.projection - second.projection) < 0.5


def test_engine_uses_injected_config():
    engine = ProjectionEngine(simulation_config=SimulationConfig(HISTOGRAM_BINS=5, PREVIEW_SIZE=3))
    result = monte_carlo_project(SCENARIO_A, 28.5, Direction.OVER, engine=engine, seed=5)
    assert len(result.histogram) == 5
    assert len(result.samples_preview) == 3


def test_to_dict_is_plain_data():
    data = monte_carlo_project(SCENARIO_A, 28.5, "over", seed=5).to_dict()
    assert data['volatility'] == 'LOW'
    assert isinstance(data['histogram'], list)
    assert set(data['histogram'][0]) == {'lower', 'upper', 'count'}
    assert data['simulations'] == 5000
