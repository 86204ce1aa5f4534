"""Tests for nearest-rank percentile extraction."""

import numpy as np
import pytest

from engine.percentiles import aggregate, nearest_rank_index


def test_nearest_rank_indices_for_thousand_paths():
    assert nearest_rank_index(1000, 0.10) == 100
    assert nearest_rank_index(1000, 0.50) == 500
    assert nearest_rank_index(1000, 0.90) == 900


def test_single_path_index_stays_in_range():
    assert nearest_rank_index(1, 0.90) == 0


def test_aggregate_picks_sorted_positions_without_interpolation():
    # Ten paths, year-1 values 10..100 shuffled
    year1 = np.array([70, 20, 100, 40, 10, 90, 30, 60, 80, 50], dtype=float)
    paths = np.column_stack([np.full(10, 5.0), year1])

    chart = aggregate(paths, start_year=2026, targets=[1.0, 2.0])

    assert [s.year for s in chart] == [2026, 2027]
    assert (chart[0].p10, chart[0].p50, chart[0].p90) == (5.0, 5.0, 5.0)
    # floor(10*0.1)=1, floor(10*0.5)=5, floor(10*0.9)=9 on the ascending sort
    assert (chart[1].p10, chart[1].p50, chart[1].p90) == (20.0, 60.0, 100.0)
    assert chart[1].target == 2.0


def test_percentiles_are_ordered_every_year():
    rng = np.random.default_rng(0)
    paths = rng.lognormal(size=(200, 8))
    for sample in aggregate(paths, 2030, targets=[0.0] * 8):
        assert sample.p10 <= sample.p50 <= sample.p90


def test_target_count_must_match_years():
    with pytest.raises(ValueError):
        aggregate(np.ones((4, 3)), 2030, targets=[1.0, 1.0])
