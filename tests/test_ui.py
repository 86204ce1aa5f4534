"""Tests for the chart and display helpers."""

import math

import pytest

from models import SimulationResult, Suggestion, YearlySample
from utils.plotting import create_cone_figure
from utils.ui_components import (
    create_probability_card,
    create_suggestion_list,
    inflation_caption,
    probability_status,
)


def _result():
    samples = [YearlySample(year=2025 + y, p10=1.0 + y, p50=2.0 + y, p90=3.0 + y, target=5.0) for y in range(4)]
    return SimulationResult(
        chart_data=samples, probability=62.0, median_outcome=5.0,
        suggestions=[Suggestion(kind="info", text="step up")],
    )


@pytest.mark.parametrize("probability, status", [
    (90.0, "on-track"),
    (75.1, "on-track"),
    (75.0, "at-risk"),
    (50.1, "at-risk"),
    (50.0, "off-track"),
    (0.0, "off-track"),
])
def test_probability_status_tiers(probability, status):
    assert probability_status(probability)[0] == status


def test_probability_status_handles_garbage():
    assert probability_status(math.nan)[0] == "unknown"
    assert probability_status("high")[0] == "unknown"


def test_cone_figure_has_band_median_and_target():
    fig = create_cone_figure(_result())
    names = [trace.name for trace in fig.data]
    assert names == ["Pessimistic (10%)", "Optimistic (90%)", "Median (50%)", "Target"]
    assert list(fig.data[2].y) == [2.0, 3.0, 4.0, 5.0]
    assert fig.data[1].fill == "tonexty"


def test_cone_figure_without_result_shows_message():
    fig = create_cone_figure(None)
    assert len(fig.data) == 0
    assert "target year" in fig.layout.annotations[0].text


def test_suggestion_list_renders_each_suggestion():
    panel = create_suggestion_list(_result().suggestions)
    # heading + one row
    assert len(panel.children) == 2
    assert panel.children[1].children == "step up"


def test_inflation_caption():
    assert "Real" in inflation_caption(True)
    assert "Nominal" in inflation_caption(False)


def test_probability_card_shows_one_decimal_percent():
    card = create_probability_card(62.345, 1_500_000, 2_500_000)
    probability_block, median_block = card.children
    assert probability_block.children[1].children == "62.3%"
    assert median_block.children[1].children == "₹15,00,000"
