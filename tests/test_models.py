"""Tests for input validation and the result wire shape."""

import pytest

from models import (
    ContractViolation,
    ReturnDistribution,
    SimulationInput,
    SimulationResult,
    Suggestion,
    YearlySample,
)


def _goal(**overrides):
    values = dict(
        target_amount=1_000_000, target_year=2030, current_wealth=0,
        monthly_contribution=0, inflation_rate=6, inflation_adjusted=False,
        risk_profile="aggressive", scenario="bear",
    )
    values.update(overrides)
    return SimulationInput(**values)


def test_valid_input_returns_itself():
    goal = _goal()
    assert goal.validate() is goal


@pytest.mark.parametrize("overrides", [
    {"risk_profile": "Balanced"},
    {"scenario": None},
    {"target_year": 2030.5},
    {"target_year": True},
    {"inflation_adjusted": "yes"},
    {"target_amount": -5},
    {"current_wealth": -0.01},
    {"monthly_contribution": -1},
    {"inflation_rate": -100},
    {"inflation_rate": -150},
    {"inflation_rate": float("nan")},
    {"target_amount": float("nan")},
    {"current_wealth": float("inf")},
    {"monthly_contribution": float("-inf")},
    {"current_wealth": "100"},
])
def test_validation_rejects(overrides):
    with pytest.raises(ContractViolation):
        _goal(**overrides).validate()


def test_past_target_year_is_not_a_validation_error():
    assert _goal(target_year=1999).validate().target_year == 1999


def test_inputs_are_immutable():
    with pytest.raises(AttributeError):
        _goal().scenario = "bull"


def test_moderate_deflation_is_accepted():
    assert _goal(inflation_rate=-2).validate().inflation_rate == -2


def test_return_distribution_is_immutable():
    dist = ReturnDistribution(annual_mean=0.12, annual_std_dev=0.12)
    with pytest.raises(AttributeError):
        dist.annual_mean = 0.5


def test_unknown_suggestion_kind_is_rejected():
    with pytest.raises(ContractViolation):
        Suggestion(kind="urgent", text="save more")


def test_wire_shape():
    result = SimulationResult(
        chart_data=[YearlySample(year=2025, p10=1.0, p50=2.0, p90=3.0, target=4.0)],
        probability=12.5,
        median_outcome=2.0,
        suggestions=[Suggestion(kind="critical", text="save more")],
    )
    data = result.to_dict()
    assert data == {
        "chartData": [{"year": 2025, "p10": 1.0, "p50": 2.0, "p90": 3.0, "target": 4.0}],
        "probability": 12.5,
        "medianOutcome": 2.0,
        "suggestions": [{"kind": "critical", "text": "save more"}],
    }
    assert SimulationResult.from_dict(data) == result
