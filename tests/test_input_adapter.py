"""Tests for turning UI values into a SimulationInput."""

import pytest

from models import ContractViolation
from utils.input_adapter import get_simulation_input
from utils.xml_loader import DEFAULT_GOAL, try_cast


def test_defaults_come_from_goal_xml():
    assert DEFAULT_GOAL == {
        "target_amount": 50_000_000.0,
        "target_year": 2035,
        "current_wealth": 2_500_000.0,
        "monthly_contribution": 50_000.0,
        "inflation_rate": 6.0,
        "inflation_adjusted": False,
        "risk_profile": "balanced",
        "scenario": "base",
    }
    inputs = get_simulation_input()
    assert inputs.target_year == 2035
    assert inputs.risk_profile == "balanced"


def test_ui_strings_are_cleaned():
    inputs = get_simulation_input(
        target_amount="₹1,00,00,000",
        current_wealth="₹5,00,000",
        monthly_sip="₹20,000",
        inflation_rate="7%",
        target_year=2040.0,
        inflation_adjusted=True,
        scenario="bull",
    )
    assert inputs.target_amount == 10_000_000.0
    assert inputs.current_wealth == 500_000.0
    assert inputs.monthly_contribution == 20_000.0
    assert inputs.inflation_rate == 7.0
    assert inputs.target_year == 2040
    assert inputs.inflation_adjusted is True
    assert inputs.scenario == "bull"


def test_unknown_keys_are_ignored():
    inputs = get_simulation_input(colour="blue")
    assert not hasattr(inputs, "colour")


@pytest.mark.parametrize("overrides", [
    {"risk_profile": "yolo"},
    {"scenario": "sideways"},
    {"target_amount": 0},
    {"current_wealth": -1},
    {"monthly_sip": -100},
    {"inflation_rate": "n/a"},
])
def test_contract_violations(overrides):
    with pytest.raises(ContractViolation):
        get_simulation_input(**overrides)


def test_try_cast():
    assert try_cast(" true ") is True
    assert try_cast("12") == 12
    assert try_cast("1.5") == 1.5
    assert try_cast("balanced") == "balanced"
    assert try_cast(None) is None
