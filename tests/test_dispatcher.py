"""Tests for the latest-wins dispatcher."""

import threading

from engine import LatestResultDispatcher, STALE
from engine.market_generator import ConstantSource
from models import SimulationInput


def _goal(**overrides):
    values = dict(
        target_amount=1_000_000, target_year=2030, current_wealth=100_000,
        monthly_contribution=10_000, inflation_rate=6, inflation_adjusted=False,
        risk_profile="balanced", scenario="base",
    )
    values.update(overrides)
    return SimulationInput(**values)


def test_single_request_gets_its_result():
    dispatcher = LatestResultDispatcher(nsims=5, current_year=2025,
                                        source_factory=lambda i: ConstantSource(0.5))
    result = dispatcher.submit(_goal())
    assert result is not STALE
    assert len(result.chart_data) == 6


def test_absent_result_passes_through():
    dispatcher = LatestResultDispatcher(nsims=5, current_year=2030)
    assert dispatcher.submit(_goal()) is None


def test_older_overlapping_request_is_discarded():
    started = threading.Event()
    release = threading.Event()

    def runner(inputs, **kwargs):
        if inputs.scenario == "bear":
            started.set()
            release.wait(timeout=5)
        return inputs.scenario

    dispatcher = LatestResultDispatcher(runner=runner)
    outcome = {}

    older = threading.Thread(target=lambda: outcome.update(old=dispatcher.submit(_goal(scenario="bear"))))
    older.start()
    assert started.wait(timeout=5)

    outcome["new"] = dispatcher.submit(_goal(scenario="bull"))
    release.set()
    older.join(timeout=5)

    assert outcome["new"] == "bull"
    assert outcome["old"] is STALE


def test_overrides_reach_the_runner():
    seen = {}

    def runner(inputs, **kwargs):
        seen.update(kwargs)
        return "ok"

    dispatcher = LatestResultDispatcher(runner=runner, nsims=10)
    assert dispatcher.submit(_goal(), seed=4) == "ok"
    assert seen == {"nsims": 10, "seed": 4}
