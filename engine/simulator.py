# engine.simulator.py

import datetime
import logging
import time
from typing import Optional

import numpy as np

from config.simulation_settings import DEFAULT_NSIMS
from models import ContractViolation, SimulationInput, SimulationResult

from engine.market_generator import resolve_return_distribution
from engine.path_generator import SourceFactory, generate_paths
from engine.percentiles import aggregate
from engine.outcome import evaluate, target_series
from engine.suggestions import build_suggestions

logger = logging.getLogger(__name__)


class GoalSimulator:
    """
    Runs the Monte Carlo goal projection for one immutable SimulationInput:
    resolve returns -> simulate paths -> percentile cone -> success odds -> advice.

    A simulator holds nothing between runs that another run could reuse; build a
    fresh one for every new set of inputs.
    """
    def __init__(
        self,
        inputs: SimulationInput,
        nsims: int = DEFAULT_NSIMS,
        current_year: Optional[int] = None,
        seed: Optional[int] = None,
        source_factory: Optional[SourceFactory] = None,
        workers: int = 1,
    ):
        # -----------------------
        # STEP 1: Validate at the boundary
        # -----------------------
        self.inputs = inputs.validate()

        if isinstance(nsims, bool) or not isinstance(nsims, int) or nsims < 1:
            raise ContractViolation(f"nsims must be a positive integer, got {nsims!r}")
        self.nsims = nsims

        # -----------------------
        # STEP 2: Horizon (may be <= 0, reported as an absent result)
        # -----------------------
        self.current_year = current_year if current_year is not None else datetime.date.today().year
        self.horizon_years = self.inputs.target_year - self.current_year

        self.seed = seed
        self.source_factory = source_factory
        self.workers = max(1, int(workers))

    # =========================================================================
    # 1. CORE SIMULATION RUNNER
    # =========================================================================
    def run_simulation(self) -> Optional[SimulationResult]:
        """Returns the full result, or None when the target year is not in the future."""
        if self.horizon_years <= 0:
            logger.info(
                "Target year %s is not after %s; no simulation to run",
                self.inputs.target_year, self.current_year,
            )
            return None

        start_time = time.time()

        distribution = resolve_return_distribution(self.inputs.risk_profile, self.inputs.scenario)

        paths = generate_paths(
            self.inputs,
            distribution,
            self.horizon_years,
            self.nsims,
            seed=self.seed,
            source_factory=self.source_factory,
            workers=self.workers,
        )

        result = self._summarize_results(paths)

        logger.info(
            "Simulated %d paths over %d years (%s/%s) in %.3fs: success %.1f%%",
            self.nsims, self.horizon_years, self.inputs.risk_profile, self.inputs.scenario,
            time.time() - start_time, result.probability,
        )
        return result

    # =========================================================================
    # 2. RESULTS SUMMARIZER
    # =========================================================================
    def _summarize_results(self, paths: np.ndarray) -> SimulationResult:
        targets = target_series(self.inputs, self.horizon_years)
        chart_data = aggregate(paths, self.current_year, targets)

        final_target = targets[-1]
        final_p50 = chart_data[-1].p50
        probability, median_outcome = evaluate(paths[:, -1], final_target, final_p50)

        suggestions = build_suggestions(
            probability,
            final_target,
            final_p50,
            self.horizon_years,
            self.inputs.risk_profile,
        )

        return SimulationResult(
            chart_data=chart_data,
            probability=probability,
            median_outcome=median_outcome,
            suggestions=suggestions,
        )


def run_goal_simulation(inputs: SimulationInput, **kwargs) -> Optional[SimulationResult]:
    """One-shot helper: fresh simulator, single run."""
    return GoalSimulator(inputs, **kwargs).run_simulation()
