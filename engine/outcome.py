# outcome.py

from typing import List, Sequence, Tuple

import numpy as np

from engine.path_generator import deflate
from models import SimulationInput


def target_value(inputs: SimulationInput, years: float) -> float:
    """Target at a given year offset, in real terms when inflation adjustment is on."""
    if inputs.inflation_adjusted:
        return deflate(inputs.target_amount, inputs.inflation_rate, years)
    return float(inputs.target_amount)


def target_series(inputs: SimulationInput, horizon_years: int) -> List[float]:
    return [target_value(inputs, y) for y in range(horizon_years + 1)]


def evaluate(
    final_year_values: Sequence[float],
    target_val: float,
    final_year_p50: float,
) -> Tuple[float, float]:
    """
    Share of paths finishing at or above the target, as a percentage, and the
    median outcome (the aggregator's p50 for the final year, passed through).
    """
    final = np.asarray(final_year_values, dtype=np.float64)
    nsims = final.size
    if nsims == 0:
        raise ValueError("evaluate() needs at least one simulated path")

    success_count = int(np.count_nonzero(final >= target_val))
    probability = 100.0 * success_count / nsims
    return probability, float(final_year_p50)
