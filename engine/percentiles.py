# percentiles.py

import math
from typing import List, Sequence

import numpy as np
from numpy.typing import NDArray

from config.simulation_settings import PERCENTILES
from models import YearlySample


def nearest_rank_index(nsims: int, q: float) -> int:
    """Index into an ascending sort: floor(N * q), no interpolation."""
    return min(nsims - 1, math.floor(nsims * q))


def aggregate(
    paths: NDArray[np.float64],
    start_year: int,
    targets: Sequence[float],
) -> List[YearlySample]:
    """
    Cross-sectional p10/p50/p90 for every yearly checkpoint.

    Args:
        paths: [nsims, n_years + 1] checkpoint values.
        start_year: Calendar year of column 0.
        targets: Target value for each column (already deflated if needed).

    Returns:
        One YearlySample per column, in year order.
    """
    paths = np.asarray(paths, dtype=np.float64)
    nsims, n_points = paths.shape
    if len(targets) != n_points:
        raise ValueError(f"Expected {n_points} target values, got {len(targets)}")

    low_q, mid_q, high_q = PERCENTILES
    i10 = nearest_rank_index(nsims, low_q)
    i50 = nearest_rank_index(nsims, mid_q)
    i90 = nearest_rank_index(nsims, high_q)

    ordered = np.sort(paths, axis=0)

    chart_data = []
    for y in range(n_points):
        chart_data.append(YearlySample(
            year=start_year + y,
            p10=float(ordered[i10, y]),
            p50=float(ordered[i50, y]),
            p90=float(ordered[i90, y]),
            target=float(targets[y]),
        ))
    return chart_data
