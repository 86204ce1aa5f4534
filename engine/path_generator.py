# path_generator.py
#
# Monthly wealth paths: stochastic growth first, then the SIP, once per month.
# Every 12th month is recorded as a yearly checkpoint (optionally in real terms).
#

import atexit
import logging
import math
import multiprocessing as mp
import threading
from typing import Callable, List, NamedTuple, Optional

import numpy as np
from numpy.typing import NDArray

from config.simulation_settings import MAX_WORKERS, PATH_CHUNK_SIZE
from engine.market_generator import (
    IRWIN_HALL_TERMS,
    RandomSource,
    irwin_hall_shock,
    irwin_hall_shocks,
    spawn_seeds,
)
from models import ReturnDistribution, SimulationInput

logger = logging.getLogger(__name__)

SourceFactory = Callable[[int], RandomSource]


def deflate(value: float, inflation_rate: float, years: float) -> float:
    """
    Converts a nominal value to today's purchasing power.
    Used for both wealth checkpoints and the target so they stay comparable.
    """
    return value / math.pow(1 + inflation_rate / 100, years)


class PathParams(NamedTuple):
    current_wealth: float
    monthly_contribution: float
    horizon_months: int
    mean: float
    std_dev: float
    inflation_rate: Optional[float]  # None -> nominal checkpoints


def generate_path(
    current_wealth: float,
    monthly_contribution: float,
    horizon_months: int,
    mean: float,
    std_dev: float,
    source: RandomSource,
    inflation_rate: Optional[float] = None,
) -> List[float]:
    """
    Simulates one wealth path and returns its yearly checkpoints.

    Args:
        current_wealth: Starting corpus; recorded untouched as year 0.
        monthly_contribution: SIP added after each month's growth.
        horizon_months: Months to simulate (a multiple of 12).
        mean, std_dev: Annual return distribution.
        source: Uniform draws feeding the monthly shock.
        inflation_rate: Percent per year. When given, checkpoints are deflated.

    Returns:
        horizon_months // 12 + 1 values, year 0 first.
    """
    monthly_mean = mean / 12
    monthly_sigma = std_dev / math.sqrt(12)

    wealth = current_wealth
    checkpoints = [wealth]

    for m in range(1, horizon_months + 1):
        monthly_return = monthly_mean + monthly_sigma * irwin_hall_shock(source)
        wealth = wealth * (1 + monthly_return) + monthly_contribution

        if m % 12 == 0:
            if inflation_rate is not None:
                checkpoints.append(deflate(wealth, inflation_rate, m / 12))
            else:
                checkpoints.append(wealth)

    return checkpoints


def simulate_paths(params: PathParams, uniforms: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Steps a block of paths together, one month at a time.

    uniforms has shape [n_paths, horizon_months, 6]; path i consumes uniforms[i]
    in the same order generate_path would pull them from a source, so both
    produce the same checkpoints for the same draws.

    Returns an [n_paths, horizon_months // 12 + 1] array, year 0 first.
    """
    n_paths = uniforms.shape[0]
    monthly_returns = params.mean / 12 + params.std_dev / math.sqrt(12) * irwin_hall_shocks(uniforms)

    wealth = np.full(n_paths, params.current_wealth, dtype=np.float64)
    checkpoints = np.empty((n_paths, params.horizon_months // 12 + 1), dtype=np.float64)
    checkpoints[:, 0] = wealth

    for m in range(1, params.horizon_months + 1):
        wealth = wealth * (1 + monthly_returns[:, m - 1]) + params.monthly_contribution

        if m % 12 == 0:
            if params.inflation_rate is not None:
                checkpoints[:, m // 12] = deflate(wealth, params.inflation_rate, m / 12)
            else:
                checkpoints[:, m // 12] = wealth

    return checkpoints


def _run_chunk_job(job) -> NDArray[np.float64]:
    """Pool worker: one block of paths from a child seed."""
    params, seed_seq, n_paths = job
    rng = np.random.default_rng(seed_seq)
    uniforms = rng.random((n_paths, params.horizon_months, IRWIN_HALL_TERMS))
    return simulate_paths(params, uniforms)


# ------------------------------------------------------------------
# Worker pool, created on first use and reused across runs
# ------------------------------------------------------------------
_pool = None
_pool_size = 0
_pool_lock = threading.Lock()


def get_pool(workers: int):
    global _pool, _pool_size
    workers = max(1, min(workers, MAX_WORKERS))
    with _pool_lock:
        if _pool is None or _pool_size != workers:
            if _pool is not None:
                _pool.terminate()
            logger.info("Starting path generation pool with %d workers", workers)
            _pool = mp.Pool(workers)
            _pool_size = workers
        return _pool


def shutdown_pool():
    global _pool, _pool_size
    with _pool_lock:
        if _pool is not None:
            _pool.terminate()
            _pool.join()
            _pool = None
            _pool_size = 0


atexit.register(shutdown_pool)


def _chunk_sizes(nsims: int) -> List[int]:
    full, rest = divmod(nsims, PATH_CHUNK_SIZE)
    return [PATH_CHUNK_SIZE] * full + ([rest] if rest else [])


def generate_paths(
    inputs: SimulationInput,
    distribution: ReturnDistribution,
    horizon_years: int,
    nsims: int,
    seed: Optional[int] = None,
    source_factory: Optional[SourceFactory] = None,
    workers: int = 1,
) -> NDArray[np.float64]:
    """
    Simulates nsims paths and stacks the checkpoints into an
    [nsims, horizon_years + 1] array.

    An injected source_factory(path_index) runs generate_path per path,
    in-process, so test sources never have to be pickled. Otherwise paths are
    drawn in fixed-size blocks, one spawned seed per block, and each block is
    stepped with numpy. With workers > 1 the blocks go to a shared process pool;
    block boundaries do not depend on the worker count, so a seeded run gives
    the same array either way.
    """
    params = PathParams(
        current_wealth=float(inputs.current_wealth),
        monthly_contribution=float(inputs.monthly_contribution),
        horizon_months=horizon_years * 12,
        mean=distribution.annual_mean,
        std_dev=distribution.annual_std_dev,
        inflation_rate=float(inputs.inflation_rate) if inputs.inflation_adjusted else None,
    )

    if source_factory is not None:
        paths = [
            generate_path(
                params.current_wealth,
                params.monthly_contribution,
                params.horizon_months,
                params.mean,
                params.std_dev,
                source_factory(path_index),
                params.inflation_rate,
            )
            for path_index in range(nsims)
        ]
        return np.asarray(paths, dtype=np.float64)

    sizes = _chunk_sizes(nsims)
    jobs = [(params, child, size) for child, size in zip(spawn_seeds(seed, len(sizes)), sizes)]

    if workers > 1 and len(jobs) > 1:
        blocks = get_pool(workers).map(_run_chunk_job, jobs)
    else:
        blocks = [_run_chunk_job(job) for job in jobs]

    return np.vstack(blocks)
