# market_generator.py
#
# Turns a risk profile + scenario into a return distribution and supplies the
# random draws used to shock monthly returns.
#

import logging
import math
from typing import List, Optional, Protocol, Sequence

import numpy as np
from numpy.typing import NDArray

from config.market_assumptions import RISK_PARAMS, SCENARIO_DELTAS
from models import ContractViolation, ReturnDistribution

logger = logging.getLogger(__name__)

IRWIN_HALL_TERMS = 6
IRWIN_HALL_SCALE = math.sqrt(0.5)


def resolve_return_distribution(risk_profile: str, scenario: str) -> ReturnDistribution:
    """
    Looks up the base (mean, std dev) for the risk profile and applies the
    scenario deltas additively.

    The result is NOT clamped: aggressive/bear style combinations are fine, but a
    non-positive std dev is reported as a warning and passed through unchanged.
    """
    if risk_profile not in RISK_PARAMS:
        raise ContractViolation(f"Unknown risk profile: {risk_profile!r}")
    if scenario not in SCENARIO_DELTAS:
        raise ContractViolation(f"Unknown scenario: {scenario!r}")

    base = RISK_PARAMS[risk_profile]
    delta = SCENARIO_DELTAS[scenario]

    mean = base["mean"] + delta["mean"]
    std_dev = base["std_dev"] + delta["std_dev"]

    if std_dev <= 0:
        logger.warning(
            "Non-positive volatility %.4f for %s/%s; shocks will be applied as-is",
            std_dev, risk_profile, scenario,
        )

    return ReturnDistribution(annual_mean=mean, annual_std_dev=std_dev)


# ------------------------------------------------------------------
# Random sources
# ------------------------------------------------------------------
class RandomSource(Protocol):
    def uniform(self) -> float:
        """Next draw from uniform(0, 1)."""
        ...


class ConstantSource:
    """Always returns the same draw. ConstantSource(0.5) gives a zero shock."""
    def __init__(self, value: float = 0.5):
        self.value = value

    def uniform(self) -> float:
        return self.value


class SequenceSource:
    """Replays a fixed sequence of uniforms, cycling when exhausted."""
    def __init__(self, values: Sequence[float]):
        if not values:
            raise ValueError("SequenceSource needs at least one value")
        self.values = list(values)
        self._pos = 0

    def uniform(self) -> float:
        value = self.values[self._pos % len(self.values)]
        self._pos += 1
        return value


def irwin_hall_shock(source: RandomSource) -> float:
    """
    Approximately standard-normal shock: the sum of six uniforms, centred and
    rescaled. This is an Irwin-Hall approximation with bounded tails (|z| <= 4.24),
    not an exact Gaussian sampler.
    """
    total = 0.0
    for _ in range(IRWIN_HALL_TERMS):
        total += source.uniform()
    return (total - IRWIN_HALL_TERMS / 2) / IRWIN_HALL_SCALE


def irwin_hall_shocks(uniforms: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Array form of irwin_hall_shock: the last axis holds the six uniforms of
    each shock, in the order a source would hand them out.
    """
    if uniforms.shape[-1] != IRWIN_HALL_TERMS:
        raise ValueError(f"Expected {IRWIN_HALL_TERMS} uniforms per shock, got {uniforms.shape[-1]}")
    return (uniforms.sum(axis=-1) - IRWIN_HALL_TERMS / 2) / IRWIN_HALL_SCALE


def spawn_seeds(seed: Optional[int], count: int) -> List[np.random.SeedSequence]:
    """Independent child seeds, one per block of paths."""
    return np.random.SeedSequence(seed).spawn(count)
