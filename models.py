# models.py
import math
import numbers
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

RISK_PROFILES = ("conservative", "balanced", "aggressive")
SCENARIOS = ("bear", "base", "bull")
SUGGESTION_KINDS = ("critical", "warning", "info", "success")
NUMERIC_FIELDS = ("target_amount", "current_wealth", "monthly_contribution", "inflation_rate")


class ContractViolation(ValueError):
    """Raised when a caller hands the engine an input outside its contract."""


@dataclass(frozen=True)
class SimulationInput:
    # Goal
    target_amount: float
    target_year: int

    # Savings
    current_wealth: float
    monthly_contribution: float

    # Inflation (percent per year, 6 means 6%)
    inflation_rate: float
    inflation_adjusted: bool

    # Market assumptions
    risk_profile: str
    scenario: str

    def validate(self) -> "SimulationInput":
        """
        Fail fast on anything outside the input contract. A target year in the
        past is NOT an error here: the simulator reports it as an absent result.
        """
        if self.risk_profile not in RISK_PROFILES:
            raise ContractViolation(
                f"Unknown risk profile {self.risk_profile!r}; expected one of {RISK_PROFILES}"
            )
        if self.scenario not in SCENARIOS:
            raise ContractViolation(
                f"Unknown scenario {self.scenario!r}; expected one of {SCENARIOS}"
            )
        if isinstance(self.target_year, bool) or not isinstance(self.target_year, int):
            raise ContractViolation(f"target_year must be an integer, got {self.target_year!r}")
        if not isinstance(self.inflation_adjusted, bool):
            raise ContractViolation(
                f"inflation_adjusted must be a boolean, got {self.inflation_adjusted!r}"
            )
        for name in NUMERIC_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
                raise ContractViolation(f"{name} must be a finite number, got {value!r}")
        if not self.target_amount > 0:
            raise ContractViolation(f"target_amount must be > 0, got {self.target_amount!r}")
        if self.current_wealth < 0:
            raise ContractViolation(f"current_wealth must be >= 0, got {self.current_wealth!r}")
        if self.monthly_contribution < 0:
            raise ContractViolation(
                f"monthly_contribution must be >= 0, got {self.monthly_contribution!r}"
            )
        # deflator (1 + rate/100) must stay positive
        if self.inflation_rate <= -100:
            raise ContractViolation(f"inflation_rate must be > -100, got {self.inflation_rate!r}")
        return self


@dataclass(frozen=True)
class ReturnDistribution:
    annual_mean: float
    annual_std_dev: float


@dataclass(frozen=True)
class YearlySample:
    year: int
    p10: float
    p50: float
    p90: float
    target: float


@dataclass(frozen=True)
class Suggestion:
    kind: str
    text: str

    def __post_init__(self):
        if self.kind not in SUGGESTION_KINDS:
            raise ContractViolation(
                f"Unknown suggestion kind {self.kind!r}; expected one of {SUGGESTION_KINDS}"
            )


@dataclass
class SimulationResult:
    chart_data: List[YearlySample]
    probability: float
    median_outcome: float
    suggestions: List[Suggestion] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape consumed by the chart and suggestion panels."""
        return {
            "chartData": [asdict(sample) for sample in self.chart_data],
            "probability": self.probability,
            "medianOutcome": self.median_outcome,
            "suggestions": [asdict(s) for s in self.suggestions],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationResult":
        """Inverse of to_dict(), for results parked in a browser-side store."""
        return cls(
            chart_data=[YearlySample(**row) for row in data.get("chartData", [])],
            probability=data["probability"],
            median_outcome=data["medianOutcome"],
            suggestions=[Suggestion(**s) for s in data.get("suggestions", [])],
        )
