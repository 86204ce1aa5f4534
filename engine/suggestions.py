# suggestions.py
#
# Rule ladder turning the success probability into next actions.
# Exactly one tier fires per run; the conservative-profile warning only ever
# follows a critical suggestion.
#

import math
from typing import List

from config.advice_assumptions import (
    critical_probability,
    info_probability,
    shortfall_damping,
    sip_step_up_pct,
)
from models import Suggestion
from utils.currency import format_currency_output

PROFILE_WARNING = "Consider moving to a Balanced profile for higher potential returns."
STEP_UP_ADVICE = (
    f"You are on track, but a {sip_step_up_pct}% step-up in SIP next year would secure it."
)
SUCCESS_ADVICE = "Excellent Plan! You are highly likely to exceed your target."


def extra_contribution(target_val: float, final_p50: float, horizon_years: int) -> int:
    """Damped share of the per-month shortfall between target and median outcome."""
    shortfall = target_val - final_p50
    # halves round up
    return math.floor(shortfall / (horizon_years * 12) * shortfall_damping + 0.5)


def build_suggestions(
    probability: float,
    target_val: float,
    final_p50: float,
    horizon_years: int,
    risk_profile: str,
) -> List[Suggestion]:
    suggestions = []

    if probability < critical_probability:
        extra = extra_contribution(target_val, final_p50, horizon_years)
        suggestions.append(Suggestion(
            kind="critical",
            text=f"Increase monthly SIP by {format_currency_output(extra)} to improve odds.",
        ))
        if risk_profile == "conservative":
            suggestions.append(Suggestion(kind="warning", text=PROFILE_WARNING))
    elif probability < info_probability:
        suggestions.append(Suggestion(kind="info", text=STEP_UP_ADVICE))
    else:
        suggestions.append(Suggestion(kind="success", text=SUCCESS_ADVICE))

    return suggestions
