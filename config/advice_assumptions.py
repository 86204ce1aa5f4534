# config/advice_assumptions.py
# Thresholds and constants behind the suggestion ladder

critical_probability = 50      # below this -> "critical" tier
info_probability = 80          # below this (and >= critical) -> "info" tier

# Share of the per-month shortfall recommended as extra SIP
shortfall_damping = 0.6

# Suggested step-up for the "info" tier
sip_step_up_pct = 10

# Display tiers for the probability card (strictly greater than)
on_track_probability = 75
at_risk_probability = 50
