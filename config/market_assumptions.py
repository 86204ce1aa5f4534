# =============================================================================
# Market Info used in goal simulations
# =============================================================================

# Annual return assumptions per risk profile
RISK_PARAMS = {
    "conservative": {"mean": 0.08, "std_dev": 0.05, "label": "Conservative"},
    "balanced":     {"mean": 0.12, "std_dev": 0.12, "label": "Balanced"},
    "aggressive":   {"mean": 0.15, "std_dev": 0.20, "label": "Aggressive"},
}

# Additive shifts applied on top of the risk profile (no clamping)
SCENARIO_DELTAS = {
    "bear": {"mean": -0.04, "std_dev": +0.05, "label": "Bear Market"},   # crash
    "base": {"mean":  0.00, "std_dev":  0.00, "label": "Base Case"},
    "bull": {"mean": +0.04, "std_dev": -0.02, "label": "Bull Market"},   # boom
}
