# utils/cashflow.py
#
# "Detailed cashflows" table: every second year of the cone, as a DataFrame.
#

from typing import List, Optional

import pandas as pd

from models import SimulationResult
from utils.currency import format_currency_output

CASHFLOW_COLUMNS = {
    "year": "Year",
    "p10": "Pessimistic (10%)",
    "p50": "Median (50%)",
    "p90": "Optimistic (90%)",
}


def build_cashflow_frame(result: Optional[SimulationResult], step: int = 2) -> pd.DataFrame:
    """Rows 0, step, 2*step, ... of chart_data with the display column names."""
    if result is None or not result.chart_data:
        return pd.DataFrame(columns=list(CASHFLOW_COLUMNS.values()))

    rows = [
        {key: getattr(sample, key) for key in CASHFLOW_COLUMNS}
        for sample in result.chart_data[::step]
    ]
    return pd.DataFrame(rows).rename(columns=CASHFLOW_COLUMNS)


def format_cashflow_rows(frame: pd.DataFrame) -> List[dict]:
    """Grid rows with the money columns rendered as rupees."""
    display = frame.copy()
    for col in list(CASHFLOW_COLUMNS.values())[1:]:
        display[col] = display[col].map(format_currency_output)
    return display.to_dict("records")


def cashflow_csv(frame: pd.DataFrame) -> str:
    return frame.to_csv(index=False, float_format="%.2f")
