"""Tests for the detailed cashflow table."""

from models import SimulationResult, YearlySample
from utils.cashflow import build_cashflow_frame, cashflow_csv, format_cashflow_rows


def _result(n_years=5):
    samples = [
        YearlySample(year=2025 + y, p10=100.0 * y, p50=200.0 * y, p90=300.0 * y, target=1_000.0)
        for y in range(n_years + 1)
    ]
    return SimulationResult(chart_data=samples, probability=50.0, median_outcome=samples[-1].p50)


def test_every_second_year_is_listed():
    frame = build_cashflow_frame(_result())
    assert list(frame.columns) == ["Year", "Pessimistic (10%)", "Median (50%)", "Optimistic (90%)"]
    assert frame["Year"].tolist() == [2025, 2027, 2029]
    assert frame["Median (50%)"].tolist() == [0.0, 400.0, 800.0]


def test_missing_result_gives_empty_table():
    frame = build_cashflow_frame(None)
    assert frame.empty
    assert len(frame.columns) == 4


def test_rows_are_formatted_in_rupees():
    rows = format_cashflow_rows(build_cashflow_frame(_result()))
    assert rows[1]["Optimistic (90%)"] == "₹600"
    assert rows[1]["Year"] == 2027


def test_csv_export_has_header():
    csv = cashflow_csv(build_cashflow_frame(_result(2)))
    assert csv.splitlines()[0] == "Year,Pessimistic (10%),Median (50%),Optimistic (90%)"
    assert csv.splitlines()[2] == "2027,200.00,400.00,600.00"
