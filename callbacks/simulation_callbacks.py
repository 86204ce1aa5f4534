# callbacks/simulation_callbacks.py

from dash import Input, Output, no_update
from dash import html
import logging
import time
import traceback

from config.simulation_settings import DEFAULT_NSIMS
from engine import LatestResultDispatcher, STALE
from models import ContractViolation
from utils.input_adapter import get_simulation_input
from utils.cashflow import build_cashflow_frame, format_cashflow_rows
from utils.plotting import create_cone_figure, empty_figure
from utils.ui_components import create_probability_card, create_suggestion_list, inflation_caption

logger = logging.getLogger(__name__)

# Single-user app: one dispatcher, newest inputs win
dispatcher = LatestResultDispatcher(nsims=DEFAULT_NSIMS)


def register_simulation_callbacks(app):

    @app.callback(
        Output("probability-card", "children"),
        Output("cone-chart", "figure"),
        Output("suggestions", "children"),
        Output("cashflow-grid", "rowData"),
        Output("inflation-caption", "children"),
        Output("debug-output", "children"),
        Output("simulation-data-store", "data"),

        Input("target_amount", "value"),
        Input("target_year", "value"),
        Input("current_wealth", "value"),
        Input("monthly_sip", "value"),
        Input("inflation_rate", "value"),
        Input("inflation_adjusted", "value"),
        Input("risk_profile", "value"),
        Input("scenario", "value"),
    )
    def run_simulation(target_amount, target_year, current_wealth, monthly_sip,
                       inflation_rate, inflation_checklist, risk_profile, scenario):
        inflation_adjusted = bool(inflation_checklist)
        caption = inflation_caption(inflation_adjusted)
        start_time = time.time()

        try:
            # Build an immutable input value from the current UI state
            inputs = get_simulation_input(
                target_amount=target_amount,
                target_year=target_year,
                current_wealth=current_wealth,
                monthly_sip=monthly_sip,
                inflation_rate=inflation_rate,
                inflation_adjusted=inflation_adjusted,
                risk_profile=risk_profile,
                scenario=scenario,
            )

            result = dispatcher.submit(inputs)   # ← fresh simulation every time
            if result is STALE:
                return (no_update,) * 7

            elapsed = time.time() - start_time

            if result is None:
                message = html.Div(
                    "Target year must be after the current year.",
                    style={'color': '#d97706', 'fontWeight': 'bold', 'padding': '15px'}
                )
                return message, create_cone_figure(None), [], [], caption, "", None

            card = create_probability_card(result.probability, result.median_outcome, inputs.target_amount)
            rows = format_cashflow_rows(build_cashflow_frame(result))
            debug_output = html.Div(
                f"Simulation completed in {elapsed:.2f}s",
                style={'fontSize': '12px', 'color': '#94a3b8', 'marginTop': '10px'}
            )

            return (
                card,
                create_cone_figure(result, inputs.inflation_adjusted),
                create_suggestion_list(result.suggestions),
                rows,
                caption,
                debug_output,
                result.to_dict(),
            )

        except ContractViolation as e:
            logger.warning("Rejected simulation inputs: %s", e)
            error_div = html.Div(f"Invalid inputs: {e}", style={"color": "red", "padding": "15px"})
            return error_div, empty_figure("Fix the highlighted inputs"), [], [], caption, "", None

        except Exception as e:
            tb = traceback.format_exc()
            logger.error("Simulation failed: %s\n%s", e, tb)
            error_msg = f"Simulation failed: {str(e)}\nFull traceback:\n{tb}"

            error_header = html.Div("Simulation Failed", style={'color': 'red', 'fontSize': '40px'})
            error_div = html.Div(error_msg, style={"color": "red", "whiteSpace": "pre-wrap"})

            return error_header, empty_figure("Simulation failed"), [], [], caption, error_div, None
