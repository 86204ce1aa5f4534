# callbacks/results_callbacks.py
from dash import Input, Output, State, dcc
from dash.exceptions import PreventUpdate

from models import SimulationResult
from utils.cashflow import build_cashflow_frame, cashflow_csv


def register_results_callbacks(app):
    """
    Registers the cashflow table toggle and CSV export.
    """

    @app.callback(
        Output("cashflow-content", "style"),
        Output("cashflow-toggle", "children"),
        Input("cashflow-toggle", "n_clicks"),
    )
    def toggle_cashflow_table(n_clicks):
        if n_clicks and n_clicks % 2 == 1:
            return {'display': 'block'}, "Hide Detailed Cashflows"
        return {'display': 'none'}, "Show Detailed Cashflows"

    @app.callback(
        Output("download-cashflows", "data"),
        Input("cashflow-download-btn", "n_clicks"),
        State("simulation-data-store", "data"),
        prevent_initial_call=True
    )
    def download_cashflows(n_clicks, stored):
        if not n_clicks or not stored:
            raise PreventUpdate

        frame = build_cashflow_frame(SimulationResult.from_dict(stored))
        return dcc.send_string(cashflow_csv(frame), "goal_gps_cashflows.csv")
