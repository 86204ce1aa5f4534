# results_layout.py
from dash import html, dcc
import dash_ag_grid as dag

from utils.cashflow import CASHFLOW_COLUMNS


def create_results_layout():
    """
    Static layout for the results section: probability card, cone chart,
    suggestions and the collapsible cashflow table.
    """
    return html.Div([

        html.Div(id="probability-card", style={'marginBottom': '20px'}),

        html.Div([dcc.Graph(id='cone-chart')], style={'marginBottom': '20px'}),

        html.Div(id="suggestions", style={'marginBottom': '20px'}),

        # Detailed cashflows (hidden until toggled)
        html.Div([
            html.Button("Show Detailed Cashflows", id="cashflow-toggle", n_clicks=0,
                        style={'marginRight': '10px', 'padding': '8px 16px', 'fontWeight': 'bold'}),
            html.Button("Download CSV", id="cashflow-download-btn", n_clicks=0,
                        style={'padding': '8px 16px', 'fontWeight': 'bold'}),
        ], style={'marginBottom': '10px'}),

        html.Div(
            id="cashflow-content",
            style={'display': 'none'},
            children=[
                dag.AgGrid(
                    id="cashflow-grid",
                    columnDefs=[{"field": name} for name in CASHFLOW_COLUMNS.values()],
                    rowData=[],
                    defaultColDef={"flex": 1, "sortable": False},
                    style={"height": "360px"},
                )
            ]
        ),

        html.Div(id="debug-output"),

    ], style={'maxWidth': '1400px', 'margin': '0 auto'})
