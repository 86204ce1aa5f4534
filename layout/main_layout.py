# main_layout.py
from dash import dcc
from dash import html

from config.market_assumptions import RISK_PARAMS, SCENARIO_DELTAS
from utils.xml_loader import DEFAULT_GOAL
from utils.ui_components import pretty_currency_input, pretty_number_input, inflation_caption

from layout.results_layout import create_results_layout

CARD_STYLE = {
    'padding': '20px',
    'border': '2px solid #ddd',
    'borderRadius': '12px',
    'backgroundColor': '#fff',
    'boxShadow': '0 8px 25px rgba(0,0,0,0.1)',
}

FIELD_STYLE = {'textAlign': 'center', 'marginBottom': '14px'}

# ----------------------------------------------------------------------
# Application Layout Definition
# ----------------------------------------------------------------------

controls_panel = html.Div(
    style={**CARD_STYLE, 'flex': '1 1 320px', 'maxWidth': '380px'},
    children=[
        html.H3("Configuration", style={'marginTop': 0}),

        # Risk profile
        html.Label("Risk Profile", style={'fontWeight': 'bold'}),
        dcc.RadioItems(
            id="risk_profile",
            options=[{"label": p["label"], "value": key} for key, p in RISK_PARAMS.items()],
            value=DEFAULT_GOAL["risk_profile"],
            inline=True,
            inputStyle={'marginRight': '4px', 'marginLeft': '10px'},
            style={'marginBottom': '16px'},
        ),

        html.Div(pretty_currency_input("target_amount", DEFAULT_GOAL["target_amount"], label="Target Amount"), style=FIELD_STYLE),
        html.Div(pretty_number_input("target_year", DEFAULT_GOAL["target_year"], label="Target Year", min_val=1900, max_val=2200), style=FIELD_STYLE),
        html.Div(pretty_currency_input("current_wealth", DEFAULT_GOAL["current_wealth"], label="Current Wealth"), style=FIELD_STYLE),
        html.Div(pretty_currency_input("monthly_sip", DEFAULT_GOAL["monthly_contribution"], label="Monthly SIP"), style=FIELD_STYLE),
        html.Div(pretty_number_input("inflation_rate", DEFAULT_GOAL["inflation_rate"], label="Inflation (% / yr)", min_val=0, max_val=50, step=0.5), style=FIELD_STYLE),

        # Inflation toggle
        dcc.Checklist(
            id="inflation_adjusted",
            options=[{"label": " Adjust for inflation", "value": "real"}],
            value=["real"] if DEFAULT_GOAL["inflation_adjusted"] else [],
        ),
        html.P(
            inflation_caption(DEFAULT_GOAL["inflation_adjusted"]),
            id="inflation-caption",
            style={'fontSize': '12px', 'color': '#64748b'}
        ),
    ]
)

main_layout = html.Div(
    style={'fontFamily': 'Arial, sans-serif', 'margin': '2%', 'backgroundColor': '#f9f9fb'},
    children=[
        html.H1(
            "Goal GPS",
            style={'textAlign': 'center', 'color': 'black', 'marginBottom': 0}
        ),
        html.P(
            "Probabilistic Wealth Planning using Monte Carlo Simulations.",
            style={'textAlign': 'center', 'color': '#64748b'}
        ),

        # Latest simulation result (wire shape) for the cashflow export
        dcc.Store(id="simulation-data-store"),

        # CSV export of the cashflow table
        dcc.Download(id="download-cashflows"),

        html.Div([
            controls_panel,

            html.Div([
                # Scenario toggles sit above the chart
                dcc.RadioItems(
                    id="scenario",
                    options=[{"label": d["label"], "value": key} for key, d in SCENARIO_DELTAS.items()],
                    value=DEFAULT_GOAL["scenario"],
                    inline=True,
                    inputStyle={'marginRight': '4px', 'marginLeft': '10px'},
                    style={'textAlign': 'right', 'marginBottom': '10px'},
                ),
                create_results_layout(),
            ], style={'flex': '3 1 600px'}),

        ], style={
            'display': 'flex',
            'gap': '20px',
            'flexWrap': 'wrap',
            'alignItems': 'flex-start',
            'width': '100%',
            'boxSizing': 'border-box'
        }),
    ]
)
