# utils/ui_components.py
import math
from dash import dcc, html

from config.advice_assumptions import on_track_probability, at_risk_probability
from utils.currency import format_currency_output, format_percent_output

SUGGESTION_COLORS = {
    "critical": '#e11d48',
    "warning": '#d97706',
    "info": '#2563eb',
    "success": '#059669',
}

INPUT_STYLE = {
    'width': '80%',
    'height': '36px',
    'textAlign': 'center',
    'fontSize': '16px',
    'fontFamily': 'monospace',
    'fontWeight': '500',
    'border': '1px solid #ccc',
    'borderRadius': '6px'
}

LABEL_STYLE = {
    'fontWeight': 'bold',
    'fontSize': 16,
    'textAlign': 'center',
    'marginBottom': '6px',
    'display': 'block'
}


def probability_status(probability):
    """
    Display tier for the success probability card: (status, color).
    Strictly above 75 is on track, strictly above 50 at risk, else off track.
    """
    # Check for valid numeric input. If not, return a safe, default color.
    if not isinstance(probability, (int, float)) or math.isnan(probability):
        return "unknown", 'rgb(128, 128, 128)'

    if probability > on_track_probability:
        return "on-track", 'rgb(5, 150, 105)'   # Green
    elif probability > at_risk_probability:
        return "at-risk", 'rgb(217, 119, 6)'    # Amber
    else:
        return "off-track", 'rgb(225, 29, 72)'  # Red


def create_probability_card(probability, median_outcome, target_amount):
    """Success probability + median outcome vs target."""
    _, color = probability_status(probability)
    return html.Div([
        html.Div([
            html.P("Success Probability", style={'fontSize': '12px', 'fontWeight': 'bold', 'margin': 0}),
            html.H3(format_percent_output(probability), style={'color': color, 'fontSize': '32px', 'margin': '4px 0'}),
        ], style={'flex': 1}),
        html.Div([
            html.P("Median Outcome", style={'fontSize': '12px', 'fontWeight': 'bold', 'margin': 0}),
            html.H3(format_currency_output(median_outcome), style={'fontSize': '24px', 'margin': '4px 0'}),
            html.P(f"vs Target: {format_currency_output(target_amount)}", style={'fontSize': '12px', 'margin': 0}),
        ], style={'flex': 1}),
    ], style={
        'display': 'flex', 'gap': '20px', 'padding': '15px',
        'border': f'2px solid {color}', 'borderRadius': '12px', 'backgroundColor': '#fff'
    })


def create_suggestion_list(suggestions):
    """One coloured row per suggestion, in ladder order."""
    rows = []
    for suggestion in suggestions:
        color = SUGGESTION_COLORS.get(suggestion.kind, '#64748b')
        rows.append(html.Div(
            suggestion.text,
            className=f"suggestion suggestion-{suggestion.kind}",
            style={
                'borderLeft': f'4px solid {color}',
                'padding': '10px 14px',
                'marginBottom': '8px',
                'backgroundColor': '#fff',
                'borderRadius': '6px',
            }
        ))
    return html.Div([html.H4("Smart Suggestions", style={'marginTop': 0})] + rows)


def inflation_caption(inflation_adjusted):
    if inflation_adjusted:
        return "Showing 'Real' value (Purchasing Power)."
    return "Showing 'Nominal' value (Paper Money)."


# ----------------------------------------------------------------------
# Helper: Pretty inputs ([Label, Input] children lists)
# ----------------------------------------------------------------------

def _label_text(id, label):
    if label is None:
        return " ".join(word.capitalize() for word in id.replace('-', '_').split('_'))
    return label or None


def pretty_currency_input(id, value, label=None, placeholder="₹25,00,000"):
    """
    Generates a stylized rupee input component.
    """
    children = []
    label_text = _label_text(id, label)
    if label_text is not None:
        children.append(html.Label(label_text, style=LABEL_STYLE))

    children.append(
        dcc.Input(
            id=id,
            type='text',
            value=format_currency_output(value),
            placeholder=placeholder,
            style=INPUT_STYLE,
            debounce=True,
        )
    )
    return children


def pretty_number_input(id, value, label=None, min_val=None, max_val=None, step=1, placeholder=""):
    """
    Same look as pretty_currency_input but type='number' (years, percentages).
    """
    input_props = {}
    if min_val is not None:
        input_props['min'] = min_val
    if max_val is not None:
        input_props['max'] = max_val
    if step is not None:
        input_props['step'] = step

    children = []
    label_text = _label_text(id, label)
    if label_text is not None:
        children.append(html.Label(label_text, style=LABEL_STYLE))

    children.append(
        dcc.Input(
            id=id,
            type='number',
            value=value,
            placeholder=placeholder,
            style=INPUT_STYLE,
            debounce=True,
            **input_props
        )
    )
    return children
