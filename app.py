# app.py
import logging
from dash import Dash

# -----------------------------------------------------------
# Core Imports
# -----------------------------------------------------------

from layout.main_layout import main_layout

# Import callback modules
from callbacks.simulation_callbacks import register_simulation_callbacks
from callbacks.results_callbacks import register_results_callbacks

# Initialize app
app = Dash(__name__, title="Goal GPS", suppress_callback_exceptions=True)
server = app.server

# -----------------------------------------------------------
# Layout Assignment & Callback Registration
# -----------------------------------------------------------

app.layout = main_layout

register_simulation_callbacks(app)
register_results_callbacks(app)


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.run(debug=True, host='0.0.0.0', port=8050)


if __name__ == "__main__":
    main()
