"""Plotly Dash application — calculator page with result/error modals."""

import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path so `src.*` imports work
# even when Dash's reloader spawns a child process.
_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from dash import Dash, html, page_container

from src.config import settings

logging.basicConfig(level=settings.log_level)

app = Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    title="Mortgage Calculator",
)

app.layout = html.Div([
    # Navigation
    html.Nav([
        html.Div([
            html.H1("Mortgage Calculator", style={"fontSize": "1.5rem", "margin": "0"}),
        ], style={
            "display": "flex",
            "justifyContent": "space-between",
            "alignItems": "center",
            "maxWidth": "1000px",
            "margin": "0 auto",
            "padding": "0 1rem",
        }),
    ], style={
        "backgroundColor": "#1a1a2e",
        "color": "white",
        "padding": "1rem 0",
        "marginBottom": "2rem",
    }),

    # Page content
    html.Div(
        page_container,
        style={"maxWidth": "1000px", "margin": "0 auto", "padding": "0 1rem"},
    ),
])


if __name__ == "__main__":
    app.run(debug=settings.debug, port=8050)
