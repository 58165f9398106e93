"""Calculator page."""

import dash

from src.dashboard.calculator import layout  # noqa: F401

dash.register_page(__name__, path="/", name="Calculator")
