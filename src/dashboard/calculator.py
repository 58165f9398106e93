"""Calculator layout and callbacks — loan form, result modal, error modal.

The modals close from their × button, a click on the backdrop, or Escape
(`assets/modal_keys.js` clicks the backdrop of an open modal).
"""

import logging

import dash
from dash import html, dcc, callback, Input, Output, State, no_update
import plotly.graph_objects as go

from src.dashboard.display import loan_summary_rows, result_rows
from src.engine.amortization import compute
from src.engine.formatting import amount_unit_label, scale_loan_amount
from src.models.mortgage import LOAN_TERMS_YEARS, Err, LoanRequest, RepaymentMethod

logger = logging.getLogger(__name__)

BTN_STYLE = {
    "padding": "0.75rem 2rem",
    "fontSize": "1rem",
    "backgroundColor": "#1a1a2e",
    "color": "white",
    "border": "none",
    "cursor": "pointer",
}

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

MODAL_HIDDEN = {"display": "none"}
MODAL_SHOWN = {
    "display": "block",
    "position": "fixed",
    "top": "0",
    "left": "0",
    "width": "100%",
    "height": "100%",
    "zIndex": "1000",
}

BACKDROP_STYLE = {
    "position": "absolute",
    "top": "0",
    "left": "0",
    "width": "100%",
    "height": "100%",
    "backgroundColor": "rgba(0, 0, 0, 0.5)",
}

MODAL_BOX_STYLE = {
    "backgroundColor": "white",
    "margin": "8% auto",
    "padding": "1.5rem 2rem",
    "borderRadius": "12px",
    "maxWidth": "560px",
    "position": "relative",
}

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"flex": "1", "minWidth": "160px"})


def _modal(modal_id, title, content_id, close_id):
    # Backdrop is a sibling of the box so clicks inside the box do not reach it
    return html.Div(id=modal_id, children=[
        html.Div(id=f"{modal_id}-backdrop", n_clicks=0, style=BACKDROP_STYLE),
        html.Div([
            html.Div([
                html.H3(title, style={"margin": "0"}),
                html.Button("×", id=close_id, n_clicks=0, style={
                    "border": "none", "background": "none",
                    "fontSize": "1.5rem", "cursor": "pointer",
                }),
            ], style={"display": "flex", "justifyContent": "space-between", "alignItems": "center"}),
            html.Div(id=content_id, style={"marginTop": "1rem"}),
        ], style=MODAL_BOX_STYLE),
    ], style=MODAL_HIDDEN)


AMOUNT_LABEL = f"Loan Amount ({amount_unit_label()})" if amount_unit_label() else "Loan Amount"

layout = html.Div([
    html.H2("Mortgage Calculator"),

    html.Div([
        _field("Repayment Method", dcc.Dropdown(
            id="repayment-method",
            options=[{"label": m.label, "value": m.value} for m in RepaymentMethod],
            placeholder="Select a method",
        )),
        _field(AMOUNT_LABEL, dcc.Input(
            id="loan-amount", type="number", placeholder="100", min=0, style=FIELD_STYLE,
        )),
        _field("Annual Interest Rate (%)", dcc.Input(
            id="annual-rate", type="number", placeholder="4.5", step=0.01, min=0, style=FIELD_STYLE,
        )),
        _field("Loan Term", dcc.Dropdown(
            id="loan-years",
            options=[{"label": f"{y} years", "value": y} for y in LOAN_TERMS_YEARS],
            placeholder="Select a term",
        )),
    ], style={"display": "flex", "gap": "1rem", "marginBottom": "1rem"}),

    html.Button("Calculate", id="calculate-btn", n_clicks=0, style=BTN_STYLE),

    # Loading spinner
    dcc.Loading(
        id="loading",
        children=[html.Div(id="loading-output")],
        type="circle",
    ),

    _modal("result-modal", "Calculation Result", "result-content", "close-result-btn"),
    _modal("error-modal", "Error", "error-content", "close-error-btn"),
])


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


@callback(
    [
        Output("result-content", "children"),
        Output("result-modal", "style"),
        Output("error-content", "children"),
        Output("error-modal", "style"),
        Output("loading-output", "children"),
    ],
    [
        Input("calculate-btn", "n_clicks"),
        Input("close-result-btn", "n_clicks"),
        Input("close-error-btn", "n_clicks"),
        Input("result-modal-backdrop", "n_clicks"),
        Input("error-modal-backdrop", "n_clicks"),
    ],
    [
        State("repayment-method", "value"),
        State("loan-amount", "value"),
        State("annual-rate", "value"),
        State("loan-years", "value"),
    ],
    prevent_initial_call=True,
)
def handle_form(calc_clicks, close_result_clicks, close_error_clicks,
                result_backdrop_clicks, error_backdrop_clicks,
                method, amount, rate, years):
    triggered = dash.ctx.triggered_id
    if triggered in ("close-result-btn", "result-modal-backdrop"):
        return no_update, MODAL_HIDDEN, no_update, no_update, ""
    if triggered in ("close-error-btn", "error-modal-backdrop"):
        return no_update, no_update, no_update, MODAL_HIDDEN, ""
    if triggered != "calculate-btn":
        return no_update, no_update, no_update, no_update, no_update

    loan_request = LoanRequest(
        repayment_method=method,
        loan_amount=scale_loan_amount(amount),
        annual_interest_rate_percent=rate,
        loan_years=years,
    )
    outcome = compute(loan_request)

    if isinstance(outcome, Err):
        logger.warning("Calculation rejected: %s", outcome.error.kind.value)
        return (
            no_update, MODAL_HIDDEN,
            html.P(outcome.error.message, style={"color": "#e94560"}), MODAL_SHOWN,
            "",
        )

    result = outcome.value
    content = _build_result(result, loan_request, amount)
    return content, MODAL_SHOWN, no_update, MODAL_HIDDEN, ""


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


def _result_item(row):
    children = [html.Div(row["label"], style={"fontSize": "0.85rem", "color": "#666"})]
    children.append(html.Div(row["value"], style={"fontSize": "1.3rem", "fontWeight": "bold"}))
    if row.get("description"):
        children.append(html.Div(row["description"], style={"fontSize": "0.8rem", "color": "#888"}))
    return html.Div(children, style={
        "borderBottom": "1px solid #eee",
        "padding": "0.75rem 0",
    })


def _build_result(result, loan_request, entered_amount):
    summary = loan_summary_rows(
        result.method,
        entered_amount,
        loan_request.loan_amount,
        loan_request.annual_interest_rate_percent,
        loan_request.loan_years,
    )
    summary_block = html.Div(
        [html.Div(f"{r['label']}: {r['value']}") for r in summary],
        style={"fontSize": "0.9rem", "color": "#444", "marginBottom": "0.5rem"},
    )

    fig = go.Figure(go.Pie(
        labels=["Principal", "Interest"],
        values=[
            float(loan_request.loan_amount),
            float(result.total_interest),
        ],
        marker={"colors": ["#1a1a2e", "#e94560"]},
        hole=0.5,
    ))
    fig.update_layout(height=240, margin={"t": 10, "b": 10, "l": 10, "r": 10}, showlegend=True)

    return html.Div(
        [summary_block]
        + [_result_item(r) for r in result_rows(result)]
        + [dcc.Graph(figure=fig, config={"displayModeBar": False})]
    )
