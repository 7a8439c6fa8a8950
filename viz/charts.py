"""Chart builders and display formatting for the attempt history."""
import html

import plotly.graph_objects as go
import pandas as pd

from config import CREAM, GRID, NAVY, RED, TOKEN_Y_RANGE
from viz.layout import CHART_LAYOUT


def format_tokens(tokens):
    """Signed to 3 decimals; a leading '+' only for positive values."""
    return f"{'+' if tokens > 0 else ''}{tokens:.3f}"


def format_xsteal(xsteal):
    return f"{xsteal * 100:.1f}%"


def outcome_label(was_successful):
    return "✅ Out" if was_successful else "❌ Safe"


def token_color(tokens):
    if tokens > 0:
        return "#1a7a1a"
    if tokens < 0:
        return RED
    return NAVY


def make_token_chart(frame, height=260):
    """Line chart of tokens per attempt, oldest first.  None when there is nothing to plot."""
    if frame is None or frame.empty or "tokens" not in frame.columns:
        return None
    df = frame.reset_index(drop=True)
    # Timestamps have one-second resolution; use a categorical axis keyed by
    # position so two attempts in the same second both get a point.
    x = list(range(len(df)))
    hover = [
        f"{ts}<br>{outcome_label(ok)}<br>Tokens: {format_tokens(t)}<br>xSteal: {format_xsteal(p)}"
        for ts, ok, t, p in zip(df["timestamp"], df["was_successful"], df["tokens"], df["xsteal"])
    ]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=x, y=df["tokens"], mode="lines+markers",
        name="Tokens Earned",
        line=dict(color=RED, width=2, shape="spline"),
        marker=dict(color=NAVY, size=8),
        hovertext=hover, hoverinfo="text",
    ))
    fig.add_hline(y=0, line_dash="dot", line_color="#999")
    fig.update_layout(
        height=height, showlegend=False,
        hoverlabel=dict(bgcolor=CREAM, bordercolor=NAVY, font=dict(color=NAVY)),
        **CHART_LAYOUT,
    )
    fig.update_xaxes(
        tickmode="array", tickvals=x, ticktext=list(df["timestamp"]),
        showgrid=True, gridcolor=GRID, griddash="dash",
    )
    fig.update_yaxes(range=list(TOKEN_Y_RANGE), showgrid=True, gridcolor=GRID, griddash="dash",
                     title_text="Tokens")
    return fig


def attempt_row_html(attempt):
    return (
        f'<div class="attempt-row">'
        f'<div><span class="attempt-ts">{html.escape(attempt.timestamp)}</span>'
        f'<span class="attempt-outcome">{outcome_label(attempt.was_successful)}</span></div>'
        f'<div><div class="attempt-tokens" style="color:{token_color(attempt.tokens)} !important;">'
        f'{format_tokens(attempt.tokens)}</div>'
        f'<div class="attempt-xsteal">xSteal: {format_xsteal(attempt.xsteal)}</div></div>'
        f'</div>'
    )


def components_frame(components, variant):
    """Per-metric normalized component, weight and weighted contribution."""
    rows = []
    for spec in variant.metrics:
        c = components[spec.key]
        w = variant.weights[spec.key]
        rows.append({
            "Metric": spec.label,
            "Component": round(c, 3),
            "Weight": w,
            "Contribution": round(c * w, 4),
        })
    return pd.DataFrame(rows)
