"""xSteal calculator page."""
import logging

import streamlit as st

from steal_engine import InvalidInput, get_variant, metric_components
from viz.layout import page_title, section_header
from viz.charts import (
    attempt_row_html, components_frame, format_tokens, format_xsteal, make_token_chart,
)

logger = logging.getLogger(__name__)


def _metric_inputs(variant):
    """One number input per metric of the active variant, two per row."""
    values = {}
    cols = st.columns(2)
    for i, spec in enumerate(variant.metrics):
        with cols[i % 2]:
            values[spec.key] = st.number_input(
                f"{spec.label} ({spec.unit})",
                min_value=float(spec.min_value),
                max_value=float(spec.max_value),
                value=float(spec.default),
                step=float(spec.step),
                key=f"xs_in_{spec.key}",
            )
    return values


def page_xsteal(session):
    page_title("xSTEAL", "Catcher Throwing Metrics Calculator")

    variant = session.variant
    section_header(f"Throw Inputs — {variant.label}")
    values = _metric_inputs(variant)

    b1, b2 = st.columns(2)
    outcome = None
    with b1:
        if st.button("Successful Throw", key="xs_out"):
            outcome = True
    with b2:
        if st.button("Failed Attempt", key="xs_safe"):
            outcome = False

    if outcome is not None:
        with st.spinner("Calculating..."):
            try:
                session.evaluate(values, outcome)
            except InvalidInput:
                logger.warning("Rejected input for %s variant: %s", variant.name, values)

    if session.last_error:
        st.error(session.last_error)

    attempts = session.attempts()
    if not attempts:
        st.info("Log a throw to start the history.")
        return

    latest = attempts[-1]
    m1, m2, m3 = st.columns(3)
    m1.metric("Last xSteal", format_xsteal(latest.xsteal))
    m2.metric("Last Tokens", format_tokens(latest.tokens))
    m3.metric("Window Total", format_tokens(session.summary()["total_tokens"]))

    with st.expander("Last attempt breakdown"):
        latest_variant = get_variant(latest.variant)
        comps = metric_components(latest.metrics, latest_variant)
        st.dataframe(components_frame(comps, latest_variant),
                     use_container_width=True, hide_index=True)

    st.markdown("---")
    section_header("Throwing History")
    fig = make_token_chart(session.history_frame())
    if fig is not None:
        st.plotly_chart(fig, use_container_width=True, key="xs_tokens")

    # Most recent first.
    st.markdown("".join(attempt_row_html(a) for a in reversed(attempts)), unsafe_allow_html=True)
