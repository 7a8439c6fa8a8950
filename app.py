import logging
import os

import streamlit as st

from config import DEFAULT_VARIANT, HISTORY_SIZE, LOG_LEVEL, LOGO_PATH, VARIANT_LABELS
from steal_engine import StealSession, VARIANTS
from viz.layout import GLOBAL_CSS
from _pages import page_xsteal

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="xSteal", layout="centered", page_icon="⚾")
st.markdown(GLOBAL_CSS, unsafe_allow_html=True)


def _get_session():
    """One StealSession per browser session."""
    if "xsteal_session" not in st.session_state:
        st.session_state["xsteal_session"] = StealSession(variant=DEFAULT_VARIANT, capacity=HISTORY_SIZE)
        logger.info("New xSteal session (variant=%s, history=%d)", DEFAULT_VARIANT, HISTORY_SIZE)
    return st.session_state["xsteal_session"]


# ──────────────────────────────────────────────
# MAIN
# ──────────────────────────────────────────────
def main():
    if os.path.exists(LOGO_PATH):
        _lcol1, _lcol2, _lcol3 = st.sidebar.columns([1, 2, 1])
        with _lcol2:
            st.image(LOGO_PATH, use_container_width=True)
    st.sidebar.markdown(
        '<div style="text-align:center;padding:2px 0 5px 0;">'
        '<span style="display:block;font-size:22px;font-weight:900;font-family:Inter,sans-serif;letter-spacing:2px;">xSTEAL</span>'
        '<span style="display:block;font-size:10px;letter-spacing:1px;text-transform:uppercase;opacity:0.7;'
        'font-family:Inter,sans-serif;">Catcher Throwing Metrics</span>'
        '</div>',
        unsafe_allow_html=True,
    )
    st.sidebar.markdown("---")

    session = _get_session()
    names = list(VARIANTS)
    current = session.variant.name
    choice = st.sidebar.radio(
        "Metric Set", names,
        index=names.index(current) if current in names else 0,
        format_func=lambda n: VARIANT_LABELS.get(n, n),
    )
    if choice != current:
        session.set_variant(choice)

    page_xsteal(session)

    # Summary goes last so it includes an attempt logged on this run.
    st.sidebar.markdown("---")
    s = session.summary()
    st.sidebar.markdown(f'<div style="font-size:12px;padding:0 10px;">'
                        f'<b>{s["count"]}</b> / {session.history.capacity} attempts in window<br>'
                        f'<b>{s["outs"]}</b> outs, <b>{s["safes"]}</b> safe<br>'
                        f'<b>{s["total_tokens"]:+.3f}</b> tokens'
                        f'</div>', unsafe_allow_html=True)
    st.sidebar.button("Clear History", key="xs_reset", on_click=session.reset)


if __name__ == "__main__":
    main()
