"""Layout utilities — CSS, chart defaults, section headers."""
import streamlit as st

from config import CREAM, NAVY, RED

GLOBAL_CSS = f"""<style>
    @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;600;800;900&family=Roboto+Mono:wght@400;600&display=swap');

    [data-testid="stAppViewContainer"],
    [data-testid="stAppViewContainer"] > .main,
    .stApp {{ background-color: {CREAM} !important; }}

    /* Sidebar - navy background, red accents */
    [data-testid="stSidebar"],
    [data-testid="stSidebar"] > div,
    [data-testid="stSidebar"] section {{ background-color: {NAVY} !important; }}
    [data-testid="stSidebar"] *,
    [data-testid="stSidebar"] label p,
    [data-testid="stSidebar"] [data-testid="stMarkdownContainer"] p {{
        color: #ffffff !important;
        font-family: 'Inter', sans-serif !important;
    }}
    [data-testid="stSidebar"] hr {{ border-color: {RED} !important; opacity: 0.4 !important; }}

    [data-testid="stAppViewContainer"] h1,
    [data-testid="stAppViewContainer"] h2,
    [data-testid="stAppViewContainer"] h3,
    [data-testid="stAppViewContainer"] p,
    [data-testid="stAppViewContainer"] label,
    [data-testid="stAppViewContainer"] [data-testid="stMetricValue"],
    [data-testid="stAppViewContainer"] [data-testid="stMetricLabel"] {{
        color: {NAVY} !important;
        font-family: 'Inter', sans-serif !important;
    }}

    /* Buttons */
    .stButton > button {{
        background-color: {NAVY} !important;
        color: #ffffff !important;
        border: 2px solid {NAVY} !important;
        font-weight: 700 !important;
        width: 100%;
    }}
    .stButton > button:hover {{ background-color: {RED} !important; border-color: {RED} !important; }}

    [data-testid="stAppViewContainer"] .stPlotlyChart {{
        background-color: #ffffff !important;
        border-radius: 8px;
    }}

    .block-container {{ padding-top: 1rem; max-width: 1000px; }}

    .xsteal-title {{
        text-align: center; font-size: 40px; font-weight: 900; letter-spacing: 2px;
        color: {NAVY} !important; font-family: 'Inter', sans-serif; margin-bottom: 0;
    }}
    .xsteal-sub {{
        text-align: center; font-size: 15px; font-weight: 600;
        color: {RED} !important; font-family: 'Inter', sans-serif; margin-top: 2px;
    }}

    .section-header {{
        font-size: 14px !important;
        font-weight: 700 !important;
        color: {NAVY} !important;
        text-transform: uppercase;
        letter-spacing: 0.5px;
        border-bottom: 2px solid {RED};
        padding-bottom: 6px;
        margin-bottom: 12px !important;
        margin-top: 8px !important;
    }}

    /* Attempt rows */
    .attempt-row {{
        display: flex; justify-content: space-between; align-items: center;
        padding: 10px 14px; margin-bottom: 8px; border-radius: 6px;
        border: 2px solid {NAVY}; background-color: {CREAM};
    }}
    .attempt-ts {{ font-family: 'Roboto Mono', monospace; color: {NAVY} !important; }}
    .attempt-outcome {{ margin-left: 16px; font-size: 13px; }}
    .attempt-tokens {{ font-family: 'Roboto Mono', monospace; font-size: 18px; font-weight: 700; text-align: right; }}
    .attempt-xsteal {{ font-size: 12px; color: #666 !important; text-align: right; }}
</style>"""

CHART_LAYOUT = dict(
    plot_bgcolor="white", paper_bgcolor="white",
    font=dict(size=11, color=NAVY, family="Roboto Mono, monospace"),
    margin=dict(l=45, r=10, t=30, b=40),
    xaxis=dict(tickfont=dict(color=NAVY), title_font=dict(color=NAVY)),
    yaxis=dict(tickfont=dict(color=NAVY), title_font=dict(color=NAVY)),
)


def section_header(text):
    st.markdown(f'<div class="section-header">{text}</div>', unsafe_allow_html=True)


def page_title(title, subtitle):
    st.markdown(
        f'<div class="xsteal-title">{title}</div>'
        f'<div class="xsteal-sub">{subtitle}</div>',
        unsafe_allow_html=True,
    )
