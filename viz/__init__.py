"""Visualization helpers — charts, formatting, layout utilities."""
from viz.layout import CHART_LAYOUT, section_header, page_title, GLOBAL_CSS
from viz.charts import (
    make_token_chart, attempt_row_html, components_frame,
    format_tokens, format_xsteal, outcome_label, token_color,
)
