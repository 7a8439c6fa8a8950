from datetime import datetime

import pytest

from config import NAVY, RED
from steal_engine import AttemptRecord, StealSession, get_variant, metric_components
from viz.charts import (
    attempt_row_html, components_frame, format_tokens, format_xsteal,
    make_token_chart, outcome_label, token_color,
)


@pytest.mark.parametrize("tokens, expected", [
    (0.465, "+0.465"),
    (-0.535, "-0.535"),
    (0.0, "0.000"),
    (1.0, "+1.000"),
])
def test_format_tokens(tokens, expected):
    assert format_tokens(tokens) == expected


def test_format_xsteal():
    assert format_xsteal(0.535) == "53.5%"
    assert format_xsteal(0.4658333) == "46.6%"


def test_outcome_label():
    assert outcome_label(True).endswith("Out")
    assert outcome_label(False).endswith("Safe")


def test_token_color():
    assert token_color(0.2) != token_color(-0.2)
    assert token_color(-0.2) == RED
    assert token_color(0.0) == NAVY


def test_token_chart_none_for_empty(clock):
    assert make_token_chart(StealSession(clock=clock).history_frame()) is None
    assert make_token_chart(None) is None


def test_token_chart(clock, scenario_a):
    s = StealSession(clock=clock)
    s.evaluate(scenario_a, True)
    s.evaluate(scenario_a, False)
    fig = make_token_chart(s.history_frame())
    assert len(fig.data) == 1
    trace = fig.data[0]
    assert list(trace.y) == pytest.approx([0.465, -0.535])
    assert tuple(fig.layout.yaxis.range) == (-1.0, 1.0)
    assert list(fig.layout.xaxis.ticktext) == ["07:05:00 PM", "07:05:01 PM"]


def test_attempt_row_html():
    a = AttemptRecord(metrics={}, xsteal=0.535, tokens=0.465, was_successful=True,
                      captured_at=datetime(2024, 4, 12, 19, 42, 13))
    html = attempt_row_html(a)
    assert "07:42:13 PM" in html
    assert "+0.465" in html
    assert "xSteal: 53.5%" in html
    assert "Out" in html


def test_components_frame(scenario_b):
    v = get_variant("extended")
    df = components_frame(metric_components(scenario_b, v), v)
    assert list(df["Metric"]) == [m.label for m in v.metrics]
    assert df["Contribution"].sum() == pytest.approx(0.4658, abs=1e-3)
