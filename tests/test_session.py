import logging
import math

import pytest

from steal_engine import CALC_ERROR_MESSAGE
from steal_engine import InvalidInput, StealSession


def test_evaluate_scenario_a_out(clock, scenario_a):
    s = StealSession("standard", capacity=10, clock=clock)
    a = s.evaluate(scenario_a, True)
    assert a.xsteal == pytest.approx(0.535)
    assert a.tokens == pytest.approx(0.465)
    assert a.was_successful is True
    assert a.variant == "standard"
    assert a.timestamp == "07:05:00 PM"
    assert dict(a.metrics) == {"pitcher_time": 1.8, "runner_speed": 27.5, "jump_quality": 75.0}
    assert s.attempts() == [a]


def test_evaluate_scenario_b_safe(clock, scenario_b):
    s = StealSession("extended", clock=clock)
    a = s.evaluate(scenario_b, False)
    assert a.tokens == pytest.approx(-0.465833, abs=1e-5)
    assert set(a.metrics) == {"pitcher_time", "runner_speed", "jump_quality", "pop_time", "throw_velo"}


def test_record_keeps_only_variant_metrics(clock, scenario_b):
    s = StealSession("standard", clock=clock)
    a = s.evaluate(scenario_b, True)
    assert "pop_time" not in a.metrics


def test_rolling_window(clock, scenario_a):
    s = StealSession(capacity=10, clock=clock)
    made = [s.evaluate(dict(scenario_a, jump_quality=i), i % 2 == 0) for i in range(11)]
    assert len(s.attempts()) == 10
    assert s.attempts() == made[1:]


def test_invalid_input_records_nothing(clock, scenario_a, caplog):
    s = StealSession(clock=clock)
    with caplog.at_level(logging.WARNING, logger="steal_engine.core.session"):
        with pytest.raises(InvalidInput):
            s.evaluate(dict(scenario_a, runner_speed=float("nan")), True)
    assert s.attempts() == []
    assert s.last_error == CALC_ERROR_MESSAGE
    assert "runner_speed" in caplog.text


def test_error_cleared_on_next_success(clock, scenario_a):
    s = StealSession(clock=clock)
    with pytest.raises(InvalidInput):
        s.evaluate({}, True)
    s.evaluate(scenario_a, True)
    assert s.last_error is None


def test_switch_variant_between_attempts(clock, scenario_b):
    s = StealSession("standard", clock=clock)
    first = s.evaluate(scenario_b, True)
    s.set_variant("extended")
    second = s.evaluate(scenario_b, True)
    assert s.variant.name == "extended"
    assert (first.variant, second.variant) == ("standard", "extended")
    assert first.xsteal != second.xsteal


def test_unknown_variant(clock):
    with pytest.raises(InvalidInput):
        StealSession("turbo", clock=clock)


def test_summary(clock, scenario_a):
    s = StealSession(clock=clock)
    s.evaluate(scenario_a, True)
    s.evaluate(scenario_a, False)
    s.evaluate(scenario_a, True)
    summ = s.summary()
    assert summ["count"] == 3
    assert summ["outs"] == 2
    assert summ["safes"] == 1
    assert summ["total_tokens"] == pytest.approx(0.465 * 2 - 0.535)
    assert summ["mean_xsteal"] == pytest.approx(0.535)
    assert summ["out_rate"] == pytest.approx(2 / 3)


def test_summary_empty(clock):
    summ = StealSession(clock=clock).summary()
    assert summ["count"] == 0
    assert summ["total_tokens"] == 0.0
    assert math.isnan(summ["mean_xsteal"])
    assert math.isnan(summ["out_rate"])


def test_history_frame(clock, scenario_a):
    s = StealSession(clock=clock)
    assert s.history_frame().empty
    s.evaluate(scenario_a, True)
    s.evaluate(dict(scenario_a, pitcher_time=2.2), False)
    df = s.history_frame()
    assert list(df["timestamp"]) == ["07:05:00 PM", "07:05:01 PM"]
    assert list(df["was_successful"]) == [True, False]
    assert df["pitcher_time"].tolist() == [1.8, 2.2]
    assert df["tokens"].iloc[1] == pytest.approx(-0.375)


def test_reset(clock, scenario_a):
    s = StealSession(clock=clock)
    s.evaluate(scenario_a, True)
    s.reset()
    assert s.attempts() == []
    assert s.last_error is None


def test_default_session():
    s = StealSession()
    assert s.variant.name == "standard"
    assert s.history.capacity == 10
