import logging
from unittest import mock

import pytest

from glutkit.stopwatch import (
    DurationPrecision,
    SimpleProfiler,
    Stopwatch,
    profile_loop,
)


def make_clock(*values):
    it = iter(values)
    return lambda: next(it)


@pytest.mark.parametrize(
    "value, suffix",
    [
        ("microseconds", " microseconds"),
        ("milliseconds", " milliseconds"),
        ("seconds", " seconds"),
    ],
)
def test_suffix_text(value, suffix):
    assert DurationPrecision(value).suffix == suffix


def test_from_nanoseconds_per_unit():
    assert DurationPrecision.MICROSECONDS.from_nanoseconds(1500) == 1.5
    assert DurationPrecision.MILLISECONDS.from_nanoseconds(1_500_000) == 1.5
    assert DurationPrecision.SECONDS.from_nanoseconds(1_500_000_000) == 1.5


def test_stopwatch_milliseconds():
    watch = Stopwatch(DurationPrecision.MILLISECONDS, make_clock(0, 2_500_000))
    assert watch.stop() == 2.5
    assert watch.result == 2.5


def test_units_are_consistent():
    ns = 3_000_000_000
    ms = Stopwatch(DurationPrecision.MILLISECONDS, make_clock(0, ns)).stop()
    us = Stopwatch(DurationPrecision.MICROSECONDS, make_clock(0, ns)).stop()
    s = Stopwatch(DurationPrecision.SECONDS, make_clock(0, ns)).stop()
    assert us == ms * 1000
    assert ms == s * 1000


def test_milliseconds_truncate_below_microsecond():
    watch = Stopwatch(DurationPrecision.MILLISECONDS, make_clock(0, 999))
    assert watch.stop() == 0.0


def test_restart_resets_start_point():
    watch = Stopwatch(DurationPrecision.MICROSECONDS, make_clock(0, 5000, 7000))
    watch.restart()
    assert watch.stop() == 2.0


def test_context_manager_stops_on_exit():
    with Stopwatch(DurationPrecision.MICROSECONDS, make_clock(0, 4000)) as watch:
        assert watch.result == 0.0
    assert watch.result == 4.0


def test_real_clock_is_non_negative():
    with Stopwatch() as watch:
        pass
    assert watch.result >= 0.0


def test_profiler_accepts_missing_measurement():
    profiler = SimpleProfiler(2, "msg")
    assert profiler.add_value(None) is True
    assert profiler.count == 0


def test_profiler_stops_after_limit(caplog):
    profiler = SimpleProfiler(2, "render", DurationPrecision.SECONDS)
    with caplog.at_level(logging.INFO, logger="glutkit.stopwatch"):
        assert profiler.add_value(1.0) is True
        assert profiler.add_value(3.0) is True
        assert profiler.add_value(5.0) is False
    assert profiler.count == 2
    assert profiler.average == 2.0
    messages = [r.getMessage() for r in caplog.records]
    assert len(messages) == 1
    assert messages[0].startswith("render => sample count: 2 average duration: ")
    assert messages[0].endswith(" seconds")


def test_profile_loop_calls_func_and_averages(caplog):
    calls = []
    with caplog.at_level(logging.INFO, logger="glutkit.stopwatch"):
        with mock.patch("time.monotonic_ns", side_effect=[0, 8000]):
            avg = profile_loop(
                4,
                "loop",
                DurationPrecision.MICROSECONDS,
                lambda: calls.append(1),
            )
    assert len(calls) == 4
    assert avg == 2.0
    assert "loop => sample count: 4" in caplog.records[0].getMessage()


def test_profile_loop_real_clock_non_negative():
    calls = []
    avg = profile_loop(3, "real", DurationPrecision.MILLISECONDS, lambda: calls.append(1))
    assert len(calls) == 3
    assert avg >= 0.0


def test_profile_loop_rejects_zero_iterations():
    with pytest.raises(ValueError):
        profile_loop(0, "x", DurationPrecision.MILLISECONDS, lambda: None)


def test_profile_loop_requires_func():
    with pytest.raises(TypeError):
        profile_loop(1, "x", DurationPrecision.MILLISECONDS, None)