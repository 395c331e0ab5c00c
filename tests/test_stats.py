"""
RunStatistics tests: lifecycle helpers, monotone counters, the timestamp
invariant, and the optional isWinner field on the wire.
"""

import math

import pytest
from hypothesis import given, settings, strategies as st

from shared.errors import InconsistentTimestamps, InvalidField
from state import RunStatistics, stats_errors, validate_stats


def test_fresh_stats_are_idle():
    stats = RunStatistics()
    assert stats.start_time is None and stats.end_time is None
    assert not stats.is_running and not stats.is_finished
    assert stats.elapsed_ms is None
    assert stats_errors(stats) == []


def test_start_and_finish():
    stats = RunStatistics()
    stats.start(now=100)
    assert stats.is_running
    stats.record_comparison()
    stats.record_swap(3)
    stats.finish(now=250)
    assert stats.is_finished
    assert stats.elapsed_ms == 150
    assert (stats.comparisons, stats.swaps, stats.operations) == (1, 3, 4)


def test_start_clears_previous_run():
    stats = RunStatistics(start_time=1, end_time=2, comparisons=5, swaps=5, is_winner=True)
    stats.start(now=10)
    assert stats == RunStatistics(start_time=10)


def test_start_uses_wall_clock_by_default():
    stats = RunStatistics()
    stats.start()
    stats.finish()
    assert stats.elapsed_ms >= 0


def test_finish_without_start_is_rejected():
    with pytest.raises(InconsistentTimestamps):
        RunStatistics().finish(now=10)


def test_finish_before_start_is_rejected():
    stats = RunStatistics()
    stats.start(now=100)
    with pytest.raises(InconsistentTimestamps):
        stats.finish(now=50)
    assert stats.end_time is None


def test_counters_never_go_down():
    stats = RunStatistics()
    with pytest.raises(InvalidField):
        stats.record_comparison(-1)
    with pytest.raises(InvalidField):
        stats.record_swap(-2)
    assert stats.comparisons == 0 and stats.swaps == 0


def test_end_before_start_is_flagged_invalid():
    stats = RunStatistics(start_time=100, end_time=50)
    errors = stats_errors(stats)
    assert [e.code for e in errors] == ["inconsistent_timestamps"]
    with pytest.raises(InconsistentTimestamps):
        validate_stats(stats)


def test_end_without_start_is_flagged_invalid():
    errors = stats_errors(RunStatistics(end_time=50))
    assert [e.code for e in errors] == ["inconsistent_timestamps"]


def test_negative_or_non_integer_counters_are_flagged():
    errors = stats_errors(RunStatistics(comparisons=-1, swaps=1.5))
    assert {e.field for e in errors} == {"stats.comparisons", "stats.swaps"}


def test_wire_shape_omits_unset_winner_flag():
    stats = RunStatistics(start_time=1.0, end_time=3.0, comparisons=2, swaps=1)
    assert stats.to_dict() == {
        "startTime": 1.0, "endTime": 3.0, "comparisons": 2, "swaps": 1,
    }
    assert "isWinner" in RunStatistics(is_winner=False).to_dict()
    assert RunStatistics.from_dict(stats.to_dict()) == stats


# ------------------------- property-based ------------------------- #

timestamps = st.floats(min_value=0, max_value=1e13, allow_nan=False)


@settings(deadline=None, max_examples=100)
@given(timestamps, timestamps)
def test_validator_matches_timestamp_order(start, end):
    errors = stats_errors(RunStatistics(start_time=start, end_time=end))
    assert (errors == []) == (end >= start)


@settings(deadline=None, max_examples=100)
@given(st.floats(), st.floats())
def test_validator_rejects_non_finite_timestamps(start, end):
    errors = stats_errors(RunStatistics(start_time=start, end_time=end))
    finite = math.isfinite(start) and math.isfinite(end)
    assert (errors == []) == (finite and end >= start)


def test_nan_start_is_not_a_valid_run():
    stats = RunStatistics(start_time=float("nan"), end_time=50)
    (error,) = stats_errors(stats)
    assert error.field == "stats.startTime"
    with pytest.raises(InvalidField):
        validate_stats(stats)


@settings(deadline=None, max_examples=60)
@given(st.lists(st.tuples(st.sampled_from(["cmp", "swap"]), st.integers(0, 50)), max_size=40))
def test_counters_are_monotone(ops):
    stats = RunStatistics()
    stats.start(now=0)
    seen = (0, 0)
    for kind, n in ops:
        if kind == "cmp":
            stats.record_comparison(n)
        else:
            stats.record_swap(n)
        now = (stats.comparisons, stats.swaps)
        assert now[0] >= seen[0] and now[1] >= seen[1]
        seen = now
    assert stats_errors(stats) == []
