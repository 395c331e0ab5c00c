"""
Session validator tests: each rule in isolation, and that a clean session
passes.
"""

import pytest

from engine import compare
from shared.errors import InconsistentResult, InvalidField
from state import (
    ArrayBar,
    ComparisonOutcome,
    RunStatistics,
    is_valid_session,
    outcome_errors,
    session_errors,
    sub_session_errors,
    validate_session,
)


def codes(errors):
    return [e.code for e in errors]


def test_fresh_session_is_valid(session):
    assert session_errors(session) == []
    assert is_valid_session(session)
    validate_session(session)


def test_finished_session_with_result_is_valid(finished_session):
    finished_session.publish_results(compare(finished_session))
    assert session_errors(finished_session) == []


def test_result_without_show_results(finished_session):
    finished_session.publish_results(compare(finished_session))
    finished_session.show_results = False
    assert codes(session_errors(finished_session)) == ["inconsistent_result"]


def test_result_with_unsorted_sub_session(finished_session):
    finished_session.publish_results(compare(finished_session))
    finished_session.primary.is_sorted = False
    assert codes(session_errors(finished_session)) == ["inconsistent_result"]
    with pytest.raises(InconsistentResult):
        validate_session(finished_session)


def test_speed_and_size_must_be_positive(session):
    session.speed = 0
    session.array_size = -3
    errors = session_errors(session)
    assert {e.field for e in errors} == {"speed", "arraySize"}
    with pytest.raises(InvalidField):
        validate_session(session)


def test_unknown_algorithm_in_slot(session):
    session.secondary.algorithm = "bogo"
    errors = session_errors(session)
    assert codes(errors) == ["invalid_identifier"]
    assert errors[0].field == "secondary.algorithm"


def test_current_indices_must_point_inside_the_array(session):
    session.primary.set_current([0, 8])
    errors = sub_session_errors(session.primary)
    assert codes(errors) == ["invalid_field"]
    assert "8" in errors[0].message


def test_bad_timestamps_inside_a_slot(session):
    session.primary.stats = RunStatistics(start_time=100, end_time=50)
    errors = session_errors(session)
    assert codes(errors) == ["inconsistent_timestamps"]
    assert errors[0].field == "primary.stats.endTime"


def test_non_numeric_bar_value(session):
    session.primary.array[2] = ArrayBar(value="tall")
    errors = session_errors(session)
    assert errors[0].field == "primary.array[2].value"


@pytest.mark.parametrize("start, end", [
    (float("nan"), 50),
    (100, float("nan")),
    (float("-inf"), 50),
    (100, float("inf")),
])
def test_non_finite_timestamps(session, start, end):
    session.primary.stats = RunStatistics(start_time=start, end_time=end)
    errors = session_errors(session)
    assert codes(errors) == ["invalid_field"]
    assert errors[0].field.startswith("primary.stats.")


@pytest.mark.parametrize("speed", [float("nan"), float("inf")])
def test_speed_must_be_finite(session, speed):
    session.speed = speed
    assert {e.field for e in session_errors(session)} == {"speed"}


def test_flags_must_be_booleans(session):
    session.is_running = "false"
    session.show_results = 1
    session.primary.is_sorted = "no"
    session.primary.show_info = "yes"
    session.secondary.array[0].is_swapping = "false"
    session.secondary.array[1].is_padding = 0
    session.secondary.stats.is_winner = "true"
    errors = session_errors(session)
    assert set(codes(errors)) == {"invalid_field"}
    assert {e.field for e in errors} == {
        "isRunning",
        "showResults",
        "primary.isSorted",
        "primary.showInfo",
        "secondary.array[0].isSwapping",
        "secondary.array[1].isPadding",
        "secondary.stats.isWinner",
    }


def test_optional_flags_accept_null(session):
    session.primary.show_info = None
    session.primary.array[0].is_padding = None
    session.primary.stats.is_winner = None
    assert session_errors(session) == []


def test_outcome_rules():
    outcome = ComparisonOutcome(winner="left", time_difference=-1, insights=["ok", 3])
    fields = {e.field for e in outcome_errors(outcome)}
    assert fields == {
        "comparisonResult.winner",
        "comparisonResult.timeDifference",
        "comparisonResult.insights",
    }


def test_errors_serialise_for_the_browser(session):
    session.speed = -1
    (error,) = session_errors(session)
    assert error.to_dict() == {
        "code": "invalid_field",
        "message": error.message,
        "field": "speed",
    }
