"""
VisualizationSession tests: construction from defaults, the single-mode
mirror, publishing results, and the browser wire shape.
"""

import pytest

from engine import compare
from shared.errors import InconsistentResult, InvalidField, InvalidIdentifier
from state import (
    ComparisonOutcome,
    SubSession,
    Theme,
    ViewMode,
    VisualizationSession,
    bar_values,
    new_session,
)


def test_new_session_uses_config_defaults(config):
    s = new_session(config, seed=1)
    assert s.view_mode is ViewMode.SINGLE
    assert s.theme is Theme.DARK
    assert s.array_size == 8
    assert s.speed == config.speed
    assert (s.primary.algorithm, s.secondary.algorithm) == ("bubble", "quick")
    assert not s.is_running and not s.show_results
    assert s.comparison_result is None


def test_both_slots_start_from_the_same_values(session):
    assert bar_values(session.primary.array) == bar_values(session.secondary.array)
    assert session.primary.array[0] is not session.secondary.array[0]


def test_new_session_overrides(config):
    s = new_session(config, view_mode="compare", array_size=4,
                    primary_algorithm="heap", secondary_algorithm="radix")
    assert s.is_compare
    assert len(s.primary.array) == 4
    assert (s.primary.algorithm, s.secondary.algorithm) == ("heap", "radix")


def test_new_session_rejects_bad_input(config):
    with pytest.raises(InvalidField):
        new_session(config, array_size=0)
    with pytest.raises(InvalidField):
        new_session(config, array_size=config.max_array_size + 1)
    with pytest.raises(InvalidIdentifier):
        new_session(config, primary_algorithm="bogo")
    with pytest.raises(InvalidField):
        new_session(config, view_mode="triple")


def test_single_mode_mirror_tracks_primary(session):
    assert session.algorithm == session.primary.algorithm
    assert session.array is session.primary.array
    assert session.stats is session.primary.stats
    session.primary.set_current([0, 1])
    assert session.current_indices == [0, 1]
    assert not session.is_sorted
    session.primary.mark_sorted()
    assert session.is_sorted


def test_mark_sorted_settles_every_bar(session):
    session.primary.array[0].is_comparing = True
    session.primary.set_current([0])
    session.primary.mark_sorted()
    assert all(b.is_sorted and not b.is_comparing for b in session.primary.array)
    assert session.primary.current_indices == []


def test_load_forgets_previous_run(finished_session):
    sub = finished_session.primary
    sub.load([])
    assert not sub.is_sorted
    assert sub.stats.start_time is None and sub.stats.comparisons == 0


def test_sub_session_lookup(session):
    assert session.sub_session("secondary") is session.secondary
    with pytest.raises(InvalidField):
        session.sub_session("tertiary")


def test_publish_requires_both_sorted(finished_session):
    outcome = compare(finished_session)
    finished_session.secondary.is_sorted = False
    with pytest.raises(InconsistentResult):
        finished_session.publish_results(outcome)
    assert finished_session.comparison_result is None
    assert not finished_session.show_results


def test_publish_and_clear_results(finished_session):
    finished_session.is_running = True
    outcome = compare(finished_session)
    finished_session.publish_results(outcome)
    assert finished_session.comparison_result is outcome
    assert finished_session.show_results and not finished_session.is_running
    assert finished_session.primary.stats.is_winner is True
    assert finished_session.secondary.stats.is_winner is False

    finished_session.clear_results()
    assert finished_session.comparison_result is None
    assert not finished_session.show_results
    assert finished_session.primary.stats.is_winner is None


def test_publish_rejects_malformed_outcome(finished_session):
    outcome = compare(finished_session)
    outcome.winner = "left"
    with pytest.raises(InvalidField) as exc:
        finished_session.publish_results(outcome)
    assert exc.value.field == "comparisonResult.winner"
    assert finished_session.comparison_result is None
    assert not finished_session.show_results
    assert finished_session.primary.stats.is_winner is None
    assert finished_session.secondary.stats.is_winner is None


def test_decode_keeps_flag_values_as_sent(session):
    data = session.to_dict()
    data["isRunning"] = "false"
    data["primary"]["isSorted"] = "no"
    data["primary"]["array"][0]["isSorted"] = "yes"
    decoded = VisualizationSession.from_dict(data)
    assert decoded.is_running == "false"
    assert decoded.primary.is_sorted == "no"
    assert decoded.primary.array[0].is_sorted == "yes"


def test_wire_shape(session):
    data = session.to_dict()
    assert data["viewMode"] == "compare"
    assert data["theme"] == "dark"
    assert data["arraySize"] == 8
    assert data["algorithm"] == data["primary"]["algorithm"]
    assert data["array"] == data["primary"]["array"]
    assert "comparisonResult" not in data
    assert "showInfo" not in data["primary"]


def test_decode_round_trip(finished_session):
    finished_session.primary.show_info = True
    outcome = compare(finished_session)
    finished_session.publish_results(outcome)

    decoded = VisualizationSession.from_dict(finished_session.to_dict())
    assert decoded == finished_session
    assert decoded.secondary.show_info is None


def test_decode_rejects_unknown_discriminators(session):
    data = session.to_dict()
    data["theme"] = "sepia"
    with pytest.raises(InvalidField) as exc:
        VisualizationSession.from_dict(data)
    assert exc.value.field == "theme"

    data = session.to_dict()
    del data["secondary"]
    with pytest.raises(InvalidField):
        VisualizationSession.from_dict(data)


def test_outcome_helpers():
    outcome = ComparisonOutcome(winner="secondary")
    assert outcome.loser == "primary"
    assert outcome.stats_for("secondary") is outcome.secondary
    with pytest.raises(InvalidField):
        outcome.stats_for("left")


def test_sub_session_defaults():
    sub = SubSession(algorithm="gnome")
    assert sub.array == [] and sub.current_indices == []
    assert sub.show_info is None
    assert sub.to_dict()["stats"]["comparisons"] == 0
