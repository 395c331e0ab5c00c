"""
validation.py — Schema Validators
==================================
Checks the invariants the data model states but does not enforce on
construction.  Every `*_errors` function returns a list of SchemaError
instances (empty when valid) so a caller can report all problems at once;
`validate_*` raise the first one.

Rules:
  RunStatistics      timestamps are finite numbers or null;
                     end_time set ⇒ start_time set and end_time ≥ start_time;
                     counters are non-negative integers.
  ArrayBar           value is a finite number; flags are booleans.
  SubSession         algorithm is a catalog identifier;
                     current indices point inside the array.
  ComparisonOutcome  winner is "primary" or "secondary";
                     time_difference ≥ 0.
  Session            speed > 0, array_size > 0;
                     comparison_result present ⇒ show_results and both sorted.
"""

import math
from numbers import Real
from typing import List

from algorithms import is_known_algorithm
from shared.errors import (
    SchemaError,
    InvalidIdentifier,
    InconsistentTimestamps,
    InconsistentResult,
    InvalidField,
)
from state.bar import ArrayBar
from state.outcome import ComparisonOutcome, SLOTS
from state.session import SubSession, VisualizationSession
from state.stats import RunStatistics


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _is_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _flag_errors(where: str, flags, optional: bool = False) -> List[SchemaError]:
    """InvalidField for every flag that is not a bool (or None, when optional)."""
    errors: List[SchemaError] = []
    for name, value in flags:
        if isinstance(value, bool) or (optional and value is None):
            continue
        kind = "a boolean or null" if optional else "a boolean"
        errors.append(InvalidField(f"{where}.{name} must be {kind}, got {value!r}", f"{where}.{name}"))
    return errors


# ---------------------------------------------------------------------------
# RunStatistics
# ---------------------------------------------------------------------------
def stats_errors(stats: RunStatistics, where: str = "stats") -> List[SchemaError]:
    errors: List[SchemaError] = []

    for name, value in (("startTime", stats.start_time), ("endTime", stats.end_time)):
        if value is not None and not _is_number(value):
            errors.append(InvalidField(f"{where}.{name} must be a finite number or null", f"{where}.{name}"))

    if not _is_count(stats.comparisons):
        errors.append(InvalidField(f"{where}.comparisons must be a non-negative integer", f"{where}.comparisons"))
    if not _is_count(stats.swaps):
        errors.append(InvalidField(f"{where}.swaps must be a non-negative integer", f"{where}.swaps"))
    errors.extend(_flag_errors(where, [("isWinner", stats.is_winner)], optional=True))

    if stats.end_time is not None:
        if stats.start_time is None:
            errors.append(InconsistentTimestamps(
                f"{where}.endTime is set but startTime is not", f"{where}.endTime"))
        elif _is_number(stats.start_time) and _is_number(stats.end_time) \
                and stats.end_time < stats.start_time:
            errors.append(InconsistentTimestamps(
                f"{where}.endTime ({stats.end_time}) is before startTime ({stats.start_time})",
                f"{where}.endTime"))
    return errors


# ---------------------------------------------------------------------------
# ArrayBar / SubSession
# ---------------------------------------------------------------------------
def bar_errors(bar: ArrayBar, where: str = "bar") -> List[SchemaError]:
    errors: List[SchemaError] = []
    if not _is_number(bar.value):
        errors.append(InvalidField(f"{where}.value must be a number", f"{where}.value"))
    errors.extend(_flag_errors(where, [
        ("isComparing", bar.is_comparing),
        ("isSwapping",  bar.is_swapping),
        ("isSorted",    bar.is_sorted),
    ]))
    errors.extend(_flag_errors(where, [("isPadding", bar.is_padding)], optional=True))
    return errors


def sub_session_errors(sub: SubSession, where: str = "primary") -> List[SchemaError]:
    errors: List[SchemaError] = []

    if not is_known_algorithm(sub.algorithm):
        errors.append(InvalidIdentifier(f"{where}.algorithm {sub.algorithm!r} is not in the catalog",
                                        f"{where}.algorithm"))

    for i, bar in enumerate(sub.array):
        errors.extend(bar_errors(bar, f"{where}.array[{i}]"))

    size = len(sub.array)
    bad  = [i for i in sub.current_indices if not (_is_count(i) and i < size)]
    if bad:
        errors.append(InvalidField(f"{where}.currentIndices out of range: {bad}", f"{where}.currentIndices"))

    errors.extend(_flag_errors(where, [("isSorted", sub.is_sorted)]))
    errors.extend(_flag_errors(where, [("showInfo", sub.show_info)], optional=True))

    errors.extend(stats_errors(sub.stats, f"{where}.stats"))
    return errors


# ---------------------------------------------------------------------------
# ComparisonOutcome
# ---------------------------------------------------------------------------
def outcome_errors(outcome: ComparisonOutcome, where: str = "comparisonResult") -> List[SchemaError]:
    errors: List[SchemaError] = []
    if outcome.winner not in SLOTS:
        errors.append(InvalidField(f"{where}.winner must be one of {list(SLOTS)}, got {outcome.winner!r}",
                                   f"{where}.winner"))
    if not _is_number(outcome.time_difference) or outcome.time_difference < 0:
        errors.append(InvalidField(f"{where}.timeDifference must be a non-negative number",
                                   f"{where}.timeDifference"))
    if not _is_number(outcome.percentage_difference):
        errors.append(InvalidField(f"{where}.percentageDifference must be a number",
                                   f"{where}.percentageDifference"))
    if not all(isinstance(s, str) for s in outcome.insights):
        errors.append(InvalidField(f"{where}.insights must be strings", f"{where}.insights"))
    errors.extend(stats_errors(outcome.primary, f"{where}.primary"))
    errors.extend(stats_errors(outcome.secondary, f"{where}.secondary"))
    return errors


# ---------------------------------------------------------------------------
# VisualizationSession
# ---------------------------------------------------------------------------
def session_errors(session: VisualizationSession) -> List[SchemaError]:
    errors: List[SchemaError] = []

    if not _is_number(session.speed) or session.speed <= 0:
        errors.append(InvalidField(f"speed must be a positive number, got {session.speed!r}", "speed"))
    if not _is_count(session.array_size) or session.array_size == 0:
        errors.append(InvalidField(f"arraySize must be a positive integer, got {session.array_size!r}",
                                   "arraySize"))
    for name, value in (("isRunning", session.is_running), ("showResults", session.show_results)):
        if not isinstance(value, bool):
            errors.append(InvalidField(f"{name} must be a boolean, got {value!r}", name))

    errors.extend(sub_session_errors(session.primary, "primary"))
    errors.extend(sub_session_errors(session.secondary, "secondary"))

    if session.comparison_result is not None:
        if not session.show_results:
            errors.append(InconsistentResult("comparisonResult is present while showResults is false",
                                             "comparisonResult"))
        if not session.both_sorted:
            errors.append(InconsistentResult("comparisonResult is present while a sub-session is unsorted",
                                             "comparisonResult"))
        errors.extend(outcome_errors(session.comparison_result))
    return errors


# ---------------------------------------------------------------------------
# Raising variants
# ---------------------------------------------------------------------------
def validate_stats(stats: RunStatistics) -> None:
    errors = stats_errors(stats)
    if errors:
        raise errors[0]


def validate_session(session: VisualizationSession) -> None:
    errors = session_errors(session)
    if errors:
        raise errors[0]


def is_valid_session(session: VisualizationSession) -> bool:
    return not session_errors(session)
