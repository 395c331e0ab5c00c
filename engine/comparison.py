"""
comparison.py — Race Results
=============================
Turns two finished runs into the ComparisonOutcome the results card shows.

Usage:
    outcome = compare(session)        # both sub-sessions finished
    conclude(session)                 # compare + publish in one call

Scoring:
    winner                 – slot with the smaller elapsed time; on a tie the
                             slot with fewer comparisons + swaps; then primary.
    time_difference        – |elapsed(primary) − elapsed(secondary)|, ms.
    percentage_difference  – time_difference / elapsed(slower) × 100
                             (0 when the slower run took 0 ms).
Both are rounded to two decimals.  Input statistics are never mutated;
the outcome carries copies with `is_winner` set.
"""

from typing import List, Optional, Tuple

from algorithms import get_algorithm
from shared.errors import InconsistentResult
from shared.logger import get_logger
from state.outcome import ComparisonOutcome
from state.session import VisualizationSession
from state.stats import RunStatistics
from state.validation import stats_errors


logger = get_logger(__name__)


def label_for(algorithm: str) -> str:
    """Catalog label for an identifier, or the identifier itself if unknown."""
    info = get_algorithm(algorithm)
    return info.label if info else algorithm


def compare_stats(
    primary: RunStatistics,
    secondary: RunStatistics,
    primary_algorithm: str = "",
    secondary_algorithm: str = "",
) -> ComparisonOutcome:
    """Given two finished runs, produce a ComparisonOutcome."""
    for slot, stats in (("primary", primary), ("secondary", secondary)):
        errors = stats_errors(stats, f"{slot}.stats")
        if errors:
            raise errors[0]
        if not stats.is_finished:
            raise InconsistentResult(f"The {slot} run has not finished yet", slot)

    p_ms = primary.elapsed_ms
    s_ms = secondary.elapsed_ms

    winner = _pick_winner(p_ms, s_ms, primary.operations, secondary.operations)

    diff   = abs(p_ms - s_ms)
    slower = max(p_ms, s_ms)
    pct    = (diff / slower * 100.0) if slower > 0 else 0.0

    p_label, s_label = _labels(primary_algorithm, secondary_algorithm)

    outcome = ComparisonOutcome(
        winner=winner,
        time_difference=round(diff, 2),
        percentage_difference=round(pct, 2),
        insights=_insights(
            primary, secondary, p_label, s_label,
            primary_algorithm, secondary_algorithm, winner,
        ),
        primary=primary.copy(is_winner=winner == "primary"),
        secondary=secondary.copy(is_winner=winner == "secondary"),
    )
    logger.info(
        "Compared %s (%.2f ms) vs %s (%.2f ms): winner=%s",
        p_label, p_ms, s_label, s_ms, winner,
    )
    return outcome


def compare(session: VisualizationSession) -> ComparisonOutcome:
    return compare_stats(
        session.primary.stats,
        session.secondary.stats,
        session.primary.algorithm,
        session.secondary.algorithm,
    )


def conclude(session: VisualizationSession) -> ComparisonOutcome:
    """Compare both runs and publish the outcome on the session."""
    outcome = compare(session)
    session.publish_results(outcome)
    return outcome


# ---------------------------------------------------------------------------
# Internal
# ---------------------------------------------------------------------------
def _pick_winner(p_ms: float, s_ms: float, p_ops: int, s_ops: int) -> str:
    if p_ms != s_ms:
        return "primary" if p_ms < s_ms else "secondary"
    if p_ops != s_ops:
        return "primary" if p_ops < s_ops else "secondary"
    return "primary"


def _labels(primary_algorithm: str, secondary_algorithm: str) -> Tuple[str, str]:
    p_label = label_for(primary_algorithm) if primary_algorithm else "Primary"
    s_label = label_for(secondary_algorithm) if secondary_algorithm else "Secondary"
    if p_label == s_label:
        return f"{p_label} (primary)", f"{s_label} (secondary)"
    return p_label, s_label


def _count_sentence(noun: str, p: int, s: int, p_label: str, s_label: str) -> str:
    if p == s:
        return f"Both runs made {p} {noun}."
    fewer, more = (p_label, s_label) if p < s else (s_label, p_label)
    return f"{fewer} made {abs(p - s)} fewer {noun} than {more} ({p} vs {s})."


def _complexity_sentence(
    primary_algorithm: str,
    secondary_algorithm: str,
    p_label: str,
    s_label: str,
) -> Optional[str]:
    p_info = get_algorithm(primary_algorithm) if primary_algorithm else None
    s_info = get_algorithm(secondary_algorithm) if secondary_algorithm else None
    if p_info is None or s_info is None:
        return None
    if p_info.time_complexity == s_info.time_complexity:
        return (
            f"Both algorithms are {p_info.time_complexity} in time, "
            f"so the gap comes from the input order and constant factors."
        )
    return (
        f"{p_label} is {p_info.time_complexity} in time and {p_info.space_complexity} in space; "
        f"{s_label} is {s_info.time_complexity} in time and {s_info.space_complexity} in space."
    )


def _insights(
    primary: RunStatistics,
    secondary: RunStatistics,
    p_label: str,
    s_label: str,
    primary_algorithm: str,
    secondary_algorithm: str,
    winner: str,
) -> List[str]:
    p_ms = primary.elapsed_ms
    s_ms = secondary.elapsed_ms
    w_label, l_label = (p_label, s_label) if winner == "primary" else (s_label, p_label)

    lines: List[str] = []
    if p_ms == s_ms and primary.operations != secondary.operations:
        lines.append(f"Both runs finished in {p_ms:.2f} ms; {w_label} wins on fewer operations.")
    elif p_ms == s_ms:
        lines.append(f"Both runs finished in {p_ms:.2f} ms with identical work; the tie goes to {w_label}.")
    else:
        diff   = abs(p_ms - s_ms)
        slower = max(p_ms, s_ms)
        lines.append(
            f"{w_label} finished {diff:.2f} ms faster than {l_label} "
            f"({diff / slower * 100.0:.2f}% quicker)."
        )

    lines.append(_count_sentence("comparisons", primary.comparisons, secondary.comparisons, p_label, s_label))
    lines.append(_count_sentence("swaps", primary.swaps, secondary.swaps, p_label, s_label))

    complexity = _complexity_sentence(primary_algorithm, secondary_algorithm, p_label, s_label)
    if complexity:
        lines.append(complexity)
    return lines
