"""
state/
------
Core data layer.  Public API:

    from state import VisualizationSession, SubSession, new_session
    from state import ArrayBar, BarState, RunStatistics, ComparisonOutcome
    from state import session_errors, validate_session
"""

from state.bar        import ArrayBar, BarState, random_bars, pad_bars, bar_values, is_ascending
from state.stats      import RunStatistics, now_ms
from state.outcome    import ComparisonOutcome, SLOTS
from state.session    import SubSession, VisualizationSession, ViewMode, Theme, new_session
from state.validation import (
    stats_errors,
    bar_errors,
    sub_session_errors,
    outcome_errors,
    session_errors,
    validate_stats,
    validate_session,
    is_valid_session,
)

__all__ = [
    "ArrayBar",          "BarState",
    "random_bars",       "pad_bars",       "bar_values",   "is_ascending",
    "RunStatistics",     "now_ms",
    "ComparisonOutcome", "SLOTS",
    "SubSession",        "VisualizationSession",
    "ViewMode",          "Theme",          "new_session",
    "stats_errors",      "bar_errors",     "sub_session_errors",
    "outcome_errors",    "session_errors",
    "validate_stats",    "validate_session", "is_valid_session",
]
