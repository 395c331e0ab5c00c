"""
session.py — Visualization Session
===================================
The in-memory shape of one visualizer tab.

A session always holds two sub-sessions, `primary` and `secondary`.
In "single" view mode only `primary` is shown; in "compare" mode both run
side by side and, once both are sorted, a ComparisonOutcome is published.

The browser shape also repeats primary's fields at the top level
(algorithm, array, stats, currentIndices, isSorted); here those are
read-only properties mirroring `primary`, and the codec writes them out.

Invariant kept by `publish_results`:
    comparison_result is not None  ⇒  show_results and both sub-sessions sorted
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from algorithms import require_algorithm
from shared.config import Config
from shared.errors import InconsistentResult, InvalidField
from shared.logger import get_logger
from state.bar import ArrayBar, random_bars
from state.outcome import ComparisonOutcome
from state.stats import RunStatistics


logger = get_logger(__name__)


class ViewMode(Enum):
    SINGLE  = "single"
    COMPARE = "compare"


class Theme(Enum):
    DARK  = "dark"
    LIGHT = "light"


# ---------------------------------------------------------------------------
# SubSession — one algorithm's run state
# ---------------------------------------------------------------------------
@dataclass
class SubSession:
    algorithm:       str
    array:           List[ArrayBar]  = field(default_factory=list)
    stats:           RunStatistics   = field(default_factory=RunStatistics)
    current_indices: List[int]       = field(default_factory=list)
    is_sorted:       bool            = False
    show_info:       Optional[bool]  = None   # info card toggle; None = never touched

    def set_current(self, indices: List[int]) -> None:
        self.current_indices = list(indices)

    def mark_sorted(self) -> None:
        """Flag every bar sorted and drop the highlights."""
        for bar in self.array:
            bar.clear_marks()
            bar.is_sorted = True
        self.current_indices = []
        self.is_sorted = True

    def load(self, bars: List[ArrayBar]) -> None:
        """Swap in a new array and forget the previous run."""
        self.array = bars
        self.current_indices = []
        self.is_sorted = False
        self.stats.reset()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "algorithm":      self.algorithm,
            "array":          [b.to_dict() for b in self.array],
            "stats":          self.stats.to_dict(),
            "currentIndices": list(self.current_indices),
            "isSorted":       self.is_sorted,
        }
        if self.show_info is not None:
            data["showInfo"] = self.show_info
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SubSession":
        return cls(
            algorithm=_require(data, "algorithm"),
            array=[ArrayBar.from_dict(b) for b in data.get("array", [])],
            stats=RunStatistics.from_dict(data.get("stats", {})),
            current_indices=list(data.get("currentIndices", [])),
            is_sorted=data.get("isSorted", False),
            show_info=data.get("showInfo"),
        )


# ---------------------------------------------------------------------------
# VisualizationSession
# ---------------------------------------------------------------------------
@dataclass
class VisualizationSession:
    primary:           SubSession
    secondary:         SubSession
    view_mode:         ViewMode                    = ViewMode.SINGLE
    is_running:        bool                        = False
    show_results:      bool                        = False
    speed:             float                       = 50.0
    array_size:        int                         = 50
    theme:             Theme                       = Theme.DARK
    comparison_result: Optional[ComparisonOutcome] = None

    # ------------------------------------------------------------------
    # Single-mode mirror of `primary`
    # ------------------------------------------------------------------
    @property
    def algorithm(self) -> str:
        return self.primary.algorithm

    @property
    def array(self) -> List[ArrayBar]:
        return self.primary.array

    @property
    def stats(self) -> RunStatistics:
        return self.primary.stats

    @property
    def current_indices(self) -> List[int]:
        return self.primary.current_indices

    @property
    def is_sorted(self) -> bool:
        return self.primary.is_sorted

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def is_compare(self) -> bool:
        return self.view_mode is ViewMode.COMPARE

    @property
    def both_sorted(self) -> bool:
        return self.primary.is_sorted and self.secondary.is_sorted

    def sub_session(self, slot: str) -> SubSession:
        if slot == "primary":
            return self.primary
        if slot == "secondary":
            return self.secondary
        raise InvalidField(f"Unknown slot {slot!r}", "slot")

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------
    def publish_results(self, outcome: ComparisonOutcome) -> None:
        """Attach a well-formed comparison result; both sub-sessions must be sorted."""
        from state.validation import outcome_errors

        errors = outcome_errors(outcome)
        if errors:
            raise errors[0]
        if not self.both_sorted:
            raise InconsistentResult(
                "Cannot publish a comparison while a sub-session is still unsorted",
                "comparisonResult",
            )
        self.comparison_result = outcome
        self.show_results      = True
        self.is_running        = False
        self.primary.stats.is_winner   = outcome.winner == "primary"
        self.secondary.stats.is_winner = outcome.winner == "secondary"
        logger.info("Published comparison result, winner=%s", outcome.winner)

    def clear_results(self) -> None:
        self.comparison_result = None
        self.show_results      = False
        self.primary.stats.is_winner   = None
        self.secondary.stats.is_winner = None

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            # single-mode mirror
            "algorithm":      self.primary.algorithm,
            "array":          [b.to_dict() for b in self.primary.array],
            "stats":          self.primary.stats.to_dict(),
            "currentIndices": list(self.primary.current_indices),
            "isSorted":       self.primary.is_sorted,
            # both slots
            "primary":        self.primary.to_dict(),
            "secondary":      self.secondary.to_dict(),
            "viewMode":       self.view_mode.value,
            "isRunning":      self.is_running,
            "showResults":    self.show_results,
            "speed":          self.speed,
            "arraySize":      self.array_size,
            "theme":          self.theme.value,
        }
        if self.comparison_result is not None:
            data["comparisonResult"] = self.comparison_result.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VisualizationSession":
        """
        Decode the browser shape.  The top-level single-mode fields are
        ignored in favour of `primary`.  Unknown discriminator values raise
        InvalidField; field-level rules are left to the validators.
        """
        result = data.get("comparisonResult")
        return cls(
            primary=SubSession.from_dict(_require(data, "primary")),
            secondary=SubSession.from_dict(_require(data, "secondary")),
            view_mode=_enum(ViewMode, data.get("viewMode", "single"), "viewMode"),
            is_running=data.get("isRunning", False),
            show_results=data.get("showResults", False),
            speed=data.get("speed", 50.0),
            array_size=data.get("arraySize", 50),
            theme=_enum(Theme, data.get("theme", "dark"), "theme"),
            comparison_result=ComparisonOutcome.from_dict(result) if result is not None else None,
        )


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------
def new_session(
    config: Optional[Config] = None,
    seed: Optional[int] = None,
    view_mode: Optional[str] = None,
    array_size: Optional[int] = None,
    primary_algorithm: Optional[str] = None,
    secondary_algorithm: Optional[str] = None,
) -> VisualizationSession:
    """
    Build a fresh session from configured defaults.  Both sub-sessions start
    from the same random values so a compare-mode race is fair.
    """
    cfg  = config or Config()
    size = cfg.array_size if array_size is None else array_size
    if size <= 0 or size > cfg.max_array_size:
        raise InvalidField(
            f"arraySize must be between 1 and {cfg.max_array_size}, got {size}", "arraySize"
        )

    first  = require_algorithm(primary_algorithm or cfg.default_algorithm)
    second = require_algorithm(secondary_algorithm or cfg.secondary_algorithm)

    bars = random_bars(size, cfg.min_bar_value, cfg.max_bar_value, seed=seed)
    logger.debug("New %d-bar session: %s vs %s (seed=%s)", size, first.key.value, second.key.value, seed)

    return VisualizationSession(
        primary=SubSession(algorithm=first.key.value, array=bars),
        secondary=SubSession(
            algorithm=second.key.value,
            array=[ArrayBar(value=b.value) for b in bars],
        ),
        view_mode=_enum(ViewMode, view_mode or cfg.view_mode, "viewMode"),
        speed=cfg.speed,
        array_size=size,
        theme=_enum(Theme, cfg.theme, "theme"),
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _require(data: Dict[str, Any], key: str) -> Any:
    if not isinstance(data, dict):
        raise InvalidField(f"Expected an object around {key!r}", key)
    if key not in data:
        raise InvalidField(f"Missing required field {key!r}", key)
    return data[key]


def _enum(enum_cls, value: Any, name: str):
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = [m.value for m in enum_cls]
        raise InvalidField(f"{name} must be one of {allowed}, got {value!r}", name) from exc
