"""
stats.py — Run Statistics
==========================
Timing and operation-count bookkeeping for one algorithm run.

Timestamps are milliseconds since the epoch, the same unit the browser
driver gets from `Date.now()`, so values pass through the codec untouched.

    stats = RunStatistics()
    stats.start()
    stats.record_comparison()
    stats.record_swap(2)
    stats.finish()
    stats.elapsed_ms     # → float

The helpers keep the invariants:
  • counters only ever go up,
  • end_time is only set after start_time, and never before it.
"""

import time
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from shared.errors import InconsistentTimestamps, InvalidField


def now_ms() -> float:
    return time.time() * 1000.0


@dataclass
class RunStatistics:
    start_time:  Optional[float] = None
    end_time:    Optional[float] = None
    comparisons: int             = 0
    swaps:       int             = 0
    is_winner:   Optional[bool]  = None     # only set once a comparison is published

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, now: Optional[float] = None) -> None:
        """Stamp the start time and zero the counters."""
        self.start_time  = now_ms() if now is None else now
        self.end_time    = None
        self.comparisons = 0
        self.swaps       = 0
        self.is_winner   = None

    def finish(self, now: Optional[float] = None) -> None:
        if self.start_time is None:
            raise InconsistentTimestamps("Cannot finish a run that never started", "endTime")
        end = now_ms() if now is None else now
        if end < self.start_time:
            raise InconsistentTimestamps(
                f"endTime {end} is before startTime {self.start_time}", "endTime"
            )
        self.end_time = end

    def reset(self) -> None:
        self.start_time  = None
        self.end_time    = None
        self.comparisons = 0
        self.swaps       = 0
        self.is_winner   = None

    # ------------------------------------------------------------------
    # Counters
    # ------------------------------------------------------------------
    def record_comparison(self, count: int = 1) -> None:
        if count < 0:
            raise InvalidField("comparison count cannot go down", "comparisons")
        self.comparisons += count

    def record_swap(self, count: int = 1) -> None:
        if count < 0:
            raise InvalidField("swap count cannot go down", "swaps")
        self.swaps += count

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self.start_time is not None and self.end_time is None

    @property
    def is_finished(self) -> bool:
        return self.start_time is not None and self.end_time is not None

    @property
    def elapsed_ms(self) -> Optional[float]:
        if not self.is_finished:
            return None
        return self.end_time - self.start_time

    @property
    def operations(self) -> int:
        return self.comparisons + self.swaps

    def copy(self, **changes: Any) -> "RunStatistics":
        return replace(self, **changes)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "startTime":   self.start_time,
            "endTime":     self.end_time,
            "comparisons": self.comparisons,
            "swaps":       self.swaps,
        }
        if self.is_winner is not None:
            data["isWinner"] = self.is_winner
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunStatistics":
        return cls(
            start_time=data.get("startTime"),
            end_time=data.get("endTime"),
            comparisons=data.get("comparisons", 0),
            swaps=data.get("swaps", 0),
            is_winner=data.get("isWinner"),
        )
