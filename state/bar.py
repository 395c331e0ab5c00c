import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Bar State Enum — maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class BarState(Enum):
    IDLE      = "idle"        # default colour
    COMPARING = "comparing"   # being compared right now
    SWAPPING  = "swapping"    # being moved right now
    SORTED    = "sorted"      # settled in its final position
    PADDING   = "padding"     # filler so both compare-mode columns line up


# ---------------------------------------------------------------------------
# ArrayBar
# ---------------------------------------------------------------------------
@dataclass
class ArrayBar:
    """
    One rendered element of the array.

    Attributes:
        value        : Height of the bar.
        is_comparing : Highlighted as part of the current comparison.
        is_swapping  : Highlighted as part of the current swap / write.
        is_sorted    : Known to be in its final position.
        is_padding   : None when the driver never set it, True for filler bars.

    The flags are independent booleans; by convention only one is "active"
    at a time, and `state` picks the one to draw when several are set.
    """

    value:        float
    is_comparing: bool           = False
    is_swapping:  bool           = False
    is_sorted:    bool           = False
    is_padding:   Optional[bool] = None

    # ------------------------------------------------------------------
    # State helpers
    # ------------------------------------------------------------------
    @property
    def state(self) -> BarState:
        if self.is_padding:
            return BarState.PADDING
        if self.is_swapping:
            return BarState.SWAPPING
        if self.is_comparing:
            return BarState.COMPARING
        if self.is_sorted:
            return BarState.SORTED
        return BarState.IDLE

    @property
    def active_flags(self) -> int:
        """How many of comparing / swapping / sorted are set at once."""
        return int(self.is_comparing) + int(self.is_swapping) + int(self.is_sorted)

    def clear_marks(self) -> None:
        """Drop the transient highlights, keep sorted / padding."""
        self.is_comparing = False
        self.is_swapping  = False

    def reset(self) -> None:
        self.clear_marks()
        self.is_sorted = False

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "value":       self.value,
            "isComparing": self.is_comparing,
            "isSwapping":  self.is_swapping,
            "isSorted":    self.is_sorted,
        }
        if self.is_padding is not None:
            data["isPadding"] = self.is_padding
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArrayBar":
        return cls(
            value=data["value"],
            is_comparing=data.get("isComparing", False),
            is_swapping=data.get("isSwapping", False),
            is_sorted=data.get("isSorted", False),
            is_padding=data.get("isPadding"),
        )

    def __repr__(self) -> str:
        return f"ArrayBar(value={self.value}, state={self.state.value})"


# ---------------------------------------------------------------------------
# Array helpers
# ---------------------------------------------------------------------------
def random_bars(
    size: int,
    low: int = 5,
    high: int = 100,
    seed: Optional[int] = None,
) -> List[ArrayBar]:
    """Fresh, unsorted bars with integer values drawn from [low, high]."""
    rng = random.Random(seed)
    return [ArrayBar(value=rng.randint(low, high)) for _ in range(size)]


def pad_bars(bars: List[ArrayBar], size: int) -> List[ArrayBar]:
    """
    Return a copy of `bars` extended with zero-height padding bars up to
    `size`.  Padding bars count as sorted so they never hold up a run.
    Arrays already at or above `size` come back unchanged (copied).
    """
    padded = [
        ArrayBar(b.value, b.is_comparing, b.is_swapping, b.is_sorted, b.is_padding)
        for b in bars
    ]
    while len(padded) < size:
        padded.append(ArrayBar(value=0, is_sorted=True, is_padding=True))
    return padded


def bar_values(bars: List[ArrayBar], include_padding: bool = False) -> List[float]:
    return [b.value for b in bars if include_padding or not b.is_padding]


def is_ascending(bars: List[ArrayBar]) -> bool:
    """True if the real (non-padding) values are in non-decreasing order."""
    values = bar_values(bars)
    return all(values[i] <= values[i + 1] for i in range(len(values) - 1))
