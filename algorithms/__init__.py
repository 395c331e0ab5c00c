"""
algorithms/__init__.py — Algorithm Catalog
============================================
Single source of truth for every sorting algorithm the visualizer knows about.

    from algorithms import REGISTRY, SortingAlgorithm, get_algorithm

SortingAlgorithm is a closed enum of the fourteen identifiers.
REGISTRY is a dict keyed by that enum:
    {
        SortingAlgorithm.BUBBLE: AlgoInfo(key, label, description, time, space),
        …
    }

The table is checked for totality when this module is imported: adding an
enum member without a REGISTRY entry (or the reverse) fails on import, so
the two can never drift apart.

Lookups outside the fixed set are the caller's problem: `get_algorithm`
answers None, `require_algorithm` raises InvalidIdentifier for callers that
want the guard done for them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Union

from shared.errors import InvalidIdentifier


# ---------------------------------------------------------------------------
# SortingAlgorithm — the fixed identifier set
# ---------------------------------------------------------------------------
class SortingAlgorithm(str, Enum):
    BUBBLE    = "bubble"
    QUICK     = "quick"
    MERGE     = "merge"
    INSERTION = "insertion"
    SELECTION = "selection"
    HEAP      = "heap"
    SHELL     = "shell"
    COCKTAIL  = "cocktail"
    GNOME     = "gnome"
    COMB      = "comb"
    CYCLE     = "cycle"
    PANCAKE   = "pancake"
    COUNTING  = "counting"
    RADIX     = "radix"


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:              SortingAlgorithm
    label:            str               # human label, e.g. "Quick Sort"
    description:      str               # one paragraph for the info card
    time_complexity:  str               # e.g. "O(n log n)"
    space_complexity: str               # e.g. "O(log n)"

    def to_dict(self) -> dict:
        return {
            "key":             self.key.value,
            "label":           self.label,
            "description":     self.description,
            "timeComplexity":  self.time_complexity,
            "spaceComplexity": self.space_complexity,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[SortingAlgorithm, AlgoInfo] = {

    SortingAlgorithm.BUBBLE: AlgoInfo(
        key=SortingAlgorithm.BUBBLE, label="Bubble Sort",
        description="A simple sorting algorithm that repeatedly steps through the list, "
                    "compares adjacent elements and swaps them if they are in the wrong order.",
        time_complexity="O(n²)", space_complexity="O(1)",
    ),

    SortingAlgorithm.QUICK: AlgoInfo(
        key=SortingAlgorithm.QUICK, label="Quick Sort",
        description="A divide-and-conquer algorithm that works by selecting a 'pivot' element "
                    "and partitioning the array around it.",
        time_complexity="O(n log n)", space_complexity="O(log n)",
    ),

    SortingAlgorithm.MERGE: AlgoInfo(
        key=SortingAlgorithm.MERGE, label="Merge Sort",
        description="A divide-and-conquer algorithm that divides the array into smaller "
                    "subarrays, sorts them, and then merges them.",
        time_complexity="O(n log n)", space_complexity="O(n)",
    ),

    SortingAlgorithm.INSERTION: AlgoInfo(
        key=SortingAlgorithm.INSERTION, label="Insertion Sort",
        description="Builds the final sorted array one item at a time by repeatedly inserting "
                    "a new element into the sorted portion of the array.",
        time_complexity="O(n²)", space_complexity="O(1)",
    ),

    SortingAlgorithm.SELECTION: AlgoInfo(
        key=SortingAlgorithm.SELECTION, label="Selection Sort",
        description="Divides the input list into a sorted and an unsorted region, and "
                    "repeatedly selects the smallest element from the unsorted region.",
        time_complexity="O(n²)", space_complexity="O(1)",
    ),

    SortingAlgorithm.HEAP: AlgoInfo(
        key=SortingAlgorithm.HEAP, label="Heap Sort",
        description="Uses a binary heap data structure to sort elements by repeatedly "
                    "extracting the maximum element.",
        time_complexity="O(n log n)", space_complexity="O(1)",
    ),

    SortingAlgorithm.SHELL: AlgoInfo(
        key=SortingAlgorithm.SHELL, label="Shell Sort",
        description="An optimization of insertion sort that allows the exchange of items that "
                    "are far apart, progressively reducing the gap between elements to be compared.",
        time_complexity="O(n log n) ~ O(n²)", space_complexity="O(1)",
    ),

    SortingAlgorithm.COCKTAIL: AlgoInfo(
        key=SortingAlgorithm.COCKTAIL, label="Cocktail Shaker Sort",
        description="A variation of bubble sort that sorts bidirectionally, bubbling both the "
                    "largest and smallest values in each pass.",
        time_complexity="O(n²)", space_complexity="O(1)",
    ),

    SortingAlgorithm.GNOME: AlgoInfo(
        key=SortingAlgorithm.GNOME, label="Gnome Sort",
        description="A simple sorting algorithm similar to insertion sort, but moving elements "
                    "to their proper position by a series of swaps.",
        time_complexity="O(n²)", space_complexity="O(1)",
    ),

    SortingAlgorithm.COMB: AlgoInfo(
        key=SortingAlgorithm.COMB, label="Comb Sort",
        description="An improvement over bubble sort that eliminates turtles (small values "
                    "near the end) effectively.",
        time_complexity="O(n² / 2^p)", space_complexity="O(1)",
    ),

    SortingAlgorithm.CYCLE: AlgoInfo(
        key=SortingAlgorithm.CYCLE, label="Cycle Sort",
        description="An in-place sorting algorithm that minimizes memory writes by cycling "
                    "through arrays to make the minimum number of moves.",
        time_complexity="O(n²)", space_complexity="O(1)",
    ),

    SortingAlgorithm.PANCAKE: AlgoInfo(
        key=SortingAlgorithm.PANCAKE, label="Pancake Sort",
        description="Sorts by repeatedly flipping the prefix of the array (like flipping "
                    "pancakes) until the array is sorted.",
        time_complexity="O(n²)", space_complexity="O(1)",
    ),

    SortingAlgorithm.COUNTING: AlgoInfo(
        key=SortingAlgorithm.COUNTING, label="Counting Sort",
        description="An integer sorting algorithm that works by counting the number of objects "
                    "having distinct key values, then calculating their positions.",
        time_complexity="O(n + k)", space_complexity="O(k)",
    ),

    SortingAlgorithm.RADIX: AlgoInfo(
        key=SortingAlgorithm.RADIX, label="Radix Sort",
        description="Sorts integers by processing each digit position, starting from the least "
                    "significant digit to the most significant digit.",
        time_complexity="O(d * (n + k))", space_complexity="O(n + k)",
    ),
}


def _check_total() -> None:
    missing = [a.value for a in SortingAlgorithm if a not in REGISTRY]
    extra   = [k for k in REGISTRY if not isinstance(k, SortingAlgorithm)]
    if missing or extra:
        raise RuntimeError(f"Algorithm catalog out of sync: missing={missing} extra={extra}")
    for algo, info in REGISTRY.items():
        if info.key is not algo:
            raise RuntimeError(f"Catalog entry {algo.value!r} is filed under key {info.key.value!r}")
        if not (info.description and info.time_complexity and info.space_complexity):
            raise RuntimeError(f"Catalog entry {algo.value!r} has an empty field")


_check_total()


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def is_known_algorithm(key: Union[str, SortingAlgorithm]) -> bool:
    try:
        SortingAlgorithm(key)
    except ValueError:
        return False
    return True


def get_algorithm(key: Union[str, SortingAlgorithm]) -> Optional[AlgoInfo]:
    """Return AlgoInfo by identifier, or None."""
    if not is_known_algorithm(key):
        return None
    return REGISTRY[SortingAlgorithm(key)]


def require_algorithm(key: Union[str, SortingAlgorithm]) -> AlgoInfo:
    """Like get_algorithm, but an unknown identifier raises InvalidIdentifier."""
    info = get_algorithm(key)
    if info is None:
        raise InvalidIdentifier(f"Unknown algorithm: {key!r}", "algorithm")
    return info


def list_algorithms() -> List[AlgoInfo]:
    """Return all catalog entries in identifier declaration order."""
    return [REGISTRY[a] for a in SortingAlgorithm]


def algorithms_by_complexity(time_complexity: str) -> List[AlgoInfo]:
    """Filter catalog by exact time-complexity expression, e.g. "O(n²)"."""
    return [a for a in list_algorithms() if a.time_complexity == time_complexity]


__all__ = [
    "SortingAlgorithm",
    "AlgoInfo",
    "REGISTRY",
    "is_known_algorithm",
    "get_algorithm",
    "require_algorithm",
    "list_algorithms",
    "algorithms_by_complexity",
]
