"""
engine/
-------
Results layer: scoring a finished compare-mode race.

    from engine import compare, conclude
"""

from engine.comparison import compare, compare_stats, conclude, label_for

__all__ = [
    "compare",
    "compare_stats",
    "conclude",
    "label_for",
]
