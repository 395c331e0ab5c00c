from dataclasses import dataclass, field
from typing import Any, Dict, List

from shared.errors import InvalidField
from state.stats import RunStatistics


SLOTS = ("primary", "secondary")


@dataclass
class ComparisonOutcome:
    """
    Result of racing the two sub-sessions against each other.

    Attributes:
        winner                : "primary" or "secondary" — the slot that won.
        time_difference       : |elapsed(primary) - elapsed(secondary)| in ms.
        percentage_difference : time_difference as a percentage of the slower run.
        insights              : Ordered, human-readable remarks for the results card.
        primary / secondary   : Statistics of each run, with is_winner filled in.
    """

    winner:                str
    time_difference:       float         = 0.0
    percentage_difference: float         = 0.0
    insights:              List[str]     = field(default_factory=list)
    primary:               RunStatistics = field(default_factory=RunStatistics)
    secondary:             RunStatistics = field(default_factory=RunStatistics)

    @property
    def loser(self) -> str:
        return "secondary" if self.winner == "primary" else "primary"

    def stats_for(self, slot: str) -> RunStatistics:
        if slot not in SLOTS:
            raise InvalidField(f"Unknown slot {slot!r}", "winner")
        return self.primary if slot == "primary" else self.secondary

    def to_dict(self) -> Dict[str, Any]:
        return {
            "winner":               self.winner,
            "timeDifference":       self.time_difference,
            "percentageDifference": self.percentage_difference,
            "insights":             list(self.insights),
            "primary":              self.primary.to_dict(),
            "secondary":            self.secondary.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComparisonOutcome":
        if "winner" not in data:
            raise InvalidField("comparisonResult is missing 'winner'", "winner")
        return cls(
            winner=data["winner"],
            time_difference=data.get("timeDifference", 0.0),
            percentage_difference=data.get("percentageDifference", 0.0),
            insights=list(data.get("insights", [])),
            primary=RunStatistics.from_dict(data.get("primary", {})),
            secondary=RunStatistics.from_dict(data.get("secondary", {})),
        )
