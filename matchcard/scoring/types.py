from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class Band(str, Enum):
    """
    Qualitative band for a score, with the color token the card renders it in.
    """
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    NEEDS_IMPROVEMENT = "needs_improvement"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def display_label(self) -> str:
        return _DISPLAY_LABELS[self]

    @property
    def color(self) -> str:
        return _COLORS[self]

    def to_dict(self) -> Dict[str, str]:
        return {
            "band": self.value,
            "label": self.label,
            "display_label": self.display_label,
            "color": self.color,
        }


_LABELS = {
    Band.EXCELLENT: "Excellent",
    Band.GOOD: "Good",
    Band.FAIR: "Fair",
    Band.NEEDS_IMPROVEMENT: "Needs Improvement",
}

_DISPLAY_LABELS = {
    Band.EXCELLENT: "Excellent Match",
    Band.GOOD: "Good Match",
    Band.FAIR: "Fair Match",
    Band.NEEDS_IMPROVEMENT: "Needs Improvement",
}

_COLORS = {
    Band.EXCELLENT: "green",
    Band.GOOD: "yellow",
    Band.FAIR: "orange",
    Band.NEEDS_IMPROVEMENT: "red",
}


class RecommendationKind(str, Enum):
    IMPROVEMENT = "improvement"
    POSITIVE = "positive"


@dataclass(frozen=True)
class Recommendation:
    code: str  # stable identifier, safe for agents/tests to match on
    message: str
    kind: RecommendationKind
    high_impact: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "kind": self.kind.value,
            "high_impact": self.high_impact,
        }
