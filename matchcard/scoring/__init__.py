from .bands import classify, percent, ratio, rescale_to_overall
from .rules import AssessmentNotScoredError, qualification_message, qualifies, recommend
from .types import Band, Recommendation, RecommendationKind

__all__ = [
    "classify",
    "percent",
    "ratio",
    "rescale_to_overall",
    "qualifies",
    "qualification_message",
    "recommend",
    "AssessmentNotScoredError",
    "Band",
    "Recommendation",
    "RecommendationKind",
]
