from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from matchcard import config
from matchcard.models import AssessmentState, MatchAssessment
from .types import Recommendation, RecommendationKind


class AssessmentNotScoredError(RuntimeError):
    """Raised when scoring logic is asked to read a pending or failed assessment."""


QUALIFIED_MESSAGE = "Qualified - Resume meets minimum requirements"
BELOW_THRESHOLD_MESSAGE = "Below threshold - Consider improving your resume"


def qualifies(match_score: float) -> bool:
    return match_score >= config.QUALIFICATION_THRESHOLD


def qualification_message(match_score: float) -> str:
    return QUALIFIED_MESSAGE if qualifies(match_score) else BELOW_THRESHOLD_MESSAGE


# --- Rules ---
# Each rule looks at one assessment and returns at most one recommendation.

Rule = Callable[[MatchAssessment], Optional[Recommendation]]


def skills_rule(a: MatchAssessment) -> Optional[Recommendation]:
    if a.skills_score < config.SKILLS_IMPROVEMENT_THRESHOLD:
        return Recommendation(
            code="improve_skills",
            message="Focus on highlighting more relevant technical skills (highest impact)",
            kind=RecommendationKind.IMPROVEMENT,
            high_impact=True,
        )
    return None


def experience_rule(a: MatchAssessment) -> Optional[Recommendation]:
    if a.experience_score < config.EXPERIENCE_IMPROVEMENT_THRESHOLD:
        return Recommendation(
            code="emphasize_experience",
            message="Emphasize your relevant work experience and achievements",
            kind=RecommendationKind.IMPROVEMENT,
        )
    return None


def education_rule(a: MatchAssessment) -> Optional[Recommendation]:
    if a.education_score < config.EDUCATION_IMPROVEMENT_THRESHOLD:
        return Recommendation(
            code="include_education",
            message="Include relevant certifications or educational background",
            kind=RecommendationKind.IMPROVEMENT,
        )
    return None


def similar_companies_rule(a: MatchAssessment) -> Optional[Recommendation]:
    # Only meaningful when the job names a hiring company to compare against
    if a.company_score == 0 and a.has_target_company:
        return Recommendation(
            code="highlight_similar_companies",
            message="Highlight any experience with similar companies or clients",
            kind=RecommendationKind.IMPROVEMENT,
        )
    return None


def company_match_rule(a: MatchAssessment) -> Optional[Recommendation]:
    if a.company_score > 0:
        return Recommendation(
            code="company_match",
            message="Excellent! Your experience with similar companies is a strong advantage",
            kind=RecommendationKind.POSITIVE,
        )
    return None


def strong_match_rule(a: MatchAssessment) -> Optional[Recommendation]:
    if a.match_score >= config.STRONG_MATCH_THRESHOLD:
        return Recommendation(
            code="strong_match",
            message="Great match! Your profile aligns well with this position",
            kind=RecommendationKind.POSITIVE,
        )
    return None


def tailor_resume_rule(a: MatchAssessment) -> Optional[Recommendation]:
    if a.match_score < config.QUALIFICATION_THRESHOLD:
        return Recommendation(
            code="tailor_resume",
            message="Consider tailoring your resume to better match job requirements",
            kind=RecommendationKind.IMPROVEMENT,
        )
    return None


# Output order follows this tuple; most impactful first.
RULES: Tuple[Rule, ...] = (
    skills_rule,
    experience_rule,
    education_rule,
    similar_companies_rule,
    company_match_rule,
    strong_match_rule,
    tailor_resume_rule,
)


def recommend(assessment: MatchAssessment) -> List[Recommendation]:
    """
    Evaluate every rule in priority order and collect what fires.

    Only scored assessments carry meaningful numbers; pending and failed
    snapshots must be routed to their own presentation by the caller.
    """
    if assessment.state is not AssessmentState.SCORED:
        raise AssessmentNotScoredError(
            f"Cannot build recommendations for a {assessment.state.value} assessment"
        )

    out: List[Recommendation] = []
    for rule in RULES:
        rec = rule(assessment)
        if rec is not None:
            out.append(rec)
    return out
