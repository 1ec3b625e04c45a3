from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from matchcard import config
from matchcard.models import AssessmentState, MatchAssessment
from matchcard.scoring import (
    Band,
    Recommendation,
    classify,
    percent,
    qualification_message,
    qualifies,
    recommend,
)

logger = logging.getLogger(__name__)

PENDING_TITLE = "Resume Analysis Pending"
PENDING_DESCRIPTION = "Your resume is being analyzed. This usually takes a few minutes."
FAILED_TITLE = "Analysis Failed"
FAILED_HINT = "Please try uploading your resume again or contact support if the issue persists."
SCORED_TITLE = "Resume Match Score"


def format_score(value: float) -> str:
    """4.0 -> "4", 1.8 -> "1.8"."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


@dataclass(frozen=True)
class ScoreLine:
    """One score as the card shows it: value on its scale, band, progress."""
    key: str
    label: str
    score: float
    scale: float
    band: Band
    percent: float
    display: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "label": self.label,
            "score": self.score,
            "scale": self.scale,
            "display": self.display,
            "percent": self.percent,
            **self.band.to_dict(),
        }


def _score_line(key: str, label: str, score: float, scale: float) -> ScoreLine:
    return ScoreLine(
        key=key,
        label=label,
        score=score,
        scale=scale,
        band=classify(score, scale),
        percent=percent(score, scale),
        display=f"{format_score(score)}/{format_score(scale)}",
    )


def _company_line(score: float) -> ScoreLine:
    # The company bonus is shown as all-or-nothing progress with a "+N" value
    return ScoreLine(
        key="company",
        label="Company Match",
        score=score,
        scale=config.MAX_COMPANY_SCORE,
        band=classify(score, config.MAX_COMPANY_SCORE),
        percent=100.0 if score > 0 else 0.0,
        display=f"+{format_score(score)}" if score > 0 else format_score(score),
    )


@dataclass(frozen=True)
class ScoreCard:
    state: AssessmentState
    title: str
    application_id: Optional[int] = None
    headline: Optional[str] = None

    # Pending / failed
    description: Optional[str] = None
    error: Optional[str] = None
    hint: Optional[str] = None

    # Scored
    overall: Optional[ScoreLine] = None
    breakdown: List[ScoreLine] = field(default_factory=list)
    qualifies: Optional[bool] = None
    qualification_message: Optional[str] = None
    recommendations: List[Recommendation] = field(default_factory=list)
    matched_companies: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "application_id": self.application_id,
            "state": self.state.value,
            "title": self.title,
            "headline": self.headline,
            "description": self.description,
            "error": self.error,
            "hint": self.hint,
            "overall": self.overall.to_dict() if self.overall else None,
            "breakdown": [line.to_dict() for line in self.breakdown],
            "qualifies": self.qualifies,
            "qualification_message": self.qualification_message,
            "recommendations": [r.to_dict() for r in self.recommendations],
            "matched_companies": list(self.matched_companies),
        }


def build_scorecard(assessment: MatchAssessment) -> ScoreCard:
    """
    Dispatch on the assessment state and assemble what the card displays.

    - pending: waiting message only; scores are not read
    - failed: the processing error verbatim plus a re-upload hint
    - scored: bands for overall + four sub-scores, qualification gate,
      ordered recommendations and a short matched-company preview
    """
    state = assessment.state
    headline = assessment.job.headline if assessment.job else None
    logger.debug("Building scorecard id=%s state=%s", assessment.application_id, state.value)

    if state is AssessmentState.PENDING:
        return ScoreCard(
            state=state,
            title=PENDING_TITLE,
            application_id=assessment.application_id,
            headline=headline,
            description=PENDING_DESCRIPTION,
        )

    if state is AssessmentState.FAILED:
        return ScoreCard(
            state=state,
            title=FAILED_TITLE,
            application_id=assessment.application_id,
            headline=headline,
            error=assessment.processing_error,
            hint=FAILED_HINT,
        )

    if not assessment.is_consistent():
        logger.warning(
            "Assessment id=%s match score %s does not equal sub-score total %s; rendering as delivered",
            assessment.application_id,
            format_score(assessment.match_score),
            format_score(assessment.component_total),
        )

    breakdown = [
        _score_line("skills", "Skills Match", assessment.skills_score, config.MAX_SKILLS_SCORE),
        _score_line("experience", "Experience", assessment.experience_score, config.MAX_EXPERIENCE_SCORE),
        _score_line("education", "Education", assessment.education_score, config.MAX_EDUCATION_SCORE),
        _company_line(assessment.company_score),
    ]

    return ScoreCard(
        state=state,
        title=SCORED_TITLE,
        application_id=assessment.application_id,
        headline=headline,
        overall=_score_line("overall", "Match Score", assessment.match_score, config.MAX_MATCH_SCORE),
        breakdown=breakdown,
        qualifies=qualifies(assessment.match_score),
        qualification_message=qualification_message(assessment.match_score),
        recommendations=recommend(assessment),
        matched_companies=assessment.matched_companies[: config.COMPANY_PREVIEW_LIMIT],
    )
