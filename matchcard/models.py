from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class AssessmentState(str, Enum):
    PENDING = "pending"
    FAILED = "failed"
    SCORED = "scored"


class AssessmentLoadError(ValueError):
    """Raised when an assessment payload cannot be decoded."""


def normalize_whitespace(text: str) -> str:
    return " ".join((text or "").split()).strip()


@dataclass(frozen=True)
class JobContext:
    """
    The job an assessment was scored against, as far as the score card needs it.
    """
    title: str
    company_name: Optional[str] = None
    # The job names a hiring company, even one without a usable name
    has_company: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "title", normalize_whitespace(self.title))
        if self.company_name is not None:
            object.__setattr__(self, "has_company", True)
            name = normalize_whitespace(self.company_name)
            object.__setattr__(self, "company_name", name or None)

    @property
    def headline(self) -> str:
        if self.company_name:
            return f"{self.title} at {self.company_name}"
        return self.title

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "company_name": self.company_name, "has_company": self.has_company}


@dataclass(frozen=True)
class MatchAssessment:
    """
    Read-only snapshot of a resume-to-job analysis.

    Produced upstream by the analysis service; nothing in matchcard mutates it.
    Scores are on fixed scales: skills 0-6, experience 0-2, education 0-2,
    company bonus 0-2, overall match 0-12 (the sum of the four).
    """
    match_score: float
    skills_score: float
    experience_score: float
    education_score: float
    company_score: float = 0.0
    is_processed: bool = True
    processing_error: Optional[str] = None
    matched_companies: List[str] = field(default_factory=list)

    application_id: Optional[int] = None
    job: Optional[JobContext] = None

    def __post_init__(self) -> None:
        # An empty string means no error; any other text is kept verbatim
        if self.processing_error == "":
            object.__setattr__(self, "processing_error", None)

        cleaned = []
        for c in self.matched_companies or []:
            nc = normalize_whitespace(c)
            if nc:
                cleaned.append(nc)
        object.__setattr__(self, "matched_companies", cleaned)

    @property
    def state(self) -> AssessmentState:
        if not self.is_processed:
            return AssessmentState.PENDING
        if self.processing_error is not None:
            return AssessmentState.FAILED
        return AssessmentState.SCORED

    @property
    def has_target_company(self) -> bool:
        return self.job is not None and self.job.has_company

    @property
    def component_total(self) -> float:
        return self.skills_score + self.experience_score + self.education_score + self.company_score

    def is_consistent(self) -> bool:
        """True when match_score equals the sum of the four sub-scores."""
        return math.isclose(self.match_score, self.component_total, abs_tol=1e-6)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchAssessment":
        """
        Decode the backend payload (camelCase keys).

        Null scores decode as 0 so pending records load cleanly.
        Raises AssessmentLoadError for anything that is not a well-formed record.
        """
        if not isinstance(data, dict):
            raise AssessmentLoadError(f"Assessment payload must be an object, got {type(data).__name__}")

        companies = data.get("parsedCompanies") or []
        if not isinstance(companies, list):
            raise AssessmentLoadError("parsedCompanies must be a list of strings")

        error = data.get("processingError")
        if error is not None and not isinstance(error, str):
            error = str(error)

        return cls(
            match_score=_score(data, "matchScore"),
            skills_score=_score(data, "skillsScore"),
            experience_score=_score(data, "experienceScore"),
            education_score=_score(data, "educationScore"),
            company_score=_score(data, "companyScore"),
            is_processed=bool(data.get("isProcessed", False)),
            processing_error=error,
            matched_companies=_companies(companies),
            application_id=_application_id(data.get("id")),
            job=_job_from_dict(data.get("job")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.application_id,
            "matchScore": self.match_score,
            "skillsScore": self.skills_score,
            "experienceScore": self.experience_score,
            "educationScore": self.education_score,
            "companyScore": self.company_score,
            "isProcessed": self.is_processed,
            "processingError": self.processing_error,
            "parsedCompanies": list(self.matched_companies),
            "job": (
                {
                    "title": self.job.title,
                    "company": {"name": self.job.company_name} if self.job.has_company else None,
                }
                if self.job
                else None
            ),
        }


def _score(data: Dict[str, Any], key: str) -> float:
    raw = data.get(key)
    if raw is None:
        return 0.0
    # bool is an int subclass; reject it explicitly
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise AssessmentLoadError(f"{key} must be a number, got {raw!r}")
    try:
        value = float(raw)
    except ValueError:
        raise AssessmentLoadError(f"{key} must be a number, got {raw!r}") from None
    if math.isnan(value):
        raise AssessmentLoadError(f"{key} must be a number, got NaN")
    return value


def _job_from_dict(raw: Any) -> Optional[JobContext]:
    if not isinstance(raw, dict):
        return None
    company = raw.get("company")
    has_company = isinstance(company, dict)
    company_name = company.get("name") if has_company else None
    if company_name is not None and not isinstance(company_name, str):
        company_name = str(company_name)
    return JobContext(
        title=str(raw.get("title") or ""),
        company_name=company_name,
        has_company=has_company,
    )


def _companies(raw: List[Any]) -> List[str]:
    out: List[str] = []
    for c in raw:
        if c is None:
            continue
        if not isinstance(c, str):
            raise AssessmentLoadError(f"parsedCompanies entries must be strings, got {c!r}")
        out.append(c)
    return out


def _application_id(raw: Any) -> Optional[int]:
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise AssessmentLoadError(f"id must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip().isdigit():
        return int(raw.strip())
    raise AssessmentLoadError(f"id must be an integer, got {raw!r}")
