import json
from pathlib import Path
import pytest

# Path to tests/fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def load_json(fixtures_dir):
    """
    Fixture that returns a function: load_json("file.json") -> dict
    """
    def _load(name: str):
        return json.loads((fixtures_dir / name).read_text(encoding="utf-8"))
    return _load


@pytest.fixture
def make_assessment():
    """
    Fixture that returns a factory for scored assessments with sane defaults.
    match_score defaults to the sum of the sub-scores.
    """
    from matchcard.models import JobContext, MatchAssessment

    def _make(
            skills: float = 4,
            experience: float = 1.5,
            education: float = 1.5,
            company: float = 0,
            match: float | None = None,
            company_name: str | None = None,
            **kwargs,
    ) -> MatchAssessment:
        if match is None:
            match = skills + experience + education + company
        job = kwargs.pop("job", None)
        if job is None and company_name is not None:
            job = JobContext(title="Software Engineer", company_name=company_name)
        return MatchAssessment(
            match_score=match,
            skills_score=skills,
            experience_score=experience,
            education_score=education,
            company_score=company,
            job=job,
            **kwargs,
        )
    return _make
