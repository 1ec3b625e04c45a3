from __future__ import annotations

import json
import logging

import pytest

import matchcard.config as cfg
from matchcard.models import AssessmentState, MatchAssessment
from matchcard.scorecard import FAILED_HINT, PENDING_TITLE, build_scorecard, format_score
from matchcard.scoring.types import Band


def test_scored_card_from_fixture(load_json):
    card = build_scorecard(MatchAssessment.from_dict(load_json("scored_application.json")))

    assert card.state is AssessmentState.SCORED
    assert card.headline == "Senior Java Developer at Vedsoft"
    assert card.qualifies is True
    assert card.overall.band is Band.EXCELLENT
    assert card.overall.display == "10.6/12"
    assert [line.key for line in card.breakdown] == ["skills", "experience", "education", "company"]
    assert [r.code for r in card.recommendations] == ["company_match", "strong_match"]


def test_sub_score_lines(make_assessment):
    card = build_scorecard(make_assessment(skills=4, experience=1, education=0.5, company=2))
    skills, experience, education, company = card.breakdown

    assert skills.display == "4/6"
    assert skills.band is Band.EXCELLENT
    assert skills.percent == pytest.approx(66.67)
    assert experience.band is Band.GOOD
    assert education.band is Band.NEEDS_IMPROVEMENT
    assert education.percent == 25.0
    assert company.display == "+2"
    assert company.percent == 100.0


def test_company_without_bonus_has_empty_progress(make_assessment):
    company = build_scorecard(make_assessment(company=0)).breakdown[-1]
    assert company.display == "0"
    assert company.percent == 0.0


def test_good_match_scenario(make_assessment):
    card = build_scorecard(make_assessment(skills=2, experience=2, education=2, company=0, match=6))
    assert card.qualifies is True
    assert card.overall.band is Band.GOOD
    assert [r.code for r in card.recommendations] == ["improve_skills"]
    assert card.qualification_message.startswith("Qualified")


def test_below_threshold_message(make_assessment):
    card = build_scorecard(make_assessment(skills=1, experience=1, education=1, company=0))
    assert card.qualifies is False
    assert card.qualification_message.startswith("Below threshold")


def test_pending_card_reads_no_scores():
    a = MatchAssessment(match_score=11, skills_score=6, experience_score=2, education_score=2, is_processed=False)
    card = build_scorecard(a)
    assert card.state is AssessmentState.PENDING
    assert card.title == PENDING_TITLE
    assert card.overall is None
    assert card.breakdown == []
    assert card.recommendations == []
    assert card.qualifies is None


def test_failed_card_surfaces_error_verbatim(load_json):
    card = build_scorecard(MatchAssessment.from_dict(load_json("failed_application.json")))
    assert card.state is AssessmentState.FAILED
    assert card.error == "OCR failed"
    assert card.hint == FAILED_HINT
    assert card.overall is None
    assert card.recommendations == []


def test_company_preview_is_limited(load_json, monkeypatch):
    a = MatchAssessment.from_dict(load_json("scored_application.json"))
    assert build_scorecard(a).matched_companies == ["Infosys", "Wipro"]

    monkeypatch.setattr(cfg, "COMPANY_PREVIEW_LIMIT", 1)
    assert build_scorecard(a).matched_companies == ["Infosys"]


def test_inconsistent_total_is_logged_not_corrected(caplog):
    a = MatchAssessment(match_score=9, skills_score=2, experience_score=2, education_score=2, application_id=7)
    with caplog.at_level(logging.WARNING, logger="matchcard.scorecard"):
        card = build_scorecard(a)
    assert card.overall.score == 9
    assert "does not equal sub-score total" in caplog.text


def test_to_dict_is_json_serialisable(load_json):
    card = build_scorecard(MatchAssessment.from_dict(load_json("scored_application.json")))
    d = json.loads(json.dumps(card.to_dict()))

    assert d["state"] == "scored"
    assert d["overall"]["band"] == "excellent"
    assert d["overall"]["color"] == "green"
    assert d["qualifies"] is True
    assert [b["key"] for b in d["breakdown"]] == ["skills", "experience", "education", "company"]
    assert d["recommendations"][0]["kind"] == "positive"


def test_format_score():
    assert format_score(4.0) == "4"
    assert format_score(1.8) == "1.8"
    assert format_score(12) == "12"
