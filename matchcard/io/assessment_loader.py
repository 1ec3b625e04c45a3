from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from matchcard.models import AssessmentLoadError, MatchAssessment

logger = logging.getLogger(__name__)


def parse_assessments(data: Any) -> List[MatchAssessment]:
    """
    Accepts a single application object, a list of them, or the backend's
    list envelope ({"applications": [...]}).
    """
    if isinstance(data, dict) and isinstance(data.get("applications"), list):
        data = data["applications"]
    if isinstance(data, dict):
        return [MatchAssessment.from_dict(data)]
    if isinstance(data, list):
        out: List[MatchAssessment] = []
        for idx, item in enumerate(data):
            try:
                out.append(MatchAssessment.from_dict(item))
            except AssessmentLoadError as e:
                raise AssessmentLoadError(f"Item {idx}: {e}") from e
        return out
    raise AssessmentLoadError(f"Expected an object or a list of objects, got {type(data).__name__}")


def load_assessments(path: Path) -> List[MatchAssessment]:
    """
    Load assessment payload(s) from a JSON file.
    Unreadable files and invalid JSON surface as AssessmentLoadError.
    """
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise AssessmentLoadError(f"Could not read {path}: {e.strerror or e}") from e

    if not raw_text.strip():
        raise AssessmentLoadError(f"{path} is empty")

    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise AssessmentLoadError(f"{path} is not valid JSON: {e.msg} (line {e.lineno})") from e

    assessments = parse_assessments(data)
    logger.info("Loaded %d assessment(s) from %s", len(assessments), path)
    return assessments
