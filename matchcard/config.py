# matchcard/config.py
from __future__ import annotations

import os

# --- Score scales (as delivered by the analysis service) ---

MAX_SKILLS_SCORE = 6
MAX_EXPERIENCE_SCORE = 2
MAX_EDUCATION_SCORE = 2
MAX_COMPANY_SCORE = 2
MAX_MATCH_SCORE = 12  # 6 + 2 + 2 + 2

# --- Qualification gate ---

# Inclusive: a match score of exactly 5 qualifies.
QUALIFICATION_THRESHOLD = 5

# --- Band cut points (12-point scale) ---

EXCELLENT_CUTOFF = 8
GOOD_CUTOFF = 6
FAIR_CUTOFF = 4

# --- Recommendation rule thresholds ---

# Fixed cutoffs, not derived from the scales above.
SKILLS_IMPROVEMENT_THRESHOLD = 4
EXPERIENCE_IMPROVEMENT_THRESHOLD = 1.5
EDUCATION_IMPROVEMENT_THRESHOLD = 1.5
STRONG_MATCH_THRESHOLD = 7


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# --- Presentation ---

# How many matched companies the score card shows under the company bonus.
COMPANY_PREVIEW_LIMIT: int = max(0, _env_int("MATCHCARD_COMPANY_PREVIEW_LIMIT", 2))

# --- Logging ---

LOG_LEVEL: str = (os.environ.get("MATCHCARD_LOG_LEVEL", "").strip().upper() or "WARNING")
