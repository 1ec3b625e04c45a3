from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from matchcard import config
from matchcard.io.assessment_loader import load_assessments
from matchcard.models import AssessmentLoadError, AssessmentState
from matchcard.scorecard import ScoreCard, build_scorecard

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or config.LOG_LEVEL).upper(), logging.WARNING),
        format="[MatchCard] %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def print_human_summary(cards: List[ScoreCard]) -> None:
    print("\n=== MatchCard Resume Scores ===")
    scored = [c for c in cards if c.state is AssessmentState.SCORED]
    qualified = sum(1 for c in scored if c.qualifies)
    print(f"Applications: {len(cards)} | Scored: {len(scored)} | Qualified: {qualified}")

    for idx, card in enumerate(cards, start=1):
        ref = f" (application {card.application_id})" if card.application_id is not None else ""
        job = f" — {card.headline}" if card.headline else ""
        print(f"\n{idx}) {card.title}{ref}{job}")

        if card.state is AssessmentState.PENDING:
            print(f"   {card.description}")
            continue
        if card.state is AssessmentState.FAILED:
            print(f"   error: {card.error}")
            print(f"   {card.hint}")
            continue

        o = card.overall
        print(f"   score: {o.display} [{o.band.display_label}]")
        for line in card.breakdown:
            print(f"   {line.label}: {line.display} ({line.band.label})")
        if card.matched_companies:
            print(f"   matched companies: {', '.join(card.matched_companies)}")

        print("   recommendations:")
        if card.recommendations:
            for r in card.recommendations:
                print(f"   • {r.message}")
        else:
            print("   -")
        print(f"   {card.qualification_message}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="MatchCard resume-to-job score cards")
    parser.add_argument("path", type=str, help="Path to an application JSON payload (object or list)")
    parser.add_argument("--json", action="store_true", help="Print JSON only (machine-readable)")
    parser.add_argument("--log-level", type=str, default=None, help="Override MATCHCARD_LOG_LEVEL")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    path = Path(args.path)
    if not path.exists():
        print(f"\n[MatchCard] Assessment file not found: {path}\n", file=sys.stderr)
        return 2

    try:
        assessments = load_assessments(path)
    except AssessmentLoadError as e:
        print(f"\n[MatchCard] Could not load assessments: {e}\n", file=sys.stderr)
        return 2

    cards = [build_scorecard(a) for a in assessments]
    payload = [c.to_dict() for c in cards]

    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        print_human_summary(cards)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
