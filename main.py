#!/usr/bin/env python3
"""
MissionMatch command line.

    python main.py init-db
    python main.py recommend --member-id <uuid> [--include-refused]
    python main.py candidates --mission-id <uuid> [--top 10]
    python main.py score --member-id <uuid> --mission-id <uuid>
    python main.py serve
"""

import argparse
import logging
import sys

from core.config_loader import load_config
from core.exceptions import ServiceException
from core.matching import MatchScorer
from core.recommendation_service import RecommendationService, breakdown_from_json
from database.database import get_engine, get_session_factory
from database.init_db import init_db
from database.uow import matching_uow

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _print_breakdown(breakdown, indent: str = "    "):
    for b in breakdown:
        matched = f" [{', '.join(b.matched_items)}]" if b.matched_items else ""
        print(f"{indent}{b.factor.value:<17} {b.points:>3}/{b.max_points:<3} {b.explanation}{matched}")


def cmd_recommend(args, session_factory, scorer):
    with matching_uow(session_factory) as repo:
        service = RecommendationService(repo, scorer)
        recommendations = service.get_user_recommendations(args.member_id, include_refused=args.include_refused)

        print(f"\n{len(recommendations)} recommendation(s) for member {args.member_id}\n")
        for rec in recommendations:
            grade = scorer.grade_from_score(rec.score)
            title = rec.mission.title if rec.mission else rec.mission_id
            print(f"  {rec.score:>3}  {grade.label:<16} {title}  ({rec.status})")
            breakdown = breakdown_from_json(rec.breakdown)
            if args.verbose:
                _print_breakdown(breakdown)
            print(f"       Tip: {scorer.top_improvement_tip(breakdown)}")


def cmd_candidates(args, session_factory, scorer):
    with matching_uow(session_factory) as repo:
        service = RecommendationService(repo, scorer)
        matches = service.get_ngo_recommendations(args.mission_id)

        shown = matches[:args.top] if args.top else matches
        print(f"\n{len(matches)} candidate(s) for mission {args.mission_id}\n")
        for match in shown:
            name = match.profile.fullname or match.member_id
            print(f"  {match.score:>3}  {match.grade.label:<16} {name}  ({match.status})")
            if args.verbose:
                _print_breakdown(match.breakdown)


def cmd_score(args, session_factory, scorer):
    with matching_uow(session_factory) as repo:
        preview = RecommendationService(repo, scorer).preview_match(args.member_id, args.mission_id)

    result = preview.result
    print(f"\nScore {result.score}/100 ({result.grade.label})\n")
    _print_breakdown(result.breakdown, indent="  ")
    print(f"\nTip: {preview.improvement_tip}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="MissionMatch - volunteer/mission compatibility scoring")
    parser.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print per-factor breakdowns")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create database tables")

    p_rec = sub.add_parser("recommend", help="Score active missions for a member")
    p_rec.add_argument("--member-id", required=True)
    p_rec.add_argument("--include-refused", action="store_true")

    p_cand = sub.add_parser("candidates", help="Rank validated members for a mission")
    p_cand.add_argument("--mission-id", required=True)
    p_cand.add_argument("--top", type=int, default=0, help="Only show the top N candidates")

    p_score = sub.add_parser("score", help="Preview the score of one member for one mission")
    p_score.add_argument("--member-id", required=True)
    p_score.add_argument("--mission-id", required=True)

    sub.add_parser("serve", help="Run the HTTP API")

    args = parser.parse_args(argv)

    if args.command == "serve":
        from web.backend.app import main as serve
        serve()
        return 0

    config = load_config(args.config)
    if args.command == "init-db":
        init_db(bind=get_engine(config.database.url))
        return 0

    session_factory = get_session_factory(config.database.url)
    scorer = MatchScorer(config.matching)

    commands = {
        "recommend": cmd_recommend,
        "candidates": cmd_candidates,
        "score": cmd_score,
    }
    try:
        commands[args.command](args, session_factory, scorer)
    except ServiceException as e:
        logger.error(str(e))
        return 1
    except ValueError as e:
        # Malformed ids
        logger.error(f"Invalid argument: {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
