#!/usr/bin/env python3
"""
Skills Match - Required mission skills covered by the member's skill pool.

The pool is the member's specialties plus their job title. Coverage is
the fraction of required skills matched by at least one pool entry.
"""

import logging

from core.config_loader import MatchingConfig
from core.matching.models import MemberProfile, Mission, ScoreBreakdown, ScoreFactor
from core.matching.similarity import matched_skills
from core.matching.factors.common import build_breakdown, share_of

logger = logging.getLogger(__name__)


def score_skills(member: MemberProfile, mission: Mission, config: MatchingConfig) -> ScoreBreakdown:
    factor = ScoreFactor.SKILLS
    max_points = config.weights.skills
    required = [s for s in mission.required_skills if s and s.strip()]

    if not required:
        return build_breakdown(
            factor,
            share_of(max_points, config.credit.neutral),
            max_points,
            "No specific skills required for this mission: it is open to all skills.",
        )

    pool = [s for s in member.specialties if s and s.strip()]
    if member.job_title and member.job_title.strip():
        pool.append(member.job_title)

    if not pool:
        return build_breakdown(
            factor,
            share_of(max_points, config.credit.incomplete_profile),
            max_points,
            "Add your specialties to your profile to improve this score.",
        )

    matched = matched_skills(required, pool)
    points = len(matched) / len(required) * max_points

    if not matched:
        explanation = (
            f"None of your current skills match the {len(required)} required skill(s). "
            "Consider updating your profile."
        )
    elif len(matched) == len(required):
        explanation = f"Perfect skills match: you have all {len(required)} required skill(s)."
    else:
        explanation = f"You match {len(matched)} out of {len(required)} required skill(s)."

    logger.debug(f"Skills for mission {mission.id}: {len(matched)}/{len(required)} matched")
    return build_breakdown(factor, points, max_points, explanation, matched)
