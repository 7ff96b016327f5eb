#!/usr/bin/env python3
"""
Domain Interest - mission category against the member's preferred committee
and preferred activity type.

Exact committee match earns full credit. Partial credit when committee and
category contain one another, or when the activity type contains the
category. Anything else earns a small consolation.
"""

from core.config_loader import MatchingConfig
from core.matching.models import MemberProfile, Mission, ScoreBreakdown, ScoreFactor
from core.matching.similarity import contains_either_way
from core.matching.factors.common import build_breakdown, share_of
from core.utils import normalize_text


def score_domain(member: MemberProfile, mission: Mission, config: MatchingConfig) -> ScoreBreakdown:
    factor = ScoreFactor.DOMAIN
    max_points = config.weights.domain
    category = normalize_text(mission.category or "")
    committee = normalize_text(member.preferred_committee or "")
    activity_type = normalize_text(member.preferred_activity_type or "")

    if not category:
        return build_breakdown(
            factor,
            share_of(max_points, config.credit.neutral),
            max_points,
            "This mission spans multiple domains.",
        )

    if not committee and not activity_type:
        return build_breakdown(
            factor,
            share_of(max_points, config.credit.incomplete_profile),
            max_points,
            "Set your preferred committee on your profile to get a domain-specific score.",
        )

    display_category = mission.category.strip()

    if committee == category:
        return build_breakdown(
            factor,
            max_points,
            max_points,
            f"This mission is in your preferred {display_category} domain: great alignment!",
            [display_category],
        )

    # Committee containment counts either way, activity type only when it contains the category
    if contains_either_way(committee, category) or (activity_type and category in activity_type):
        return build_breakdown(
            factor,
            share_of(max_points, config.credit.partial),
            max_points,
            f"Partial domain match between your interests and this mission's {display_category} focus.",
            [display_category],
        )

    preference = member.preferred_committee.strip() if committee else member.preferred_activity_type.strip()
    return build_breakdown(
        factor,
        share_of(max_points, config.credit.consolation),
        max_points,
        f"You prefer {preference} but this mission focuses on {display_category}.",
    )
