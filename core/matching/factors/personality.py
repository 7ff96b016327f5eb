"""Personality Fit - member's DISC type against the mission's accepted types."""

from core.config_loader import MatchingConfig
from core.matching.models import MemberProfile, Mission, ScoreBreakdown, ScoreFactor
from core.matching.factors.common import build_breakdown, share_of


def score_personality(member: MemberProfile, mission: Mission, config: MatchingConfig) -> ScoreBreakdown:
    factor = ScoreFactor.PERSONALITY
    max_points = config.weights.personality
    accepted = mission.personality_fit
    member_type = member.personality_type

    if not accepted:
        return build_breakdown(
            factor,
            share_of(max_points, config.credit.neutral),
            max_points,
            "This mission is open to all personality types.",
        )

    if member_type is None:
        return build_breakdown(
            factor,
            share_of(max_points, config.credit.incomplete_profile),
            max_points,
            "Set your personality type on your profile to unlock a personalized score.",
        )

    if member_type in accepted:
        return build_breakdown(
            factor,
            max_points,
            max_points,
            f"Your {member_type.value} personality is one of the ideal fits for this mission.",
            [member_type.value],
        )

    # A mismatch deprioritizes the candidate without eliminating them
    favoured = " / ".join(p.value for p in accepted)
    return build_breakdown(
        factor,
        share_of(max_points, config.credit.consolation),
        max_points,
        f"This mission favours {favoured}; your {member_type.value} type can still contribute.",
    )
