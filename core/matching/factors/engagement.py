#!/usr/bin/env python3
"""
Engagement Level - mission-independent activity score.

Points sub-score: engagement_points scaled linearly up to points_cap.
Index sub-score: engagement_index_score (monthly JPS) scaled up to index_cap.
Both sub-scores are rounded and clamped before being summed.
"""

from core.config_loader import MatchingConfig
from core.matching.models import MemberProfile, ScoreBreakdown, ScoreFactor
from core.matching.factors.common import build_breakdown
from core.utils import clamp, round_half_up


def _format_points(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:.1f}"


def score_engagement(member: MemberProfile, config: MatchingConfig) -> ScoreBreakdown:
    factor = ScoreFactor.ENGAGEMENT
    max_points = config.weights.engagement
    scaling = config.engagement

    member_points = member.engagement_points
    index_score = member.engagement_index_score

    points_sub = round_half_up(clamp(
        member_points / scaling.points_cap * scaling.points_max_sub_score,
        0, scaling.points_max_sub_score
    ))
    index_sub = round_half_up(clamp(
        index_score / scaling.index_cap * scaling.index_max_sub_score,
        0, scaling.index_max_sub_score
    ))
    points = clamp(points_sub + index_sub, 0, max_points)

    stats = f"{_format_points(member_points)} points, engagement index {index_score:.1f}"
    if points >= scaling.highly_active_threshold:
        explanation = f"Highly active member ({stats})."
    elif points >= scaling.good_threshold:
        explanation = f"Good engagement ({stats}). Keep joining activities to boost your score."
    elif points >= scaling.moderate_threshold:
        explanation = f"Moderate engagement ({stats}). Earn more points by participating in events."
    else:
        explanation = f"Start participating in activities to build your engagement score ({stats})."

    return build_breakdown(factor, points, max_points, explanation)
