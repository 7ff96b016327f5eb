#!/usr/bin/env python3
"""
Availability - Day and time-slot compatibility.

Split into a days sub-score (availability_days_share of the factor) and a
time-slot sub-score (the remainder). A member available full_day is
compatible with any slot.
"""

import logging
from typing import List, Optional

from core.config_loader import MatchingConfig
from core.matching.models import MemberProfile, Mission, ScheduleTime, ScoreBreakdown, ScoreFactor
from core.matching.similarity import overlapping_days
from core.matching.factors.common import build_breakdown, share_of
from core.utils import round_half_up

logger = logging.getLogger(__name__)


def _slot_label(slot: ScheduleTime) -> str:
    return slot.value.replace("_", " ")


def _time_points(
    mission_time: Optional[ScheduleTime],
    member_time: Optional[ScheduleTime],
    time_max: int,
    neutral: float
) -> int:
    if mission_time is None or member_time is None:
        return share_of(time_max, neutral)
    if mission_time == member_time or member_time == ScheduleTime.FULL_DAY:
        return time_max
    return 0


def _days_only_explanation(mission: Mission, member: MemberProfile, time_points: int, time_max: int) -> str:
    """Explanation when the mission fixes a time slot but no days."""
    if member.availability_time is None:
        return "No fixed days required. Set your preferred time slot on your profile to refine this score."
    slot = _slot_label(mission.schedule_time)
    if time_points == time_max:
        return f"No fixed days required and your availability fits the {slot} slot."
    return f"No fixed days required, but this mission runs in the {slot} slot."


def score_availability(member: MemberProfile, mission: Mission, config: MatchingConfig) -> ScoreBreakdown:
    factor = ScoreFactor.AVAILABILITY
    max_points = config.weights.availability
    mission_days = [d for d in mission.schedule_days if d and d.strip()]
    member_days = [d for d in member.availability_days if d and d.strip()]

    if not mission_days and mission.schedule_time is None:
        return build_breakdown(
            factor,
            share_of(max_points, config.credit.neutral),
            max_points,
            "This mission has a flexible schedule.",
        )

    days_max = round_half_up(max_points * config.credit.availability_days_share)
    time_max = max_points - days_max

    overlap: List[str] = []
    if not mission_days:
        day_points = days_max
    elif not member_days:
        day_points = 0
    else:
        overlap = overlapping_days(mission_days, member_days)
        day_points = round_half_up(len(overlap) / len(mission_days) * days_max)

    time_points = _time_points(mission.schedule_time, member.availability_time, time_max, config.credit.neutral)

    if not mission_days:
        explanation = _days_only_explanation(mission, member, time_points, time_max)
    elif not member_days:
        explanation = "Add your availability days to your profile to improve this score."
    elif len(overlap) == len(mission_days):
        explanation = f"Your schedule fully covers the {len(mission_days)} required day(s)."
    elif overlap:
        explanation = (
            f"You are available {len(overlap)} of {len(mission_days)} required day(s): "
            f"{', '.join(overlap)}."
        )
    else:
        explanation = "Your available days do not overlap with the mission schedule."

    return build_breakdown(factor, day_points + time_points, max_points, explanation, overlap)
