#!/usr/bin/env python3
"""
Matching Module - Volunteer/mission compatibility scoring.

Public API:
- MatchScorer: scorer closed over an immutable MatchingConfig
- compute_match_score / rank_missions_for_member / rank_members_for_mission
- top_improvement_tip / grade_from_score
- MemberProfile, Mission, ScoreBreakdown, ScoringResult value objects

Layout:

- models.py: Value objects and enums
- similarity.py: Fuzzy string predicates (skills_overlap and friends)
- factors/: One scorer per factor (skills, availability, personality, domain, engagement)
- service.py: MatchScorer aggregator, ranking and improvement tip
"""

from core.matching.models import (
    FACTOR_ORDER,
    MatchGrade,
    MemberProfile,
    Mission,
    PersonalityType,
    RankedMember,
    RankedMission,
    ScheduleTime,
    ScoreBreakdown,
    ScoreFactor,
    ScoringResult,
)
from core.matching.similarity import skills_overlap
from core.matching.service import (
    MatchScorer,
    WELL_OPTIMIZED_TIP,
    compute_match_score,
    grade_from_score,
    rank_members_for_mission,
    rank_missions_for_member,
    top_improvement_tip,
)

__all__ = [
    'FACTOR_ORDER',
    'MatchGrade',
    'MatchScorer',
    'MemberProfile',
    'Mission',
    'PersonalityType',
    'RankedMember',
    'RankedMission',
    'ScheduleTime',
    'ScoreBreakdown',
    'ScoreFactor',
    'ScoringResult',
    'WELL_OPTIMIZED_TIP',
    'compute_match_score',
    'grade_from_score',
    'rank_members_for_mission',
    'rank_missions_for_member',
    'skills_overlap',
    'top_improvement_tip',
]
