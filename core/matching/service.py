#!/usr/bin/env python3
"""
Match Scorer - aggregates the five factor scores into a 0-100 match score.

MatchScorer closes over one immutable MatchingConfig. It has no other state,
so a single instance can be shared freely between threads and requests.
The module-level functions delegate to a scorer built from the default
configuration.
"""

from typing import Iterable, List, Optional, Sequence
import logging

from core.config_loader import MatchingConfig
from core.matching.models import (
    MatchGrade,
    MemberProfile,
    Mission,
    RankedMember,
    RankedMission,
    ScoreBreakdown,
    ScoringResult,
)
from core.matching.factors import (
    score_skills,
    score_availability,
    score_personality,
    score_domain,
    score_engagement,
)
from core.utils import clamp, round_half_up

logger = logging.getLogger(__name__)

WELL_OPTIMIZED_TIP = "Your profile is well-optimized for this mission!"


class MatchScorer:
    """Computes compatibility scores, rankings and improvement tips."""

    def __init__(self, config: Optional[MatchingConfig] = None):
        self.config = config or MatchingConfig()

    def grade_from_score(self, score: int) -> MatchGrade:
        grades = self.config.grades
        if score >= grades.excellent:
            return MatchGrade.EXCELLENT
        if score >= grades.good:
            return MatchGrade.GOOD
        if score >= grades.fair:
            return MatchGrade.FAIR
        return MatchGrade.LOW

    def compute_match_score(self, member: MemberProfile, mission: Mission) -> ScoringResult:
        """
        Compute the compatibility between one member and one mission.

        Pure function of its inputs: factors are always evaluated and
        reported in the same order, and identical inputs produce identical
        results (explanations included).
        """
        cfg = self.config
        breakdown = (
            score_skills(member, mission, cfg),
            score_availability(member, mission, cfg),
            score_personality(member, mission, cfg),
            score_domain(member, mission, cfg),
            score_engagement(member, cfg),
        )

        total = sum(b.points for b in breakdown)
        score = int(clamp(round_half_up(total), 0, 100))

        return ScoringResult(score=score, grade=self.grade_from_score(score), breakdown=breakdown)

    def rank_missions_for_member(
        self,
        member: MemberProfile,
        missions: Iterable[Mission]
    ) -> List[RankedMission]:
        """Score every mission for one member, best first. Ties keep input order."""
        ranked = [
            RankedMission(mission=mission, result=self.compute_match_score(member, mission))
            for mission in missions
        ]
        # sorted() is stable, so equal scores keep their original relative order
        ranked = sorted(ranked, key=lambda r: r.result.score, reverse=True)
        logger.debug(f"Ranked {len(ranked)} missions for member {member.id}")
        return ranked

    def rank_members_for_mission(
        self,
        members: Iterable[MemberProfile],
        mission: Mission
    ) -> List[RankedMember]:
        """Score every member against one mission, best first. Ties keep input order."""
        ranked = [
            RankedMember(member=member, result=self.compute_match_score(member, mission))
            for member in members
        ]
        ranked = sorted(ranked, key=lambda r: r.result.score, reverse=True)
        logger.debug(f"Ranked {len(ranked)} members for mission {mission.id}")
        return ranked

    def top_improvement_tip(self, breakdown: Sequence[ScoreBreakdown]) -> str:
        """
        Return the single most impactful piece of advice for this match.

        Among factors below tip_threshold of their max, pick the one with the
        largest relative gap (max - points) / max and return its explanation.
        Ties go to the factor reported first.
        """
        candidates = [
            b for b in breakdown
            if b.max_points > 0 and b.ratio < self.config.tip_threshold
        ]
        if not candidates:
            return WELL_OPTIMIZED_TIP

        worst = max(candidates, key=lambda b: (b.max_points - b.points) / b.max_points)
        return worst.explanation


_default_scorer = MatchScorer()


def grade_from_score(score: int) -> MatchGrade:
    return _default_scorer.grade_from_score(score)


def compute_match_score(member: MemberProfile, mission: Mission) -> ScoringResult:
    return _default_scorer.compute_match_score(member, mission)


def rank_missions_for_member(member: MemberProfile, missions: Iterable[Mission]) -> List[RankedMission]:
    return _default_scorer.rank_missions_for_member(member, missions)


def rank_members_for_mission(members: Iterable[MemberProfile], mission: Mission) -> List[RankedMember]:
    return _default_scorer.rank_members_for_mission(members, mission)


def top_improvement_tip(breakdown: Sequence[ScoreBreakdown]) -> str:
    return _default_scorer.top_improvement_tip(breakdown)
