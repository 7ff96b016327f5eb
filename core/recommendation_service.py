#!/usr/bin/env python3
"""
Recommendation Service - scores, persists and lists mission recommendations.

Member side: every active mission is scored for one member and the results
are upserted into mission_recommendations.
NGO side: every validated member is scored against one mission and ranked.

Recomputing a score never overwrites a human decision: accepted and refused
recommendations keep their status and feedback.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
import logging

from database.models import MemberProfile as MemberProfileRow
from database.models import Mission as MissionRow
from database.models import MissionRecommendation, FEEDBACK_STATUSES
from database.repository import MatchingRepository
from core.exceptions import (
    InvalidFeedbackException,
    MemberNotFoundException,
    MissionNotFoundException,
    RecommendationNotFoundException,
)
from core.matching import (
    MatchGrade,
    MatchScorer,
    MemberProfile,
    Mission,
    ScoreBreakdown,
    ScoringResult,
)

logger = logging.getLogger(__name__)


def member_from_row(row: MemberProfileRow, engagement_index: float = 0.0) -> MemberProfile:
    """Reduce a stored profile to the fields the scoring engine reads."""
    return MemberProfile(
        id=str(row.id),
        specialties=tuple(row.specialties or ()),
        job_title=row.job_title,
        availability_days=tuple(row.availability_days or ()),
        availability_time=row.availability_time,
        personality_type=row.personality_type,
        preferred_committee=row.preferred_committee,
        preferred_activity_type=row.preferred_activity_type,
        engagement_points=row.points or 0,
        engagement_index_score=engagement_index or 0.0,
    )


def mission_from_row(row: MissionRow) -> Mission:
    """Reduce a stored mission to the fields the scoring engine reads."""
    return Mission(
        id=str(row.id),
        title=row.title or "",
        required_skills=tuple(row.required_skills or ()),
        personality_fit=tuple(row.personality_fit or ()),
        schedule_days=tuple(row.schedule_days or ()),
        schedule_time=row.schedule_time,
        category=row.category,
    )


def breakdown_from_json(data: Any) -> Tuple[ScoreBreakdown, ...]:
    """Rebuild a stored breakdown. Malformed entries are skipped."""
    if not isinstance(data, list):
        return ()

    entries = []
    for item in data:
        try:
            entries.append(ScoreBreakdown.from_dict(item))
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"Skipping malformed breakdown entry {item!r}: {e}")
    return tuple(entries)


@dataclass
class ProfileMatch:
    """One ranked candidate for a mission (NGO view)."""
    member_id: str
    mission_id: str
    score: int
    grade: MatchGrade
    breakdown: Tuple[ScoreBreakdown, ...]
    status: str
    feedback: Optional[str]
    improvement_tip: str
    profile: MemberProfileRow
    engagement_index: float = 0.0


@dataclass
class MatchPreview:
    """Score of one member x mission pair, computed without persisting."""
    member_id: str
    mission_id: str
    result: ScoringResult
    improvement_tip: str


class RecommendationService:
    """Recommendation workflows on top of the scoring engine and the store."""

    def __init__(self, repo: MatchingRepository, scorer: Optional[MatchScorer] = None):
        self.repo = repo
        self.scorer = scorer or MatchScorer()

    def _load_member(self, member_id: Any) -> MemberProfile:
        row = self.repo.profiles.get_by_id(member_id)
        if row is None:
            raise MemberNotFoundException(f"Member {member_id} not found")
        engagement_index = self.repo.profiles.get_latest_engagement_score(row.id)
        return member_from_row(row, engagement_index)

    def _load_mission(self, mission_id: Any) -> MissionRow:
        row = self.repo.missions.get_by_id(mission_id)
        if row is None:
            raise MissionNotFoundException(f"Mission {mission_id} not found")
        return row

    def get_user_recommendations(
        self,
        member_id: Any,
        include_refused: bool = False
    ) -> List[MissionRecommendation]:
        """
        Score every active mission for a member and return the stored results.

        Steps:
        1. Load active missions and the member's existing recommendations
        2. Upsert fresh scores, keeping accepted/refused decisions
        3. Flip pending recommendations to viewed
        4. Return stored rows sorted by score, refused excluded unless asked
        """
        member = self._load_member(member_id)
        missions = self.repo.missions.get_active()
        if not missions:
            logger.info(f"No active missions to recommend for member {member_id}")
            return []

        existing = self.repo.recommendations.get_existing_for_member(member_id)

        for row in missions:
            result = self.scorer.compute_match_score(member, mission_from_row(row))
            self.repo.recommendations.upsert_score(
                member_id=member_id,
                mission_id=row.id,
                score=result.score,
                breakdown=[b.to_dict() for b in result.breakdown],
                existing=existing.get(row.id),
            )

        self.repo.recommendations.mark_pending_as_viewed(member_id)
        recommendations = self.repo.recommendations.get_for_member(member_id, include_refused=include_refused)

        logger.info(
            f"Scored {len(missions)} missions for member {member_id}, "
            f"returning {len(recommendations)} recommendations"
        )
        return recommendations

    def get_ngo_recommendations(self, mission_id: Any) -> List[ProfileMatch]:
        """Rank every validated member against a mission and persist the scores."""
        mission_row = self._load_mission(mission_id)
        mission = mission_from_row(mission_row)

        profiles = self.repo.profiles.get_validated()
        if not profiles:
            logger.info(f"No validated profiles to rank for mission {mission_id}")
            return []

        engagement = self.repo.profiles.get_latest_engagement_scores([p.id for p in profiles])
        rows_by_id: Dict[str, MemberProfileRow] = {str(p.id): p for p in profiles}
        members = [member_from_row(p, engagement.get(p.id, 0.0)) for p in profiles]

        ranked = self.scorer.rank_members_for_mission(members, mission)
        existing = self.repo.recommendations.get_existing_for_mission(mission_row.id)

        matches = []
        for entry in ranked:
            row = rows_by_id[entry.member.id]
            previous = existing.get(row.id)
            self.repo.recommendations.upsert_score(
                member_id=row.id,
                mission_id=mission_row.id,
                score=entry.result.score,
                breakdown=[b.to_dict() for b in entry.result.breakdown],
                existing=previous,
            )
            matches.append(ProfileMatch(
                member_id=entry.member.id,
                mission_id=str(mission_row.id),
                score=entry.result.score,
                grade=entry.result.grade,
                breakdown=entry.result.breakdown,
                status=previous.status if previous is not None else 'pending',
                feedback=previous.feedback if previous is not None else None,
                improvement_tip=self.scorer.top_improvement_tip(entry.result.breakdown),
                profile=row,
                engagement_index=entry.member.engagement_index_score,
            ))

        logger.info(f"Ranked {len(matches)} members for mission {mission_id}")
        return matches

    def preview_match(self, member_id: Any, mission_id: Any) -> MatchPreview:
        """Score one pair without touching stored recommendations."""
        member = self._load_member(member_id)
        mission = mission_from_row(self._load_mission(mission_id))
        result = self.scorer.compute_match_score(member, mission)
        return MatchPreview(
            member_id=member.id,
            mission_id=mission.id,
            result=result,
            improvement_tip=self.scorer.top_improvement_tip(result.breakdown),
        )

    def submit_feedback(
        self,
        recommendation_id: Any,
        status: str,
        feedback: Optional[str] = None
    ) -> MissionRecommendation:
        if status not in FEEDBACK_STATUSES:
            raise InvalidFeedbackException(
                f"Invalid feedback status '{status}'. Must be one of: {', '.join(FEEDBACK_STATUSES)}"
            )

        recommendation = self.repo.recommendations.get_by_id(recommendation_id)
        if recommendation is None:
            raise RecommendationNotFoundException(f"Recommendation {recommendation_id} not found")

        logger.info(f"Recommendation {recommendation_id} marked {status}")
        return self.repo.recommendations.set_status(recommendation, status, feedback)

    def _get_pair(self, member_id: Any, mission_id: Any) -> MissionRecommendation:
        recommendation = self.repo.recommendations.get_by_pair(member_id, mission_id)
        if recommendation is None:
            raise RecommendationNotFoundException(
                f"No recommendation for member {member_id} and mission {mission_id}"
            )
        return recommendation

    def accept_recommendation(self, member_id: Any, mission_id: Any) -> MissionRecommendation:
        recommendation = self._get_pair(member_id, mission_id)
        logger.info(f"Member {member_id} accepted mission {mission_id}")
        return self.repo.recommendations.set_status(recommendation, 'accepted', replace_feedback=False)

    def refuse_recommendation(
        self,
        member_id: Any,
        mission_id: Any,
        feedback: Optional[str] = None
    ) -> MissionRecommendation:
        recommendation = self._get_pair(member_id, mission_id)
        logger.info(f"Member {member_id} refused mission {mission_id}")
        return self.repo.recommendations.set_status(recommendation, 'refused', feedback)
