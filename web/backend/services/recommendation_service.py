#!/usr/bin/env python3
"""
Recommendation service - maps recommendation workflows to API responses.

Scoring and persistence rules live in core.recommendation_service; this
layer owns the transaction and the response shapes.
"""

import logging
from typing import Iterable, List, Optional
from sqlalchemy.orm import Session

from core.matching import MatchScorer, ScoreBreakdown
from core.recommendation_service import (
    ProfileMatch,
    RecommendationService,
    breakdown_from_json,
)
from database.models import MissionRecommendation
from database.repository import MatchingRepository
from ..models.responses import (
    BreakdownEntry,
    CandidateMatch,
    CandidateProfile,
    FeedbackResponse,
    MatchPreviewResponse,
    RecommendationItem,
)
from ..utils import safe_list, safe_datetime_iso
from .mission_service import to_mission_summary

logger = logging.getLogger(__name__)


def _to_breakdown_entries(breakdown: Iterable[ScoreBreakdown]) -> List[BreakdownEntry]:
    return [BreakdownEntry(**b.to_dict()) for b in breakdown]


class RecommendationViewService:
    """Runs recommendation workflows inside the request's session."""

    def __init__(self, db: Session, scorer: Optional[MatchScorer] = None):
        self.db = db
        self.scorer = scorer or MatchScorer()
        self.service = RecommendationService(MatchingRepository(db), self.scorer)

    def _to_recommendation_item(self, rec: MissionRecommendation) -> RecommendationItem:
        breakdown = breakdown_from_json(rec.breakdown)
        grade = self.scorer.grade_from_score(rec.score or 0)
        return RecommendationItem(
            recommendation_id=str(rec.id),
            member_id=str(rec.member_id),
            mission_id=str(rec.mission_id),
            score=rec.score or 0,
            grade=grade.value,
            grade_label=grade.label,
            status=rec.status,
            feedback=rec.feedback,
            breakdown=_to_breakdown_entries(breakdown),
            improvement_tip=self.scorer.top_improvement_tip(breakdown),
            computed_at=safe_datetime_iso(rec.computed_at),
            mission=to_mission_summary(rec.mission) if rec.mission is not None else None,
        )

    def _to_candidate_match(self, match: ProfileMatch) -> CandidateMatch:
        profile = match.profile
        return CandidateMatch(
            member_id=match.member_id,
            mission_id=match.mission_id,
            score=match.score,
            grade=match.grade.value,
            grade_label=match.grade.label,
            status=match.status,
            feedback=match.feedback,
            breakdown=_to_breakdown_entries(match.breakdown),
            improvement_tip=match.improvement_tip,
            profile=CandidateProfile(
                member_id=str(profile.id),
                fullname=profile.fullname,
                email=profile.email,
                avatar_url=profile.avatar_url,
                job_title=profile.job_title,
                specialties=safe_list(profile.specialties),
                personality_type=profile.personality_type,
                preferred_committee=profile.preferred_committee,
                points=profile.points or 0,
                engagement_index=match.engagement_index,
            ),
        )

    @staticmethod
    def _to_feedback_response(rec: MissionRecommendation) -> FeedbackResponse:
        return FeedbackResponse(
            success=True,
            recommendation_id=str(rec.id),
            member_id=str(rec.member_id),
            mission_id=str(rec.mission_id),
            status=rec.status,
            feedback=rec.feedback,
        )

    def get_member_recommendations(self, member_id: str, include_refused: bool = False) -> List[RecommendationItem]:
        recommendations = self.service.get_user_recommendations(member_id, include_refused=include_refused)
        self.db.commit()
        return [self._to_recommendation_item(r) for r in recommendations]

    def get_mission_candidates(self, mission_id: str) -> List[CandidateMatch]:
        matches = self.service.get_ngo_recommendations(mission_id)
        self.db.commit()
        return [self._to_candidate_match(m) for m in matches]

    def preview(self, member_id: str, mission_id: str) -> MatchPreviewResponse:
        preview = self.service.preview_match(member_id, mission_id)
        return MatchPreviewResponse(
            success=True,
            member_id=preview.member_id,
            mission_id=preview.mission_id,
            score=preview.result.score,
            grade=preview.result.grade.value,
            grade_label=preview.result.grade.label,
            breakdown=_to_breakdown_entries(preview.result.breakdown),
            improvement_tip=preview.improvement_tip,
        )

    def submit_feedback(self, recommendation_id: str, status: str, feedback: Optional[str]) -> FeedbackResponse:
        rec = self.service.submit_feedback(recommendation_id, status, feedback)
        self.db.commit()
        return self._to_feedback_response(rec)

    def accept(self, member_id: str, mission_id: str) -> FeedbackResponse:
        rec = self.service.accept_recommendation(member_id, mission_id)
        self.db.commit()
        return self._to_feedback_response(rec)

    def refuse(self, member_id: str, mission_id: str, feedback: Optional[str]) -> FeedbackResponse:
        rec = self.service.refuse_recommendation(member_id, mission_id, feedback)
        self.db.commit()
        return self._to_feedback_response(rec)
