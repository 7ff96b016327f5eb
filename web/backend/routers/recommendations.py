#!/usr/bin/env python3
"""
Recommendation endpoints - member-side recommendations and feedback.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from core.matching import MatchScorer
from ..config import get_config
from ..dependencies import get_db, get_scorer
from ..rate_limit import limiter, recompute_limit
from ..services.recommendation_service import RecommendationViewService
from ..models.requests import FeedbackRequest, RefuseRequest
from ..models.responses import (
    RecommendationsResponse,
    MatchPreviewResponse,
    FeedbackResponse,
)
from ..utils import validate_uuid

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recommendations"])


@router.get("/members/{member_id}/recommendations", response_model=RecommendationsResponse)
@limiter.limit(recompute_limit)
def get_member_recommendations(
    request: Request,
    member_id: str,
    include_refused: Optional[bool] = Query(default=None, description="Include refused missions"),
    db: Session = Depends(get_db),
    scorer: MatchScorer = Depends(get_scorer)
):
    """
    Score all active missions for a member and return them best first.

    Newly computed recommendations are marked as viewed.
    """
    validate_uuid(member_id, "member_id")
    if include_refused is None:
        include_refused = get_config().recommendations.include_refused_default

    items = RecommendationViewService(db, scorer).get_member_recommendations(
        member_id, include_refused=include_refused
    )
    return RecommendationsResponse(
        success=True,
        member_id=member_id,
        count=len(items),
        recommendations=items
    )


@router.get("/members/{member_id}/missions/{mission_id}/score", response_model=MatchPreviewResponse)
def preview_match_score(
    member_id: str,
    mission_id: str,
    db: Session = Depends(get_db),
    scorer: MatchScorer = Depends(get_scorer)
):
    """
    Compute the score of one member for one mission without storing it.
    """
    validate_uuid(member_id, "member_id")
    validate_uuid(mission_id, "mission_id")
    return RecommendationViewService(db, scorer).preview(member_id, mission_id)


@router.post("/members/{member_id}/missions/{mission_id}/accept", response_model=FeedbackResponse)
def accept_mission(
    member_id: str,
    mission_id: str,
    db: Session = Depends(get_db)
):
    validate_uuid(member_id, "member_id")
    validate_uuid(mission_id, "mission_id")
    return RecommendationViewService(db).accept(member_id, mission_id)


@router.post("/members/{member_id}/missions/{mission_id}/refuse", response_model=FeedbackResponse)
def refuse_mission(
    member_id: str,
    mission_id: str,
    payload: Optional[RefuseRequest] = None,
    db: Session = Depends(get_db)
):
    validate_uuid(member_id, "member_id")
    validate_uuid(mission_id, "mission_id")
    feedback = payload.feedback if payload else None
    return RecommendationViewService(db).refuse(member_id, mission_id, feedback)


@router.post("/recommendations/{recommendation_id}/feedback", response_model=FeedbackResponse)
def submit_feedback(
    recommendation_id: str,
    payload: FeedbackRequest,
    db: Session = Depends(get_db)
):
    """
    Record a member's decision (accepted or refused) on a recommendation.
    """
    validate_uuid(recommendation_id, "recommendation_id")
    return RecommendationViewService(db).submit_feedback(
        recommendation_id, payload.status, payload.feedback
    )
