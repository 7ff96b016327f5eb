#!/usr/bin/env python3
"""
Mission endpoints - publish and manage missions, rank candidates.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Header, HTTPException, Request
from sqlalchemy.orm import Session

from core.matching import MatchScorer
from ..dependencies import get_db, get_scorer
from ..rate_limit import limiter, recompute_limit
from ..services.mission_service import MissionService
from ..services.recommendation_service import RecommendationViewService
from ..models.requests import MissionCreate, MissionUpdate
from ..models.responses import (
    MissionResponse,
    MissionsResponse,
    DeleteMissionResponse,
    CandidatesResponse,
)
from ..utils import validate_uuid

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/missions", tags=["missions"])


def require_user(x_user_id: Optional[str] = Header(default=None)) -> str:
    """The acting user id, supplied by the authentication gateway."""
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return x_user_id


@router.get("", response_model=MissionsResponse)
def list_missions(db: Session = Depends(get_db)):
    """
    List active missions, newest first.
    """
    missions = MissionService(db).list_active()
    return MissionsResponse(success=True, count=len(missions), missions=missions)


@router.get("/mine", response_model=MissionsResponse)
def list_my_missions(
    user_id: str = Depends(require_user),
    db: Session = Depends(get_db)
):
    """
    List missions created by the calling user, including inactive ones.
    """
    missions = MissionService(db).list_by_creator(user_id)
    return MissionsResponse(success=True, count=len(missions), missions=missions)


@router.post("", response_model=MissionResponse, status_code=201)
def create_mission(
    payload: MissionCreate,
    user_id: str = Depends(require_user),
    db: Session = Depends(get_db)
):
    """
    Publish a new mission on behalf of the calling user.
    """
    mission = MissionService(db).create_mission(user_id, payload)
    return MissionResponse(success=True, mission=mission)


@router.get("/{mission_id}", response_model=MissionResponse)
def get_mission(mission_id: str, db: Session = Depends(get_db)):
    validate_uuid(mission_id, "mission_id")
    return MissionResponse(success=True, mission=MissionService(db).get_mission(mission_id))


@router.patch("/{mission_id}", response_model=MissionResponse)
def update_mission(
    mission_id: str,
    payload: MissionUpdate,
    db: Session = Depends(get_db)
):
    """
    Update the provided fields of a mission.
    """
    validate_uuid(mission_id, "mission_id")
    mission = MissionService(db).update_mission(mission_id, payload)
    return MissionResponse(success=True, mission=mission)


@router.delete("/{mission_id}", response_model=DeleteMissionResponse)
def delete_mission(mission_id: str, db: Session = Depends(get_db)):
    """
    Soft delete: the mission is deactivated and disappears from listings.
    """
    validate_uuid(mission_id, "mission_id")
    mission = MissionService(db).deactivate_mission(mission_id)
    return DeleteMissionResponse(success=True, mission_id=mission_id, is_active=bool(mission.is_active))


@router.get("/{mission_id}/candidates", response_model=CandidatesResponse)
@limiter.limit(recompute_limit)
def get_mission_candidates(
    request: Request,
    mission_id: str,
    db: Session = Depends(get_db),
    scorer: MatchScorer = Depends(get_scorer)
):
    """
    Rank every validated member against this mission.

    Scores are recomputed and persisted; statuses already set by members
    (accepted/refused) are preserved.
    """
    validate_uuid(mission_id, "mission_id")
    candidates = RecommendationViewService(db, scorer).get_mission_candidates(mission_id)
    return CandidatesResponse(
        success=True,
        mission_id=mission_id,
        count=len(candidates),
        candidates=candidates
    )
