#!/usr/bin/env python3
"""
Mission service - business logic for mission CRUD operations.
"""

import logging
from typing import List, Dict, Any
from sqlalchemy.orm import Session

from database.models import Mission
from database.repositories import MissionRepository, as_uuid
from ..models.requests import MissionCreate, MissionUpdate
from ..models.responses import MissionSummary
from ..utils import safe_str, safe_list, safe_datetime_iso
from ..exceptions import MissionNotFoundException

logger = logging.getLogger(__name__)


def to_mission_summary(mission: Mission) -> MissionSummary:
    """Convert a Mission row to its API representation."""
    return MissionSummary(
        mission_id=str(mission.id),
        title=safe_str(mission.title),
        description=mission.description,
        category=mission.category,
        required_skills=safe_list(mission.required_skills),
        personality_fit=safe_list(mission.personality_fit),
        schedule_days=safe_list(mission.schedule_days),
        schedule_time=mission.schedule_time,
        duration_weeks=mission.duration_weeks or 0,
        points_reward=mission.points_reward or 0,
        is_active=bool(mission.is_active),
        created_by=safe_str(mission.created_by),
        created_at=safe_datetime_iso(mission.created_at),
    )


class MissionService:
    """Service for managing missions."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = MissionRepository(db)

    def _get_or_raise(self, mission_id: str) -> Mission:
        mission = self.repo.get_by_id(mission_id)
        if mission is None:
            raise MissionNotFoundException(f"Mission {mission_id} not found")
        return mission

    def list_active(self) -> List[MissionSummary]:
        return [to_mission_summary(m) for m in self.repo.get_active()]

    def list_by_creator(self, user_id: str) -> List[MissionSummary]:
        return [to_mission_summary(m) for m in self.repo.get_by_creator(user_id)]

    def get_mission(self, mission_id: str) -> MissionSummary:
        return to_mission_summary(self._get_or_raise(mission_id))

    def create_mission(self, user_id: str, payload: MissionCreate) -> MissionSummary:
        data: Dict[str, Any] = payload.model_dump(mode='json')
        if data.get('organization_id'):
            data['organization_id'] = as_uuid(data['organization_id'])

        mission = self.repo.create(created_by=user_id, data=data)
        self.db.commit()
        self.db.refresh(mission)
        return to_mission_summary(mission)

    def update_mission(self, mission_id: str, payload: MissionUpdate) -> MissionSummary:
        mission = self._get_or_raise(mission_id)
        changes = payload.model_dump(mode='json', exclude_unset=True)
        self.repo.update(mission, changes)
        self.db.commit()
        self.db.refresh(mission)
        return to_mission_summary(mission)

    def deactivate_mission(self, mission_id: str) -> Mission:
        mission = self._get_or_raise(mission_id)
        self.repo.deactivate(mission)
        self.db.commit()
        return mission
