import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import select

from database.models import Mission
from database.repositories.base import BaseRepository, as_uuid

logger = logging.getLogger(__name__)

# Columns a mission update is allowed to touch
UPDATABLE_FIELDS = (
    'title', 'description', 'category', 'required_skills', 'personality_fit',
    'schedule_days', 'schedule_time', 'duration_weeks', 'points_reward', 'is_active',
)


class MissionRepository(BaseRepository):
    def get_by_id(self, mission_id: Any) -> Optional[Mission]:
        stmt = select(Mission).where(Mission.id == as_uuid(mission_id))
        return self.db.execute(stmt).scalar_one_or_none()

    def get_active(self) -> List[Mission]:
        stmt = (
            select(Mission)
            .where(Mission.is_active.is_(True))
            .order_by(Mission.created_at.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_by_creator(self, user_id: str) -> List[Mission]:
        stmt = (
            select(Mission)
            .where(Mission.created_by == user_id)
            .order_by(Mission.created_at.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def create(self, created_by: str, data: Dict[str, Any]) -> Mission:
        mission = Mission(
            title=data['title'],
            description=data.get('description'),
            category=data.get('category'),
            required_skills=list(data.get('required_skills') or []),
            personality_fit=list(data.get('personality_fit') or []),
            schedule_days=list(data.get('schedule_days') or []),
            schedule_time=data.get('schedule_time'),
            duration_weeks=data.get('duration_weeks') or 4,
            points_reward=data.get('points_reward') or 0,
            organization_id=data.get('organization_id'),
            created_by=created_by,
            is_active=True,
        )
        self.db.add(mission)
        self.db.flush()  # Generate ID
        logger.info(f"Created mission {mission.id} '{mission.title}' by {created_by}")
        return mission

    def update(self, mission: Mission, changes: Dict[str, Any]) -> Mission:
        for key, value in changes.items():
            if key not in UPDATABLE_FIELDS:
                logger.warning(f"Ignoring non-updatable mission field '{key}'")
                continue
            setattr(mission, key, value)
        self.db.flush()
        return mission

    def deactivate(self, mission: Mission) -> Mission:
        """Soft delete: keep the row, hide it from active listings."""
        mission.is_active = False
        self.db.flush()
        logger.info(f"Deactivated mission {mission.id}")
        return mission
