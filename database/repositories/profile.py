import logging
from typing import Any, Dict, Iterable, List, Optional
from sqlalchemy import select

from database.models import MemberProfile, EngagementSnapshot
from database.repositories.base import BaseRepository, as_uuid

logger = logging.getLogger(__name__)


class ProfileRepository(BaseRepository):
    def get_by_id(self, member_id: Any) -> Optional[MemberProfile]:
        stmt = select(MemberProfile).where(MemberProfile.id == as_uuid(member_id))
        return self.db.execute(stmt).scalar_one_or_none()

    def get_validated(self) -> List[MemberProfile]:
        stmt = (
            select(MemberProfile)
            .where(MemberProfile.is_validated.is_(True))
            .order_by(MemberProfile.created_at, MemberProfile.id)
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_latest_engagement_scores(self, member_ids: Iterable[Any]) -> Dict[Any, float]:
        """Latest monthly engagement index per member, in one query.

        Members without any snapshot are absent from the result.
        """
        ids = [as_uuid(m) for m in member_ids]
        if not ids:
            return {}

        stmt = (
            select(EngagementSnapshot.member_id, EngagementSnapshot.score)
            .where(EngagementSnapshot.member_id.in_(ids))
            .order_by(EngagementSnapshot.year.desc(), EngagementSnapshot.month.desc())
        )

        latest: Dict[Any, float] = {}
        for member_id, score in self.db.execute(stmt).all():
            if member_id not in latest:
                latest[member_id] = float(score or 0.0)
        return latest

    def get_latest_engagement_score(self, member_id: Any) -> float:
        return self.get_latest_engagement_scores([member_id]).get(as_uuid(member_id), 0.0)
