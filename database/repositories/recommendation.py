import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from sqlalchemy import select, update
from sqlalchemy.orm import joinedload

from database.models import MissionRecommendation, FEEDBACK_STATUSES, RECOMMENDATION_STATUSES
from database.repositories.base import BaseRepository, as_uuid

logger = logging.getLogger(__name__)


class RecommendationRepository(BaseRepository):
    def get_by_id(self, recommendation_id: Any) -> Optional[MissionRecommendation]:
        stmt = select(MissionRecommendation).where(MissionRecommendation.id == as_uuid(recommendation_id))
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_pair(self, member_id: Any, mission_id: Any) -> Optional[MissionRecommendation]:
        stmt = select(MissionRecommendation).where(
            MissionRecommendation.member_id == as_uuid(member_id),
            MissionRecommendation.mission_id == as_uuid(mission_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_existing_for_member(self, member_id: Any) -> Dict[Any, MissionRecommendation]:
        """Existing recommendations of a member keyed by mission id."""
        stmt = select(MissionRecommendation).where(MissionRecommendation.member_id == as_uuid(member_id))
        return {r.mission_id: r for r in self.db.execute(stmt).scalars().all()}

    def get_existing_for_mission(self, mission_id: Any) -> Dict[Any, MissionRecommendation]:
        """Existing recommendations of a mission keyed by member id."""
        stmt = select(MissionRecommendation).where(MissionRecommendation.mission_id == as_uuid(mission_id))
        return {r.member_id: r for r in self.db.execute(stmt).scalars().all()}

    def upsert_score(
        self,
        member_id: Any,
        mission_id: Any,
        score: int,
        breakdown: List[Dict[str, Any]],
        existing: Optional[MissionRecommendation] = None
    ) -> MissionRecommendation:
        """
        Insert or refresh the score of a (member, mission) pair.

        Human decisions (accepted/refused) and their feedback survive the
        refresh; any other status is reset to pending.
        """
        now = datetime.now(timezone.utc)

        if existing is None:
            recommendation = MissionRecommendation(
                member_id=as_uuid(member_id),
                mission_id=as_uuid(mission_id),
                score=score,
                breakdown=breakdown,
                status='pending',
                feedback=None,
                computed_at=now,
            )
            self.db.add(recommendation)
            self.db.flush()  # Visible to later lookups in the same session
            return recommendation

        existing.score = score
        existing.breakdown = breakdown
        existing.computed_at = now
        if existing.status not in FEEDBACK_STATUSES:
            existing.status = 'pending'
        return existing

    def mark_pending_as_viewed(self, member_id: Any) -> int:
        self.db.flush()
        stmt = (
            update(MissionRecommendation)
            .where(
                MissionRecommendation.member_id == as_uuid(member_id),
                MissionRecommendation.status == 'pending'
            )
            .values(status='viewed')
            .execution_options(synchronize_session="fetch")
        )
        result = self.db.execute(stmt)
        count = result.rowcount or 0
        if count > 0:
            logger.info(f"Marked {count} recommendations as viewed for member {member_id}")
        return count

    def get_for_member(self, member_id: Any, include_refused: bool = False) -> List[MissionRecommendation]:
        stmt = (
            select(MissionRecommendation)
            .options(joinedload(MissionRecommendation.mission))
            .where(MissionRecommendation.member_id == as_uuid(member_id))
        )
        if not include_refused:
            stmt = stmt.where(MissionRecommendation.status != 'refused')

        stmt = stmt.order_by(MissionRecommendation.score.desc())
        return list(self.db.execute(stmt).scalars().all())

    def set_status(
        self,
        recommendation: MissionRecommendation,
        status: str,
        feedback: Optional[str] = None,
        replace_feedback: bool = True
    ) -> MissionRecommendation:
        if status not in RECOMMENDATION_STATUSES:
            raise ValueError(f"Unknown recommendation status: {status}")

        recommendation.status = status
        if replace_feedback:
            recommendation.feedback = feedback
        recommendation.updated_at = datetime.now(timezone.utc)
        self.db.flush()
        return recommendation
