import uuid

from sqlalchemy import Column, Text, Integer, TIMESTAMP, Uuid, ForeignKey, Index, UniqueConstraint, func
from sqlalchemy.orm import relationship

from .base import Base, JsonType

RECOMMENDATION_STATUSES = ('pending', 'viewed', 'accepted', 'refused')

# Statuses set by a human; recomputing scores must not overwrite them
FEEDBACK_STATUSES = ('accepted', 'refused')


class MissionRecommendation(Base):
    """
    Persisted compatibility score between a member and a mission.

    One row per (member, mission) pair. Scores are recomputed on every
    recommendation request; status and feedback carry the member's or NGO's
    decision across recomputations.
    """
    __tablename__ = 'mission_recommendations'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    member_id = Column(Uuid, ForeignKey('member_profiles.id', ondelete='CASCADE'), nullable=False)
    mission_id = Column(Uuid, ForeignKey('missions.id', ondelete='CASCADE'), nullable=False)

    score = Column(Integer, nullable=False, default=0)
    breakdown = Column(JsonType, nullable=False, default=list)

    status = Column(Text, nullable=False, default='pending')  # pending|viewed|accepted|refused
    feedback = Column(Text, nullable=True)

    computed_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    member = relationship("MemberProfile", back_populates="recommendations")
    mission = relationship("Mission", back_populates="recommendations")

    __table_args__ = (
        UniqueConstraint('member_id', 'mission_id', name='uq_recommendation_member_mission'),
        Index('idx_recommendation_member', 'member_id'),
        Index('idx_recommendation_mission', 'mission_id'),
        Index('idx_recommendation_score', 'score'),
        Index('idx_recommendation_status', 'status'),
    )
