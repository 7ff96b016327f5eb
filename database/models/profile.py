import uuid

from sqlalchemy import Column, Text, Integer, Boolean, Float, TIMESTAMP, Uuid, ForeignKey, Index, UniqueConstraint, func
from sqlalchemy.orm import relationship

from .base import Base, JsonType


class MemberProfile(Base):
    """
    Volunteer profile fields used by mission matching.

    Identity and authentication live in the external auth provider; id is the
    user id it issues.
    """
    __tablename__ = 'member_profiles'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    fullname = Column(Text, nullable=True)
    email = Column(Text, nullable=True)
    avatar_url = Column(Text, nullable=True)

    job_title = Column(Text, nullable=True)
    specialties = Column(JsonType, nullable=False, default=list)
    availability_days = Column(JsonType, nullable=False, default=list)
    availability_time = Column(Text, nullable=True)
    personality_type = Column(Text, nullable=True)  # DISC type
    preferred_committee = Column(Text, nullable=True)
    preferred_activity_type = Column(Text, nullable=True)

    points = Column(Integer, nullable=False, default=0)
    is_validated = Column(Boolean, nullable=False, default=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    engagement_snapshots = relationship("EngagementSnapshot", back_populates="member", cascade="all, delete-orphan")
    recommendations = relationship("MissionRecommendation", back_populates="member", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_member_profiles_validated', 'is_validated'),
    )


class EngagementSnapshot(Base):
    """Monthly engagement index (JPS) computed by the gamification jobs."""
    __tablename__ = 'engagement_snapshots'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    member_id = Column(Uuid, ForeignKey('member_profiles.id', ondelete='CASCADE'), nullable=False)
    year = Column(Integer, nullable=False)
    month = Column(Integer, nullable=False)
    score = Column(Float, nullable=False, default=0.0)

    member = relationship("MemberProfile", back_populates="engagement_snapshots")

    __table_args__ = (
        UniqueConstraint('member_id', 'year', 'month', name='uq_engagement_member_period'),
        Index('idx_engagement_member', 'member_id'),
    )
