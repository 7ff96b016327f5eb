import uuid

from sqlalchemy import Column, Text, Integer, Boolean, TIMESTAMP, Uuid, Index, func
from sqlalchemy.orm import relationship

from .base import Base, JsonType


class Mission(Base):
    """
    A volunteering opportunity published by an NGO.

    Missions are never hard-deleted: deactivation sets is_active to False so
    stored recommendations keep their mission reference.
    """
    __tablename__ = 'missions'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    category = Column(Text, nullable=True)

    # Scoring requirements
    required_skills = Column(JsonType, nullable=False, default=list)
    personality_fit = Column(JsonType, nullable=False, default=list)
    schedule_days = Column(JsonType, nullable=False, default=list)
    schedule_time = Column(Text, nullable=True)  # morning|afternoon|full_day

    duration_weeks = Column(Integer, nullable=False, default=4)
    points_reward = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    organization_id = Column(Uuid, nullable=True)
    created_by = Column(Text, nullable=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    recommendations = relationship("MissionRecommendation", back_populates="mission", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_missions_active', 'is_active'),
        Index('idx_missions_created_by', 'created_by'),
        Index('idx_missions_created_at', 'created_at'),
    )
