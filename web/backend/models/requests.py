#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

import uuid
from pydantic import BaseModel, Field
from typing import List, Literal, Optional

from core.matching import PersonalityType, ScheduleTime


class MissionCreate(BaseModel):
    """Request to publish a new mission."""
    title: str = Field(..., min_length=1, description="Mission title")
    description: Optional[str] = None
    category: Optional[str] = Field(None, description="Domain, compared with member committee preferences")
    required_skills: List[str] = Field(default_factory=list)
    personality_fit: List[PersonalityType] = Field(default_factory=list)
    schedule_days: List[str] = Field(default_factory=list, description="e.g. Monday, Wednesday")
    schedule_time: Optional[ScheduleTime] = None
    duration_weeks: int = Field(default=4, ge=1, le=104)
    points_reward: int = Field(default=0, ge=0)
    organization_id: Optional[uuid.UUID] = None


class MissionUpdate(BaseModel):
    """Partial mission update. Only provided fields are changed."""
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    required_skills: Optional[List[str]] = None
    personality_fit: Optional[List[PersonalityType]] = None
    schedule_days: Optional[List[str]] = None
    schedule_time: Optional[ScheduleTime] = None
    duration_weeks: Optional[int] = Field(None, ge=1, le=104)
    points_reward: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None


class FeedbackRequest(BaseModel):
    """Accept or refuse a recommendation by its id."""
    status: Literal['accepted', 'refused'] = Field(..., description="accepted or refused")
    feedback: Optional[str] = Field(None, max_length=2000)


class RefuseRequest(BaseModel):
    """Refuse a mission, optionally explaining why."""
    feedback: Optional[str] = Field(None, max_length=2000)
