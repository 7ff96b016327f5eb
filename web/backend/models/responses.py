#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class BreakdownEntry(BaseModel):
    """Score detail for one compatibility factor."""
    factor: str
    points: int = Field(ge=0)
    max_points: int = Field(ge=0)
    percentage: int = Field(ge=0, le=100)
    explanation: str
    matched_items: List[str] = Field(default_factory=list)


class MissionSummary(BaseModel):
    """A mission as listed in the API."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "mission_id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "Website refresh",
                "category": "Communication",
                "required_skills": ["Web Development", "Design"],
                "personality_fit": ["Conscientious"],
                "schedule_days": ["Monday", "Wednesday"],
                "schedule_time": "morning",
                "duration_weeks": 4,
                "points_reward": 50,
                "is_active": True,
                "created_by": "user-123",
                "created_at": "2026-02-01T12:00:00"
            }
        }
    )

    mission_id: str
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    required_skills: List[str] = Field(default_factory=list)
    personality_fit: List[str] = Field(default_factory=list)
    schedule_days: List[str] = Field(default_factory=list)
    schedule_time: Optional[str] = None
    duration_weeks: int
    points_reward: int
    is_active: bool
    created_by: str
    created_at: Optional[str] = None


class MissionResponse(BaseModel):
    success: bool
    mission: MissionSummary


class MissionsResponse(BaseModel):
    success: bool
    count: int
    missions: List[MissionSummary]


class DeleteMissionResponse(BaseModel):
    success: bool
    mission_id: str
    is_active: bool


class RecommendationItem(BaseModel):
    """A stored recommendation of a mission for a member."""
    recommendation_id: str
    member_id: str
    mission_id: str
    score: int = Field(ge=0, le=100)
    grade: str
    grade_label: str
    status: str
    feedback: Optional[str] = None
    breakdown: List[BreakdownEntry]
    improvement_tip: str
    computed_at: Optional[str] = None
    mission: Optional[MissionSummary] = None


class RecommendationsResponse(BaseModel):
    success: bool
    member_id: str
    count: int
    recommendations: List[RecommendationItem]


class CandidateProfile(BaseModel):
    """Profile summary shown to NGOs next to a candidate's score."""
    member_id: str
    fullname: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    job_title: Optional[str] = None
    specialties: List[str] = Field(default_factory=list)
    personality_type: Optional[str] = None
    preferred_committee: Optional[str] = None
    points: int = 0
    engagement_index: float = 0.0


class CandidateMatch(BaseModel):
    """A member ranked against a mission."""
    member_id: str
    mission_id: str
    score: int = Field(ge=0, le=100)
    grade: str
    grade_label: str
    status: str
    feedback: Optional[str] = None
    breakdown: List[BreakdownEntry]
    improvement_tip: str
    profile: CandidateProfile


class CandidatesResponse(BaseModel):
    success: bool
    mission_id: str
    count: int
    candidates: List[CandidateMatch]


class MatchPreviewResponse(BaseModel):
    """Score of one member x mission pair, not persisted."""
    success: bool
    member_id: str
    mission_id: str
    score: int = Field(ge=0, le=100)
    grade: str
    grade_label: str
    breakdown: List[BreakdownEntry]
    improvement_tip: str


class FeedbackResponse(BaseModel):
    success: bool
    recommendation_id: str
    member_id: str
    mission_id: str
    status: str
    feedback: Optional[str] = None
