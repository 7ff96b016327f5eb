#!/usr/bin/env python3
"""
Matching Models - Value objects for compatibility scoring.

MemberProfile and Mission are the read-only inputs of the scoring engine;
ScoreBreakdown and ScoringResult are its outputs. All of them are frozen
dataclasses: the engine never mutates its inputs and callers never mutate
its results.
"""

import logging
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class ScheduleTime(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    FULL_DAY = "full_day"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ScheduleTime"]:
        """Parse a stored time slot. Unknown or empty values are treated as absent."""
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        key = value.strip().lower()
        if not key:
            return None
        # Rows written by the legacy front-end use the French label
        if key == "matinal":
            return cls.MORNING
        try:
            return cls(key)
        except ValueError:
            logger.warning(f"Unknown schedule time '{value}', treating as unspecified")
            return None


class PersonalityType(str, Enum):
    DOMINANT = "Dominant"
    INFLUENCE = "Influence"
    STEADINESS = "Steadiness"
    CONSCIENTIOUS = "Conscientious"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["PersonalityType"]:
        """Parse a stored DISC type, case-insensitively. Unknown values are treated as absent."""
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        key = value.strip().lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        if key:
            logger.warning(f"Unknown personality type '{value}', treating as unset")
        return None


class ScoreFactor(str, Enum):
    SKILLS = "Skills Match"
    AVAILABILITY = "Availability"
    PERSONALITY = "Personality Fit"
    DOMAIN = "Domain Interest"
    ENGAGEMENT = "Engagement Level"


# Order in which factors are computed and reported
FACTOR_ORDER: Tuple[ScoreFactor, ...] = (
    ScoreFactor.SKILLS,
    ScoreFactor.AVAILABILITY,
    ScoreFactor.PERSONALITY,
    ScoreFactor.DOMAIN,
    ScoreFactor.ENGAGEMENT,
)


class MatchGrade(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    LOW = "Low"

    @property
    def label(self) -> str:
        return f"{self.value} Match"

    @property
    def rank(self) -> int:
        """Ordinal rank, Low (0) < Fair < Good < Excellent (3)."""
        return _GRADE_RANK[self]


_GRADE_RANK = {
    MatchGrade.LOW: 0,
    MatchGrade.FAIR: 1,
    MatchGrade.GOOD: 2,
    MatchGrade.EXCELLENT: 3,
}


def _as_tuple(values: Optional[Iterable[Any]]) -> Tuple[Any, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        return (values,)
    return tuple(values)


@dataclass(frozen=True)
class MemberProfile:
    """A volunteer's attributes relevant to mission matching."""
    id: str
    specialties: Tuple[str, ...] = field(default_factory=tuple)
    job_title: Optional[str] = None
    availability_days: Tuple[str, ...] = field(default_factory=tuple)
    availability_time: Optional[ScheduleTime] = None
    personality_type: Optional[PersonalityType] = None
    preferred_committee: Optional[str] = None
    preferred_activity_type: Optional[str] = None
    engagement_points: float = 0.0
    engagement_index_score: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'specialties', _as_tuple(self.specialties))
        object.__setattr__(self, 'availability_days', _as_tuple(self.availability_days))
        object.__setattr__(self, 'availability_time', ScheduleTime.parse(self.availability_time))
        object.__setattr__(self, 'personality_type', PersonalityType.parse(self.personality_type))
        object.__setattr__(self, 'engagement_points', float(self.engagement_points or 0))
        object.__setattr__(self, 'engagement_index_score', float(self.engagement_index_score or 0))


@dataclass(frozen=True)
class Mission:
    """A volunteering opportunity, reduced to the attributes scoring needs."""
    id: str
    title: str = ""
    required_skills: Tuple[str, ...] = field(default_factory=tuple)
    personality_fit: Tuple[PersonalityType, ...] = field(default_factory=tuple)
    schedule_days: Tuple[str, ...] = field(default_factory=tuple)
    schedule_time: Optional[ScheduleTime] = None
    category: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'required_skills', _as_tuple(self.required_skills))
        object.__setattr__(self, 'schedule_days', _as_tuple(self.schedule_days))
        object.__setattr__(self, 'schedule_time', ScheduleTime.parse(self.schedule_time))

        # Declaration order, unknown and duplicate types dropped
        fit = {PersonalityType.parse(raw) for raw in _as_tuple(self.personality_fit)}
        object.__setattr__(self, 'personality_fit', tuple(p for p in PersonalityType if p in fit))


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-factor score detail."""
    factor: ScoreFactor
    points: int
    max_points: int
    percentage: int
    explanation: str
    matched_items: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def ratio(self) -> float:
        return self.points / self.max_points if self.max_points else 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON storage and API responses."""
        return {
            'factor': self.factor.value,
            'points': self.points,
            'max_points': self.max_points,
            'percentage': self.percentage,
            'explanation': self.explanation,
            'matched_items': list(self.matched_items),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoreBreakdown":
        return cls(
            factor=ScoreFactor(data['factor']),
            points=int(data['points']),
            max_points=int(data['max_points']),
            percentage=int(data['percentage']),
            explanation=data.get('explanation', ''),
            matched_items=tuple(data.get('matched_items') or ()),
        )


@dataclass(frozen=True)
class ScoringResult:
    """Score, grade and factor breakdown for one member x mission pair."""
    score: int
    grade: MatchGrade
    breakdown: Tuple[ScoreBreakdown, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'grade': self.grade.value,
            'breakdown': [b.to_dict() for b in self.breakdown],
        }


@dataclass(frozen=True)
class RankedMission:
    mission: Mission
    result: ScoringResult


@dataclass(frozen=True)
class RankedMember:
    member: MemberProfile
    result: ScoringResult
