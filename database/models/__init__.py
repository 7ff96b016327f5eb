from .base import Base
from .mission import Mission
from .profile import MemberProfile, EngagementSnapshot
from .recommendation import MissionRecommendation, RECOMMENDATION_STATUSES, FEEDBACK_STATUSES

__all__ = [
    'Base',
    'Mission',
    'MemberProfile',
    'EngagementSnapshot',
    'MissionRecommendation',
    'RECOMMENDATION_STATUSES',
    'FEEDBACK_STATUSES',
]
