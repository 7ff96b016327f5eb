"""Business logic services."""

from .mission_service import MissionService
from .recommendation_service import RecommendationViewService
