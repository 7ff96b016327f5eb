from database.repositories.base import BaseRepository, as_uuid
from database.repositories.mission import MissionRepository
from database.repositories.profile import ProfileRepository
from database.repositories.recommendation import RecommendationRepository

__all__ = [
    'BaseRepository',
    'as_uuid',
    'MissionRepository',
    'ProfileRepository',
    'RecommendationRepository',
]
