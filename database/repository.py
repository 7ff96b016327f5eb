from sqlalchemy.orm import Session

from database.repositories import (
    MissionRepository,
    ProfileRepository,
    RecommendationRepository,
)


class MatchingRepository:
    """Groups the matching repositories around one Session."""

    def __init__(self, db: Session):
        self.db = db
        self.missions = MissionRepository(db)
        self.profiles = ProfileRepository(db)
        self.recommendations = RecommendationRepository(db)
