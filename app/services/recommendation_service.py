# app/services/recommendation_service.py

import logging
from typing import List, Optional
from app.core.exceptions import NotFoundError
from app.database import SessionLocal, session_scope
from app.schemas.film import Film
from app.storage.film_repository import FilmRepository
from app.storage.friendship_repository import FriendshipRepository
from app.storage.user_repository import UserRepository

logger = logging.getLogger(__name__)


class RecommendationService:
    """
    좋아요 기반 협업 필터링 추천.

    1. 대상 사용자와 좋아요한 영화가 가장 많이 겹치는 사용자를 찾고
    2. 그 사용자가 좋아요했지만 대상 사용자는 좋아요하지 않은 영화를 추천합니다.
    겹치는 사용자가 없으면 빈 목록을 반환합니다.
    """

    def __init__(self, session_factory=None):
        self.session_factory = session_factory or SessionLocal

    def _transaction(self):
        return session_scope(self.session_factory)

    def get_similar_user(self, user_id: int) -> Optional[int]:
        with self._transaction() as db:
            self._validate_user_id(user_id, db)
            return FriendshipRepository(db).get_similar_user(user_id)

    def get_recommendations(self, user_id: int) -> List[Film]:
        logger.debug("Getting recommendations for user %s", user_id)
        with self._transaction() as db:
            self._validate_user_id(user_id, db)
            similar_user_id = FriendshipRepository(db).get_similar_user(user_id)
            if similar_user_id is None:
                return []
            films = FilmRepository(db).get_recommended_films(user_id, similar_user_id)
        logger.info(
            "Recommended %s films to user %s based on user %s", len(films), user_id, similar_user_id
        )
        return films

    def _validate_user_id(self, user_id: int, db) -> None:
        if not UserRepository(db).is_exist(user_id):
            raise NotFoundError(f"User with id = {user_id} not found.")
