# app/services/review_service.py

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from app.core.exceptions import NotFoundError
from app.database import SessionLocal, session_scope
from app.schemas.review import Review, ReviewCreate, ReviewUpdate
from app.storage.film_repository import FilmRepository
from app.storage.review_repository import ReviewRepository
from app.storage.user_repository import UserRepository

logger = logging.getLogger(__name__)


class ReviewService:
    """리뷰 CRUD 및 리뷰 좋아요/싫어요"""

    def __init__(self, session_factory=None):
        self.session_factory = session_factory or SessionLocal

    def _transaction(self):
        return session_scope(self.session_factory)

    def get_reviews(self, film_id: Optional[int], count: int) -> List[Review]:
        with self._transaction() as db:
            if film_id is not None:
                self._validate_film_id(film_id, db)
            return ReviewRepository(db).find_all_by_film(film_id, count)

    def get_by_id(self, review_id: int) -> Review:
        with self._transaction() as db:
            review = ReviewRepository(db).find_by_id(review_id)
        if review is None:
            raise NotFoundError(f"Review with id = {review_id} not found.")
        return review

    def save(self, review: ReviewCreate) -> Review:
        with self._transaction() as db:
            self._validate_user_id(review.user_id, db)
            self._validate_film_id(review.film_id, db)
            saved = ReviewRepository(db).save(review)
        logger.info("User %s reviewed film %s", review.user_id, review.film_id)
        return saved

    def update(self, review: ReviewUpdate) -> Review:
        logger.debug("Updating review %s", review.id)
        with self._transaction() as db:
            self._validate_review_id(review.id, db)
            return ReviewRepository(db).update(review)

    def remove_by_id(self, review_id: int) -> None:
        logger.info("Deleting review %s", review_id)
        with self._transaction() as db:
            self._validate_review_id(review_id, db)
            ReviewRepository(db).delete(review_id)

    def add_like(self, review_id: int, user_id: int) -> Review:
        return self._vote(review_id, user_id, True)

    def add_dislike(self, review_id: int, user_id: int) -> Review:
        return self._vote(review_id, user_id, False)

    def remove_like(self, review_id: int, user_id: int) -> Review:
        return self._unvote(review_id, user_id, True)

    def remove_dislike(self, review_id: int, user_id: int) -> Review:
        return self._unvote(review_id, user_id, False)

    def _vote(self, review_id: int, user_id: int, is_useful: bool) -> Review:
        with self._transaction() as db:
            self._validate_review_id(review_id, db)
            self._validate_user_id(user_id, db)
            repository = ReviewRepository(db)
            repository.add_vote(review_id, user_id, is_useful)
            return repository.find_by_id(review_id)

    def _unvote(self, review_id: int, user_id: int, is_useful: bool) -> Review:
        with self._transaction() as db:
            self._validate_review_id(review_id, db)
            self._validate_user_id(user_id, db)
            repository = ReviewRepository(db)
            repository.remove_vote(review_id, user_id, is_useful)
            return repository.find_by_id(review_id)

    def _validate_review_id(self, review_id: int, db: Session) -> None:
        if review_id is None or not ReviewRepository(db).is_exist(review_id):
            logger.warning("Review with id = %s not found", review_id)
            raise NotFoundError(f"Review with id = {review_id} not found.")

    def _validate_film_id(self, film_id: int, db: Session) -> None:
        if not FilmRepository(db).is_exist(film_id):
            logger.warning("Film with id = %s not found", film_id)
            raise NotFoundError(f"Film with id = {film_id} not found.")

    def _validate_user_id(self, user_id: int, db: Session) -> None:
        if not UserRepository(db).is_exist(user_id):
            logger.warning("User with id = %s not found", user_id)
            raise NotFoundError(f"User with id = {user_id} not found.")
