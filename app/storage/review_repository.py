# app/storage/review_repository.py

import logging
from typing import Any, List, Optional
from sqlalchemy import select, update, delete, case, func, and_
from app.core.exceptions import NotFoundError
from app.models.review import ReviewModel
from app.models.review_like import ReviewLikeModel
from app.schemas.review import Review, ReviewCreate, ReviewUpdate
from app.storage.base_repository import BaseRepository

logger = logging.getLogger(__name__)

# 좋아요 +1, 싫어요 -1, 평가 없음 0
USEFUL = func.coalesce(
    func.sum(
        case(
            (ReviewLikeModel.is_useful.is_(True), 1),
            (ReviewLikeModel.is_useful.is_(False), -1),
            else_=0,
        )
    ),
    0,
)


class ReviewRepository(BaseRepository[Review]):
    """리뷰와 리뷰 평가(좋아요/싫어요) 저장소"""

    def _map_row(self, row: Any) -> Review:
        return Review(
            id=row["review_id"],
            content=row["content"],
            is_positive=bool(row["is_positive"]),
            user_id=row["user_id"],
            film_id=row["film_id"],
            useful=int(row["useful"]),
        )

    def _scored_select(self):
        """리뷰 + 유용도 점수"""
        return (
            select(
                ReviewModel.review_id,
                ReviewModel.content,
                ReviewModel.is_positive,
                ReviewModel.user_id,
                ReviewModel.film_id,
                USEFUL.label("useful"),
            )
            .select_from(ReviewModel)
            .outerjoin(ReviewLikeModel, ReviewLikeModel.review_id == ReviewModel.review_id)
            .group_by(ReviewModel.review_id)
        )

    def save(self, review: ReviewCreate) -> Review:
        logger.debug("Saving a review of film %s by user %s", review.film_id, review.user_id)
        review_id = self._insert(
            ReviewModel,
            content=review.content,
            is_positive=review.is_positive,
            user_id=review.user_id,
            film_id=review.film_id,
        )
        return self._get_or_raise(review_id)

    def update(self, review: ReviewUpdate) -> Review:
        """내용과 평가 종류만 바뀌고, 기존 평가는 초기화됨"""
        if not self.is_exist(review.id):
            raise NotFoundError(f"Review with id = {review.id} not found.")
        self._update(
            update(ReviewModel)
            .where(ReviewModel.review_id == review.id)
            .values(content=review.content, is_positive=review.is_positive)
        )
        self.remove_votes(review.id)
        return self._get_or_raise(review.id)

    def delete(self, review_id: int) -> bool:
        return self._delete(delete(ReviewModel).where(ReviewModel.review_id == review_id))

    def find_by_id(self, review_id: int) -> Optional[Review]:
        return self._find_one(self._scored_select().where(ReviewModel.review_id == review_id))

    def find_all_by_film(self, film_id: Optional[int], count: int) -> List[Review]:
        """유용도 내림차순, 같으면 ID 오름차순. film_id 가 없으면 전체 리뷰"""
        stmt = self._scored_select()
        if film_id is not None:
            stmt = stmt.where(ReviewModel.film_id == film_id)
        stmt = stmt.order_by(USEFUL.desc(), ReviewModel.review_id).limit(count)
        return self._find_many(stmt)

    def is_exist(self, review_id: int) -> bool:
        return self._exists(ReviewModel.review_id == review_id)

    def add_vote(self, review_id: int, user_id: int, is_useful: bool) -> bool:
        """평가 추가, 반대 평가가 있으면 바꾸고 같은 평가가 있으면 무시"""
        current = self._find_vote(review_id, user_id)
        if current is None:
            self._insert_composite(
                ReviewLikeModel, review_id=review_id, user_id=user_id, is_useful=is_useful
            )
            return True
        if current == is_useful:
            return False
        logger.debug("User %s switches vote on review %s", user_id, review_id)
        self._update(
            update(ReviewLikeModel)
            .where(self._vote_criteria(review_id, user_id))
            .values(is_useful=is_useful)
        )
        return True

    def remove_vote(self, review_id: int, user_id: int, is_useful: bool) -> bool:
        """같은 종류의 평가가 있을 때만 삭제"""
        return self._delete(
            delete(ReviewLikeModel).where(
                self._vote_criteria(review_id, user_id),
                ReviewLikeModel.is_useful.is_(is_useful),
            )
        )

    def remove_votes(self, review_id: int) -> bool:
        return self._delete(delete(ReviewLikeModel).where(ReviewLikeModel.review_id == review_id))

    def _find_vote(self, review_id: int, user_id: int) -> Optional[bool]:
        stmt = select(ReviewLikeModel.is_useful).where(self._vote_criteria(review_id, user_id))
        value = self.db.execute(stmt).scalar()
        return None if value is None else bool(value)

    def _vote_criteria(self, review_id: int, user_id: int):
        return and_(ReviewLikeModel.review_id == review_id, ReviewLikeModel.user_id == user_id)

    def _get_or_raise(self, review_id: int) -> Review:
        review = self.find_by_id(review_id)
        if review is None:
            raise NotFoundError(f"Review with id = {review_id} not found.")
        return review
