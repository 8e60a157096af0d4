# app/storage/friendship_repository.py

import logging
from typing import Any, List, Optional, Set
from sqlalchemy import select, delete, func, and_
from sqlalchemy.orm import Session, aliased
from app.core.exceptions import InvalidOperationError
from app.models.user import UserModel
from app.models.friendship import FriendshipModel
from app.models.film_like import FilmLikeModel
from app.schemas.user import User
from app.storage.aggregation import array_aggregator
from app.storage.base_repository import BaseRepository
from app.storage.row_mapping import FilmReconstructor, JoinedUserRow
from app.storage.user_repository import joined_user_select

logger = logging.getLogger(__name__)


class FriendshipRepository(BaseRepository[User]):
    """단방향 친구 관계 저장소"""

    def __init__(self, db: Session, reconstructor: Optional[FilmReconstructor] = None):
        super().__init__(db)
        self.reconstructor = reconstructor or FilmReconstructor()
        self._agg = array_aggregator(db)

    def _map_row(self, row: Any) -> User:
        return self.reconstructor.reconstruct_user(JoinedUserRow.from_mapping(row))

    def add_friend(self, user_id: int, friend_id: int) -> bool:
        """user_id -> friend_id 관계 추가, 이미 있으면 False"""
        if user_id == friend_id:
            raise InvalidOperationError("User cannot be friends with themselves.")
        logger.debug("User %s is adding a friend %s", user_id, friend_id)
        return self._merge(FriendshipModel, user_id=user_id, friend_id=friend_id)

    def remove_friend(self, user_id: int, friend_id: int) -> bool:
        """관계가 없으면 아무 것도 하지 않음"""
        logger.debug("User %s is removing a friend %s", user_id, friend_id)
        return self._delete(
            delete(FriendshipModel).where(
                and_(FriendshipModel.user_id == user_id, FriendshipModel.friend_id == friend_id)
            )
        )

    def get_friend_ids(self, user_id: int) -> Set[int]:
        stmt = select(FriendshipModel.friend_id).where(FriendshipModel.user_id == user_id)
        return set(self.db.execute(stmt).scalars().all())

    def get_friends(self, user_id: int) -> List[User]:
        """user_id 가 추가한 사용자 목록 (나가는 방향만)"""
        return self._find_users(self.get_friend_ids(user_id))

    def get_mutual_friends(self, user_id: int, other_id: int) -> List[User]:
        mutual_ids = self.get_friend_ids(user_id) & self.get_friend_ids(other_id)
        logger.debug("Mutual friends of %s and %s: %s", user_id, other_id, mutual_ids)
        return self._find_users(mutual_ids)

    def get_similar_user(self, user_id: int) -> Optional[int]:
        """
        좋아요한 영화가 가장 많이 겹치는 다른 사용자 ID.

        겹치는 영화 수가 같으면 가장 작은 사용자 ID를 선택하고,
        겹치는 사용자가 없으면 None 을 반환합니다.
        """
        mine = aliased(FilmLikeModel)
        other = aliased(FilmLikeModel)
        overlap = func.count().label("overlap")
        stmt = (
            select(other.user_id, overlap)
            .select_from(mine)
            .join(other, and_(other.film_id == mine.film_id, other.user_id != mine.user_id))
            .where(mine.user_id == user_id)
            .group_by(other.user_id)
            .order_by(overlap.desc(), other.user_id)
            .limit(1)
        )
        row = self.db.execute(stmt).first()
        if row is None:
            logger.debug("No similar user found for %s", user_id)
            return None
        logger.debug("Similar user for %s is %s (%s common likes)", user_id, row.user_id, row.overlap)
        return row.user_id

    def _find_users(self, user_ids: Set[int]) -> List[User]:
        if not user_ids:
            return []
        stmt = (
            joined_user_select(self._agg)
            .where(UserModel.user_id.in_(user_ids))
            .order_by(UserModel.user_id)
        )
        return self._find_many(stmt)
