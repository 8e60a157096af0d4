# app/storage/user_repository.py

import logging
from typing import Any, Callable, List, Optional
from sqlalchemy import select, update, delete
from sqlalchemy.orm import Session
from app.core.exceptions import NotFoundError
from app.models.user import UserModel
from app.models.friendship import FriendshipModel
from app.schemas.user import User, UserCreate, UserUpdate
from app.storage.aggregation import array_aggregator
from app.storage.base_repository import BaseRepository
from app.storage.row_mapping import FilmReconstructor, JoinedUserRow

logger = logging.getLogger(__name__)


def joined_user_select(agg: Callable):
    """사용자 + 친구 ID 배열 집계 쿼리"""
    return (
        select(
            UserModel.user_id,
            UserModel.email,
            UserModel.login,
            UserModel.name,
            UserModel.birthday,
            agg(FriendshipModel.friend_id).label("friend_ids"),
        )
        .select_from(UserModel)
        .outerjoin(FriendshipModel, FriendshipModel.user_id == UserModel.user_id)
        .group_by(UserModel.user_id)
    )


class UserRepository(BaseRepository[User]):

    def __init__(self, db: Session, reconstructor: Optional[FilmReconstructor] = None):
        super().__init__(db)
        self.reconstructor = reconstructor or FilmReconstructor()
        self._agg = array_aggregator(db)

    def _map_row(self, row: Any) -> User:
        return self.reconstructor.reconstruct_user(JoinedUserRow.from_mapping(row))

    def save(self, user: UserCreate) -> User:
        logger.debug("Saving a new user: %s", user.login)
        user_id = self._insert(
            UserModel,
            email=user.email,
            login=user.login,
            name=user.display_name(),
            birthday=user.birthday,
        )
        logger.debug("User saved with id %s", user_id)
        return self._get_or_raise(user_id)

    def update(self, user: UserUpdate) -> User:
        logger.debug("Updating user %s", user.id)
        if not self.is_exist(user.id):
            raise NotFoundError(f"User with id = {user.id} not found.")
        self._update(
            update(UserModel)
            .where(UserModel.user_id == user.id)
            .values(
                email=user.email,
                login=user.login,
                name=user.display_name(),
                birthday=user.birthday,
            )
        )
        return self._get_or_raise(user.id)

    def delete(self, user_id: int) -> bool:
        # 친구 관계와 좋아요는 외래키 CASCADE로 삭제
        return self._delete(delete(UserModel).where(UserModel.user_id == user_id))

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self._find_one(joined_user_select(self._agg).where(UserModel.user_id == user_id))

    def find_all(self) -> List[User]:
        return self._find_many(joined_user_select(self._agg).order_by(UserModel.user_id))

    def is_exist(self, user_id: int) -> bool:
        return self._exists(UserModel.user_id == user_id)

    def _get_or_raise(self, user_id: int) -> User:
        user = self.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User with id = {user_id} not found.")
        return user
