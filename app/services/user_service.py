# app/services/user_service.py

import logging
from typing import List
from sqlalchemy.orm import Session
from app.core.exceptions import NotFoundError
from app.database import SessionLocal, session_scope
from app.schemas.user import User, UserCreate, UserUpdate
from app.storage.friendship_repository import FriendshipRepository
from app.storage.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """사용자 CRUD 및 친구 관계"""

    def __init__(self, session_factory=None):
        self.session_factory = session_factory or SessionLocal

    def _transaction(self):
        return session_scope(self.session_factory)

    def save(self, user: UserCreate) -> User:
        logger.debug("Saving user %s", user.login)
        with self._transaction() as db:
            return UserRepository(db).save(user)

    def update(self, user: UserUpdate) -> User:
        logger.debug("Updating user %s", user.id)
        with self._transaction() as db:
            self._validate_user_id(user.id, db)
            return UserRepository(db).update(user)

    def get_all(self) -> List[User]:
        with self._transaction() as db:
            return UserRepository(db).find_all()

    def get_by_id(self, user_id: int) -> User:
        with self._transaction() as db:
            user = UserRepository(db).find_by_id(user_id)
            if user is None:
                raise NotFoundError(f"User with id = {user_id} not found.")
            return user

    def remove_by_id(self, user_id: int) -> None:
        logger.info("Deleting user %s", user_id)
        with self._transaction() as db:
            self._validate_user_id(user_id, db)
            UserRepository(db).delete(user_id)

    def add_friend(self, user_id: int, friend_id: int) -> User:
        """친구 추가 (user_id -> friend_id 단방향)"""
        with self._transaction() as db:
            self._validate_user_id(user_id, db)
            self._validate_user_id(friend_id, db)
            FriendshipRepository(db).add_friend(user_id, friend_id)
            user = UserRepository(db).find_by_id(user_id)
        logger.info("User %s added a friend %s", user_id, friend_id)
        return user

    def remove_friend(self, user_id: int, friend_id: int) -> User:
        with self._transaction() as db:
            self._validate_user_id(user_id, db)
            self._validate_user_id(friend_id, db)
            FriendshipRepository(db).remove_friend(user_id, friend_id)
            user = UserRepository(db).find_by_id(user_id)
        logger.info("User %s removed a friend %s", user_id, friend_id)
        return user

    def get_friends(self, user_id: int) -> List[User]:
        with self._transaction() as db:
            self._validate_user_id(user_id, db)
            return FriendshipRepository(db).get_friends(user_id)

    def get_mutual_friends(self, user_id: int, other_id: int) -> List[User]:
        with self._transaction() as db:
            self._validate_user_id(user_id, db)
            self._validate_user_id(other_id, db)
            return FriendshipRepository(db).get_mutual_friends(user_id, other_id)

    def _validate_user_id(self, user_id: int, db: Session) -> None:
        if user_id is None or not UserRepository(db).is_exist(user_id):
            logger.warning("User with id = %s not found", user_id)
            raise NotFoundError(f"User with id = {user_id} not found.")
