# app/services/film_service.py

import logging
from typing import List, Optional, Set
from sqlalchemy.orm import Session
from app.core.exceptions import InvalidDataError, NotFoundError
from app.database import SessionLocal, session_scope
from app.schemas.film import Film, FilmCreate, FilmUpdate
from app.schemas.search import DirectorSortKey, SearchCriteria
from app.storage.film_repository import FilmRepository
from app.storage.reference_repository import (
    DirectorRepository,
    GenreRepository,
    MpaRatingRepository,
)
from app.storage.user_repository import UserRepository

logger = logging.getLogger(__name__)


class FilmService:
    """영화 CRUD, 좋아요, 인기/감독/공통 영화, 검색"""

    def __init__(self, session_factory=None):
        self.session_factory = session_factory or SessionLocal

    def _transaction(self):
        """요청 단위 트랜잭션"""
        return session_scope(self.session_factory)

    def save(self, film: FilmCreate) -> Film:
        logger.debug("Saving film %s", film.title)
        with self._transaction() as db:
            self._validate_references(film, db)
            return FilmRepository(db).save(film)

    def update(self, film: FilmUpdate) -> Film:
        logger.debug("Updating film %s", film.id)
        with self._transaction() as db:
            self._validate_film_id(film.id, db)
            self._validate_references(film, db)
            return FilmRepository(db).update(film)

    def get_all(self) -> List[Film]:
        with self._transaction() as db:
            return FilmRepository(db).find_all()

    def get_by_id(self, film_id: int) -> Film:
        with self._transaction() as db:
            film = FilmRepository(db).find_by_id(film_id)
            if film is None:
                raise NotFoundError(f"Film with id = {film_id} not found.")
            return film

    def remove_by_id(self, film_id: int) -> None:
        logger.info("Deleting film %s", film_id)
        with self._transaction() as db:
            self._validate_film_id(film_id, db)
            FilmRepository(db).delete(film_id)

    def add_like(self, film_id: int, user_id: int) -> Film:
        with self._transaction() as db:
            self._validate_film_id(film_id, db)
            self._validate_user_id(user_id, db)
            film = FilmRepository(db).add_like(film_id, user_id)
        logger.info("User %s liked film %s", user_id, film_id)
        return film

    def remove_like(self, film_id: int, user_id: int) -> Film:
        with self._transaction() as db:
            self._validate_film_id(film_id, db)
            self._validate_user_id(user_id, db)
            film = FilmRepository(db).remove_like(film_id, user_id)
        logger.info("User %s removed like from film %s", user_id, film_id)
        return film

    def get_top_films(
        self, count: int, genre_id: Optional[int] = None, year: Optional[int] = None
    ) -> List[Film]:
        logger.debug("Getting top %s films", count)
        with self._transaction() as db:
            if genre_id is not None and not GenreRepository(db).is_exist(genre_id):
                raise NotFoundError(f"Genre with id = {genre_id} not found.")
            return FilmRepository(db).get_top_films(count, genre_id, year)

    def get_director_films(self, director_id: int, sort_by: str) -> List[Film]:
        sort_key = DirectorSortKey.from_string(sort_by)
        with self._transaction() as db:
            if not DirectorRepository(db).is_exist(director_id):
                logger.warning("Director with id = %s not found", director_id)
                raise NotFoundError(f"Director with id = {director_id} not found.")
            return FilmRepository(db).get_director_films(director_id, sort_key)

    def get_common_films(self, user_id: int, friend_id: int) -> List[Film]:
        with self._transaction() as db:
            self._validate_user_id(user_id, db)
            self._validate_user_id(friend_id, db)
            return FilmRepository(db).get_common_films(user_id, friend_id)

    def search(self, query: str, by: str) -> List[Film]:
        logger.debug("Searching films for %r by %r", query, by)
        criteria = SearchCriteria.parse_list(by)
        with self._transaction() as db:
            return FilmRepository(db).search_by(query, criteria)

    def _validate_film_id(self, film_id: int, db: Session) -> None:
        if film_id is None or not FilmRepository(db).is_exist(film_id):
            logger.warning("Film with id = %s not found", film_id)
            raise NotFoundError(f"Film with id = {film_id} not found.")

    def _validate_user_id(self, user_id: int, db: Session) -> None:
        if user_id is None or not UserRepository(db).is_exist(user_id):
            logger.warning("User with id = %s not found", user_id)
            raise NotFoundError(f"User with id = {user_id} not found.")

    def _validate_references(self, film: FilmCreate, db: Session) -> None:
        """MPA/장르/감독 존재 여부 확인"""
        if not MpaRatingRepository(db).is_exist(film.mpa.id):
            logger.warning("MPA rating %s does not exist", film.mpa.id)
            raise InvalidDataError(f"MPA rating with id = {film.mpa.id} not found.")
        self._validate_all_exist(film.genre_ids, GenreRepository(db).count_existing, "genres")
        self._validate_all_exist(
            film.director_ids, DirectorRepository(db).count_existing, "directors"
        )

    def _validate_all_exist(self, ids: Set[int], count_existing, label: str) -> None:
        if ids and count_existing(ids) != len(ids):
            logger.warning("Validating %s failed for ids %s", label, sorted(ids))
            raise InvalidDataError(f"One or more {label} do not exist.")
