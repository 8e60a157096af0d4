# app/services/reference_service.py

import logging
from typing import List
from app.core.exceptions import NotFoundError
from app.database import SessionLocal, session_scope
from app.schemas.genre import Genre, MpaRating
from app.schemas.director import Director, DirectorCreate, DirectorUpdate
from app.storage.reference_repository import (
    DEFAULT_GENRES,
    DEFAULT_MPA_RATINGS,
    DirectorRepository,
    GenreRepository,
    MpaRatingRepository,
)

logger = logging.getLogger(__name__)


class ReferenceService:
    """장르/MPA 조회 및 감독 CRUD"""

    def __init__(self, session_factory=None):
        self.session_factory = session_factory or SessionLocal

    def _transaction(self):
        return session_scope(self.session_factory)

    def seed_defaults(self) -> None:
        """비어 있는 장르/MPA 테이블에 기본 데이터 생성"""
        with self._transaction() as db:
            GenreRepository(db).seed(DEFAULT_GENRES)
            MpaRatingRepository(db).seed(DEFAULT_MPA_RATINGS)

    def get_genres(self) -> List[Genre]:
        with self._transaction() as db:
            return GenreRepository(db).find_all()

    def get_genre(self, genre_id: int) -> Genre:
        with self._transaction() as db:
            genre = GenreRepository(db).find_by_id(genre_id)
        if genre is None:
            raise NotFoundError(f"Genre with id = {genre_id} not found.")
        return genre

    def get_mpa_ratings(self) -> List[MpaRating]:
        with self._transaction() as db:
            return MpaRatingRepository(db).find_all()

    def get_mpa_rating(self, mpa_id: int) -> MpaRating:
        with self._transaction() as db:
            mpa = MpaRatingRepository(db).find_by_id(mpa_id)
        if mpa is None:
            raise NotFoundError(f"MPA rating with id = {mpa_id} not found.")
        return mpa

    def get_directors(self) -> List[Director]:
        with self._transaction() as db:
            return DirectorRepository(db).find_all()

    def get_director(self, director_id: int) -> Director:
        with self._transaction() as db:
            director = DirectorRepository(db).find_by_id(director_id)
        if director is None:
            raise NotFoundError(f"Director with id = {director_id} not found.")
        return director

    def save_director(self, director: DirectorCreate) -> Director:
        with self._transaction() as db:
            return DirectorRepository(db).save(director)

    def update_director(self, director: DirectorUpdate) -> Director:
        with self._transaction() as db:
            return DirectorRepository(db).update(director)

    def remove_director(self, director_id: int) -> None:
        logger.info("Deleting director %s", director_id)
        with self._transaction() as db:
            if not DirectorRepository(db).delete(director_id):
                raise NotFoundError(f"Director with id = {director_id} not found.")
