# app/storage/film_repository.py

import logging
from datetime import date
from typing import Any, Iterable, List, Optional
from sqlalchemy import select, update, delete, distinct, func, and_, or_, not_
from sqlalchemy.orm import Session, aliased
from app.core.exceptions import InvalidCriteriaError, NotFoundError
from app.models.film import FilmModel
from app.models.genre import GenreModel
from app.models.director import DirectorModel
from app.models.mpa_rating import MpaRatingModel
from app.models.film_genre import FilmGenreModel
from app.models.film_director import FilmDirectorModel
from app.models.film_like import FilmLikeModel
from app.schemas.film import Film, FilmCreate, FilmUpdate
from app.schemas.search import DirectorSortKey, SearchCriteria
from app.storage.aggregation import array_aggregator
from app.storage.base_repository import BaseRepository
from app.storage.row_mapping import FilmReconstructor, JoinedFilmRow

logger = logging.getLogger(__name__)

LIKE_COUNT = func.count(distinct(FilmLikeModel.user_id))


def _like_pattern(query: str) -> str:
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class FilmRepository(BaseRepository[Film]):
    """영화 애그리거트 저장소 (CRUD, 랭킹, 검색, 집합 연산)"""

    def __init__(self, db: Session, reconstructor: Optional[FilmReconstructor] = None):
        super().__init__(db)
        self.reconstructor = reconstructor or FilmReconstructor()
        self._agg = array_aggregator(db)

    def _map_row(self, row: Any) -> Film:
        return self.reconstructor.reconstruct(JoinedFilmRow.from_mapping(row))

    def _joined_select(self):
        """영화 + MPA + 장르/감독/좋아요 병렬 배열을 한 행으로 집계하는 쿼리"""
        agg = self._agg
        return (
            select(
                FilmModel.film_id,
                FilmModel.title,
                FilmModel.description,
                FilmModel.release_date,
                FilmModel.duration,
                FilmModel.mpa_id,
                MpaRatingModel.name.label("mpa_name"),
                agg(GenreModel.genre_id).label("genre_ids"),
                agg(GenreModel.name).label("genre_names"),
                agg(DirectorModel.director_id).label("director_ids"),
                agg(DirectorModel.name).label("director_names"),
                # 좋아요 배열은 이름과 짝이 없으므로 중복 제거 가능
                agg(distinct(FilmLikeModel.user_id)).label("like_ids"),
            )
            .select_from(FilmModel)
            .outerjoin(MpaRatingModel, FilmModel.mpa_id == MpaRatingModel.mpa_id)
            .outerjoin(FilmGenreModel, FilmGenreModel.film_id == FilmModel.film_id)
            .outerjoin(GenreModel, GenreModel.genre_id == FilmGenreModel.genre_id)
            .outerjoin(FilmDirectorModel, FilmDirectorModel.film_id == FilmModel.film_id)
            .outerjoin(DirectorModel, DirectorModel.director_id == FilmDirectorModel.director_id)
            .outerjoin(FilmLikeModel, FilmLikeModel.film_id == FilmModel.film_id)
            .group_by(FilmModel.film_id, MpaRatingModel.name)
        )

    def _ranked_select(self):
        # 좋아요 수가 같으면 ID 오름차순
        return self._joined_select().order_by(LIKE_COUNT.desc(), FilmModel.film_id)

    # 연관 조건은 별칭 서브쿼리로 걸어 집계 배열이 잘리지 않게 함
    def _has_genre(self, genre_id: int):
        film_genre = aliased(FilmGenreModel)
        return (
            select(film_genre.film_id)
            .where(film_genre.film_id == FilmModel.film_id, film_genre.genre_id == genre_id)
            .exists()
        )

    def _has_director(self, director_id: int):
        film_director = aliased(FilmDirectorModel)
        return (
            select(film_director.film_id)
            .where(
                film_director.film_id == FilmModel.film_id,
                film_director.director_id == director_id,
            )
            .exists()
        )

    def _liked_by(self, user_id: int):
        film_like = aliased(FilmLikeModel)
        return (
            select(film_like.film_id)
            .where(film_like.film_id == FilmModel.film_id, film_like.user_id == user_id)
            .exists()
        )

    def _director_name_matches(self, pattern: str):
        film_director = aliased(FilmDirectorModel)
        director = aliased(DirectorModel)
        return (
            select(film_director.film_id)
            .join(director, director.director_id == film_director.director_id)
            .where(
                film_director.film_id == FilmModel.film_id,
                director.name.ilike(pattern, escape="\\"),
            )
            .exists()
        )

    def save(self, film: FilmCreate) -> Film:
        logger.debug("Saving a new film: %s", film.title)
        film_id = self._insert(
            FilmModel,
            title=film.title,
            description=film.description,
            release_date=film.release_date,
            duration=film.duration,
            mpa_id=film.mpa.id,
        )
        self._insert_genres(film_id, film.genre_ids)
        self._insert_directors(film_id, film.director_ids)
        logger.debug("Film saved with id %s", film_id)
        return self._get_or_raise(film_id)

    def update(self, film: FilmUpdate) -> Film:
        logger.debug("Updating film %s", film.id)
        if not self.is_exist(film.id):
            raise NotFoundError(f"Film with id = {film.id} not found.")
        self._update(
            update(FilmModel)
            .where(FilmModel.film_id == film.id)
            .values(
                title=film.title,
                description=film.description,
                release_date=film.release_date,
                duration=film.duration,
                mpa_id=film.mpa.id,
            )
        )
        self._replace_genres(film.id, film.genre_ids)
        self._replace_directors(film.id, film.director_ids)
        return self._get_or_raise(film.id)

    def delete(self, film_id: int) -> bool:
        # 연관 행은 외래키 CASCADE로 삭제
        return self._delete(delete(FilmModel).where(FilmModel.film_id == film_id))

    def find_by_id(self, film_id: int) -> Optional[Film]:
        return self._find_one(self._joined_select().where(FilmModel.film_id == film_id))

    def find_all(self) -> List[Film]:
        return self._find_many(self._joined_select().order_by(FilmModel.film_id))

    def is_exist(self, film_id: int) -> bool:
        return self._exists(FilmModel.film_id == film_id)

    def add_like(self, film_id: int, user_id: int) -> Film:
        logger.debug("User %s likes film %s", user_id, film_id)
        self._merge(FilmLikeModel, film_id=film_id, user_id=user_id)
        return self._get_or_raise(film_id)

    def remove_like(self, film_id: int, user_id: int) -> Film:
        logger.debug("User %s removes like from film %s", user_id, film_id)
        self._delete(
            delete(FilmLikeModel).where(
                and_(FilmLikeModel.film_id == film_id, FilmLikeModel.user_id == user_id)
            )
        )
        return self._get_or_raise(film_id)

    def get_top_films(
        self, count: int, genre_id: Optional[int] = None, year: Optional[int] = None
    ) -> List[Film]:
        """좋아요 수 내림차순 인기 영화, 장르/연도 필터는 순위를 유지한 채 범위만 좁힘"""
        logger.debug("Getting top %s films (genre=%s, year=%s)", count, genre_id, year)
        stmt = self._ranked_select()
        if genre_id is not None:
            stmt = stmt.where(self._has_genre(genre_id))
        if year is not None:
            stmt = stmt.where(
                FilmModel.release_date >= date(year, 1, 1),
                FilmModel.release_date <= date(year, 12, 31),
            )
        return self._find_many(stmt.limit(count))

    def get_director_films(self, director_id: int, sort_by: DirectorSortKey) -> List[Film]:
        logger.debug("Getting films of director %s sorted by %s", director_id, sort_by.value)
        stmt = self._joined_select().where(self._has_director(director_id))
        if sort_by is DirectorSortKey.likes:
            stmt = stmt.order_by(LIKE_COUNT.desc(), FilmModel.film_id)
        else:
            stmt = stmt.order_by(FilmModel.release_date, FilmModel.film_id)
        return self._find_many(stmt)

    def get_common_films(self, user_id: int, friend_id: int) -> List[Film]:
        """두 사용자가 모두 좋아요한 영화 (전체 좋아요 수 내림차순)"""
        stmt = self._ranked_select().where(self._liked_by(user_id), self._liked_by(friend_id))
        return self._find_many(stmt)

    def get_recommended_films(self, user_id: int, similar_user_id: int) -> List[Film]:
        """similar_user_id 가 좋아요했지만 user_id 는 좋아요하지 않은 영화"""
        stmt = self._ranked_select().where(
            self._liked_by(similar_user_id), not_(self._liked_by(user_id))
        )
        return self._find_many(stmt)

    def search_by(self, query: str, criteria: Iterable[SearchCriteria]) -> List[Film]:
        criteria = list(criteria)
        logger.debug("Searching films by %r with criteria %s", query, criteria)
        pattern = _like_pattern(query)
        conditions = []
        for criterion in criteria:
            if criterion is SearchCriteria.title:
                conditions.append(FilmModel.title.ilike(pattern, escape="\\"))
            elif criterion is SearchCriteria.director:
                conditions.append(self._director_name_matches(pattern))
        if not conditions:
            raise InvalidCriteriaError("Search criteria should not be empty.")
        return self._find_many(self._ranked_select().where(or_(*conditions)))

    def _get_or_raise(self, film_id: int) -> Film:
        film = self.find_by_id(film_id)
        if film is None:
            raise NotFoundError(f"Film with id = {film_id} not found.")
        return film

    def _insert_genres(self, film_id: int, genre_ids: Iterable[int]) -> None:
        for genre_id in sorted(set(genre_ids)):
            self._insert_composite(FilmGenreModel, film_id=film_id, genre_id=genre_id)

    def _insert_directors(self, film_id: int, director_ids: Iterable[int]) -> None:
        for director_id in sorted(set(director_ids)):
            self._insert_composite(FilmDirectorModel, film_id=film_id, director_id=director_id)

    def _replace_genres(self, film_id: int, genre_ids: Iterable[int]) -> None:
        logger.debug("Replacing genres of film %s", film_id)
        self._delete(delete(FilmGenreModel).where(FilmGenreModel.film_id == film_id))
        self._insert_genres(film_id, genre_ids)

    def _replace_directors(self, film_id: int, director_ids: Iterable[int]) -> None:
        logger.debug("Replacing directors of film %s", film_id)
        self._delete(delete(FilmDirectorModel).where(FilmDirectorModel.film_id == film_id))
        self._insert_directors(film_id, director_ids)
