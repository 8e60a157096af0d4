# app/storage/reference_repository.py

import logging
from typing import Any, Iterable, List, Optional, Type
from sqlalchemy import select, update, delete, func
from app.core.exceptions import NotFoundError
from app.models.genre import GenreModel
from app.models.mpa_rating import MpaRatingModel
from app.models.director import DirectorModel
from app.schemas.genre import Genre, MpaRating
from app.schemas.director import Director, DirectorCreate, DirectorUpdate
from app.storage.base_repository import BaseRepository, T

logger = logging.getLogger(__name__)

DEFAULT_GENRES = ["Comedy", "Drama", "Cartoon", "Thriller", "Documentary", "Action"]
DEFAULT_MPA_RATINGS = ["G", "PG", "PG-13", "R", "NC-17"]


class ReferenceRepository(BaseRepository[T]):
    """ID + 이름으로 구성된 참조 테이블 공통 저장소"""

    model = None
    schema: Type[Any] = None
    id_column: str = None

    @property
    def _id(self):
        return getattr(self.model, self.id_column)

    def _map_row(self, row: Any) -> T:
        return self.schema(id=row[self.id_column], name=row["name"])

    def _select(self):
        return select(self._id, self.model.name)

    def find_all(self) -> List[T]:
        return self._find_many(self._select().order_by(self._id))

    def find_by_id(self, entity_id: int) -> Optional[T]:
        return self._find_one(self._select().where(self._id == entity_id))

    def is_exist(self, entity_id: int) -> bool:
        return self._exists(self._id == entity_id)

    def count_existing(self, ids: Iterable[int]) -> int:
        """주어진 ID 중 실제 존재하는 개수"""
        ids = set(ids)
        if not ids:
            return 0
        stmt = select(func.count()).select_from(self.model).where(self._id.in_(ids))
        return self.db.execute(stmt).scalar() or 0

    def seed(self, names: Iterable[str]) -> int:
        """테이블이 비어 있을 때만 기본 데이터 생성"""
        if self._exists(self._id.isnot(None)):
            return 0
        names = list(names)
        for name in names:
            self._insert(self.model, name=name)
        logger.info("Seeded %s rows into %s", len(names), self.model.__tablename__)
        return len(names)


class GenreRepository(ReferenceRepository[Genre]):
    model = GenreModel
    schema = Genre
    id_column = "genre_id"


class MpaRatingRepository(ReferenceRepository[MpaRating]):
    model = MpaRatingModel
    schema = MpaRating
    id_column = "mpa_id"


class DirectorRepository(ReferenceRepository[Director]):
    model = DirectorModel
    schema = Director
    id_column = "director_id"

    def save(self, director: DirectorCreate) -> Director:
        director_id = self._insert(DirectorModel, name=director.name)
        logger.debug("Director saved with id %s", director_id)
        return Director(id=director_id, name=director.name)

    def update(self, director: DirectorUpdate) -> Director:
        if not self.is_exist(director.id):
            raise NotFoundError(f"Director with id = {director.id} not found.")
        self._update(
            update(DirectorModel)
            .where(DirectorModel.director_id == director.id)
            .values(name=director.name)
        )
        return Director(id=director.id, name=director.name)

    def delete(self, director_id: int) -> bool:
        return self._delete(delete(DirectorModel).where(DirectorModel.director_id == director_id))
