# app/storage/base_repository.py

import logging
from typing import Any, Callable, Generic, List, Optional, TypeVar
from sqlalchemy import exists, insert, select
from sqlalchemy.orm import Session
from sqlalchemy.sql import Executable
from app.core.exceptions import InfrastructureError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    공통 데이터 접근 헬퍼.

    하위 저장소는 ``_map_row`` 로 조회 결과 한 행을 도메인 객체 ``T`` 로 변환합니다.
    트랜잭션 커밋/롤백은 호출하는 서비스의 ``session_scope`` 가 담당합니다.
    """

    def __init__(self, db: Session):
        self.db = db

    def _map_row(self, row: Any) -> T:
        raise NotImplementedError

    def _insert(self, model, **values) -> int:
        """단일 행 삽입 후 생성된 ID 반환"""
        logger.debug("Executing insert into %s with values %s", model.__tablename__, values)
        result = self.db.execute(insert(model).values(**values))
        key = result.inserted_primary_key
        if not key or key[0] is None:
            logger.warning("Data saving failed: no id obtained for %s", model.__tablename__)
            raise InfrastructureError("Data saving failed: no id obtained.")
        return key[0]

    def _insert_composite(self, model, **values) -> None:
        """복합 기본키 테이블에 행 삽입"""
        logger.debug("Executing composite insert into %s with values %s", model.__tablename__, values)
        result = self.db.execute(insert(model).values(**values))
        key = result.inserted_primary_key
        if not key or any(part is None for part in key):
            logger.warning("Insert failed: no keys returned for %s", model.__tablename__)
            raise InfrastructureError("Data saving failed: no keys returned.")

    def _merge(self, model, **values) -> bool:
        """이미 존재하면 무시하는 삽입, 새로 삽입했으면 True"""
        criteria = [getattr(model, column) == value for column, value in values.items()]
        if self._exists(*criteria):
            logger.debug("Row already present in %s for %s", model.__tablename__, values)
            return False
        self._insert_composite(model, **values)
        return True

    def _update(self, stmt: Executable) -> int:
        """갱신 실행, 영향받은 행이 없으면 InfrastructureError"""
        logger.debug("Executing update: %s", stmt)
        rows_updated = self.db.execute(stmt).rowcount
        if rows_updated == 0:
            logger.warning("Update failed: no rows affected for %s", stmt)
            raise InfrastructureError("Data update failed: no rows affected.")
        return rows_updated

    def _delete(self, stmt: Executable) -> bool:
        logger.debug("Executing delete: %s", stmt)
        rows_deleted = self.db.execute(stmt).rowcount
        logger.debug("Rows affected after deleting: %s", rows_deleted)
        return rows_deleted > 0

    def _exists(self, *criteria) -> bool:
        return bool(self.db.execute(select(exists().where(*criteria))).scalar())

    def _find_one(self, stmt: Executable, mapper: Optional[Callable[[Any], T]] = None) -> Optional[T]:
        logger.debug("Executing find_one: %s", stmt)
        row = self.db.execute(stmt).mappings().first()
        if row is None:
            return None
        return (mapper or self._map_row)(row)

    def _find_many(self, stmt: Executable, mapper: Optional[Callable[[Any], T]] = None) -> List[T]:
        logger.debug("Executing find_many: %s", stmt)
        rows = self.db.execute(stmt).mappings().all()
        return [(mapper or self._map_row)(row) for row in rows]
