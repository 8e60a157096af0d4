# app/storage/aggregation.py

import json
from typing import Any, Callable, List
from sqlalchemy import func
from sqlalchemy.orm import Session


def array_aggregator(db: Session) -> Callable:
    """DB 방언별 배열 집계 함수 (PostgreSQL: array_agg, SQLite: json_group_array)"""
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return func.array_agg
    if dialect == "sqlite":
        return func.json_group_array
    raise NotImplementedError(f"Array aggregation is not supported for dialect {dialect!r}")


def decode_array(value: Any) -> List[Any]:
    """집계 컬럼 값을 리스트로 변환 (JSON 문자열 또는 DB 배열)"""
    if value is None:
        return []
    if isinstance(value, str):
        decoded = json.loads(value)
        return decoded if isinstance(decoded, list) else [decoded]
    return list(value)
