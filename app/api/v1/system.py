# app/api/v1/system.py

import logging
from fastapi import APIRouter, HTTPException, status
from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError
from app.core.config import get_settings
from app.database import engine
from app.models import FilmModel, GenreModel, MpaRatingModel, UserModel

logger = logging.getLogger(__name__)

router = APIRouter()

COUNTED_TABLES = {
    "films": FilmModel,
    "users": UserModel,
    "genres": GenreModel,
    "mpa_ratings": MpaRatingModel,
}


@router.get("/health", summary="헬스체크")
def health_check():
    settings = get_settings()
    return {"status": "healthy", "service": settings.app_name, "debug": settings.debug}


@router.get(
    "/db-test",
    summary="DB 연결 테스트",
    description="DB 방언과 주요 테이블의 행 수를 반환합니다. 장르/MPA 가 0이면 기본 데이터가 생성되지 않은 상태입니다.",
)
def test_db():
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
            counts = {
                name: connection.execute(select(func.count()).select_from(model)).scalar()
                for name, model in COUNTED_TABLES.items()
            }
    except SQLAlchemyError as e:
        logger.error("DB connection test failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=f"DB 연결 실패: {str(e)}"
        )
    return {"status": "ok", "dialect": engine.dialect.name, "rows": counts}
