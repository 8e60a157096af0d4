# app/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.core.config import get_settings
from app.core.logging import setup_logging
from app.api.v1 import api_router
from app.database import engine, Base
from app import models  # noqa: F401
from app.services.reference_service import ReferenceService

# 설정 로드
settings = get_settings()
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 데이터베이스 테이블 생성
    Base.metadata.create_all(bind=engine)
    if settings.seed_reference_data:
        ReferenceService().seed_defaults()
    logger.info("%s started", settings.app_name)

    yield

    engine.dispose()
    logger.info("%s stopped", settings.app_name)


# FastAPI 앱 생성
app = FastAPI(
    title=settings.app_name,
    description="Film Catalog & Recommendation Service",
    version="1.0.0",
    docs_url="/docs",
    openapi_url="/openapi.json",
    debug=settings.debug,
    lifespan=lifespan,
)

# API v1 라우터 등록
app.include_router(api_router, prefix="/v1")


@app.get("/")
def read_root():
    """서비스 루트"""
    return {
        "service": settings.app_name,
        "description": "Film Catalog & Recommendation Service",
        "version": "1.0.0",
        "docs": "/docs",
    }
