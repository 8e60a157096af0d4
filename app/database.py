# app/database.py

import logging
from contextlib import contextmanager
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from dotenv import load_dotenv
from app.core.config import get_settings

# .env 파일 로드
load_dotenv()

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str, echo: bool = False, **kwargs) -> Engine:
    """엔진 생성 (SQLite는 외래키 강제 활성화)"""
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)  # 연결 상태 확인
        kwargs.setdefault("pool_recycle", 300)  # 5분마다 연결 재사용

    db_engine = create_engine(database_url, echo=echo, **kwargs)

    if is_sqlite:
        @event.listens_for(db_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return db_engine


settings = get_settings()

# 엔진 생성
engine = create_db_engine(settings.database_url, echo=settings.sql_echo)

# 세션 팩토리 생성
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Base 클래스 생성
Base = declarative_base()


@contextmanager
def session_scope(session_factory=SessionLocal):
    """트랜잭션 범위: 정상 종료 시 커밋, 예외 시 롤백"""
    db: Session = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        logger.debug("Rolling back transaction")
        db.rollback()
        raise
    finally:
        db.close()

