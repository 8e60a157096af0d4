# app/core/config.py

from datetime import date
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """설정 클래스"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # 애플리케이션 설정
    app_name: str = Field(default="Filmorate", description="애플리케이션 이름")
    debug: bool = Field(default=False, description="디버그 모드")
    log_level: str = Field(default="INFO", description="로그 레벨")

    # 데이터베이스 설정
    database_url: str = Field(default="sqlite:///./filmorate.db", description="SQLAlchemy DB URL")
    sql_echo: bool = Field(default=False, description="SQL 로그 출력")
    seed_reference_data: bool = Field(default=True, description="장르/MPA 기본 데이터 생성")

    # 영화 설정
    popular_default_count: int = Field(default=10, description="인기 영화 기본 개수")
    film_min_release_date: date = Field(default=date(1895, 12, 28), description="개봉일 하한")
    film_max_description_length: int = Field(default=200, description="설명 최대 길이")

    # 리뷰 설정
    reviews_default_count: int = Field(default=10, description="리뷰 목록 기본 개수")
    review_max_content_length: int = Field(default=1000, description="리뷰 최대 길이")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
