# app/schemas/film.py

from typing import Optional, Set, List
from datetime import date
from pydantic import BaseModel, Field, field_validator, field_serializer
from app.core.config import get_settings
from app.schemas.genre import Genre, MpaRating
from app.schemas.director import Director


class Film(BaseModel):
    """영화 애그리거트 (장르/감독/좋아요 집합 포함)"""

    id: int = Field(description="영화 ID")
    title: str = Field(description="영화 제목")
    description: Optional[str] = Field(default=None, description="영화 설명")
    release_date: date = Field(description="개봉일")
    duration: int = Field(description="상영시간(분)")
    mpa: MpaRating = Field(description="MPA 등급")
    genres: Set[Genre] = Field(default_factory=set, description="장르 집합")
    directors: Set[Director] = Field(default_factory=set, description="감독 집합")
    likes: Set[int] = Field(default_factory=set, description="좋아요한 사용자 ID 집합")

    @property
    def genre_ids(self) -> Set[int]:
        return {genre.id for genre in self.genres}

    @property
    def director_ids(self) -> Set[int]:
        return {director.id for director in self.directors}

    @field_serializer("genres", "directors")
    def _sorted_references(self, references):
        return [ref.model_dump() for ref in sorted(references, key=lambda ref: ref.id)]

    @field_serializer("likes")
    def _sorted_likes(self, likes: Set[int]) -> List[int]:
        return sorted(likes)


class FilmCreate(BaseModel):
    title: str = Field(description="영화 제목", max_length=255)
    description: Optional[str] = Field(default=None, description="영화 설명")
    release_date: date = Field(description="개봉일")
    duration: int = Field(description="상영시간(분)", gt=0)
    mpa: MpaRating = Field(description="MPA 등급")
    genres: Set[Genre] = Field(default_factory=set, description="장르 집합")
    directors: Set[Director] = Field(default_factory=set, description="감독 집합")

    @property
    def genre_ids(self) -> Set[int]:
        return {genre.id for genre in self.genres}

    @property
    def director_ids(self) -> Set[int]:
        return {director.id for director in self.directors}

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title should not be empty.")
        return value

    @field_validator("description")
    @classmethod
    def description_length(cls, value: Optional[str]) -> Optional[str]:
        max_length = get_settings().film_max_description_length
        if value is not None and len(value) > max_length:
            raise ValueError(f"Description should not exceed {max_length} characters.")
        return value

    @field_validator("release_date")
    @classmethod
    def release_date_range(cls, value: date) -> date:
        min_date = get_settings().film_min_release_date
        if value < min_date:
            raise ValueError(f"Release date should not be before {min_date.isoformat()}.")
        if value > date.today():
            raise ValueError("Release date should not be in future.")
        return value


class FilmUpdate(FilmCreate):
    id: int = Field(description="영화 ID")
