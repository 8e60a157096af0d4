# app/schemas/genre.py

from typing import Optional
from pydantic import BaseModel, Field


class Genre(BaseModel):
    id: int = Field(description="장르 ID")
    name: Optional[str] = Field(default=None, description="장르 이름")

    class Config:
        from_attributes = True
        frozen = True


class MpaRating(BaseModel):
    id: int = Field(description="MPA 등급 ID")
    name: Optional[str] = Field(default=None, description="MPA 등급 이름")

    class Config:
        from_attributes = True
        frozen = True
