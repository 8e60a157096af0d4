# app/schemas/director.py

from typing import Optional
from pydantic import BaseModel, Field, field_validator


class Director(BaseModel):
    id: int = Field(description="감독 ID")
    name: Optional[str] = Field(default=None, description="감독 이름")

    class Config:
        from_attributes = True
        frozen = True


class DirectorCreate(BaseModel):
    name: str = Field(description="감독 이름", max_length=255)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Director name should not be empty.")
        return value


class DirectorUpdate(DirectorCreate):
    id: int = Field(description="감독 ID")
