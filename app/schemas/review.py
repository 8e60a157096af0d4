# app/schemas/review.py

from pydantic import BaseModel, Field, field_validator
from app.core.config import get_settings


class Review(BaseModel):
    id: int = Field(description="리뷰 ID")
    content: str = Field(description="리뷰 내용")
    is_positive: bool = Field(description="긍정 리뷰 여부")
    user_id: int = Field(description="작성자 ID")
    film_id: int = Field(description="영화 ID")
    useful: int = Field(default=0, description="유용도 (좋아요 수 - 싫어요 수)")


class ReviewCreate(BaseModel):
    content: str = Field(description="리뷰 내용")
    is_positive: bool = Field(description="긍정 리뷰 여부")
    user_id: int = Field(description="작성자 ID")
    film_id: int = Field(description="영화 ID")

    @field_validator("content")
    @classmethod
    def content_length(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Review content should not be empty.")
        max_length = get_settings().review_max_content_length
        if len(value) > max_length:
            raise ValueError(f"Review content should not exceed {max_length} characters.")
        return value


class ReviewUpdate(ReviewCreate):
    """작성자와 영화는 바뀌지 않음"""

    id: int = Field(description="리뷰 ID")
