# app/models/review_like.py

from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.database import Base


class ReviewLikeModel(Base):
    __tablename__ = "review_likes"

    # 사용자당 리뷰 하나에 평가 하나 (좋아요 또는 싫어요)
    review_id = Column(
        Integer, ForeignKey("reviews.review_id", ondelete="CASCADE"), primary_key=True
    )
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True)
    is_useful = Column(Boolean, nullable=False)  # True: 좋아요, False: 싫어요
    created_at = Column(DateTime, default=func.current_timestamp())

    def __repr__(self):
        return (
            f"<ReviewLikeModel(review_id={self.review_id}, user_id={self.user_id}, "
            f"is_useful={self.is_useful})>"
        )
