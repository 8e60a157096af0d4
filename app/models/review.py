# app/models/review.py

from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.database import Base


class ReviewModel(Base):
    __tablename__ = "reviews"

    review_id = Column(Integer, primary_key=True, autoincrement=True)
    content = Column(String(1000), nullable=False)
    is_positive = Column(Boolean, nullable=False)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False)
    film_id = Column(Integer, ForeignKey("films.film_id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, default=func.current_timestamp())
    updated_at = Column(DateTime, default=func.current_timestamp(), onupdate=func.current_timestamp())

    def __repr__(self):
        return f"<ReviewModel(id={self.review_id}, film_id={self.film_id}, user_id={self.user_id})>"
