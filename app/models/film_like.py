# app/models/film_like.py

from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.database import Base


class FilmLikeModel(Base):
    __tablename__ = "film_likes"

    # 복합 기본키로 중복 좋아요 방지
    film_id = Column(Integer, ForeignKey("films.film_id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), primary_key=True)
    created_at = Column(DateTime, default=func.current_timestamp())

    def __repr__(self):
        return f"<FilmLikeModel(film_id={self.film_id}, user_id={self.user_id})>"
