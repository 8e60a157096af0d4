# app/models/film.py

from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.database import Base


class FilmModel(Base):
    __tablename__ = "films"

    film_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(String(200), nullable=True)
    release_date = Column(Date, nullable=False)
    duration = Column(Integer, nullable=False)
    mpa_id = Column(Integer, ForeignKey("mpa_ratings.mpa_id"), nullable=False)
    created_at = Column(DateTime, default=func.current_timestamp())
    updated_at = Column(
        DateTime, default=func.current_timestamp(), onupdate=func.current_timestamp()
    )

    def __repr__(self):
        return f"<FilmModel(film_id={self.film_id}, title='{self.title}')>"
