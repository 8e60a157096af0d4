# app/models/genre.py

from sqlalchemy import Column, Integer, String
from app.database import Base


class GenreModel(Base):
    __tablename__ = "genres"

    genre_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)

    def __repr__(self):
        return f"<GenreModel(id={self.genre_id}, name='{self.name}')>"
