# app/models/director.py

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from app.database import Base


class DirectorModel(Base):
    __tablename__ = "directors"

    director_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=func.current_timestamp())

    def __repr__(self):
        return f"<DirectorModel(id={self.director_id}, name='{self.name}')>"
