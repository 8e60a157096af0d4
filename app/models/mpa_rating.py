# app/models/mpa_rating.py

from sqlalchemy import Column, Integer, String
from app.database import Base


class MpaRatingModel(Base):
    __tablename__ = "mpa_ratings"

    mpa_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(10), nullable=False, unique=True)

    def __repr__(self):
        return f"<MpaRatingModel(id={self.mpa_id}, name='{self.name}')>"
