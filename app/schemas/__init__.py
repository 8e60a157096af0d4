# app/schemas/__init__.py

from .film import Film, FilmCreate, FilmUpdate
from .genre import Genre, MpaRating
from .director import Director, DirectorCreate, DirectorUpdate
from .user import User, UserCreate, UserUpdate
from .search import SearchCriteria, DirectorSortKey
from .review import Review, ReviewCreate, ReviewUpdate

__all__ = [
    "Film",
    "FilmCreate",
    "FilmUpdate",
    "Genre",
    "MpaRating",
    "Director",
    "DirectorCreate",
    "DirectorUpdate",
    "User",
    "UserCreate",
    "UserUpdate",
    "SearchCriteria",
    "DirectorSortKey",
    "Review",
    "ReviewCreate",
    "ReviewUpdate",
]
