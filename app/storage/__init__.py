# app/storage/__init__.py

from .base_repository import BaseRepository
from .row_mapping import AssociationArrays, JoinedFilmRow, JoinedUserRow, FilmReconstructor
from .film_repository import FilmRepository
from .user_repository import UserRepository
from .friendship_repository import FriendshipRepository
from .reference_repository import GenreRepository, MpaRatingRepository, DirectorRepository
from .review_repository import ReviewRepository

__all__ = [
    "BaseRepository",
    "AssociationArrays",
    "JoinedFilmRow",
    "JoinedUserRow",
    "FilmReconstructor",
    "FilmRepository",
    "UserRepository",
    "FriendshipRepository",
    "GenreRepository",
    "MpaRatingRepository",
    "DirectorRepository",
    "ReviewRepository",
]
