# app/models/__init__.py

from .film import FilmModel
from .user import UserModel
from .genre import GenreModel
from .director import DirectorModel
from .mpa_rating import MpaRatingModel
from .film_genre import FilmGenreModel
from .film_director import FilmDirectorModel
from .film_like import FilmLikeModel
from .friendship import FriendshipModel
from .review import ReviewModel
from .review_like import ReviewLikeModel


__all__ = [
    "FilmModel",
    "UserModel",
    "GenreModel",
    "DirectorModel",
    "MpaRatingModel",
    "FilmGenreModel",
    "FilmDirectorModel",
    "FilmLikeModel",
    "FriendshipModel",
    "ReviewModel",
    "ReviewLikeModel",
]
