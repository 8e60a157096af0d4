# app/services/__init__.py

from .film_service import FilmService
from .user_service import UserService
from .recommendation_service import RecommendationService
from .reference_service import ReferenceService
from .review_service import ReviewService

__all__ = ["FilmService", "UserService", "RecommendationService", "ReferenceService", "ReviewService"]
