# app/api/v1/__init__.py

from fastapi import APIRouter
from . import films, users, genres, directors, reviews, system

api_router = APIRouter()

api_router.include_router(films.router, prefix="/films", tags=["영화"])
api_router.include_router(users.router, prefix="/users", tags=["사용자"])
api_router.include_router(genres.router, prefix="/genres", tags=["장르"])
api_router.include_router(genres.mpa_router, prefix="/mpa", tags=["MPA 등급"])
api_router.include_router(directors.router, prefix="/directors", tags=["감독"])
api_router.include_router(reviews.router, prefix="/reviews", tags=["리뷰"])
api_router.include_router(system.router, prefix="/system", tags=["시스템"])
