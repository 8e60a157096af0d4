# app/api/v1/genres.py

from typing import List
from fastapi import APIRouter, Depends, Path
from app.api.v1.errors import to_http_exception
from app.core.exceptions import FilmorateError
from app.schemas.genre import Genre, MpaRating
from app.services.reference_service import ReferenceService

router = APIRouter()
mpa_router = APIRouter()


def get_reference_service() -> ReferenceService:
    return ReferenceService()


@router.get("/", response_model=List[Genre], summary="모든 장르 조회")
def get_all_genres(reference_service: ReferenceService = Depends(get_reference_service)):
    try:
        return reference_service.get_genres()
    except FilmorateError as e:
        raise to_http_exception(e)


@router.get("/{genre_id}", response_model=Genre, summary="특정 장르 조회")
def get_genre(
    genre_id: int = Path(description="장르 ID"),
    reference_service: ReferenceService = Depends(get_reference_service),
):
    try:
        return reference_service.get_genre(genre_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@mpa_router.get("/", response_model=List[MpaRating], summary="모든 MPA 등급 조회")
def get_all_mpa_ratings(reference_service: ReferenceService = Depends(get_reference_service)):
    try:
        return reference_service.get_mpa_ratings()
    except FilmorateError as e:
        raise to_http_exception(e)


@mpa_router.get("/{mpa_id}", response_model=MpaRating, summary="특정 MPA 등급 조회")
def get_mpa_rating(
    mpa_id: int = Path(description="MPA 등급 ID"),
    reference_service: ReferenceService = Depends(get_reference_service),
):
    try:
        return reference_service.get_mpa_rating(mpa_id)
    except FilmorateError as e:
        raise to_http_exception(e)
