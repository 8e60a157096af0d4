# app/api/v1/films.py

from typing import List, Optional
from fastapi import APIRouter, Query, Path, Depends, status
from app.api.v1.errors import to_http_exception
from app.core.config import get_settings
from app.core.exceptions import FilmorateError
from app.schemas.film import Film, FilmCreate, FilmUpdate
from app.services.film_service import FilmService

router = APIRouter()


def get_film_service() -> FilmService:
    return FilmService()


@router.get(
    "/popular",
    response_model=List[Film],
    summary="인기 영화",
    description="좋아요 수 기준 인기 영화를 조회합니다. 장르와 개봉 연도로 좁힐 수 있습니다.",
)
def get_popular_films(
    count: Optional[int] = Query(default=None, ge=1, description="조회할 영화 수"),
    genre_id: Optional[int] = Query(default=None, description="장르 ID"),
    year: Optional[int] = Query(default=None, ge=1, le=9999, description="개봉 연도"),
    film_service: FilmService = Depends(get_film_service),
):
    if count is None:
        count = get_settings().popular_default_count
    try:
        return film_service.get_top_films(count, genre_id, year)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.get(
    "/common",
    response_model=List[Film],
    summary="공통 영화",
    description="두 사용자가 모두 좋아요한 영화를 인기순으로 조회합니다.",
)
def get_common_films(
    user_id: int = Query(description="사용자 ID"),
    friend_id: int = Query(description="비교할 사용자 ID"),
    film_service: FilmService = Depends(get_film_service),
):
    try:
        return film_service.get_common_films(user_id, friend_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.get(
    "/search",
    response_model=List[Film],
    summary="영화 검색",
    description="제목 또는 감독 이름에 검색어가 포함된 영화를 인기순으로 조회합니다.",
)
def search_films(
    query: str = Query(description="검색어"),
    by: str = Query(default="title", description="검색 기준 (title, director 콤마 구분)"),
    film_service: FilmService = Depends(get_film_service),
):
    try:
        return film_service.search(query, by)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.get(
    "/director/{director_id}",
    response_model=List[Film],
    summary="감독 영화 목록",
    description="감독의 영화를 좋아요 순(likes) 또는 개봉일 순(year)으로 조회합니다.",
)
def get_director_films(
    director_id: int = Path(description="감독 ID"),
    sort_by: str = Query(description="정렬 기준 (likes, year)"),
    film_service: FilmService = Depends(get_film_service),
):
    try:
        return film_service.get_director_films(director_id, sort_by)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.get("/", response_model=List[Film], summary="전체 영화 조회")
def get_all_films(film_service: FilmService = Depends(get_film_service)):
    try:
        return film_service.get_all()
    except FilmorateError as e:
        raise to_http_exception(e)


@router.post(
    "/",
    response_model=Film,
    status_code=status.HTTP_201_CREATED,
    summary="영화 등록",
)
def create_film(film: FilmCreate, film_service: FilmService = Depends(get_film_service)):
    try:
        return film_service.save(film)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.put("/", response_model=Film, summary="영화 수정")
def update_film(film: FilmUpdate, film_service: FilmService = Depends(get_film_service)):
    try:
        return film_service.update(film)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.get("/{film_id}", response_model=Film, summary="영화 상세 정보")
def get_film(
    film_id: int = Path(description="영화 ID"),
    film_service: FilmService = Depends(get_film_service),
):
    try:
        return film_service.get_by_id(film_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.delete("/{film_id}", status_code=status.HTTP_204_NO_CONTENT, summary="영화 삭제")
def delete_film(
    film_id: int = Path(description="영화 ID"),
    film_service: FilmService = Depends(get_film_service),
):
    try:
        film_service.remove_by_id(film_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.put(
    "/{film_id}/like/{user_id}",
    response_model=Film,
    summary="영화 좋아요",
    description="좋아요를 추가합니다. 이미 좋아요한 경우 그대로 유지됩니다.",
)
def like_film(
    film_id: int = Path(description="영화 ID"),
    user_id: int = Path(description="사용자 ID"),
    film_service: FilmService = Depends(get_film_service),
):
    try:
        return film_service.add_like(film_id, user_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.delete("/{film_id}/like/{user_id}", response_model=Film, summary="영화 좋아요 취소")
def unlike_film(
    film_id: int = Path(description="영화 ID"),
    user_id: int = Path(description="사용자 ID"),
    film_service: FilmService = Depends(get_film_service),
):
    try:
        return film_service.remove_like(film_id, user_id)
    except FilmorateError as e:
        raise to_http_exception(e)
