# app/api/v1/directors.py

from typing import List
from fastapi import APIRouter, Depends, Path, status
from app.api.v1.errors import to_http_exception
from app.core.exceptions import FilmorateError
from app.schemas.director import Director, DirectorCreate, DirectorUpdate
from app.api.v1.genres import get_reference_service
from app.services.reference_service import ReferenceService

router = APIRouter()


@router.get("/", response_model=List[Director], summary="전체 감독 조회")
def get_all_directors(reference_service: ReferenceService = Depends(get_reference_service)):
    try:
        return reference_service.get_directors()
    except FilmorateError as e:
        raise to_http_exception(e)


@router.get("/{director_id}", response_model=Director, summary="감독 조회")
def get_director(
    director_id: int = Path(description="감독 ID"),
    reference_service: ReferenceService = Depends(get_reference_service),
):
    try:
        return reference_service.get_director(director_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.post("/", response_model=Director, status_code=status.HTTP_201_CREATED, summary="감독 등록")
def create_director(
    director: DirectorCreate,
    reference_service: ReferenceService = Depends(get_reference_service),
):
    try:
        return reference_service.save_director(director)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.put("/", response_model=Director, summary="감독 수정")
def update_director(
    director: DirectorUpdate,
    reference_service: ReferenceService = Depends(get_reference_service),
):
    try:
        return reference_service.update_director(director)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.delete("/{director_id}", status_code=status.HTTP_204_NO_CONTENT, summary="감독 삭제")
def delete_director(
    director_id: int = Path(description="감독 ID"),
    reference_service: ReferenceService = Depends(get_reference_service),
):
    try:
        reference_service.remove_director(director_id)
    except FilmorateError as e:
        raise to_http_exception(e)
