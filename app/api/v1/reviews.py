# app/api/v1/reviews.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Path, Query, status
from app.api.v1.errors import to_http_exception
from app.core.config import get_settings
from app.core.exceptions import FilmorateError
from app.schemas.review import Review, ReviewCreate, ReviewUpdate
from app.services.review_service import ReviewService

router = APIRouter()


def get_review_service() -> ReviewService:
    return ReviewService()


@router.get(
    "/",
    response_model=List[Review],
    summary="리뷰 목록",
    description="유용도 순으로 리뷰를 조회합니다. film_id 가 없으면 전체 리뷰를 조회합니다.",
)
def get_reviews(
    film_id: Optional[int] = Query(default=None, description="영화 ID"),
    count: Optional[int] = Query(default=None, ge=1, description="조회할 리뷰 수"),
    review_service: ReviewService = Depends(get_review_service),
):
    if count is None:
        count = get_settings().reviews_default_count
    try:
        return review_service.get_reviews(film_id, count)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.get("/{review_id}", response_model=Review, summary="리뷰 조회")
def get_review(
    review_id: int = Path(description="리뷰 ID"),
    review_service: ReviewService = Depends(get_review_service),
):
    try:
        return review_service.get_by_id(review_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.post("/", response_model=Review, status_code=status.HTTP_201_CREATED, summary="리뷰 작성")
def create_review(review: ReviewCreate, review_service: ReviewService = Depends(get_review_service)):
    try:
        return review_service.save(review)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.put(
    "/",
    response_model=Review,
    summary="리뷰 수정",
    description="내용과 긍정 여부만 수정되며 기존 좋아요/싫어요는 초기화됩니다.",
)
def update_review(review: ReviewUpdate, review_service: ReviewService = Depends(get_review_service)):
    try:
        return review_service.update(review)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT, summary="리뷰 삭제")
def delete_review(
    review_id: int = Path(description="리뷰 ID"),
    review_service: ReviewService = Depends(get_review_service),
):
    try:
        review_service.remove_by_id(review_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.put("/{review_id}/like/{user_id}", response_model=Review, summary="리뷰 좋아요")
def like_review(
    review_id: int = Path(description="리뷰 ID"),
    user_id: int = Path(description="사용자 ID"),
    review_service: ReviewService = Depends(get_review_service),
):
    try:
        return review_service.add_like(review_id, user_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.put("/{review_id}/dislike/{user_id}", response_model=Review, summary="리뷰 싫어요")
def dislike_review(
    review_id: int = Path(description="리뷰 ID"),
    user_id: int = Path(description="사용자 ID"),
    review_service: ReviewService = Depends(get_review_service),
):
    try:
        return review_service.add_dislike(review_id, user_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.delete("/{review_id}/like/{user_id}", response_model=Review, summary="리뷰 좋아요 취소")
def remove_review_like(
    review_id: int = Path(description="리뷰 ID"),
    user_id: int = Path(description="사용자 ID"),
    review_service: ReviewService = Depends(get_review_service),
):
    try:
        return review_service.remove_like(review_id, user_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.delete("/{review_id}/dislike/{user_id}", response_model=Review, summary="리뷰 싫어요 취소")
def remove_review_dislike(
    review_id: int = Path(description="리뷰 ID"),
    user_id: int = Path(description="사용자 ID"),
    review_service: ReviewService = Depends(get_review_service),
):
    try:
        return review_service.remove_dislike(review_id, user_id)
    except FilmorateError as e:
        raise to_http_exception(e)
