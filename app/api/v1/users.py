# app/api/v1/users.py

from typing import List
from fastapi import APIRouter, Depends, Path, status
from app.api.v1.errors import to_http_exception
from app.core.exceptions import FilmorateError
from app.schemas.film import Film
from app.schemas.user import User, UserCreate, UserUpdate
from app.services.user_service import UserService
from app.services.recommendation_service import RecommendationService

router = APIRouter()


def get_user_service() -> UserService:
    return UserService()


def get_recommendation_service() -> RecommendationService:
    return RecommendationService()


@router.get("/", response_model=List[User], summary="전체 사용자 조회")
def get_all_users(user_service: UserService = Depends(get_user_service)):
    try:
        return user_service.get_all()
    except FilmorateError as e:
        raise to_http_exception(e)


@router.post(
    "/",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="사용자 등록",
    description="이름이 비어 있으면 로그인이 이름으로 사용됩니다.",
)
def create_user(user: UserCreate, user_service: UserService = Depends(get_user_service)):
    try:
        return user_service.save(user)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.put("/", response_model=User, summary="사용자 수정")
def update_user(user: UserUpdate, user_service: UserService = Depends(get_user_service)):
    try:
        return user_service.update(user)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.get("/{user_id}", response_model=User, summary="사용자 상세 정보")
def get_user(
    user_id: int = Path(description="사용자 ID"),
    user_service: UserService = Depends(get_user_service),
):
    try:
        return user_service.get_by_id(user_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="사용자 삭제",
    description="사용자의 친구 관계와 좋아요도 함께 삭제됩니다.",
)
def delete_user(
    user_id: int = Path(description="사용자 ID"),
    user_service: UserService = Depends(get_user_service),
):
    try:
        user_service.remove_by_id(user_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.put(
    "/{user_id}/friends/{friend_id}",
    response_model=User,
    summary="친구 추가",
    description="user_id 가 friend_id 를 친구로 추가합니다. 반대 방향 관계는 생기지 않습니다.",
)
def add_friend(
    user_id: int = Path(description="사용자 ID"),
    friend_id: int = Path(description="추가할 친구 ID"),
    user_service: UserService = Depends(get_user_service),
):
    try:
        return user_service.add_friend(user_id, friend_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.delete("/{user_id}/friends/{friend_id}", response_model=User, summary="친구 삭제")
def remove_friend(
    user_id: int = Path(description="사용자 ID"),
    friend_id: int = Path(description="삭제할 친구 ID"),
    user_service: UserService = Depends(get_user_service),
):
    try:
        return user_service.remove_friend(user_id, friend_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.get("/{user_id}/friends", response_model=List[User], summary="친구 목록")
def get_friends(
    user_id: int = Path(description="사용자 ID"),
    user_service: UserService = Depends(get_user_service),
):
    try:
        return user_service.get_friends(user_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.get(
    "/{user_id}/friends/common/{other_id}",
    response_model=List[User],
    summary="공통 친구 목록",
)
def get_mutual_friends(
    user_id: int = Path(description="사용자 ID"),
    other_id: int = Path(description="비교할 사용자 ID"),
    user_service: UserService = Depends(get_user_service),
):
    try:
        return user_service.get_mutual_friends(user_id, other_id)
    except FilmorateError as e:
        raise to_http_exception(e)


@router.get(
    "/{user_id}/recommendations",
    response_model=List[Film],
    summary="영화 추천",
    description="좋아요가 가장 많이 겹치는 사용자가 좋아요한 영화 중 아직 좋아요하지 않은 영화를 추천합니다.",
)
def get_recommendations(
    user_id: int = Path(description="사용자 ID"),
    recommendation_service: RecommendationService = Depends(get_recommendation_service),
):
    try:
        return recommendation_service.get_recommendations(user_id)
    except FilmorateError as e:
        raise to_http_exception(e)
