# app/api/v1/users.py

from typing import List
from fastapi import APIRouter, Depends, Path, status
from app.schemas.user import User, UserCreate, UserUpdate
from app.schemas.film import Film
from app.schemas.feed import FeedEvent
from app.services.user_service import UserService
from app.services.film_service import FilmService
from app.core.dependencies import get_user_service, get_film_service

router = APIRouter()


@router.get("", response_model=List[User], summary="사용자 목록")
def get_all_users(user_service: UserService = Depends(get_user_service)):
    return user_service.get_all_users()


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="사용자 등록",
    description="사용자를 등록합니다. 이름이 비어 있으면 로그인을 이름으로 사용합니다.",
)
def create_user(user_data: UserCreate, user_service: UserService = Depends(get_user_service)):
    return user_service.create_user(user_data)


@router.get("/{user_id}", response_model=User, summary="사용자 조회")
def get_user(
    user_id: int = Path(description="사용자 ID"),
    user_service: UserService = Depends(get_user_service),
):
    return user_service.get_user_by_id(user_id)


@router.put("/{user_id}", response_model=User, summary="사용자 수정")
def update_user(
    user_data: UserUpdate,
    user_id: int = Path(description="사용자 ID"),
    user_service: UserService = Depends(get_user_service),
):
    return user_service.update_user(user_id, user_data)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="사용자 삭제")
def delete_user(
    user_id: int = Path(description="사용자 ID"),
    user_service: UserService = Depends(get_user_service),
):
    user_service.delete_user(user_id)


@router.put(
    "/{user_id}/friends/{friend_id}",
    summary="친구 추가",
    description="친구를 추가합니다. 관계는 단방향이며, 이미 친구여도 에러가 아닙니다.",
)
def add_friend(
    user_id: int = Path(description="사용자 ID"),
    friend_id: int = Path(description="친구로 추가할 사용자 ID"),
    user_service: UserService = Depends(get_user_service),
):
    added = user_service.add_friend(user_id, friend_id)
    return {"message": "친구가 추가되었습니다", "added": added}


@router.delete(
    "/{user_id}/friends/{friend_id}",
    summary="친구 삭제",
    description="친구를 삭제합니다. 친구 관계가 없어도 에러가 아닙니다.",
)
def remove_friend(
    user_id: int = Path(description="사용자 ID"),
    friend_id: int = Path(description="삭제할 친구 ID"),
    user_service: UserService = Depends(get_user_service),
):
    removed = user_service.remove_friend(user_id, friend_id)
    return {"message": "친구가 삭제되었습니다", "removed": removed}


@router.get("/{user_id}/friends", response_model=List[User], summary="친구 목록")
def get_friends(
    user_id: int = Path(description="사용자 ID"),
    user_service: UserService = Depends(get_user_service),
):
    return user_service.get_friends(user_id)


@router.get(
    "/{user_id}/friends/common/{other_id}",
    response_model=List[User],
    summary="공통 친구",
)
def get_common_friends(
    user_id: int = Path(description="사용자 ID"),
    other_id: int = Path(description="비교할 사용자 ID"),
    user_service: UserService = Depends(get_user_service),
):
    return user_service.get_common_friends(user_id, other_id)


@router.get(
    "/{user_id}/feed",
    response_model=List[FeedEvent],
    summary="사용자 피드",
    description="사용자의 좋아요/친구 활동 기록을 오래된 순으로 조회합니다.",
)
def get_feed(
    user_id: int = Path(description="사용자 ID"),
    user_service: UserService = Depends(get_user_service),
):
    return user_service.get_feed(user_id)


@router.get(
    "/{user_id}/recommendations",
    response_model=List[Film],
    summary="영화 추천",
    description="좋아요가 가장 많이 겹치는 사용자가 좋아한 영화 중 아직 좋아요하지 않은 영화를 추천합니다.",
)
def get_recommendations(
    user_id: int = Path(description="사용자 ID"),
    film_service: FilmService = Depends(get_film_service),
):
    return film_service.get_recommendations(user_id)
