# app/api/v1/directors.py

from typing import List
from fastapi import APIRouter, Depends, Path, status
from app.schemas.director import Director, DirectorCreate, DirectorUpdate
from app.services.director_service import DirectorService
from app.core.dependencies import get_director_service

router = APIRouter()


@router.get("", response_model=List[Director], summary="감독 목록")
def get_all_directors(director_service: DirectorService = Depends(get_director_service)):
    return director_service.get_all_directors()


@router.get("/{director_id}", response_model=Director, summary="감독 조회")
def get_director(
    director_id: int = Path(description="감독 ID"),
    director_service: DirectorService = Depends(get_director_service),
):
    return director_service.get_director_by_id(director_id)


@router.post(
    "", response_model=Director, status_code=status.HTTP_201_CREATED, summary="감독 등록"
)
def create_director(
    director_data: DirectorCreate,
    director_service: DirectorService = Depends(get_director_service),
):
    return director_service.create_director(director_data)


@router.put("/{director_id}", response_model=Director, summary="감독 수정")
def update_director(
    director_data: DirectorUpdate,
    director_id: int = Path(description="감독 ID"),
    director_service: DirectorService = Depends(get_director_service),
):
    return director_service.update_director(director_id, director_data)


@router.delete(
    "/{director_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="감독 삭제",
    description="감독을 삭제합니다. 영화와의 연결도 함께 제거됩니다.",
)
def delete_director(
    director_id: int = Path(description="감독 ID"),
    director_service: DirectorService = Depends(get_director_service),
):
    director_service.delete_director(director_id)
