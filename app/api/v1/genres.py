# app/api/v1/genres.py

from fastapi import APIRouter, Depends, Path
from app.schemas.genre import Genre, GenreListResponse
from app.services.genre_service import GenreService
from app.core.dependencies import get_genre_service

router = APIRouter()


@router.get(
    "",
    response_model=GenreListResponse,
    summary="장르 목록",
    description="모든 장르를 ID 순으로 조회합니다.",
)
def get_all_genres(genre_service: GenreService = Depends(get_genre_service)):
    return genre_service.get_all_genres()


@router.get("/{genre_id}", response_model=Genre, summary="장르 조회")
def get_genre(
    genre_id: int = Path(description="장르 ID"),
    genre_service: GenreService = Depends(get_genre_service),
):
    return genre_service.get_genre_by_id(genre_id)
