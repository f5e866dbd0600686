# app/api/v1/mpa.py

from fastapi import APIRouter, Depends, Path
from app.schemas.genre import Mpa, MpaListResponse
from app.services.genre_service import GenreService
from app.core.dependencies import get_genre_service

router = APIRouter()


@router.get("", response_model=MpaListResponse, summary="MPA 등급 목록")
def get_all_mpa(genre_service: GenreService = Depends(get_genre_service)):
    return genre_service.get_all_mpa()


@router.get("/{mpa_id}", response_model=Mpa, summary="MPA 등급 조회")
def get_mpa(
    mpa_id: int = Path(description="MPA 등급 ID"),
    genre_service: GenreService = Depends(get_genre_service),
):
    return genre_service.get_mpa_by_id(mpa_id)
