# app/api/v1/films.py

from typing import List, Optional
from fastapi import APIRouter, Query, Path, Depends, status
from app.schemas.film import Film, FilmCreate, FilmUpdate, FilmLike
from app.services.film_service import FilmService, parse_search_fields
from app.core.config import get_settings
from app.core.dependencies import get_film_service

router = APIRouter()


@router.get(
    "/popular",
    response_model=List[Film],
    summary="인기 영화",
    description="좋아요 수가 많은 순으로 영화를 조회합니다. 장르와 개봉 연도로 거를 수 있습니다.",
)
def get_popular_films(
    count: Optional[int] = Query(default=None, ge=1, description="가져올 영화 수"),
    genre_id: Optional[int] = Query(default=None, description="장르 ID 필터"),
    year: Optional[int] = Query(default=None, ge=1, le=9999, description="개봉 연도 필터"),
    film_service: FilmService = Depends(get_film_service),
):
    if count is None:
        count = get_settings().popular_default_count
    return film_service.get_most_popular(count, genre_id, year)


@router.get(
    "/common",
    response_model=List[Film],
    summary="공통 좋아요 영화",
    description="두 사용자가 모두 좋아요한 영화를 인기순으로 조회합니다.",
)
def get_common_films(
    user_id: int = Query(description="사용자 ID"),
    friend_id: int = Query(description="비교할 사용자 ID"),
    film_service: FilmService = Depends(get_film_service),
):
    return film_service.get_common_films(user_id, friend_id)


@router.get(
    "/search",
    response_model=List[Film],
    summary="영화 검색",
    description="제목 또는 감독 이름에 검색어가 포함된 영화를 인기순으로 조회합니다. by: title, director, title,director",
)
def search_films(
    query: str = Query(description="검색어", min_length=1),
    by: Optional[str] = Query(default=None, description="검색 대상 (title, director 쉼표로 구분)"),
    film_service: FilmService = Depends(get_film_service),
):
    fields = parse_search_fields(by)
    return film_service.search(query, fields)


@router.get(
    "/director/{director_id}",
    response_model=List[Film],
    summary="감독별 영화",
    description="감독의 영화를 개봉일순(year) 또는 좋아요순(likes)으로 조회합니다.",
)
def get_films_by_director(
    director_id: int = Path(description="감독 ID"),
    sort_by: str = Query(default="year", description="정렬 기준 (year, likes)"),
    film_service: FilmService = Depends(get_film_service),
):
    return film_service.get_films_by_director(director_id, sort_by)


@router.get(
    "",
    response_model=List[Film],
    summary="영화 목록",
    description="저장된 모든 영화를 ID 순으로 조회합니다.",
)
def get_all_films(film_service: FilmService = Depends(get_film_service)):
    return film_service.get_all_films()


@router.post(
    "",
    response_model=Film,
    status_code=status.HTTP_201_CREATED,
    summary="영화 등록",
    description="영화를 등록합니다. MPA 등급, 장르, 감독은 존재하는 ID여야 합니다.",
)
def create_film(film_data: FilmCreate, film_service: FilmService = Depends(get_film_service)):
    return film_service.create_film(film_data)


@router.get("/{film_id}", response_model=Film, summary="영화 상세 정보")
def get_film(
    film_id: int = Path(description="영화 ID"),
    film_service: FilmService = Depends(get_film_service),
):
    return film_service.get_film_by_id(film_id)


@router.put("/{film_id}", response_model=Film, summary="영화 수정")
def update_film(
    film_data: FilmUpdate,
    film_id: int = Path(description="영화 ID"),
    film_service: FilmService = Depends(get_film_service),
):
    return film_service.update_film(film_id, film_data)


@router.delete("/{film_id}", status_code=status.HTTP_204_NO_CONTENT, summary="영화 삭제")
def delete_film(
    film_id: int = Path(description="영화 ID"),
    film_service: FilmService = Depends(get_film_service),
):
    film_service.delete_film(film_id)


@router.put(
    "/{film_id}/like/{user_id}",
    response_model=FilmLike,
    summary="영화 좋아요",
    description="영화에 좋아요를 추가합니다. 이미 좋아요한 영화여도 에러가 아닙니다.",
)
def like_film(
    film_id: int = Path(description="영화 ID"),
    user_id: int = Path(description="사용자 ID"),
    film_service: FilmService = Depends(get_film_service),
):
    film_service.add_like(film_id, user_id)
    return FilmLike(film_id=film_id, user_id=user_id, liked=True)


@router.delete(
    "/{film_id}/like/{user_id}",
    response_model=FilmLike,
    summary="영화 좋아요 취소",
    description="영화의 좋아요를 취소합니다. 좋아요 기록이 없어도 에러가 아닙니다.",
)
def unlike_film(
    film_id: int = Path(description="영화 ID"),
    user_id: int = Path(description="사용자 ID"),
    film_service: FilmService = Depends(get_film_service),
):
    film_service.remove_like(film_id, user_id)
    return FilmLike(film_id=film_id, user_id=user_id, liked=False)
