# app/schemas/film.py

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator
from datetime import date
from app.schemas.genre import Genre, Mpa
from app.schemas.director import Director

# 최초의 영화 상영일 (뤼미에르 형제)
CINEMA_BIRTHDAY = date(1895, 12, 28)


class DirectorSortKey(str, Enum):
    year = "year"
    likes = "likes"


class SearchField(str, Enum):
    title = "title"
    director = "director"


class Film(BaseModel):
    film_id: int = Field(description="영화 ID")
    name: str = Field(description="영화 제목")
    description: Optional[str] = Field(default=None, description="설명")
    release_date: date = Field(description="개봉일")
    duration: int = Field(description="상영시간(분)")
    mpa: Optional[Mpa] = Field(default=None, description="MPA 등급")
    genres: List[Genre] = Field(default_factory=list, description="장르 목록")
    directors: List[Director] = Field(default_factory=list, description="감독 목록")
    likes_count: int = Field(default=0, description="좋아요 수")

    class Config:
        from_attributes = True


class FilmCreate(BaseModel):
    name: str = Field(description="영화 제목", max_length=255)
    description: Optional[str] = Field(default=None, description="설명", max_length=200)
    release_date: date = Field(description="개봉일")
    duration: int = Field(description="상영시간(분)", gt=0)
    mpa_id: Optional[int] = Field(default=None, description="MPA 등급 ID")
    genre_ids: List[int] = Field(default_factory=list, description="장르 ID 목록")
    director_ids: List[int] = Field(default_factory=list, description="감독 ID 목록")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("영화 제목은 비어 있을 수 없습니다")
        return value

    @field_validator("release_date")
    @classmethod
    def released_after_cinema_birthday(cls, value: date) -> date:
        if value <= CINEMA_BIRTHDAY:
            raise ValueError(f"개봉일은 {CINEMA_BIRTHDAY.isoformat()} 이후여야 합니다")
        return value

    @field_validator("genre_ids", "director_ids")
    @classmethod
    def unique_ids(cls, value: List[int]) -> List[int]:
        # 순서는 의미 없음, 중복만 제거
        return sorted(set(value))


class FilmUpdate(FilmCreate):
    """영화 정보 수정 요청 (전체 교체)"""


class FilmLike(BaseModel):
    film_id: int = Field(description="영화 ID")
    user_id: int = Field(description="사용자 ID")
    liked: bool = Field(description="요청 처리 후 좋아요 상태")
