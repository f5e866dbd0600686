# app/schemas/genre.py

from typing import List
from pydantic import BaseModel, Field

class Genre(BaseModel):
    genre_id: int = Field(description="장르 ID")
    name: str = Field(description="장르 이름")
    
    class Config:
        from_attributes = True

class Mpa(BaseModel):
    mpa_id: int = Field(description="MPA 등급 ID")
    name: str = Field(description="MPA 등급 이름")

    class Config:
        from_attributes = True

class GenreListResponse(BaseModel):
    genres: List[Genre] = Field(description="장르 목록")

class MpaListResponse(BaseModel):
    ratings: List[Mpa] = Field(description="MPA 등급 목록")
