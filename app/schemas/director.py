# app/schemas/director.py

from pydantic import BaseModel, Field, field_validator


class Director(BaseModel):
    director_id: int = Field(description="감독 ID")
    name: str = Field(description="감독 이름")

    class Config:
        from_attributes = True


class DirectorCreate(BaseModel):
    name: str = Field(description="감독 이름", max_length=255)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("감독 이름은 비어 있을 수 없습니다")
        return value.strip()


class DirectorUpdate(DirectorCreate):
    """감독 정보 수정 요청"""
