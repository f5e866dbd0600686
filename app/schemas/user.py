# app/schemas/user.py

from typing import Optional
from pydantic import BaseModel, Field, EmailStr, field_validator, model_validator
from datetime import date


class User(BaseModel):
    user_id: int = Field(description="사용자 ID")
    email: str = Field(description="이메일")
    login: str = Field(description="로그인")
    name: str = Field(description="사용자 이름")
    birthday: Optional[date] = Field(default=None, description="생일")

    class Config:
        from_attributes = True


class UserCreate(BaseModel):
    email: EmailStr = Field(description="이메일")
    login: str = Field(description="로그인", min_length=1, max_length=100)
    name: Optional[str] = Field(default=None, description="사용자 이름 (비어 있으면 로그인 사용)", max_length=100)
    birthday: Optional[date] = Field(default=None, description="생일")

    @field_validator("login")
    @classmethod
    def login_without_spaces(cls, value: str) -> str:
        if not value.strip() or any(ch.isspace() for ch in value):
            raise ValueError("로그인은 공백을 포함할 수 없습니다")
        return value

    @field_validator("birthday")
    @classmethod
    def birthday_not_in_future(cls, value: Optional[date]) -> Optional[date]:
        if value and value > date.today():
            raise ValueError("생일은 미래일 수 없습니다")
        return value

    @model_validator(mode="after")
    def default_name_to_login(self):
        if not self.name or not self.name.strip():
            self.name = self.login
        return self


class UserUpdate(UserCreate):
    """사용자 정보 수정 요청 (전체 교체)"""
