# app/core/config.py

from functools import lru_cache
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """설정 클래스"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # 애플리케이션 설정
    app_name: str = Field(default="Filmorate", description="애플리케이션 이름")
    debug: bool = Field(default=False, description="디버그 모드")
    api_prefix: str = Field(default="/api/v1", description="API 라우터 prefix")
    log_level: str = Field(default="INFO", description="로그 레벨")
    allowed_origins: List[str] = Field(
        default=["http://localhost:5173"], description="CORS 허용 origin 목록"
    )

    # 데이터베이스 설정
    database_url: str = Field(default="sqlite:///./filmorate.db", description="DB 접속 URL")
    sql_echo: bool = Field(default=False, description="SQL 로그 출력")
    db_timeout: float = Field(default=10.0, description="DB 잠금/연결 대기 시간(초)")

    # 영화 조회 설정
    popular_default_count: int = Field(default=10, ge=1, description="인기 영화 기본 개수")

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
