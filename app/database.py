# app/database.py

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from dotenv import load_dotenv
from app.core.config import get_settings

# .env 파일 로드
load_dotenv()

settings = get_settings()


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def register_sqlite_functions(target_engine):
    """sqlite 내장 lower()는 ASCII만 변환하므로 파이썬 str.lower()로 교체"""

    @event.listens_for(target_engine, "connect")
    def _on_connect(dbapi_conn, connection_record):
        dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)

    return target_engine


# sqlite는 스레드 간 연결 공유를 허용해야 FastAPI 스레드풀에서 사용 가능
connect_args = (
    {"check_same_thread": False, "timeout": settings.db_timeout}
    if settings.is_sqlite
    else {"connect_timeout": int(settings.db_timeout)}
)

# 엔진 생성
engine = create_engine(
    settings.database_url,
    echo=settings.sql_echo,  # SQL 로그 출력
    pool_pre_ping=True,  # 연결 상태 확인
    pool_recycle=300,  # 5분마다 연결 재사용
    connect_args=connect_args,
)

if settings.is_sqlite:
    register_sqlite_functions(engine)

# 세션 팩토리 생성
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Base 클래스 생성
Base = declarative_base()


# 의존성 주입용 함수
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
