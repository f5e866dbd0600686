# app/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.config import get_settings
from app.core.exceptions import FilmorateError, ValidationError, DataNotFound
from app.api.v1 import api_router
from app.database import engine, Base, SessionLocal
from app.services.genre_service import GenreService
from app import models  # noqa: F401  테이블 메타데이터 등록

# 설정 로드
settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 시작 시: 테이블 생성 + 장르/MPA 기본값
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        GenreService(db).seed_defaults()
    finally:
        db.close()
    logger.info("%s 시작됨", settings.app_name)

    yield

    # 종료 시
    engine.dispose()
    logger.info("%s 종료됨", settings.app_name)


# FastAPI 앱 생성
app = FastAPI(
    title=settings.app_name,
    description="Social Film Catalog Service",
    version="1.0.0",
    debug=settings.debug,
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# CORS 미들웨어
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, exc: FilmorateError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"error": exc.kind, "detail": exc.message}
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.info("잘못된 요청 %s %s: %s", request.method, request.url.path, exc.message)
    return _error_response(400, exc)


@app.exception_handler(DataNotFound)
async def not_found_handler(request: Request, exc: DataNotFound):
    logger.info("데이터 없음 %s %s: %s", request.method, request.url.path, exc.message)
    return _error_response(404, exc)


# API v1 라우터 등록
app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/")
def read_root():
    """서비스 루트"""
    return {
        "service": settings.app_name,
        "description": "Social Film Catalog Service",
        "version": "1.0.0",
        "docs": "/docs",
    }
