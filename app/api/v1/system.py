# app/api/v1/system.py

from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.database import get_db

router = APIRouter()


@router.get("/health")
def health_check():
    """서비스 헬스체크"""
    return {"status": "healthy", "service": "filmorate"}


@router.get("/db-test")
def test_db(db: Session = Depends(get_db)):
    """데이터베이스 연결 테스트"""
    try:
        result = db.execute(text("SELECT 1"))
        return {"status": "DB 연결 성공!", "result": result.scalar()}
    except SQLAlchemyError as e:
        raise HTTPException(status_code=500, detail=f"DB 연결 실패: {str(e)}")
