# app/services/genre_service.py

import logging
from typing import Iterable
from sqlalchemy.orm import Session
from sqlalchemy import select, func
from app.core.exceptions import DataNotFound
from app.models.genre import GenreModel
from app.models.mpa import MpaModel
from app.schemas.genre import Genre, Mpa, GenreListResponse, MpaListResponse

logger = logging.getLogger(__name__)

DEFAULT_GENRES = ["Comedy", "Drama", "Cartoon", "Thriller", "Documentary", "Action"]
DEFAULT_MPA_RATINGS = ["G", "PG", "PG-13", "R", "NC-17"]


class GenreService:
    """장르와 MPA 등급 조회 (읽기 전용 룩업)"""

    def __init__(self, db: Session):
        self.db = db

    def get_all_genres(self) -> GenreListResponse:
        stmt = select(GenreModel).order_by(GenreModel.genre_id)
        genres = self.db.execute(stmt).scalars().all()
        return GenreListResponse(genres=[Genre.from_orm(genre) for genre in genres])

    def get_genre_by_id(self, genre_id: int) -> Genre:
        genre_model = self.db.get(GenreModel, genre_id)
        if not genre_model:
            raise DataNotFound(f"장르를 찾을 수 없습니다 (ID: {genre_id})")
        return Genre.from_orm(genre_model)

    def get_all_mpa(self) -> MpaListResponse:
        stmt = select(MpaModel).order_by(MpaModel.mpa_id)
        ratings = self.db.execute(stmt).scalars().all()
        return MpaListResponse(ratings=[Mpa.from_orm(mpa) for mpa in ratings])

    def get_mpa_by_id(self, mpa_id: int) -> Mpa:
        mpa_model = self.db.get(MpaModel, mpa_id)
        if not mpa_model:
            raise DataNotFound(f"MPA 등급을 찾을 수 없습니다 (ID: {mpa_id})")
        return Mpa.from_orm(mpa_model)

    def genres_exist(self, genre_ids: Iterable[int]) -> bool:
        """모든 장르 ID가 존재하는지 확인"""
        ids = set(genre_ids)
        if not ids:
            return True
        stmt = select(func.count(GenreModel.genre_id)).where(GenreModel.genre_id.in_(ids))
        return self.db.execute(stmt).scalar() == len(ids)

    def mpa_exists(self, mpa_id: int) -> bool:
        return self.db.get(MpaModel, mpa_id) is not None

    def seed_defaults(self) -> None:
        """장르/MPA 테이블이 비어 있으면 기본값 채우기"""
        if not self.db.execute(select(func.count(GenreModel.genre_id))).scalar():
            self.db.add_all(
                [GenreModel(genre_id=i, name=name) for i, name in enumerate(DEFAULT_GENRES, 1)]
            )
            logger.info("기본 장르 %d개 생성", len(DEFAULT_GENRES))
        if not self.db.execute(select(func.count(MpaModel.mpa_id))).scalar():
            self.db.add_all(
                [MpaModel(mpa_id=i, name=name) for i, name in enumerate(DEFAULT_MPA_RATINGS, 1)]
            )
            logger.info("기본 MPA 등급 %d개 생성", len(DEFAULT_MPA_RATINGS))
        self.db.commit()

