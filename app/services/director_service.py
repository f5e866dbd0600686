# app/services/director_service.py

import logging
from typing import Iterable, List
from sqlalchemy.orm import Session
from sqlalchemy import select, func, delete
from app.core.exceptions import DataNotFound
from app.models.director import DirectorModel
from app.models.film_director import FilmDirectorModel
from app.schemas.director import Director, DirectorCreate, DirectorUpdate

logger = logging.getLogger(__name__)


class DirectorService:

    def __init__(self, db: Session):
        self.db = db

    def get_all_directors(self) -> List[Director]:
        stmt = select(DirectorModel).order_by(DirectorModel.director_id)
        return [Director.from_orm(d) for d in self.db.execute(stmt).scalars().all()]

    def get_director_by_id(self, director_id: int) -> Director:
        return Director.from_orm(self._get_director_model(director_id))

    def create_director(self, director_data: DirectorCreate) -> Director:
        director_model = DirectorModel(name=director_data.name)
        try:
            self.db.add(director_model)
            self.db.commit()
            self.db.refresh(director_model)
        except Exception:
            self.db.rollback()
            raise
        logger.info("감독 생성: %s", director_model)
        return Director.from_orm(director_model)

    def update_director(self, director_id: int, director_data: DirectorUpdate) -> Director:
        director_model = self._get_director_model(director_id)
        try:
            director_model.name = director_data.name
            self.db.commit()
            self.db.refresh(director_model)
        except Exception:
            self.db.rollback()
            raise
        logger.info("감독 수정: %s", director_model)
        return Director.from_orm(director_model)

    def delete_director(self, director_id: int) -> None:
        """감독 삭제 (영화와의 연결도 함께 제거)"""
        director_model = self._get_director_model(director_id)
        try:
            self.db.execute(
                delete(FilmDirectorModel).where(FilmDirectorModel.director_id == director_id)
            )
            self.db.delete(director_model)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info("감독 삭제: %s", director_id)

    def director_exists(self, director_id: int) -> bool:
        return self.db.get(DirectorModel, director_id) is not None

    def directors_exist(self, director_ids: Iterable[int]) -> bool:
        ids = set(director_ids)
        if not ids:
            return True
        stmt = select(func.count(DirectorModel.director_id)).where(
            DirectorModel.director_id.in_(ids)
        )
        return self.db.execute(stmt).scalar() == len(ids)

    def _get_director_model(self, director_id: int) -> DirectorModel:
        director_model = self.db.get(DirectorModel, director_id)
        if not director_model:
            raise DataNotFound(f"감독을 찾을 수 없습니다 (ID: {director_id})")
        return director_model
