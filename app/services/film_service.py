# app/services/film_service.py

import logging
from collections import defaultdict
from datetime import date
from typing import Iterable, List, Optional, Set, Union
from sqlalchemy.orm import Session
from sqlalchemy import String, select, func, delete, or_
from sqlalchemy.exc import IntegrityError
from app.core.exceptions import DataNotFound, ValidationError
from app.models.film import FilmModel
from app.models.film_like import FilmLikeModel
from app.models.film_genre import FilmGenreModel
from app.models.film_director import FilmDirectorModel
from app.models.genre import GenreModel
from app.models.mpa import MpaModel
from app.models.director import DirectorModel
from app.models.user import UserModel
from app.models.feed_event import EventType, OperationType
from app.schemas.film import Film, FilmCreate, FilmUpdate, DirectorSortKey, SearchField
from app.schemas.genre import Genre, Mpa
from app.schemas.director import Director
from app.services.feed_service import FeedService
from app.services.genre_service import GenreService
from app.services.director_service import DirectorService

logger = logging.getLogger(__name__)


def _lower(column):
    return func.lower(column, type_=String)


def parse_search_fields(by: Union[str, Iterable[str], None]) -> Set[SearchField]:
    """검색 대상 파라미터("title", "director", "title,director") 해석"""
    if by is None:
        raise ValidationError("검색 대상(by)이 지정되지 않았습니다")
    raw = by.split(",") if isinstance(by, str) else list(by)
    parts = [str(getattr(part, "value", part)).strip().lower() for part in raw]
    if not parts or any(not part for part in parts):
        raise ValidationError(f"검색 대상(by)이 비어 있습니다: '{by}'")
    try:
        return {SearchField(part) for part in parts}
    except ValueError:
        raise ValidationError(
            f"검색 대상(by)은 'title', 'director' 중에서 선택해야 합니다: '{by}'"
        )


class FilmService:
    """영화 CRUD, 좋아요 인덱스, 인기/검색/감독별 조회"""

    def __init__(self, db: Session, feed_service: Optional[FeedService] = None):
        self.db = db
        self.feed_service = feed_service or FeedService(db)
        self.genre_service = GenreService(db)
        self.director_service = DirectorService(db)

    # ------------------------------------------------------------------
    # 영화 CRUD
    # ------------------------------------------------------------------

    def get_all_films(self) -> List[Film]:
        return self._build_films(self._film_rows(order_by=(FilmModel.film_id,)))

    def get_film_by_id(self, film_id: int) -> Film:
        films = self._build_films(self._film_rows(FilmModel.film_id == film_id))
        if not films:
            raise DataNotFound(f"영화를 찾을 수 없습니다 (ID: {film_id})")
        return films[0]

    def create_film(self, film_data: FilmCreate) -> Film:
        self._check_references(film_data)

        film_model = FilmModel(
            name=film_data.name,
            description=film_data.description,
            release_date=film_data.release_date,
            duration=film_data.duration,
            mpa_id=film_data.mpa_id,
        )
        try:
            self.db.add(film_model)
            self.db.flush()
            self._save_links(film_model.film_id, film_data)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info("영화 생성: %s", film_model)
        return self.get_film_by_id(film_model.film_id)

    def update_film(self, film_id: int, film_data: FilmUpdate) -> Film:
        film_model = self._get_film_model(film_id)
        self._check_references(film_data)

        try:
            film_model.name = film_data.name
            film_model.description = film_data.description
            film_model.release_date = film_data.release_date
            film_model.duration = film_data.duration
            film_model.mpa_id = film_data.mpa_id
            self._save_links(film_id, film_data)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info("영화 수정: %s", film_model)
        return self.get_film_by_id(film_id)

    def delete_film(self, film_id: int) -> None:
        """영화 삭제 (좋아요, 장르/감독 연결 포함)"""
        film_model = self._get_film_model(film_id)
        try:
            self.db.execute(delete(FilmLikeModel).where(FilmLikeModel.film_id == film_id))
            self.db.execute(delete(FilmGenreModel).where(FilmGenreModel.film_id == film_id))
            self.db.execute(delete(FilmDirectorModel).where(FilmDirectorModel.film_id == film_id))
            self.db.delete(film_model)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info("영화 삭제: %s", film_id)

    def film_exists(self, film_id: int) -> bool:
        return self.db.get(FilmModel, film_id) is not None

    def user_exists(self, user_id: int) -> bool:
        return self.db.get(UserModel, user_id) is not None

    # ------------------------------------------------------------------
    # 좋아요
    # ------------------------------------------------------------------

    def add_like(self, film_id: int, user_id: int) -> bool:
        """영화 좋아요. 이미 좋아요한 경우 아무것도 바꾸지 않음

        새로 추가되었으면 True를 반환한다.
        """
        self._ensure_film_and_user(film_id, user_id)

        added = False
        if not self._is_liked(film_id, user_id):
            try:
                self.db.add(FilmLikeModel(film_id=film_id, user_id=user_id))
                self.db.commit()
                added = True
            except IntegrityError:
                # 동시에 들어온 같은 요청이 먼저 저장됨
                self.db.rollback()
            except Exception:
                self.db.rollback()
                raise

        self.feed_service.record_event(user_id, film_id, EventType.LIKE, OperationType.ADD)
        logger.debug("사용자 %s 영화 %s 좋아요 (신규: %s)", user_id, film_id, added)
        return added

    def remove_like(self, film_id: int, user_id: int) -> bool:
        """영화 좋아요 취소. 좋아요 기록이 없으면 아무것도 바꾸지 않음"""
        self._ensure_film_and_user(film_id, user_id)

        try:
            result = self.db.execute(
                delete(FilmLikeModel).where(
                    FilmLikeModel.film_id == film_id, FilmLikeModel.user_id == user_id
                )
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        removed = result.rowcount > 0
        self.feed_service.record_event(user_id, film_id, EventType.LIKE, OperationType.REMOVE)
        logger.debug("사용자 %s 영화 %s 좋아요 취소 (삭제: %s)", user_id, film_id, removed)
        return removed

    def get_likes_count(self, film_id: int) -> int:
        stmt = select(func.count(FilmLikeModel.user_id)).where(FilmLikeModel.film_id == film_id)
        return self.db.execute(stmt).scalar() or 0

    # ------------------------------------------------------------------
    # 조회 / 랭킹
    # ------------------------------------------------------------------

    def get_most_popular(
        self, count: int, genre_id: Optional[int] = None, year: Optional[int] = None
    ) -> List[Film]:
        """좋아요 수 기준 인기 영화 (장르/개봉 연도 필터 선택)"""
        if count < 1:
            raise ValidationError(f"count는 1 이상이어야 합니다: {count}")

        criteria = []
        if genre_id is not None:
            criteria.append(
                FilmModel.film_id.in_(
                    select(FilmGenreModel.film_id).where(FilmGenreModel.genre_id == genre_id)
                )
            )
        if year is not None:
            if not 1 <= year <= 9999:
                raise ValidationError(f"연도 값이 올바르지 않습니다: {year}")
            criteria.append(
                FilmModel.release_date.between(date(year, 1, 1), date(year, 12, 31))
            )

        return self._build_films(self._film_rows(*criteria, limit=count))

    def get_common_films(self, user_id: int, friend_id: int) -> List[Film]:
        """두 사용자가 모두 좋아요한 영화 (인기순)"""
        for uid in (user_id, friend_id):
            if not self.user_exists(uid):
                raise DataNotFound(f"사용자를 찾을 수 없습니다 (ID: {uid})")

        rows = self._film_rows(
            FilmModel.film_id.in_(self._liked_by(user_id)),
            FilmModel.film_id.in_(self._liked_by(friend_id)),
        )
        return self._build_films(rows)

    def get_films_by_director(
        self, director_id: int, sort_by: Union[str, DirectorSortKey]
    ) -> List[Film]:
        """감독의 영화 목록 (year: 개봉일순, likes: 좋아요순)"""
        try:
            sort_key = DirectorSortKey(sort_by)
        except ValueError:
            raise ValidationError(
                f"sort_by는 'year' 또는 'likes'여야 합니다: '{sort_by}'"
            )
        if not self.director_service.director_exists(director_id):
            raise DataNotFound(f"감독을 찾을 수 없습니다 (ID: {director_id})")

        criteria = FilmModel.film_id.in_(
            select(FilmDirectorModel.film_id).where(FilmDirectorModel.director_id == director_id)
        )
        if sort_key is DirectorSortKey.year:
            rows = self._film_rows(
                criteria, order_by=(FilmModel.release_date, FilmModel.film_id)
            )
        else:
            rows = self._film_rows(criteria)
        return self._build_films(rows)

    def search(self, query: str, by: Union[str, Iterable[str]]) -> List[Film]:
        """제목/감독 이름 부분 일치 검색 (대소문자 무시, 인기순)"""
        fields = parse_search_fields(by)
        if not query or not query.strip():
            raise ValidationError("검색어가 비어 있습니다")

        needle = query.lower()
        conditions = []
        if SearchField.title in fields:
            conditions.append(_lower(FilmModel.name).contains(needle, autoescape=True))
        if SearchField.director in fields:
            conditions.append(
                FilmModel.film_id.in_(
                    select(FilmDirectorModel.film_id)
                    .join(
                        DirectorModel,
                        DirectorModel.director_id == FilmDirectorModel.director_id,
                    )
                    .where(_lower(DirectorModel.name).contains(needle, autoescape=True))
                )
            )

        return self._build_films(self._film_rows(or_(*conditions)))

    def get_recommendations(self, user_id: int) -> List[Film]:
        """취향이 가장 비슷한 사용자가 좋아요했지만 아직 보지 않은 영화"""
        if not self.user_exists(user_id):
            raise DataNotFound(f"사용자를 찾을 수 없습니다 (ID: {user_id})")

        overlap = func.count(FilmLikeModel.film_id).label("overlap")
        similar_stmt = (
            select(FilmLikeModel.user_id, overlap)
            .where(
                FilmLikeModel.film_id.in_(self._liked_by(user_id)),
                FilmLikeModel.user_id != user_id,
            )
            .group_by(FilmLikeModel.user_id)
            .order_by(overlap.desc(), FilmLikeModel.user_id)
            .limit(1)
        )
        similar = self.db.execute(similar_stmt).first()
        if not similar:
            return []

        rows = self._film_rows(
            FilmModel.film_id.in_(self._liked_by(similar.user_id)),
            FilmModel.film_id.not_in(self._liked_by(user_id)),
        )
        return self._build_films(rows)

    # ------------------------------------------------------------------
    # 내부 헬퍼
    # ------------------------------------------------------------------

    def _liked_by(self, user_id: int):
        return select(FilmLikeModel.film_id).where(FilmLikeModel.user_id == user_id)

    def _film_rows(self, *criteria, order_by=None, limit: Optional[int] = None):
        """(film_id, likes_count) 행 목록. 기본 정렬은 좋아요 내림차순, ID 오름차순"""
        likes_count = func.count(FilmLikeModel.user_id).label("likes_count")
        stmt = (
            select(FilmModel.film_id, likes_count)
            .outerjoin(FilmLikeModel, FilmLikeModel.film_id == FilmModel.film_id)
            .where(*criteria)
            .group_by(FilmModel.film_id)
        )
        if order_by is None:
            order_by = (likes_count.desc(), FilmModel.film_id)
        stmt = stmt.order_by(*order_by)
        if limit is not None:
            stmt = stmt.limit(limit)
        return self.db.execute(stmt).all()

    def _build_films(self, rows) -> List[Film]:
        """정렬된 행 순서를 유지하면서 장르/감독/MPA 정보를 붙여 응답 생성"""
        film_ids = [row.film_id for row in rows]
        if not film_ids:
            return []

        films = {
            film.film_id: film
            for film in self.db.execute(
                select(FilmModel).where(FilmModel.film_id.in_(film_ids))
            ).scalars()
        }

        mpa_ids = {film.mpa_id for film in films.values() if film.mpa_id is not None}
        ratings = {}
        if mpa_ids:
            ratings = {
                mpa.mpa_id: mpa
                for mpa in self.db.execute(
                    select(MpaModel).where(MpaModel.mpa_id.in_(mpa_ids))
                ).scalars()
            }

        genres = defaultdict(list)
        genre_stmt = (
            select(FilmGenreModel.film_id, GenreModel)
            .join(GenreModel, GenreModel.genre_id == FilmGenreModel.genre_id)
            .where(FilmGenreModel.film_id.in_(film_ids))
            .order_by(GenreModel.genre_id)
        )
        for film_id, genre in self.db.execute(genre_stmt):
            genres[film_id].append(Genre.from_orm(genre))

        directors = defaultdict(list)
        director_stmt = (
            select(FilmDirectorModel.film_id, DirectorModel)
            .join(DirectorModel, DirectorModel.director_id == FilmDirectorModel.director_id)
            .where(FilmDirectorModel.film_id.in_(film_ids))
            .order_by(DirectorModel.director_id)
        )
        for film_id, director in self.db.execute(director_stmt):
            directors[film_id].append(Director.from_orm(director))

        result = []
        for row in rows:
            film = films[row.film_id]
            mpa = ratings.get(film.mpa_id)
            result.append(
                Film(
                    film_id=film.film_id,
                    name=film.name,
                    description=film.description,
                    release_date=film.release_date,
                    duration=film.duration,
                    mpa=Mpa.from_orm(mpa) if mpa else None,
                    genres=genres[film.film_id],
                    directors=directors[film.film_id],
                    likes_count=row.likes_count or 0,
                )
            )
        return result

    def _check_references(self, film_data: FilmCreate) -> None:
        """MPA, 장르, 감독 존재 확인 (FilmUpdate도 FilmCreate 하위 클래스라 그대로 받음)"""
        if film_data.mpa_id is not None and not self.genre_service.mpa_exists(film_data.mpa_id):
            raise DataNotFound(f"MPA 등급을 찾을 수 없습니다 (ID: {film_data.mpa_id})")
        if not self.genre_service.genres_exist(film_data.genre_ids):
            raise DataNotFound(f"장르를 찾을 수 없습니다: {film_data.genre_ids}")
        if not self.director_service.directors_exist(film_data.director_ids):
            raise DataNotFound(f"감독을 찾을 수 없습니다: {film_data.director_ids}")

    def _save_links(self, film_id: int, film_data: FilmCreate) -> None:
        """영화-장르, 영화-감독 연결을 요청 내용으로 교체 (바뀐 부분만 반영, 생성/수정 공용)"""
        for model, column, key, wanted in (
            (FilmGenreModel, FilmGenreModel.genre_id, "genre_id", set(film_data.genre_ids)),
            (
                FilmDirectorModel,
                FilmDirectorModel.director_id,
                "director_id",
                set(film_data.director_ids),
            ),
        ):
            current = set(
                self.db.execute(select(column).where(model.film_id == film_id)).scalars()
            )
            stale = current - wanted
            if stale:
                self.db.execute(
                    delete(model).where(model.film_id == film_id, column.in_(stale))
                )
            self.db.add_all(
                [model(film_id=film_id, **{key: ref_id}) for ref_id in wanted - current]
            )

    def _get_film_model(self, film_id: int) -> FilmModel:
        film_model = self.db.get(FilmModel, film_id)
        if not film_model:
            raise DataNotFound(f"영화를 찾을 수 없습니다 (ID: {film_id})")
        return film_model

    def _ensure_film_and_user(self, film_id: int, user_id: int) -> None:
        if not self.film_exists(film_id):
            raise DataNotFound(f"영화를 찾을 수 없습니다 (ID: {film_id})")
        if not self.user_exists(user_id):
            raise DataNotFound(f"사용자를 찾을 수 없습니다 (ID: {user_id})")

    def _is_liked(self, film_id: int, user_id: int) -> bool:
        stmt = select(FilmLikeModel).where(
            FilmLikeModel.film_id == film_id, FilmLikeModel.user_id == user_id
        )
        return self.db.execute(stmt).scalar_one_or_none() is not None
