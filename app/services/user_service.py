# app/services/user_service.py

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, delete, or_
from sqlalchemy.exc import IntegrityError
from app.core.exceptions import DataNotFound, ValidationError
from app.models.user import UserModel
from app.models.friendship import FriendshipModel
from app.models.film_like import FilmLikeModel
from app.models.feed_event import FeedEventModel, EventType, OperationType
from app.schemas.user import User, UserCreate, UserUpdate
from app.schemas.feed import FeedEvent
from app.services.feed_service import FeedService

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, db: Session, feed_service: Optional[FeedService] = None):
        self.db = db
        self.feed_service = feed_service or FeedService(db)

    def get_all_users(self) -> List[User]:
        stmt = select(UserModel).order_by(UserModel.user_id)
        return [User.from_orm(user) for user in self.db.execute(stmt).scalars().all()]

    def get_user_by_id(self, user_id: int) -> User:
        """ID로 사용자 조회"""
        return User.from_orm(self._get_user_model(user_id))

    def create_user(self, user_data: UserCreate) -> User:
        # 이메일 중복 체크
        if self._email_taken(user_data.email):
            raise ValidationError(f"이미 등록된 이메일입니다: {user_data.email}")

        user_model = UserModel(
            email=user_data.email,
            login=user_data.login,
            name=user_data.name,
            birthday=user_data.birthday,
        )
        try:
            self.db.add(user_model)
            self.db.commit()
            self.db.refresh(user_model)
        except IntegrityError:
            self.db.rollback()
            raise ValidationError(f"이미 등록된 이메일입니다: {user_data.email}")
        except Exception:
            self.db.rollback()
            raise

        logger.info("사용자 생성: %s", user_model)
        return User.from_orm(user_model)

    def update_user(self, user_id: int, user_data: UserUpdate) -> User:
        user_model = self._get_user_model(user_id)
        if self._email_taken(user_data.email, exclude_user_id=user_id):
            raise ValidationError(f"이미 등록된 이메일입니다: {user_data.email}")

        try:
            user_model.email = user_data.email
            user_model.login = user_data.login
            user_model.name = user_data.name
            user_model.birthday = user_data.birthday
            self.db.commit()
            self.db.refresh(user_model)
        except Exception:
            self.db.rollback()
            raise

        logger.info("사용자 수정: %s", user_model)
        return User.from_orm(user_model)

    def delete_user(self, user_id: int) -> None:
        """사용자 삭제 (좋아요, 친구 관계, 피드 포함)"""
        user_model = self._get_user_model(user_id)
        try:
            self.db.execute(delete(FilmLikeModel).where(FilmLikeModel.user_id == user_id))
            self.db.execute(
                delete(FriendshipModel).where(
                    or_(FriendshipModel.user_id == user_id, FriendshipModel.friend_id == user_id)
                )
            )
            self.db.execute(delete(FeedEventModel).where(FeedEventModel.user_id == user_id))
            self.db.delete(user_model)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.info("사용자 삭제: %s", user_id)

    def user_exists(self, user_id: int) -> bool:
        return self.db.get(UserModel, user_id) is not None

    # 친구 관계 (단방향)

    def add_friend(self, user_id: int, friend_id: int) -> bool:
        """친구 추가. 이미 친구면 아무것도 바꾸지 않음"""
        if user_id == friend_id:
            raise ValidationError("자기 자신을 친구로 추가할 수 없습니다")
        self._ensure_users(user_id, friend_id)

        added = False
        if not self._is_friend(user_id, friend_id):
            try:
                self.db.add(FriendshipModel(user_id=user_id, friend_id=friend_id))
                self.db.commit()
                added = True
            except IntegrityError:
                self.db.rollback()
            except Exception:
                self.db.rollback()
                raise

        self.feed_service.record_event(user_id, friend_id, EventType.FRIEND, OperationType.ADD)
        logger.debug("사용자 %s 친구 추가 %s (신규: %s)", user_id, friend_id, added)
        return added

    def remove_friend(self, user_id: int, friend_id: int) -> bool:
        """친구 삭제. 친구 관계가 없으면 아무것도 바꾸지 않음"""
        self._ensure_users(user_id, friend_id)

        try:
            result = self.db.execute(
                delete(FriendshipModel).where(
                    FriendshipModel.user_id == user_id, FriendshipModel.friend_id == friend_id
                )
            )
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        removed = result.rowcount > 0
        self.feed_service.record_event(user_id, friend_id, EventType.FRIEND, OperationType.REMOVE)
        logger.debug("사용자 %s 친구 삭제 %s (삭제: %s)", user_id, friend_id, removed)
        return removed

    def get_friends(self, user_id: int) -> List[User]:
        self._ensure_users(user_id)
        stmt = (
            select(UserModel)
            .where(UserModel.user_id.in_(self._friend_ids(user_id)))
            .order_by(UserModel.user_id)
        )
        return [User.from_orm(user) for user in self.db.execute(stmt).scalars().all()]

    def get_common_friends(self, user_id: int, other_id: int) -> List[User]:
        """두 사용자의 공통 친구"""
        self._ensure_users(user_id, other_id)
        stmt = (
            select(UserModel)
            .where(
                UserModel.user_id.in_(self._friend_ids(user_id)),
                UserModel.user_id.in_(self._friend_ids(other_id)),
            )
            .order_by(UserModel.user_id)
        )
        return [User.from_orm(user) for user in self.db.execute(stmt).scalars().all()]

    def get_feed(self, user_id: int) -> List[FeedEvent]:
        self._ensure_users(user_id)
        return self.feed_service.get_user_feed(user_id)

    def _friend_ids(self, user_id: int):
        return select(FriendshipModel.friend_id).where(FriendshipModel.user_id == user_id)

    def _is_friend(self, user_id: int, friend_id: int) -> bool:
        stmt = select(FriendshipModel).where(
            FriendshipModel.user_id == user_id, FriendshipModel.friend_id == friend_id
        )
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def _email_taken(self, email: str, exclude_user_id: Optional[int] = None) -> bool:
        stmt = select(UserModel.user_id).where(UserModel.email == email)
        if exclude_user_id is not None:
            stmt = stmt.where(UserModel.user_id != exclude_user_id)
        return self.db.execute(stmt).first() is not None

    def _get_user_model(self, user_id: int) -> UserModel:
        user_model = self.db.get(UserModel, user_id)
        if not user_model:
            raise DataNotFound(f"사용자를 찾을 수 없습니다 (ID: {user_id})")
        return user_model

    def _ensure_users(self, *user_ids: int) -> None:
        for user_id in user_ids:
            if not self.user_exists(user_id):
                raise DataNotFound(f"사용자를 찾을 수 없습니다 (ID: {user_id})")
