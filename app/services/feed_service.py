# app/services/feed_service.py

import logging
import time
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from app.models.feed_event import FeedEventModel, EventType, OperationType
from app.schemas.feed import FeedEvent

logger = logging.getLogger(__name__)


class FeedService:

    def __init__(self, db: Session):
        self.db = db

    def record_event(
        self, user_id: int, entity_id: int, event_type: EventType, operation: OperationType
    ) -> bool:
        """사용자 행동 기록 (실패해도 호출한 작업은 되돌리지 않음)"""
        event = FeedEventModel(
            user_id=user_id,
            entity_id=entity_id,
            event_type=event_type,
            operation=operation,
            timestamp=int(time.time() * 1000),
        )
        try:
            self.db.add(event)
            self.db.commit()
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning(
                "피드 기록 실패: user=%s entity=%s %s/%s (%s)",
                user_id,
                entity_id,
                event_type.value,
                operation.value,
                e,
            )
            return False

    def get_user_feed(self, user_id: int) -> List[FeedEvent]:
        """사용자의 피드 이벤트 목록 (오래된 순)"""
        stmt = (
            select(FeedEventModel)
            .where(FeedEventModel.user_id == user_id)
            .order_by(FeedEventModel.event_id)
        )
        events = self.db.execute(stmt).scalars().all()
        return [FeedEvent.from_orm(event) for event in events]
