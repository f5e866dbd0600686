# app/schemas/feed.py

from pydantic import BaseModel, Field
from app.models.feed_event import EventType, OperationType


class FeedEvent(BaseModel):
    event_id: int = Field(description="이벤트 ID")
    user_id: int = Field(description="행동한 사용자 ID")
    entity_id: int = Field(description="대상 엔티티 ID (영화/친구)")
    event_type: EventType = Field(description="이벤트 종류")
    operation: OperationType = Field(description="작업 종류")
    timestamp: int = Field(description="발생 시각 (epoch ms)")

    class Config:
        from_attributes = True
