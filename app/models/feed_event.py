# app/models/feed_event.py

from sqlalchemy import Column, Integer, BigInteger, Enum, ForeignKey
from app.database import Base
import enum


class EventType(enum.Enum):
    LIKE = "LIKE"
    REVIEW = "REVIEW"
    FRIEND = "FRIEND"


class OperationType(enum.Enum):
    ADD = "ADD"
    REMOVE = "REMOVE"
    UPDATE = "UPDATE"


class FeedEventModel(Base):
    __tablename__ = "feed_events"

    event_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    entity_id = Column(Integer, nullable=False)
    event_type = Column(Enum(EventType), nullable=False)
    operation = Column(Enum(OperationType), nullable=False)
    timestamp = Column(BigInteger, nullable=False)  # epoch milliseconds

    def __repr__(self):
        return (
            f"<FeedEventModel(id={self.event_id}, user_id={self.user_id}, "
            f"{self.event_type.value}/{self.operation.value})>"
        )
