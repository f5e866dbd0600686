# app/models/friendship.py

from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func
from app.database import Base


class FriendshipModel(Base):
    __tablename__ = "friendships"

    user_id = Column(
        Integer, ForeignKey("users.user_id"), primary_key=True
    )  # 친구를 추가한 사람
    friend_id = Column(
        Integer, ForeignKey("users.user_id"), primary_key=True
    )  # 추가된 친구 (단방향)
    created_at = Column(DateTime, default=func.current_timestamp())

    def __repr__(self):
        return f"<FriendshipModel(user_id={self.user_id}, friend_id={self.friend_id})>"
