# app/models/mpa.py

from sqlalchemy import Column, Integer, String
from app.database import Base


class MpaModel(Base):
    __tablename__ = "mpa_ratings"

    mpa_id = Column(Integer, primary_key=True)
    name = Column(String(20), nullable=False)

    def __repr__(self):
        return f"<MpaModel(id={self.mpa_id}, name='{self.name}')>"
