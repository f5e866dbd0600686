# app/models/film_director.py

from sqlalchemy import Column, Integer, ForeignKey
from app.database import Base


class FilmDirectorModel(Base):
    __tablename__ = "film_directors"

    film_id = Column(Integer, ForeignKey("films.film_id"), primary_key=True)
    director_id = Column(Integer, ForeignKey("directors.director_id"), primary_key=True)

    def __repr__(self):
        return f"<FilmDirectorModel(film_id={self.film_id}, director_id={self.director_id})>"
