# app/models/film_genre.py

from sqlalchemy import Column, Integer, ForeignKey
from app.database import Base

class FilmGenreModel(Base):
    __tablename__ = "film_genres"
    
    film_id = Column(Integer, ForeignKey('films.film_id'), primary_key=True)
    genre_id = Column(Integer, ForeignKey('genres.genre_id'), primary_key=True)
    
    def __repr__(self):
        return f"<FilmGenreModel(film_id={self.film_id}, genre_id={self.genre_id})>"
