# app/core/dependencies.py

from fastapi import Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.services.feed_service import FeedService
from app.services.film_service import FilmService
from app.services.user_service import UserService
from app.services.genre_service import GenreService
from app.services.director_service import DirectorService


def get_feed_service(db: Session = Depends(get_db)) -> FeedService:
    return FeedService(db)


def get_film_service(
    db: Session = Depends(get_db), feed_service: FeedService = Depends(get_feed_service)
) -> FilmService:
    return FilmService(db, feed_service)


def get_user_service(
    db: Session = Depends(get_db), feed_service: FeedService = Depends(get_feed_service)
) -> UserService:
    return UserService(db, feed_service)


def get_genre_service(db: Session = Depends(get_db)) -> GenreService:
    return GenreService(db)


def get_director_service(db: Session = Depends(get_db)) -> DirectorService:
    return DirectorService(db)
